"""
randomness.py
The single source of randomness for dice rolls and commitments.
Related modules:
- dice.py: Die.roll draws a face index with uniform_below.
- protocol.py: commit draws the committed value with uniform_below and the key with secure_key.
- agents: the random agent picks dice with uniform_below.
"""

import secrets

from .errors import InputError, InternalRandomnessFailure


def uniform_below(n: int) -> int:
    """
    Draw an integer uniformly from [0, n) using the OS CSPRNG.
    Draws ceil(log2(n)) random bits and retries while the draw is >= n, so every value has
    exactly the same probability (no modulo bias).
    Args:
        n (int): Exclusive upper bound, must be >= 1.
    Returns:
        int: Value in [0, n).
    Raises:
        InputError: If n is not a positive integer.
        InternalRandomnessFailure: If the secure randomness source is unavailable.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InputError(f"range must be a positive integer, got {n!r}")
    if n == 1:
        return 0
    k = (n - 1).bit_length()
    try:
        r = secrets.randbits(k)
        while r >= n:
            r = secrets.randbits(k)
    except (OSError, NotImplementedError) as e:
        raise InternalRandomnessFailure(f"secure randomness source unavailable: {e}") from e
    return r


def secure_key(nbytes: int = 32) -> bytes:
    """
    Generate a fresh secret key.
    Args:
        nbytes (int): Key width in bytes.
    Returns:
        bytes: Random key.
    Raises:
        InternalRandomnessFailure: If the secure randomness source is unavailable.
    """
    try:
        return secrets.token_bytes(nbytes)
    except (OSError, NotImplementedError) as e:
        raise InternalRandomnessFailure(f"secure randomness source unavailable: {e}") from e
