"""
protocol.py
Implements the two-party fair random generation protocol: the committer publishes a keyed hash
of a secret value, the chooser picks their own value, then the committer reveals and both sides
combine the two values into one result neither could steer.
Related modules:
- randomness.py: Supplies the secret key and the committed value.
- engine.py: Drives a commit/reveal round and records the published digest.
"""

import hashlib
import hmac
from dataclasses import dataclass, field
from typing import Optional

from .config import GameConfig
from .errors import InputError, VerificationFailure
from .randomness import secure_key, uniform_below


def _check_range(range_: int) -> None:
    if isinstance(range_, bool) or not isinstance(range_, int) or range_ < 1:
        raise InputError(f"range must be a positive integer, got {range_!r}")


def _check_value(value: int, range_: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InputError(f"{name} must be an integer, got {value!r}")
    if not (0 <= value < range_):
        raise InputError(f"{name} must be between 0 and {range_ - 1}, got {value}")


def encode_value(value: int) -> bytes:
    """Message bytes hashed for a committed value: its decimal representation."""
    return str(value).encode("utf-8")


@dataclass(frozen=True)
class Commitment:
    """
    The committer's side of a round. Only `digest` may be shown before the chooser picks a value;
    the key and the committed value are kept out of repr for that reason.
    Fields:
        key (bytes): Secret HMAC key, fresh for every commitment.
        committed_value (int): Value in [0, range).
        digest (str): Hex HMAC of committed_value under key.
        range (int): Size of the value space.
    """
    key: bytes = field(repr=False)
    committed_value: int = field(repr=False)
    digest: str
    range: int


@dataclass(frozen=True)
class Reveal:
    """
    Everything the chooser needs after picking their value: the key, both values and the combined result.
    """
    key: bytes
    committed_value: int
    chosen_value: int
    range: int
    result: int

    @property
    def key_hex(self) -> str:
        return self.key.hex()


class FairRandomProtocol:
    """
    Stateless commit / verify / combine operations. Each call to commit uses a new key.
    """
    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        # fail early on an unknown hash name instead of at the first commit
        hashlib.new(self.config.hash_name)

    def keyed_hash(self, key: bytes, value: int) -> str:
        """
        Compute the hex HMAC of a value under a key.
        Args:
            key (bytes): Secret key.
            value (int): Value to hash.
        Returns:
            str: Hex digest.
        """
        return hmac.new(key, encode_value(value), self.config.hash_name).hexdigest()

    def commit(self, range_: int) -> Commitment:
        """
        Pick a secret value in [0, range_) and bind to it with a keyed hash.
        Args:
            range_ (int): Size of the value space (>= 1).
        Returns:
            Commitment: Key, value and digest. Publish only the digest.
        Raises:
            InputError: If range_ is not a positive integer.
            InternalRandomnessFailure: If secure randomness is unavailable.
        """
        _check_range(range_)
        key = secure_key(self.config.key_bytes)
        value = uniform_below(range_)
        return Commitment(key=key, committed_value=value, digest=self.keyed_hash(key, value), range=range_)

    def verify(self, digest: str, key: bytes, committed_value: int) -> bool:
        """
        Check that a revealed key and value reproduce a previously published digest.
        Uses a constant-time comparison.
        Returns:
            bool: True only if the digest matches.
        """
        if isinstance(committed_value, bool) or not isinstance(committed_value, int):
            return False
        expected = self.keyed_hash(key, committed_value)
        return hmac.compare_digest(expected.encode("ascii"), str(digest).lower().encode("utf-8"))

    def combine(self, committed_value: int, chosen_value: int, range_: int) -> int:
        """
        Combine both parties' values into the fair result.
        Args:
            committed_value (int): Committer's value in [0, range_).
            chosen_value (int): Chooser's value in [0, range_).
            range_ (int): Size of the value space.
        Returns:
            int: (committed_value + chosen_value) mod range_.
        Raises:
            InputError: If the range or either value is out of bounds.
        """
        _check_range(range_)
        _check_value(committed_value, range_, "committed value")
        _check_value(chosen_value, range_, "chosen value")
        return (committed_value + chosen_value) % range_

    def reveal(self, commitment: Commitment, chosen_value: int) -> Reveal:
        """
        Open a commitment. The chooser's value is a required argument so the key and the committed
        value can never be handed out before the chooser has picked.
        Raises:
            InputError: If chosen_value is outside [0, commitment.range).
        """
        result = self.combine(commitment.committed_value, chosen_value, commitment.range)
        return Reveal(
            key=commitment.key,
            committed_value=commitment.committed_value,
            chosen_value=chosen_value,
            range=commitment.range,
            result=result,
        )

    def settle(self, published_digest: str, reveal: Reveal) -> int:
        """
        Verify a reveal against the digest that was published before the chooser picked, then
        return the combined result.
        Raises:
            VerificationFailure: If the reveal does not match the published digest.
        """
        if not self.verify(published_digest, reveal.key, reveal.committed_value):
            raise VerificationFailure(published_digest)
        return self.combine(reveal.committed_value, reveal.chosen_value, reveal.range)
