"""
errors.py
Exception types shared by the core modules.
Related modules:
- dice.py, protocol.py, estimator.py: Raise InputError on malformed requests.
- protocol.py: Raises VerificationFailure when a revealed commitment does not match its digest.
- randomness.py: Raises InternalRandomnessFailure when the OS randomness source is unavailable.
- engine.py: Raises IllegalMoveError when the turn flow is used out of order.
"""


class InputError(ValueError):
    """
    Raised for malformed caller input: too few dice, bad face values, bad ranges, out-of-range choices.
    """
    pass


class VerificationFailure(Exception):
    """
    Raised when a revealed key/value pair does not reproduce the digest published before the reveal.
    This is a trust violation (a dishonest or broken committer), not a malformed request.
    """
    def __init__(self, digest: str, message: str = None):
        self.digest = digest
        super().__init__(message or f"Commitment {digest} does not match the revealed key and value")


class InternalRandomnessFailure(RuntimeError):
    """
    Raised when the cryptographically secure randomness source cannot be used.
    """
    pass


class IllegalMoveError(Exception):
    """
    Raised when an engine operation is attempted in the wrong phase (e.g. revealing before committing).
    """
    pass
