"""
config.py
Defines the GameConfig dataclass, which centralizes the numeric constants used by the dice parser,
the fair random protocol and the probability estimator.
Related modules:
- dice.py: Uses min_dice when parsing configurations.
- protocol.py: Uses key_bytes and hash_name for commitments.
- estimator.py: Uses trials, self_matchup and workers.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GameConfig:
    """
    Centralizes all tunable constants for a non-transitive dice game.
    Fields:
        min_dice (int): Minimum number of dice configurations accepted (default 3).
        trials (int): Monte-Carlo trials per ordered pair of dice.
        key_bytes (int): Width of the commitment secret key in bytes (32 = 256 bits).
        hash_name (str): hashlib name of the hash used inside the HMAC.
        self_matchup (float): Value placed on the matrix diagonal; a die never plays itself.
        workers (int|None): Process count for the pairwise simulations (None or 1 = sequential).
    """
    min_dice: int = 3
    trials: int = 10000
    key_bytes: int = 32
    hash_name: str = "sha3_256"
    self_matchup: float = 0.5
    workers: Optional[int] = None
