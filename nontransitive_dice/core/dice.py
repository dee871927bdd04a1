"""
dice.py
Defines the Die model and the parser that turns configuration strings into dice.
Related modules:
- randomness.py: Die.roll draws face indices through uniform_below.
- estimator.py: Rolls dice repeatedly to estimate win probabilities.
- engine.py: Rolls the user's and the computer's dice for a throw.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .errors import InputError
from .randomness import uniform_below

USAGE_EXAMPLE = "2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7"


@dataclass(frozen=True)
class Die:
    """
    A die with arbitrary integer faces. Duplicates are allowed; each face position is equally likely.
    Args:
        id (int): 1-based identifier, assigned in parse order.
        faces (tuple[int, ...]): Face values, at least one.
    """
    id: int
    faces: Tuple[int, ...]

    def __post_init__(self):
        faces = tuple(self.faces)
        if not faces:
            raise InputError(f"Die {self.id} must have at least one face")
        if any(isinstance(f, bool) or not isinstance(f, int) for f in faces):
            raise InputError(f"Die {self.id} faces must be integers, got {faces!r}")
        # frozen dataclass: normalize lists to tuples
        object.__setattr__(self, "faces", faces)

    def roll(self) -> int:
        """
        Roll the die once.
        Returns:
            int: One of the faces, chosen uniformly by position.
        """
        return self.faces[uniform_below(len(self.faces))]

    def __str__(self):
        return ",".join(str(f) for f in self.faces)


def parse_die(config: str, die_id: int) -> Die:
    """
    Parse a single comma-separated configuration such as "2,2,4,4,9,9".
    Args:
        config (str): Comma-separated integers.
        die_id (int): Identifier to assign.
    Returns:
        Die: The parsed die.
    Raises:
        InputError: If any token is not an integer.
    """
    faces = []
    for token in config.split(","):
        token = token.strip()
        try:
            faces.append(int(token))
        except ValueError:
            raise InputError(
                f"Invalid input: {config}. All dice must contain integers only. Example: 2,2,4,4,9,9"
            ) from None
    return Die(die_id, tuple(faces))


def parse_dice(configurations: Sequence[str], min_dice: int = 3) -> List[Die]:
    """
    Parse all dice configurations. Either every configuration parses or none is returned.
    Args:
        configurations (sequence[str]): One comma-separated configuration per die, in order.
        min_dice (int): Minimum number of configurations required.
    Returns:
        list[Die]: Dice with ids 1..n in input order.
    Raises:
        InputError: If fewer than min_dice configurations are given or a configuration is malformed.
    """
    configurations = list(configurations)
    if len(configurations) < min_dice:
        raise InputError(
            f"You must provide at least {min_dice} dice configurations, got {len(configurations)}. "
            f"Each die must contain comma-separated integers. Example: {USAGE_EXAMPLE}"
        )
    return [parse_die(config, index + 1) for index, config in enumerate(configurations)]
