from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..core.dice import Die


class Agent(ABC):
    """
    Abstract base class for computer die-selection strategies.
    Agents must implement choose_die, which receives all dice, the opponent's die (if already chosen)
    and optionally the estimated probability matrix, and returns the computer's die.
    """

    @abstractmethod
    def choose_die(self, dice: Sequence[Die], opponent_die: Optional[Die] = None,
                   matrix: Optional[List[List[float]]] = None) -> Die:
        """
        Pick the computer's die.
        Args:
            dice (sequence[Die]): All dice in the game.
            opponent_die (Die|None): The user's die, if already chosen.
            matrix (list[list[float]]|None): matrix[i][j] = P(dice[i] beats dice[j]), if already computed.
        Returns:
            Die: The chosen die.
        """
        raise NotImplementedError

    def index_of(self, dice: Sequence[Die], die: Die) -> int:
        """
        Position of a die in the dice sequence, matched by id.
        """
        for i, d in enumerate(dice):
            if d.id == die.id:
                return i
        raise ValueError(f"Die {die.id} is not part of this game")
