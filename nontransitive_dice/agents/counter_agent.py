from ..core.estimator import exact_win_probability
from .random_agent import RandomAgent
from . import register_agent


@register_agent("counter")
class CounterAgent(RandomAgent):
    """
    Picks the die most likely to beat the opponent's die, excluding the opponent's own die.
    Uses the estimated matrix when one is supplied, otherwise exact face enumeration.
    Without an opponent die it falls back to a random pick.
    """
    def choose_die(self, dice, opponent_die=None, matrix=None):
        if opponent_die is None:
            return super().choose_die(dice)
        j = self.index_of(dice, opponent_die)
        best = None
        best_p = -1.0
        for i, die in enumerate(dice):
            if i == j:
                continue
            p = matrix[i][j] if matrix is not None else exact_win_probability(die, opponent_die)
            if p > best_p:
                best, best_p = die, p
        # single-die games leave nothing else to pick
        return best if best is not None else opponent_die
