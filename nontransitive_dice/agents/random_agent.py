from ..core.randomness import uniform_below
from .base import Agent
from . import register_agent


@register_agent("random")
class RandomAgent(Agent):
    """
    Picks any die uniformly at random, the opponent's die included.
    """
    def choose_die(self, dice, opponent_die=None, matrix=None):
        return dice[uniform_below(len(dice))]


@register_agent("random_other")
class OtherRandomAgent(RandomAgent):
    """Picks uniformly among the dice the opponent did not take."""
    def choose_die(self, dice, opponent_die=None, matrix=None):
        if opponent_die is None:
            return super().choose_die(dice)
        others = [d for d in dice if d.id != opponent_die.id]
        return super().choose_die(others or dice)
