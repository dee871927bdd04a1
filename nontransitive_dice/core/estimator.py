"""
estimator.py
Estimates how often one die beats another by repeated independent rolls, and builds the full
pairwise probability matrix for a set of dice.
Related modules:
- dice.py: Die.roll supplies the trials.
- table.py: Renders the matrix produced here.
- agents/counter_agent.py: Picks dice using the matrix.
"""

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from fractions import Fraction
from typing import List, Optional, Sequence

from .config import GameConfig
from .dice import Die
from .errors import InputError


@dataclass(frozen=True)
class MatchupResult:
    """
    Full accounting of a simulated matchup from die A's point of view.
    Fields:
        wins (int): Trials where A rolled strictly higher.
        ties (int): Trials with equal rolls.
        losses (int): Trials where B rolled strictly higher.
    """
    wins: int
    ties: int
    losses: int

    @property
    def trials(self) -> int:
        return self.wins + self.ties + self.losses

    @property
    def win_rate(self) -> float:
        return self.wins / self.trials if self.trials else 0.0

    @property
    def tie_rate(self) -> float:
        return self.ties / self.trials if self.trials else 0.0

    @property
    def loss_rate(self) -> float:
        return self.losses / self.trials if self.trials else 0.0


def _count_wins(die_a: Die, die_b: Die, trials: int) -> int:
    wins = 0
    for _ in range(trials):
        if die_a.roll() > die_b.roll():
            wins += 1
    return wins


def exact_win_probability(die_a: Die, die_b: Die) -> float:
    """
    Exact P(A > B) by enumerating every pair of face positions.
    """
    wins = sum(1 for fa in die_a.faces for fb in die_b.faces if fa > fb)
    return float(Fraction(wins, len(die_a.faces) * len(die_b.faces)))


class ProbabilityEstimator:
    """
    Monte-Carlo estimator of pairwise win probabilities.
    Args:
        trials (int|None): Trials per ordered pair; defaults to config.trials.
        workers (int|None): Processes used by estimate_matrix; defaults to config.workers.
        config (GameConfig|None): Source of defaults.
    """
    def __init__(self, trials: Optional[int] = None, workers: Optional[int] = None,
                 config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.trials = self._check_trials(trials if trials is not None else self.config.trials)
        self.workers = workers if workers is not None else self.config.workers

    @staticmethod
    def _check_trials(trials: int) -> int:
        if isinstance(trials, bool) or not isinstance(trials, int) or trials < 1:
            raise InputError(f"trials must be a positive integer, got {trials!r}")
        return trials

    def simulate(self, die_a: Die, die_b: Die, trials: Optional[int] = None) -> int:
        """
        Roll both dice `trials` times and count strict wins for die_a.
        Returns:
            int: Number of trials die_a won.
        """
        trials = self._check_trials(trials if trials is not None else self.trials)
        return _count_wins(die_a, die_b, trials)

    def simulate_outcomes(self, die_a: Die, die_b: Die, trials: Optional[int] = None) -> MatchupResult:
        """
        Like simulate, but also counts ties and losses.
        """
        trials = self._check_trials(trials if trials is not None else self.trials)
        wins = ties = 0
        for _ in range(trials):
            a, b = die_a.roll(), die_b.roll()
            if a > b:
                wins += 1
            elif a == b:
                ties += 1
        return MatchupResult(wins=wins, ties=ties, losses=trials - wins - ties)

    def estimate_matrix(self, dice: Sequence[Die]) -> List[List[float]]:
        """
        Build matrix[i][j] = estimated P(dice[i] beats dice[j]). The diagonal is fixed at
        config.self_matchup (0.5) and never simulated.
        Args:
            dice (sequence[Die]): Dice in display order.
        Returns:
            list[list[float]]: Square matrix of probabilities in [0, 1].
        """
        dice = list(dice)
        n = len(dice)
        pairs = [(i, j) for i in range(n) for j in range(n) if i != j]
        if self.workers and self.workers > 1 and pairs:
            with ProcessPoolExecutor(max_workers=self.workers) as pool:
                wins = list(pool.map(_count_wins,
                                     [dice[i] for i, _ in pairs],
                                     [dice[j] for _, j in pairs],
                                     [self.trials] * len(pairs)))
        else:
            wins = [_count_wins(dice[i], dice[j], self.trials) for i, j in pairs]

        matrix = [[self.config.self_matchup] * n for _ in range(n)]
        for (i, j), w in zip(pairs, wins):
            matrix[i][j] = w / self.trials
        return matrix

    def exact_matrix(self, dice: Sequence[Die]) -> List[List[float]]:
        """
        Exact counterpart of estimate_matrix, with the same fixed diagonal.
        """
        dice = list(dice)
        return [
            [self.config.self_matchup if i == j else exact_win_probability(a, b) for j, b in enumerate(dice)]
            for i, a in enumerate(dice)
        ]
