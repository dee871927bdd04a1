"""
engine.py
Implements the GameEngine class, which runs the turn flow of a non-transitive dice game without any I/O:
user-vs-computer throws and commit/reveal fair random rounds. It records events for the caller to display.
Related modules:
- config.py: GameConfig is used to configure the engine.
- dice.py: Dice rolled during a throw.
- protocol.py: FairRandomProtocol drives the fair random rounds.
- estimator.py, table.py: Build the help table.
- agents: Choose the computer's die.
"""

from typing import Dict, List, Optional, Sequence

from ..agents import AGENT_MAP
from .config import GameConfig
from .dice import Die
from .errors import IllegalMoveError, InputError
from .estimator import ProbabilityEstimator
from .protocol import Commitment, FairRandomProtocol, Reveal
from .table import render_probability_table


class GameEngine:
    """
    State machine for one game session. The only mutable state is the open fair round (if any),
    the cached probability matrix and the event buffer.
    """
    def __init__(self, dice: Sequence[Die], config: Optional[GameConfig] = None, agent=None,
                 protocol: Optional[FairRandomProtocol] = None,
                 estimator: Optional[ProbabilityEstimator] = None):
        """
        Args:
            dice (sequence[Die]): Parsed dice, ids 1..n.
            config (GameConfig|None): Game configuration.
            agent (Agent|None): Computer die-selection strategy; defaults to the random agent.
            protocol (FairRandomProtocol|None): Protocol implementation.
            estimator (ProbabilityEstimator|None): Estimator used for the help table.
        """
        self.config = config or GameConfig()
        self.dice = tuple(dice)
        if len(self.dice) < self.config.min_dice:
            raise InputError(f"At least {self.config.min_dice} dice are required, got {len(self.dice)}")
        if agent is None:
            agent = AGENT_MAP["random"]()
        self.agent = agent
        self.protocol = protocol or FairRandomProtocol(self.config)
        self.estimator = estimator or ProbabilityEstimator(config=self.config)
        self._commitment: Optional[Commitment] = None
        self._matrix: Optional[List[List[float]]] = None
        self._events = []

    # Events are simple dicts, as in the round log
    def _emit(self, event: Dict):
        self._events.append(event)

    def pop_events(self):
        """
        Return and clear all emitted events since last call.
        Returns:
            list[dict]: List of event dicts.
        """
        ev = list(self._events)
        self._events.clear()
        return ev

    def get_events(self):
        """
        Return all events emitted so far (does not clear).
        """
        return list(self._events)

    def get_die(self, die_id: int) -> Die:
        """
        Look up a die by its 1-based id.
        Raises:
            InputError: If no die has this id.
        """
        for die in self.dice:
            if die.id == die_id:
                return die
        raise InputError(f"Invalid die selection: {die_id}. Choose one of {[d.id for d in self.dice]}")

    def probabilities(self) -> List[List[float]]:
        """
        Estimated win probability matrix; computed once per engine since dice never change.
        """
        if self._matrix is None:
            self._matrix = self.estimator.estimate_matrix(self.dice)
        return self._matrix

    def probability_table(self) -> str:
        return render_probability_table(self.dice, self.probabilities())

    def user_throw(self, die_id: int) -> Dict:
        """
        The user throws the chosen die against a die picked by the computer agent.
        Args:
            die_id (int): Id of the user's die.
        Returns:
            dict: ThrowResolved event with both dice, both rolls and the winner ("user", "computer" or "tie").
        Raises:
            InputError: If die_id is unknown.
        """
        user_die = self.get_die(die_id)
        computer_die = self.agent.choose_die(self.dice, opponent_die=user_die, matrix=self._matrix)
        user_roll = user_die.roll()
        computer_roll = computer_die.roll()
        if user_roll > computer_roll:
            winner = "user"
        elif computer_roll > user_roll:
            winner = "computer"
        else:
            winner = "tie"
        event = {
            "type": "ThrowResolved",
            "user_die": user_die.id,
            "computer_die": computer_die.id,
            "user_roll": user_roll,
            "computer_roll": computer_roll,
            "winner": winner,
        }
        self._emit(event)
        return event

    @property
    def fair_round_open(self) -> bool:
        return self._commitment is not None

    def begin_fair_round(self, range_: Optional[int] = None) -> str:
        """
        Commit to a secret value and publish its digest.
        Args:
            range_ (int|None): Size of the value space; defaults to the number of dice.
        Returns:
            str: The digest, to be shown before asking for the user's number.
        Raises:
            IllegalMoveError: If a fair round is already open.
        """
        if self._commitment is not None:
            raise IllegalMoveError("A fair round is already open; finish it first")
        if range_ is None:
            range_ = len(self.dice)
        self._commitment = self.protocol.commit(range_)
        self._emit({"type": "CommitmentPublished", "digest": self._commitment.digest, "range": range_})
        return self._commitment.digest

    def finish_fair_round(self, chosen_value: int) -> Reveal:
        """
        Take the user's number, reveal the key and committed value, verify them against the published
        digest and combine. An invalid number leaves the round open so the user can retry.
        Returns:
            Reveal: Key, both values and the result.
        Raises:
            IllegalMoveError: If no fair round is open.
            InputError: If chosen_value is outside [0, range).
            VerificationFailure: If the reveal does not match the published digest.
        """
        if self._commitment is None:
            raise IllegalMoveError("No fair round is open")
        commitment = self._commitment
        reveal = self.protocol.reveal(commitment, chosen_value)
        self._commitment = None
        result = self.protocol.settle(commitment.digest, reveal)
        self._emit({
            "type": "FairResult",
            "digest": commitment.digest,
            "key": reveal.key_hex,
            "computer_value": reveal.committed_value,
            "user_value": reveal.chosen_value,
            "range": reveal.range,
            "result": result,
        })
        return reveal
