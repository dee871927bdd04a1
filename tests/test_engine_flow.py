import unittest

from nontransitive_dice.agents.counter_agent import CounterAgent
from nontransitive_dice.core.config import GameConfig
from nontransitive_dice.core.dice import Die, parse_dice
from nontransitive_dice.core.engine import GameEngine
from nontransitive_dice.core.errors import IllegalMoveError, InputError, VerificationFailure
from nontransitive_dice.core.estimator import ProbabilityEstimator
from nontransitive_dice.core.protocol import FairRandomProtocol, Reveal


class LyingProtocol(FairRandomProtocol):
    """Reveals a different value from the one it committed to."""
    def reveal(self, commitment, chosen_value):
        honest = super().reveal(commitment, chosen_value)
        lie = (honest.committed_value + 1) % honest.range
        return Reveal(key=honest.key, committed_value=lie, chosen_value=chosen_value,
                      range=honest.range, result=(lie + chosen_value) % honest.range)


class TestEngineFlow(unittest.TestCase):
    """
    Tests for the `GameEngine` turn flow:
      - a throw resolves both rolls and a winner and emits ThrowResolved.
      - fair rounds must be committed before they are finished; the digest is published first.
      - an invalid user number keeps the round open; a lying committer raises VerificationFailure.
    """

    def setUp(self):
        self.dice = parse_dice(["2,2,4,4,9,9", "1,1,6,6,8,8", "3,3,5,5,7,7"])
        self.engine = GameEngine(self.dice, estimator=ProbabilityEstimator(trials=500))

    def test_user_throw(self):
        ev = self.engine.user_throw(1)
        self.assertEqual(ev['type'], 'ThrowResolved')
        self.assertEqual(ev['user_die'], 1)
        self.assertIn(ev['computer_die'], (1, 2, 3))
        self.assertIn(ev['user_roll'], self.dice[0].faces)
        if ev['user_roll'] > ev['computer_roll']:
            self.assertEqual(ev['winner'], 'user')
        elif ev['user_roll'] < ev['computer_roll']:
            self.assertEqual(ev['winner'], 'computer')
        else:
            self.assertEqual(ev['winner'], 'tie')
        self.assertEqual(self.engine.pop_events(), [ev])
        self.assertEqual(self.engine.get_events(), [])

    def test_user_throw_unknown_die(self):
        with self.assertRaises(InputError):
            self.engine.user_throw(4)

    def test_fixed_dice_winner(self):
        dice = [Die(1, (9,)), Die(2, (1,)), Die(3, (1,))]
        engine = GameEngine(dice, agent=CounterAgent())
        ev = engine.user_throw(1)
        self.assertEqual(ev['winner'], 'user')
        ev = engine.user_throw(2)
        self.assertEqual(ev['computer_die'], 1)
        self.assertEqual(ev['winner'], 'computer')

    def test_fair_round(self):
        digest = self.engine.begin_fair_round()
        self.assertTrue(self.engine.fair_round_open)
        published = self.engine.pop_events()
        self.assertEqual(published, [{'type': 'CommitmentPublished', 'digest': digest, 'range': 3}])
        reveal = self.engine.finish_fair_round(2)
        self.assertFalse(self.engine.fair_round_open)
        self.assertEqual(reveal.result, (reveal.committed_value + 2) % 3)
        self.assertTrue(self.engine.protocol.verify(digest, reveal.key, reveal.committed_value))
        ev = self.engine.pop_events()[-1]
        self.assertEqual(ev['type'], 'FairResult')
        self.assertEqual(ev['digest'], digest)
        self.assertEqual(ev['key'], reveal.key.hex())
        self.assertEqual(ev['result'], reveal.result)

    def test_fair_round_custom_range(self):
        self.engine.begin_fair_round(10)
        reveal = self.engine.finish_fair_round(9)
        self.assertEqual(reveal.range, 10)

    def test_finish_before_begin_is_illegal(self):
        with self.assertRaises(IllegalMoveError):
            self.engine.finish_fair_round(0)

    def test_double_begin_is_illegal(self):
        self.engine.begin_fair_round()
        with self.assertRaises(IllegalMoveError):
            self.engine.begin_fair_round()

    def test_invalid_choice_keeps_round_open(self):
        digest = self.engine.begin_fair_round()
        with self.assertRaises(InputError):
            self.engine.finish_fair_round(3)
        self.assertTrue(self.engine.fair_round_open)
        reveal = self.engine.finish_fair_round(0)
        self.assertTrue(self.engine.protocol.verify(digest, reveal.key, reveal.committed_value))

    def test_lying_committer_is_detected(self):
        engine = GameEngine(self.dice, protocol=LyingProtocol())
        engine.begin_fair_round()
        with self.assertRaises(VerificationFailure):
            engine.finish_fair_round(1)
        self.assertFalse(engine.fair_round_open)

    def test_probability_table_is_cached(self):
        m1 = self.engine.probabilities()
        m2 = self.engine.probabilities()
        self.assertIs(m1, m2)
        table = self.engine.probability_table()
        self.assertIn("Die 3", table)

    def test_requires_min_dice(self):
        with self.assertRaises(InputError):
            GameEngine(self.dice[:2])
        engine = GameEngine(self.dice[:2], config=GameConfig(min_dice=2))
        self.assertEqual(len(engine.dice), 2)


if __name__ == '__main__':
    unittest.main()
