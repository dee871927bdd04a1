import unittest

from nontransitive_dice.agents import AGENT_MAP, create_agent
from nontransitive_dice.agents.counter_agent import CounterAgent
from nontransitive_dice.agents.random_agent import OtherRandomAgent, RandomAgent
from nontransitive_dice.core.dice import parse_dice


class TestAgents(unittest.TestCase):
    """
    Tests for the die-selection agents:
      - all agents are registered by name.
      - the counter agent answers each Efron die with the die that beats it.
      - random agents only return dice from the game.
    """

    def setUp(self):
        self.dice = parse_dice(["2,2,4,4,9,9", "1,1,6,6,8,8", "3,3,5,5,7,7"])

    def test_registry(self):
        for name in ("random", "random_other", "counter"):
            self.assertIn(name, AGENT_MAP)
        self.assertIs(AGENT_MAP["counter"], CounterAgent)

    def test_create_agent_by_name(self):
        self.assertIsInstance(create_agent(" Counter "), CounterAgent)
        with self.assertRaises(ValueError):
            create_agent("nope")

    def test_counter_beats_each_die(self):
        a, b, c = self.dice
        agent = CounterAgent()
        # C beats A, A beats B, B beats C
        self.assertEqual(agent.choose_die(self.dice, opponent_die=a).id, c.id)
        self.assertEqual(agent.choose_die(self.dice, opponent_die=b).id, a.id)
        self.assertEqual(agent.choose_die(self.dice, opponent_die=c).id, b.id)

    def test_counter_uses_supplied_matrix(self):
        # a matrix claiming die 2 beats everything
        matrix = [[0.5, 0.0, 0.0], [1.0, 0.5, 1.0], [0.0, 0.0, 0.5]]
        agent = CounterAgent()
        self.assertEqual(agent.choose_die(self.dice, opponent_die=self.dice[0], matrix=matrix).id, 2)

    def test_counter_without_opponent_is_random(self):
        ids = {CounterAgent().choose_die(self.dice).id for _ in range(200)}
        self.assertEqual(ids, {1, 2, 3})

    def test_random_agents(self):
        ids = {RandomAgent().choose_die(self.dice).id for _ in range(200)}
        self.assertEqual(ids, {1, 2, 3})
        other = OtherRandomAgent()
        for _ in range(100):
            self.assertNotEqual(other.choose_die(self.dice, opponent_die=self.dice[1]).id, 2)


if __name__ == '__main__':
    unittest.main()
