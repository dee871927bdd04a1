import unittest
from dataclasses import FrozenInstanceError

from nontransitive_dice.core.config import GameConfig
from nontransitive_dice.core.dice import parse_dice
from nontransitive_dice.core.engine import GameEngine
from nontransitive_dice.core.errors import InputError


class TestConfigAndEngine(unittest.TestCase):
    """
    Tests around how `GameConfig` is interpreted by the engine and its collaborators:
      - defaults match the published conventions (3 dice, 10000 trials, 256-bit keys, diagonal 0.5).
      - the engine hands its config to the protocol and the estimator.
      - min_dice is enforced by the parser.
    """

    def test_defaults(self):
        cfg = GameConfig()
        self.assertEqual(cfg.min_dice, 3)
        self.assertEqual(cfg.trials, 10000)
        self.assertEqual(cfg.key_bytes, 32)
        self.assertEqual(cfg.hash_name, "sha3_256")
        self.assertEqual(cfg.self_matchup, 0.5)
        with self.assertRaises(FrozenInstanceError):
            cfg.trials = 5

    def test_engine_shares_config(self):
        cfg = GameConfig(trials=50, key_bytes=16)
        engine = GameEngine(parse_dice(["1", "2", "3"]), config=cfg)
        self.assertIs(engine.protocol.config, cfg)
        self.assertEqual(engine.estimator.trials, 50)
        engine.begin_fair_round()
        reveal = engine.finish_fair_round(0)
        self.assertEqual(len(reveal.key), 16)

    def test_min_dice_from_config(self):
        cfg = GameConfig(min_dice=4)
        with self.assertRaises(InputError):
            parse_dice(["1", "2", "3"], min_dice=cfg.min_dice)
        self.assertEqual(len(parse_dice(["1", "2", "3", "4"], min_dice=cfg.min_dice)), 4)


if __name__ == '__main__':
    unittest.main()
