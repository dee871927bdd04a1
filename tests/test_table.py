import unittest

from nontransitive_dice.core.dice import parse_dice
from nontransitive_dice.core.table import format_percent, render_probability_table


class TestTable(unittest.TestCase):
    def test_rows_and_columns_keyed_by_die_id(self):
        dice = parse_dice(["1,2", "3,4", "5,6"])
        matrix = [[0.5, 0.0, 0.0], [1.0, 0.5, 0.0], [1.0, 1.0, 0.5]]
        text = render_probability_table(dice, matrix)
        lines = text.splitlines()
        header = next(line for line in lines if "Dice\\Dice" in line)
        for d in dice:
            self.assertIn(f"Die {d.id}", header)
        self.assertEqual(text.count("50.00%"), 3)
        self.assertIn("100.00%", text)
        self.assertIn("Die 2 [3,4]", text)

    def test_format_percent(self):
        self.assertEqual(format_percent(0.58333), "58.33%")
        self.assertEqual(format_percent(0.5), "50.00%")

    def test_rejects_mismatched_matrix(self):
        dice = parse_dice(["1", "2", "3"])
        with self.assertRaises(ValueError):
            render_probability_table(dice, [[0.5, 0.5], [0.5, 0.5]])


if __name__ == '__main__':
    unittest.main()
