"""
table.py
Formats a probability matrix as a text table with rows and columns keyed by die id.
Related modules:
- estimator.py: Produces the matrix.
- engine.py, UI/cli.py: Show the table as the game's help screen.
"""

from typing import List, Sequence

from tabulate import tabulate

from .dice import Die


def format_percent(p: float) -> str:
    return f"{p * 100:.2f}%"


def render_probability_table(dice: Sequence[Die], matrix: List[List[float]], tablefmt: str = "github") -> str:
    """
    Render matrix[i][j] (P(die i beats die j)) as percentages.
    Args:
        dice (sequence[Die]): Dice in the same order as the matrix rows.
        matrix (list[list[float]]): Square probability matrix.
        tablefmt (str): tabulate format name.
    Returns:
        str: The table, preceded by a title line.
    """
    if len(matrix) != len(dice) or any(len(row) != len(dice) for row in matrix):
        raise ValueError("matrix must be square and match the number of dice")
    headers = ["Dice\\Dice"] + [f"Die {d.id}" for d in dice]
    rows = [[f"Die {d.id} [{d}]"] + [format_percent(p) for p in row] for d, row in zip(dice, matrix)]
    return "Winning Probabilities Table (row beats column):\n\n" + tabulate(rows, headers=headers, tablefmt=tablefmt)
