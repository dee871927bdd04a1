"""
Estimate the pairwise win probabilities of a dice set and save them as a heatmap chart.
Usage: python scripts/plot_probabilities.py 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7 --trials 10000 --out data/probabilities.png
"""
import os
import argparse
from typing import List

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from nontransitive_dice.core.config import GameConfig
from nontransitive_dice.core.dice import Die, parse_dice
from nontransitive_dice.core.estimator import ProbabilityEstimator
from nontransitive_dice.core.errors import InputError
from nontransitive_dice.core.table import render_probability_table


def plot_matrix(dice: List[Die], matrix: List[List[float]], out_path: str):
    labels = [f"Die {d.id}" for d in dice]
    n = len(dice)
    size = max(4, int(n * 1.2))
    fig, ax = plt.subplots(figsize=(size + 1, size))
    im = ax.imshow(matrix, cmap='RdYlGn', vmin=0.0, vmax=1.0)
    ax.set_xticks(range(n))
    ax.set_yticks(range(n))
    ax.set_xticklabels(labels)
    ax.set_yticklabels(labels)
    ax.set_xlabel('Opponent die')
    ax.set_ylabel('Die')
    ax.set_title('P(row beats column)')
    for i in range(n):
        for j in range(n):
            ax.text(j, i, f"{matrix[i][j] * 100:.1f}%", ha='center', va='center', fontsize=8)
    fig.colorbar(im, ax=ax)
    fig.tight_layout()
    fig.savefig(out_path)
    plt.close(fig)


def main():
    parser = argparse.ArgumentParser(description='Estimate and plot the win probability matrix of a dice set')
    parser.add_argument('dice', nargs='+', help='Dice configurations, e.g. 2,2,4,4,9,9')
    parser.add_argument('--trials', type=int, default=GameConfig.trials, help='Trials per ordered pair of dice')
    parser.add_argument('--workers', type=int, default=None, help='Processes used for the simulations')
    parser.add_argument('--exact', action='store_true', help='Enumerate faces instead of simulating')
    parser.add_argument('--out', type=str, default=os.path.join('data', 'probabilities.png'), help='Output image path')
    args = parser.parse_args()

    try:
        dice = parse_dice(args.dice)
        estimator = ProbabilityEstimator(trials=args.trials, workers=args.workers)
    except InputError as e:
        raise SystemExit(f"Error: {e}")

    if args.exact:
        matrix = estimator.exact_matrix(dice)
    else:
        print(f"Simulating {len(dice) * (len(dice) - 1)} matchups x {args.trials} trials...")
        matrix = estimator.estimate_matrix(dice)
    print(render_probability_table(dice, matrix))

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    plot_matrix(dice, matrix, args.out)
    print(f"Probability chart: {args.out}")


if __name__ == '__main__':
    main()
