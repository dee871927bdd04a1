"""
Simulate user-vs-computer throws between die-selection agents and report win% per agent.
The "user" side picks its die with one agent, the computer answers with another.
Usage: python scripts/run_matchups.py --agents all --games 1000 --chart data/agent_win_percentages.png
"""
import os
import argparse
import itertools
from collections import defaultdict
from typing import Dict, List

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from nontransitive_dice.agents import AGENT_MAP, create_agent
from nontransitive_dice.core.dice import Die, parse_dice, USAGE_EXAMPLE
from nontransitive_dice.core.engine import GameEngine
from nontransitive_dice.core.errors import InputError


def run_pair(dice: List[Die], user_key: str, computer_key: str, games: int) -> Dict[str, int]:
    """
    Play `games` throws. The user-side agent picks first, the computer agent answers.
    Returns:
        dict: Counts for 'user', 'computer' and 'tie'.
    """
    user_agent = create_agent(user_key)
    engine = GameEngine(dice, agent=create_agent(computer_key))
    counts = defaultdict(int)
    for _ in range(games):
        user_die = user_agent.choose_die(engine.dice)
        ev = engine.user_throw(user_die.id)
        counts[ev['winner']] += 1
    engine.pop_events()
    return counts


def aggregate_and_plot(agent_stats: Dict[str, dict], out_path: str):
    agents = sorted(agent_stats.keys())
    win_perc = [
        (agent_stats[a]['wins'] / agent_stats[a]['games'] * 100.0) if agent_stats[a]['games'] > 0 else 0.0
        for a in agents
    ]
    width = max(6, int(len(agents) * 0.6))
    plt.figure(figsize=(width, 4))
    bars = plt.bar(agents, win_perc, color='C0')
    plt.ylabel('Win percentage (%)')
    plt.ylim(0, 100)
    plt.title('Matchups: win% per agent as computer')
    for rect, val in zip(bars, win_perc):
        plt.text(rect.get_x() + rect.get_width() / 2.0, rect.get_height() + 1.0, f"{val:.1f}%", ha='center', va='bottom', fontsize=8)
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()


def run_matchups(dice: List[Die], agent_keys: List[str], games: int, chart_path: str = None):
    agent_stats = defaultdict(lambda: defaultdict(int))
    pairs = list(itertools.product(agent_keys, agent_keys))
    for n, (user_key, computer_key) in enumerate(pairs, start=1):
        print(f"Running {n}/{len(pairs)}: user={user_key} vs computer={computer_key} ({games} throws)...", end=' ')
        counts = run_pair(dice, user_key, computer_key, games)
        agent_stats[computer_key]['wins'] += counts['computer']
        agent_stats[computer_key]['games'] += games
        print(f"computer {counts['computer']}, user {counts['user']}, ties {counts['tie']}")

    for agent in sorted(agent_stats):
        g = agent_stats[agent]['games']
        w = agent_stats[agent]['wins']
        print(f"{agent}: {w}/{g} throws won as computer ({(w / g * 100.0) if g else 0.0:.2f}%)")

    if chart_path:
        out_dir = os.path.dirname(chart_path)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        aggregate_and_plot(agent_stats, chart_path)
        print(f"Win percentage chart: {chart_path}")
    return agent_stats


def parse_agent_list(s: str) -> List[str]:
    if s.strip().lower() == 'all':
        return sorted(list(AGENT_MAP.keys()))
    return [x.strip() for x in s.split(',') if x.strip()]


def main():
    parser = argparse.ArgumentParser(description='Run user-vs-computer throw matchups between die-selection agents')
    parser.add_argument('dice', nargs='*', default=USAGE_EXAMPLE.split(), help='Dice configurations')
    parser.add_argument('--agents', type=str, default='all', help='Comma-separated list of agent keys from AGENT_MAP or "all"')
    parser.add_argument('--games', type=int, default=1000, help='Throws per ordered pairing')
    parser.add_argument('--chart', type=str, default=None, help='Optional path for a win% bar chart')
    args = parser.parse_args()

    agent_keys = parse_agent_list(args.agents)
    unknown = [a for a in agent_keys if a not in AGENT_MAP]
    if unknown:
        raise SystemExit(f"Unknown agents: {unknown}. Supported: {list(AGENT_MAP.keys())}")
    try:
        dice = parse_dice(args.dice)
    except InputError as e:
        raise SystemExit(f"Error: {e}")

    run_matchups(dice, agent_keys, args.games, args.chart)


if __name__ == '__main__':
    main()
