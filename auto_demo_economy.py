#!/usr/bin/env python3
"""
Stellar Legacy Economy Demo

Runs one seeded economy simulation, prints the outcome and writes a galaxy
chart of the final position.

Usage:
    python3 auto_demo_economy.py [seed] [ticks] [output_directory]

Examples:
    python3 auto_demo_economy.py
    python3 auto_demo_economy.py 42 200 charts/
"""

import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for server environments

from stellar_legacy.simulation import EconomySimulator, SimulationConfig
from stellar_legacy.utils.galaxy_chart import plot_galaxy


def print_summary(result):
    summary = result.get_summary()
    print("=" * 60)
    print(f"STELLAR LEGACY ECONOMY RUN (seed {summary['seed']})")
    print("=" * 60)
    print(f"Ticks: {summary['total_ticks']}   Actions: {summary['total_actions']}   "
          f"Success rate: {summary['success_rate']:.1%}")
    print(f"Explored systems: {summary['explored_systems']}   "
          f"Colonies: {summary['active_colonies']}   Crew: {summary['crew_count']}")
    print("Final resources:")
    for name, amount in summary["final_resources"].items():
        print(f"  {name:<10} {amount:>12,.1f}")
    print("Actions:")
    for intent, stats in sorted(result.action_statistics.items()):
        print(f"  {intent:<20} {stats['success']:>4} ok  {stats['failed']:>4} failed")
    if result.failure_reasons:
        print("Most common failures:")
        for code, count in sorted(result.failure_reasons.items(), key=lambda item: -item[1])[:5]:
            print(f"  {code:<24} {count:>4}")


def main(argv):
    if "--help" in argv:
        print(__doc__)
        return 0

    seed = int(argv[0]) if len(argv) > 0 else 42
    ticks = int(argv[1]) if len(argv) > 1 else 100
    output_dir = Path(argv[2]) if len(argv) > 2 else Path("output")

    result = EconomySimulator(SimulationConfig(max_ticks=ticks, random_seed=seed)).run()
    print_summary(result)

    output_dir.mkdir(parents=True, exist_ok=True)
    chart_path = output_dir / f"galaxy_seed{seed}.png"
    plot_galaxy(result.final_state.snapshot, chart_path)
    print(f"Galaxy chart saved to {chart_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
