"""
roadgraph command line.

Usage:
    python main.py                                    # batch run from config/example_config.yaml
    python main.py --config config/other.yaml
    python main.py --start Wien --end Innsbruck       # single query
"""

import argparse
import sys

from roadgraph.config import configure_logging, load_config, merge_config
from roadgraph.planner import MISSING_SELECTION, NO_PATH, plan_route
from roadgraph.simulation import load_network, run_simulation


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Shortest routes on a road network (Dijkstra)")
    parser.add_argument("--config", default="config/example_config.yaml", help="YAML run config")
    parser.add_argument("--start", help="Start city (single query)")
    parser.add_argument("--end", help="End city (single query)")
    parser.add_argument("--log-level", help="Override log_level from the config")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        config = load_config(args.config)
        if args.log_level:
            config = merge_config({"log_level": args.log_level}, base=config, source="--log-level")
        configure_logging(config.log_level)

        if args.start or args.end:
            G = load_network(config)
            outcome = plan_route(G, args.start, args.end)
            print(outcome.message)
            return 2 if outcome.status in (MISSING_SELECTION, NO_PATH) else 0

        run_simulation(config)
        return 0
    except (KeyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
