"""Command-line entry point: simulate blackjack rounds and print the results."""

import argparse
import logging
import sys
from dataclasses import replace
from random import Random

from config import LOG_LEVELS, AppConfig
from core.exceptions import BlackjackError
from core.game import RoundSimulator


def build_parser(config: AppConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate single-hand blackjack rounds between a dealer and a player.",
    )
    parser.add_argument(
        "-n", "--rounds",
        type=int,
        default=config.simulation.rounds,
        help="number of rounds to play (default: %(default)s)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.simulation.seed,
        help="seed for reproducible deals",
    )
    parser.add_argument(
        "--strict-blackjack",
        action="store_true",
        default=config.rules.strict_blackjack,
        help="only count a blackjack on exactly two cards",
    )
    parser.add_argument(
        "--log-level",
        default=config.simulation.log_level,
        choices=LOG_LEVELS,
        type=str.upper,
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        config = AppConfig()
    except ValueError as exc:
        print(f"invalid configuration: {exc}", file=sys.stderr)
        return 2
    args = build_parser(config).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if config.debug else args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.rounds < 1:
        print("rounds must be at least 1", file=sys.stderr)
        return 2

    rules = replace(config.rules, strict_blackjack=args.strict_blackjack)
    simulator = RoundSimulator(rules=rules, rng=Random(args.seed))

    try:
        summary = simulator.simulate_many(args.rounds)
    except BlackjackError as exc:
        logging.getLogger(__name__).error("Round aborted: %s", exc)
        return 1

    if args.rounds > 1:
        print(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
