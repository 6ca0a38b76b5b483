"""Generate doremid identifiers.

Usage:
  python -m cli.generate random --count 5
  python -m cli.generate sequential --count 10 --start 80 --melody-digits 1 --pitch-digits 1
  python -m cli.generate unique --count 100 --seed 42
"""

from __future__ import annotations

import argparse
import logging
import sys

from cli.options import add_config_arguments, config_from_args, configure_logging
from doremid.codec.generator import Generator

logger = logging.getLogger("doremid.cli")


def generate(generator: Generator, mode: str, count: int, start: int) -> list[str]:
    if mode == "random":
        return [generator.new_id() for _ in range(max(count, 0))]
    if mode == "sequential":
        return generator.batch_generate_ids(count, start)
    return generator.batch_generate_random_ids(count)


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate doremid identifiers")
    parser.add_argument(
        "mode",
        choices=["random", "sequential", "unique"],
        help="random: independent draws; sequential: consecutive positions; "
        "unique: distinct random draws",
    )
    parser.add_argument("--count", type=int, default=1)
    parser.add_argument("--start", type=int, default=0, help="Sequential start position")
    parser.add_argument("--seed", type=int, default=None)
    add_config_arguments(parser)
    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        generator = Generator(config_from_args(args), seed=args.seed)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    ids = generate(generator, args.mode, args.count, args.start)
    if not ids:
        logger.warning(
            "No identifiers generated (mode=%s count=%s start=%s max=%s)",
            args.mode,
            args.count,
            args.start,
            generator.max_combinations,
        )
        sys.exit(1)
    for identifier in ids:
        print(identifier)


if __name__ == "__main__":
    main()
