"""Inspect doremid identifiers and positions.

Usage:
  python -m cli.inspect_id --decode dorefaso-01ab3
  python -m cli.inspect_id --encode 12 --melody-digits 1 --pitch-digits 2
  python -m cli.inspect_id --validate do-0 --melody-digits 1 --pitch-digits 2
  python -m cli.inspect_id --summary
"""

from __future__ import annotations

import argparse
import sys

from cli.options import add_config_arguments, config_from_args, configure_logging
from doremid.codec.generator import Generator


def format_number(n: int) -> str:
    """Thousands separators: 597445632 -> "597,445,632"."""
    return f"{n:,}"


def inspect_id(
    generator: Generator,
    decode: str | None = None,
    encode: int | None = None,
    validate: str | None = None,
) -> int:
    """Print the requested inspection. Returns the process exit code."""
    if decode is not None:
        result = generator.parse(decode)
        if not result.success:
            print(f"Invalid ID {decode!r}: {result.error}")
            return 1
        print(result.position)
        return 0

    if encode is not None:
        result = generator.render(encode)
        if not result.success:
            print(f"Invalid position {encode}: {result.error}")
            return 1
        if encode >= generator.max_combinations:
            print(
                f"Warning: position {encode} is outside "
                f"[0, {generator.max_combinations}) and wraps",
                file=sys.stderr,
            )
        print(result.identifier)
        return 0

    if validate is not None:
        result = generator.parse(validate)
        if result.success:
            print(f"Valid ID ✓ (position {result.position})")
            return 0
        print(f"Invalid ID: {result.error}")
        return 1

    summary = generator.summary()
    config = summary["config"]
    print(f"Melody digits: {config['melodyDigits']}")
    print(f"Pitch digits: {config['pitchDigits']}")
    print(f"Separator: {config['separator']!r}")
    print(f"Identifier length: {summary['identifierLength']}")
    print(f"Max combinations: {format_number(summary['maxCombinations'])}")
    print(f"First: {summary['first']}")
    print(f"Last: {summary['last']}")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect doremid identifiers")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--decode", metavar="ID", help="Print the position of an ID")
    group.add_argument("--encode", metavar="POS", type=int, help="Print the ID at a position")
    group.add_argument("--validate", metavar="ID", help="Check an ID's format")
    group.add_argument("--summary", action="store_true", help="Describe the config")
    add_config_arguments(parser)
    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        generator = Generator(config_from_args(args))
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    code = inspect_id(generator, args.decode, args.encode, args.validate)
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
