"""Shared command line options for building a generator config."""

from __future__ import annotations

import argparse
import json
import logging

from doremid.codec.models import Config


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to config JSON")
    parser.add_argument("--melody-digits", type=int, help="Melody symbols per ID")
    parser.add_argument("--pitch-digits", type=int, help="Pitch symbols per ID")
    parser.add_argument("--separator", help="String between the two segments")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")


def config_from_args(args: argparse.Namespace) -> Config:
    """Flags override the config file, which overrides DOREMID_* variables."""
    config = Config.from_env()
    if args.config:
        with open(args.config) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{args.config} must contain a JSON object")
        config = Config.from_dict({**config.to_dict(), **data})

    overrides = config.to_dict()
    if args.melody_digits is not None:
        overrides["melodyDigits"] = args.melody_digits
    if args.pitch_digits is not None:
        overrides["pitchDigits"] = args.pitch_digits
    if args.separator is not None:
        overrides["separator"] = args.separator
    return Config.from_dict(overrides)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
