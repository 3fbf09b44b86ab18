from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .dice import default_rng, roll_tokens
from .errors import ParseError
from .render import render_table


EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE = 2

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="roll", description="A simple CLI to roll dice.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "dice",
        nargs="*",
        metavar="DICE",
        help="Dice expressions (e.g. 1d20, 4d8, 1d20a, 1d8-2).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random source for reproducible rolls.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    return _build_parser().parse_intermixed_args(argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] [%(name)s] - %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    try:
        args = parse_args(list(sys.argv[1:] if argv is None else argv))
    except SystemExit as e:
        # argparse uses SystemExit for --help/--version and usage errors.
        code = e.code
        return int(code) if isinstance(code, int) else EXIT_USAGE

    _configure_logging(args.verbose)

    try:
        report = roll_tokens(args.dice, default_rng(args.seed))
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    log.debug("roll.cli.done", extra={"tokens": len(args.dice), "total": report.total})
    print(render_table(report))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
