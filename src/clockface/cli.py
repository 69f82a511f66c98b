"""Command-line interface for clockface.

Reads a time of day and writes the clock face as SVG:

    echo "13 45 7" | clockface -o clock.svg
    clockface 13 45 7 -o -          # SVG on stdout

Exit status: 0 on success, 2 on unreadable time input, 1 when rendering or
writing fails.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from clockface import __version__
from clockface.clock import build_clock
from clockface.config import ClockConfig, config_context, get_config
from clockface.errors import ClockfaceError, ConfigError, TimeInputError
from clockface.renderer import render, write_document
from clockface.sinks import StreamSink
from clockface.timeinput import parse_time
from clockface.utils.logger import get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    defaults = get_config()
    parser = argparse.ArgumentParser(
        prog="clockface",
        description="Render an analog clock face as SVG.",
    )
    parser.add_argument(
        "time",
        nargs="*",
        help="hour minute second (read from stdin when omitted)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=defaults.output,
        help=f"output file, '-' for stdout (default: {defaults.output})",
    )
    parser.add_argument("--radius", type=float, default=defaults.radius, help="face radius")
    parser.add_argument(
        "--font-size", type=float, default=defaults.font_size, help="label font size"
    )
    parser.add_argument("--label", default=defaults.label, help="label text")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    text = " ".join(args.time) if args.time else sys.stdin.read()
    try:
        time = parse_time(text)
    except TimeInputError as exc:
        logger.error("%s", exc)
        return EXIT_BAD_INPUT

    config = ClockConfig(
        radius=args.radius,
        font_size=args.font_size,
        label=args.label,
        output=args.output,
    )
    try:
        config.validate()
    except ConfigError as exc:
        logger.error("%s", exc)
        return EXIT_BAD_INPUT

    try:
        with config_context(config), build_clock(time) as root:
            if config.output == "-":
                render(root, StreamSink(sys.stdout))
            else:
                path = write_document(root, config.output)
                logger.info("wrote %s", path)
    except ClockfaceError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
