"""Console entry point for running the checklist."""

from __future__ import annotations

import argparse
import logging
import sys

from lambda_streams import checklist
from lambda_streams.config import DEFAULT_LOG_LEVEL, LOG_LEVELS, Settings
from lambda_streams.console import LOGGER_NAME, Console, setup_logging
from lambda_streams.exceptions import ChecklistError

logger = logging.getLogger(LOGGER_NAME)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lambda-streams",
        description="Print function-value and collection pipeline demonstrations.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run every topic
  lambda-streams

  # Only the pipeline demos, plain text, two worker threads
  lambda-streams stream_demos --no-color --workers 2
""",
    )
    parser.add_argument(
        "topics",
        nargs="*",
        metavar="TOPIC",
        help=f"Topics to run (default: all of {', '.join(checklist.TOPIC_MODULES)})",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Write headings without terminal color codes",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        type=str.upper,
        help=f"Logging level for stderr diagnostics (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Thread count for the parallel iteration demo (default: executor default)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    return Settings(
        use_color=not args.no_color,
        log_level=args.log_level,
        max_workers=args.workers,
        topics=tuple(args.topics),
    )


def main(argv: list[str] | None = None) -> int:
    """Run the selected topics and return a process exit code."""

    args = build_parser().parse_args(argv if argv is not None else sys.argv[1:])
    try:
        settings = settings_from_args(args)
    except ValueError as exc:
        print(f"lambda-streams: error: {exc}", file=sys.stderr)
        return 2
    setup_logging(settings.log_level)
    try:
        checklist.run(settings, Console(use_color=settings.use_color))
    except ChecklistError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI passthrough only
    sys.exit(main())
