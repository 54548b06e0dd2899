"""Console output and logging setup shared by every checklist topic."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Any, TextIO

from colored import fore, style

LOGGER_NAME = "lambda_streams"

COLORS_FOR_KINDS = {
    "banner": "yellow",
    "heading": "cyan",
    "result": "green",
}


@dataclass
class Console:
    """Writes labeled sections to a text stream.

    Headings are colored with ``colored`` unless ``use_color`` is off, in
    which case no escape codes reach the stream. ``colored`` also drops the
    codes when stdout is not a terminal, unless ``FORCE_COLOR`` is set.
    """

    use_color: bool = True
    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def paint(self, text: str, kind: str) -> str:
        if not self.use_color:
            return text
        return f"{fore(COLORS_FOR_KINDS[kind])}{text}{style('reset')}"

    def banner(self, text: str) -> None:
        print(self.paint(f"== {text} ==", "banner"), file=self.stream, flush=True)

    def heading(self, text: str) -> None:
        # blank line between sections, as the original console output does
        print("", file=self.stream)
        print(self.paint(text, "heading"), file=self.stream, flush=True)

    def line(self, *values: Any) -> None:
        # one write per line so threads calling line() never split a line
        self.stream.write(" ".join(str(v) for v in values) + "\n")
        self.stream.flush()

    def result(self, label: str, value: Any) -> None:
        print(f"{label}: {self.paint(str(value), 'result')}", file=self.stream, flush=True)


def setup_logging(level: str = "WARNING", stream: TextIO | None = None) -> logging.Logger:
    """Configure the package logger to write to stderr.

    Showcase output goes to stdout, so log records never interleave with it.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(getattr(logging, level.upper()))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))

    logger.addHandler(handler)
    logger.propagate = False
    return logger
