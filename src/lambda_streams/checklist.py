"""Registry and runner for the checklist topics.

Topics run in registration order. Each topic module exposes
``run_all(console, settings)`` and prints numbered lines, so missing console
output is easy to spot.

To add a topic:
1. Create ``<topic>.py`` with numbered ``demo_*`` functions and a ``run_all``.
2. Append its module name to ``TOPIC_MODULES``.
"""

from __future__ import annotations

import logging
from importlib import import_module
from typing import Callable

from lambda_streams.config import Settings
from lambda_streams.console import Console
from lambda_streams.exceptions import UnknownTopicError

logger = logging.getLogger(__name__)

TOPIC_MODULES = ("walkers", "stream_demos")

TOPICS: dict[str, Callable[[Console, Settings], None]] = {}


def register(module_name: str) -> None:
    module = import_module(f"lambda_streams.{module_name}")
    TOPICS[module_name] = module.run_all


for name in TOPIC_MODULES:
    register(name)


def select(names: tuple[str, ...]) -> list[str]:
    """Validate requested topic names, dropping repeats.

    An empty request selects every topic.
    """
    if not names:
        return list(TOPICS)
    for topic in names:
        if topic not in TOPICS:
            raise UnknownTopicError(topic, tuple(TOPICS))
    return list(dict.fromkeys(names))


def run(settings: Settings, console: Console | None = None) -> None:
    console = console if console is not None else Console(use_color=settings.use_color)
    for topic in select(settings.topics):
        logger.info("running topic %s", topic)
        console.banner(f"Running {topic}")
        TOPICS[topic](console, settings)
