"""Single-method capabilities satisfied by classes, lambdas, and functions.

``Walkable`` is a structural contract: any callable taking ``(steps,
enabled)`` and returning an ``int`` satisfies it. The demos implement the
same behavior three ways and call each one through :func:`walk`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lambda_streams.config import Settings
    from lambda_streams.console import Console

logger = logging.getLogger(__name__)


@runtime_checkable
class Walkable(Protocol):
    def __call__(self, steps: int, enabled: bool) -> int: ...


def double_steps(steps: int, enabled: bool) -> int:
    """Return twice the steps when walking is enabled, otherwise zero."""
    return steps * 2 if enabled else 0


lambda_walker: Walkable = lambda steps, enabled: steps * 2 if enabled else 0  # noqa: E731


def walk(walker: Walkable, steps: int, enabled: bool) -> int:
    """Invoke any Walkable the same way, whatever its implementation."""
    result = walker(steps, enabled)
    logger.debug("walk(%r, %s, %s) -> %s", walker, steps, enabled, result)
    return result


def demo_1_anonymous_class(console: Console) -> None:
    """A throwaway class defined inline, the pre-lambda way to pass behavior."""

    class _Walker:
        def __call__(self, steps: int, enabled: bool) -> int:
            return steps * 2 if enabled else 0

    console.result("1. Anonymous class result", walk(_Walker(), 5, True))


def demo_2_lambda(console: Console) -> None:
    """Short inline function bound to a name."""
    console.result("2. Lambda result", walk(lambda_walker, 10, True))


def demo_3_named_function(console: Console) -> None:
    """A plain function satisfies the same contract with no wrapper."""
    console.result("3. Named function result", walk(double_steps, 7, True))
    console.result("3b. Named function disabled", walk(double_steps, 7, False))


def run_all(console: Console, settings: Settings) -> None:
    """Execute the capability demos in order."""
    demo_1_anonymous_class(console)
    demo_2_lambda(console)
    demo_3_named_function(console)
