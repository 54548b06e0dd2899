"""Run settings for the checklist."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class Settings:
    """Options collected from the command line.

    ``topics`` empty means every registered topic. ``max_workers`` is handed
    to the thread pool behind the parallel iteration demo; ``None`` lets
    :class:`concurrent.futures.ThreadPoolExecutor` pick its default.
    """

    use_color: bool = True
    log_level: str = DEFAULT_LOG_LEVEL
    max_workers: int | None = None
    topics: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}.")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be a positive integer.")
