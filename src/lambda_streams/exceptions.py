"""Exception hierarchy for the lambda-streams checklist.

Every error raised by the package inherits from :class:`ChecklistError`, so
the command line entry point can catch a single base class.
"""


class ChecklistError(Exception):
    """Base exception for all checklist operations."""


class UnknownTopicError(ChecklistError):
    """Raised when a topic name is not registered with the runner."""

    def __init__(self, topic: str, known: tuple[str, ...] = ()) -> None:
        choices = ", ".join(known) if known else "none"
        super().__init__(f"Unknown topic '{topic}' (known: {choices}).")
        self.topic = topic
        self.known = known


class InvalidCountError(ChecklistError, ValueError):
    """Raised when ``limit`` or ``skip`` receives a negative count."""


class DuplicateKeyError(ChecklistError, KeyError):
    """Raised when two stream elements map to the same dictionary key.

    Run ``distinct()`` first when the source may hold repeated values.
    """

    def __init__(self, key: object) -> None:
        super().__init__(f"Duplicate key {key!r}")
        self.key = key

    def __str__(self) -> str:
        return str(self.args[0])
