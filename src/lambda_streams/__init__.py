"""Function values and collection pipelines, shown on a small fruit list."""
from lambda_streams.exceptions import (
    ChecklistError,
    DuplicateKeyError,
    InvalidCountError,
    UnknownTopicError,
)
from lambda_streams.stream import Stream
from lambda_streams.walkers import Walkable, double_steps, lambda_walker, walk

__version__ = "0.1.0"
__all__ = [
    "Stream",
    "Walkable",
    "walk",
    "double_steps",
    "lambda_walker",
    "ChecklistError",
    "UnknownTopicError",
    "InvalidCountError",
    "DuplicateKeyError",
]
