"""Pure pipelines over the fixed fruit list.

Every function builds a fresh result from its input and leaves the input
untouched. ``FRUITS`` holds duplicates on purpose so ``distinct`` has work to
do.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Optional, Sequence

from lambda_streams.stream import Stream

FRUITS: tuple[str, ...] = (
    "Apple", "Banana", "Kiwi", "Mango",
    "Orange", "Papaya", "Kiwi", "Apple",
)

BASKET: tuple[tuple[str, ...], ...] = (
    ("Apple", "Banana"),
    ("Kiwi", "Mango"),
)

LENGTH_THRESHOLD = 5
FIRST_COUNT = 3
SKIP_COUNT = 2


def long_fruits_sorted(items: Sequence[str] = FRUITS, threshold: int = LENGTH_THRESHOLD) -> list[str]:
    """Fruits strictly longer than ``threshold``, sorted lexicographically."""
    return Stream(items).filter(lambda f: len(f) > threshold).sorted().to_list()


def unique_fruits(items: Sequence[str] = FRUITS) -> list[str]:
    return Stream(items).distinct().to_list()


def fruit_lengths(items: Sequence[str] = FRUITS) -> list[int]:
    return Stream(items).map(len).to_list()


def fruit_length_map(items: Sequence[str] = FRUITS) -> dict[str, int]:
    # distinct first: to_dict rejects repeated keys
    return Stream(items).distinct().to_dict(lambda f: f, len)


def total_length(items: Sequence[str] = FRUITS) -> int:
    return Stream(items).map(len).reduce(0, operator.add)


def first_fruits(items: Sequence[str] = FRUITS, n: int = FIRST_COUNT) -> list[str]:
    return Stream(items).limit(n).to_list()


def skip_fruits(items: Sequence[str] = FRUITS, n: int = SKIP_COUNT) -> list[str]:
    return Stream(items).skip(n).to_list()


def group_by_length(items: Sequence[str] = FRUITS) -> dict[int, list[str]]:
    """Distinct fruits bucketed by length, keys in first-seen order."""
    return Stream(items).distinct().group_by(len)


def partition_by_length(
    items: Sequence[str] = FRUITS, threshold: int = LENGTH_THRESHOLD
) -> dict[bool, list[str]]:
    return Stream(items).distinct().partition_by(lambda f: len(f) > threshold)


def flatten_basket(basket: Iterable[Iterable[str]] = BASKET) -> list[str]:
    return Stream(basket).flat_map(lambda sub: sub).to_list()


def longest_fruit(items: Sequence[str] = FRUITS) -> Optional[str]:
    """The first fruit of maximal length, or ``None`` when there are none."""
    return Stream(items).max(key=len)


def sorted_by_length_desc(items: Sequence[str] = FRUITS) -> list[str]:
    return Stream(items).distinct().sorted(key=len, reverse=True).to_list()


def visit_in_parallel(
    items: Sequence[str] = FRUITS,
    action: Callable[[str], Any] = print,
    max_workers: Optional[int] = None,
) -> None:
    """Call ``action`` once for every item, duplicates included, in any order."""
    Stream(items).parallel_for_each(action, max_workers=max_workers)
