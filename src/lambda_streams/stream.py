"""A small fluent wrapper over iterators, in the style of collection pipelines.

A :class:`Stream` is lazy and single use: intermediate operations wrap the
underlying iterator in a new stream and terminal operations consume it.

    >>> Stream.of("Kiwi", "Apple", "Kiwi").distinct().sorted().to_list()
    ['Apple', 'Kiwi']
"""

from __future__ import annotations

import functools
import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import islice
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, Optional, TypeVar

from lambda_streams.exceptions import DuplicateKeyError, InvalidCountError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _check_count(name: str, n: int) -> int:
    if n < 0:
        raise InvalidCountError(f"{name} count must not be negative, got {n}.")
    return n


class Stream(Generic[T]):
    def __init__(self, iterable: Iterable[T]) -> None:
        self._it: Iterator[T] = iter(iterable)

    @classmethod
    def of(cls, *items: T) -> "Stream[T]":
        return cls(items)

    def __iter__(self) -> Iterator[T]:
        return self._it

    # Intermediate ops

    def filter(self, pred: Callable[[T], bool]) -> "Stream[T]":
        return Stream(filter(pred, self._it))

    def map(self, fn: Callable[[T], R]) -> "Stream[R]":
        return Stream(map(fn, self._it))

    def flat_map(self, fn: Callable[[T], Iterable[R]]) -> "Stream[R]":
        # fn returns an iterable for each item; results are concatenated in order
        return Stream(x for item in self._it for x in fn(item))

    def distinct(self) -> "Stream[T]":
        """Drop repeated elements, keeping the first occurrence of each."""
        seen: set[Any] = set()

        def first_time(x: T) -> bool:
            if x in seen:
                return False
            seen.add(x)
            return True

        return Stream(x for x in self._it if first_time(x))

    def sorted(self, key: Optional[Callable[[T], Any]] = None, reverse: bool = False) -> "Stream[T]":
        # sorted() is stable, also with reverse=True
        return Stream(sorted(self._it, key=key, reverse=reverse))

    def limit(self, n: int) -> "Stream[T]":
        return Stream(islice(self._it, _check_count("limit", n)))

    def skip(self, n: int) -> "Stream[T]":
        return Stream(islice(self._it, _check_count("skip", n), None))

    def peek(self, fn: Callable[[T], Any]) -> "Stream[T]":
        def generator() -> Iterator[T]:
            for x in self._it:
                fn(x)
                yield x

        return Stream(generator())

    # Terminal ops

    def to_list(self) -> list[T]:
        return list(self._it)

    def count(self) -> int:
        return sum(1 for _ in self._it)

    def to_dict(self, key_fn: Callable[[T], K], value_fn: Callable[[T], V]) -> dict[K, V]:
        """Collect into a dict, refusing to overwrite an existing key."""
        result: dict[K, V] = {}
        for item in self._it:
            key = key_fn(item)
            if key in result:
                raise DuplicateKeyError(key)
            result[key] = value_fn(item)
        return result

    def reduce(self, identity: R, op: Callable[[R, T], R]) -> R:
        return functools.reduce(op, self._it, identity)

    def group_by(self, key_fn: Callable[[T], K]) -> dict[K, list[T]]:
        groups: dict[K, list[T]] = {}
        for item in self._it:
            groups.setdefault(key_fn(item), []).append(item)
        return groups

    def partition_by(self, pred: Callable[[T], bool]) -> dict[bool, list[T]]:
        """Split into exactly two buckets; both keys exist even when empty."""
        parts: dict[bool, list[T]] = {False: [], True: []}
        for item in self._it:
            parts[bool(pred(item))].append(item)
        return parts

    def max(self, key: Optional[Callable[[T], Any]] = None) -> Optional[T]:
        """Largest element, or ``None`` for an empty stream. Ties keep the first."""
        return max(self._it, key=key, default=None)

    def min(self, key: Optional[Callable[[T], Any]] = None) -> Optional[T]:
        return min(self._it, key=key, default=None)

    def for_each(self, action: Callable[[T], Any]) -> None:
        for item in self._it:
            action(item)

    def parallel_for_each(self, action: Callable[[T], Any], max_workers: Optional[int] = None) -> None:
        """Run ``action`` once per element on a thread pool.

        Completion order is not defined and side effects may interleave.
        The exception of the earliest submitted element that failed is
        re-raised here.
        """
        items = list(self._it)
        logger.debug("parallel_for_each: %d items, max_workers=%s", len(items), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(action, item) for item in items]
            for future in futures:
                future.result()
