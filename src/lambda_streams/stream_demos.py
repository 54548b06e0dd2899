"""Collection pipeline demonstrations over the fruit list.

Each ``demo_*`` prints one numbered, labeled section so a missing section is
obvious when scanning the output. The values come from :mod:`lambda_streams.fruits`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lambda_streams import fruits
from lambda_streams.stream import Stream

if TYPE_CHECKING:
    from lambda_streams.config import Settings
    from lambda_streams.console import Console


def demo_1_filter_sorted(console: Console) -> None:
    console.heading(f"1. Fruits with length > {fruits.LENGTH_THRESHOLD} (sorted):")
    Stream(fruits.long_fruits_sorted()).for_each(console.line)


def demo_2_distinct(console: Console) -> None:
    console.heading("2. Unique fruits:")
    Stream(fruits.unique_fruits()).for_each(console.line)


def demo_3_map_to_list(console: Console) -> None:
    console.heading("3. Fruit lengths:")
    console.line(fruits.fruit_lengths())


def demo_4_to_dict(console: Console) -> None:
    console.heading("4. Fruit length map:")
    console.line(fruits.fruit_length_map())


def demo_5_reduce(console: Console) -> None:
    """Fold the lengths from an identity of 0 with integer addition."""
    console.heading("5. Total length of all fruits:")
    console.line(fruits.total_length())


def demo_6_limit_skip(console: Console) -> None:
    """Limit and skip are independent views; neither touches the source."""
    console.heading(f"6. First {fruits.FIRST_COUNT} fruits:")
    Stream(fruits.first_fruits()).for_each(console.line)
    console.heading(f"6b. Skip first {fruits.SKIP_COUNT} fruits:")
    Stream(fruits.skip_fruits()).for_each(console.line)


def demo_7_group_by(console: Console) -> None:
    console.heading("7. Grouped by length:")
    console.line(fruits.group_by_length())


def demo_8_partition_by(console: Console) -> None:
    console.heading(f"8. Partitioned by length > {fruits.LENGTH_THRESHOLD}:")
    console.line(fruits.partition_by_length())


def demo_9_flat_map(console: Console) -> None:
    console.heading("9. Flattened fruit basket:")
    console.line(fruits.flatten_basket())


def demo_10_optional_max(console: Console) -> None:
    """Check for presence before using the result; empty input yields None."""
    longest = fruits.longest_fruit()
    if longest is not None:
        console.heading("10. Longest fruit:")
        console.line(longest)
    missing = fruits.longest_fruit(())
    console.line("10b. Longest of no fruits present:", missing is not None)


def demo_11_sorted_by_key(console: Console) -> None:
    console.heading("11. Sorted by length descending:")
    Stream(fruits.sorted_by_length_desc()).for_each(console.line)


def demo_12_parallel(console: Console, max_workers: int | None = None) -> None:
    """Every fruit is printed exactly once; the order changes between runs."""
    console.heading("12. Parallel iteration:")
    fruits.visit_in_parallel(action=console.line, max_workers=max_workers)


def run_all(console: Console, settings: Settings) -> None:
    """Execute all pipeline demonstrations."""
    demo_1_filter_sorted(console)
    demo_2_distinct(console)
    demo_3_map_to_list(console)
    demo_4_to_dict(console)
    demo_5_reduce(console)
    demo_6_limit_skip(console)
    demo_7_group_by(console)
    demo_8_partition_by(console)
    demo_9_flat_map(console)
    demo_10_optional_max(console)
    demo_11_sorted_by_key(console)
    demo_12_parallel(console, max_workers=settings.max_workers)
