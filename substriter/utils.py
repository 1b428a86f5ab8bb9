"""Utility functions for substriter."""

from typing import Hashable, Iterable, Iterator, TypeVar

T = TypeVar('T', bound=Hashable)


def window_count(length: int, size: int) -> int:
    """Calculate how many windows a text yields.

    Args:
        length: Text length in characters
        size: Window size in characters

    Returns:
        Number of windows
    """
    return max(0, length - size + 1)


def unique_everseen(items: Iterable[T]) -> Iterator[T]:
    """Yield items in order, skipping ones already seen."""
    seen = set()
    for item in items:
        if item not in seen:
            seen.add(item)
            yield item


def render(window: Iterable[str]) -> str:
    """Concatenate the characters of a window."""
    return "".join(window)
