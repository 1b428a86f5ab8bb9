"""Windowing module for iterating over text by fixed-size character windows."""

from typing import Dict, Iterator, List, Optional, Tuple, Type

from .source import CharSource, TextSequence

Substr = Tuple[str, ...]


def _check_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"Window size must be an int, got {type(size).__name__}")
    if size < 1:
        raise ValueError(f"Window size must be at least 1, got {size}")
    return size


class SubstrIter:
    """Iterates over a text by overlapping windows of ``size`` characters.

    The last ``size`` characters live in a fixed circular buffer. Each step
    pulls one character, overwrites the oldest slot and rotates the read
    offset, so a step never shifts or grows storage.

    >>> list(SubstrIter("whatever", size=3))[:2]
    [('w', 'h', 'a'), ('h', 'a', 't')]
    """

    size: Optional[int] = None
    _fixed: Dict[int, Type["SubstrIter"]] = {}

    def __init__(self, text: TextSequence, size: Optional[int] = None, encoding: str = "utf-8"):
        """Initialize the iterator and prime the buffer.

        Args:
            text: Source text (string, encoded bytes, or iterable of characters)
            size: Window width; defaults to the class width
            encoding: Codec used when ``text`` is a byte buffer
        """
        fixed = type(self).size
        if fixed is not None and size is not None and size != fixed:
            raise TypeError(f"{type(self).__name__} is fixed at {fixed} characters, got size={size!r}")
        if size is None:
            size = fixed
        if size is None:
            raise TypeError(f"{type(self).__name__} needs a window size")
        self._size = _check_size(size)
        self._source = text if isinstance(text, CharSource) else CharSource(text, encoding)
        self._total = len(text) if isinstance(text, str) else None

        self._buffer: List[Optional[str]] = [None] * self._size
        self._idx = 0
        self._exhausted = False

        # Fill slots 1..size-1 so the first pull lands in slot 0
        for slot in range(1, self._size):
            char = self._source.next_char()
            if char is None:
                self._exhausted = True
                break
            self._buffer[slot] = char

    @classmethod
    def of(cls, size: int) -> Type["SubstrIter"]:
        """Return the iterator class fixed at ``size`` characters."""
        size = _check_size(size)
        if size not in cls._fixed:
            cls._fixed[size] = type(f"SubstrIter{size}", (SubstrIter,), {"size": size})
        return cls._fixed[size]

    @classmethod
    def from_text(cls, text: TextSequence) -> "SubstrIter":
        """Build an iterator over ``text`` using the class width."""
        return cls(text)

    @property
    def width(self) -> int:
        """Window width fixed at construction."""
        return self._size

    def next_window(self) -> Optional[Substr]:
        """Advance by one character and return the window, or None when done."""
        if self._exhausted:
            return None
        char = self._source.next_char()
        if char is None:
            self._exhausted = True
            return None

        buffer = self._buffer
        buffer[self._idx] = char
        self._idx = idx = (self._idx + 1) % self._size
        return tuple(buffer[idx:] + buffer[:idx])

    def __iter__(self) -> Iterator[Substr]:
        return self

    def __next__(self) -> Substr:
        window = self.next_window()
        if window is None:
            raise StopIteration
        return window

    def __length_hint__(self) -> int:
        if self._exhausted or self._total is None:
            return 0
        produced = max(0, self._source.position - self._size + 1)
        return max(0, self._total - self._size + 1) - produced

    def __repr__(self):
        return f"{type(self).__name__}(size={self._size}, position={self._source.position})"


class TrigramIter(SubstrIter):
    """Iterator over windows of 3 characters."""

    size = 3


def windows(text: TextSequence, size: int = 3) -> Iterator[Substr]:
    """Yield every window of ``size`` characters in ``text``.

    Args:
        text: Input text
        size: Window width in characters

    Returns:
        Lazy iterator of character tuples, oldest character first
    """
    return SubstrIter(text, size=size)
