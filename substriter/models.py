"""Data models for substriter."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple


class LengthMismatchError(ValueError):
    """Raised when a text fragment does not hold exactly the expected characters."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} characters, got {actual}")

    def __reduce__(self):
        return type(self), (self.expected, self.actual)


@dataclass(frozen=True, order=True)
class Window:
    """A window of consecutive characters, oldest first.

    Equality, hashing and ordering follow the character tuple, so windows
    compare lexicographically by character.
    """

    chars: Tuple[str, ...]

    def __post_init__(self):
        # Accept lists or strings of characters but always store a tuple
        object.__setattr__(self, "chars", tuple(self.chars))

    @classmethod
    def parse(cls, text: str, size: int) -> "Window":
        """Parse a text fragment of exactly ``size`` characters.

        Args:
            text: Text fragment
            size: Expected number of characters

        Returns:
            Window holding the characters of ``text``

        Raises:
            LengthMismatchError: If ``text`` does not hold ``size`` characters
        """
        if len(text) != size:
            raise LengthMismatchError(expected=size, actual=len(text))
        return cls(tuple(text))

    @classmethod
    def from_windows(cls, windows: Iterable[Tuple[str, ...]]) -> Iterator["Window"]:
        """Wrap raw character tuples produced by the iterator."""
        return (cls(chars) for chars in windows)

    def __str__(self) -> str:
        return "".join(self.chars)

    def __repr__(self):
        return f"Window({str(self)!r})"

    def __len__(self) -> int:
        return len(self.chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.chars)

    def __getitem__(self, index):
        return self.chars[index]
