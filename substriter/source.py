"""Character source that feeds the sliding window iterator."""

import codecs
from typing import Iterable, Iterator, Optional, Union

TextSequence = Union[str, bytes, bytearray, memoryview, Iterable[str]]

_END = object()


class CharSource:
    """Forward-only cursor producing one character at a time.

    Strings are walked by code point. Byte buffers are decoded lazily with an
    incremental decoder, so a character spanning several bytes is returned by
    a single call. Malformed bytes raise ``UnicodeDecodeError``.
    """

    def __init__(self, text: TextSequence, encoding: str = "utf-8"):
        """Initialize the source.

        Args:
            text: String, encoded bytes, or iterable of single characters
            encoding: Codec used when ``text`` is a byte buffer
        """
        self.encoding = encoding
        self._position = 0
        if isinstance(text, (bytes, bytearray, memoryview)):
            self._chars = self._decode(memoryview(text), encoding)
        else:
            self._chars = iter(text)

    @staticmethod
    def _decode(data: memoryview, encoding: str) -> Iterator[str]:
        decoder = codecs.getincrementaldecoder(encoding)(errors="strict")
        for i in range(len(data)):
            decoded = decoder.decode(bytes(data[i:i + 1]))
            # A complete multi-byte sequence yields exactly one character
            yield from decoded
        yield from decoder.decode(b"", final=True)

    @property
    def position(self) -> int:
        """Number of characters produced so far."""
        return self._position

    def next_char(self) -> Optional[str]:
        """Return the next character, or None once the text is exhausted."""
        char = next(self._chars, _END)
        if char is _END:
            return None
        if not isinstance(char, str):
            raise TypeError(f"Expected a character, got {type(char).__name__}")
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        self._position += 1
        return char

    def __iter__(self):
        return self

    def __next__(self) -> str:
        char = self.next_char()
        if char is None:
            raise StopIteration
        return char
