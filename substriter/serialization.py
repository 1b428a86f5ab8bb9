"""Structured serialization of windows as bare text fragments."""

from functools import lru_cache
from typing import Annotated, Any, Iterable, List, Optional, Sequence, Union

from pydantic import PlainSerializer, PlainValidator, TypeAdapter, ValidationError

from .models import LengthMismatchError, Window

WindowLike = Union[Window, Sequence[str]]


class DeserializationError(ValueError):
    """Raised when serialized data cannot be turned back into windows."""

    def __init__(self, message: str, mismatch: Optional[LengthMismatchError] = None):
        super().__init__(message)
        self.mismatch = mismatch
        self.expected = mismatch.expected if mismatch else None
        self.actual = mismatch.actual if mismatch else None


def _parse_fragment(value: Any, size: int) -> Window:
    if isinstance(value, Window):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError(f"Expected a text fragment, got {type(value).__name__}")
    return Window.parse(value, size)


@lru_cache(maxsize=None)
def window_adapter(size: int) -> TypeAdapter:
    """Return a pydantic adapter for lists of windows of ``size`` characters."""
    window_type = Annotated[
        Window,
        PlainValidator(lambda value: _parse_fragment(value, size)),
        PlainSerializer(str, return_type=str),
    ]
    return TypeAdapter(List[window_type])


def _as_window(window: WindowLike) -> Window:
    return window if isinstance(window, Window) else Window(tuple(window))


def _prepare(windows: Iterable[WindowLike]):
    prepared = [_as_window(window) for window in windows]
    size = len(prepared[0]) if prepared else 1
    return window_adapter(size), prepared


def dump_windows(windows: Iterable[WindowLike]) -> List[str]:
    """Serialize windows into a list of rendered text fragments.

    Args:
        windows: Window values or raw character tuples

    Returns:
        List of strings, one fragment per window
    """
    adapter, prepared = _prepare(windows)
    return adapter.dump_python(prepared)


def dumps(windows: Iterable[WindowLike], indent: Optional[int] = None) -> str:
    """Serialize windows to a JSON array of strings."""
    adapter, prepared = _prepare(windows)
    return adapter.dump_json(prepared, indent=indent).decode("utf-8")


def _raise_deserialization(exc: ValidationError, size: int):
    mismatch = None
    for error in exc.errors():
        cause = (error.get("ctx") or {}).get("error")
        if isinstance(cause, LengthMismatchError):
            mismatch = cause
            break
    if mismatch is not None:
        message = f"Invalid {size}-character window: {mismatch}"
    else:
        message = f"Invalid window data: {exc.errors()[0]['msg']}"
    raise DeserializationError(message, mismatch) from exc


def load_windows(data: Any, size: int) -> List[Window]:
    """Deserialize a list of text fragments into windows.

    Args:
        data: Sequence of strings
        size: Number of characters each fragment must hold

    Returns:
        List of Window objects

    Raises:
        DeserializationError: If the data is not a list of ``size``-character strings
    """
    try:
        return window_adapter(size).validate_python(data)
    except ValidationError as exc:
        _raise_deserialization(exc, size)


def loads(text: Union[str, bytes], size: int) -> List[Window]:
    """Deserialize a JSON array of text fragments into windows."""
    try:
        return window_adapter(size).validate_json(text)
    except ValidationError as exc:
        _raise_deserialization(exc, size)
