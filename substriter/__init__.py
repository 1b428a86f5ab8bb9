"""substriter: iterate over text by overlapping character windows"""

__version__ = "0.1.0"

from .source import CharSource
from .windowing import SubstrIter, TrigramIter, Substr, windows
from .models import Window, LengthMismatchError
from .serialization import DeserializationError, dump_windows, dumps, load_windows, loads
from .config import SubstrConfig
from .cli import main as cli_main

__all__ = [
    "CharSource",
    "SubstrIter",
    "TrigramIter",
    "Substr",
    "windows",
    "Window",
    "LengthMismatchError",
    "DeserializationError",
    "dump_windows",
    "dumps",
    "load_windows",
    "loads",
    "SubstrConfig",
    "cli_main",
]
