"""Command-line interface for substriter."""

import argparse
import os
import sys
import time
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from tqdm import tqdm

from .config import SubstrConfig
from .models import Window
from .serialization import dumps
from .utils import render, unique_everseen
from .windowing import SubstrIter

BENCH_QUERIES = [
    "ab",
    "whatever",
    "hello world",
    "this is a long sentence that will be iterated over",
]


def load_env_file(search_paths=None) -> Optional[Path]:
    """Load SUBSTR_* defaults from the first .env file found.

    Args:
        search_paths: Candidate files, by default ``./.env`` then ``~/.env``

    Returns:
        Path of the loaded file, or None when none exists
    """
    if search_paths is None:
        search_paths = [Path(".env"), Path.home() / ".env"]
    for env_path in search_paths:
        if Path(env_path).exists():
            load_dotenv(env_path)
            return Path(env_path)
    return None


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def get_config_from_args(args) -> SubstrConfig:
    """Create SubstrConfig from CLI arguments.

    Options left unset on the command line fall back to environment
    variables, then to the model defaults.

    Args:
        args: Parsed command-line arguments

    Returns:
        SubstrConfig instance
    """
    values = {}

    size = getattr(args, "size", None)
    if size is None and os.getenv("SUBSTR_SIZE"):
        size = int(os.getenv("SUBSTR_SIZE"))
    if size is not None:
        values["size"] = size

    encoding = getattr(args, "encoding", None) or os.getenv("SUBSTR_ENCODING")
    if encoding:
        values["encoding"] = encoding

    output_format = getattr(args, "format", None) or os.getenv("SUBSTR_OUTPUT_FORMAT")
    if output_format:
        values["output_format"] = output_format

    values["unique"] = getattr(args, "unique", False)
    return SubstrConfig(**values)


def read_input(path: str) -> bytes:
    """Read raw input bytes from a file, or stdin for ``-``."""
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def write_output(content: str, output_path=None):
    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content + "\n")
        print(f"Exported to: {output_path}")
    else:
        print(content)


def cmd_iterate(args):
    """Print every window of the input.

    Args:
        args: Parsed command-line arguments
    """
    config = get_config_from_args(args)
    windows = SubstrIter(read_input(args.input), size=config.size, encoding=config.encoding)
    if config.unique:
        windows = unique_everseen(windows)

    if config.output_format == "json":
        content = dumps(windows)
    else:
        content = "\n".join(render(window) for window in windows)
    write_output(content, args.output)


def cmd_count(args):
    """Print the number of windows in the input.

    Args:
        args: Parsed command-line arguments
    """
    config = get_config_from_args(args)
    windows = SubstrIter(read_input(args.input), size=config.size, encoding=config.encoding)
    print(sum(1 for _ in windows))


def cmd_parse(args):
    """Parse text fragments as windows and print them as JSON.

    Args:
        args: Parsed command-line arguments
    """
    config = get_config_from_args(args)
    parsed = [Window.parse(fragment, config.size) for fragment in args.fragments]
    print(dumps(parsed))


def cmd_bench(args):
    """Time iteration over a fixed set of sample queries.

    Args:
        args: Parsed command-line arguments
    """
    config = get_config_from_args(args)

    print(f"{'=' * 60}")
    print(f"BENCHMARK (size={config.size}, rounds={args.rounds})")
    print(f"{'=' * 60}")

    for query in BENCH_QUERIES:
        started = time.perf_counter()
        for _ in tqdm(range(args.rounds), desc=f"iterate {query[:20]!r}", unit="round", leave=False):
            all(len(window) == config.size for window in SubstrIter(query, size=config.size))
        elapsed = time.perf_counter() - started
        per_round = elapsed / args.rounds * 1e9
        print(f"iterate/{query}: {per_round:.1f} ns per round")


def main():
    """Main CLI entry point."""
    # Load .env file if it exists
    load_env_file()

    parser = argparse.ArgumentParser(
        prog="substriter",
        description="Iterate over text by overlapping character windows"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Iterate command
    iterate_parser = subparsers.add_parser("iterate", help="Print the windows of a text")
    iterate_parser.add_argument("input", help="Input text file (or - for stdin)")
    iterate_parser.add_argument("-o", "--output", help="Output file")
    iterate_parser.add_argument("-f", "--format", choices=["lines", "json"], default=None,
                                help="Output format (or SUBSTR_OUTPUT_FORMAT env var)")
    iterate_parser.add_argument("--unique", action="store_true", help="Skip repeated windows")
    iterate_parser.set_defaults(func=cmd_iterate)

    # Count command
    count_parser = subparsers.add_parser("count", help="Count the windows of a text")
    count_parser.add_argument("input", help="Input text file (or - for stdin)")
    count_parser.set_defaults(func=cmd_count)

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse text fragments as windows")
    parse_parser.add_argument("fragments", nargs="+", help="Text fragments")
    parse_parser.set_defaults(func=cmd_parse)

    # Bench command
    bench_parser = subparsers.add_parser("bench", help="Benchmark iteration speed")
    bench_parser.add_argument("--rounds", type=positive_int, default=10000, help="Rounds per query")
    bench_parser.set_defaults(func=cmd_bench)

    for sub in (iterate_parser, count_parser, parse_parser, bench_parser):
        sub.add_argument("-n", "--size", type=int, default=None,
                         help="Window size in characters (or SUBSTR_SIZE env var)")
    for sub in (iterate_parser, count_parser):
        sub.add_argument("--encoding", default=None, help="Input encoding (or SUBSTR_ENCODING env var)")

    # Parse arguments
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(0)

    try:
        args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
