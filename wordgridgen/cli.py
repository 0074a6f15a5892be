"""Command line entry point: read word lists from YAML and print a puzzle."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

import yaml

from wordgridgen.generator import WordSearchGenerator
from wordgridgen.search import generate


def _word_list(data: dict, key: str) -> list[str]:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(word, str) for word in value):
        raise ValueError(f"field `{key}` must be a list of strings")
    return list(value)


def load_word_lists(path: str | Path) -> tuple[list[str], list[str]]:
    """Read the 'horizontal' and 'vertical' word lists from a YAML file.

    Raises OSError if the file cannot be read, yaml.YAMLError if it is not
    valid YAML and ValueError if it lacks either list.
    """
    with open(path, encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if not isinstance(data, dict):
        raise ValueError("expected a mapping with `horizontal` and `vertical` lists")
    return _word_list(data, "horizontal"), _word_list(data, "vertical")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordgridgen",
        description="Advanced word search puzzle generator with intelligent optimization algorithms",
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "-i", "--input", required=True, type=Path,
        help="Input YAML file containing word lists",
    )
    parser.add_argument(
        "-s", "--silent", action="store_true", help="Disable progress indication"
    )
    parser.add_argument(
        "--max-attempts", type=int, default=1000,
        help="Maximum attempts to find optimal solution",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a puzzle from the command line; return the exit status."""
    args = _parser().parse_args(argv)

    try:
        horizontal, vertical = load_word_lists(args.input)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not horizontal and not vertical:
        print("Error: No words provided in input file", file=sys.stderr)
        return 1

    generator = WordSearchGenerator(horizontal, vertical, silent=args.silent)
    result = generate(generator, args.max_attempts)
    if result is None:
        print(
            "Failed to generate word search puzzle. "
            "Try increasing --max-attempts or using shorter words.",
            file=sys.stderr,
        )
        return 1

    grid, placed_words = result
    if not args.silent:
        print("\nSuccessfully generated word search!")
        height, width = grid.get_used_dimensions()
        print(f"Final grid size: {height}x{width} (area: {height * width})")
        print("\nPlaced words:")
        for word in placed_words:
            print(f"  {word.word} ({word.direction}) at ({word.start_row}, {word.start_col})")
        print("\nGrid:")
    print(grid.render(trimmed=True), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())