"""Standalone demo: read a plain word list and lay a few words on a fixed grid."""

from __future__ import annotations

import sys
from typing import Sequence

from wordgridgen.grid import Direction, Grid

_USAGE = """\
Usage: {prog} <input_file>
Input file should be a simple YAML-like format:
horizontal:
- "WORD1"
- "WORD2"
vertical:
- "WORD3"
- "WORD4\""""


def parse_simple_input(content: str) -> tuple[list[str], list[str]]:
    """Read 'horizontal:' and 'vertical:' sections of '- word' items, upper-cased."""
    sections: dict[str, list[str]] = {"horizontal": [], "vertical": []}
    current: str | None = None
    for raw in content.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line in ("horizontal:", "vertical:"):
            current = line[:-1]
            continue
        if line.startswith("- ") and current is not None:
            sections[current].append(line[2:].strip('"').upper())
    return sections["horizontal"], sections["vertical"]


def build_demo_grid(
    horizontal: Sequence[str], vertical: Sequence[str]
) -> tuple[Grid, list[tuple[str, Direction]]]:
    """Lay up to three words at fixed spots on a 20x20 grid.

    Returns the grid and the words that were attempted, in order.
    """
    grid = Grid(20, 20)
    spots = [
        (horizontal, 0, 5, 15, Direction.HORIZONTAL),
        (vertical, 0, 15, 8, Direction.VERTICAL),
        (horizontal, 1, 10, 12, Direction.HORIZONTAL),
    ]
    attempted: list[tuple[str, Direction]] = []
    for words, index, row, col, direction in spots:
        if index < len(words):
            grid.place_word(words[index], row, col, direction)
            attempted.append((words[index], direction))
    return grid, attempted


def _debug_list(words: Sequence[str]) -> str:
    return "[" + ", ".join(f'"{word}"' for word in words) + "]"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo on the file named in argv; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(_USAGE.format(prog="wordgridgen-simple"), file=sys.stderr)
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            content = handle.read()
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    horizontal, vertical = parse_simple_input(content)
    print(f"Horizontal words: {_debug_list(horizontal)}")
    print(f"Vertical words: {_debug_list(vertical)}")

    grid, attempted = build_demo_grid(horizontal, vertical)
    for word, direction in attempted:
        how = "horizontally" if direction is Direction.HORIZONTAL else "vertically"
        print(f"Placed '{word}' {how}")

    print("\nGenerated grid:")
    print(grid.render(trimmed=False), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())