"""Smallest demo: write two words backwards onto a 10x10 grid."""

from __future__ import annotations

import sys
from typing import Sequence

_SIZE = 10


def build_minimal_grid(words: Sequence[str]) -> list[list[str]]:
    """Put the first word right-to-left on row 2 from column 8, the second bottom-to-top in column 5 from row 7."""
    grid = [["."] * _SIZE for _ in range(_SIZE)]
    if len(words) > 0:
        for i, ch in enumerate(words[0][:9]):
            grid[2][8 - i] = ch
    if len(words) > 1:
        for i, ch in enumerate(words[1][:8]):
            grid[7 - i][5] = ch
    return grid


def render_minimal_grid(grid: Sequence[Sequence[str]]) -> str:
    """Each cell followed by a space, one row per line."""
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in grid)


def main(argv: Sequence[str] | None = None) -> int:
    """Build and print the demo grid from the words in argv; return the exit status."""
    words = list(sys.argv[1:] if argv is None else argv)
    if not words:
        print("Usage: wordgridgen-minimal <word1> <word2> ...", file=sys.stderr)
        return 1
    listed = "[" + ", ".join(f'"{word}"' for word in words) + "]"
    print(f"Creating minimal word search with words: {listed}")
    print(render_minimal_grid(build_minimal_grid(words)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())