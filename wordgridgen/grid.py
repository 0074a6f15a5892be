"""Letter grid on which words are laid right-to-left or bottom-to-top."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

Cell = Optional[str]


class Direction(enum.Enum):
    """Orientation of a word in the grid."""

    HORIZONTAL = "Horizontal"  # anchored at its right end
    VERTICAL = "Vertical"  # anchored at its bottom end

    def __str__(self) -> str:
        return self.value


@dataclass
class PlacedWord:
    """A word on the grid, given by its top-left cell."""

    word: str
    start_row: int
    start_col: int
    direction: Direction

    def cells(self) -> list[tuple[int, int]]:
        """Coordinates covered by the word, in reading order."""
        if self.direction is Direction.HORIZONTAL:
            return [(self.start_row, self.start_col + i) for i in range(len(self.word))]
        return [(self.start_row + i, self.start_col) for i in range(len(self.word))]


class Grid:
    """A rectangular grid of optional letters."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells: list[list[Cell]] = [[None] * width for _ in range(height)]

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"

    def _span(self, word: str, row: int, col: int, direction: Direction):
        """Cells a word anchored at (row, col) would cover, or None if it does not fit."""
        length = len(word)
        if direction is Direction.HORIZONTAL:
            if col + 1 < length or not 0 <= row < self.height or col >= self.width:
                return None
            start = col + 1 - length
            return [(row, start + i) for i in range(length)]
        if row + 1 < length or not 0 <= col < self.width or row >= self.height:
            return None
        start = row + 1 - length
        return [(start + i, col) for i in range(length)]

    def can_place_word(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Whether the word fits ending at (row, col) without clashing letters."""
        span = self._span(word, row, col, direction)
        if span is None:
            return False
        return all(
            self.cells[r][c] is None or self.cells[r][c] == ch
            for (r, c), ch in zip(span, word)
        )

    def place_word(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Write the word ending at (row, col); return False and leave the grid alone if it cannot go there."""
        if not self.can_place_word(word, row, col, direction):
            return False
        for (r, c), ch in zip(self._span(word, row, col, direction), word):
            self.cells[r][c] = ch
        return True

    def remove_word(self, placed: PlacedWord) -> None:
        """Clear every cell the placed word covers that lies inside the grid."""
        for r, c in placed.cells():
            if 0 <= r < self.height and 0 <= c < self.width:
                self.cells[r][c] = None

    def calculate_used_area(self) -> tuple[int, int, int, int]:
        """Bounding box of filled cells as (min_row, max_row, min_col, max_col)."""
        filled = [
            (r, c)
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if cell is not None
        ]
        if not filled:
            return (0, 0, 0, 0)
        rows = [r for r, _ in filled]
        cols = [c for _, c in filled]
        return (min(rows), max(rows), min(cols), max(cols))

    def get_used_dimensions(self) -> tuple[int, int]:
        """Height and width of the bounding box of filled cells."""
        min_row, max_row, min_col, max_col = self.calculate_used_area()
        return (max_row - min_row + 1, max_col - min_col + 1)

    def compact(self) -> tuple[int, int]:
        """Crop the grid to its used area and return the (row, col) offset removed."""
        min_row, max_row, min_col, max_col = self.calculate_used_area()
        self.cells = [row[min_col:max_col + 1] for row in self.cells[min_row:max_row + 1]]
        self.height = len(self.cells)
        self.width = len(self.cells[0]) if self.cells else 0
        return (min_row, min_col)

    def try_remove_empty_rows_cols(self) -> bool:
        """Drop every empty row and column; return whether anything was removed."""
        kept_rows = [row for row in self.cells if any(cell is not None for cell in row)]
        changed = len(kept_rows) != self.height
        self.cells = kept_rows
        self.height = len(kept_rows)

        keep_cols = [
            c for c in range(self.width) if any(row[c] is not None for row in self.cells)
        ]
        if len(keep_cols) != self.width:
            changed = True
            self.cells = [[row[c] for c in keep_cols] for row in self.cells]
            self.width = len(keep_cols)
        return changed

    def render(self, trimmed: bool = True) -> str:
        """Text picture of the grid, '.' for empty cells; trimmed shows only the used area."""
        if not self.cells or self.width == 0:
            return ""
        if trimmed:
            min_row, max_row, min_col, max_col = self.calculate_used_area()
            rows = [row[min_col:max_col + 1] for row in self.cells[min_row:max_row + 1]]
        else:
            rows = self.cells
        return "".join(
            "".join(f"{cell if cell is not None else '.'} " for cell in row) + "\n"
            for row in rows
        )