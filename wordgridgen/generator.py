"""Scoring and placement helpers shared by the puzzle search strategies."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from wordgridgen.grid import Direction, Grid, PlacedWord

MAX_CANDIDATES = 50
RETRY_CANDIDATES = 5


@dataclass(frozen=True)
class Intersection:
    """A letter shared by a horizontal and a vertical word."""

    h_word_idx: int
    v_word_idx: int
    h_char_idx: int
    v_char_idx: int
    character: str


@dataclass
class PlacementCandidate:
    """A possible anchor for a word, with its placement score."""

    word_idx: int
    direction: Direction
    row: int
    col: int
    score: float
    intersections: list[int] = field(default_factory=list)


def _anchored_cells(word: str, row: int, col: int, direction: Direction) -> list[tuple[int, int]]:
    """Cells a word covers when its last letter sits at (row, col)."""
    length = len(word)
    if direction is Direction.HORIZONTAL:
        start = col + 1 - length
        return [(row, start + i) for i in range(length)]
    start = row + 1 - length
    return [(start + i, col) for i in range(length)]


def placed_from_anchor(word: str, row: int, col: int, direction: Direction) -> PlacedWord:
    """The placed word whose last letter is at (row, col)."""
    if direction is Direction.HORIZONTAL:
        return PlacedWord(word, row, col + 1 - len(word), direction)
    return PlacedWord(word, row + 1 - len(word), col, direction)


def anchor_of(placed: PlacedWord) -> tuple[int, int]:
    """The (row, col) of the last letter of a placed word."""
    if placed.direction is Direction.HORIZONTAL:
        return placed.start_row, placed.start_col + len(placed.word) - 1
    return placed.start_row + len(placed.word) - 1, placed.start_col


class WordSearchGenerator:
    """Holds the word lists and the scoring rules used to build a puzzle."""

    def __init__(
        self,
        horizontal: Iterable[str],
        vertical: Iterable[str],
        silent: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        # Longer words first; ties keep their input order.
        self.horizontal_words: list[str] = sorted(horizontal, key=len, reverse=True)
        self.vertical_words: list[str] = sorted(vertical, key=len, reverse=True)
        self.silent = silent
        self.rng = rng if rng is not None else random.Random()

    def find_all_intersections(self) -> list[Intersection]:
        """Every shared letter between a horizontal and a vertical word, best first."""
        found = [
            Intersection(h_idx, v_idx, h_pos, v_pos, h_char)
            for h_idx, h_word in enumerate(self.horizontal_words)
            for v_idx, v_word in enumerate(self.vertical_words)
            for h_pos, h_char in enumerate(h_word)
            for v_pos, v_char in enumerate(v_word)
            if h_char == v_char
        ]
        found.sort(key=self.score_intersection_potential, reverse=True)
        return found

    def score_intersection_potential(self, intersection: Intersection) -> float:
        """How promising an intersection looks: long words, central letters, common letters."""
        h_len = float(len(self.horizontal_words[intersection.h_word_idx]))
        v_len = float(len(self.vertical_words[intersection.v_word_idx]))
        score = (h_len + v_len) * 2.0
        h_center = abs(intersection.h_char_idx - h_len / 2.0)
        v_center = abs(intersection.v_char_idx - v_len / 2.0)
        score += 20.0 - (h_center + v_center)
        score += self.count_letter_frequency(intersection.character) * 5.0
        return score

    def count_letter_frequency(self, letter: str) -> int:
        """Occurrences of the letter across all words."""
        return sum(word.count(letter) for word in (*self.horizontal_words, *self.vertical_words))

    def calculate_placement_score(
        self, grid: Grid, word: str, row: int, col: int, direction: Direction
    ) -> float:
        """Score a placement anchored at (row, col): central and crossing placements win."""
        center_row = grid.height / 2.0
        center_col = grid.width / 2.0
        score = 100.0 - math.hypot(row - center_row, col - center_col)

        matches = sum(
            1
            for (r, c), ch in zip(_anchored_cells(word, row, col, direction), word)
            if grid.cells[r][c] == ch
        )
        score += matches * 50.0
        score += len(word) * 2.0
        score += matches * 25.0
        return score

    def estimate_grid_size(self) -> tuple[int, int]:
        """A starting (width, height) big enough for the longest words and the word counts."""
        max_h_len = max((len(w) for w in self.horizontal_words), default=0)
        max_v_len = max((len(w) for w in self.vertical_words), default=0)
        total_chars = sum(map(len, self.horizontal_words)) + sum(map(len, self.vertical_words))
        estimated_area = int(total_chars * 0.85)
        estimated_side = int(math.sqrt(estimated_area))

        min_width = max(max_h_len, len(self.vertical_words), 10)
        min_height = max(max_v_len, len(self.horizontal_words), 10)
        return max(estimated_side, min_width), max(estimated_side, min_height)

    def generate_candidates(
        self, grid: Grid, word: str, direction: Direction
    ) -> list[PlacementCandidate]:
        """The best-scoring legal anchors for the word, highest score first."""
        if not word:
            raise ValueError("cannot place an empty word")
        last = len(word) - 1
        if direction is Direction.HORIZONTAL:
            anchors = ((r, c) for r in range(grid.height) for c in range(last, grid.width))
        else:
            anchors = ((r, c) for r in range(last, grid.height) for c in range(grid.width))

        candidates = [
            PlacementCandidate(
                word_idx=0,
                direction=direction,
                row=r,
                col=c,
                score=self.calculate_placement_score(grid, word, r, c, direction),
            )
            for r, c in anchors
            if grid.can_place_word(word, r, c, direction)
        ]
        candidates.sort(key=lambda cand: cand.score, reverse=True)
        return candidates[:MAX_CANDIDATES]

    def count_intersections(self, grid: Grid, word: PlacedWord) -> int:
        """Letters of the word whose crossing line holds another letter elsewhere."""
        count = 0
        for r, c in word.cells():
            if grid.cells[r][c] is None:
                continue
            if word.direction is Direction.HORIZONTAL:
                crossed = any(
                    other != r and grid.cells[other][c] is not None for other in range(grid.height)
                )
            else:
                crossed = any(
                    other != c and grid.cells[r][other] is not None for other in range(grid.width)
                )
            if crossed:
                count += 1
        return count

    def count_total_intersections(self, grid: Grid, placed_words: Sequence[PlacedWord]) -> int:
        """Sum of crossings over all placed words."""
        return sum(self.count_intersections(grid, word) for word in placed_words)

    def evaluate_solution(self, grid: Grid, placed_words: Sequence[PlacedWord]) -> float:
        """Overall quality: small, square and well-connected layouts score higher."""
        used_height, used_width = grid.get_used_dimensions()
        area = used_height * used_width
        compactness = 2000.0 / area
        squareness = 200.0 / (1.0 + abs(used_height - used_width))
        crossings = self.count_total_intersections(grid, placed_words) * 25.0
        return compactness + squareness + crossings

    def try_optimize_single_word(self, grid: Grid, placed_words: list[PlacedWord]) -> bool:
        """Move one random word to a top-scoring spot; True if it moved.

        The grid and the list are changed in place. If no new spot takes the
        word, it is put back where it was when that is still possible.
        """
        if not placed_words:
            return False
        index = self.rng.randrange(len(placed_words))
        removed = placed_words.pop(index)
        grid.remove_word(removed)

        candidates = self.generate_candidates(grid, removed.word, removed.direction)
        for candidate in candidates[:RETRY_CANDIDATES]:
            if grid.place_word(removed.word, candidate.row, candidate.col, candidate.direction):
                placed_words.append(
                    placed_from_anchor(removed.word, candidate.row, candidate.col, candidate.direction)
                )
                return True

        row, col = anchor_of(removed)
        if grid.place_word(removed.word, row, col, removed.direction):
            placed_words.append(removed)
        return False