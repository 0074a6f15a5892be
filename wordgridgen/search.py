"""Search strategies that lay every word on a grid and pick the tightest layout."""

from __future__ import annotations

import copy
import math
from collections import deque
from itertools import zip_longest
from typing import Callable, Optional, Sequence

from wordgridgen.generator import (
    RETRY_CANDIDATES,
    WordSearchGenerator,
    anchor_of,
    placed_from_anchor,
)
from wordgridgen.grid import Direction, Grid, PlacedWord

Solution = tuple[Grid, list[PlacedWord]]

_OPTIMIZED_TRIES = 10
_FORCED_INTERSECTIONS = 3
_RANDOM_PLACEMENT_TRIES = 150
_ANNEALING_ITERATIONS = 100


def _say(generator: WordSearchGenerator, message: str) -> None:
    if not generator.silent:
        print(message)


def _debug_list(words: Sequence[str]) -> str:
    return "[" + ", ".join(f'"{word}"' for word in words) + "]"


def _shape(grid: Grid) -> tuple[int, int, int, int]:
    """Used height, used width, area and the height/width difference."""
    used_height, used_width = grid.get_used_dimensions()
    return used_height, used_width, used_height * used_width, abs(used_height - used_width)


def _place_remaining(
    generator: WordSearchGenerator,
    grid: Grid,
    placed_words: list[PlacedWord],
    words: Sequence[str],
    used: set[int],
    direction: Direction,
) -> bool:
    """Put each unused word on one of its top candidates; False as soon as one will not go."""
    for index, word in enumerate(words):
        if index in used:
            continue
        candidates = generator.generate_candidates(grid, word, direction)
        for candidate in candidates[:RETRY_CANDIDATES]:
            if grid.place_word(word, candidate.row, candidate.col, candidate.direction):
                placed_words.append(
                    placed_from_anchor(word, candidate.row, candidate.col, candidate.direction)
                )
                break
        else:
            return False
    return True


def generate_intersection_first(
    generator: WordSearchGenerator, width: int, height: int, max_attempts: int
) -> Optional[Solution]:
    """Force a few crossings at the grid centre, then fill in the other words."""
    intersections = generator.find_all_intersections()
    rng = generator.rng
    best: Optional[Solution] = None
    best_score = -math.inf

    _say(generator, f"Intersection-first algorithm: {len(intersections)} intersections")

    for attempt in range(max_attempts):
        if attempt % 25 == 0:
            _say(generator, f"Intersection-first attempt {attempt + 1}/{max_attempts}")

        grid = Grid(width, height)
        placed_words: list[PlacedWord] = []
        used_h: set[int] = set()
        used_v: set[int] = set()

        shuffled = list(intersections)
        rng.shuffle(shuffled)

        forced = 0
        center_row, center_col = height // 2, width // 2
        for inter in shuffled[:_FORCED_INTERSECTIONS]:
            if inter.h_word_idx in used_h or inter.v_word_idx in used_v:
                continue
            h_word = generator.horizontal_words[inter.h_word_idx]
            v_word = generator.vertical_words[inter.v_word_idx]
            h_row, h_col = center_row, center_col + inter.h_char_idx
            v_row, v_col = center_row + inter.v_char_idx, center_col

            if (
                h_col < width
                and v_row < height
                and grid.can_place_word(h_word, h_row, h_col, Direction.HORIZONTAL)
                and grid.can_place_word(v_word, v_row, v_col, Direction.VERTICAL)
            ):
                grid.place_word(h_word, h_row, h_col, Direction.HORIZONTAL)
                grid.place_word(v_word, v_row, v_col, Direction.VERTICAL)
                placed_words.append(placed_from_anchor(h_word, h_row, h_col, Direction.HORIZONTAL))
                placed_words.append(placed_from_anchor(v_word, v_row, v_col, Direction.VERTICAL))
                used_h.add(inter.h_word_idx)
                used_v.add(inter.v_word_idx)
                forced += 1

        success = _place_remaining(
            generator, grid, placed_words, generator.horizontal_words, used_h, Direction.HORIZONTAL
        ) and _place_remaining(
            generator, grid, placed_words, generator.vertical_words, used_v, Direction.VERTICAL
        )
        if not success:
            continue

        used_height, used_width, area, diff = _shape(grid)
        crossings = forced + generator.count_total_intersections(grid, placed_words)
        score = 2000.0 / area + 200.0 / (1.0 + diff) + crossings * 25.0
        if score > best_score:
            best_score = score
            best = (grid, placed_words)
            _say(
                generator,
                f"Intersection-first solution: area {area} ({used_height}x{used_width}), "
                f"intersections: {forced}, score: {score:.2f}",
            )

    return best


def generate_optimized(
    generator: WordSearchGenerator, width: int, height: int, max_attempts: int
) -> Optional[Solution]:
    """Alternate horizontal and vertical words in random order, each on a high-scoring spot."""
    intersections = generator.find_all_intersections()
    rng = generator.rng
    best: Optional[Solution] = None
    best_score = -math.inf

    _say(generator, f"Found {len(intersections)} potential intersections")

    for attempt in range(max_attempts):
        if attempt % 50 == 0:
            _say(generator, f"Optimization attempt {attempt + 1}/{max_attempts}")

        grid = Grid(width, height)
        placed_words: list[PlacedWord] = []
        order_h = list(range(len(generator.horizontal_words)))
        order_v = list(range(len(generator.vertical_words)))
        rng.shuffle(order_h)
        rng.shuffle(order_v)

        queue: deque[tuple[str, Direction]] = deque()
        for h_idx, v_idx in zip_longest(order_h, order_v):
            if h_idx is not None:
                queue.append((generator.horizontal_words[h_idx], Direction.HORIZONTAL))
            if v_idx is not None:
                queue.append((generator.vertical_words[v_idx], Direction.VERTICAL))

        success = True
        while queue:
            word, direction = queue.popleft()
            candidates = generator.generate_candidates(grid, word, direction)
            tries = max(min(len(candidates), _OPTIMIZED_TRIES), 1)
            placed = False
            for i in range(tries):
                pick = i if i < 3 else rng.randrange(len(candidates))
                if pick >= len(candidates):
                    continue
                candidate = candidates[pick]
                if grid.place_word(word, candidate.row, candidate.col, candidate.direction):
                    placed_words.append(
                        placed_from_anchor(word, candidate.row, candidate.col, candidate.direction)
                    )
                    placed = True
                    break
            if not placed:
                success = False
                break

        if not success:
            continue

        used_height, used_width, area, diff = _shape(grid)
        crossings = generator.count_total_intersections(grid, placed_words)
        score = 1000.0 / area + 100.0 / (1.0 + diff) + crossings * 10.0
        if score > best_score:
            best_score = score
            best = (grid, placed_words)
            _say(
                generator,
                f"Found optimized solution: area {area} ({used_height}x{used_width}), "
                f"score: {score:.2f}",
            )

    return best


def _place_randomly(
    generator: WordSearchGenerator,
    grid: Grid,
    placed_words: list[PlacedWord],
    words: Sequence[str],
    direction: Direction,
) -> bool:
    """Try random anchors for each word; False once a word finds none.

    Raises ValueError when a word is too long for the grid to offer any anchor.
    """
    rng = generator.rng
    for word in words:
        for _ in range(_RANDOM_PLACEMENT_TRIES):
            if direction is Direction.HORIZONTAL:
                row = rng.randrange(grid.height)
                col = rng.randrange(len(word) - 1, grid.width)
            else:
                row = rng.randrange(len(word) - 1, grid.height)
                col = rng.randrange(grid.width)
            if grid.place_word(word, row, col, direction):
                placed_words.append(placed_from_anchor(word, row, col, direction))
                break
        else:
            return False
    return True


def generate_with_size(
    generator: WordSearchGenerator, width: int, height: int, max_attempts: int
) -> Optional[Solution]:
    """Drop words at random anchors and keep the smallest, squarest layout."""
    rng = generator.rng
    best: Optional[Solution] = None
    best_score = math.inf

    for attempt in range(max_attempts):
        if attempt % 100 == 0:
            _say(generator, f"Attempt {attempt + 1}/{max_attempts}")

        grid = Grid(width, height)
        placed_words: list[PlacedWord] = []
        horizontal = list(generator.horizontal_words)
        vertical = list(generator.vertical_words)
        rng.shuffle(horizontal)
        rng.shuffle(vertical)

        success = _place_randomly(
            generator, grid, placed_words, horizontal, Direction.HORIZONTAL
        ) and _place_randomly(generator, grid, placed_words, vertical, Direction.VERTICAL)
        if not success:
            continue

        used_height, used_width, area, diff = _shape(grid)
        score = area * 10 + diff * 3
        if score < best_score:
            best_score = score
            best = (grid, placed_words)
            _say(
                generator,
                f"Found solution with area {area} ({used_height}x{used_width}), score: {score}",
            )

    return best


def simulated_annealing(
    generator: WordSearchGenerator,
    grid: Grid,
    placed_words: Sequence[PlacedWord],
    iterations: int,
) -> Solution:
    """Improve a layout by moving single words; the inputs are left untouched."""
    rng = generator.rng
    current: Solution = copy.deepcopy((grid, list(placed_words)))
    best: Solution = copy.deepcopy(current)
    best_score = generator.evaluate_solution(*best)
    temperature = 1000.0
    cooling_rate = 0.95

    _say(generator, f"Starting simulated annealing with {iterations} iterations")

    for iteration in range(iterations):
        if iteration % 50 == 0:
            temperature *= cooling_rate

        candidate: Solution = copy.deepcopy(current)
        if not generator.try_optimize_single_word(*candidate):
            continue

        new_score = generator.evaluate_solution(*candidate)
        delta = new_score - generator.evaluate_solution(*current)
        if delta > 0.0 or rng.random() < math.exp(delta / temperature):
            current = candidate
            if new_score > best_score:
                best_score = new_score
                best = copy.deepcopy(current)
                if iteration % 100 == 0:
                    h, w = best[0].get_used_dimensions()
                    _say(
                        generator,
                        f"SA iteration {iteration}: new best area {h * w} ({h}x{w}), "
                        f"score: {best_score:.2f}",
                    )

    return best


_Strategy = Callable[[WordSearchGenerator, int, int, int], Optional[Solution]]


def generate(generator: WordSearchGenerator, max_attempts: int) -> Optional[Solution]:
    """Try each strategy on growing grids; polish and crop the first layout found."""
    if not generator.silent:
        print("Generating word search puzzle...")
        print(f"Horizontal words: {_debug_list(generator.horizontal_words)}")
        print(f"Vertical words: {_debug_list(generator.vertical_words)}")
        print()

    initial_width, initial_height = generator.estimate_grid_size()
    attempts = max_attempts // 5
    strategies: list[tuple[str, float, _Strategy]] = [
        ("optimized", 0.6, generate_optimized),
        ("intersection-first", 0.7, generate_intersection_first),
        ("optimized", 0.8, generate_optimized),
        ("optimized", 1.0, generate_optimized),
        ("standard", 1.2, generate_with_size),
    ]

    for name, multiplier, strategy in strategies:
        width = int(initial_width * multiplier)
        height = int(initial_height * multiplier)
        _say(
            generator,
            f"Trying {name} algorithm with grid size: {width}x{height} ({attempts} attempts)",
        )

        solution = strategy(generator, width, height, attempts)
        if solution is None:
            continue

        grid, placed_words = solution
        h, w = grid.get_used_dimensions()
        original_area = h * w

        _say(generator, "Applying simulated annealing optimization...")
        grid, placed_words = simulated_annealing(
            generator, grid, placed_words, _ANNEALING_ITERATIONS
        )

        row_offset, col_offset = grid.compact()
        for word in placed_words:
            word.start_row = max(0, word.start_row - row_offset)
            word.start_col = max(0, word.start_col - col_offset)

        while grid.try_remove_empty_rows_cols():
            pass

        h, w = grid.get_used_dimensions()
        final_area = h * w
        reduction = 100.0 * (1.0 - final_area / original_area)
        _say(
            generator,
            f"Total optimization: {original_area} -> {final_area} area ({reduction:.1f}% reduction)",
        )
        return grid, placed_words

    return None


__all__ = [
    "Solution",
    "anchor_of",
    "generate",
    "generate_intersection_first",
    "generate_optimized",
    "generate_with_size",
    "simulated_annealing",
]