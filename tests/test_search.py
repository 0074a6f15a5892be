import random

import pytest

from wordgridgen.generator import WordSearchGenerator
from wordgridgen.grid import Direction, Grid
from wordgridgen.search import (
    generate,
    generate_intersection_first,
    generate_optimized,
    generate_with_size,
    simulated_annealing,
)

# No letter is shared between any two of these words, so no overlaps occur.
DISTINCT_H = ["CAT", "DOG"]
DISTINCT_V = ["SUN", "FLY"]


def _generator(horizontal, vertical, seed=7, silent=True):
    return WordSearchGenerator(horizontal, vertical, silent=silent, rng=random.Random(seed))


def _letters_match(grid, placed_words):
    return all(
        grid.cells[r][c] == ch
        for placed in placed_words
        for (r, c), ch in zip(placed.cells(), placed.word)
    )


def _rows(grid):
    return ["".join(cell or "." for cell in row) for row in grid.cells]


def _cols(grid):
    return [
        "".join(grid.cells[r][c] or "." for r in range(grid.height)) for c in range(grid.width)
    ]


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_generate_with_size_places_every_word(seed):
    gen = _generator(["APPLE", "GRAPE"], ["PEAR", "PLUM"], seed=seed)
    result = generate_with_size(gen, 12, 12, 10)
    assert result is not None
    grid, placed = result
    assert sorted(p.word for p in placed) == sorted(["APPLE", "GRAPE", "PEAR", "PLUM"])
    assert _letters_match(grid, placed)


def test_generate_with_size_directions_follow_lists():
    gen = _generator(["APPLE"], ["PEAR"])
    grid, placed = generate_with_size(gen, 12, 12, 5)
    by_word = {p.word: p.direction for p in placed}
    assert by_word == {"APPLE": Direction.HORIZONTAL, "PEAR": Direction.VERTICAL}


def test_generate_with_size_word_too_long_raises():
    gen = _generator(["ELEPHANTS"], [])
    with pytest.raises(ValueError):
        generate_with_size(gen, 4, 4, 1)


@pytest.mark.parametrize("seed", [4, 5])
def test_generate_optimized_places_every_word(seed):
    gen = _generator(["APPLE", "GRAPE"], ["PEAR", "PLUM"], seed=seed)
    result = generate_optimized(gen, 10, 10, 5)
    assert result is not None
    grid, placed = result
    assert len(placed) == 4
    assert _letters_match(grid, placed)


def test_generate_optimized_too_small_grid_gives_none():
    gen = _generator(["APPLE"], ["GRAPE"])
    assert generate_optimized(gen, 3, 3, 5) is None


def test_generate_optimized_zero_attempts_gives_none():
    gen = _generator(["APPLE"], ["GRAPE"])
    assert generate_optimized(gen, 10, 10, 0) is None


def test_generate_intersection_first_forces_crossing():
    # Palindromes keep the forced pair consistent at the centre cell.
    gen = _generator(["LEVEL"], ["REFER"])
    result = generate_intersection_first(gen, 10, 10, 5)
    assert result is not None
    grid, placed = result
    assert _letters_match(grid, placed)
    assert grid.cells[5][5] == "E"
    assert gen.count_total_intersections(grid, placed) >= 2


def test_generate_intersection_first_without_shared_letters():
    gen = _generator(DISTINCT_H, DISTINCT_V)
    grid, placed = generate_intersection_first(gen, 10, 10, 3)
    assert sorted(p.word for p in placed) == sorted(DISTINCT_H + DISTINCT_V)
    assert _letters_match(grid, placed)


def test_simulated_annealing_never_worsens_and_keeps_input():
    gen = _generator(DISTINCT_H, DISTINCT_V, seed=11)
    grid, placed = generate_with_size(gen, 10, 10, 3)
    before_render = grid.render(trimmed=False)
    before_words = [(p.word, p.start_row, p.start_col) for p in placed]
    initial_score = gen.evaluate_solution(grid, placed)

    new_grid, new_placed = simulated_annealing(gen, grid, placed, 60)

    assert gen.evaluate_solution(new_grid, new_placed) >= initial_score
    assert sorted(p.word for p in new_placed) == sorted(p.word for p in placed)
    assert _letters_match(new_grid, new_placed)
    assert grid.render(trimmed=False) == before_render
    assert [(p.word, p.start_row, p.start_col) for p in placed] == before_words


def test_simulated_annealing_zero_iterations_returns_copy():
    gen = _generator(DISTINCT_H, DISTINCT_V)
    grid, placed = generate_with_size(gen, 10, 10, 2)
    new_grid, new_placed = simulated_annealing(gen, grid, placed, 0)
    assert new_grid is not grid
    assert new_grid.render(trimmed=False) == grid.render(trimmed=False)
    assert new_placed == placed


@pytest.mark.parametrize("seed", [0, 21, 42])
def test_generate_returns_cropped_grid_with_all_words(seed):
    gen = _generator(DISTINCT_H, DISTINCT_V, seed=seed)
    result = generate(gen, 25)
    assert result is not None
    grid, placed = result
    assert (grid.height, grid.width) == grid.get_used_dimensions()
    assert sorted(p.word for p in placed) == sorted(DISTINCT_H + DISTINCT_V)
    rows, cols = _rows(grid), _cols(grid)
    for word in DISTINCT_H:
        assert any(word in row for row in rows)
    for word in DISTINCT_V:
        assert any(word in col for col in cols)


def test_generate_with_too_few_attempts_gives_none():
    gen = _generator(DISTINCT_H, DISTINCT_V)
    assert generate(gen, 4) is None


def test_generate_reports_progress_when_not_silent(capsys):
    gen = _generator(DISTINCT_H, DISTINCT_V, silent=False)
    result = generate(gen, 10)
    out = capsys.readouterr().out
    assert result is not None
    assert "Generating word search puzzle..." in out
    assert "Applying simulated annealing optimization..." in out
    assert "Total optimization:" in out


def test_generate_silent_prints_nothing(capsys):
    gen = _generator(DISTINCT_H, DISTINCT_V)
    result = generate(gen, 10)
    assert result is not None
    assert capsys.readouterr().out == ""


def test_generate_result_is_a_grid_of_letters():
    gen = _generator(DISTINCT_H, DISTINCT_V, seed=3)
    grid, _ = generate(gen, 10)
    letters = {cell for row in grid.cells for cell in row if cell is not None}
    assert letters == set("".join(DISTINCT_H + DISTINCT_V))
    assert isinstance(grid, Grid) and grid.width >= 3 and grid.height >= 3