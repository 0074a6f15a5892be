import pytest

from wordgridgen.grid import Direction, Grid, PlacedWord


def test_new_grid_is_empty():
    grid = Grid(4, 3)
    assert grid.width == 4
    assert grid.height == 3
    assert all(cell is None for row in grid.cells for cell in row)


def test_horizontal_word_must_fit_left_of_anchor():
    grid = Grid(10, 10)
    assert not grid.can_place_word("HELLO", 0, 3, Direction.HORIZONTAL)
    assert grid.can_place_word("HELLO", 0, 4, Direction.HORIZONTAL)


def test_vertical_word_must_fit_above_anchor():
    grid = Grid(10, 10)
    assert not grid.can_place_word("HELLO", 3, 0, Direction.VERTICAL)
    assert grid.can_place_word("HELLO", 4, 0, Direction.VERTICAL)


def test_out_of_bounds_anchor_rejected():
    grid = Grid(5, 5)
    assert not grid.can_place_word("AB", 5, 2, Direction.HORIZONTAL)
    assert not grid.can_place_word("AB", 2, 5, Direction.VERTICAL)


def test_place_horizontal_writes_letters_ending_at_anchor():
    grid = Grid(6, 2)
    assert grid.place_word("CAT", 1, 4, Direction.HORIZONTAL)
    assert grid.cells[1][2:5] == list("CAT")
    assert grid.cells[0] == [None] * 6


def test_place_vertical_writes_letters_ending_at_anchor():
    grid = Grid(3, 6)
    assert grid.place_word("DOG", 4, 1, Direction.VERTICAL)
    assert [grid.cells[r][1] for r in range(2, 5)] == list("DOG")


def test_clash_is_refused_and_grid_unchanged():
    grid = Grid(6, 6)
    grid.place_word("CAT", 2, 4, Direction.HORIZONTAL)
    before = [row[:] for row in grid.cells]
    assert not grid.place_word("DOG", 2, 2, Direction.VERTICAL)
    assert grid.cells == before


def test_crossing_on_shared_letter_is_allowed():
    grid = Grid(6, 6)
    grid.place_word("CAT", 2, 4, Direction.HORIZONTAL)
    # "BAR" vertical through column 3 with 'A' on row 2
    assert grid.place_word("BAR", 3, 3, Direction.VERTICAL)
    assert [grid.cells[r][3] for r in range(1, 4)] == list("BAR")
    assert grid.cells[2][2:5] == list("CAT")


def test_remove_word_clears_its_cells():
    grid = Grid(6, 6)
    grid.place_word("CAT", 0, 2, Direction.HORIZONTAL)
    grid.remove_word(PlacedWord("CAT", 0, 0, Direction.HORIZONTAL))
    assert all(cell is None for row in grid.cells for cell in row)


def test_placed_word_cells():
    placed = PlacedWord("ABC", 1, 2, Direction.VERTICAL)
    assert placed.cells() == [(1, 2), (2, 2), (3, 2)]


def test_used_area_of_empty_grid():
    grid = Grid(5, 5)
    assert grid.calculate_used_area() == (0, 0, 0, 0)
    assert grid.get_used_dimensions() == (1, 1)


def test_used_area_and_dimensions():
    grid = Grid(10, 10)
    grid.place_word("CAT", 2, 6, Direction.HORIZONTAL)
    grid.place_word("TOP", 7, 6, Direction.VERTICAL)
    assert grid.calculate_used_area() == (2, 7, 4, 6)
    assert grid.get_used_dimensions() == (6, 3)


def test_compact_crops_and_reports_offset():
    grid = Grid(10, 10)
    grid.place_word("CAT", 2, 6, Direction.HORIZONTAL)
    offset = grid.compact()
    assert offset == (2, 4)
    assert (grid.height, grid.width) == (1, 3)
    assert grid.cells == [list("CAT")]


def test_remove_empty_rows_and_columns():
    grid = Grid(5, 5)
    grid.cells[1][1] = "A"
    grid.cells[3][3] = "B"
    assert grid.try_remove_empty_rows_cols()
    assert grid.cells == [["A", None], [None, "B"]]
    assert (grid.height, grid.width) == (2, 2)
    assert not grid.try_remove_empty_rows_cols()


def test_render_trimmed_shows_used_area():
    grid = Grid(8, 8)
    grid.place_word("CAT", 3, 5, Direction.HORIZONTAL)
    assert grid.render() == "C A T \n"


def test_render_full_grid():
    grid = Grid(3, 2)
    grid.place_word("CAT", 0, 2, Direction.HORIZONTAL)
    lines = grid.render(trimmed=False).splitlines()
    assert lines == ["C A T ", ". . . "]


@pytest.mark.parametrize("direction", list(Direction))
def test_place_then_remove_round_trip(direction):
    grid = Grid(7, 7)
    grid.place_word("WORD", 5, 5, direction)
    if direction is Direction.HORIZONTAL:
        placed = PlacedWord("WORD", 5, 2, direction)
    else:
        placed = PlacedWord("WORD", 2, 5, direction)
    assert [grid.cells[r][c] for r, c in placed.cells()] == list("WORD")
    grid.remove_word(placed)
    assert all(cell is None for row in grid.cells for cell in row)