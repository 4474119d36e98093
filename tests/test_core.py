"""Tests for core data structures."""

import pytest

from ascii_splash.core.cell import BLANK, Cell
from ascii_splash.core.color import Color
from ascii_splash.core.grid import GridSnapshot
from ascii_splash.core.size import InvalidSizeError, Size


class TestSize:
    """Tests for Size validation."""

    def test_valid_size(self) -> None:
        size = Size(80, 24)
        assert size.width == 80
        assert size.height == 24

    def test_zero_size_is_allowed(self) -> None:
        size = Size(0, 0)
        assert not size.contains(0, 0)

    @pytest.mark.parametrize("width,height", [(-1, 5), (5, -1), (2.5, 3), (3, "4"), (True, 2)])
    def test_invalid_dimensions(self, width, height) -> None:
        with pytest.raises(InvalidSizeError):
            Size(width, height)

    def test_invalid_size_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Size(-3, 1)

    def test_contains(self) -> None:
        size = Size(3, 2)
        assert size.contains(0, 0)
        assert size.contains(2, 1)
        assert not size.contains(3, 0)
        assert not size.contains(0, 2)
        assert not size.contains(-1, 0)

    @pytest.mark.parametrize(
        "x,y", [(1.5, 0), (0, 0.5), (1.0, 1), (float("nan"), 0), (None, 0), (0, None), (True, 0)]
    )
    def test_contains_only_int_coordinates(self, x, y) -> None:
        assert not Size(3, 2).contains(x, y)


class TestColor:
    """Tests for Color."""

    def test_clamped(self) -> None:
        assert Color.clamped(300, -20, 127.6) == Color(255, 0, 128)

    def test_value_equality(self) -> None:
        assert Color(1, 2, 3) == Color(1, 2, 3)
        assert Color(1, 2, 3) != Color(1, 2, 4)

    def test_scaled(self) -> None:
        assert Color(100, 200, 50).scaled(0.5) == Color(50, 100, 25)

    def test_sgr(self) -> None:
        assert Color(255, 0, 0).to_sgr_fg() == "38;2;255;0;0"
        assert Color(0, 0, 255).to_sgr_bg() == "48;2;0;0;255"


class TestCell:
    """Tests for Cell equality and defaults."""

    def test_default_cell_is_blank(self) -> None:
        cell = Cell()
        assert cell.char == ' '
        assert cell.color is None
        assert cell.background is None
        assert cell.bold is None
        assert cell == BLANK

    def test_cells_are_immutable(self) -> None:
        with pytest.raises(AttributeError):
            BLANK.char = 'X'  # type: ignore[misc]

    def test_equal_when_all_fields_equal(self) -> None:
        assert Cell('A', Color(1, 2, 3), bold=True) == Cell('A', Color(1, 2, 3), bold=True)

    def test_absent_differs_from_explicit(self) -> None:
        assert Cell('A') != Cell('A', bold=False)
        assert Cell(' ') != Cell(' ', color=Color(0, 0, 0))
        assert Cell(' ') != Cell(' ', background=Color(0, 0, 0))

    def test_color_difference(self) -> None:
        assert Cell('A', Color(0, 0, 0)) != Cell('A', Color(0, 0, 1))


class TestGridSnapshot:
    """Tests for GridSnapshot."""

    def test_new_grid_is_blank(self) -> None:
        grid = GridSnapshot(Size(4, 3))
        assert grid.width == 4
        assert grid.height == 3
        assert all(cell == BLANK for _, _, cell in grid.cells())

    def test_get_set(self) -> None:
        grid = GridSnapshot(Size(4, 3))
        assert grid.set(2, 1, Cell('A')) is True
        assert grid.get(2, 1) == Cell('A')

    def test_out_of_bounds(self) -> None:
        grid = GridSnapshot(Size(4, 3))
        for x, y in [(-1, 0), (4, 0), (0, -1), (0, 3)]:
            assert grid.get(x, y) is None
            assert grid.set(x, y, Cell('Z')) is False
        assert all(cell == BLANK for _, _, cell in grid.cells())

    def test_fill(self) -> None:
        grid = GridSnapshot(Size(2, 2))
        grid.set(0, 0, Cell('A'))
        grid.fill()
        assert grid == GridSnapshot(Size(2, 2))

    def test_cells_are_row_major(self) -> None:
        grid = GridSnapshot(Size(2, 2))
        assert [(x, y) for x, y, _ in grid.cells()] == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_rows_are_copies(self) -> None:
        grid = GridSnapshot(Size(2, 1))
        row = next(grid.rows())
        row[0] = Cell('X')
        assert grid.get(0, 0) == BLANK

    def test_empty_grid(self) -> None:
        grid = GridSnapshot(Size(0, 0))
        assert list(grid.cells()) == []
        assert grid.get(0, 0) is None

    def test_copy_is_independent(self) -> None:
        grid = GridSnapshot(Size(3, 2))
        grid.set(1, 1, Cell('A'))
        clone = grid.copy()
        assert clone == grid
        clone.set(0, 0, Cell('B'))
        grid.set(2, 1, Cell('C'))
        assert grid.get(0, 0) == BLANK
        assert clone.get(2, 1) == BLANK
        assert clone.get(1, 1) == Cell('A')

    @pytest.mark.parametrize("x,y", [(1.5, 0), (0, 0.5), (float("nan"), 0), (None, 0)])
    def test_non_int_coordinates(self, x, y) -> None:
        grid = GridSnapshot(Size(4, 3))
        assert grid.in_bounds(x, y) is False
        assert grid.get(x, y) is None
        assert grid.set(x, y, Cell('Z')) is False
        assert all(cell == BLANK for _, _, cell in grid.cells())
