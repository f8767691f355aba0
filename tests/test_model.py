"""Unit tests for the grid model and cell-index helpers."""

import pytest

from src.sudoku.model import EMPTY, Grid, block_cells, block_of, cell_position


def test_new_grid_is_empty():
    grid = Grid()
    assert grid.empty_cells() == [(r, c) for r in range(4) for c in range(4)]
    assert grid.first_empty() == (0, 0)
    assert grid.clue_count() == 0


def test_cell_position_maps_index_to_row_col_block():
    assert cell_position(0) == (0, 0, 0)
    assert cell_position(3) == (0, 3, 1)
    assert cell_position(9) == (2, 1, 2)
    assert cell_position(15) == (3, 3, 3)
    with pytest.raises(IndexError):
        cell_position(16)


def test_block_helpers_agree():
    for block in range(4):
        for row, col in block_cells(block):
            assert block_of(row, col) == block
    assert block_cells(1) == [(0, 2), (0, 3), (1, 2), (1, 3)]


def test_string_encoding(solved_grid):
    assert solved_grid.to_string() == "HOLALAHOOHALALOH"
    puzzle = Grid.from_string("H.LA ..HO O..L A.OH")
    assert puzzle.get(0, 1) == EMPTY
    assert puzzle.get(3, 2) == "O"
    assert puzzle.clue_count() == 10


def test_copy_is_independent(solved_grid):
    clone = solved_grid.copy()
    clone.clear(0, 0)
    assert solved_grid.get(0, 0) == "H"
    assert clone != solved_grid


def test_out_of_range_access_raises():
    grid = Grid()
    with pytest.raises(IndexError):
        grid.get(4, 0)
    with pytest.raises(IndexError):
        grid.set(0, -1, "H")


def test_unknown_symbol_raises():
    grid = Grid()
    with pytest.raises(ValueError):
        grid.set(0, 0, "Z")
    with pytest.raises(ValueError):
        Grid.from_string("HOLAZ...........")


def test_wrong_shape_raises():
    with pytest.raises(ValueError):
        Grid.from_rows([["H", "O", "L", "A"]])
    with pytest.raises(ValueError):
        Grid.from_string("HOLA")


def test_alphabet_must_have_four_distinct_symbols():
    with pytest.raises(ValueError):
        Grid(alphabet=("1", "2", "3"))
    with pytest.raises(ValueError):
        Grid(alphabet=("1", "1", "2", "3"))
    grid = Grid(alphabet=("1", "2", "3", "4"))
    grid.set(0, 0, "4")
    assert grid.get(0, 0) == "4"
