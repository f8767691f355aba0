"""Integration-style tests for the top-level solve interface."""

import pytest

from solver import solve_puzzle
from src.sudoku.model import Grid


def test_solves_string_puzzle(solved_grid):
    solution = solve_puzzle("H..A" "..H." ".H.." "A..H")
    assert solution == solved_grid


def test_accepts_record_rows_and_grid(solved_grid):
    puzzle = solved_grid.copy()
    puzzle.clear(1, 1)
    puzzle.clear(2, 3)

    assert solve_puzzle({"id": "x", "puzzle": puzzle.to_string()}) == solved_grid
    assert solve_puzzle(puzzle.rows()) == solved_grid
    assert solve_puzzle(puzzle) == solved_grid
    # The caller's grid is left alone.
    assert puzzle.is_empty(1, 1)


def test_unsatisfiable_returns_none():
    assert solve_puzzle("HOL." "...A" "...." "....") is None


def test_clashing_clues_return_none():
    assert solve_puzzle("HH..............") is None


def test_rejects_unknown_input_type():
    with pytest.raises(TypeError):
        solve_puzzle(42)
    with pytest.raises(ValueError):
        solve_puzzle({"id": "no-board"})
