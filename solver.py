"""Top-level solve interface.

Expose `solve_puzzle(puzzle)` that accepts a Grid, a flat 16-character board
string, a list of rows, or a puzzle record compatible with
`src.sudoku.loader.load_puzzles`.
"""

from typing import Any, Optional

from src.sudoku import solver_core
from src.sudoku.model import Grid


def to_grid(puzzle: Any) -> Grid:
    if isinstance(puzzle, Grid):
        return puzzle.copy()
    if isinstance(puzzle, str):
        return Grid.from_string(puzzle)
    if isinstance(puzzle, dict):
        board = puzzle.get("puzzle")
        if not isinstance(board, str):
            raise ValueError("Puzzle record has no 'puzzle' board string")
        return Grid.from_string(board)
    if isinstance(puzzle, (list, tuple)):
        return Grid.from_rows(puzzle)
    raise TypeError("solve_puzzle expects a Grid, board string, list of rows, or puzzle dictionary")


def solve_puzzle(puzzle: Any) -> Optional[Grid]:
    """
    Solve a puzzle and return the completed grid, or None if it has no solution.
    The input is never modified.
    """
    grid = to_grid(puzzle)
    if not solver_core.solve(grid, randomized=False):
        return None
    return grid


__all__ = ["solve_puzzle", "to_grid"]
