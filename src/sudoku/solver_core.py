"""Backtracking solver and bounded solution counter for 4x4 grids."""

import random
from typing import List, Optional, Tuple

from .constraints import is_consistent, is_valid
from .model import EMPTY, LETTERS, Grid
from src.utils.trace import Tracer, get_tracer


class SolverInvariantError(RuntimeError):
    """Raised when a search that must succeed (e.g. from an empty board) fails."""


def solve(
    grid: Grid,
    randomized: bool = False,
    rng: Optional[random.Random] = None,
    tracer: Optional[Tracer] = None,
) -> bool:
    """
    Fill `grid` in place by backtracking over empty cells in row-major order.
    With `randomized`, each cell tries the alphabet in a shuffled order.
    Returns False (leaving the grid as it was) if no completion exists,
    including when the filled cells already clash.
    """
    tracer = tracer or get_tracer()
    if not is_consistent(grid):
        return False
    rng = rng or random
    return _backtrack(grid, randomized, rng, tracer)


def _backtrack(grid: Grid, randomized: bool, rng, tracer: Tracer) -> bool:
    cell = grid.first_empty()
    if cell is None:
        tracer.log_solution_found()
        return True
    row, col = cell

    for value in _order_candidates(grid, randomized, rng):
        if not is_valid(grid, row, col, value):
            continue
        grid.cells[row][col] = value
        tracer.log_assign(row, col, value, empty_cells=len(grid.empty_cells()))
        if _backtrack(grid, randomized, rng, tracer):
            return True
        grid.cells[row][col] = EMPTY

    tracer.log_backtrack(row, col)
    return False


def _order_candidates(grid: Grid, randomized: bool, rng) -> List[str]:
    candidates = list(grid.alphabet)
    if randomized:
        # random.shuffle is a Fisher-Yates shuffle.
        rng.shuffle(candidates)
    return candidates


def count_solutions(grid: Grid, limit: int = 2, tracer: Optional[Tracer] = None) -> int:
    """
    Count completions of `grid`, stopping once `limit` have been found.
    With the default limit the result is 0, 1, or 2 (meaning "more than one").
    Works on a copy; the caller's grid is left untouched.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    tracer = tracer or get_tracer()
    if not is_consistent(grid):
        return 0
    work = grid.copy()
    count = _count(work, 0, limit)
    if count >= limit:
        tracer.log_count_pruned(count)
    return count


def _count(grid: Grid, count: int, limit: int) -> int:
    cell = grid.first_empty()
    if cell is None:
        return count + 1
    row, col = cell

    for value in grid.alphabet:
        if not is_valid(grid, row, col, value):
            continue
        grid.cells[row][col] = value
        count = _count(grid, count, limit)
        grid.cells[row][col] = EMPTY
        if count >= limit:
            break
    return count


def generate_full_board(
    rng: Optional[random.Random] = None,
    alphabet: Tuple[str, ...] = LETTERS,
    tracer: Optional[Tracer] = None,
) -> Grid:
    """Build a random, fully solved grid."""
    tracer = tracer or get_tracer()
    board = Grid(alphabet=alphabet)
    if not solve(board, randomized=True, rng=rng, tracer=tracer):
        raise SolverInvariantError("Could not complete an empty board")
    tracer.log_board_generated()
    return board
