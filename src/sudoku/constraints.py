"""Row / column / block uniqueness checks for a Grid."""

from typing import List

from .model import EMPTY, SIZE, Grid, Position, block_cells, block_of


def _peers(row: int, col: int) -> List[Position]:
    """Every other cell sharing a row, column, or block with (row, col)."""
    peers: List[Position] = []
    for c in range(SIZE):
        if c != col:
            peers.append((row, c))
    for r in range(SIZE):
        if r != row:
            peers.append((r, col))
    for r, c in block_cells(block_of(row, col)):
        # Row and column peers were already collected above.
        if r != row and c != col:
            peers.append((r, c))
    return peers


def is_valid(grid: Grid, row: int, col: int, value: str) -> bool:
    """
    Return True if `value` can sit at (row, col) without repeating a symbol
    in the same row, column, or block. The cell itself is ignored, so an
    already-placed value can be re-validated in place.
    """
    if value == EMPTY:
        raise ValueError("Cannot validate the empty sentinel as a candidate")
    if value not in grid.alphabet:
        raise ValueError(f"{value!r} is not in alphabet {grid.alphabet}")
    # Bounds check.
    grid.get(row, col)

    for r, c in _peers(row, col):
        if grid.cells[r][c] == value:
            return False
    return True


def conflicts(grid: Grid, row: int, col: int) -> List[Position]:
    """Cells that clash with the symbol currently at (row, col)."""
    value = grid.get(row, col)
    if value == EMPTY:
        return []
    return [(r, c) for r, c in _peers(row, col) if grid.cells[r][c] == value]


def is_consistent(grid: Grid) -> bool:
    """Check that no filled cell conflicts with another one."""
    for row in range(SIZE):
        for col in range(SIZE):
            value = grid.cells[row][col]
            if value != EMPTY and not is_valid(grid, row, col, value):
                return False
    return True


def is_solved(grid: Grid) -> bool:
    """Every row, column, and block is a permutation of the alphabet."""
    expected = sorted(grid.alphabet)
    for i in range(SIZE):
        for values in (grid.row_values(i), grid.col_values(i), grid.block_values(i)):
            if sorted(values) != expected:
                return False
    return True
