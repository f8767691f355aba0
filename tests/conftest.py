import pytest

from src.sudoku.model import Grid
from src.utils.trace import reset_tracer

# Solved board used across the tests:
#   H O | L A
#   L A | H O
#   ----+----
#   O H | A L
#   A L | O H
HOLA_ROWS = [
    ["H", "O", "L", "A"],
    ["L", "A", "H", "O"],
    ["O", "H", "A", "L"],
    ["A", "L", "O", "H"],
]


@pytest.fixture(autouse=True)
def _fresh_tracer():
    reset_tracer()
    yield
    reset_tracer()


@pytest.fixture
def solved_grid() -> Grid:
    return Grid.from_rows(HOLA_ROWS)
