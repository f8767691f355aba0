"""4x4 HOLA Sudoku: grid model, constraint checks, solver, and puzzle generator."""

from .model import BLOCK_SIZE, EMPTY, LETTERS, SIZE, Grid, cell_position
from .constraints import conflicts, is_solved, is_valid
from .solver_core import SolverInvariantError, count_solutions, generate_full_board, solve
from .generator import PuzzlePair, generate_puzzle
from .session import GameSession, HintsExhaustedError

__all__ = [
    "BLOCK_SIZE",
    "EMPTY",
    "LETTERS",
    "SIZE",
    "Grid",
    "cell_position",
    "conflicts",
    "is_solved",
    "is_valid",
    "SolverInvariantError",
    "count_solutions",
    "generate_full_board",
    "solve",
    "PuzzlePair",
    "generate_puzzle",
    "GameSession",
    "HintsExhaustedError",
]
