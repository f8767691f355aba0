"""Puzzle generation by hole-digging a random full board."""

import random
from typing import NamedTuple, Optional, Tuple

from .model import EMPTY, LETTERS, SIZE, Grid, all_positions
from .solver_core import count_solutions, generate_full_board
from src.utils.trace import Tracer, get_tracer

DEFAULT_MIN_CLUES = 6
DEFAULT_MAX_CLUES = 8


class PuzzlePair(NamedTuple):
    puzzle: Grid
    solution: Grid


def generate_puzzle(
    min_clues: int = DEFAULT_MIN_CLUES,
    max_clues: int = DEFAULT_MAX_CLUES,
    rng: Optional[random.Random] = None,
    alphabet: Tuple[str, ...] = LETTERS,
    tracer: Optional[Tracer] = None,
) -> PuzzlePair:
    """
    Generate a puzzle with a unique solution.

    A full board is built first, then cells are blanked in a random order.
    A blank is kept only if the puzzle still has exactly one completion.
    The clue target is drawn from [min_clues, max_clues]; if too few cells
    can be removed the puzzle keeps more clues than asked for.
    """
    if min_clues < 0 or max_clues > SIZE * SIZE or min_clues > max_clues:
        raise ValueError(
            f"Invalid clue range [{min_clues}, {max_clues}] for a {SIZE}x{SIZE} grid"
        )
    tracer = tracer or get_tracer()
    rng = rng or random

    solution = generate_full_board(rng=rng, alphabet=alphabet, tracer=tracer)
    puzzle = solution.copy()

    target_clues = rng.randint(min_clues, max_clues)
    to_remove = SIZE * SIZE - target_clues

    positions = all_positions()
    rng.shuffle(positions)

    for row, col in positions:
        if to_remove <= 0:
            break
        backup = puzzle.cells[row][col]
        puzzle.cells[row][col] = EMPTY

        solutions = count_solutions(puzzle, tracer=tracer)
        if solutions != 1:
            puzzle.cells[row][col] = backup
            tracer.log_hole_restored(row, col, backup, solutions)
            continue
        to_remove -= 1
        tracer.log_hole_dug(row, col, empty_cells=len(puzzle.empty_cells()))

    if to_remove > 0:
        tracer.log_shortfall(puzzle.clue_count(), target_clues)

    return PuzzlePair(puzzle=puzzle, solution=solution)
