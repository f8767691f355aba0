"""Game session state: one puzzle/solution pair plus the player's grid."""

import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constraints import conflicts, is_valid
from .generator import DEFAULT_MAX_CLUES, DEFAULT_MIN_CLUES, generate_puzzle
from .model import EMPTY, Grid, Position

MAX_HINTS = 999


class HintsExhaustedError(RuntimeError):
    """Raised when a hint is requested with no hints left."""


@dataclass
class EntryResult:
    row: int
    col: int
    value: str
    valid: bool
    solved: bool
    conflicts: List[Position] = field(default_factory=list)


@dataclass
class GameSession:
    """
    Owns a puzzle, its solution, and the grid the player is filling in.
    Clue cells are read-only; every entry is checked against the
    row/column/block rules so a UI can flag mistakes as they happen.
    """

    puzzle: Grid
    solution: Grid
    hints_left: int = MAX_HINTS
    rng: Optional[random.Random] = None
    user_grid: Grid = field(init=False)

    def __post_init__(self) -> None:
        if self.puzzle.alphabet != self.solution.alphabet:
            raise ValueError("Puzzle and solution use different alphabets")
        self.user_grid = self.puzzle.copy()

    @classmethod
    def new(
        cls,
        min_clues: int = DEFAULT_MIN_CLUES,
        max_clues: int = DEFAULT_MAX_CLUES,
        rng: Optional[random.Random] = None,
        max_hints: int = MAX_HINTS,
    ) -> "GameSession":
        pair = generate_puzzle(min_clues, max_clues, rng=rng)
        return cls(puzzle=pair.puzzle, solution=pair.solution, hints_left=max_hints, rng=rng)

    def is_fixed(self, row: int, col: int) -> bool:
        return not self.puzzle.is_empty(row, col)

    def enter(self, row: int, col: int, value: str) -> EntryResult:
        """Place (or clear, with EMPTY) a symbol in a non-clue cell."""
        if self.is_fixed(row, col):
            raise ValueError(f"Cell ({row}, {col}) is a clue and cannot be changed")
        self.user_grid.set(row, col, value)

        valid = True
        clashes = []
        if value != EMPTY:
            valid = is_valid(self.user_grid, row, col, value)
            clashes = conflicts(self.user_grid, row, col)
        return EntryResult(
            row=row,
            col=col,
            value=value,
            valid=valid,
            solved=self.is_won(),
            conflicts=clashes,
        )

    def is_won(self) -> bool:
        return self.user_grid == self.solution

    def use_hint(self) -> Optional[Tuple[int, int, str]]:
        """Fill a random empty cell with its solution value."""
        if self.hints_left <= 0:
            raise HintsExhaustedError("No hints left")
        empty: List[Position] = self.user_grid.empty_cells()
        if not empty:
            return None

        row, col = (self.rng or random).choice(empty)
        value = self.solution.get(row, col)
        self.enter(row, col, value)
        self.hints_left -= 1
        return row, col, value

    def reset(self) -> None:
        self.user_grid = self.puzzle.copy()
