"""Grid data model, alphabet constants, and cell-index helpers."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

SIZE = 4
BLOCK_SIZE = 2
LETTERS: Tuple[str, ...] = ("H", "O", "L", "A")
EMPTY = ""

# Placeholder used for empty cells in the flat string encoding.
EMPTY_CHAR = "."

Position = Tuple[int, int]


def cell_position(index: int) -> Tuple[int, int, int]:
    """Map a linear (row-major) cell index to (row, col, block)."""
    if not 0 <= index < SIZE * SIZE:
        raise IndexError(f"Cell index {index} out of range")
    row, col = divmod(index, SIZE)
    return row, col, block_of(row, col)


def block_of(row: int, col: int) -> int:
    blocks_per_row = SIZE // BLOCK_SIZE
    return (row // BLOCK_SIZE) * blocks_per_row + (col // BLOCK_SIZE)


def block_cells(block: int) -> List[Position]:
    """All positions inside a block, row-major."""
    blocks_per_row = SIZE // BLOCK_SIZE
    if not 0 <= block < blocks_per_row * blocks_per_row:
        raise IndexError(f"Block index {block} out of range")
    start_row = (block // blocks_per_row) * BLOCK_SIZE
    start_col = (block % blocks_per_row) * BLOCK_SIZE
    return [
        (start_row + r, start_col + c)
        for r in range(BLOCK_SIZE)
        for c in range(BLOCK_SIZE)
    ]


def all_positions() -> List[Position]:
    return [cell_position(i)[:2] for i in range(SIZE * SIZE)]


@dataclass
class Grid:
    """
    A SIZE x SIZE board of cell values. A cell holds either EMPTY or one
    symbol of the alphabet. Access is bounds-checked; there is no solving
    logic here.
    """

    alphabet: Tuple[str, ...] = LETTERS
    cells: List[List[str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.alphabet = tuple(self.alphabet)
        if len(self.alphabet) != SIZE or len(set(self.alphabet)) != SIZE:
            raise ValueError(f"Alphabet must hold exactly {SIZE} distinct symbols")
        if EMPTY in self.alphabet:
            raise ValueError("The empty sentinel cannot be an alphabet symbol")

        if not self.cells:
            self.cells = [[EMPTY] * SIZE for _ in range(SIZE)]
            return

        if len(self.cells) != SIZE or any(len(row) != SIZE for row in self.cells):
            raise ValueError(f"Grid must be {SIZE}x{SIZE}")
        self.cells = [list(row) for row in self.cells]
        for row in self.cells:
            for value in row:
                self._check_value(value)

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[Optional[str]]], alphabet: Iterable[str] = LETTERS
    ) -> "Grid":
        # Accept None as an alias for the empty sentinel.
        cells = [[EMPTY if v is None else v for v in row] for row in rows]
        return cls(alphabet=tuple(alphabet), cells=cells)

    @classmethod
    def from_string(cls, text: str, alphabet: Iterable[str] = LETTERS) -> "Grid":
        """Parse the flat row-major encoding, e.g. 'HOLA....' with '.' for empty."""
        chars = [c for c in text if not c.isspace()]
        if len(chars) != SIZE * SIZE:
            raise ValueError(
                f"Expected {SIZE * SIZE} cells, got {len(chars)} in {text!r}"
            )
        values = [EMPTY if c == EMPTY_CHAR else c for c in chars]
        rows = [values[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]
        return cls.from_rows(rows, alphabet)

    def to_string(self) -> str:
        return "".join(v if v != EMPTY else EMPTY_CHAR for row in self.cells for v in row)

    def rows(self) -> List[List[str]]:
        return [list(row) for row in self.cells]

    def copy(self) -> "Grid":
        return Grid(alphabet=self.alphabet, cells=self.rows())

    def get(self, row: int, col: int) -> str:
        self._check_position(row, col)
        return self.cells[row][col]

    def set(self, row: int, col: int, value: str) -> None:
        self._check_position(row, col)
        self._check_value(value)
        self.cells[row][col] = value

    def clear(self, row: int, col: int) -> None:
        self.set(row, col, EMPTY)

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) == EMPTY

    def first_empty(self) -> Optional[Position]:
        """First empty cell in row-major order, or None when the grid is full."""
        for index in range(SIZE * SIZE):
            row, col, _ = cell_position(index)
            if self.cells[row][col] == EMPTY:
                return row, col
        return None

    def empty_cells(self) -> List[Position]:
        return [(r, c) for r, c in all_positions() if self.cells[r][c] == EMPTY]

    def clue_count(self) -> int:
        return SIZE * SIZE - len(self.empty_cells())

    def is_complete(self) -> bool:
        return self.first_empty() is None

    def row_values(self, row: int) -> List[str]:
        self._check_position(row, 0)
        return list(self.cells[row])

    def col_values(self, col: int) -> List[str]:
        self._check_position(0, col)
        return [self.cells[r][col] for r in range(SIZE)]

    def block_values(self, block: int) -> List[str]:
        return [self.cells[r][c] for r, c in block_cells(block)]

    def __str__(self) -> str:
        lines = []
        for r, row in enumerate(self.cells):
            if r and r % BLOCK_SIZE == 0:
                lines.append("-" * (SIZE * 2 + 1))
            chunks = []
            for c, value in enumerate(row):
                if c and c % BLOCK_SIZE == 0:
                    chunks.append("|")
                chunks.append(value or EMPTY_CHAR)
            lines.append(" ".join(chunks))
        return "\n".join(lines)

    def _check_position(self, row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"Cell ({row}, {col}) is outside the {SIZE}x{SIZE} grid")

    def _check_value(self, value: str) -> None:
        if value != EMPTY and value not in self.alphabet:
            raise ValueError(f"{value!r} is not in alphabet {self.alphabet}")
