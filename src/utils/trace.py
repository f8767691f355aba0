"""Tracing module: logs solver and generator steps and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the solving or generation process."""

    timestamp: float
    step_number: int
    action_type: str  # 'assign', 'backtrack', 'solution_found', 'hole_dug', ...
    cell: Optional[str] = None  # "r<row>c<col>"
    value: Optional[Any] = None
    empty_cells: Optional[int] = None  # Empty cells left after the step
    solutions: Optional[int] = None
    reason: Optional[str] = None  # Why backtracking occurred, etc.


def _cell_label(row: int, col: int) -> str:
    return f"r{row}c{col}"


class Tracer:
    """Records solver steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **fields,
        ))

    def log_assign(self, row: int, col: int, value: Any, empty_cells: int):
        """Log a tentative placement."""
        if not self.enabled:
            return
        self._record('assign', cell=_cell_label(row, col), value=str(value), empty_cells=empty_cells)

    def log_backtrack(self, row: int, col: int, reason: str = "No valid values"):
        """Log a backtrack event."""
        if not self.enabled:
            return
        self._record('backtrack', cell=_cell_label(row, col), reason=reason)

    def log_solution_found(self, empty_cells: int = 0):
        """Log when a complete grid is reached."""
        if not self.enabled:
            return
        self._record('solution_found', empty_cells=empty_cells)

    def log_count_pruned(self, solutions: int):
        """Log an early exit of the solution counter."""
        if not self.enabled:
            return
        self._record('count_pruned', solutions=solutions, reason="More than one solution")

    def log_board_generated(self):
        if not self.enabled:
            return
        self._record('board_generated', empty_cells=0)

    def log_hole_dug(self, row: int, col: int, empty_cells: int):
        """Log a cell that was blanked while keeping a unique solution."""
        if not self.enabled:
            return
        self._record('hole_dug', cell=_cell_label(row, col), empty_cells=empty_cells, solutions=1)

    def log_hole_restored(self, row: int, col: int, value: Any, solutions: int):
        """Log a removal that was undone because uniqueness was lost."""
        if not self.enabled:
            return
        self._record(
            'hole_restored',
            cell=_cell_label(row, col),
            value=str(value),
            solutions=solutions,
            reason="Removal breaks uniqueness",
        )

    def log_shortfall(self, clues: int, target: int):
        """Log a puzzle that kept more clues than requested."""
        if not self.enabled:
            return
        self._record('shortfall', reason=f"Kept {clues} clues, wanted {target}")

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'cell', 'value',
            'empty_cells', 'solutions', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_assignments': action_counts.get('assign', 0),
            'num_backtracks': action_counts.get('backtrack', 0),
            'num_holes': action_counts.get('hole_dug', 0),
        }


# Global tracer instance; disabled until enable_tracing() is called.
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=False)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
