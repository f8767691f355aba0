"""Tests for the solver tracer."""

from src.utils.trace import Tracer, enable_tracing, get_tracer, reset_tracer


def test_tracer_captures_steps(tmp_path):
    tracer = Tracer()
    tracer.log_assign(0, 1, "O", empty_cells=10)
    tracer.log_backtrack(0, 2)
    tracer.log_solution_found()
    tracer.log_hole_dug(3, 3, empty_cells=1)
    tracer.log_hole_restored(2, 2, "A", solutions=2)

    summary = tracer.summary()
    assert summary["total_steps"] == 5
    assert summary["num_assignments"] == 1
    assert summary["num_backtracks"] == 1
    assert summary["num_holes"] == 1
    assert tracer.steps[0].cell == "r0c1"

    output_path = tmp_path / "trace" / "steps.csv"
    tracer.to_csv(output_path)
    lines = output_path.read_text().splitlines()
    assert lines[0].startswith("timestamp,step_number,action_type,cell")
    assert len(lines) == 6


def test_disabled_tracer_records_nothing():
    tracer = Tracer(enabled=False)
    tracer.log_assign(0, 0, "H", empty_cells=15)
    assert tracer.steps == []


def test_global_tracer_starts_disabled_and_resets():
    first = get_tracer()
    assert get_tracer() is first
    assert not first.enabled

    enable_tracing()
    first.log_assign(0, 0, "H", empty_cells=15)
    assert len(first.steps) == 1

    reset_tracer()
    assert get_tracer() is not first
    assert not get_tracer().enabled
    assert get_tracer().steps == []
