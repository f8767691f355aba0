"""CLI entrypoint: generate puzzle batches, or load puzzle(s), solve, and report metrics."""

import argparse
import csv
import random
from pathlib import Path

from solver import solve_puzzle, to_grid
from src.sudoku.generator import DEFAULT_MAX_CLUES, DEFAULT_MIN_CLUES, generate_puzzle
from src.sudoku.loader import grid_to_record, load_puzzles, record_to_grid, save_puzzles
from src.sudoku.solver_core import count_solutions
from src.utils.trace import enable_tracing, get_tracer, reset_tracer

PUZZLE_SUFFIXES = [".json", ".jsonl", ".parquet", ".csv"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate and solve 4x4 HOLA Sudoku puzzles")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate puzzles with a unique solution")
    gen.add_argument("--count", type=int, default=1, help="Number of puzzles to generate")
    gen.add_argument("--min-clues", type=int, default=DEFAULT_MIN_CLUES)
    gen.add_argument("--max-clues", type=int, default=DEFAULT_MAX_CLUES)
    gen.add_argument("--seed", type=str, default=None, help="Seed for reproducible output")
    gen.add_argument("--output", type=Path, default=None, help="Puzzle file (.jsonl, .json, .csv, .parquet)")
    gen.add_argument("--trace", type=Path, default=None, help="Optional CSV path for the generation trace")

    slv = sub.add_parser("solve", help="Solve puzzles from a file or directory")
    slv.add_argument("input", type=Path, help="Path to puzzle file or directory of puzzles")
    slv.add_argument("--output", type=Path, default=None, help="Optional path to write solutions (CSV)")
    slv.add_argument("--trace-dir", type=Path, default=None, help="Optional directory for per-puzzle trace CSVs")
    return parser.parse_args(argv)


def generate_batch(count: int, min_clues: int, max_clues: int, seed=None) -> list[dict]:
    rng = random.Random(seed) if seed is not None else random.Random()
    records = []
    for i in range(count):
        pair = generate_puzzle(min_clues, max_clues, rng=rng)
        records.append(grid_to_record(f"puzzle{i}", pair.puzzle, pair.solution))
    return records


def solve_record(record: dict) -> dict:
    """Solve one record; 'steps' is the number of placements the solver tried."""
    reset_tracer()
    enable_tracing()
    tracer = get_tracer()
    puzzle_id = record.get("id", "unknown")

    solution = solve_puzzle(record)
    steps = tracer.summary()["num_assignments"]
    if solution is None:
        return {"id": puzzle_id, "solution": "", "unique": False, "status": "unsolved", "steps": steps}

    unique = count_solutions(to_grid(record)) == 1
    expected = record_to_grid(record, "solution")
    status = "solved"
    if expected is not None and unique and solution != expected:
        status = "mismatch"
    return {
        "id": puzzle_id,
        "solution": solution.to_string(),
        "unique": unique,
        "status": status,
        "steps": steps,
    }


def write_results_csv(results, output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "solution", "unique", "status", "steps"])

        for r in results:
            writer.writerow([r["id"], r["solution"], r["unique"], r["status"], r["steps"]])


def _load_inputs(path: Path) -> list[dict]:
    if path.is_file():
        return load_puzzles(str(path))
    if path.is_dir():
        puzzles = []
        for file_path in sorted(path.iterdir()):
            if file_path.suffix in PUZZLE_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
        return puzzles
    raise ValueError(f"Input path {path} is neither file nor directory")


def run_generate(args) -> list[dict]:
    reset_tracer()
    enable_tracing(args.trace is not None)
    records = generate_batch(args.count, args.min_clues, args.max_clues, args.seed)
    if args.trace:
        get_tracer().to_csv(args.trace)

    if args.output:
        save_puzzles(records, args.output)
        print(f"Wrote {len(records)} puzzles to {args.output}")
    else:
        for record in records:
            print(f"{record['id']} ({record['clues']} clues)")
            print(record_to_grid(record))
            print()
    return records


def run_solve(args) -> list[dict]:
    results = []
    for puzzle in _load_inputs(args.input):
        puzzle_id = puzzle.get("id", "unknown")
        try:
            result = solve_record(puzzle)
        except Exception as e:
            print(f"ERROR: Failed to solve puzzle {puzzle_id}: {e}")
            result = {"id": puzzle_id, "solution": "", "unique": False, "status": "error", "steps": -1}
        results.append(result)

        if args.trace_dir:
            get_tracer().to_csv(args.trace_dir / f"{puzzle_id}.csv")

    if args.output:
        write_results_csv(results, args.output)
    else:
        print(results)
    return results


def main(argv=None):
    args = parse_args(argv)
    if args.command == "generate":
        return run_generate(args)
    return run_solve(args)


if __name__ == "__main__":
    main()
