import json
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from .model import SIZE, Grid

RECORD_COLUMNS = ["id", "puzzle", "solution", "clues"]


def grid_to_record(puzzle_id: str, puzzle: Grid, solution: Optional[Grid] = None) -> Dict[str, Any]:
    return {
        "id": puzzle_id,
        "puzzle": puzzle.to_string(),
        "solution": solution.to_string() if solution is not None else None,
        "clues": puzzle.clue_count(),
    }


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads puzzles from a file. Handles .parquet, .csv, .json and .jsonl formats.
    Returns a list of raw puzzle dictionaries with at least a 'puzzle' string.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    def _is_nonempty_str(value: Any) -> bool:
        return isinstance(value, str) and value.strip() != ""

    def _normalize_record(record: Dict[str, Any], index: int) -> Optional[Dict[str, Any]]:
        # Older dumps used 'board' / 'grid' for the puzzle column.
        for key in ("puzzle", "board", "grid"):
            if _is_nonempty_str(record.get(key)):
                record["puzzle"] = record[key].strip()
                break
        else:
            return None

        if record.get("id") in (None, ""):
            record["id"] = f"puzzle{index}"
        else:
            record["id"] = str(record["id"])
        if not _is_nonempty_str(record.get("solution")):
            record["solution"] = None
        return record

    def _finish(records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        data = []
        for index, record in enumerate(records):
            normalized = _normalize_record(dict(record), index)
            if normalized is not None:
                data.append(normalized)
        return data

    # Case 1: Tabular files
    if file_path.endswith(".parquet"):
        df = pd.read_parquet(file_path)
        return _finish(df.to_dict(orient="records"))

    if file_path.endswith(".csv"):
        df = pd.read_csv(file_path, dtype={"id": str, "puzzle": str, "solution": str}, keep_default_na=False)
        return _finish(df.to_dict(orient="records"))

    # Case 2: JSON File (array or object)
    if file_path.endswith(".json"):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL.
            return _finish(_read_json_lines(file_path))
        if isinstance(payload, list):
            return _finish(p for p in payload if isinstance(p, dict))
        if isinstance(payload, dict):
            return _finish([payload])
        return []

    # Case 3: JSONL File
    return _finish(_read_json_lines(file_path))


def _read_json_lines(file_path: str) -> List[Dict[str, Any]]:
    data = []
    with open(file_path, "r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(obj, dict):
                data.append(obj)
    return data


def save_puzzles(records: List[Dict[str, Any]], file_path: Path) -> None:
    """Write puzzle records; the format follows the file suffix."""
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(records, columns=RECORD_COLUMNS)

    if file_path.suffix == ".parquet":
        df.to_parquet(file_path, index=False)
    elif file_path.suffix == ".csv":
        df.to_csv(file_path, index=False)
    elif file_path.suffix == ".json":
        df.to_json(file_path, orient="records", force_ascii=False)
    elif file_path.suffix == ".jsonl":
        df.to_json(file_path, orient="records", lines=True, force_ascii=False)
    else:
        raise ValueError(f"Unsupported puzzle file format: {file_path.suffix}")


def record_to_grid(record: Dict[str, Any], key: str = "puzzle") -> Optional[Grid]:
    text = record.get(key)
    if not isinstance(text, str) or len(text.strip()) != SIZE * SIZE:
        return None
    return Grid.from_string(text)
