from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from bitonic_tour.data.schemas import Solution, solution_to_dict
from bitonic_tour.point_store import PointStore

PointSource = Union[str, Path, Iterable[str]]


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def parse_point_line(line: str, lineno: int = 0) -> Optional[Tuple[str, str]]:
    """Split one input line into raw ``(x, y)`` fields.

    Blank lines and lines starting with ``#`` yield ``None``.  Conversion to
    numbers is left to :meth:`PointStore.add_point`, which owns coordinate
    validation.
    """
    text = line.strip()
    if not text or text.startswith("#"):
        return None
    fields = text.split()
    if len(fields) < 2:
        raise ValueError(f"line {lineno}: expected 'x y', got {text!r}")
    return fields[0], fields[1]


def _iter_lines(source: PointSource) -> Iterator[str]:
    if isinstance(source, (str, Path)):
        with Path(source).open("r", encoding="utf-8") as handle:
            yield from handle
    else:
        yield from source


def read_points(source: PointSource) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    for lineno, line in enumerate(_iter_lines(source), 1):
        pair = parse_point_line(line, lineno)
        if pair is not None:
            pairs.append(pair)
    return pairs


def load_points(store: PointStore, source: PointSource) -> int:
    """Feed every pair in *source* to ``store.add_point``; return the count added."""
    added = 0
    for lineno, line in enumerate(_iter_lines(source), 1):
        pair = parse_point_line(line, lineno)
        if pair is None:
            continue
        store.add_point(*pair)
        added += 1
    return added


def write_solution_json(path: str | Path, solution: Solution, meta: Optional[Dict[str, Any]] = None) -> None:
    target = Path(path)
    _ensure_parent(target)
    payload = solution_to_dict(solution)
    payload["meta"] = dict(meta or {})
    payload["meta"].setdefault("generated_at", datetime.now(timezone.utc).isoformat())
    with target.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True, allow_nan=False)


__all__ = [
    "parse_point_line",
    "read_points",
    "load_points",
    "write_solution_json",
]
