from __future__ import annotations

import hashlib
import json
import math
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from bitonic_tour.geometry import closed_tour_length
from bitonic_tour.common.constants import TOL_NUM

SCHEMA_VERSION = "1.0"
HASH_PRECISION = 12


def _round_float(value: float, precision: int = HASH_PRECISION) -> float:
    rounded = round(float(value), precision)
    # Coerce -0.0 to +0.0 for stability
    if rounded == 0.0:
        return 0.0
    return rounded


def compute_points_hash(
    points: Sequence[Tuple[float, float]],
    precision: int = HASH_PRECISION,
) -> str:
    """Order-independent digest of a point set."""
    payload = sorted([_round_float(x, precision), _round_float(y, precision)] for x, y in points)
    serialized = json.dumps({"points": payload}, sort_keys=True, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(serialized).hexdigest()


@dataclass(frozen=True, slots=True)
class Solution:
    """Optimal closed bitonic tour.

    ``points`` holds sorted point indices starting at the leftmost point (0),
    leaving towards index 1 and ending with 0 again to denote closure.  A
    single-point problem yields ``(0,)``.  ``coordinates`` mirrors ``points``
    entry for entry.
    """

    length: float
    points: Tuple[int, ...]
    coordinates: Tuple[Tuple[float, float], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(int(i) for i in self.points))
        object.__setattr__(
            self, "coordinates", tuple((float(x), float(y)) for x, y in self.coordinates)
        )
        if not math.isfinite(self.length) or self.length < 0.0:
            raise ValueError(f"tour length must be finite and non-negative, got {self.length}")
        if len(self.points) != len(self.coordinates):
            raise ValueError("points and coordinates must share identical length")

    @property
    def order(self) -> Tuple[int, ...]:
        """Visiting order without the closing repeat."""
        if len(self.points) > 1:
            return self.points[:-1]
        return self.points

    def __str__(self) -> str:
        return format_solution(self)


def validate_solution(solution: Solution, n_points: int) -> None:
    """Raise ``ValueError`` unless *solution* is a closed bitonic tour over ``n_points``."""
    order = solution.order
    if sorted(order) != list(range(n_points)):
        raise ValueError("tour must visit every point exactly once")
    if n_points > 1 and solution.points[0] != solution.points[-1]:
        raise ValueError("tour must be closed")
    if n_points > 2:
        peak = order.index(n_points - 1)
        up, down = order[: peak + 1], order[peak:] + (order[0],)
        if any(a >= b for a, b in zip(up, up[1:])) or any(a <= b for a, b in zip(down, down[1:])):
            raise ValueError("tour is not bitonic")
    length = closed_tour_length(solution.coordinates)
    if abs(length - solution.length) > TOL_NUM * max(1.0, solution.length):
        raise ValueError(f"tour length mismatch: stored={solution.length}, measured={length}")


def solution_to_dict(solution: Solution) -> Dict[str, Any]:
    return {
        "schema_version": SCHEMA_VERSION,
        "hash_id": compute_points_hash(solution.coordinates[:-1] or solution.coordinates),
        "length": float(solution.length),
        "points": list(solution.points),
        "coordinates": [[x, y] for x, y in solution.coordinates],
    }


def format_solution(solution: Solution, precision: int = 4) -> str:
    lines = [f"Tour length: {solution.length:.{precision}f}"]
    lines.append("Tour: " + " -> ".join(str(i) for i in solution.points))
    for idx, (x, y) in zip(solution.points, solution.coordinates):
        lines.append(f"  {idx:4d}: ({x:g}, {y:g})")
    return "\n".join(lines)


__all__ = [
    "SCHEMA_VERSION",
    "HASH_PRECISION",
    "Solution",
    "compute_points_hash",
    "validate_solution",
    "solution_to_dict",
    "format_solution",
]
