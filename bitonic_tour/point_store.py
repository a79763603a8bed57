"""Point storage with a lazily sorted, index-addressable view."""

from __future__ import annotations

import math
from typing import Dict, Iterable, Optional, Sequence, Tuple

from bitonic_tour.errors import (
    DuplicateCoordinate,
    EmptyProblem,
    IndexOutOfRange,
    InvalidCoordinate,
)
from bitonic_tour.geometry import Point

__all__ = ["PointStore"]


def _as_coordinate(value: object, axis: str) -> float:
    if isinstance(value, bool):
        raise InvalidCoordinate(f"{axis}={value!r} is not a real number")
    try:
        coord = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinate(f"{axis}={value!r} is not a real number") from exc
    if not math.isfinite(coord):
        raise InvalidCoordinate(f"{axis}={value!r} must be finite")
    return coord


class PointStore:
    """Unsorted set of planar points keyed by their x coordinate.

    Index 0 of :meth:`sorted_points` is the leftmost point, index ``N-1`` the
    rightmost.  The sorted view is cached and dropped on every successful
    :meth:`add_point`; :attr:`version` counts those inserts so dependents can
    detect stale derived state.
    """

    def __init__(self, points: Optional[Iterable[Sequence[float]]] = None) -> None:
        self._points: Dict[float, float] = {}
        self._sorted: Optional[Tuple[Point, ...]] = None
        self.version = 0
        if points is not None:
            self.extend(points)

    # ------------------------------------------------------------------ mutation
    def add_point(self, x: object, y: object) -> Point:
        px = _as_coordinate(x, "x")
        py = _as_coordinate(y, "y")
        if px in self._points:
            raise DuplicateCoordinate(px, py, self._points[px])
        self._points[px] = py
        self._sorted = None
        self.version += 1
        return Point(px, py)

    def extend(self, points: Iterable[Sequence[float]]) -> int:
        added = 0
        for x, y in points:
            self.add_point(x, y)
            added += 1
        return added

    # ------------------------------------------------------------------ queries
    def count(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def rightmost_index(self) -> int:
        n = len(self._points)
        if n < 1:
            raise EmptyProblem(f"no rightmost point in problem (N = {n})")
        return n - 1

    def sorted_points(self) -> Tuple[Point, ...]:
        """Return the points in ascending x order (cached until the next insert)."""
        if self._sorted is None:
            self._sorted = tuple(Point(x, self._points[x]) for x in sorted(self._points))
        return self._sorted

    def coordinate(self, index: int) -> Point:
        """Coordinates of sorted point *index*; ``-1`` is the rightmost point."""
        points = self.sorted_points()
        n = len(points)
        if not -n <= index < n:
            raise IndexOutOfRange(f"point index {index} out of range for N = {n}")
        return points[index]
