# bitonic_tour/geometry.py
"""
Light-weight planar geometry helpers shared by the store and the DP engine.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

# Global debug switch
VERBOSE: bool = False


def log(*args, **kwargs) -> None:            # pragma: no cover
    if VERBOSE:
        print(*args, **kwargs)


class Point(NamedTuple):
    x: float
    y: float


# --------------------------------------------------------------------------- #
#  Geometry                                                                   #
# --------------------------------------------------------------------------- #
def euclidean(p: Sequence[float], q: Sequence[float]) -> float:
    """Return the straight-line distance between two (x, y) pairs."""
    return math.hypot(p[0] - q[0], p[1] - q[1])


def closed_tour_length(coords: Sequence[Sequence[float]]) -> float:
    """Length of the polygon through *coords*, closing back to the first point.

    A trailing repeat of the first point is tolerated, so both ``[a, b, c]``
    and ``[a, b, c, a]`` measure the same tour.
    """
    n = len(coords)
    if n < 2:
        return 0.0
    total = sum(euclidean(coords[k], coords[k + 1]) for k in range(n - 1))
    if tuple(coords[0]) != tuple(coords[-1]):
        total += euclidean(coords[-1], coords[0])
    return total
