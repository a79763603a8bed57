"""Exact O(n²) dynamic programme for the shortest bitonic tour.

A bitonic tour starts at the leftmost point, moves strictly left to right to
the rightmost point and then strictly right to left back to the start (any
vertical line crosses it at most twice).  Cormen et al., *Introduction to
Algorithms*, problem 15-1; Bentley (1990) suggested the restriction.

Recurrence over x-sorted indices, writing ``A[i, j]`` (``i < j``) for the
cheapest open path from ``i`` back through the leftmost point to ``j`` that
visits every point ``<= j``::

    A[0, 1] = d(0, 1)
    A[i, j] = A[i, j-1] + d(j-1, j)                  if j > i + 1
    A[i, j] = min[ x < i ] { A[x, i] + d(x, j) }     if j = i + 1

and the closed tour costs ``min[ i < R ] { A[i, R] + d(i, R) }``.
Row ``j`` only reads row ``j-1``; the adjacent cell costs Θ(j) distance
evaluations, every other cell Θ(1), hence Θ(n²) evaluations overall.  Each
cell also stores its full index path, so copying paths adds O(n³) time and
memory on top of that.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from bitonic_tour import geometry
from bitonic_tour.data.schemas import Solution
from bitonic_tour.errors import EmptyProblem, InvalidCall, InvalidCost, UnknownTour
from bitonic_tour.geometry import euclidean, log
from bitonic_tour.point_store import PointStore

__all__ = [
    "PartialTour",
    "BitonicTour",
    "solve_bitonic",
]


# ---------------------------------------------------------------------------
#  Table cell
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PartialTour:
    """Cheapest open bitonic path between two endpoints.

    ``path[0]`` and ``path[-1]`` are the two endpoints (``path[-1]`` is the
    larger index ``j``) and the path covers exactly the indices ``0..j``.
    Only the endpoints and the length are checked here; the fill is trusted
    to produce a permutation.
    """

    cost: float
    path: Tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))
        if len(self.path) < 2:
            raise ValueError("a partial tour needs two distinct endpoints")
        i, j = self.path[0], self.path[-1]
        if not 0 <= i < j or len(self.path) != j + 1:
            raise ValueError(f"path {self.path} must join {i} < {j} through {j + 1} points")

    @property
    def endpoints(self) -> Tuple[int, int]:
        return self.path[0], self.path[-1]


# ---------------------------------------------------------------------------
#  Engine
# ---------------------------------------------------------------------------
class BitonicTour:
    """Bitonic-tour solver over a :class:`PointStore`.

    Typical use::

        bt = BitonicTour()
        bt.add_point(0, 6)
        bt.add_point(1, 0)
        ...
        solution = bt.solve()

    The DP table is a dense ``N x N`` grid sized when :meth:`populate` runs;
    only cells with ``i < j`` are ever written, each exactly once.
    """

    def __init__(self, store: Optional[PointStore] = None) -> None:
        self.store = store if store is not None else PointStore()
        self._table: List[List[Optional[PartialTour]]] = []
        self._version: Optional[int] = None
        self._solution: Optional[Solution] = None

    # ------------------------------------------------------------------ store
    def add_point(self, x: object, y: object) -> geometry.Point:
        return self.store.add_point(x, y)

    @property
    def N(self) -> int:
        return self.store.count()

    @property
    def R(self) -> int:
        return self.store.rightmost_index()

    def distance(self, a: int, b: int) -> float:
        """Euclidean distance between sorted points *a* and *b*."""
        if a == b:
            return 0.0
        return euclidean(self.store.coordinate(a), self.store.coordinate(b))

    # ------------------------------------------------------------------ solve
    def solve(self) -> Solution:
        """Return the optimal closed bitonic tour, reusing cached results."""
        self._discard_if_stale()
        if self._solution is not None:
            return self._solution

        n = self.N
        if n < 1:
            raise EmptyProblem("you need to add some points!")
        if n == 1:
            solution = Solution(length=0.0, points=(0,), coordinates=(self.store.coordinate(0),))
            self._version = self.store.version
        else:
            self.populate()
            solution = self.combine()
        self._solution = solution
        return solution

    def optimal_tour(self) -> float:
        warnings.warn(
            "BitonicTour.optimal_tour() is deprecated; use solve().length",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.solve().length

    def populate(self) -> None:
        """Fill every ``PartialTour(i, j)`` row by row, left to right."""
        n = self.N
        if n < 2:
            raise InvalidCall(f"populate() needs at least two points (N = {n})")
        self.store.sorted_points()
        self._table = [[None] * n for _ in range(n)]
        self._version = self.store.version
        self._solution = None

        self._set_tour(0, 1, PartialTour(self.distance(0, 1), (0, 1)))
        for j in range(2, n):
            for i in range(j):
                self._set_tour(i, j, self.optimal_partial(i, j))

    def optimal_partial(self, i: int, j: int) -> PartialTour:
        """Evaluate the recurrence for cell ``(i, j)`` from row ``j - 1``."""
        if not i < j:
            raise InvalidCall(f"bad call: optimal_partial({i},{j})")

        # Adjacent endpoints: j is entered from some x < i, the far end of
        # the best partial tour that finishes at i.
        if i + 1 == j:
            if i == 0:
                raise InvalidCall(f"bad call: optimal_partial({i},{j}) is the base case")
            best_x = 0
            best_cost = self.cost(0, i) + self.distance(0, j)
            for x in range(1, i):
                cost = self.cost(x, i) + self.distance(x, j)
                if cost < best_cost:
                    best_cost = cost
                    best_x = x
            log(f"A[{i},{j}] = {best_cost:.6f}  via x={best_x}")
            return PartialTour(best_cost, tuple(reversed(self.points(best_x, i))) + (j,))

        # Non-adjacent: the only bitonic continuation is j-1 -> j.
        prev = self.tour(i, j - 1)
        return PartialTour(prev.cost + self.distance(j - 1, j), prev.path + (j,))

    def combine(self) -> Solution:
        """Close the cheapest ``PartialTour(i, R)`` with the edge ``R -> i``."""
        self._discard_if_stale()
        R = self.R
        best_i = 0
        best_length = self.cost(0, R) + self.distance(0, R)
        for i in range(1, R):
            length = self.cost(i, R) + self.distance(i, R)
            if length < best_length:
                best_length = length
                best_i = i
        if not math.isfinite(best_length):
            raise InvalidCost(f"tour length overflows: A[{best_i},{R}] + d({best_i},{R}) = {best_length}")
        path = self.points(best_i, R)
        log(f"tour = A[{best_i},{R}] + d({best_i},{R}) = {best_length:.6f}")

        order = _canonical_cycle(path)
        closed = order + (order[0],)
        return Solution(
            length=best_length,
            points=closed,
            coordinates=tuple(self.store.coordinate(k) for k in closed),
        )

    # ------------------------------------------------------------------ table access
    def tour(self, i: int, j: int) -> PartialTour:
        self._discard_if_stale()
        n = len(self._table)
        cell = self._table[i][j] if 0 <= i < j < n else None
        if cell is None:
            raise UnknownTour(i, j)
        return cell

    def cost(self, i: int, j: int) -> float:
        """Cost of the optimal partial tour with endpoints ``i < j``."""
        return self.tour(i, j).cost

    def points(self, i: int, j: int) -> Tuple[int, ...]:
        """Index path of the optimal partial tour with endpoints ``i < j``."""
        return self.tour(i, j).path

    def _set_tour(self, i: int, j: int, tour: PartialTour) -> None:
        if not tour.cost > 0:
            raise InvalidCost(f"set_cost({i},{j},{tour.cost}) ({tour.cost} <= 0)")
        if not math.isfinite(tour.cost):
            raise InvalidCost(f"set_cost({i},{j},{tour.cost}) (cost overflows)")
        if not 0 <= i < j:
            raise InvalidCall(f"set_cost({i},{j},{tour.cost}) ({i} >= {j})")
        n = len(self._table)
        if j >= n:
            raise InvalidCall(f"set_cost({i},{j},{tour.cost}) ({j} >= {n})")
        if tour.endpoints != (i, j):
            raise InvalidCall(f"path {tour.path} does not join {i} and {j}")
        if self._table[i][j] is not None:
            raise InvalidCall(f"cost({i},{j}) is already populated")
        self._table[i][j] = tour

    def _discard_if_stale(self) -> None:
        if self._version is not None and self._version != self.store.version:
            self._table = []
            self._solution = None
            self._version = None


def _canonical_cycle(path: Sequence[int]) -> Tuple[int, ...]:
    """Rotate a closed cycle to start at 0 and leave towards index 1."""
    idx = list(path).index(0)
    order = tuple(path[idx:]) + tuple(path[:idx])
    if len(order) > 2 and order[1] != 1:
        order = (order[0],) + tuple(reversed(order[1:]))
    return order


def solve_bitonic(points: Iterable[Sequence[float]]) -> Solution:
    """Solve the bitonic tour for an iterable of ``(x, y)`` pairs."""
    return BitonicTour(PointStore(points)).solve()
