from __future__ import annotations

import itertools
import math
import random
from typing import List, Sequence, Tuple

from bitonic_tour.geometry import euclidean


__all__ = [
    "rng",
    "gen_points",
    "chain_length",
    "oracle_bitonic_length",
    "is_bitonic_cycle",
    "TRAPEZOID",
    "CORMEN_15_9",
]


TOL = 1e-6

TRAPEZOID: List[Tuple[float, float]] = [(0, 0), (1, 1), (2, 1), (3, 0)]

# Cormen et al., Figure 15.9, deliberately not in left-to-right order.
CORMEN_15_9: List[Tuple[float, float]] = [
    (0, 6),
    (5, 4),
    (7, 5),
    (8, 2),
    (6, 1),
    (1, 0),
    (2, 3),
]


# ---------------------------------------------------------------------------
#  Random generators
# ---------------------------------------------------------------------------
def rng(seed: int) -> random.Random:
    return random.Random(seed)


def gen_points(
    rnd: random.Random,
    n: int,
    *,
    x_span: float = 100.0,
    y_span: float = 100.0,
) -> List[Tuple[float, float]]:
    if n < 0:
        raise ValueError("n must be non-negative")
    xs = rnd.sample(range(int(x_span * 10)), n)
    return [(x / 10.0, rnd.uniform(0.0, y_span)) for x in xs]


# ---------------------------------------------------------------------------
#  Oracles
# ---------------------------------------------------------------------------
def chain_length(coords: Sequence[Tuple[float, float]]) -> float:
    return sum(euclidean(a, b) for a, b in zip(coords, coords[1:]))


def oracle_bitonic_length(points: Sequence[Tuple[float, float]]) -> float:
    """Exhaustive minimum over every split of the interior points into two chains."""
    pts = sorted(points)
    n = len(pts)
    if n < 2:
        return 0.0
    interior = range(1, n - 1)
    best = math.inf
    for mask in itertools.product((False, True), repeat=n - 2):
        upper = [pts[0]] + [pts[k] for k, up in zip(interior, mask) if up] + [pts[-1]]
        lower = [pts[0]] + [pts[k] for k, up in zip(interior, mask) if not up] + [pts[-1]]
        best = min(best, chain_length(upper) + chain_length(lower))
    return best


def is_bitonic_cycle(order: Sequence[int], n: int) -> bool:
    """True if *order* (no closing repeat) is a bitonic cycle over indices 0..n-1."""
    if sorted(order) != list(range(n)):
        return False
    if n < 3:
        return True
    start = list(order).index(0)
    rotated = list(order[start:]) + list(order[:start])
    peak = rotated.index(n - 1)
    up = rotated[: peak + 1]
    down = rotated[peak:] + [0]
    return all(a < b for a, b in zip(up, up[1:])) and all(a > b for a, b in zip(down, down[1:]))
