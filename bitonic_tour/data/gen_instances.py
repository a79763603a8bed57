"""Synthetic point-set generation for tests, benchmarks and demos.

``FamilyConfig`` declares the geometric ranges; ``draw_points`` samples a
point set of the requested family from a ``numpy.random.Generator`` so that
runs regenerate exactly when seeded with the same generator.  Every family
returns points with pairwise distinct x coordinates, in shuffled order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

FloatRange = Tuple[float, float]
Points = List[Tuple[float, float]]

FAMILIES = ("uniform", "clustered", "circle")
MAX_REDRAWS = 100


@dataclass(frozen=True)
class FamilyConfig:
    """Configuration bundle for point-set families."""

    x_span: float = 100.0
    y_range: FloatRange = (0.0, 100.0)
    min_dx: float = 1e-3
    clusters: int = 3
    cluster_spread: float = 5.0

    def __post_init__(self) -> None:
        if self.x_span <= 0.0:
            raise ValueError("x_span must be positive")
        if self.y_range[1] <= self.y_range[0]:
            raise ValueError("y_range must contain ascending bounds")
        if self.min_dx <= 0.0:
            raise ValueError("min_dx must be positive")
        if self.clusters < 1:
            raise ValueError("clusters must be >= 1")


def _monotone_xs(n: int, config: FamilyConfig, rng: np.random.Generator) -> np.ndarray:
    # Strictly increasing: every gap is positive before rescaling onto x_span.
    gaps = config.min_dx + rng.exponential(1.0, size=n)
    xs = np.cumsum(gaps)
    return xs * (config.x_span / float(xs[-1]))


def _uniform(n: int, config: FamilyConfig, rng: np.random.Generator) -> Points:
    xs = _monotone_xs(n, config, rng)
    ys = rng.uniform(*config.y_range, size=n)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def _clustered(n: int, config: FamilyConfig, rng: np.random.Generator) -> Points:
    xs = _monotone_xs(n, config, rng)
    centres = rng.uniform(*config.y_range, size=config.clusters)
    labels = rng.integers(0, config.clusters, size=n)
    ys = centres[labels] + rng.normal(0.0, config.cluster_spread, size=n)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def _circle(n: int, config: FamilyConfig, rng: np.random.Generator) -> Points:
    radius = 0.5 * config.x_span
    cy = 0.5 * (config.y_range[0] + config.y_range[1])
    for _ in range(MAX_REDRAWS):
        theta = rng.uniform(0.0, 2.0 * math.pi, size=n)
        xs = radius + radius * np.cos(theta)
        if len(np.unique(xs)) == n:
            ys = cy + radius * np.sin(theta)
            return [(float(x), float(y)) for x, y in zip(xs, ys)]
    raise RuntimeError("failed to draw a circle instance with distinct x coordinates")


def draw_points(
    family: str,
    n: int,
    rng: np.random.Generator,
    config: FamilyConfig | None = None,
) -> Points:
    """Sample ``n`` points of *family* with distinct x coordinates."""
    if n < 0:
        raise ValueError("n must be non-negative")
    config = config or FamilyConfig()
    if n == 0:
        return []
    if family == "uniform":
        points = _uniform(n, config, rng)
    elif family == "clustered":
        points = _clustered(n, config, rng)
    elif family == "circle":
        points = _circle(n, config, rng)
    else:
        raise ValueError(f"unknown family {family!r}; expected one of {FAMILIES}")
    order = rng.permutation(n)
    return [points[k] for k in order]


__all__ = ["FAMILIES", "FamilyConfig", "draw_points"]
