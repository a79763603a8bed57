from __future__ import annotations

import numpy as np
import pytest

from bitonic_tour.data.gen_instances import FAMILIES, FamilyConfig, draw_points
from bitonic_tour.dp_bitonic import solve_bitonic
from bitonic_tour.point_store import PointStore


@pytest.mark.parametrize("family", FAMILIES)
def test_families_have_distinct_x(family: str) -> None:
    points = draw_points(family, 60, np.random.default_rng(3))
    assert len(points) == 60
    assert len({x for x, _ in points}) == 60
    assert PointStore(points).count() == 60


@pytest.mark.parametrize("family", FAMILIES)
def test_draws_are_reproducible(family: str) -> None:
    a = draw_points(family, 20, np.random.default_rng(99))
    b = draw_points(family, 20, np.random.default_rng(99))
    assert a == b


def test_uniform_points_respect_ranges() -> None:
    config = FamilyConfig(x_span=50.0, y_range=(-5.0, 5.0))
    points = draw_points("uniform", 100, np.random.default_rng(1), config)
    assert all(-5.0 <= y <= 5.0 for _, y in points)
    assert max(x for x, _ in points) == pytest.approx(50.0)


def test_draw_zero_and_unknown_family() -> None:
    assert draw_points("uniform", 0, np.random.default_rng(0)) == []
    with pytest.raises(ValueError):
        draw_points("spiral", 5, np.random.default_rng(0))
    with pytest.raises(ValueError):
        draw_points("uniform", -1, np.random.default_rng(0))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"x_span": 0.0},
        {"y_range": (1.0, 1.0)},
        {"min_dx": 0.0},
        {"clusters": 0},
    ],
)
def test_family_config_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        FamilyConfig(**kwargs)


def test_circle_instance_solves_to_near_perimeter() -> None:
    config = FamilyConfig(x_span=2.0, y_range=(-1.0, 1.0))
    points = draw_points("circle", 200, np.random.default_rng(5), config)
    # Points on a circle are in convex position: the bitonic optimum is the hull.
    length = solve_bitonic(points).length
    assert length <= 2 * np.pi + 1e-9
    assert length > 0.95 * 2 * np.pi
