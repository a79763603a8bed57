from __future__ import annotations

import math

import pytest
from hypothesis import given, strategies as st

from bitonic_tour.errors import (
    BitonicTourError,
    DuplicateCoordinate,
    EmptyProblem,
    IndexOutOfRange,
    InvalidCoordinate,
)
from bitonic_tour.geometry import Point
from bitonic_tour.point_store import PointStore
from tests.test_utils import CORMEN_15_9, gen_points, rng


# ---------------------------------------------------------------------------
#  Insertion
# ---------------------------------------------------------------------------
def test_add_point_returns_point_and_counts() -> None:
    store = PointStore()
    assert store.count() == 0
    p = store.add_point(2, 3)
    assert p == Point(2.0, 3.0)
    assert isinstance(p.x, float)
    assert store.count() == 1
    assert len(store) == 1


def test_numeric_strings_are_accepted() -> None:
    store = PointStore()
    assert store.add_point("1.5", "-2e1") == Point(1.5, -20.0)


@pytest.mark.parametrize("y", [3.0, 7.0, -1.0])
def test_duplicate_x_rejected_regardless_of_y(y: float) -> None:
    store = PointStore()
    store.add_point(1.0, 3.0)
    with pytest.raises(DuplicateCoordinate) as excinfo:
        store.add_point(1.0, y)
    message = str(excinfo.value)
    assert f"({1.0}, {y})" in message
    assert f"({1.0}, {3.0})" in message
    assert excinfo.value.existing_y == 3.0
    assert store.count() == 1


def test_duplicate_is_a_value_error() -> None:
    store = PointStore([(0, 0)])
    with pytest.raises(ValueError):
        store.add_point(0, 1)
    with pytest.raises(BitonicTourError):
        store.add_point(0.0, 2)


@pytest.mark.parametrize("bad", ["abc", None, float("nan"), float("inf"), True, [1]])
def test_invalid_coordinates(bad) -> None:
    store = PointStore()
    with pytest.raises(InvalidCoordinate):
        store.add_point(bad, 0.0)
    with pytest.raises(InvalidCoordinate):
        store.add_point(0.0, bad)
    assert store.count() == 0


def test_failed_insert_keeps_cache_and_version() -> None:
    store = PointStore([(0, 0), (1, 1)])
    view = store.sorted_points()
    version = store.version
    with pytest.raises(DuplicateCoordinate):
        store.add_point(1, 5)
    assert store.version == version
    assert store.sorted_points() is view


# ---------------------------------------------------------------------------
#  Sorted view
# ---------------------------------------------------------------------------
def test_sorted_points_cormen() -> None:
    store = PointStore(CORMEN_15_9)
    assert [p.x for p in store.sorted_points()] == [0, 1, 2, 5, 6, 7, 8]
    assert store.sorted_points()[0] == Point(0.0, 6.0)
    assert store.sorted_points()[-1] == Point(8.0, 2.0)


def test_sorted_points_is_cached_until_next_insert() -> None:
    store = PointStore([(3, 0), (1, 0)])
    first = store.sorted_points()
    assert store.sorted_points() is first
    store.add_point(2, 0)
    second = store.sorted_points()
    assert second is not first
    assert [p.x for p in second] == [1.0, 2.0, 3.0]


@given(st.lists(st.integers(-1000, 1000), unique=True, max_size=40), st.randoms())
def test_sorted_points_strictly_increasing_permutation(xs, rnd) -> None:
    points = [(x, rnd.uniform(-10, 10)) for x in xs]
    store = PointStore(points)
    view = store.sorted_points()
    assert all(a.x < b.x for a, b in zip(view, view[1:]))
    assert sorted((float(x), y) for x, y in points) == [tuple(p) for p in view]


def test_random_insert_order_does_not_matter() -> None:
    rnd = rng(7)
    points = gen_points(rnd, 25)
    shuffled = list(points)
    rnd.shuffle(shuffled)
    assert PointStore(points).sorted_points() == PointStore(shuffled).sorted_points()


# ---------------------------------------------------------------------------
#  Index access
# ---------------------------------------------------------------------------
def test_coordinate_positive_and_negative_indices() -> None:
    store = PointStore(CORMEN_15_9)
    assert store.coordinate(0) == (0.0, 6.0)
    assert store.coordinate(1) == (1.0, 0.0)
    assert store.coordinate(-1) == (8.0, 2.0)
    assert store.coordinate(-7) == store.coordinate(0)


@pytest.mark.parametrize("index", [7, 100, -8])
def test_coordinate_out_of_range(index: int) -> None:
    store = PointStore(CORMEN_15_9)
    with pytest.raises(IndexOutOfRange):
        store.coordinate(index)
    with pytest.raises(IndexError):
        store.coordinate(index)


def test_empty_store() -> None:
    store = PointStore()
    assert store.sorted_points() == ()
    with pytest.raises(IndexOutOfRange):
        store.coordinate(0)
    with pytest.raises(EmptyProblem):
        store.rightmost_index()


def test_rightmost_index_and_extend() -> None:
    store = PointStore()
    assert store.extend([(0, 0), (1, 1), (2, 0)]) == 3
    assert store.rightmost_index() == 2
    assert store.version == 3
    assert math.isclose(store.coordinate(store.rightmost_index()).x, 2.0)
