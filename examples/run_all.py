#!/usr/bin/env python3
"""examples/run_all.py – smoke-test for the bitonic-tour solver.

Run this file directly, or execute `python -m examples.run_all` from the project
root.  It prints the DP trace, the optimal tour and timings for:

  1. The 4-point trapezoid (tie-break showcase)
  2. Cormen et al., Figure 15.9 (7 points, optimal length ≈ 25.58)
  3. A random 200-point instance
"""

from __future__ import annotations

import time
from typing import List, Tuple

import numpy as np

import bitonic_tour.geometry as geometry
from bitonic_tour.data.gen_instances import draw_points
from bitonic_tour.dp_bitonic import BitonicTour

SEP = "=" * 80


def _hdr(title: str) -> None:
    print(f"\n{SEP}\n{title}\n{SEP}\n")


def _run(points: List[Tuple[float, float]], *, show_table: bool) -> None:
    bt = BitonicTour()
    for x, y in points:   # points need not be added left to right
        bt.add_point(x, y)

    t0 = time.perf_counter()
    solution = bt.solve()
    dt = time.perf_counter() - t0

    if show_table:
        for j in range(1, bt.N):
            for i in range(j):
                print(f"  A[{i},{j}] = {bt.cost(i, j):8.4f}  path={bt.points(i, j)}")
    print(f"\nLength : {solution.length:.4f}")
    print(f"Tour   : {' -> '.join(map(str, solution.points))}")
    print(f"Elapsed: {dt:.6f} s")


def run_trapezoid_example() -> None:
    _hdr("1 – Trapezoid")
    _run([(0, 0), (1, 1), (2, 1), (3, 0)], show_table=True)


def run_cormen_example() -> None:
    _hdr("2 – Cormen Figure 15.9")
    _run([(0, 6), (5, 4), (7, 5), (8, 2), (6, 1), (1, 0), (2, 3)], show_table=True)


def run_random_example() -> None:
    _hdr("3 – Random uniform instance, n=200")
    points = draw_points("uniform", 200, np.random.default_rng(7))
    geometry.VERBOSE = False
    _run(points, show_table=False)


if __name__ == "__main__":
    # Activate verbose internal logging so the user can see the algorithmic traces.
    geometry.VERBOSE = True
    run_trapezoid_example()
    run_cormen_example()
    run_random_example()
