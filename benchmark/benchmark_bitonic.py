# benchmark/benchmark_bitonic.py
"""
Timing harness for the bitonic-tour DP.

• bench_solve    – wall time of BitonicTour.solve() for growing N
• bench_families – same N across the point-set families

Each doubling of N should cost roughly 4x for the Θ(n²) cell count.
"""

from __future__ import annotations
import argparse
import statistics
import time
from typing import List, Sequence

import numpy as np

from bitonic_tour.common.constants import RNG_SEEDS, seed_everywhere
from bitonic_tour.data.gen_instances import FAMILIES, draw_points
from bitonic_tour.dp_bitonic import BitonicTour
from bitonic_tour.point_store import PointStore


# ---------------------------------------------------------------------------
#  Helpers
# ---------------------------------------------------------------------------
def _time_solve(points, runs: int) -> List[float]:
    times = []
    for _ in range(runs):
        engine = BitonicTour(PointStore(points))
        t0 = time.perf_counter()
        engine.solve()
        times.append(time.perf_counter() - t0)
    return times


# ---------------------------------------------------------------------------
#  Benchmarks
# ---------------------------------------------------------------------------
def bench_solve(sizes: Sequence[int], avg_runs: int = 5) -> None:
    print("=== Bitonic DP: scaling in N ===")
    rng = np.random.default_rng(RNG_SEEDS["bench"])
    prev_mean = None
    for n in sizes:
        points = draw_points("uniform", n, rng)
        times = _time_solve(points, avg_runs)
        mean = statistics.mean(times)
        ratio = f"{mean / prev_mean:5.2f}x" if prev_mean else "   - "
        print(
            f"n={n:5d} | cells={n * (n - 1) // 2:8d} "
            f"| t_avg={mean:.4f}s "
            f"| t_std={statistics.stdev(times) if len(times) > 1 else 0.0:.4f}s "
            f"| ratio={ratio}"
        )
        prev_mean = mean


def bench_families(n: int, avg_runs: int = 3) -> None:
    print(f"\n=== Bitonic DP: families at n={n} ===")
    rng = np.random.default_rng(RNG_SEEDS["bench"])
    for family in FAMILIES:
        points = draw_points(family, n, rng)
        times = _time_solve(points, avg_runs)
        length = BitonicTour(PointStore(points)).solve().length
        print(f"{family:>10s} | length={length:10.3f} | t_avg={statistics.mean(times):.4f}s")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Benchmark the bitonic-tour DP.")
    parser.add_argument("--sizes", type=str, default="50,100,200,400")
    parser.add_argument("--runs", type=int, default=5)
    args = parser.parse_args()

    seed_everywhere(RNG_SEEDS["bench"])
    sizes = [int(v) for v in args.sizes.split(",") if v.strip()]
    bench_solve(sizes, avg_runs=args.runs)
    bench_families(sizes[len(sizes) // 2], avg_runs=max(1, args.runs // 2))
