"""Command-line front end: read points, solve, print the optimal bitonic tour.

Input is line oriented, one ``x y`` pair per line; blank lines and lines
starting with ``#`` are skipped.  Use ``-`` to read from stdin.
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterable, Optional

from bitonic_tour import geometry
from bitonic_tour.data.io_utils import load_points, write_solution_json
from bitonic_tour.data.schemas import format_solution
from bitonic_tour.dp_bitonic import BitonicTour
from bitonic_tour.errors import InvalidCost

EXIT_OK = 0
EXIT_INPUT_ERROR = 2


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bitonic-tour",
        description="Solve the euclidean traveling-salesman problem restricted to bitonic tours.",
    )
    parser.add_argument("input", help="Points file with one 'x y' pair per line, or '-' for stdin.")
    parser.add_argument("--json", dest="json_out", metavar="OUT", help="Also write the solution as JSON.")
    parser.add_argument("--png", dest="png_out", metavar="OUT", help="Also render the tour to an image.")
    parser.add_argument("--show-table", action="store_true", help="Print every partial-tour cost.")
    parser.add_argument("--precision", type=int, default=4)
    parser.add_argument("-v", "--verbose", action="store_true", help="Trace DP decisions.")
    return parser.parse_args(list(argv) if argv is not None else None)


def _print_table(engine: BitonicTour, precision: int) -> None:
    n = engine.N
    print("Partial tours A[i,j]:")
    for j in range(1, n):
        for i in range(j):
            path = ",".join(str(k) for k in engine.points(i, j))
            print(f"  A[{i},{j}] = {engine.cost(i, j):.{precision}f}  path={path}")


def _render_png(engine: BitonicTour, target: str) -> None:
    from bitonic_tour.visualization.adapters import build_bitonic_events
    from bitonic_tour.visualization.render import PygameRenderer

    renderer = PygameRenderer()
    renderer.load_events(build_bitonic_events(engine, include_table=False))
    renderer.process_all_events()
    renderer.save_png(target)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    geometry.VERBOSE = args.verbose

    engine = BitonicTour()
    try:
        if args.input == "-":
            count = load_points(engine.store, sys.stdin)
        else:
            count = load_points(engine.store, args.input)
        geometry.log(f"loaded {count} points")
        t0 = time.perf_counter()
        solution = engine.solve()
        geometry.log(f"solved in {time.perf_counter() - t0:.6f} s")
    except InvalidCost:
        raise
    except (ValueError, OSError) as exc:
        print(f"bitonic-tour: error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if args.show_table and engine.N > 1:
        _print_table(engine, args.precision)
    print(format_solution(solution, precision=args.precision))

    if args.json_out:
        write_solution_json(args.json_out, solution, meta={"source": args.input})
    if args.png_out:
        _render_png(engine, args.png_out)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
