from __future__ import annotations

import argparse
import json
from typing import Iterable, List, Tuple

import numpy as np

from bitonic_tour.data.gen_instances import FAMILIES, draw_points
from bitonic_tour.dp_bitonic import BitonicTour
from bitonic_tour.point_store import PointStore
from bitonic_tour.visualization.adapters import build_bitonic_events
from bitonic_tour.visualization.render import PygameRenderer

PointXY = Tuple[float, float]

PRESETS = {
    # Cormen et al., Figure 15.9
    "cormen": [(0, 6), (5, 4), (7, 5), (8, 2), (6, 1), (1, 0), (2, 3)],
    "trapezoid": [(0, 0), (1, 1), (2, 1), (3, 0)],
    "zigzag": [(0, 0), (1, 4), (2, 1), (3, 5), (4, 2), (5, 6), (6, 3)],
}


def parse_points(value: str) -> List[PointXY]:
    data = json.loads(value)
    points = []
    for entry in data:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError("points must be [[x, y], ...]")
        points.append((float(entry[0]), float(entry[1])))
    return points


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Bitonic tour DP visualization demo")
    parser.add_argument("--preset", choices=PRESETS.keys(), default="cormen")
    parser.add_argument("--points", type=str, help="JSON list of [x, y]")
    parser.add_argument("--random", type=int, metavar="N", help="Draw N random points instead")
    parser.add_argument("--family", choices=FAMILIES, default="uniform")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--manual", action="store_true", help="Start with autoplay disabled")
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.points:
        points = parse_points(args.points)
    elif args.random:
        points = draw_points(args.family, args.random, np.random.default_rng(args.seed))
    else:
        points = PRESETS[args.preset]

    events = build_bitonic_events(BitonicTour(PointStore(points)))
    renderer = PygameRenderer()
    renderer.load_events(events)
    renderer.run(autoplay=not args.manual)


if __name__ == "__main__":
    main()
