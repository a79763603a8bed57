"""Convert a solved :class:`BitonicTour` into a renderer event stream."""

from __future__ import annotations

from typing import Dict, List

from bitonic_tour.dp_bitonic import BitonicTour

SCENE_MARGIN = 0.05


def build_bitonic_events(engine: BitonicTour, *, include_table: bool = True) -> List[Dict[str, object]]:
    """Solve *engine* (cached if already solved) and describe it as events.

    With ``include_table`` every populated ``PartialTour(i, j)`` is replayed in
    fill order before the final tour.
    """
    solution = engine.solve()
    points = engine.store.sorted_points()
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    pad_x = max(1.0, max(xs) - min(xs)) * SCENE_MARGIN
    pad_y = max(1.0, max(ys) - min(ys)) * SCENE_MARGIN

    events: List[Dict[str, object]] = [
        {
            "type": "set_scene",
            "x_min": min(xs) - pad_x,
            "x_max": max(xs) + pad_x,
            "y_min": min(ys) - pad_y,
            "y_max": max(ys) + pad_y,
        }
    ]
    for idx, (x, y) in enumerate(points):
        events.append({"type": "add_point", "idx": idx, "x": x, "y": y})

    if include_table and len(points) > 1:
        for j in range(1, len(points)):
            for i in range(j):
                events.append(
                    {
                        "type": "dp_pick",
                        "i": i,
                        "j": j,
                        "cost": engine.cost(i, j),
                        "path": list(engine.points(i, j)),
                    }
                )

    events.append({"type": "tour", "points": list(solution.points), "length": solution.length})
    events.append({"type": "done"})
    return events


__all__ = ["build_bitonic_events"]
