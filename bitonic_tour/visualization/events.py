"""Event schema shared by the DP adapter and the pygame renderer."""

from __future__ import annotations

from typing import Dict, List, Literal, TypedDict


class SetSceneEvent(TypedDict):
    type: Literal["set_scene"]
    x_min: float
    x_max: float
    y_min: float
    y_max: float


class AddPointEvent(TypedDict):
    type: Literal["add_point"]
    idx: int
    x: float
    y: float


class DPPickEvent(TypedDict):
    type: Literal["dp_pick"]
    i: int
    j: int
    cost: float
    path: List[int]


class TourEvent(TypedDict):
    type: Literal["tour"]
    points: List[int]
    length: float


class DoneEvent(TypedDict):
    type: Literal["done"]


EVENT_TYPES = ("set_scene", "add_point", "dp_pick", "tour", "done")


def validate_event(event: Dict[str, object]) -> None:
    event_type = event.get("type")
    if event_type not in EVENT_TYPES:
        raise ValueError(f"unknown event type: {event_type!r}")
    if event_type == "dp_pick":
        i, j = int(event["i"]), int(event["j"])  # type: ignore[arg-type]
        if not 0 <= i < j:
            raise ValueError(f"dp_pick needs 0 <= i < j, got ({i}, {j})")


__all__ = [
    "SetSceneEvent",
    "AddPointEvent",
    "DPPickEvent",
    "TourEvent",
    "DoneEvent",
    "EVENT_TYPES",
    "validate_event",
]
