"""Utility primitives for pygame visualization scenes."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - pygame should be installed by demos
    raise ImportError("pygame is required for the visualization renderer") from exc

Color = Tuple[int, int, int]

BACKGROUND_COLOR = (18, 18, 24)
AXIS_COLOR = (120, 120, 140)
POINT_COLOR = (200, 200, 80)
ENDPOINT_COLOR = (200, 70, 70)
DP_PICK_COLOR = (90, 200, 255)
TOUR_COLOR = (70, 200, 110)

MARGIN_RATIO = 0.06
POINT_RADIUS = 5


class BaseScene:
    """Coordinate transforms and basic draw helpers for the pygame renderer."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.margin_x = int(self.width * MARGIN_RATIO)
        self.margin_y = int(self.height * MARGIN_RATIO)
        self.x_min, self.x_max = 0.0, 1.0
        self.y_min, self.y_max = 0.0, 1.0
        self.scale = 1.0
        self.points: Dict[int, Tuple[float, float]] = {}

    # ------------------------------------------------------------------ transforms
    def set_scene(self, *, x_min: float, x_max: float, y_min: float, y_max: float) -> None:
        if x_min >= x_max:
            x_max = x_min + 1.0
        if y_min >= y_max:
            y_max = y_min + 1.0
        self.x_min, self.x_max = x_min, x_max
        self.y_min, self.y_max = y_min, y_max
        # Uniform scale keeps Euclidean lengths visually honest.
        sx = (self.width - 2 * self.margin_x) / (x_max - x_min)
        sy = (self.height - 2 * self.margin_y) / (y_max - y_min)
        self.scale = min(sx, sy)

    def world_to_screen(self, x: float, y: float) -> Tuple[int, int]:
        px = self.margin_x + int((x - self.x_min) * self.scale)
        py = self.height - self.margin_y - int((y - self.y_min) * self.scale)
        px = max(0, min(self.width - 1, px))
        py = max(0, min(self.height - 1, py))
        return px, py

    # ------------------------------------------------------------------ scene content
    def add_point(self, idx: int, x: float, y: float) -> None:
        self.points[idx] = (float(x), float(y))

    def reset(self) -> None:
        self.points.clear()

    # ------------------------------------------------------------------ drawing helpers
    def draw_background(self, surface: "pygame.Surface") -> None:
        surface.fill(BACKGROUND_COLOR)

    def draw_axes(self, surface: "pygame.Surface") -> None:
        left = self.world_to_screen(self.x_min, self.y_min)
        right = self.world_to_screen(self.x_max, self.y_min)
        pygame.draw.line(surface, AXIS_COLOR, left, right, 1)

    def draw_points(self, surface: "pygame.Surface", endpoints: Iterable[int] = ()) -> None:
        marked = set(endpoints)
        for idx, (x, y) in self.points.items():
            color = ENDPOINT_COLOR if idx in marked else POINT_COLOR
            pygame.draw.circle(surface, color, self.world_to_screen(x, y), POINT_RADIUS)

    def draw_index_path(
        self,
        surface: "pygame.Surface",
        path: Sequence[int],
        color: Color,
        width: int = 2,
        closed: bool = False,
    ) -> None:
        screen = [self.world_to_screen(*self.points[idx]) for idx in path if idx in self.points]
        if len(screen) < 2:
            return
        pygame.draw.lines(surface, color, closed, screen, width)

    def label_position(self, idx: int) -> Optional[Tuple[int, int]]:
        if idx not in self.points:
            return None
        sx, sy = self.world_to_screen(*self.points[idx])
        return sx + POINT_RADIUS + 2, sy - 2 * POINT_RADIUS


__all__ = [
    "BaseScene",
    "BACKGROUND_COLOR",
    "AXIS_COLOR",
    "POINT_COLOR",
    "ENDPOINT_COLOR",
    "DP_PICK_COLOR",
    "TOUR_COLOR",
]
