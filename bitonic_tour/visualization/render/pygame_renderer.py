"""Pygame renderer that consumes bitonic-tour visualization events."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - ensure pygame is available
    raise ImportError("pygame is required for the visualization renderer") from exc

from bitonic_tour.geometry import log
from bitonic_tour.visualization.events import validate_event
from bitonic_tour.visualization.render.base_scene import DP_PICK_COLOR, TOUR_COLOR, BaseScene


class PygameRenderer:
    """Replay a DP event stream: points, partial-tour picks, final tour."""

    SPEED_LEVELS = [0.5, 1.0, 2.0, 4.0, 8.0]

    def __init__(self, width: int = 1000, height: int = 700, fps: int = 60) -> None:
        self.width = width
        self.height = height
        self.fps = fps
        pygame.font.init()
        self.font = pygame.font.Font(None, 22)
        self.scene = BaseScene(width, height)
        self.events: List[Dict[str, object]] = []
        self.cursor = 0
        self.total_events = 0
        self.autoplay = True
        self.speed_index = 1
        self.autoplay_accumulator = 0.0
        self.clock: Optional["pygame.time.Clock"] = None
        self.screen: Optional["pygame.Surface"] = None
        self.running = False
        self.current_pick: Optional[Dict[str, object]] = None
        self.tour: Optional[Tuple[List[int], float]] = None
        self.completed = False
        self.last_event_type: Optional[str] = None

    # ------------------------------------------------------------------ public API
    def load_events(self, events: List[Dict[str, object]]) -> None:
        for event in events:
            validate_event(event)
        self.events = list(events)
        self.total_events = len(self.events)
        self.cursor = 0
        self.autoplay_accumulator = 0.0
        self.scene.reset()
        self.current_pick = None
        self.tour = None
        self.completed = False
        self.last_event_type = None

    def run(self, autoplay: bool = True) -> None:
        if not self.events:
            raise RuntimeError("No events loaded. Call load_events() first.")

        self.autoplay = autoplay
        pygame.display.init()
        pygame.display.set_caption("Bitonic Tour")
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.clock = pygame.time.Clock()
        self.running = True

        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self._handle_input()
            if self.autoplay and not self.completed:
                self._autoplay_advance(dt)
            self.draw_frame(self.screen)
            pygame.display.flip()

        pygame.display.quit()

    def process_all_events(self) -> None:
        """Advance through all events without opening a window (testing helper)."""
        while self.cursor < self.total_events:
            self._advance_event()

    def step_once(self) -> None:
        self._advance_event()

    def render_to_surface(self) -> "pygame.Surface":
        surface = pygame.Surface((self.width, self.height))
        self.draw_frame(surface)
        return surface

    def save_png(self, path: str | Path) -> Path:
        """Draw the current state off-screen and write it as an image."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        pygame.image.save(self.render_to_surface(), str(target))
        return target

    # ------------------------------------------------------------------ internals
    def _handle_input(self) -> None:
        for py_event in pygame.event.get():
            if py_event.type == pygame.QUIT:
                self.running = False
                return
            if py_event.type == pygame.KEYDOWN:
                if py_event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.running = False
                    return
                if py_event.key == pygame.K_SPACE:
                    self.autoplay = not self.autoplay
                elif py_event.key == pygame.K_RIGHT:
                    self.autoplay = False
                    self._advance_event()
                elif py_event.key == pygame.K_UP:
                    self.speed_index = min(len(self.SPEED_LEVELS) - 1, self.speed_index + 1)
                elif py_event.key == pygame.K_DOWN:
                    self.speed_index = max(0, self.speed_index - 1)
                elif py_event.key == pygame.K_r:
                    self.load_events(self.events)

    def _autoplay_advance(self, dt: float) -> None:
        interval = 1.0 / (self.fps * max(0.1, self.SPEED_LEVELS[self.speed_index]))
        self.autoplay_accumulator += dt
        while self.autoplay_accumulator >= interval and self.cursor < self.total_events:
            self.autoplay_accumulator -= interval
            self._advance_event()

    def _advance_event(self) -> None:
        if self.cursor >= self.total_events:
            self.completed = True
            return
        event = self.events[self.cursor]
        self.cursor += 1
        self.last_event_type = str(event.get("type"))
        self._apply_event(event)
        if self.cursor >= self.total_events:
            self.completed = True

    def _apply_event(self, event: Dict[str, object]) -> None:
        event_type = event.get("type")
        if event_type == "set_scene":
            self.scene.set_scene(
                x_min=float(event["x_min"]),  # type: ignore[arg-type]
                x_max=float(event["x_max"]),  # type: ignore[arg-type]
                y_min=float(event["y_min"]),  # type: ignore[arg-type]
                y_max=float(event["y_max"]),  # type: ignore[arg-type]
            )
        elif event_type == "add_point":
            self.scene.add_point(int(event["idx"]), float(event["x"]), float(event["y"]))  # type: ignore[arg-type]
        elif event_type == "dp_pick":
            self.current_pick = event
        elif event_type == "tour":
            self.current_pick = None
            self.tour = ([int(i) for i in event["points"]], float(event["length"]))  # type: ignore[union-attr, arg-type]
        elif event_type == "done":
            self.completed = True
        else:
            log(f"[Renderer] Unhandled event type: {event_type}")

    # ------------------------------------------------------------------ drawing
    def draw_frame(self, surface: "pygame.Surface") -> None:
        self.scene.draw_background(surface)
        self.scene.draw_axes(surface)

        endpoints: Tuple[int, ...] = ()
        if self.current_pick is not None:
            path = [int(k) for k in self.current_pick["path"]]  # type: ignore[union-attr]
            self.scene.draw_index_path(surface, path, DP_PICK_COLOR, width=2)
            endpoints = (path[0], path[-1])
        if self.tour is not None:
            self.scene.draw_index_path(surface, self.tour[0], TOUR_COLOR, width=3, closed=True)

        self.scene.draw_points(surface, endpoints)
        for idx in self.scene.points:
            pos = self.scene.label_position(idx)
            if pos is not None:
                surface.blit(self.font.render(str(idx), True, (230, 230, 230)), pos)
        self._draw_hud(surface)

    def _draw_hud(self, surface: "pygame.Surface") -> None:
        lines = [
            f"Event: {self.cursor}/{self.total_events}",
            f"Autoplay: {'on' if self.autoplay else 'off'} x{self.SPEED_LEVELS[self.speed_index]:.1f}",
        ]
        if self.current_pick is not None:
            pick = self.current_pick
            lines.append(f"A[{pick['i']},{pick['j']}] = {float(pick['cost']):.4f}")  # type: ignore[arg-type]
        if self.tour is not None:
            lines.append(f"Tour length = {self.tour[1]:.4f}")

        x = 10
        y = 10
        for line in lines:
            text_surface = self.font.render(line, True, (230, 230, 230))
            surface.blit(text_surface, (x, y))
            y += text_surface.get_height() + 2


__all__ = ["PygameRenderer"]
