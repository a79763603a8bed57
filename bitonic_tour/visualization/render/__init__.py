from bitonic_tour.visualization.render.base_scene import BaseScene
from bitonic_tour.visualization.render.pygame_renderer import PygameRenderer

__all__ = ["BaseScene", "PygameRenderer"]
