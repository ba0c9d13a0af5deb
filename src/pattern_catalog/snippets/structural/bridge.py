"""Bridge: split an abstraction from its implementation so both can vary."""
from abc import ABC, abstractmethod


class Renderer(ABC):
    @abstractmethod
    def render_circle(self, radius: float) -> str:
        pass


class VectorRenderer(Renderer):
    def render_circle(self, radius: float) -> str:
        return f"Drawing a circle of radius {radius}"


class RasterRenderer(Renderer):
    def render_circle(self, radius: float) -> str:
        return f"Drawing pixels for a circle of radius {radius}"


class Shape(ABC):
    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    @abstractmethod
    def draw(self) -> str:
        pass


class Circle(Shape):
    def __init__(self, renderer: Renderer, radius: float):
        super().__init__(renderer)
        self.radius = radius

    def draw(self) -> str:
        return self.renderer.render_circle(self.radius)

    def resize(self, factor: float) -> None:
        self.radius *= factor


def demo() -> None:
    for renderer in (VectorRenderer(), RasterRenderer()):
        circle = Circle(renderer, 5)
        circle.resize(2)
        print(circle.draw())
