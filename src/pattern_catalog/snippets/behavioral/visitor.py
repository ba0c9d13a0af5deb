"""Visitor: add operations to a class hierarchy without changing its classes."""
import math
from abc import ABC, abstractmethod


class Shape(ABC):
    @abstractmethod
    def accept(self, visitor: "ShapeVisitor"):
        pass


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def accept(self, visitor: "ShapeVisitor"):
        return visitor.visit_circle(self)


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def accept(self, visitor: "ShapeVisitor"):
        return visitor.visit_rectangle(self)


class ShapeVisitor(ABC):
    @abstractmethod
    def visit_circle(self, circle: Circle):
        pass

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle):
        pass


class AreaVisitor(ShapeVisitor):
    def visit_circle(self, circle: Circle) -> float:
        return math.pi * circle.radius ** 2

    def visit_rectangle(self, rectangle: Rectangle) -> float:
        return rectangle.width * rectangle.height


class DescriptionVisitor(ShapeVisitor):
    def visit_circle(self, circle: Circle) -> str:
        return f"circle r={circle.radius}"

    def visit_rectangle(self, rectangle: Rectangle) -> str:
        return f"rectangle {rectangle.width}x{rectangle.height}"


def demo() -> None:
    shapes = [Circle(2), Rectangle(3, 4)]
    area = AreaVisitor()
    describe = DescriptionVisitor()
    for shape in shapes:
        print(f"{shape.accept(describe)}: area {shape.accept(area):.2f}")
    total = sum(shape.accept(area) for shape in shapes)
    print(f"total area {total:.2f}")
