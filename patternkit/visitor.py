"""Shapes that accept visitors for area and perimeter operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class ShapeVisitor:
    """A visitor that names its operation for each kind of shape."""

    operation: str = ""

    def _describe(self, shape_name: str) -> str:
        return f"Call {self.operation} {shape_name}"

    def visit_circle(self, circle: Circle) -> str:
        """Handle a circle."""
        return self._describe("circle")

    def visit_rectangle(self, rectangle: Rectangle) -> str:
        """Handle a rectangle."""
        return self._describe("rectangle")


class Shape(ABC):
    @abstractmethod
    def accept(self, visitor: ShapeVisitor) -> str:
        """Dispatch to the visitor method for this shape."""


@dataclass
class Circle(Shape):
    radius: float

    def accept(self, visitor: ShapeVisitor) -> str:
        return visitor.visit_circle(self)


@dataclass
class Rectangle(Shape):
    width: float
    height: float

    def accept(self, visitor: ShapeVisitor) -> str:
        return visitor.visit_rectangle(self)


class AreaCalculator(ShapeVisitor):
    operation = "area"


class PerimeterCalculator(ShapeVisitor):
    operation = "perimeter"


def main(argv: list[str] | None = None) -> int:
    """Visit a few shapes with both calculators."""
    shapes: list[Shape] = [Circle(5), Rectangle(5, 10), Circle(5)]
    area = AreaCalculator()
    perimeter = PerimeterCalculator()
    for shape in shapes:
        print(shape.accept(area))
        print(shape.accept(perimeter))
    return 0