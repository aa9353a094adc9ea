"""Shapes: area calculation behind a single contract, plus renderer bridges.

- ``AREA``: every shape, native or adapted, exposes ``calculate_area()``.
- Legacy shapes with their own area methods are wrapped by adapters.
- ``ShapeCalculator`` holds the area dispatch so shapes stay plain data.
- Drawable shapes delegate to a ``RENDERING_API`` implementation chosen at
  construction time (web or desktop).
"""
from __future__ import annotations

import math
from typing import Any

from patternkit.contracts import declare
from patternkit.registry import Registry

AREA = declare("AreaCalculator", "calculate_area")
RENDERING_API = declare("RenderingAPI", "render_circle", "render_square")


def _positive(name: str, value: float) -> float:
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


class Circle:
    def __init__(self, radius: float) -> None:
        self.radius = _positive("radius", radius)

    def calculate_area(self) -> float:
        return math.pi * self.radius * self.radius


class Square:
    def __init__(self, side: float) -> None:
        self.side = _positive("side", side)

    def calculate_area(self) -> float:
        return self.side * self.side


class Rectangle:
    def __init__(self, width: float, height: float) -> None:
        self.width = _positive("width", width)
        self.height = _positive("height", height)

    def calculate_area(self) -> float:
        return self.width * self.height


class LegacyTriangle:
    def __init__(self, base: float, height: float) -> None:
        self.base = base
        self.height = height

    def calculate_triangle_area(self) -> float:
        return 0.5 * self.base * self.height


class LegacyCircle:
    def __init__(self, radius: float) -> None:
        self.radius = radius

    def calculate_circle_area(self) -> float:
        return math.pi * self.radius ** 2


class TriangleAdapter:
    def __init__(self, triangle: LegacyTriangle) -> None:
        self.triangle = triangle

    def calculate_area(self) -> float:
        return self.triangle.calculate_triangle_area()


class CircleAdapter:
    def __init__(self, circle: LegacyCircle) -> None:
        self.circle = circle

    def calculate_area(self) -> float:
        return self.circle.calculate_circle_area()


class ShapeCalculator:
    @staticmethod
    def calculate_area(shape: Any) -> float:
        return AREA.invoke(shape, "calculate_area")

    @classmethod
    def total_area(cls, shapes: list[Any]) -> float:
        return sum(cls.calculate_area(s) for s in shapes)


SHAPES: Registry[Any] = Registry("shape")
SHAPES.register("Circle", Circle)
SHAPES.register("Square", Square)
SHAPES.register("Rectangle", Rectangle)
SHAPES.register("Triangle", lambda base, height: TriangleAdapter(LegacyTriangle(base, height)))


# Bridge: shapes hold a rendering implementation instead of subclassing per platform

class WebRenderer:
    def render_circle(self, radius: float) -> str:
        return f"Drawing a circle with radius {radius} on the web"

    def render_square(self, side: float) -> str:
        return f"Drawing a square with side {side} on the web"


class DesktopRenderer:
    def render_circle(self, radius: float) -> str:
        return f"Drawing a circle with radius {radius} on the desktop"

    def render_square(self, side: float) -> str:
        return f"Drawing a square with side length {side} on the desktop"


RENDERERS: Registry[Any] = Registry("renderer")
RENDERERS.register("Web", WebRenderer)
RENDERERS.register("Desktop", DesktopRenderer)


class DrawableCircle:
    def __init__(self, radius: float, api: Any) -> None:
        self.radius = radius
        self.api = api

    def draw(self) -> str:
        return RENDERING_API.invoke(self.api, "render_circle", self.radius)


class DrawableSquare:
    def __init__(self, side: float, api: Any) -> None:
        self.side = side
        self.api = api

    def draw(self) -> str:
        return RENDERING_API.invoke(self.api, "render_square", self.side)


__all__ = [
    "AREA",
    "RENDERING_API",
    "Circle",
    "Square",
    "Rectangle",
    "LegacyTriangle",
    "LegacyCircle",
    "TriangleAdapter",
    "CircleAdapter",
    "ShapeCalculator",
    "SHAPES",
    "WebRenderer",
    "DesktopRenderer",
    "RENDERERS",
    "DrawableCircle",
    "DrawableSquare",
]
