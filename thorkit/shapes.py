"""Factories for convex shapes: lines, rounded rectangles, polygons and stars."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Union

from thorkit.graphics import Color, Vector2

VectorLike = Union[Vector2, Iterable[float]]

_SEGMENTS_PER_CORNER = 20
_DEFAULT_OUTLINE = Color(0, 0, 0)


@dataclass
class ConvexShape:
    """A convex polygon with fill and outline properties."""

    points: List[Vector2] = field(default_factory=list)
    fill_color: Color = field(default_factory=lambda: Color.WHITE)
    outline_color: Color = field(default_factory=lambda: Color.WHITE)
    outline_thickness: float = 0.0

    @property
    def point_count(self) -> int:
        return len(self.points)

    def add_point(self, point: VectorLike) -> None:
        self.points.append(_vector(point))

    def __iter__(self) -> Iterator[Vector2]:
        return iter(self.points)


def _vector(value: VectorLike) -> Vector2:
    if isinstance(value, Vector2):
        return value
    x, y = value
    return Vector2(float(x), float(y))


def _polar(radius: float, degrees: float) -> Vector2:
    angle = math.radians(degrees)
    return Vector2(radius * math.cos(angle), radius * math.sin(angle))


def _check_outline(outline_thickness: float) -> None:
    if outline_thickness < 0:
        raise ValueError("outline thickness must not be negative")


def line(direction: VectorLike, color: Color, thickness: float = 1.0) -> ConvexShape:
    """Line from the origin to direction, as a thin rectangle."""
    direction = _vector(direction)
    length = math.hypot(direction.x, direction.y)
    if length == 0:
        raise ValueError("direction must not be the zero vector")
    perpendicular = Vector2(-direction.y, direction.x) / length * (0.5 * thickness)
    return ConvexShape(
        points=[
            -perpendicular,
            perpendicular,
            direction + perpendicular,
            direction - perpendicular,
        ],
        fill_color=color,
    )


def rounded_rect(
    size: VectorLike,
    corner_radius: float,
    fill_color: Color,
    outline_thickness: float = 0.0,
    outline_color: Color = _DEFAULT_OUTLINE,
) -> ConvexShape:
    """Rectangle of the given size whose corners are rounded with corner_radius."""
    _check_outline(outline_thickness)
    size = _vector(size)
    shape = ConvexShape(
        fill_color=fill_color,
        outline_color=outline_color,
        outline_thickness=outline_thickness,
    )
    near_x, far_x = corner_radius, size.x - corner_radius
    near_y, far_y = corner_radius, size.y - corner_radius
    step = 90.0 / _SEGMENTS_PER_CORNER
    corners = (
        (Vector2(far_x, far_y), 0.0),
        (Vector2(near_x, far_y), 90.0),
        (Vector2(near_x, near_y), 180.0),
        (Vector2(far_x, near_y), 270.0),
    )
    for center, start in corners:
        for segment in range(_SEGMENTS_PER_CORNER):
            shape.add_point(center + _polar(corner_radius, start + segment * step))
    return shape


def polygon(
    point_count: int,
    radius: float,
    fill_color: Color,
    outline_thickness: float = 0.0,
    outline_color: Color = _DEFAULT_OUTLINE,
) -> ConvexShape:
    """Regular polygon centred on the origin."""
    if radius <= 0:
        raise ValueError("radius must be positive")
    _check_outline(outline_thickness)
    return ConvexShape(
        points=[_polar(radius, 360.0 * i / point_count) for i in range(point_count)],
        fill_color=fill_color,
        outline_color=outline_color,
        outline_thickness=outline_thickness,
    )


def star(
    star_points: int,
    inner_radius: float,
    outer_radius: float,
    fill_color: Color,
    outline_thickness: float = 0.0,
    outline_color: Color = _DEFAULT_OUTLINE,
) -> ConvexShape:
    """Star centred on the origin, alternating inner and outer points."""
    if inner_radius <= 0:
        raise ValueError("inner radius must be positive")
    if outer_radius <= inner_radius:
        raise ValueError("outer radius must exceed inner radius")
    _check_outline(outline_thickness)
    shape = ConvexShape(
        fill_color=fill_color,
        outline_color=outline_color,
        outline_thickness=outline_thickness,
    )
    for i in range(star_points):
        inner_phi = 360.0 * i / star_points
        shape.add_point(_polar(inner_radius, inner_phi))
        shape.add_point(_polar(outer_radius, inner_phi + 180.0 / star_points))
    return shape