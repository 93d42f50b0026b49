"""
Copyright 2026 thin-lens-shapely authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import math
from dataclasses import dataclass
from typing import Dict, Tuple

from shapely.geometry import Point as ShapelyPoint, LineString


@dataclass(frozen=True)
class Point:
    """
    A point in the 2D drawing plane.

    Coordinates follow the screen convention used by the scene: x grows to
    the right along the optical axis, y grows downward.
    """
    x: float
    y: float

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary representation."""
        return {'x': self.x, 'y': self.y}


@dataclass(frozen=True)
class Segment:
    """
    A straight segment between two points.

    Used for the ray pieces drawn before and after the lens.
    """
    p1: Point
    p2: Point

    def to_shapely(self) -> LineString:
        """Convert to Shapely LineString."""
        return LineString([(self.p1.x, self.p1.y), (self.p2.x, self.p2.y)])

    @classmethod
    def from_shapely(cls, sl: LineString) -> 'Segment':
        """Create Segment from the first and last coordinates of a LineString."""
        coords = list(sl.coords)
        return cls(Point(*coords[0][:2]), Point(*coords[-1][:2]))

    @property
    def length(self) -> float:
        return math.hypot(self.p2.x - self.p1.x, self.p2.y - self.p1.y)

    def is_finite(self) -> bool:
        return self.p1.is_finite() and self.p2.is_finite()

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {'p1': self.p1.to_dict(), 'p2': self.p2.to_dict()}


def slope(p1: Point, p2: Point, zero_run: float) -> float:
    """
    Slope dy/dx of the line through p1 and p2.

    A run of exactly zero is replaced by ``zero_run`` so the result stays
    finite (a vertical line becomes a very steep one).
    """
    run = p2.x - p1.x
    if run == 0:
        run = zero_run
    return (p2.y - p1.y) / run


def extrapolate_y(anchor: Point, line_slope: float, x: float) -> float:
    """Y coordinate at ``x`` on the line through ``anchor`` with ``line_slope``."""
    return anchor.y + line_slope * (x - anchor.x)


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def flame_triangle(box_height: float, pointing_down: bool, base_y: float,
                   height_ratio: float, width_ratio: float,
                   height_range: Tuple[float, float],
                   width_range: Tuple[float, float]) -> Tuple[Point, Point, Point]:
    """
    Triangle for the candle flame glyph, relative to the glyph anchor.

    The flame size scales with the box height and is clamped to the given
    ranges. Returns (tip, left base, right base).
    """
    flame_h = clamp(box_height * height_ratio, *height_range)
    flame_w = clamp(box_height * width_ratio, *width_range)
    tip_y = base_y + flame_h if pointing_down else base_y - flame_h
    return (
        Point(0.0, tip_y),
        Point(-flame_w / 2, base_y),
        Point(flame_w / 2, base_y),
    )
