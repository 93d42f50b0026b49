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

"""
Axis annotations: focal point ticks and distance brackets.

Brackets use a fixed two-row layout. The object-lens and lens-image spans sit
on row 0; the lens-screen span always sits on row 1 so its label never lands
on top of the lens-image label. The row is a property of the pair being
annotated, not the result of an overlap search.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .constants import (
    BRACKET_LABEL_OFFSET,
    BRACKET_LABEL_ROW_SHIFT,
    BRACKET_PAD,
    BRACKET_ROW_SPACING,
    MATCH_TOLERANCE,
    PX_PER_UNIT,
    TICK_HALF_HEIGHT,
    TICK_LABEL_OFFSET,
    UNIT_LABEL,
)
from .geometry import Point
from .scene import Scene
from .solver import OpticalResult


# Bracket kinds and their fixed layout rows
OBJECT_LENS = 'object-lens'
LENS_IMAGE = 'lens-image'
LENS_SCREEN = 'lens-screen'

BRACKET_ROWS = {
    OBJECT_LENS: 0,
    LENS_IMAGE: 0,
    LENS_SCREEN: 1,
}


@dataclass(frozen=True)
class Tick:
    """A short vertical mark across the axis, with an optional label below it."""
    x: float
    y1: float
    y2: float
    label: Optional[str] = None
    label_position: Optional[Point] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'x': self.x,
            'y1': self.y1,
            'y2': self.y2,
            'label': self.label,
            'label_position': self.label_position.to_dict() if self.label_position else None,
        }


@dataclass(frozen=True)
class Bracket:
    """
    A horizontal span between two axis positions with a centered label.

    Attributes:
        kind: One of OBJECT_LENS, LENS_IMAGE, LENS_SCREEN
        x1, x2: Span endpoints (in drawing order, not sorted)
        y: Row of the horizontal bracket line
        row: Layout row index
        label: Pre-formatted label in physical units
        label_position: Anchor of the centered label
        end_ticks: Ticks on the axis at both ends of the span
    """
    kind: str
    x1: float
    x2: float
    y: float
    row: int
    label: str
    label_position: Point
    end_ticks: Tuple[Tick, Tick]

    @property
    def span(self) -> float:
        return abs(self.x2 - self.x1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind,
            'x1': self.x1,
            'x2': self.x2,
            'y': self.y,
            'row': self.row,
            'label': self.label,
            'label_position': self.label_position.to_dict(),
            'end_ticks': [t.to_dict() for t in self.end_ticks],
        }


@dataclass(frozen=True)
class Annotations:
    """Ticks, brackets and the in-focus flag for one scene."""
    ticks: Tuple[Tick, ...]
    brackets: Tuple[Bracket, ...]
    screen_match: bool

    def bracket(self, kind: str) -> Optional[Bracket]:
        """Return the bracket of the given kind, or None if it is not drawn."""
        for b in self.brackets:
            if b.kind == kind:
                return b
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'ticks': [t.to_dict() for t in self.ticks],
            'brackets': [b.to_dict() for b in self.brackets],
            'screen_match': self.screen_match,
        }


def px_to_units(px: float, px_per_unit: float = PX_PER_UNIT) -> float:
    """Convert a length in pixels to physical units."""
    return px / px_per_unit


def format_units(px: float, px_per_unit: float = PX_PER_UNIT,
                 unit: str = UNIT_LABEL) -> str:
    """Format a pixel length as physical units with 2 decimals, e.g. '8.00 cm'."""
    return f'{px_to_units(px, px_per_unit):.2f} {unit}'


def axis_tick(axis_y: float, x: float, label: Optional[str] = None) -> Tick:
    label_position = Point(x, axis_y + TICK_LABEL_OFFSET) if label else None
    return Tick(
        x=x,
        y1=axis_y + TICK_HALF_HEIGHT,
        y2=axis_y - TICK_HALF_HEIGHT,
        label=label,
        label_position=label_position,
    )


def make_bracket(axis_y: float, kind: str, x1: float, x2: float, label: str) -> Bracket:
    """Place a bracket on the row assigned to its kind."""
    row = BRACKET_ROWS[kind]
    y = axis_y + BRACKET_PAD + row * BRACKET_ROW_SPACING
    label_y = y + BRACKET_LABEL_OFFSET + row * BRACKET_LABEL_ROW_SHIFT
    return Bracket(
        kind=kind,
        x1=x1,
        x2=x2,
        y=y,
        row=row,
        label=label,
        label_position=Point((x1 + x2) / 2, label_y),
        end_ticks=(axis_tick(axis_y, x1), axis_tick(axis_y, x2)),
    )


def screen_matches(screen_x: float, image_x: float,
                   tolerance: float = MATCH_TOLERANCE) -> bool:
    """True when the screen sits on the image plane (the projection is in focus)."""
    return abs(screen_x - image_x) < tolerance


def annotate(scene: Scene, result: OpticalResult, image_x: float,
             px_per_unit: float = PX_PER_UNIT, unit: str = UNIT_LABEL,
             match_tolerance: float = MATCH_TOLERANCE) -> Annotations:
    """
    Lay out the focal ticks and distance brackets for a solved scene.

    Args:
        scene: Scene positions
        result: OpticalResult for the scene
        image_x: Image plane position (the infinity stand-in when the image
            is at infinity, see ray_geometry.image_x_for)
        px_per_unit: Scale used to convert pixel lengths to physical units
        unit: Unit suffix for the labels
        match_tolerance: Distance below which the screen counts as in focus

    Returns:
        Annotations
    """
    f = result.focal_length
    focal_label = format_units(f, px_per_unit, unit)
    ticks = (
        axis_tick(scene.axis_y, scene.lens_x + f, focal_label),
        axis_tick(scene.axis_y, scene.lens_x - f, focal_label),
    )

    brackets = [
        make_bracket(
            scene.axis_y, OBJECT_LENS, scene.object_x, scene.lens_x,
            f'do={format_units(abs(result.object_distance), px_per_unit, unit)}',
        )
    ]
    if not result.image_at_infinity:
        brackets.append(make_bracket(
            scene.axis_y, LENS_IMAGE, scene.lens_x, image_x,
            f'di={format_units(abs(result.image_distance), px_per_unit, unit)}',
        ))
    brackets.append(make_bracket(
        scene.axis_y, LENS_SCREEN, scene.lens_x, scene.screen_x,
        f'screen-lens={format_units(abs(scene.screen_x - scene.lens_x), px_per_unit, unit)}',
    ))

    return Annotations(
        ticks=ticks,
        brackets=tuple(brackets),
        screen_match=screen_matches(scene.screen_x, image_x, match_tolerance),
    )
