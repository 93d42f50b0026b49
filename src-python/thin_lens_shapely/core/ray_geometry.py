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
from typing import Any, Dict, Tuple

from .constants import INFINITY_DISTANCE, ZERO_RUN_SUBSTITUTE
from .geometry import Point, Segment, extrapolate_y, slope
from .scene import Scene
from .solver import OpticalResult


@dataclass(frozen=True)
class RayTrace:
    """
    The two principal rays leaving the top of the object.

    Index 0 of each pair is the parallel ray (horizontal to the lens, then
    bent toward the image point), index 1 is the chief ray (through the lens
    center, undeviated).

    Attributes:
        pre_lens: (parallel, chief) segments from the object top to the lens
        post_lens: (parallel, chief) segments from the lens to the image point
        dashed: True for a virtual image; the post-lens segments then show
            where the diverging rays appear to come from
        image_point: Point where both rays meet (or appear to meet)
        image_y_via_center: Chief ray extrapolated to the image plane. Used
            to place the virtual image glyph.
    """
    pre_lens: Tuple[Segment, Segment]
    post_lens: Tuple[Segment, Segment]
    dashed: bool
    image_point: Point
    image_y_via_center: float

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return self.pre_lens + self.post_lens

    def to_dict(self) -> Dict[str, Any]:
        return {
            'pre_lens': [s.to_dict() for s in self.pre_lens],
            'post_lens': [s.to_dict() for s in self.post_lens],
            'dashed': self.dashed,
            'image_point': self.image_point.to_dict(),
            'image_y_via_center': self.image_y_via_center,
        }


def image_x_for(scene: Scene, result: OpticalResult,
                infinity_distance: float = INFINITY_DISTANCE) -> float:
    """
    Horizontal position of the image plane.

    An image at infinity is placed ``infinity_distance`` to the right of the
    lens so it can still be drawn and compared against the screen.
    """
    if math.isfinite(result.image_distance):
        return scene.lens_x + result.image_distance
    return scene.lens_x + infinity_distance


def chief_ray_y_at(scene: Scene, x: float) -> float:
    """
    Y of the chief ray (object top through lens center) at horizontal ``x``.

    When the object sits exactly on the lens the run is replaced by a tiny
    nonzero value instead of zero.
    """
    chief_slope = slope(scene.object_top, scene.lens_center, ZERO_RUN_SUBSTITUTE)
    return extrapolate_y(scene.lens_center, chief_slope, x)


def trace_rays(scene: Scene, result: OpticalResult,
               infinity_distance: float = INFINITY_DISTANCE) -> RayTrace:
    """
    Build the principal ray diagram for a solved scene.

    Args:
        scene: Scene positions
        result: OpticalResult from solve() for the same scene
        infinity_distance: Stand-in distance for an image at infinity

    Returns:
        RayTrace
    """
    top = scene.object_top
    parallel_hit = Point(scene.lens_x, top.y)
    center_hit = scene.lens_center

    image_x = image_x_for(scene, result, infinity_distance)
    image_y_via_center = chief_ray_y_at(scene, image_x)

    # Rays leaving a focal-plane object are drawn meeting on the axis
    if result.image_at_infinity:
        image_point = Point(image_x, scene.axis_y)
    else:
        image_point = Point(image_x, image_y_via_center)

    return RayTrace(
        pre_lens=(Segment(top, parallel_hit), Segment(top, center_hit)),
        post_lens=(Segment(parallel_hit, image_point), Segment(center_hit, image_point)),
        dashed=not result.is_real,
        image_point=image_point,
        image_y_via_center=image_y_via_center,
    )
