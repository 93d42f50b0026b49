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
import dataclasses
import math
from dataclasses import dataclass

from .constants import AXIS_Y, OBJECT_HEIGHT
from .geometry import Point


@dataclass(frozen=True)
class Scene:
    """
    Positions of the object, lens and screen along the optical axis.

    The scene is an immutable value: every drag or slider change produces a
    new Scene, which is then handed to the solver and the layout code. Only
    the horizontal positions take part in the optics; the vertical rows of
    the lens and screen glyphs are a presentation concern.

    Attributes:
        object_x (float): Horizontal position of the object (candle)
        lens_x (float): Horizontal position of the lens center
        screen_x (float): Horizontal position of the projection screen
        axis_y (float): Row of the optical axis
        object_height (float): Height of the object above the axis (>= 0)
    """
    object_x: float
    lens_x: float
    screen_x: float
    axis_y: float = AXIS_Y
    object_height: float = OBJECT_HEIGHT

    def __post_init__(self):
        for name in ('object_x', 'lens_x', 'screen_x', 'axis_y', 'object_height'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"Scene.{name} must be finite, got {value!r}")
        if self.object_height < 0:
            raise ValueError(
                f"Scene.object_height must be >= 0, got {self.object_height!r}"
            )

    @property
    def object_top(self) -> Point:
        """Top of the object; the object stands on the axis and points up."""
        return Point(self.object_x, self.axis_y - self.object_height)

    @property
    def lens_center(self) -> Point:
        return Point(self.lens_x, self.axis_y)

    def replace(self, **changes) -> 'Scene':
        """Return a copy of this scene with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def to_dict(self):
        return dataclasses.asdict(self)
