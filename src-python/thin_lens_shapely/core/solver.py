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
from typing import Any, Dict, Optional

from .constants import (
    MIN_INVERSE_IMAGE_DISTANCE,
    MIN_OBJECT_DISTANCE,
    OBJECT_HEIGHT,
)


@dataclass(frozen=True)
class OpticalResult:
    """
    Image formed by a converging thin lens.

    Attributes:
        object_distance: lens_x - object_x (positive when the object is left of the lens)
        image_distance: Signed image distance, or math.inf when the image is at infinity.
            Negative values mean a virtual image on the object's side.
        is_real: True when image_distance >= 0 (an image at infinity counts as real)
        magnification: -image_distance / object_distance, or 0 for an image at infinity.
            Negative means inverted.
        image_height: |magnification| * object_height
        focal_length: Focal length used for the computation
        object_height: Object height used for the computation
    """
    object_distance: float
    image_distance: float
    is_real: bool
    magnification: float
    image_height: float
    focal_length: float
    object_height: float

    @property
    def image_at_infinity(self) -> bool:
        return not math.isfinite(self.image_distance)

    @property
    def is_inverted(self) -> bool:
        return self.magnification < 0

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly dictionary; an image at infinity is encoded as None."""
        image_distance: Optional[float] = (
            None if self.image_at_infinity else self.image_distance
        )
        return {
            'object_distance': self.object_distance,
            'image_distance': image_distance,
            'image_at_infinity': self.image_at_infinity,
            'is_real': self.is_real,
            'magnification': self.magnification,
            'image_height': self.image_height,
            'focal_length': self.focal_length,
            'object_height': self.object_height,
        }


def image_distance_for(object_distance: float, focal_length: float) -> float:
    """
    Solve the thin lens equation 1/f = 1/do + 1/di for di.

    Degenerate configurations return math.inf instead of dividing by a value
    close to zero:
    - the object sits on the lens (|do| < MIN_OBJECT_DISTANCE)
    - the object sits on the focal plane (|1/f - 1/do| < MIN_INVERSE_IMAGE_DISTANCE)
    """
    if abs(object_distance) < MIN_OBJECT_DISTANCE:
        return math.inf
    inverse = 1 / focal_length - 1 / object_distance
    if abs(inverse) < MIN_INVERSE_IMAGE_DISTANCE:
        return math.inf
    return 1 / inverse


def solve(object_x: float, lens_x: float, focal_length: float,
          object_height: float = OBJECT_HEIGHT) -> OpticalResult:
    """
    Compute the image of the object through the lens.

    This function is pure and total: it never raises for finite inputs.
    A positive focal length is expected; enforcing it is the job of the
    input layer (see OpticsEngine.set_focal_length).

    Args:
        object_x: Horizontal position of the object
        lens_x: Horizontal position of the lens
        focal_length: Focal length of the converging lens (> 0)
        object_height: Height of the object (>= 0)

    Returns:
        OpticalResult

    Example:
        >>> result = solve(0, 200, 80)
        >>> round(result.image_distance, 2), round(result.magnification, 3)
        (133.33, -0.667)
    """
    object_distance = lens_x - object_x
    image_distance = image_distance_for(object_distance, focal_length)
    is_real = image_distance >= 0

    if math.isfinite(image_distance):
        magnification = -image_distance / object_distance
    else:
        magnification = 0.0

    return OpticalResult(
        object_distance=object_distance,
        image_distance=image_distance,
        is_real=is_real,
        magnification=magnification,
        image_height=abs(magnification) * object_height,
        focal_length=focal_length,
        object_height=object_height,
    )
