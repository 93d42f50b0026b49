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

Engine configuration
====================
Fixed parameters of a simulation session: the optical axis row, the object
height, the pixel-to-physical scale and the focal length slider range.
Defaults come from core.constants; a JSON file can override any subset.

Example file::

    {"px_per_unit": 20, "unit_label": "mm", "focal_length_max": 250}
"""

import dataclasses
import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

from . import constants


@dataclass(frozen=True)
class EngineConfig:
    axis_y: float = constants.AXIS_Y
    object_height: float = constants.OBJECT_HEIGHT
    px_per_unit: float = constants.PX_PER_UNIT
    unit_label: str = constants.UNIT_LABEL
    focal_length_min: float = constants.FOCAL_LENGTH_MIN
    focal_length_max: float = constants.FOCAL_LENGTH_MAX
    focal_length_default: float = constants.FOCAL_LENGTH_DEFAULT
    infinity_distance: float = constants.INFINITY_DISTANCE
    match_tolerance: float = constants.MATCH_TOLERANCE
    min_entity_gap: float = constants.MIN_ENTITY_GAP

    def __post_init__(self):
        if not isinstance(self.unit_label, str):
            raise ValueError(f"EngineConfig.unit_label must be a string, got {self.unit_label!r}")
        for f in dataclasses.fields(self):
            if f.name == 'unit_label':
                continue
            value = getattr(self, f.name)
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"EngineConfig.{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"EngineConfig.{f.name} must be finite, got {value!r}")
        if self.object_height < 0:
            raise ValueError(f"object_height must be >= 0, got {self.object_height}")
        if self.px_per_unit <= 0:
            raise ValueError(f"px_per_unit must be > 0, got {self.px_per_unit}")
        if not 0 < self.focal_length_min <= self.focal_length_max:
            raise ValueError(
                "Focal length bounds must satisfy 0 < min <= max, "
                f"got min={self.focal_length_min}, max={self.focal_length_max}"
            )
        if not self.focal_length_min <= self.focal_length_default <= self.focal_length_max:
            raise ValueError(
                f"focal_length_default={self.focal_length_default} is outside "
                f"[{self.focal_length_min}, {self.focal_length_max}]"
            )
        if self.infinity_distance <= 0:
            raise ValueError(f"infinity_distance must be > 0, got {self.infinity_distance}")
        if self.match_tolerance < 0:
            raise ValueError(f"match_tolerance must be >= 0, got {self.match_tolerance}")
        if self.min_entity_gap < 0:
            raise ValueError(f"min_entity_gap must be >= 0, got {self.min_entity_gap}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EngineConfig':
        """Build a config from a dictionary, rejecting unknown keys."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"Unknown config key(s): {', '.join(unknown)}. "
                f"Valid keys: {sorted(known)}"
            )
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


def load_config(path: Union[str, Path]) -> EngineConfig:
    """
    Read an EngineConfig from a JSON file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the JSON is malformed or a value is invalid.
    """
    text = Path(path).read_text(encoding='utf-8')
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return EngineConfig.from_dict(data)
