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

import logging
import math
from typing import Optional

from .config import EngineConfig
from .render_model import RenderModel, build_render_model
from .scene import Scene

logger = logging.getLogger(__name__)


class OpticsEngine:
    """
    Live state of the lens bench and the render model derived from it.

    The engine owns the only mutable state of a session: the current Scene
    and focal length. The input layer (drag handler, slider) calls the
    ``move_*`` and ``set_focal_length`` methods; each call applies the input
    constraints, stores the new state and rebuilds the render model
    synchronously before returning it. The model is never patched in place.

    Input constraints:
        - The object stays at least ``min_entity_gap`` to the left of the lens.
        - The screen stays at least ``min_entity_gap`` to the right of the lens.
        - The focal length must be a positive finite number and is clamped
          into [focal_length_min, focal_length_max].

    Attributes:
        config (EngineConfig): Fixed session parameters
        scene (Scene): Current positions
        focal_length (float): Current focal length
        model (RenderModel): Render model for the current state
    """

    def __init__(self, object_x: float = 100.0, lens_x: float = 400.0,
                 screen_x: float = 700.0, focal_length: Optional[float] = None,
                 config: Optional[EngineConfig] = None) -> None:
        """
        Initialize the engine and compute the first render model.

        The initial object and screen positions go through the same input
        constraints as move_object() and move_screen().

        Args:
            object_x (float): Initial object position (default: 100)
            lens_x (float): Initial lens position (default: 400)
            screen_x (float): Initial screen position (default: 700)
            focal_length (float or None): Initial focal length. If None, uses
                config.focal_length_default.
            config (EngineConfig or None): Session parameters (defaults if None)
        """
        self.config: EngineConfig = config if config is not None else EngineConfig()
        self._check_position('object_x', object_x)
        self._check_position('lens_x', lens_x)
        self._check_position('screen_x', screen_x)
        self.scene: Scene = Scene(
            object_x=min(object_x, lens_x - self.config.min_entity_gap),
            lens_x=lens_x,
            screen_x=max(screen_x, lens_x + self.config.min_entity_gap),
            axis_y=self.config.axis_y,
            object_height=self.config.object_height,
        )
        self.focal_length: float = self._clamp_focal_length(
            self.config.focal_length_default if focal_length is None else focal_length
        )
        self.model: RenderModel = self.recompute()

    def _clamp_focal_length(self, value: float) -> float:
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"Focal length must be a positive finite number, got {value!r}")
        clamped = min(max(value, self.config.focal_length_min), self.config.focal_length_max)
        if clamped != value:
            logger.info("Focal length %s clamped to %s", value, clamped)
        return clamped

    @staticmethod
    def _check_position(name: str, value: float) -> None:
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")

    def recompute(self) -> RenderModel:
        """Rebuild the render model from the current scene and focal length."""
        self.model = build_render_model(self.scene, self.focal_length, self.config)
        result = self.model.result
        logger.debug(
            "Recomputed: do=%.3f di=%s m=%.4f real=%s screen_match=%s",
            result.object_distance, result.image_distance,
            result.magnification, result.is_real, self.model.screen_match,
        )
        return self.model

    def move_object(self, x: float) -> RenderModel:
        """Move the object, keeping it left of the lens."""
        self._check_position('object_x', x)
        x = min(x, self.scene.lens_x - self.config.min_entity_gap)
        self.scene = self.scene.replace(object_x=x)
        return self.recompute()

    def move_lens(self, x: float) -> RenderModel:
        """Move the lens. The object and screen stay where they are."""
        self._check_position('lens_x', x)
        self.scene = self.scene.replace(lens_x=x)
        return self.recompute()

    def move_screen(self, x: float) -> RenderModel:
        """Move the screen, keeping it right of the lens."""
        self._check_position('screen_x', x)
        x = max(x, self.scene.lens_x + self.config.min_entity_gap)
        self.scene = self.scene.replace(screen_x=x)
        return self.recompute()

    def set_focal_length(self, value: float) -> RenderModel:
        """
        Change the focal length.

        Raises:
            ValueError: If the value is not a positive finite number.
        """
        self.focal_length = self._clamp_focal_length(value)
        return self.recompute()

