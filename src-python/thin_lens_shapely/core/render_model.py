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
Render model: everything a presentation layer needs to draw one frame.

build_render_model() runs the solver, the ray tracer and the annotator on a
scene and packs the results, together with the image glyph boxes and the
text readouts, into a single immutable RenderModel. Nothing is cached; a new
model is built after every change of the scene or focal length.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .config import EngineConfig
from .constants import (
    FLAME_HEIGHT_MAX,
    FLAME_HEIGHT_MIN,
    FLAME_HEIGHT_RATIO,
    FLAME_WIDTH_MAX,
    FLAME_WIDTH_MIN,
    FLAME_WIDTH_RATIO,
    SCREEN_OPACITY_MATCHED,
    SCREEN_OPACITY_UNMATCHED,
)
from .geometry import Point, flame_triangle
from .layout import Annotations, annotate, px_to_units
from .ray_geometry import RayTrace, image_x_for, trace_rays
from .scene import Scene
from .solver import OpticalResult, solve


@dataclass(frozen=True)
class ImageBox:
    """
    Candle glyph for the object or one of the two image variants.

    The box is a rectangle of ``height`` hanging down from ``anchor``. The
    flame triangle is given relative to the anchor.

    Attributes:
        visible: Whether the glyph should be shown
        anchor: Top-left reference point of the glyph (x is the glyph center)
        height: Rectangle height, extending downward from the anchor
        flame: (tip, left base, right base), relative to the anchor
        dashed: True for the virtual image outline
    """
    visible: bool
    anchor: Point
    height: float
    flame: Tuple[Point, Point, Point]
    dashed: bool = False

    def flame_points(self) -> Tuple[Point, Point, Point]:
        """Flame triangle in absolute coordinates."""
        return tuple(Point(self.anchor.x + p.x, self.anchor.y + p.y) for p in self.flame)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'visible': self.visible,
            'anchor': self.anchor.to_dict(),
            'height': self.height,
            'flame': [p.to_dict() for p in self.flame],
            'dashed': self.dashed,
        }


@dataclass(frozen=True)
class Readouts:
    """Text lines for the readout panel."""
    object_distance: str
    image_distance: str
    magnification: str
    object_height: str
    image_height: str

    def lines(self) -> Tuple[str, ...]:
        return (
            self.object_distance,
            self.image_distance,
            self.magnification,
            self.object_height,
            self.image_height,
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            'object_distance': self.object_distance,
            'image_distance': self.image_distance,
            'magnification': self.magnification,
            'object_height': self.object_height,
            'image_height': self.image_height,
        }


@dataclass(frozen=True)
class RenderModel:
    """
    Presentation-ready description of one frame.

    Exactly one of ``real_image`` and ``virtual_image`` is visible.
    """
    scene: Scene
    result: OpticalResult
    rays: RayTrace
    annotations: Annotations
    object_glyph: ImageBox
    real_image: ImageBox
    virtual_image: ImageBox
    readouts: Readouts
    image_x: float

    @property
    def screen_match(self) -> bool:
        return self.annotations.screen_match

    @property
    def screen_opacity(self) -> float:
        return SCREEN_OPACITY_MATCHED if self.screen_match else SCREEN_OPACITY_UNMATCHED

    @property
    def focal_points(self) -> Tuple[float, float]:
        f = self.result.focal_length
        return (self.scene.lens_x - f, self.scene.lens_x + f)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable form of the model (image at infinity encoded as None)."""
        return {
            'scene': self.scene.to_dict(),
            'result': self.result.to_dict(),
            'rays': self.rays.to_dict(),
            'annotations': self.annotations.to_dict(),
            'object_glyph': self.object_glyph.to_dict(),
            'real_image': self.real_image.to_dict(),
            'virtual_image': self.virtual_image.to_dict(),
            'readouts': self.readouts.to_dict(),
            'image_x': self.image_x,
            'screen_match': self.screen_match,
            'screen_opacity': self.screen_opacity,
        }


def _flame(box_height: float, pointing_down: bool, base_y: float):
    return flame_triangle(
        box_height, pointing_down, base_y,
        FLAME_HEIGHT_RATIO, FLAME_WIDTH_RATIO,
        (FLAME_HEIGHT_MIN, FLAME_HEIGHT_MAX),
        (FLAME_WIDTH_MIN, FLAME_WIDTH_MAX),
    )


def image_boxes(scene: Scene, result: OpticalResult, rays: RayTrace,
                image_x: float) -> Tuple[ImageBox, ImageBox]:
    """
    Glyphs for the real and the virtual image.

    The real image is inverted: its box hangs below the axis and the flame
    points down from the bottom of the box. The virtual image is upright: its
    top is placed where the chief ray extrapolates to the image plane and
    the flame points up.
    """
    h = result.image_height
    real = ImageBox(
        visible=result.is_real,
        anchor=Point(image_x, scene.axis_y),
        height=h,
        flame=_flame(h, pointing_down=True, base_y=h),
    )
    virtual = ImageBox(
        visible=not result.is_real,
        anchor=Point(image_x, rays.image_y_via_center),
        height=h,
        flame=_flame(h, pointing_down=False, base_y=0.0),
        dashed=True,
    )
    return real, virtual


def object_glyph(scene: Scene) -> ImageBox:
    h = scene.object_height
    return ImageBox(
        visible=True,
        anchor=scene.object_top,
        height=h,
        flame=_flame(h, pointing_down=False, base_y=0.0),
    )


def format_readouts(scene: Scene, result: OpticalResult,
                    px_per_unit: float, unit: str) -> Readouts:
    def in_units(px: float) -> str:
        return f'{px_to_units(px, px_per_unit):.2f} {unit}'

    do_px = result.object_distance
    if result.image_at_infinity:
        image_text = 'Image distance (di): ∞'
    else:
        di_px = result.image_distance
        image_text = f'Image distance (di): {di_px:.1f} px = {in_units(abs(di_px))}'

    return Readouts(
        object_distance=f'Object distance (do): {do_px:.1f} px = {in_units(abs(do_px))}',
        image_distance=image_text,
        magnification=f'Magnification: {result.magnification:.3f}',
        object_height=f'Object height: {scene.object_height:.1f} px = {in_units(scene.object_height)}',
        image_height=f'Image height: {result.image_height:.1f} px = {in_units(result.image_height)}',
    )


def build_render_model(scene: Scene, focal_length: float,
                       config: Optional[EngineConfig] = None) -> RenderModel:
    """
    Solve the scene and build the full render model.

    Args:
        scene: Scene positions
        focal_length: Focal length of the lens (> 0)
        config: Scale, tolerances and the infinity stand-in (defaults if None)

    Returns:
        RenderModel
    """
    if config is None:
        config = EngineConfig()

    result = solve(scene.object_x, scene.lens_x, focal_length, scene.object_height)
    image_x = image_x_for(scene, result, config.infinity_distance)
    rays = trace_rays(scene, result, config.infinity_distance)
    annotations = annotate(
        scene, result, image_x,
        px_per_unit=config.px_per_unit,
        unit=config.unit_label,
        match_tolerance=config.match_tolerance,
    )
    real, virtual = image_boxes(scene, result, rays, image_x)

    return RenderModel(
        scene=scene,
        result=result,
        rays=rays,
        annotations=annotations,
        object_glyph=object_glyph(scene),
        real_image=real,
        virtual_image=virtual,
        readouts=format_readouts(scene, result, config.px_per_unit, config.unit_label),
        image_x=image_x,
    )
