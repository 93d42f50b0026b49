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

from typing import Any, Optional, Tuple

import svgwrite
from shapely.geometry import box
from svgwrite.base import BaseElement
from svgwrite.container import Group

from .constants import AXIS_LENGTH, LENS_Y, SCREEN_Y
from .geometry import Point, Segment
from .layout import Bracket, Tick
from .render_model import ImageBox, RenderModel


RAY_COLOR = 'rgba(10,80,160,0.25)'
RAY_DASH_PATTERN = '6 4'
LENS_HALF_HEIGHT = 90
SCREEN_HEIGHT = 320


class SVGRenderer:
    """
    SVG renderer for the thin lens bench.

    Draws a RenderModel into four layers (bottom to top):
    - objects: lens, screen, object and image glyphs
    - annotations: optical axis, focal ticks and distance brackets
    - rays: the two principal rays
    - labels: text

    The renderer uses the scene's own coordinates, which follow the screen
    convention (y grows downward, the object stands above the axis).

    Attributes:
        width (int): Canvas width in pixels
        height (int): Canvas height in pixels
        viewbox (tuple): SVG viewBox (min_x, min_y, width, height)
        metadata_level (str): 'none', 'standard' or 'full'
        dwg (svgwrite.Drawing): The SVG drawing object
    """

    VALID_METADATA_LEVELS = ('none', 'standard', 'full')

    def __init__(self, width: int = 900, height: int = 420,
                 viewbox: Optional[Tuple[float, float, float, float]] = None,
                 metadata_level: str = 'full') -> None:
        """
        Initialize the SVG renderer.

        Args:
            width (int): Canvas width in pixels (default: 900)
            height (int): Canvas height in pixels (default: 420)
            viewbox (tuple or None): SVG viewBox as (min_x, min_y, width, height).
                If None, uses (0, 0, width, height)
            metadata_level (str): Controls how much simulation metadata to embed.
                - 'none': No metadata (smallest files)
                - 'standard': id + inkscape:label + class
                - 'full': All of 'standard' plus data-* attributes
        """
        if metadata_level not in self.VALID_METADATA_LEVELS:
            raise ValueError(
                f"Invalid metadata_level '{metadata_level}'. "
                f"Valid options: {self.VALID_METADATA_LEVELS}"
            )
        self.width = width
        self.height = height
        self.metadata_level = metadata_level
        self.viewbox = viewbox if viewbox is not None else (0, 0, width, height)

        # debug=False disables svgwrite's strict attribute validation, which
        # rejects the inkscape namespace and data-* attributes
        self.dwg = svgwrite.Drawing(size=(f'{width}px', f'{height}px'),
                                    profile='full', debug=False)
        self.dwg.viewbox(*self.viewbox)
        self.dwg['xmlns:inkscape'] = 'http://www.inkscape.org/namespaces/inkscape'

        self.dwg.add(self.dwg.rect(
            insert=(self.viewbox[0], self.viewbox[1]),
            size=(self.viewbox[2], self.viewbox[3]),
            fill='white'
        ))

        self.layer_objects = self._add_layer('layer-objects', 'Objects')
        self.layer_annotations = self._add_layer('layer-annotations', 'Annotations')
        self.layer_rays = self._add_layer('layer-rays', 'Rays')
        self.layer_labels = self._add_layer('layer-labels', 'Labels')

    def _add_layer(self, layer_id: str, label: str) -> Group:
        return self.dwg.add(self.dwg.g(
            id=layer_id,
            **{'inkscape:groupmode': 'layer', 'inkscape:label': label}
        ))

    def _tag(self, element: BaseElement, element_id: str, css_class: str,
             label: Optional[str] = None, **data: Any) -> None:
        """Attach metadata to an element according to metadata_level."""
        if self.metadata_level == 'none':
            return
        element['id'] = element_id
        element['class'] = css_class
        if label:
            element['inkscape:label'] = label
        if self.metadata_level == 'full':
            for key, value in data.items():
                element[f'data-{key.replace("_", "-")}'] = str(value)

    @staticmethod
    def _normalize_coord(value: float) -> float:
        """Map -0.0 and values very close to zero to 0.0."""
        if value == 0.0 or abs(value) < 1e-10:
            return 0.0
        return value

    def _clip_to_viewbox(self, segment: Segment) -> Optional[Segment]:
        """
        Clip a segment to the viewbox.

        Returns the clipped Segment, or None when the segment lies completely
        outside (or only touches a single point of) the viewbox.
        """
        min_x, min_y, vb_width, vb_height = self.viewbox
        clipped = segment.to_shapely().intersection(
            box(min_x, min_y, min_x + vb_width, min_y + vb_height)
        )
        if clipped.is_empty or clipped.geom_type != 'LineString':
            return None
        return Segment.from_shapely(clipped)

    def draw_ray_segment(self, segment: Segment, dashed: bool = False, color: str = RAY_COLOR,
                         stroke_width: float = 2, ray_name: Optional[str] = None) -> bool:
        """
        Draw one ray segment, clipped to the viewbox.

        Segments with non-finite coordinates are skipped.

        Returns:
            bool: True if something was drawn
        """
        if not segment.is_finite():
            return False
        clipped = self._clip_to_viewbox(segment)
        if clipped is None:
            return False

        kwargs = dict(
            start=(self._normalize_coord(clipped.p1.x), self._normalize_coord(clipped.p1.y)),
            end=(self._normalize_coord(clipped.p2.x), self._normalize_coord(clipped.p2.y)),
            stroke=color,
            stroke_width=stroke_width,
        )
        if dashed:
            kwargs['stroke_dasharray'] = RAY_DASH_PATTERN
        line = self.dwg.line(**kwargs)
        if ray_name:
            self._tag(line, f'ray-{ray_name}', 'ray', label=ray_name,
                      dashed=str(dashed).lower(), length=f'{segment.length:.3f}')
        self.layer_rays.add(line)
        return True

    def draw_rays(self, model: RenderModel) -> None:
        names = ('parallel', 'chief')
        for name, seg in zip(names, model.rays.pre_lens):
            self.draw_ray_segment(seg, ray_name=f'{name}-pre')
        for name, seg in zip(names, model.rays.post_lens):
            self.draw_ray_segment(seg, dashed=model.rays.dashed, ray_name=f'{name}-post')

    def draw_axis(self, axis_y: float, length: float = AXIS_LENGTH) -> None:
        line = self.dwg.line(start=(0, axis_y), end=(length, axis_y),
                             stroke='#444', stroke_width=1.6)
        self._tag(line, 'optical-axis', 'axis', label='Optical axis')
        self.layer_annotations.add(line)

    def draw_tick(self, tick: Tick) -> None:
        self.layer_annotations.add(self.dwg.line(
            start=(tick.x, tick.y1), end=(tick.x, tick.y2), stroke='#666'
        ))
        if tick.label:
            self.layer_labels.add(self.dwg.text(
                tick.label,
                insert=(tick.label_position.x, tick.label_position.y),
                text_anchor='middle',
                font_size='12px',
                font_family='sans-serif',
            ))

    def draw_bracket(self, bracket: Bracket) -> None:
        line = self.dwg.line(start=(bracket.x1, bracket.y), end=(bracket.x2, bracket.y),
                             stroke='#333', stroke_width=1.2)
        self._tag(line, f'bracket-{bracket.kind}', 'bracket', label=bracket.label,
                  row=bracket.row, span=f'{bracket.span:.3f}')
        self.layer_annotations.add(line)
        for tick in bracket.end_ticks:
            self.draw_tick(tick)
        text = self.dwg.text(
            bracket.label,
            insert=(bracket.label_position.x, bracket.label_position.y),
            text_anchor='middle',
            fill='#111',
            font_size='12px',
            font_family='sans-serif',
        )
        self.layer_labels.add(text)

    def draw_annotations(self, model: RenderModel) -> None:
        self.draw_axis(model.scene.axis_y)
        for tick in model.annotations.ticks:
            self.draw_tick(tick)
        for bracket in model.annotations.brackets:
            self.draw_bracket(bracket)

    def draw_candle(self, glyph: ImageBox, element_id: str, color: str,
                    width: float = 10) -> bool:
        """
        Draw a candle glyph: a rectangle hanging from the anchor plus a flame.

        Hidden glyphs are not drawn.
        """
        if not glyph.visible:
            return False
        anchor = glyph.anchor
        group = self.dwg.g()
        rect_kwargs = dict(
            insert=(anchor.x - width / 2, anchor.y),
            size=(width, max(glyph.height, 0.0)),
            fill=color,
            fill_opacity=0.3 if glyph.dashed else 0.8,
            stroke=color,
        )
        if glyph.dashed:
            rect_kwargs['stroke_dasharray'] = RAY_DASH_PATTERN
        group.add(self.dwg.rect(**rect_kwargs))
        group.add(self.dwg.polygon(
            points=[(p.x, p.y) for p in glyph.flame_points()],
            fill='orange',
        ))
        self._tag(group, element_id, 'candle', label=element_id,
                  height=f'{glyph.height:.3f}')
        self.layer_objects.add(group)
        return True

    def draw_lens(self, lens_x: float, focal_length: float, color: str = 'steelblue') -> None:
        """Draw the converging lens as an ellipse centered on the lens row."""
        lens = self.dwg.ellipse(center=(lens_x, LENS_Y - 10),
                                r=(8, LENS_HALF_HEIGHT),
                                fill=color, fill_opacity=0.35, stroke=color)
        self._tag(lens, 'lens', 'lens', label=f'Lens f={focal_length:g}',
                  focal_length=focal_length)
        self.layer_objects.add(lens)

    def draw_screen(self, screen_x: float, opacity: float, matched: bool) -> None:
        screen = self.dwg.rect(insert=(screen_x - 3, SCREEN_Y),
                               size=(6, SCREEN_HEIGHT),
                               fill='#888', opacity=opacity)
        self._tag(screen, 'screen-surface', 'screen', label='Screen',
                  match=str(matched).lower())
        self.layer_objects.add(screen)

    def draw_readouts(self, model: RenderModel, origin: Point = Point(10, 20),
                      line_height: float = 16) -> None:
        for i, line in enumerate(model.readouts.lines()):
            self.layer_labels.add(self.dwg.text(
                line,
                insert=(origin.x, origin.y + i * line_height),
                font_size='12px',
                font_family='sans-serif',
            ))

    def draw_render_model(self, model: RenderModel, show_readouts: bool = True) -> None:
        """
        Draw a complete frame.

        Args:
            model (RenderModel): Model from build_render_model() or OpticsEngine
            show_readouts (bool): If True, draw the readout panel text
        """
        scene = model.scene
        self.draw_screen(scene.screen_x, model.screen_opacity, model.screen_match)
        self.draw_lens(scene.lens_x, model.result.focal_length)
        self.draw_candle(model.object_glyph, 'object', 'firebrick')
        self.draw_candle(model.real_image, 'real-image', 'firebrick')
        self.draw_candle(model.virtual_image, 'virtual-image', 'gray')
        self.draw_annotations(model)
        self.draw_rays(model)
        if show_readouts:
            self.draw_readouts(model)

    def save(self, filename: Optional[str] = None) -> None:
        """
        Save the SVG to a file.

        Args:
            filename (str): Output filename (default: 'output.svg')
        """
        if filename is None:
            filename = "output.svg"
        self.dwg.saveas(filename)

    def to_string(self) -> str:
        """
        Get the SVG as a string.

        Returns:
            str: SVG content as XML string
        """
        return self.dwg.tostring()
