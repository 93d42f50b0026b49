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

===============================================================================
Render Result Layer
===============================================================================
Thin layer on top of SVGRenderer. Draws a RenderModel, saves the SVG to a
numbered file, optionally converts it to PNG via cairosvg, and returns a
JSON-serializable descriptor of what was written.
===============================================================================
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Any, Optional

from ..core.render_model import RenderModel
from ..core.svg_renderer import SVGRenderer

logger = logging.getLogger(__name__)

# Module-level render counter for auto-generating unique filenames
_render_counter: int = 0


def reset_render_counter() -> None:
    """Reset the render counter to 0."""
    global _render_counter
    _render_counter = 0


def _svg_to_png(
    svg_string: str,
    png_path: str,
    width: int,
    height: int,
) -> bool:
    """
    Convert an SVG string to PNG using cairosvg (optional dependency).

    Returns:
        True if conversion succeeded, False if cairosvg is not installed
        or its native library cannot be loaded.
    """
    try:
        import cairosvg
        cairosvg.svg2png(
            bytestring=svg_string.encode('utf-8'),
            write_to=png_path,
            output_width=width,
            output_height=height,
        )
        return True
    except (ImportError, OSError) as e:
        logger.info("PNG conversion skipped: %s", e)
        return False


def save_render(
    model: RenderModel,
    render_dir: str,
    prefix: str = 'lens',
    width: int = 900,
    height: int = 420,
    description: Optional[str] = None,
    png: bool = True,
) -> Dict[str, Any]:
    """
    Render a model to SVG (and PNG if possible) and return a descriptor.

    Filenames are ``{prefix}_{counter:03d}.svg`` (and ``.png``).

    Args:
        model: RenderModel to draw.
        render_dir: Directory where files will be saved (created if missing).
        prefix: Filename prefix.
        width: SVG/PNG width in pixels.
        height: SVG/PNG height in pixels.
        description: Human-readable description. Defaults to the readout lines.
        png: Attempt PNG conversion.

    Returns:
        JSON-serializable descriptor dict with file paths and the optical result.
    """
    global _render_counter
    _render_counter += 1

    renderer = SVGRenderer(width=width, height=height)
    renderer.draw_render_model(model)
    svg_string = renderer.to_string()

    render_path = Path(render_dir)
    render_path.mkdir(parents=True, exist_ok=True)

    base_name = f"{prefix}_{_render_counter:03d}"
    svg_path = render_path / f"{base_name}.svg"
    png_path = render_path / f"{base_name}.png"

    svg_path.write_text(svg_string, encoding='utf-8')
    png_ok = png and _svg_to_png(svg_string, str(png_path), width, height)

    if description is None:
        description = '; '.join(model.readouts.lines())

    logger.debug("Saved render %s (png=%s)", svg_path, png_ok)

    return {
        'svg_path': str(svg_path),
        'png_path': str(png_path) if png_ok else None,
        'png_available': png_ok,
        'width': width,
        'height': height,
        'description': description,
        'result': model.result.to_dict(),
        'screen_match': model.screen_match,
    }
