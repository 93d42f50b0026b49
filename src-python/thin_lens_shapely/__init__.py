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

Thin Lens Shapely
=================

Interactive convex thin lens simulation core: thin lens solver, principal
ray diagrams and distance annotations, with Shapely geometry and SVG output.

Main modules:
- core: Solver, ray geometry, annotation layout, render model, engine, SVG renderer
- analysis: Export of render models (JSON, CSV) and saving renders to disk
- examples: Example scenes and demonstrations

Quick start:
    from thin_lens_shapely import OpticsEngine, SVGRenderer

    engine = OpticsEngine(object_x=0, lens_x=200, screen_x=400, focal_length=80)
    model = engine.move_screen(333.3)
    renderer = SVGRenderer()
    renderer.draw_render_model(model)
    renderer.save('lens.svg')
"""

__version__ = "0.1.0"

# Convenience imports for common usage
from .core.scene import Scene
from .core.solver import OpticalResult, solve
from .core.render_model import RenderModel, build_render_model
from .core.engine import OpticsEngine
from .core.svg_renderer import SVGRenderer
from .logging_config import setup_logging

__all__ = [
    'Scene',
    'OpticalResult',
    'solve',
    'RenderModel',
    'build_render_model',
    'OpticsEngine',
    'SVGRenderer',
    'setup_logging',
    '__version__',
]
