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

from . import constants
from .geometry import Point, Segment
from .scene import Scene
from .config import EngineConfig, load_config
from .solver import OpticalResult, solve
from .ray_geometry import RayTrace, trace_rays
from .layout import Annotations, Bracket, Tick, annotate, format_units, px_to_units
from .render_model import ImageBox, Readouts, RenderModel, build_render_model
from .engine import OpticsEngine
from .svg_renderer import SVGRenderer

__all__ = [
    'constants',
    'Point', 'Segment',
    'Scene',
    'EngineConfig', 'load_config',
    'OpticalResult', 'solve',
    'RayTrace', 'trace_rays',
    'Annotations', 'Bracket', 'Tick', 'annotate', 'format_units', 'px_to_units',
    'ImageBox', 'Readouts', 'RenderModel', 'build_render_model',
    'OpticsEngine',
    'SVGRenderer',
]
