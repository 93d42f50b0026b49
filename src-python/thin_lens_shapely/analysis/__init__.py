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
Analysis and export utilities for render models.

- saving: JSON and CSV export of a RenderModel
- render_result: SVG/PNG renders saved to disk with a JSON-friendly descriptor
"""

from .saving import (
    save_render_model_json,
    save_rays_csv,
)
from .render_result import (
    save_render,
    reset_render_counter,
)

__all__ = [
    'save_render_model_json',
    'save_rays_csv',
    'save_render',
    'reset_render_counter',
]
