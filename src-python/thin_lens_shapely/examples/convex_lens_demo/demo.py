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
Convex Lens Demo - Real, Virtual and Focal-Plane Images

Renders three classic configurations of a converging lens (f = 80 px,
10 px = 1 cm) and prints the readouts for each:

- Object beyond 2f: real, inverted, reduced image. The screen is placed on
  the image plane, so the projection is in focus.
- Object inside f: virtual, upright, magnified image (dashed rays).
- Object on the focal plane: rays leave parallel, image at infinity.

Output: SVG files in ./output next to this script.
"""

import logging
import os
import sys

# Add parent directories to path to import thin_lens_shapely
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from thin_lens_shapely.core.engine import OpticsEngine
from thin_lens_shapely.core.svg_renderer import SVGRenderer
from thin_lens_shapely.logging_config import setup_logging


def render(model, path):
    renderer = SVGRenderer(width=900, height=420)
    renderer.draw_render_model(model)
    renderer.save(path)


def main():
    """Run the three demonstration scenes."""
    setup_logging(logging.INFO)

    print("Convex Lens Demo")
    print("=" * 60)

    output_dir = os.path.join(os.path.dirname(__file__), 'output')
    os.makedirs(output_dir, exist_ok=True)

    engine = OpticsEngine(object_x=200, lens_x=400, screen_x=700, focal_length=80)

    scenes = [
        ('real_image', 200),      # do = 200 > 2f
        ('virtual_image', 360),   # do = 40 < f
        ('focal_plane', 320),     # do = f
    ]

    for name, object_x in scenes:
        model = engine.move_object(object_x)
        if name == 'real_image':
            # Put the screen on the image plane
            model = engine.move_screen(model.image_x)

        print(f"\n{name}:")
        for line in model.readouts.lines():
            print(f"  {line}")
        print(f"  Real image: {model.result.is_real}, screen in focus: {model.screen_match}")

        path = os.path.join(output_dir, f'{name}.svg')
        render(model, path)
        print(f"  Saved {path}")


if __name__ == "__main__":
    main()
