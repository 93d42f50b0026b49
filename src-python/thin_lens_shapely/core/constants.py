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
Constants used throughout the thin lens simulation.

All lengths are in the working unit of the scene (pixels). Physical lengths
are obtained by dividing by PX_PER_UNIT.
"""

# Object distances below this are treated as "object on the lens"
MIN_OBJECT_DISTANCE = 1e-6

# Reciprocal image distances below this mean the object sits on the focal plane
MIN_INVERSE_IMAGE_DISTANCE = 1e-9

# Substitute for a zero horizontal run when computing the chief ray slope
ZERO_RUN_SUBSTITUTE = 1e-6

# Finite stand-in for an image at infinity so the geometry stays drawable
INFINITY_DISTANCE = 1000.0

# Scene geometry (pixels)
AXIS_Y = 200.0
OBJECT_HEIGHT = 80.0
LENS_Y = 210.0       # presentation row of the lens glyph
SCREEN_Y = 40.0      # presentation row of the screen glyph
AXIS_LENGTH = 900.0

# Scale: 10 pixels == 1 cm
PX_PER_UNIT = 10.0
UNIT_LABEL = 'cm'

# Focal length slider
FOCAL_LENGTH_MIN = 10.0
FOCAL_LENGTH_MAX = 300.0
FOCAL_LENGTH_DEFAULT = 80.0

# Screen is "in focus" when it is closer than this to the image plane
MATCH_TOLERANCE = 6.0

# Drag constraints: minimum gap between the lens and the object/screen
MIN_ENTITY_GAP = 20.0

# Annotation layout
TICK_HALF_HEIGHT = 6.0
TICK_LABEL_OFFSET = 22.0
BRACKET_PAD = 18.0
BRACKET_ROW_SPACING = 16.0
BRACKET_LABEL_OFFSET = 14.0
BRACKET_LABEL_ROW_SHIFT = 2.0

# Flame glyph drawn on the object and image boxes
FLAME_HEIGHT_RATIO = 0.22
FLAME_WIDTH_RATIO = 0.08
FLAME_HEIGHT_MIN = 6.0
FLAME_HEIGHT_MAX = 24.0
FLAME_WIDTH_MIN = 6.0
FLAME_WIDTH_MAX = 18.0

# Screen surface opacity
SCREEN_OPACITY_MATCHED = 1.0
SCREEN_OPACITY_UNMATCHED = 0.9
