"""
===============================================================================
RENDER MODEL - Verification Tests
===============================================================================

Checks build_render_model() on the worked examples (f = 80 px, lens at
x = 200, object height 80 px, 10 px per cm):

1. Image glyphs: exactly one of the real/virtual variants is visible, with
   the anchor, height and flame of the candle drawing
2. Readout strings
3. Screen opacity follows the in-focus flag
4. JSON-ready dictionary, including an image at infinity
5. Rebuilding from the same inputs gives an equal model

Run with:
    python developer_tests/test_render_model.py
===============================================================================
"""

import json
import sys
from pathlib import Path

src_path = Path(__file__).resolve().parents[2]
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from thin_lens_shapely.core.config import EngineConfig
from thin_lens_shapely.core.geometry import Point
from thin_lens_shapely.core.render_model import build_render_model
from thin_lens_shapely.core.scene import Scene


TOLERANCE = 1e-6


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def model_for(object_x, screen_x=400.0, config=None):
    scene = Scene(object_x=object_x, lens_x=200.0, screen_x=screen_x)
    return build_render_model(scene, 80.0, config)


def test_real_image_glyph():
    print("\nTEST: real image glyph")
    model = model_for(0.0)
    assert model.real_image.visible
    assert not model.virtual_image.visible
    assert not model.real_image.dashed

    anchor = model.real_image.anchor
    assert_close(anchor.x, 200.0 + 400.0 / 3.0, msg="anchor x")
    assert anchor.y == 200.0
    h = model.real_image.height
    assert_close(h, 160.0 / 3.0, msg="height")

    # Inverted: flame hangs below the box, 0.22 h tall, width clamped to 6
    tip, left, right = model.real_image.flame
    assert_close(tip.y, h + 0.22 * h, msg="flame tip")
    assert tip.x == 0.0
    assert left == Point(-3.0, h)
    assert right == Point(3.0, h)

    abs_tip = model.real_image.flame_points()[0]
    assert_close(abs_tip.x, anchor.x, msg="absolute tip x")
    assert_close(abs_tip.y, anchor.y + tip.y, msg="absolute tip y")
    print("  PASS")


def test_virtual_image_glyph():
    print("\nTEST: virtual image glyph")
    model = model_for(160.0)   # do = 40
    assert model.virtual_image.visible
    assert not model.real_image.visible
    assert model.virtual_image.dashed

    assert model.virtual_image.anchor == Point(120.0, 40.0)
    assert_close(model.virtual_image.height, 160.0, msg="height")
    # Upright: flame above the anchor, both dimensions clamped
    tip, left, right = model.virtual_image.flame
    assert tip == Point(0.0, -24.0)
    assert_close(left.x, -6.4, msg="flame half width")
    assert_close(right.x, 6.4, msg="flame half width")
    assert left.y == 0.0
    print("  PASS")


def test_small_image_flame_is_clamped_to_minimum():
    model = model_for(120.0)   # image at infinity, height 0
    tip, left, right = model.real_image.flame
    assert model.real_image.height == 0
    assert tip == Point(0.0, 6.0)
    assert left == Point(-3.0, 0.0)
    assert right == Point(3.0, 0.0)


def test_object_glyph():
    model = model_for(0.0)
    glyph = model.object_glyph
    assert glyph.visible
    assert glyph.anchor == Point(0.0, 120.0)
    assert glyph.height == 80.0
    assert_close(glyph.flame[0].y, -17.6, msg="object flame tip")


def test_readouts_real_image():
    print("\nTEST: readouts")
    lines = model_for(0.0).readouts.lines()
    assert lines == (
        'Object distance (do): 200.0 px = 20.00 cm',
        'Image distance (di): 133.3 px = 13.33 cm',
        'Magnification: -0.667',
        'Object height: 80.0 px = 8.00 cm',
        'Image height: 53.3 px = 5.33 cm',
    ), lines
    print("  PASS")


def test_readouts_virtual_and_infinite_image():
    virtual = model_for(160.0).readouts
    assert virtual.image_distance == 'Image distance (di): -80.0 px = 8.00 cm'
    assert virtual.magnification == 'Magnification: 2.000'

    infinite = model_for(120.0).readouts
    assert infinite.image_distance == 'Image distance (di): ∞'
    assert infinite.magnification == 'Magnification: 0.000'
    assert infinite.image_height == 'Image height: 0.0 px = 0.00 cm'


def test_screen_opacity_follows_match():
    in_focus = model_for(0.0, screen_x=200.0 + 400.0 / 3.0)
    assert in_focus.screen_match
    assert in_focus.screen_opacity == 1.0

    out_of_focus = model_for(0.0, screen_x=400.0)
    assert not out_of_focus.screen_match
    assert out_of_focus.screen_opacity == 0.9


def test_focal_points():
    assert model_for(0.0).focal_points == (120.0, 280.0)


def test_config_changes_units_and_stand_in():
    config = EngineConfig(px_per_unit=20.0, unit_label='mm', infinity_distance=500.0)
    model = model_for(120.0, config=config)
    assert model.image_x == 700.0
    assert model.readouts.object_distance == 'Object distance (do): 80.0 px = 4.00 mm'


def test_to_dict_is_json_serializable():
    print("\nTEST: JSON export")
    for object_x in (0.0, 120.0, 160.0, 200.0):
        data = model_for(object_x).to_dict()
        text = json.dumps(data, allow_nan=False)
        assert '"scene"' in text
    data = model_for(120.0).to_dict()
    assert data['result']['image_distance'] is None
    assert data['real_image']['visible'] is True
    assert len(data['annotations']['brackets']) == 2
    print("  PASS")


def test_rebuild_gives_equal_model():
    assert model_for(0.0) == model_for(0.0)
    assert model_for(120.0) == model_for(120.0)


def main():
    tests = [obj for name, obj in sorted(globals().items())
             if name.startswith('test_') and callable(obj)]
    failed = 0
    for test in tests:
        try:
            test()
        except AssertionError as e:
            failed += 1
            print(f"  [FAIL] {test.__name__}: {e}")
    print(f"\nResults: {len(tests) - failed}/{len(tests)} tests passed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
