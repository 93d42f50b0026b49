"""
===============================================================================
SVG RENDERING AND EXPORT - Feature Verification
===============================================================================

Tests the presentation and export side of the render model:
1. SVGRenderer draws rays, annotations and glyphs with metadata
2. Virtual images are drawn dashed, real images solid
3. Rays are clipped to the viewbox; non-finite segments are skipped
4. metadata_level controls ids and data-* attributes
5. save_render_model_json / save_rays_csv write the expected files
6. save_render writes numbered SVG files and returns a descriptor

Run with:
    python developer_tests/test_svg_export.py
===============================================================================
"""

import csv
import json
import math
import sys
import tempfile
from pathlib import Path

import pytest

src_path = Path(__file__).resolve().parents[2]
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from thin_lens_shapely.analysis import (
    reset_render_counter,
    save_rays_csv,
    save_render,
    save_render_model_json,
)
from thin_lens_shapely.core.geometry import Point, Segment
from thin_lens_shapely.core.render_model import build_render_model
from thin_lens_shapely.core.scene import Scene
from thin_lens_shapely.core.svg_renderer import SVGRenderer


def model_for(object_x, screen_x=400.0):
    scene = Scene(object_x=object_x, lens_x=200.0, screen_x=screen_x)
    return build_render_model(scene, 80.0)


def render(model, **kwargs):
    renderer = SVGRenderer(**kwargs)
    renderer.draw_render_model(model)
    return renderer.to_string()


# =============================================================================
# SVG RENDERER
# =============================================================================

def test_real_image_svg():
    print("\nTest: real image SVG")
    svg = render(model_for(0.0))
    assert svg.startswith('<svg') or '<svg' in svg
    for element_id in ('ray-parallel-pre', 'ray-chief-pre', 'ray-parallel-post',
                       'ray-chief-post', 'bracket-object-lens', 'bracket-lens-image',
                       'bracket-lens-screen', 'optical-axis', 'real-image', 'object',
                       'lens', 'screen-surface'):
        assert f'id="{element_id}"' in svg, f"missing {element_id}"
    assert 'id="virtual-image"' not in svg
    assert 'stroke-dasharray' not in svg
    assert 'do=20.00 cm' in svg
    assert 'di=13.33 cm' in svg
    assert 'Magnification: -0.667' in svg
    print("  PASS")


def test_virtual_image_svg_is_dashed():
    svg = render(model_for(160.0))
    assert 'id="virtual-image"' in svg
    assert 'id="real-image"' not in svg
    assert 'stroke-dasharray="6 4"' in svg
    assert 'data-dashed="true"' in svg


def test_screen_match_is_exported():
    in_focus = render(model_for(0.0, screen_x=200.0 + 400.0 / 3.0))
    assert 'data-match="true"' in in_focus
    out_of_focus = render(model_for(0.0))
    assert 'data-match="false"' in out_of_focus


def test_image_at_infinity_is_clipped_not_dropped():
    svg = render(model_for(120.0))
    # The image stand-in (x = 1200) lies outside the 900 px canvas; the
    # post-lens rays are drawn up to the edge
    assert 'id="ray-chief-post"' in svg
    assert 'bracket-lens-image' not in svg


def test_clip_to_viewbox():
    renderer = SVGRenderer(width=900, height=420)
    clipped = renderer._clip_to_viewbox(Segment(Point(-100.0, 50.0), Point(100.0, 50.0)))
    assert clipped is not None
    xs = sorted([clipped.p1.x, clipped.p2.x])
    assert xs == [0.0, 100.0]
    assert renderer._clip_to_viewbox(Segment(Point(-100.0, -50.0), Point(-10.0, -50.0))) is None


def test_draw_ray_segment_skips_invalid_segments():
    renderer = SVGRenderer()
    assert not renderer.draw_ray_segment(Segment(Point(0.0, 0.0), Point(math.inf, 10.0)))
    assert not renderer.draw_ray_segment(Segment(Point(-50.0, -50.0), Point(-10.0, -10.0)))
    assert renderer.draw_ray_segment(Segment(Point(10.0, 10.0), Point(50.0, 50.0)))


def test_metadata_levels():
    model = model_for(0.0)
    full = render(model, metadata_level='full')
    standard = render(model, metadata_level='standard')
    none = render(model, metadata_level='none')
    assert 'data-row' in full
    assert 'id="ray-parallel-pre"' in standard
    assert 'data-row' not in standard
    assert 'id="ray-' not in none
    assert 'data-' not in none
    with pytest.raises(ValueError):
        SVGRenderer(metadata_level='verbose')


def test_save_svg_file():
    with tempfile.TemporaryDirectory(prefix='test_svg_') as tmpdir:
        renderer = SVGRenderer()
        renderer.draw_render_model(model_for(0.0), show_readouts=False)
        path = Path(tmpdir) / 'lens.svg'
        renderer.save(str(path))
        content = path.read_text(encoding='utf-8')
        assert '<svg' in content
        assert 'Magnification' not in content


# =============================================================================
# EXPORT
# =============================================================================

def test_save_render_model_json():
    print("\nTest: JSON export")
    with tempfile.TemporaryDirectory(prefix='test_json_') as tmpdir:
        path = save_render_model_json(model_for(120.0), tmpdir)
        data = json.loads(path.read_text(encoding='utf-8'))
        assert data['result']['image_distance'] is None
        assert data['result']['image_at_infinity'] is True
        assert data['readouts']['image_distance'] == 'Image distance (di): ∞'
        assert data['rays']['image_point'] == {'x': 1200.0, 'y': 200.0}
    print("  PASS")


def test_save_rays_csv():
    with tempfile.TemporaryDirectory(prefix='test_csv_') as tmpdir:
        path = save_rays_csv(model_for(160.0), tmpdir)
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 4
        assert [(r['ray'], r['part']) for r in rows] == [
            ('parallel', 'pre_lens'), ('chief', 'pre_lens'),
            ('parallel', 'post_lens'), ('chief', 'post_lens'),
        ]
        assert [r['dashed'] for r in rows] == ['False', 'False', 'True', 'True']
        assert rows[0]['p1_x'] == '160.0000'
        assert rows[0]['p1_y'] == '120.0000'


def test_save_render_descriptor():
    print("\nTest: save_render descriptor")
    reset_render_counter()
    with tempfile.TemporaryDirectory(prefix='test_render_') as tmpdir:
        first = save_render(model_for(0.0), tmpdir, png=False)
        second = save_render(model_for(160.0), tmpdir, prefix='virtual', png=False)
        assert Path(first['svg_path']).name == 'lens_001.svg'
        assert Path(second['svg_path']).name == 'virtual_002.svg'
        assert Path(first['svg_path']).exists()
        assert first['png_path'] is None
        assert first['png_available'] is False
        assert first['result']['is_real'] is True
        assert second['result']['is_real'] is False
        assert 'Magnification: 2.000' in second['description']
        json.dumps(first)
    reset_render_counter()
    print("  PASS")


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
