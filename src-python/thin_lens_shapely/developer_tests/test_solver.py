"""
===============================================================================
THIN LENS SOLVER - Verification Tests
===============================================================================

Checks solve() against the thin lens equation 1/f = 1/do + 1/di:

1. CLASSIFICATION
   - do > f: real, inverted image
   - 0 < do < f: virtual, upright image

2. SPECIAL DISTANCES
   - do == f: image at infinity, magnification 0
   - do == 2f: di == 2f, unit magnification
   - do -> 0: image at infinity without a division error

3. WORKED EXAMPLES
   - f = 80, do = 200 -> di = 133.33, m = -0.667
   - f = 80, do = 40  -> di = -80, m = 2.0

4. PURITY
   - identical inputs give identical results

Run with:
    python developer_tests/test_solver.py

Or with pytest:
    pytest developer_tests/test_solver.py -v
===============================================================================
"""

import math
import sys
from pathlib import Path

src_path = Path(__file__).resolve().parents[2]
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from thin_lens_shapely.core.solver import OpticalResult, image_distance_for, solve


TOLERANCE = 1e-6
F = 80.0
LENS_X = 200.0


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def solve_at(object_distance, focal_length=F, object_height=80.0):
    return solve(LENS_X - object_distance, LENS_X, focal_length, object_height)


# =============================================================================
# CLASSIFICATION
# =============================================================================

def test_object_beyond_focal_length_gives_real_inverted_image():
    print("\nTEST: do > f -> real, inverted")
    for do in range(81, 1000, 7):
        result = solve_at(float(do))
        assert result.is_real, f"do={do}: expected real image"
        assert result.magnification < 0, f"do={do}: expected inverted image"
        assert result.image_distance > 0
    print("  PASS")


def test_object_inside_focal_length_gives_virtual_upright_image():
    print("\nTEST: 0 < do < f -> virtual, upright")
    for do in range(1, 80):
        result = solve_at(float(do))
        assert not result.is_real, f"do={do}: expected virtual image"
        assert result.magnification > 0, f"do={do}: expected upright image"
        assert result.image_distance < 0
        # A virtual image of a converging lens is always magnified
        assert result.magnification > 1
    print("  PASS")


# =============================================================================
# SPECIAL DISTANCES
# =============================================================================

def test_object_on_focal_plane_gives_image_at_infinity():
    print("\nTEST: do == f -> image at infinity")
    result = solve_at(F)
    assert result.image_distance == math.inf
    assert result.image_at_infinity
    assert result.magnification == 0
    assert result.image_height == 0
    assert result.is_real, "An image at infinity counts as real"
    print("  PASS")


def test_near_focal_plane_within_threshold_is_infinity():
    # |1/f - 1/do| ~ 1.6e-11, below the 1e-9 threshold
    assert image_distance_for(F + 1e-7, F) == math.inf
    # Clearly off the focal plane the image is finite
    assert math.isfinite(image_distance_for(F + 1.0, F))


def test_twice_focal_length_gives_unit_magnification():
    print("\nTEST: do == 2f -> di == 2f, |m| == 1")
    result = solve_at(2 * F)
    assert_close(result.image_distance, 2 * F, msg="image distance")
    assert_close(abs(result.magnification), 1.0, msg="|m|")
    assert_close(result.image_height, 80.0, msg="image height")
    print("  PASS")


def test_object_on_lens_gives_image_at_infinity():
    print("\nTEST: do -> 0")
    result = solve(LENS_X, LENS_X, F)
    assert result.object_distance == 0
    assert result.image_distance == math.inf
    assert result.magnification == 0

    tiny = solve(LENS_X - 1e-7, LENS_X, F)
    assert tiny.image_distance == math.inf
    print("  PASS")


def test_object_right_of_lens_does_not_raise():
    # Negative object distance is outside the usual bench setup but still defined
    result = solve(300.0, LENS_X, F)
    assert result.object_distance == -100.0
    assert math.isfinite(result.image_distance)


# =============================================================================
# WORKED EXAMPLES
# =============================================================================

def test_worked_example_real_image():
    print("\nTEST: f=80, object_x=0, lens_x=200")
    result = solve(0.0, 200.0, 80.0)
    assert result.object_distance == 200.0
    assert_close(result.image_distance, 400.0 / 3.0, msg="di")
    assert_close(result.magnification, -2.0 / 3.0, msg="m")
    assert_close(result.image_height, 80.0 * 2.0 / 3.0, msg="image height")
    assert result.is_real
    assert result.is_inverted
    print(f"  di = {result.image_distance:.2f}, m = {result.magnification:.3f} - PASS")


def test_worked_example_virtual_image():
    print("\nTEST: f=80, do=40")
    result = solve_at(40.0)
    assert_close(result.image_distance, -80.0, msg="di")
    assert_close(result.magnification, 2.0, msg="m")
    assert_close(result.image_height, 160.0, msg="image height")
    assert not result.is_real
    assert not result.is_inverted
    print(f"  di = {result.image_distance:.2f}, m = {result.magnification:.3f} - PASS")


def test_image_height_uses_object_height():
    result = solve(0.0, 200.0, 80.0, object_height=30.0)
    assert_close(result.image_height, 20.0, msg="image height")
    assert result.object_height == 30.0


# =============================================================================
# PURITY
# =============================================================================

def test_solve_is_idempotent():
    for args in [(0.0, 200.0, 80.0), (120.0, 200.0, 80.0), (200.0, 200.0, 80.0),
                 (160.0, 200.0, 80.0)]:
        first = solve(*args)
        second = solve(*args)
        assert first == second, f"{args}: results differ"
        assert isinstance(first, OpticalResult)


def test_to_dict_encodes_infinity_as_none():
    data = solve_at(F).to_dict()
    assert data['image_distance'] is None
    assert data['image_at_infinity'] is True
    data = solve_at(200.0).to_dict()
    assert_close(data['image_distance'], 400.0 / 3.0)


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
