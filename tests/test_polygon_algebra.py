"""
Unit tests for single-polygon integrals.

Values are hand calculations for rectangles and right triangles about the
origin of the vertex coordinates.
"""

import pytest

from polysect import (
    Point,
    signed_area,
    polygon_area,
    polygon_centroid,
    second_moment_x,
    second_moment_y,
    product_of_inertia,
    ensure_winding,
)

RECT_6x4 = [(0, 0), (6, 0), (6, 4), (0, 4)]
TRIANGLE = [(0, 0), (4, 0), (0, 3)]


class TestSignedArea:
    """Shoelace area and its sign convention."""

    def test_ccw_is_positive(self):
        assert signed_area(RECT_6x4) == pytest.approx(24.0)

    def test_cw_is_negative(self):
        assert signed_area(list(reversed(RECT_6x4))) == pytest.approx(-24.0)

    def test_triangle_area(self):
        # A = 1/2 * 4 * 3 = 6
        assert polygon_area(TRIANGLE) == pytest.approx(6.0)
        assert polygon_area(list(reversed(TRIANGLE))) == pytest.approx(6.0)

    def test_accepts_points(self):
        pts = [Point(x, y) for x, y in RECT_6x4]
        assert signed_area(pts) == pytest.approx(24.0)

    @pytest.mark.parametrize("verts", [[], [(0, 0)], [(0, 0), (5, 5)]])
    def test_fewer_than_three_vertices_is_zero(self, verts):
        assert signed_area(verts) == 0.0
        assert polygon_area(verts) == 0.0


class TestCentroid:
    """Polygon centroid."""

    def test_rectangle(self):
        c = polygon_centroid(RECT_6x4)
        assert c.x == pytest.approx(3.0)
        assert c.y == pytest.approx(2.0)

    def test_symmetric_square_about_origin(self):
        c = polygon_centroid([(-1, -1), (1, -1), (1, 1), (-1, 1)])
        assert c.x == pytest.approx(0.0, abs=1e-12)
        assert c.y == pytest.approx(0.0, abs=1e-12)

    def test_triangle(self):
        # Centroid of a right triangle: (b/3, h/3)
        c = polygon_centroid(TRIANGLE)
        assert c.x == pytest.approx(4.0 / 3.0)
        assert c.y == pytest.approx(1.0)

    def test_winding_does_not_matter(self):
        c = polygon_centroid(list(reversed(TRIANGLE)))
        assert c.x == pytest.approx(4.0 / 3.0)
        assert c.y == pytest.approx(1.0)

    def test_zero_area_returns_origin(self):
        # Collinear points enclose nothing
        assert polygon_centroid([(1, 1), (2, 2), (3, 3)]) == Point(0.0, 0.0)

    def test_two_vertices_returns_origin(self):
        assert polygon_centroid([(1, 1), (2, 2)]) == Point(0.0, 0.0)


class TestSecondMoments:
    """Second moments and product of inertia about the origin."""

    def test_rectangle_about_corner(self):
        # Ix = b*h^3/3 = 6*64/3 = 128, Iy = h*b^3/3 = 4*216/3 = 288
        # Ixy = b^2*h^2/4 = 36*16/4 = 144
        assert second_moment_x(RECT_6x4) == pytest.approx(128.0)
        assert second_moment_y(RECT_6x4) == pytest.approx(288.0)
        assert product_of_inertia(RECT_6x4) == pytest.approx(144.0)

    def test_right_triangle_about_corner(self):
        # Ix = b*h^3/12 = 9, Iy = h*b^3/12 = 16, Ixy = b^2*h^2/24 = 6
        assert second_moment_x(TRIANGLE) == pytest.approx(9.0)
        assert second_moment_y(TRIANGLE) == pytest.approx(16.0)
        assert product_of_inertia(TRIANGLE) == pytest.approx(6.0)

    def test_results_independent_of_winding(self):
        cw = list(reversed(TRIANGLE))
        assert second_moment_x(cw) == pytest.approx(9.0)
        assert second_moment_y(cw) == pytest.approx(16.0)
        assert product_of_inertia(cw) == pytest.approx(6.0)

    def test_product_keeps_physical_sign(self):
        # Triangle mirrored into the second quadrant: Ixy = -6
        mirrored = [(0, 0), (0, 3), (-4, 0)]
        assert product_of_inertia(mirrored) == pytest.approx(-6.0)
        assert product_of_inertia(list(reversed(mirrored))) == pytest.approx(-6.0)

    def test_degenerate_input_is_zero(self):
        assert second_moment_x([(0, 0), (1, 1)]) == 0.0
        assert second_moment_y([(0, 0), (1, 1)]) == 0.0
        assert product_of_inertia([]) == 0.0


class TestEnsureWinding:
    """Winding normalisation."""

    def test_reverses_when_mismatched(self):
        out = ensure_winding(RECT_6x4, "cw")
        assert signed_area(out) < 0
        assert list(out) == list(reversed(RECT_6x4))

    def test_returns_input_when_matching(self):
        assert ensure_winding(RECT_6x4, "ccw") is RECT_6x4

    def test_cw_to_ccw(self):
        cw = list(reversed(RECT_6x4))
        assert signed_area(ensure_winding(cw, "CCW")) > 0

    def test_unknown_target_raises(self):
        with pytest.raises(ValueError, match="winding target"):
            ensure_winding(RECT_6x4, "sideways")
