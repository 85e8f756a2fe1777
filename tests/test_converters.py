"""
Tests for the shapely bridge.
"""

import pytest
from shapely.geometry import GeometryCollection, LineString, MultiPolygon, Polygon, box

from polysect import (
    compute_elastic_properties,
    cross_section,
    section_from_shapely,
    section_to_shapely,
    signed_area,
)


class TestFromShapely:

    def test_polygon_with_hole(self):
        g = box(0, 0, 10, 8).difference(box(0.5, 0.5, 9.5, 7.5))
        sec = section_from_shapely(g)
        assert len(sec.outer) == 4
        assert len(sec.holes) == 1
        assert compute_elastic_properties(sec).area == pytest.approx(g.area)

    def test_closing_vertex_dropped(self):
        sec = section_from_shapely(Polygon([(0, 0), (4, 0), (0, 3)]))
        assert len(sec.outer) == 3
        assert sec.outer[0] != sec.outer[-1]

    def test_exterior_oriented_ccw(self):
        cw = Polygon([(0, 0), (0, 3), (4, 0)])
        sec = section_from_shapely(cw)
        assert signed_area(sec.outer) > 0

    def test_single_polygon_collection(self):
        g = GeometryCollection([box(0, 0, 2, 2), LineString([(5, 5), (6, 6)])])
        sec = section_from_shapely(g)
        assert compute_elastic_properties(sec).area == pytest.approx(4.0)

    def test_multipart_geometry_raises(self):
        with pytest.raises(ValueError, match="single polygon"):
            section_from_shapely(MultiPolygon([box(0, 0, 1, 1), box(2, 2, 3, 3)]))

    def test_empty_geometry_raises(self):
        with pytest.raises(ValueError, match="no Polygon"):
            section_from_shapely(Polygon())


class TestToShapely:

    def test_area_matches_net_area(self, hollow_10x8):
        g = section_to_shapely(hollow_10x8)
        assert g.is_valid
        assert g.area == pytest.approx(compute_elastic_properties(hollow_10x8).area)
        assert len(g.interiors) == 1

    def test_degenerate_section_is_empty(self):
        assert section_to_shapely(cross_section([(0, 0), (1, 1)])).is_empty

    def test_centroid_agrees_with_shapely(self, l_outline):
        g = section_to_shapely(l_outline)
        p = compute_elastic_properties(l_outline)
        assert (p.centroidX, p.centroidY) == pytest.approx((g.centroid.x, g.centroid.y))
