"""
End-to-end tests for compute_section_properties().
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from polysect import (
    SectionProperties,
    compute_elastic_properties,
    compute_plastic_properties,
    compute_section_properties,
    cross_section,
    hollow_circle,
    wide_flange,
)


class TestEndToEnd:
    """Rectangle (0,0)-(10,0)-(10,8)-(0,8), no holes."""

    def test_full_record(self, rect_10x8):
        props = compute_section_properties(rect_10x8)
        e, p = props.elastic, props.plastic

        assert e.area == pytest.approx(80.0)
        assert (e.centroidX, e.centroidY) == pytest.approx((5.0, 4.0))
        assert e.Ix == pytest.approx(426.667, abs=1e-3)
        assert e.Iy == pytest.approx(666.667, abs=1e-3)
        assert e.Ixy == pytest.approx(0.0, abs=1e-9)
        assert e.Sx_top == pytest.approx(106.667, abs=1e-3)
        assert e.Sx_bot == pytest.approx(106.667, abs=1e-3)
        assert e.Sy_left == pytest.approx(133.333, abs=1e-3)
        assert e.Sy_right == pytest.approx(133.333, abs=1e-3)
        assert p.Zx == pytest.approx(160.0)
        assert p.Zy == pytest.approx(200.0)
        assert p.pnaX == pytest.approx(4.0)
        assert p.pnaY == pytest.approx(5.0)

    def test_matches_separate_engines(self, hollow_10x8):
        props = compute_section_properties(hollow_10x8)
        assert isinstance(props, SectionProperties)
        assert props.elastic == compute_elastic_properties(hollow_10x8)
        assert props.plastic == pytest.approx(compute_plastic_properties(hollow_10x8))

    def test_plastic_options_are_forwarded(self, l_outline):
        props = compute_section_properties(l_outline, max_iter=2)
        # Two bisection steps on [0, 6] cannot reach 11/12
        assert props.plastic.pnaX != pytest.approx(11.0 / 12.0, abs=1e-3)

    def test_plastic_never_below_elastic(self):
        # Shape factor Z/S >= 1 for any section
        for sec in (wide_flange(d=12, bf=8, tf=0.75, tw=0.5), hollow_circle(D=10, t=0.5)):
            props = compute_section_properties(sec)
            s_min = min(props.elastic.Sx_top, props.elastic.Sx_bot)
            assert props.plastic.Zx >= s_min

    def test_degenerate_section(self):
        props = compute_section_properties(cross_section([(0, 0), (1, 0)]))
        assert all(v == 0.0 for v in props.elastic)
        assert all(v == 0.0 for v in props.plastic)


class TestPurity:

    def test_records_are_immutable(self, rect_10x8):
        props = compute_section_properties(rect_10x8)
        with pytest.raises(AttributeError):
            props.elastic.area = 1.0
        with pytest.raises(AttributeError):
            props.plastic = None

    def test_repeated_calls_are_identical(self, l_with_void):
        assert compute_section_properties(l_with_void) == compute_section_properties(l_with_void)

    def test_input_is_not_modified(self, l_with_void):
        before = (l_with_void.outer, l_with_void.holes)
        compute_section_properties(l_with_void)
        assert (l_with_void.outer, l_with_void.holes) == before

    def test_concurrent_calls(self, rect_10x8, hollow_10x8, l_outline):
        sections = [rect_10x8, hollow_10x8, l_outline] * 4
        expected = [compute_section_properties(s) for s in sections]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(compute_section_properties, sections))
        assert results == expected
