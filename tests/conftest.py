import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from polysect import cross_section


def make_rect(x0, y0, x1, y1):
    """CCW rectangle from (x0, y0) to (x1, y1)."""
    return [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]


@pytest.fixture
def rect_10x8():
    """10 wide, 8 tall, lower-left corner at the origin."""
    return cross_section(make_rect(0, 0, 10, 8))


@pytest.fixture
def hollow_10x8():
    """10x8 box with 0.5 walls (concentric 9x7 void)."""
    return cross_section(make_rect(0, 0, 10, 8), [make_rect(0.5, 0.5, 9.5, 7.5)])


@pytest.fixture
def l_outline():
    """Equal-leg angle 6x6x1 traced as a single outline."""
    return cross_section([(0, 0), (6, 0), (6, 1), (1, 1), (1, 6), (0, 6)])


@pytest.fixture
def l_with_void():
    """The same 6x6x1 angle as a 6x6 square minus a 5x5 void.

    The void is deliberately given counter-clockwise to exercise winding
    normalisation.
    """
    return cross_section(make_rect(0, 0, 6, 6), [make_rect(1, 1, 6, 6)])
