# polysect.py
"""
polysect - Elastic and plastic properties of polygonal cross-sections.

A cross-section is one outer boundary polygon plus any number of polygonal
holes, all expressed in the same coordinate system (inches by convention).

Coordinate System:
    +X = right, +Y = up
    Properties are reported about centroidal axes parallel to X and Y.
    Plastic neutral axes are reported in the input coordinates.

Example:
    >>> from polysect import wide_flange, compute_section_properties, pretty
    >>> sec = wide_flange(d=12, bf=8, tf=0.75, tw=0.5)
    >>> p = compute_section_properties(sec)
    >>> print(f"Zx: {p.plastic.Zx:.2f} in^3")

Dependencies: numpy, shapely, matplotlib (optional, see polysect_plot)
"""
from typing import List, Tuple, Dict, Optional, Any, Sequence, NamedTuple, Callable, Iterable
import logging
import math
import numpy as np
from shapely.geometry import Polygon, MultiPolygon, GeometryCollection
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient

__all__ = [
    "Point", "CrossSection", "ElasticProperties", "PlasticProperties",
    "SectionProperties", "BisectResult", "cross_section",
    "signed_area", "polygon_area", "polygon_centroid",
    "second_moment_x", "second_moment_y", "product_of_inertia",
    "ensure_winding", "clip_polygon", "bisect",
    "compute_elastic_properties", "compute_plastic_properties",
    "compute_section_properties", "find_pna", "area_one_side",
    "plastic_modulus", "first_moment_about_axis",
    "rectangle", "hollow_rectangle", "circle", "hollow_circle",
    "t_shape", "l_shape", "c_shape", "wide_flange", "double_angle",
    "stacked_rectangles", "section_from_dict", "section_from_shapely",
    "section_to_shapely", "as_dict", "pretty",
]

logger = logging.getLogger(__name__)

# Areas, extents and product terms below this are treated as zero.
AREA_EPS = 1e-12
PNA_MAX_ITER = 100
PNA_REL_TOL = 1e-10
DEFAULT_NSEG = 64

Vertices = Sequence[Sequence[float]]


class Point(NamedTuple):
    x: float
    y: float


class CrossSection(NamedTuple):
    """Outer boundary plus holes. Holes are assumed to lie inside ``outer``."""
    outer: Tuple[Point, ...]
    holes: Tuple[Tuple[Point, ...], ...] = ()


class ElasticProperties(NamedTuple):
    area: float
    centroidX: float
    centroidY: float
    Ix: float
    Iy: float
    Ixy: float
    Ix_principal: float
    Iy_principal: float
    theta_principal: float
    Sx_top: float
    Sx_bot: float
    Sy_left: float
    Sy_right: float
    rx: float
    ry: float


class PlasticProperties(NamedTuple):
    pnaX: float
    pnaY: float
    Zx: float
    Zy: float


class SectionProperties(NamedTuple):
    elastic: ElasticProperties
    plastic: PlasticProperties


class BisectResult(NamedTuple):
    value: float
    iterations: int
    converged: bool


_ZERO_ELASTIC = ElasticProperties(*([0.0] * len(ElasticProperties._fields)))
_ZERO_PLASTIC = PlasticProperties(0.0, 0.0, 0.0, 0.0)


def cross_section(
    outer: Vertices,
    holes: Iterable[Vertices] = ()
) -> CrossSection:
    """
    Build a CrossSection from any nested sequences of (x, y) pairs.

    Args:
        outer: Outer boundary vertices, implicitly closed
        holes: Hole vertex loops

    Returns:
        CrossSection with float Points
    """
    return CrossSection(
        outer=_points(outer),
        holes=tuple(_points(h) for h in holes),
    )


# ============================================================
# INTERNAL HELPERS
# ============================================================

def _points(coords: Vertices) -> Tuple[Point, ...]:
    return tuple(Point(float(x), float(y)) for x, y in coords)


def _as_array(vertices: Vertices) -> np.ndarray:
    """Vertices as an (n, 2) float array; malformed input gives an empty array."""
    arr = np.asarray(vertices, dtype=float)
    if arr.ndim != 2 or arr.shape[1] < 2 or arr.shape[0] < 3:
        return np.empty((0, 2))
    return arr[:, :2]


def _edges(vertices: Vertices) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Edge endpoints of the implicitly closed polygon plus the shoelace cross terms.

    Returns:
        (x1, y1, x2, y2, cross) where edge i runs from vertex i to vertex i+1 (mod n)
    """
    arr = _as_array(vertices)
    x1 = arr[:, 0]
    y1 = arr[:, 1]
    x2 = np.roll(x1, -1)
    y2 = np.roll(y1, -1)
    cross = x1 * y2 - x2 * y1
    return x1, y1, x2, y2, cross


def _orientation(vertices: Vertices) -> float:
    """+1 for CCW, -1 for CW, 0 for degenerate."""
    a = signed_area(vertices)
    if a > 0:
        return 1.0
    if a < 0:
        return -1.0
    return 0.0


# ============================================================
# POLYGON ALGEBRA
# ============================================================
# Green's theorem integrals over a single closed vertex loop.
# Moments are taken about the origin of the vertex coordinates.
# ============================================================

def signed_area(vertices: Vertices) -> float:
    """Shoelace area. Positive for counter-clockwise, negative for clockwise."""
    _, _, _, _, cross = _edges(vertices)
    if cross.size == 0:
        return 0.0
    return float(np.sum(cross)) / 2.0


def polygon_area(vertices: Vertices) -> float:
    return abs(signed_area(vertices))


def polygon_centroid(vertices: Vertices) -> Point:
    """
    Centroid of a simple polygon.

    Returns the origin for fewer than three vertices or a zero-area loop.
    """
    x1, y1, x2, y2, cross = _edges(vertices)
    if cross.size == 0:
        return Point(0.0, 0.0)
    A = float(np.sum(cross)) / 2.0
    if abs(A) < AREA_EPS:
        return Point(0.0, 0.0)
    cx = float(np.sum((x1 + x2) * cross)) / (6.0 * A)
    cy = float(np.sum((y1 + y2) * cross)) / (6.0 * A)
    return Point(cx, cy)


def second_moment_x(vertices: Vertices) -> float:
    """
    Second moment of area about the X axis through the origin.

    Ix = 1/12 * sum[(y_i^2 + y_i*y_{i+1} + y_{i+1}^2) * cross_i]

    The raw sum flips sign with winding; the result is normalised by the
    orientation so it describes the enclosed region.
    """
    _, y1, _, y2, cross = _edges(vertices)
    if cross.size == 0:
        return 0.0
    raw = float(np.sum((y1**2 + y1 * y2 + y2**2) * cross)) / 12.0
    return raw * _orientation(vertices)


def second_moment_y(vertices: Vertices) -> float:
    """Second moment of area about the Y axis through the origin."""
    x1, _, x2, _, cross = _edges(vertices)
    if cross.size == 0:
        return 0.0
    raw = float(np.sum((x1**2 + x1 * x2 + x2**2) * cross)) / 12.0
    return raw * _orientation(vertices)


def product_of_inertia(vertices: Vertices) -> float:
    """
    Product of inertia about the origin.

    Ixy = 1/24 * sum[(x_i*y_{i+1} + 2*x_i*y_i + 2*x_{i+1}*y_{i+1} + x_{i+1}*y_i) * cross_i]

    Normalised by orientation like the second moments, so the physical sign
    of the region's product term is kept whatever the winding.
    """
    x1, y1, x2, y2, cross = _edges(vertices)
    if cross.size == 0:
        return 0.0
    raw = float(np.sum((x1 * y2 + 2 * x1 * y1 + 2 * x2 * y2 + x2 * y1) * cross)) / 24.0
    return raw * _orientation(vertices)


def ensure_winding(vertices: Vertices, target: str = "ccw") -> Vertices:
    """
    Return vertices in the requested winding.

    Args:
        vertices: Polygon vertices
        target:   "ccw" or "cw"

    Returns:
        The input unchanged if it already matches, else a reversed list
    """
    key = str(target).strip().lower()
    if key not in ("ccw", "cw"):
        raise ValueError(f"Unsupported winding target: {target!r}")
    a = signed_area(vertices)
    if (key == "ccw" and a < 0) or (key == "cw" and a > 0):
        return list(reversed(list(vertices)))
    return vertices


# ============================================================
# POLYGON CLIPPER
# ============================================================
# Sutherland-Hodgman against a single axis-aligned cut line.
#   direction "horizontal": line y = axis_value
#   direction "vertical":   line x = axis_value
#   side "below": keep coordinate <= axis_value (below / left)
#   side "above": keep coordinate >= axis_value (above / right)
# ============================================================

_DIRECTIONS = ("horizontal", "vertical")
_SIDES = ("below", "above")


def _check_cut(direction: str, side: str = "below") -> None:
    if direction not in _DIRECTIONS:
        raise ValueError(f"Unsupported cut direction: {direction!r}. Expected one of {_DIRECTIONS}")
    if side not in _SIDES:
        raise ValueError(f"Unsupported clip side: {side!r}. Expected one of {_SIDES}")


def _inside(p: Point, axis_value: float, direction: str, side: str) -> bool:
    val = p[1] if direction == "horizontal" else p[0]
    if side == "below":
        return val <= axis_value
    return val >= axis_value


def _intersect(p1: Point, p2: Point, axis_value: float, direction: str) -> Point:
    """Point where edge p1-p2 crosses the cut line."""
    x1, y1 = p1[0], p1[1]
    x2, y2 = p2[0], p2[1]
    if direction == "horizontal":
        if abs(y2 - y1) < AREA_EPS:
            return Point(x1, y1)
        t = (axis_value - y1) / (y2 - y1)
        return Point(x1 + t * (x2 - x1), axis_value)
    if abs(x2 - x1) < AREA_EPS:
        return Point(x1, y1)
    t = (axis_value - x1) / (x2 - x1)
    return Point(axis_value, y1 + t * (y2 - y1))


def clip_polygon(
    vertices: Vertices,
    axis_value: float,
    direction: str,
    side: str
) -> List[Point]:
    """
    Clip a polygon against an axis-aligned line and keep one side.

    Args:
        vertices:   Polygon vertices (implicitly closed)
        axis_value: Position of the cut line
        direction:  "horizontal" (y = axis_value) or "vertical" (x = axis_value)
        side:       "below" (<= axis_value) or "above" (>= axis_value)

    Returns:
        Clipped vertex list. Empty when the polygon lies entirely on the
        excluded side or has fewer than three vertices.
    """
    _check_cut(direction, side)
    n = len(vertices)
    if n < 3:
        return []

    output: List[Point] = []
    for i in range(n):
        current = Point(float(vertices[i][0]), float(vertices[i][1]))
        nxt = Point(float(vertices[(i + 1) % n][0]), float(vertices[(i + 1) % n][1]))
        current_in = _inside(current, axis_value, direction, side)
        next_in = _inside(nxt, axis_value, direction, side)

        if current_in:
            output.append(current)
            if not next_in:
                output.append(_intersect(current, nxt, axis_value, direction))
        elif next_in:
            output.append(_intersect(current, nxt, axis_value, direction))

    return output


# ============================================================
# BISECTION
# ============================================================

def bisect(
    func: Callable[[float], float],
    lo: float,
    hi: float,
    target: float,
    *,
    tol: float,
    max_iter: int = PNA_MAX_ITER
) -> BisectResult:
    """
    Solve func(x) = target on [lo, hi] for a non-decreasing func.

    Stops as soon as |func(mid) - target| < tol. When the iteration cap is
    reached the midpoint of the final bracket is returned with
    converged=False; this is not treated as an error.

    Args:
        func:     Monotone non-decreasing scalar function
        lo, hi:   Initial bracket
        target:   Value to reach
        tol:      Absolute tolerance on func(mid) - target
        max_iter: Iteration cap

    Returns:
        BisectResult(value, iterations, converged)
    """
    for iteration in range(1, max_iter + 1):
        mid = (lo + hi) / 2.0
        value = func(mid)
        if abs(value - target) < tol:
            return BisectResult(mid, iteration, True)
        if value < target:
            lo = mid
        else:
            hi = mid

    logger.debug("Bisection hit the %d iteration cap; bracket [%r, %r]", max_iter, lo, hi)
    return BisectResult((lo + hi) / 2.0, max_iter, False)


# ============================================================
# ELASTIC PROPERTIES
# ============================================================

def _normalized(section: CrossSection) -> Tuple[Vertices, List[Vertices]]:
    """Outer boundary CCW and holes CW, required before any composite sum."""
    outer = ensure_winding(section.outer, "ccw")
    holes = [ensure_winding(h, "cw") for h in section.holes]
    return outer, holes


def _net_area(outer: Vertices, holes: Sequence[Vertices]) -> float:
    return polygon_area(outer) - sum(polygon_area(h) for h in holes)


def _bounds(outer: Vertices, holes: Sequence[Vertices]) -> Tuple[float, float, float, float]:
    """(minx, miny, maxx, maxy) over every outer and hole vertex."""
    rings = [_as_array(outer)] + [_as_array(h) for h in holes]
    xy = np.vstack([r for r in rings if r.size] or [np.zeros((1, 2))])
    return (float(xy[:, 0].min()), float(xy[:, 1].min()),
            float(xy[:, 0].max()), float(xy[:, 1].max()))


def _modulus(inertia: float, distance: float) -> float:
    """Section modulus to one extreme fibre; 0 when the fibre sits on the axis."""
    d = abs(distance)
    return inertia / d if d > AREA_EPS else 0.0


def compute_elastic_properties(section: CrossSection) -> ElasticProperties:
    """
    Compute elastic properties of a cross-section with holes.

    Args:
        section: CrossSection (outer boundary + holes)

    Returns:
        ElasticProperties about centroidal axes. All fields are zero when the
        net area is below AREA_EPS.
    """
    outer, holes = _normalized(section)

    # Stage 1: net area
    outer_area = polygon_area(outer)
    hole_areas = [polygon_area(h) for h in holes]
    A = outer_area - sum(hole_areas)
    if A < AREA_EPS:
        logger.debug("Net area %r below threshold; returning zero elastic properties", A)
        return _ZERO_ELASTIC

    # Stage 2: centroid from first moments
    oc = polygon_centroid(outer)
    Qx = outer_area * oc.y
    Qy = outer_area * oc.x
    for h, Ah in zip(holes, hole_areas):
        hc = polygon_centroid(h)
        Qx -= Ah * hc.y
        Qy -= Ah * hc.x
    Cx = Qy / A
    Cy = Qx / A

    # Stage 3: second moments about the origin, holes subtracted
    Ix_0 = abs(second_moment_x(outer))
    Iy_0 = abs(second_moment_y(outer))
    Ixy_0 = product_of_inertia(outer)
    for h in holes:
        Ix_0 -= abs(second_moment_x(h))
        Iy_0 -= abs(second_moment_y(h))
        Ixy_0 -= product_of_inertia(h)

    # Transfer to centroid (parallel axis theorem)
    Ix = Ix_0 - A * Cy**2
    Iy = Iy_0 - A * Cx**2
    Ixy = Ixy_0 - A * Cx * Cy

    # Stage 4: principal axes
    I_avg = (Ix + Iy) / 2.0
    I_diff = (Ix - Iy) / 2.0
    R = math.hypot(I_diff, Ixy)
    theta = 0.5 * math.atan2(-Ixy, I_diff) if abs(Ixy) > AREA_EPS else 0.0

    # Stage 5: extreme fibres and section moduli
    minx, miny, maxx, maxy = _bounds(outer, holes)

    return ElasticProperties(
        area=A,
        centroidX=Cx,
        centroidY=Cy,
        Ix=Ix,
        Iy=Iy,
        Ixy=Ixy,
        Ix_principal=I_avg + R,
        Iy_principal=I_avg - R,
        theta_principal=theta,
        Sx_top=_modulus(Ix, maxy - Cy),
        Sx_bot=_modulus(Ix, miny - Cy),
        Sy_left=_modulus(Iy, minx - Cx),
        Sy_right=_modulus(Iy, maxx - Cx),
        rx=math.sqrt(max(Ix, 0.0) / A),
        ry=math.sqrt(max(Iy, 0.0) / A),
    )


# ============================================================
# PLASTIC PROPERTIES
# ============================================================

def area_one_side(
    outer: Vertices,
    holes: Sequence[Vertices],
    cut: float,
    direction: str,
    side: str = "below"
) -> float:
    """Net area of the section on one side of a cut line."""
    a = polygon_area(clip_polygon(outer, cut, direction, side))
    for h in holes:
        a -= polygon_area(clip_polygon(h, cut, direction, side))
    return a


def first_moment_about_axis(vertices: Vertices, axis_value: float, direction: str) -> float:
    """
    First moment of a polygon's area about an axis-aligned line.

    horizontal: Q = A * (Cy - axis_value)
    vertical:   Q = A * (Cx - axis_value)
    """
    if len(vertices) < 3:
        return 0.0
    A = polygon_area(vertices)
    c = polygon_centroid(vertices)
    if direction == "horizontal":
        return A * (c.y - axis_value)
    return A * (c.x - axis_value)


def find_pna(
    outer: Vertices,
    holes: Sequence[Vertices],
    total_area: float,
    lo: float,
    hi: float,
    direction: str,
    *,
    max_iter: int = PNA_MAX_ITER,
    rel_tol: float = PNA_REL_TOL
) -> BisectResult:
    """
    Locate the plastic neutral axis for one cut direction.

    The axis is the cut position where the area below/left equals half the
    net area. Area below the cut is non-decreasing in the cut position, so
    plain bisection on [lo, hi] applies.
    """
    _check_cut(direction)
    return bisect(
        lambda cut: area_one_side(outer, holes, cut, direction, "below"),
        lo, hi, total_area / 2.0,
        tol=total_area * rel_tol,
        max_iter=max_iter,
    )


def plastic_modulus(
    outer: Vertices,
    holes: Sequence[Vertices],
    pna: float,
    direction: str
) -> float:
    """Z = |Q_above| + |Q_below|, first moments taken about the PNA."""
    _check_cut(direction)
    moment_above = first_moment_about_axis(clip_polygon(outer, pna, direction, "above"), pna, direction)
    moment_below = first_moment_about_axis(clip_polygon(outer, pna, direction, "below"), pna, direction)
    for h in holes:
        moment_above -= first_moment_about_axis(clip_polygon(h, pna, direction, "above"), pna, direction)
        moment_below -= first_moment_about_axis(clip_polygon(h, pna, direction, "below"), pna, direction)
    return abs(moment_above) + abs(moment_below)


def compute_plastic_properties(
    section: CrossSection,
    *,
    net_area: Optional[float] = None,
    max_iter: int = PNA_MAX_ITER,
    rel_tol: float = PNA_REL_TOL
) -> PlasticProperties:
    """
    Compute plastic neutral axes and plastic section moduli.

    Args:
        section:  CrossSection (outer boundary + holes)
        net_area: Net area if already known (e.g. from the elastic pass)
        max_iter: Bisection iteration cap per direction
        rel_tol:  Convergence tolerance as a fraction of the net area

    Returns:
        PlasticProperties. All fields are zero when the net area is below
        AREA_EPS.
    """
    outer, holes = _normalized(section)
    A = _net_area(outer, holes) if net_area is None else net_area
    if A < AREA_EPS:
        logger.debug("Net area %r below threshold; returning zero plastic properties", A)
        return _ZERO_PLASTIC

    minx, miny, maxx, maxy = _bounds(outer, holes)

    results: Dict[str, Tuple[float, float]] = {}
    for direction, lo, hi in (("horizontal", miny, maxy), ("vertical", minx, maxx)):
        res = find_pna(outer, holes, A, lo, hi, direction, max_iter=max_iter, rel_tol=rel_tol)
        if not res.converged:
            logger.warning(
                "PNA search (%s cut) did not converge in %d iterations; using %r",
                direction, res.iterations, res.value
            )
        results[direction] = (res.value, plastic_modulus(outer, holes, res.value, direction))

    pna_x, Zx = results["horizontal"]
    pna_y, Zy = results["vertical"]
    return PlasticProperties(pnaX=pna_x, pnaY=pna_y, Zx=Zx, Zy=Zy)


def compute_section_properties(section: CrossSection, **plastic_options: Any) -> SectionProperties:
    """
    Compute elastic and plastic properties of a cross-section.

    Args:
        section: CrossSection (outer boundary + holes)
        **plastic_options: max_iter / rel_tol for the PNA search

    Returns:
        SectionProperties(elastic, plastic)
    """
    elastic = compute_elastic_properties(section)
    plastic = compute_plastic_properties(section, net_area=elastic.area, **plastic_options)
    return SectionProperties(elastic=elastic, plastic=plastic)


# ============================================================
# PROFILE GENERATORS
# ============================================================
# All profiles:
#   - Lower-left of the bounding box at (0, 0) unless stated
#   - Outer boundary counter-clockwise
#   - Return CrossSection
# ============================================================

def _check_positive(**dims: float) -> None:
    bad = {k: v for k, v in dims.items() if not v > 0}
    if bad:
        raise ValueError("Dimensions must be positive: " + ", ".join(f"{k}={v}" for k, v in bad.items()))


def _circle_coords(cx: float, cy: float, r: float, nseg: int) -> List[Tuple[float, float]]:
    """nseg points on a circle, counter-clockwise from angle 0."""
    angles = np.linspace(0.0, 2 * math.pi, nseg, endpoint=False)
    return [(cx + r * math.cos(a), cy + r * math.sin(a)) for a in angles]


def rectangle(
    b: float,
    h: float,
    x0: float = 0,
    y0: float = 0
) -> CrossSection:
    """
    Create rectangle with bottom-left corner at (x0, y0).

    Args:
        b:  Width (along X)
        h:  Height (along Y)
        x0: X coordinate of bottom-left corner
        y0: Y coordinate of bottom-left corner
    """
    _check_positive(b=b, h=h)
    coords = [(x0, y0), (x0 + b, y0), (x0 + b, y0 + h), (x0, y0 + h)]
    return cross_section(coords)


def hollow_rectangle(B: float, H: float, t: float) -> CrossSection:
    """
    Create rectangular hollow section (HSS / box).

    Args:
        B: Outer width (in)
        H: Outer height (in)
        t: Wall thickness (in)

    Returns:
        CrossSection with one rectangular hole. A wall too thick to leave a
        void returns the solid rectangle.
    """
    _check_positive(B=B, H=H, t=t)
    outer = [(0, 0), (B, 0), (B, H), (0, H)]
    if B - 2 * t <= 0 or H - 2 * t <= 0:
        return cross_section(outer)
    inner = [(t, t), (B - t, t), (B - t, H - t), (t, H - t)]
    return cross_section(outer, [inner])


def circle(d: float, nseg: int = DEFAULT_NSEG) -> CrossSection:
    """
    Create solid round (approximated as polygon) inside the box [0, d] x [0, d].

    Args:
        d:    Diameter (in)
        nseg: Number of segments
    """
    _check_positive(d=d)
    if nseg < 3:
        raise ValueError(f"nseg must be >= 3: nseg={nseg}")
    r = d / 2.0
    return cross_section(_circle_coords(r, r, r, nseg))


def hollow_circle(D: float, t: float, nseg: int = DEFAULT_NSEG) -> CrossSection:
    """
    Create circular hollow section (pipe).

    Args:
        D:    Outer diameter (in)
        t:    Wall thickness (in)
        nseg: Number of segments per circle
    """
    _check_positive(D=D, t=t)
    if nseg < 3:
        raise ValueError(f"nseg must be >= 3: nseg={nseg}")
    R = D / 2.0
    r = R - t
    outer = _circle_coords(R, R, R, nseg)
    if r <= 0:
        return cross_section(outer)
    return cross_section(outer, [_circle_coords(R, R, r, nseg)])


def t_shape(bf: float, tf: float, hw: float, tw: float) -> CrossSection:
    """
    Create T-section with the flange on top and the stem down to y = 0.

    Args:
        bf: Flange width (in)
        tf: Flange thickness (in)
        hw: Web (stem) height below the flange (in)
        tw: Web thickness (in)
    """
    _check_positive(bf=bf, tf=tf, hw=hw, tw=tw)
    if tw > bf:
        raise ValueError(f"tw must not exceed bf: tw={tw}, bf={bf}")
    total_h = hw + tf
    web_left = (bf - tw) / 2.0
    web_right = web_left + tw
    coords = [
        (web_left, 0), (web_right, 0), (web_right, hw), (bf, hw),
        (bf, total_h), (0, total_h), (0, hw), (web_left, hw),
    ]
    return cross_section(coords)


def l_shape(b: float, h: float, t: float) -> CrossSection:
    """
    Create angle (L-section) with the heel at the origin.

    Args:
        b: Horizontal leg length (in)
        h: Vertical leg length (in)
        t: Leg thickness (in)
    """
    _check_positive(b=b, h=h, t=t)
    if t >= b or t >= h:
        raise ValueError(f"t must be less than both legs: t={t}, b={b}, h={h}")
    coords = [(0, 0), (b, 0), (b, t), (t, t), (t, h), (0, h)]
    return cross_section(coords)


def c_shape(H: float, bf: float, tf: float, tw: float) -> CrossSection:
    """
    Create channel with the web on the left and toes pointing +X.

    Args:
        H:  Total height (in)
        bf: Flange width (in)
        tf: Flange thickness (in)
        tw: Web thickness (in)
    """
    _check_positive(H=H, bf=bf, tf=tf, tw=tw)
    if 2 * tf >= H:
        raise ValueError(f"2*tf must be less than H: tf={tf}, H={H}")
    if tw >= bf:
        raise ValueError(f"tw must be less than bf: tw={tw}, bf={bf}")
    coords = [
        (0, 0), (bf, 0), (bf, tf), (tw, tf),
        (tw, H - tf), (bf, H - tf), (bf, H), (0, H),
    ]
    return cross_section(coords)


def wide_flange(d: float, bf: float, tf: float, tw: float) -> CrossSection:
    """
    Create wide-flange / I-section, doubly symmetric about its mid-lines.

    Args:
        d:  Total depth (in)
        bf: Flange width (in)
        tf: Flange thickness (in)
        tw: Web thickness (in)
    """
    _check_positive(d=d, bf=bf, tf=tf, tw=tw)
    if 2 * tf >= d:
        raise ValueError(f"2*tf must be less than d: tf={tf}, d={d}")
    if tw >= bf:
        raise ValueError(f"tw must be less than bf: tw={tw}, bf={bf}")

    web_left = (bf - tw) / 2.0
    web_right = web_left + tw

    # CCW from bottom-left of the bottom flange
    coords = [
        (0, 0), (bf, 0), (bf, tf), (web_right, tf),
        (web_right, d - tf), (bf, d - tf), (bf, d), (0, d),
        (0, d - tf), (web_left, d - tf), (web_left, tf), (0, tf),
    ]
    return cross_section(coords)


def double_angle(b: float, h: float, t: float, g: float) -> CrossSection:
    """
    Create two angles back-to-back, vertical legs adjacent across a gap.

    Args:
        b: Horizontal leg length of each angle (in)
        h: Vertical leg length (in)
        t: Thickness (in)
        g: Gap between the vertical legs (in)

    Returns:
        Single outline when g < 0.001, otherwise the bounding rectangle with
        three voids.
    """
    _check_positive(b=b, h=h, t=t)
    if g < 0:
        raise ValueError(f"g must not be negative: g={g}")
    if t >= b or t >= h:
        raise ValueError(f"t must be less than both legs: t={t}, b={b}, h={h}")
    total_w = 2 * b + g

    if g < 0.001:
        coords = [
            (0, 0), (total_w, 0), (total_w, t), (b + t, t),
            (b + t, h), (b - t, h), (b - t, t), (0, t),
        ]
        return cross_section(coords)

    outer = [(0, 0), (total_w, 0), (total_w, h), (0, h)]
    void_left = [(0, t), (b - t, t), (b - t, h), (0, h)]
    void_gap = [(b, 0), (b + g, 0), (b + g, h), (b, h)]
    void_right = [(b + g + t, t), (total_w, t), (total_w, h), (b + g + t, h)]
    return cross_section(outer, [void_left, void_gap, void_right])


def stacked_rectangles(b1: float, h1: float, b2: float, h2: float) -> CrossSection:
    """
    Create two rectangles stacked vertically on a common centreline.

    Args:
        b1, h1: Bottom rectangle width and height (in)
        b2, h2: Top rectangle width and height (in)
    """
    _check_positive(b1=b1, h1=h1, b2=b2, h2=h2)
    max_w = max(b1, b2)
    x1_l = (max_w - b1) / 2.0
    x1_r = x1_l + b1
    x2_l = (max_w - b2) / 2.0
    x2_r = x2_l + b2

    if abs(b1 - b2) < 0.001:
        return cross_section([(x1_l, 0), (x1_r, 0), (x1_r, h1 + h2), (x1_l, h1 + h2)])

    coords = [
        (x1_l, 0), (x1_r, 0), (x1_r, h1), (x2_r, h1),
        (x2_r, h1 + h2), (x2_l, h1 + h2), (x2_l, h1), (x1_l, h1),
    ]
    return cross_section(coords)


# ============================================================
# CONVERTERS
# ============================================================

# Canonical shape type mapping.
# Keys are normalized (lowercase, spaces/hyphens -> underscores).
# Values are builder names; parameters are looked up by name.
_SHAPE_TYPE_MAP: Dict[str, str] = {
    "rectangle": "rectangle",
    "rect": "rectangle",
    "bar": "rectangle",
    "hollow_rectangle": "hollow_rectangle",
    "box": "hollow_rectangle",
    "hss": "hollow_rectangle",
    "rhs": "hollow_rectangle",
    "shs": "hollow_rectangle",
    "circle": "circle",
    "round": "circle",
    "hollow_circle": "hollow_circle",
    "pipe": "hollow_circle",
    "chs": "hollow_circle",
    "t_shape": "t_shape",
    "tee": "t_shape",
    "wt": "t_shape",
    "l_shape": "l_shape",
    "angle": "l_shape",
    "c_shape": "c_shape",
    "channel": "c_shape",
    "wide_flange": "wide_flange",
    "w": "wide_flange",
    "i_beam": "wide_flange",
    "double_angle": "double_angle",
    "2l": "double_angle",
    "stacked_rectangles": "stacked_rectangles",
}

_SHAPE_BUILDERS: Dict[str, Tuple[Callable[..., CrossSection], Tuple[str, ...], Tuple[str, ...]]] = {
    # name: (builder, required params, optional params)
    "rectangle": (rectangle, ("b", "h"), ("x0", "y0")),
    "hollow_rectangle": (hollow_rectangle, ("B", "H", "t"), ()),
    "circle": (circle, ("d",), ("nseg",)),
    "hollow_circle": (hollow_circle, ("D", "t"), ("nseg",)),
    "t_shape": (t_shape, ("bf", "tf", "hw", "tw"), ()),
    "l_shape": (l_shape, ("b", "h", "t"), ()),
    "c_shape": (c_shape, ("H", "bf", "tf", "tw"), ()),
    "wide_flange": (wide_flange, ("d", "bf", "tf", "tw"), ()),
    "double_angle": (double_angle, ("b", "h", "t", "g"), ()),
    "stacked_rectangles": (stacked_rectangles, ("b1", "h1", "b2", "h2"), ()),
}


def section_from_dict(data: Dict[str, Any]) -> CrossSection:
    """
    Dict -> CrossSection.

    The dictionary names a shape type under "type" (or "shape") and carries
    the builder parameters by name, e.g.
    {"type": "HSS", "B": 8, "H": 10, "t": 0.5}.
    Parameter names are case-sensitive where the builder distinguishes them
    (B/b, H/h, D/d).
    """
    if not isinstance(data, dict):
        raise TypeError("section_from_dict expects dict")

    raw_type = data.get("type") or data.get("shape") or ""
    raw_type = str(raw_type).strip().lower().replace("-", "_").replace(" ", "_")

    name = _SHAPE_TYPE_MAP.get(raw_type)
    if not name:
        raise ValueError(
            f"Unknown shape type: {raw_type!r}. "
            f"Expected one of: {sorted(_SHAPE_TYPE_MAP.keys())}"
        )

    builder, required, optional = _SHAPE_BUILDERS[name]
    missing = [k for k in required if data.get(k) is None]
    if missing:
        raise ValueError(f"Missing parameters for {name}: {missing}")

    kwargs: Dict[str, Any] = {}
    for k in required + optional:
        v = data.get(k)
        if v is None:
            continue
        try:
            kwargs[k] = int(v) if k == "nseg" else float(v)
        except (TypeError, ValueError):
            raise ValueError(f"Parameter {k!r} of {name} is not a number: {v!r}")
    return builder(**kwargs)


def _collect_polygons(g: BaseGeometry) -> List[Polygon]:
    """Return a list of Polygon objects from a geometry."""
    if g is None or g.is_empty:
        return []
    if isinstance(g, Polygon):
        return [g]
    if isinstance(g, MultiPolygon):
        return list(g.geoms)
    if isinstance(g, GeometryCollection):
        return [p for p in g.geoms if isinstance(p, Polygon)]
    return []


def section_from_shapely(g: BaseGeometry) -> CrossSection:
    """
    Shapely geometry -> CrossSection.

    Accepts a Polygon, or a collection holding exactly one Polygon. The
    repeated closing vertex of each shapely ring is dropped.

    Raises:
        ValueError: If geometry is empty or has more than one polygon part
    """
    polys = _collect_polygons(g)
    if not polys:
        raise ValueError("Geometry contains no Polygon objects.")
    if len(polys) > 1:
        raise ValueError(f"Expected a single polygon, got {len(polys)} parts.")

    poly = orient(polys[0], 1.0)  # CCW exterior; holes become CW
    outer = list(poly.exterior.coords)[:-1]
    holes = [list(ring.coords)[:-1] for ring in poly.interiors]
    return cross_section(outer, holes)


def section_to_shapely(section: CrossSection) -> Polygon:
    """CrossSection -> shapely Polygon (holes as interior rings)."""
    if len(section.outer) < 3:
        return Polygon()
    return Polygon(
        [tuple(p) for p in section.outer],
        [[tuple(p) for p in h] for h in section.holes if len(h) >= 3],
    )


# ============================================================
# OUTPUT UTILITIES
# ============================================================

def as_dict(props: SectionProperties) -> Dict[str, float]:
    """Flatten SectionProperties into one dict of elastic and plastic fields."""
    d: Dict[str, float] = {}
    d.update(props.elastic._asdict())
    d.update(props.plastic._asdict())
    return d


def _fmt(value: float, n: int) -> str:
    if abs(value) < 1e-10:
        return "0"
    s = format(value, f".{n}f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def pretty(props: SectionProperties, n: int = 4) -> str:
    """
    Format compute_section_properties() result for printing.

    Args:
        props: SectionProperties
        n:     Number of decimal places (trailing zeros are stripped)

    Returns:
        Formatted multi-line report
    """
    e, p = props.elastic, props.plastic

    def row(label: str, value: float, unit: str = "") -> str:
        text = f"{label:<20}= {_fmt(value, n)}"
        return f"{text} {unit}" if unit else text

    lines = [
        "SECTION PROPERTIES",
        "==================",
        "",
        "ELASTIC PROPERTIES",
        "------------------",
        row("Area", e.area, "in^2"),
        row("Centroid X", e.centroidX, "in"),
        row("Centroid Y", e.centroidY, "in"),
        "",
        "Moments of Inertia",
        row("  Ix", e.Ix, "in^4"),
        row("  Iy", e.Iy, "in^4"),
        row("  Ixy", e.Ixy, "in^4"),
        "",
        "Principal Moments of Inertia",
        row("  I1 (max)", e.Ix_principal, "in^4"),
        row("  I2 (min)", e.Iy_principal, "in^4"),
        f"{'  theta':<20}= {math.degrees(e.theta_principal):.2f} deg",
        "",
        "Section Moduli",
        row("  Sx (top)", e.Sx_top, "in^3"),
        row("  Sx (bot)", e.Sx_bot, "in^3"),
        row("  Sy (left)", e.Sy_left, "in^3"),
        row("  Sy (right)", e.Sy_right, "in^3"),
        "",
        "Radii of Gyration",
        row("  rx", e.rx, "in"),
        row("  ry", e.ry, "in"),
        "",
        "PLASTIC PROPERTIES",
        "------------------",
        row("PNA-X (y-coord)", p.pnaX, "in"),
        row("PNA-Y (x-coord)", p.pnaY, "in"),
        row("Zx", p.Zx, "in^3"),
        row("Zy", p.Zy, "in^3"),
    ]
    return "\n".join(lines)
