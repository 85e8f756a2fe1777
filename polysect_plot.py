# polysect_plot.py
# flake8: noqa E501
"""
2D section plotting helpers for polysect.

Provides Matplotlib wrappers for drawing cross-sections and the standard
property overlays:
- title (annotate_title)
- centroid (annotate_centroid)
- plastic neutral axes (annotate_pna)
- principal axes (annotate_principal_axes)
- bounding box dimensions (annotate_bbox)

Coordinate system: +Y up, origin in the same coordinates as the input section.

Dependencies: matplotlib, numpy, shapely, polysect.
"""

# Note: numerical properties (A, I, centroid, PNA) are computed in polysect.
import logging
import math
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes
from typing import Tuple, Dict, Any, Optional, Mapping

from polysect import (
    CrossSection,
    SectionProperties,
    compute_section_properties,
    section_to_shapely,
)

logger = logging.getLogger(__name__)


DEFAULT_ARROW_KWARGS: Dict[str, Any] = dict(
    arrowstyle="<|-|>",
    color="black",
    mutation_scale=15,
    shrinkA=0,
    shrinkB=0
)
DEFAULT_TEXT_KWARGS: Dict[str, Any] = dict(
    fontsize=9,
    ha='center',
    va='center',
    color="black",
    bbox=dict(boxstyle="square,pad=0.1", fc="white", ec="none", alpha=0.8)
)
DEFAULT_CENTROID_MARKER_KWARGS: Dict[str, Any] = dict(
    marker='+',
    color='red',
    s=50,
    zorder=10,
    linewidths=1.0
)
DEFAULT_PNA_LINE_KWARGS: Dict[str, Any] = dict(
    color="tab:orange",
    linestyle="--",
    linewidth=1.0,
    zorder=8
)
DEFAULT_PRINCIPAL_LINE_KWARGS: Dict[str, Any] = dict(
    color="tab:green",
    linestyle="-.",
    linewidth=1.0,
    zorder=9
)


def init_plot(
    figsize: Tuple[float, float] = (6, 6),
    show_axes: bool = False,
    show_grid: bool = False,
    grid_kwargs: Optional[Dict[str, Any]] = None
) -> Tuple[Figure, Axes]:
    """
    Create and return a Matplotlib Figure/Axes for section plotting.

    Args:
        figsize: Figure size in inches (width, height).
        show_axes: Show axes labels and spines.
        show_grid: Show grid lines.
        grid_kwargs: Extra kwargs passed to ax.grid.

    Returns:
        (fig, ax) tuple.
    """
    fig, ax = plt.subplots(figsize=figsize)
    ax.set_aspect('equal', adjustable='box')

    if show_axes:
        ax.axis("on")
        ax.set_xlabel("X (in)")
        ax.set_ylabel("Y (in)")
    else:
        ax.axis("off")

    if show_grid:
        default_grid_style: Dict[str, Any] = dict(
            linestyle=":", linewidth=0.6, color="gray", alpha=0.7
        )
        final_grid_kwargs: Dict[str, Any] = default_grid_style.copy()
        if grid_kwargs is not None:
            final_grid_kwargs.update(grid_kwargs)
        ax.grid(True, **final_grid_kwargs)

    return fig, ax


def plot_section(
    section: CrossSection,
    ax: Optional[Axes] = None,
    *,
    face: str = "lightblue",
    edge: str = "k",
    linewidth: float = 1.0
) -> Axes:
    """
    Draw the outer boundary filled and the holes in white.

    Args:
        section:   CrossSection to plot
        ax:        Matplotlib axes (created if None)
        face:      Fill color
        edge:      Edge color
        linewidth: Edge line width

    Returns:
        Matplotlib axes object
    """
    if ax is None:
        _, ax = plt.subplots()

    geom = section_to_shapely(section)
    if geom.is_empty:
        logger.warning("plot_section called with empty section")
        return ax

    ax.fill(*geom.exterior.xy, color=face, edgecolor=edge, linewidth=linewidth)
    for ring in geom.interiors:
        ax.fill(*ring.xy, color="white", edgecolor=edge, linewidth=linewidth)

    ax.set_aspect('equal')
    return ax


def plot_section_with_style(
    section: CrossSection,
    *,
    face: Optional[str] = None,
    edge: Optional[str] = None,
    show_axes: bool = False,
    show_grid: bool = False,
    figsize: Tuple[float, float] = (6, 6),
    padding: float = 0.1
) -> Tuple[Figure, Axes]:
    """
    Create a figure, draw the section, and set view limits.

    Args:
        section: CrossSection to plot.
        face: Fill color.
        edge: Edge color.
        show_axes: Show axes.
        show_grid: Show grid.
        figsize: Figure size in inches.
        padding: Relative padding for axis limits.

    Returns:
        (fig, ax) tuple.
    """
    fig, ax = init_plot(figsize=figsize, show_axes=show_axes, show_grid=show_grid)

    face_color = face if face is not None else "lightblue"
    edge_color = edge if edge is not None else "k"
    plot_section(section, ax=ax, face=face_color, edge=edge_color)

    geom = section_to_shapely(section)
    if not geom.is_empty:
        minx, miny, maxx, maxy = geom.bounds
        width = maxx - minx
        height = maxy - miny

        pad_x = width * padding
        pad_y = height * padding
        if width <= 1e-9:
            pad_x = 1.0 * padding if padding > 0 else 1.0
        if height <= 1e-9:
            pad_y = 1.0 * padding if padding > 0 else 1.0

        ax.set_xlim(minx - pad_x, maxx + pad_x)
        ax.set_ylim(miny - pad_y, maxy + pad_y)

    return fig, ax


def annotate_title(
    ax: Axes,
    template: str,
    params: Optional[Mapping[str, Any]] = None,
    **text_kwargs
):
    """
    Add a formatted title to the axes.

    Args:
        ax: Matplotlib axes.
        template: Format string for the title.
        params: Values used to format the template.
        **text_kwargs: Passed to ax.set_title().
    """
    params = params or {}
    try:
        title = template.format(**params)
    except KeyError as e:
        logger.warning("Key not found for title template: %s", e)
        title = template
    ax.set_title(title, **text_kwargs)


def annotate_centroid(
    ax: Axes,
    props: SectionProperties,
    *,
    show_text: bool = True,
    text_fmt: str = '({x:.3f}, {y:.3f})',
    marker_kwargs: Optional[Dict[str, Any]] = None,
    text_kwargs: Optional[Dict[str, Any]] = None,
    text_offset: Tuple[float, float] = (5, 5)
):
    """
    Mark the elastic centroid with a marker and optional coordinate label.

    Args:
        ax: Matplotlib axes.
        props: Result of compute_section_properties().
        show_text: Draw centroid label.
        text_fmt: Format string with fields x and y.
        marker_kwargs: Extra kwargs for the marker.
        text_kwargs: Extra kwargs for the label text.
        text_offset: Offset for the label in points.
    """
    cx, cy = props.elastic.centroidX, props.elastic.centroidY

    kw = DEFAULT_CENTROID_MARKER_KWARGS.copy()
    kw.update(marker_kwargs or {})
    ax.scatter([cx], [cy], **kw)

    if show_text:
        merged_text_kwargs: Dict[str, Any] = DEFAULT_TEXT_KWARGS.copy()
        merged_text_kwargs.update({'ha': 'left', 'va': 'bottom', 'bbox': None})
        if text_kwargs:
            merged_text_kwargs.update(text_kwargs)

        ax.annotate(
            text_fmt.format(x=cx, y=cy),
            xy=(cx, cy),
            xytext=text_offset,
            textcoords='offset points',
            **merged_text_kwargs
        )


def annotate_pna(
    ax: Axes,
    section: CrossSection,
    props: SectionProperties,
    *,
    show_labels: bool = True,
    line_kwargs: Optional[Dict[str, Any]] = None
):
    """
    Draw the plastic neutral axes across the section's extent.

    PNA-X is the horizontal line y = pnaX; PNA-Y the vertical line x = pnaY.
    """
    geom = section_to_shapely(section)
    if geom.is_empty:
        logger.warning("annotate_pna called with empty section")
        return

    minx, miny, maxx, maxy = geom.bounds
    kw = DEFAULT_PNA_LINE_KWARGS.copy()
    kw.update(line_kwargs or {})

    pna_x, pna_y = props.plastic.pnaX, props.plastic.pnaY
    ax.plot([minx, maxx], [pna_x, pna_x], **kw)
    ax.plot([pna_y, pna_y], [miny, maxy], **kw)

    if show_labels:
        label_kwargs: Dict[str, Any] = DEFAULT_TEXT_KWARGS.copy()
        label_kwargs.update({'color': kw.get('color', 'black'), 'fontsize': 8})
        ax.text(maxx, pna_x, " PNA-X", **dict(label_kwargs, ha='left'))
        ax.text(pna_y, maxy, "PNA-Y", **dict(label_kwargs, va='bottom'))


def annotate_principal_axes(
    ax: Axes,
    section: CrossSection,
    props: SectionProperties,
    *,
    line_kwargs: Optional[Dict[str, Any]] = None
):
    """
    Draw the major and minor principal axes through the centroid.

    Axis lines span half the larger bounding-box dimension either side of
    the centroid.
    """
    geom = section_to_shapely(section)
    if geom.is_empty:
        logger.warning("annotate_principal_axes called with empty section")
        return

    minx, miny, maxx, maxy = geom.bounds
    half = max(maxx - minx, maxy - miny) / 2.0
    cx, cy = props.elastic.centroidX, props.elastic.centroidY
    theta = props.elastic.theta_principal

    kw = DEFAULT_PRINCIPAL_LINE_KWARGS.copy()
    kw.update(line_kwargs or {})

    for angle in (theta, theta + math.pi / 2):
        dx = half * math.cos(angle)
        dy = half * math.sin(angle)
        ax.plot([cx - dx, cx + dx], [cy - dy, cy + dy], **kw)


def annotate_bbox(
    ax: Axes,
    section: CrossSection,
    *,
    pad: float = 0.5,
    text_pad: float = 0.2,
    arrow_kwargs: Optional[Dict[str, Any]] = None,
    text_kwargs: Optional[Dict[str, Any]] = None,
    fmt: str = "{:.3f}"
):
    """
    Annotate overall width and height of a section.

    Args:
        ax: Matplotlib axes.
        section: CrossSection.
        pad: Offset of dimension lines from the geometry.
        text_pad: Offset of text from dimension lines.
        arrow_kwargs: Arrow style overrides.
        text_kwargs: Text style overrides.
        fmt: Number format for dimensions.
    """
    geom = section_to_shapely(section)
    if geom.is_empty:
        logger.warning("annotate_bbox called with empty section")
        return

    minx, miny, maxx, maxy = geom.bounds
    width = maxx - minx
    height = maxy - miny

    merged_arrow_kwargs: Dict[str, Any] = DEFAULT_ARROW_KWARGS.copy()
    if arrow_kwargs:
        merged_arrow_kwargs.update(arrow_kwargs)
    merged_text_kwargs: Dict[str, Any] = DEFAULT_TEXT_KWARGS.copy()
    if text_kwargs:
        merged_text_kwargs.update(text_kwargs)

    arrow_y_h = miny - pad
    text_x_h = (minx + maxx) / 2
    text_y_h = arrow_y_h - text_pad
    arrow_x_v = maxx + pad
    text_x_v = arrow_x_v + text_pad
    text_y_v = (miny + maxy) / 2

    ax.annotate("", xy=(minx, arrow_y_h), xytext=(maxx, arrow_y_h), arrowprops=merged_arrow_kwargs)
    h_text_kwargs = merged_text_kwargs.copy()
    h_text_kwargs.update({'va': 'top'})
    ax.text(text_x_h, text_y_h, fmt.format(width), **h_text_kwargs)

    ax.annotate("", xy=(arrow_x_v, miny), xytext=(arrow_x_v, maxy), arrowprops=merged_arrow_kwargs)
    v_text_kwargs = merged_text_kwargs.copy()
    v_text_kwargs.update({'ha': 'left', 'rotation': 90})
    ax.text(text_x_v, text_y_v, fmt.format(height), **v_text_kwargs)

    current_xlim = ax.get_xlim()
    current_ylim = ax.get_ylim()
    ax.set_xlim(min(current_xlim[0], minx - pad), max(current_xlim[1], text_x_v + text_pad * 2))
    ax.set_ylim(min(current_ylim[0], text_y_h - text_pad * 2), max(current_ylim[1], maxy + pad))


def plot_section_with_props(
    section: CrossSection,
    props: Optional[SectionProperties] = None,
    *,
    title: Optional[str] = None,
    show_centroid: bool = True,
    show_pna: bool = True,
    show_principal: bool = False,
    show_bbox: bool = True,
    show_props_text: bool = True,
    figsize: Tuple[float, float] = (8, 8),
    face: str = "lightblue",
    edge: str = "k"
) -> Tuple[Figure, Axes]:
    """
    Plot section with properties annotation.

    Convenience function combining plot + annotations.

    Args:
        section: CrossSection
        props: Result of compute_section_properties(), computed if None
        title: Plot title
        show_centroid: Mark centroid with + marker
        show_pna: Draw plastic neutral axes
        show_principal: Draw principal axes
        show_bbox: Show bounding box dimensions
        show_props_text: Show properties text box
        figsize: Figure size
        face, edge: Colors

    Returns:
        (Figure, Axes) tuple
    """
    if props is None:
        props = compute_section_properties(section)

    fig, ax = plot_section_with_style(
        section,
        face=face,
        edge=edge,
        figsize=figsize,
        show_axes=False
    )

    if title:
        ax.set_title(title, fontsize=12, weight="bold")

    if show_centroid:
        annotate_centroid(ax, props)

    if show_pna:
        annotate_pna(ax, section, props)

    if show_principal:
        annotate_principal_axes(ax, section, props)

    if show_bbox:
        annotate_bbox(ax, section)

    if show_props_text:
        e, p = props.elastic, props.plastic
        props_text = (
            f"A  = {e.area:,.3f} in^2\n"
            f"Ix = {e.Ix:,.3f} in^4\n"
            f"Iy = {e.Iy:,.3f} in^4\n"
            f"Sx = {min(e.Sx_top, e.Sx_bot):,.3f} in^3\n"
            f"Sy = {min(e.Sy_left, e.Sy_right):,.3f} in^3\n"
            f"Zx = {p.Zx:,.3f} in^3\n"
            f"Zy = {p.Zy:,.3f} in^3\n"
            f"rx = {e.rx:.3f} in\n"
            f"ry = {e.ry:.3f} in"
        )

        ax.text(
            0.02,
            0.98,
            props_text,
            transform=ax.transAxes,
            fontsize=9,
            verticalalignment="top",
            fontfamily="monospace",
            bbox=dict(boxstyle="round", facecolor="wheat", alpha=0.8)
        )

    return fig, ax


def save_plot(fig: Figure, filename: str, dpi: int = 150) -> None:
    """Save figure to file with sensible defaults."""
    fig.savefig(filename, dpi=dpi, bbox_inches="tight")
