"""GeoJSON geometry to SVG path data."""

import logging
import re

import numpy as np

from ..models import Geometry
from .models import GeometryPaths, Projection
from .projection import format_coordinate, to_svg_points

logger = logging.getLogger(__name__)

LINE_TYPES = frozenset({"LineString", "MultiLineString"})
AREA_TYPES = frozenset({"Polygon", "MultiPolygon"})

_WHITESPACE = re.compile(r"\s+")


def dedupe_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space and trim the ends."""
    return _WHITESPACE.sub(" ", text).strip()


def is_line_geometry(geometry: Geometry | None) -> bool:
    return geometry is not None and geometry.type in LINE_TYPES


def is_area_geometry(geometry: Geometry | None) -> bool:
    return geometry is not None and geometry.type in AREA_TYPES


def _as_positions(coords) -> np.ndarray | None:
    """Read a GeoJSON position list as an (n, 2) float array.

    Returns None for anything that is not a list of finite numeric positions.
    Altitude ordinates are dropped.
    """
    try:
        arr = np.asarray(coords, dtype=float)
    except (TypeError, ValueError):
        return None
    if arr.ndim != 2 or arr.shape[1] < 2:
        return None
    arr = arr[:, :2]
    if not np.isfinite(arr).all():
        return None
    return arr


def line_to_path(coords, projection: Projection) -> str:
    """Move to the first position, then line to each following one."""
    if not coords:
        return ""
    positions = _as_positions(coords)
    if positions is None:
        logger.debug("Skipping malformed line coordinates")
        return ""

    pixels = to_svg_points(positions, projection)
    if not np.isfinite(pixels).all():
        logger.debug("Skipping line with positions outside the projectable range")
        return ""
    segments = []
    for i, (x, y) in enumerate(pixels):
        command = "M" if i == 0 else "L"
        segments.append(f"{command}{format_coordinate(x)} {format_coordinate(y)}")
    return " ".join(segments)


def polygon_to_path(rings, projection: Projection) -> str:
    """Close every ring, outer boundary and holes alike."""
    if not isinstance(rings, list):
        logger.debug("Skipping malformed polygon coordinates")
        return ""
    closed = []
    for ring in rings:
        path = line_to_path(ring, projection)
        if path:
            closed.append(f"{path} Z")
    return " ".join(closed)


def _circle(position, projection: Projection, radius: float) -> str:
    positions = _as_positions([position])
    if positions is None:
        logger.debug("Skipping malformed point coordinates")
        return ""
    cx, cy = to_svg_points(positions, projection)[0]
    if not (np.isfinite(cx) and np.isfinite(cy)):
        logger.debug("Skipping point outside the projectable range")
        return ""
    return (
        f'<circle cx="{format_coordinate(cx)}" cy="{format_coordinate(cy)}" '
        f'r="{format_coordinate(radius)}" />'
    )


def _components(coords) -> list:
    return coords if isinstance(coords, list) else []


def geometry_to_paths(
    geometry: Geometry | None,
    projection: Projection,
    point_radius: float = 3.0,
) -> GeometryPaths:
    """Render one geometry into line, polygon and point markup.

    Unsupported or absent geometries produce an empty result.
    """
    if geometry is None:
        return GeometryPaths()

    gtype = geometry.type
    coords = geometry.coordinates

    if gtype == "LineString":
        return GeometryPaths(lines=line_to_path(coords, projection))
    elif gtype == "MultiLineString":
        parts = [line_to_path(c, projection) for c in _components(coords)]
        return GeometryPaths(lines=" ".join(p for p in parts if p))
    elif gtype == "Polygon":
        return GeometryPaths(polygons=polygon_to_path(coords, projection))
    elif gtype == "MultiPolygon":
        shapes = [polygon_to_path(c, projection) for c in _components(coords)]
        return GeometryPaths(polygons=" ".join(s for s in shapes if s))
    elif gtype == "Point":
        return GeometryPaths(points=_circle(coords, projection, point_radius))
    elif gtype == "MultiPoint":
        circles = [_circle(c, projection, point_radius) for c in _components(coords)]
        return GeometryPaths(points="".join(circles))

    logger.debug("Skipping unsupported geometry type %r", gtype)
    return GeometryPaths()
