"""Web-Mercator projection from geographic degrees to SVG pixel space.

Pixel coordinate system:
- X: east-west, 0 at the western edge
- Y: north-south, 0 at the northern edge (SVG origin is top-left)

Latitudes should stay strictly inside (-90, 90), for the window and for
every feature. The projection is not clamped: at or past a pole it yields
infinite or NaN values instead of raising, and callers skip those.
"""

import math
import sys

import numpy as np

from ..options import Bounds
from .models import Projection

EPSILON = sys.float_info.epsilon
COORDINATE_DECIMALS = 2


def project_lng_lat(lng: float, lat: float) -> tuple[float, float]:
    """Forward Mercator projection of one position, in radians-based units."""
    x, y = project_lng_lat_array(np.float64(lng), np.float64(lat))
    return float(x), float(y)


def project_lng_lat_array(
    lngs: np.ndarray, lats: np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    """Vectorised form of project_lng_lat."""
    lam = np.radians(lngs)
    phi = np.radians(lats)
    with np.errstate(divide="ignore", invalid="ignore"):
        y = np.log(np.tan(np.pi / 4 + phi / 2))
    return lam, y


def _floor(value: float) -> float:
    return value if math.isfinite(value) and value > EPSILON else EPSILON


def prepare_projection(bounds: Bounds, target_width: float) -> Projection:
    """Fit the projected bounding box to ``target_width`` pixels.

    Height follows from the projected aspect ratio. Both the projected
    width and the resulting height are floored at machine epsilon (as are
    non-finite extents from polar latitudes) so a degenerate window still
    yields a valid, if trivial, transform.
    """
    min_x, min_y = project_lng_lat(bounds.west, bounds.south)
    max_x, max_y = project_lng_lat(bounds.east, bounds.north)

    projected_width = _floor(max_x - min_x)
    scale = target_width / projected_width
    height = _floor((max_y - min_y) * scale)

    return Projection(
        width=target_width,
        height=height,
        scale=scale,
        translate_x=-min_x,
        translate_y=-min_y,
    )


def to_svg_point(lng: float, lat: float, projection: Projection) -> tuple[float, float]:
    """Project one position to rounded SVG pixel coordinates."""
    x, y = project_lng_lat(lng, lat)
    px = (x + projection.translate_x) * projection.scale
    py = projection.height - (y + projection.translate_y) * projection.scale
    return round(px, COORDINATE_DECIMALS), round(py, COORDINATE_DECIMALS)


def to_svg_points(positions: np.ndarray, projection: Projection) -> np.ndarray:
    """Project an (n, 2) array of [lng, lat] rows to rounded SVG pixels."""
    x, y = project_lng_lat_array(positions[:, 0], positions[:, 1])
    with np.errstate(invalid="ignore"):
        px = (x + projection.translate_x) * projection.scale
        py = projection.height - (y + projection.translate_y) * projection.scale
    return np.round(np.column_stack((px, py)), COORDINATE_DECIMALS)


def format_coordinate(value: float) -> str:
    """Shortest decimal text for an already-rounded coordinate."""
    text = f"{value:.{COORDINATE_DECIMALS}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text
