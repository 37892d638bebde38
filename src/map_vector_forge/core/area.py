"""Export-area checks and zoom suggestions for a bounding box."""

import math

from ..options import Bounds

# Larger windows make Overpass slow and the SVG enormous.
MAX_EXPORT_AREA_DEGREES = 0.5

MIN_SUGGESTED_ZOOM = 5
MAX_SUGGESTED_ZOOM = 19


def suggest_zoom(bounds: Bounds) -> int:
    """Map zoom that roughly frames ``bounds``, clamped to [5, 19]."""
    span = max(abs(bounds.lat_range), abs(bounds.lon_range))
    zoom = math.floor(12 - math.log(span + 1e-6) * 1.4)
    return max(MIN_SUGGESTED_ZOOM, min(MAX_SUGGESTED_ZOOM, zoom))


def exceeds_export_limit(bounds: Bounds) -> bool:
    return bounds.area > MAX_EXPORT_AREA_DEGREES


def format_bounds(bounds: Bounds) -> str:
    return (
        f"N:{bounds.north:.5f}  S:{bounds.south:.5f}  "
        f"E:{bounds.east:.5f}  W:{bounds.west:.5f}"
    )


def format_area_degrees(area: float) -> str:
    if area < 0.0001:
        return "<0.0001°²"
    return f"{area:.4f}°²"
