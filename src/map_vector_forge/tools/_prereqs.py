"""Prerequisite checking helpers for MCP tools."""

from pathlib import Path

from ..core.area import MAX_EXPORT_AREA_DEGREES, exceeds_export_limit, format_area_degrees
from ..options import Bounds


def require_export_area(bounds: Bounds) -> None:
    """Raise ValueError if the window is too large to export.

    Usage in a tool:
        try:
            require_export_area(bounds)
        except ValueError as e:
            return f"Error: {e}"
    """
    if exceeds_export_limit(bounds):
        raise ValueError(
            f"Area {format_area_degrees(bounds.area)} exceeds the "
            f"{MAX_EXPORT_AREA_DEGREES}°² export limit. "
            "Zoom in further to avoid slow Overpass responses and enormous SVG files."
        )


def validate_output_path(output_path: str) -> None:
    """Raise ValueError if output_path resolves outside the user's home directory."""
    resolved = Path(output_path).resolve()
    home = Path.home().resolve()
    try:
        resolved.relative_to(home)
    except ValueError:
        raise ValueError(
            f"Output path {output_path!r} is outside the home directory. "
            "Use a path within your home directory."
        )
