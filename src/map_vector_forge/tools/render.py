"""Render tools: describe_area, render_svg, preview_svg, export_svg."""

import json
import logging
import os

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import ValidationError

from ..core.area import exceeds_export_limit, format_area_degrees, format_bounds, suggest_zoom
from ..core.geojson import load_feature_collection
from ..core.svg import geojson_to_preview_svg, geojson_to_svg
from ..exporters.svg import export_svg as do_export_svg
from ..options import ConversionOptions, ExportBounds, StrokeScale
from ._prereqs import require_export_area, validate_output_path

logger = logging.getLogger(__name__)


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ())) or "input"
    return f"{loc}: {err['msg']}"


def _load_inputs(geojson_path: str, north: float, south: float, east: float, west: float):
    """Validate bounds and load the feature collection, raising ValueError."""
    try:
        bounds = ExportBounds(north=north, south=south, east=east, west=west)
    except ValidationError as e:
        raise ValueError(f"Invalid bounds: {_first_error(e)}") from e
    require_export_area(bounds)
    if not os.path.isfile(geojson_path):
        raise ValueError(f"GeoJSON file not found: {geojson_path}")
    return load_feature_collection(geojson_path), bounds


def _build_options(**kwargs) -> ConversionOptions:
    stroke = {k: kwargs.pop(k) for k in ("roads", "outlines", "water", "buildings") if k in kwargs}
    try:
        return ConversionOptions(stroke_scale=StrokeScale(**stroke), **kwargs)
    except ValidationError as e:
        raise ValueError(f"Invalid options: {_first_error(e)}") from e


def register_render_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def describe_area(north: float, south: float, east: float, west: float) -> str:
        """Summarise a bounding box before exporting it.

        Reports the area in square degrees, whether it exceeds the export
        limit, and a suggested map zoom for the window.

        Args:
            north/south/east/west: Bounding box (degrees).
        """
        try:
            bounds = ExportBounds(north=north, south=south, east=east, west=west)
        except ValidationError as e:
            return f"Error: Invalid bounds: {_first_error(e)}"

        return json.dumps({
            "bounds": format_bounds(bounds),
            "area": format_area_degrees(bounds.area),
            "exceeds_export_limit": exceeds_export_limit(bounds),
            "suggested_zoom": suggest_zoom(bounds),
        }, indent=2)

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def render_svg(
        geojson_path: str,
        north: float,
        south: float,
        east: float,
        west: float,
        width: float = 1024.0,
        zoom: float = 13.0,
        roads: float = 1.0,
        outlines: float = 1.0,
        water: float = 1.0,
        buildings: float = 1.0,
    ) -> str:
        """Convert a GeoJSON FeatureCollection into a layered SVG document.

        Features are classified into water, buildings, roads and outlines.
        Stroke widths grow with zoom and are scaled per layer.

        Args:
            geojson_path: Absolute path to a GeoJSON FeatureCollection
                (converted from an Overpass response).
            north/south/east/west: Bounding box (degrees) the features were fetched for.
            width: Output width in pixels (default 1024). Height follows the aspect ratio.
            zoom: Map zoom level driving stroke widths (default 13).
            roads/outlines/water/buildings: Per-layer stroke multipliers (default 1.0).
        """
        try:
            features, bounds = _load_inputs(geojson_path, north, south, east, west)
            options = _build_options(
                width=width, zoom=zoom,
                roads=roads, outlines=outlines, water=water, buildings=buildings,
            )
        except ValueError as e:
            logger.warning("render_svg refused: %s", e)
            return f"Error: {e}"

        return geojson_to_svg(features, bounds, options)

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def preview_svg(
        geojson_path: str,
        north: float,
        south: float,
        east: float,
        west: float,
        width: float = 1024.0,
        point_radius: float = 3.0,
    ) -> str:
        """Render an unclassified preview SVG, including point markers.

        Args:
            geojson_path: Absolute path to a GeoJSON FeatureCollection.
            north/south/east/west: Bounding box (degrees).
            width: Output width in pixels (default 1024).
            point_radius: Radius of Point/MultiPoint markers (default 3).
        """
        try:
            features, bounds = _load_inputs(geojson_path, north, south, east, west)
            options = _build_options(width=width, point_radius=point_radius)
        except ValueError as e:
            logger.warning("preview_svg refused: %s", e)
            return f"Error: {e}"

        return geojson_to_preview_svg(features, bounds, options)

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def export_svg(
        geojson_path: str,
        output_path: str,
        north: float,
        south: float,
        east: float,
        west: float,
        width: float = 1024.0,
        zoom: float = 13.0,
        roads: float = 1.0,
        outlines: float = 1.0,
        water: float = 1.0,
        buildings: float = 1.0,
    ) -> str:
        """Export the layered SVG to a file for design tools.

        Args:
            geojson_path: Absolute path to a GeoJSON FeatureCollection.
            output_path: Where to save the .svg file (absolute path)
            north/south/east/west: Bounding box (degrees).
            width: Output width in pixels (default 1024).
            zoom: Map zoom level driving stroke widths (default 13).
            roads/outlines/water/buildings: Per-layer stroke multipliers (default 1.0).
        """
        try:
            validate_output_path(output_path)
            features, bounds = _load_inputs(geojson_path, north, south, east, west)
            options = _build_options(
                width=width, zoom=zoom,
                roads=roads, outlines=outlines, water=water, buildings=buildings,
            )
        except ValueError as e:
            logger.warning("export_svg refused: %s", e)
            return f"Error: {e}"

        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        result = do_export_svg(features, bounds, output_path, options)
        return f"SVG map exported to {result['filepath']} ({result['size_bytes']} bytes)"
