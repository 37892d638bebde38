"""Render bounded OpenStreetMap GeoJSON into flat, layered SVG."""

from .core.svg import geojson_to_svg, geojson_to_preview_svg
from .models import Feature, FeatureCollection, Geometry
from .options import Bounds, ConversionOptions, ExportBounds, StrokeScale

__all__ = [
    "geojson_to_svg",
    "geojson_to_preview_svg",
    "Feature",
    "FeatureCollection",
    "Geometry",
    "Bounds",
    "ConversionOptions",
    "ExportBounds",
    "StrokeScale",
]
