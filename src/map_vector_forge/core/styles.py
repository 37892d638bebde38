"""Zoom- and user-scaled stroke widths plus the fixed layer paint."""

import numpy as np

from ..options import StrokeScale
from .models import StrokeWidths

# Empirical visual tuning constants.
BASE_ZOOM = 13
MIN_ZOOM = 1
ZOOM_EXPONENT = 1.4

# (base, min, max) stroke width per layer
ROAD_WIDTH = (1.6, 0.002, 3.0)
OUTLINE_WIDTH = (0.8, 0.0015, 1.4)
WATER_WIDTH = (0.9, 0.01, 2.1)
BUILDING_OUTLINE_FACTOR = 0.4

WIDTH_SIGNIFICANT_DIGITS = 6

LAYER_CLASSES = {
    "water": "layer-water",
    "buildings": "layer-buildings",
    "roads": "layer-roads",
    "outlines": "layer-outlines",
}

LAYER_PAINT = {
    "water": {"fill": "#A5C8E6", "stroke": "#4682B4"},
    "buildings": {"fill": "#E8D5B7", "stroke": "#8C7B6B"},
    "roads": {"fill": "none", "stroke": "#555555"},
    "outlines": {"fill": "none", "stroke": "#2B59C3"},
}


def zoom_ratio(zoom: float) -> float:
    return max(zoom, MIN_ZOOM) / BASE_ZOOM


def scale_width(
    base: float, min_width: float, max_width: float, multiplier: float, zoom: float = BASE_ZOOM
) -> float:
    """Grow ``base`` super-linearly with zoom, apply the multiplier, clamp."""
    width = base * zoom_ratio(zoom) ** ZOOM_EXPONENT * multiplier
    return min(max(width, min_width), max_width)


def compute_stroke_widths(zoom: float, stroke_scale: StrokeScale | None = None) -> StrokeWidths:
    """Per-layer stroke widths for one conversion.

    The building stroke is derived from the outline width and is not
    clamped on its own.
    """
    scale = stroke_scale or StrokeScale()
    outlines = scale_width(*OUTLINE_WIDTH, scale.outlines, zoom)
    return StrokeWidths(
        roads=scale_width(*ROAD_WIDTH, scale.roads, zoom),
        outlines=outlines,
        water=scale_width(*WATER_WIDTH, scale.water, zoom),
        buildings=outlines * BUILDING_OUTLINE_FACTOR * scale.buildings,
    )


def format_width(value: float) -> str:
    """Positional text with up to six significant digits, never rounded to zero."""
    return np.format_float_positional(
        value, precision=WIDTH_SIGNIFICANT_DIGITS, unique=True, fractional=False, trim="-"
    )


def render_style_block(widths: StrokeWidths) -> str:
    """Inline ``<style>`` with one rule per layer group."""
    rules = []
    for layer, css_class in LAYER_CLASSES.items():
        paint = LAYER_PAINT[layer]
        width = format_width(getattr(widths, layer))
        rule = f".{css_class}{{fill:{paint['fill']};stroke:{paint['stroke']};stroke-width:{width};"
        if paint["fill"] == "none":
            rule += "stroke-linecap:round;"
        rule += "stroke-linejoin:round;}"
        rules.append(rule)
    return "<style>" + "".join(rules) + "</style>"
