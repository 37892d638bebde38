"""GeoJSON FeatureCollection to a flat, layered SVG document."""

import logging

from ..models import FeatureCollection
from ..options import Bounds, ConversionOptions
from .classify import Layer, classify_feature, layer_for_area, layer_for_line
from .models import Projection
from .paths import dedupe_whitespace, geometry_to_paths
from .projection import prepare_projection
from .styles import LAYER_CLASSES, compute_stroke_widths, render_style_block

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Polygons first so lines draw on top.
GROUP_ORDER = (
    (Layer.WATER, "water"),
    (Layer.BUILDING, "buildings"),
    (Layer.ROAD, "roads"),
    (Layer.OUTLINE, "outlines"),
)

PREVIEW_STYLE = (
    "<style>"
    ".geom-lines{fill:none;stroke:#555;stroke-width:1;stroke-linecap:round;stroke-linejoin:round;}"
    ".geom-polygons{fill:#9ec5fe33;stroke:#2b59c3;stroke-width:0.6;stroke-linejoin:round;}"
    ".geom-points{fill:#d9534f;stroke:#ffffff;stroke-width:0.6;}"
    "</style>"
)


def path_element(d: str) -> str:
    return f'<path d="{dedupe_whitespace(d)}" />'


class LayerBuckets:
    """Ordered path accumulator, one list of path elements per layer."""

    def __init__(self):
        self._paths: dict[Layer, list[str]] = {layer: [] for layer in Layer}

    def add(self, layer: Layer, d: str) -> None:
        if d:
            self._paths[layer].append(path_element(d))

    def paths(self, layer: Layer) -> list[str]:
        return list(self._paths[layer])

    def counts(self) -> dict[str, int]:
        return {layer.value: len(paths) for layer, paths in self._paths.items()}

    def render(self, layer: Layer) -> str:
        return "".join(self._paths[layer])


def _coerce_inputs(feature_collection, bounds, options) -> tuple[FeatureCollection, Bounds, ConversionOptions]:
    """Accept validated models or plain dicts."""
    if not isinstance(feature_collection, FeatureCollection):
        feature_collection = FeatureCollection.model_validate(feature_collection)
    if not isinstance(bounds, Bounds):
        bounds = Bounds.model_validate(bounds)
    if options is None:
        options = ConversionOptions()
    elif not isinstance(options, ConversionOptions):
        options = ConversionOptions.model_validate(options)
    return feature_collection, bounds, options


def _svg_open(projection: Projection) -> str:
    return (
        f'<svg xmlns="{SVG_NAMESPACE}" '
        f'width="{projection.width:.0f}" height="{projection.height:.0f}" '
        f'viewBox="0 0 {projection.width:.2f} {projection.height:.2f}">'
    )


def classify_into_buckets(
    feature_collection: FeatureCollection, projection: Projection
) -> LayerBuckets:
    """Project, render and bucket every feature. Points are not layered."""
    buckets = LayerBuckets()
    for feature in feature_collection.features:
        if feature.geometry is None:
            continue
        rendered = geometry_to_paths(feature.geometry, projection)
        if not (rendered.lines or rendered.polygons):
            continue
        layer = classify_feature(feature)
        buckets.add(layer_for_area(layer), rendered.polygons)
        buckets.add(layer_for_line(layer), rendered.lines)
    return buckets


def geojson_to_svg(feature_collection, bounds, options=None) -> str:
    """Render features into four styled layer groups.

    Group order is water, buildings, roads, outlines. Malformed or
    unsupported geometries are left out rather than raising.

    Args:
        feature_collection: FeatureCollection model or GeoJSON dict.
        bounds: Bounds model or dict with north/south/east/west.
        options: ConversionOptions model, dict, or None for defaults.

    Returns:
        Complete SVG document as a string.
    """
    feature_collection, bounds, options = _coerce_inputs(feature_collection, bounds, options)

    projection = prepare_projection(bounds, options.width)
    buckets = classify_into_buckets(feature_collection, projection)
    widths = compute_stroke_widths(options.zoom, options.stroke_scale)

    logger.debug(
        "Rendered %d features into %.0fx%.0f SVG: %s",
        len(feature_collection.features), projection.width, projection.height, buckets.counts(),
    )

    parts = [
        _svg_open(projection),
        "<defs>",
        render_style_block(widths),
        "</defs>",
    ]
    for layer, name in GROUP_ORDER:
        parts.append(f'<g class="{LAYER_CLASSES[name]}">')
        parts.append(buckets.render(layer))
        parts.append("</g>")
    parts.append("</svg>")
    return "".join(parts)


def geojson_to_preview_svg(feature_collection, bounds, options=None) -> str:
    """Render an unclassified preview: polygons, lines, then point markers."""
    feature_collection, bounds, options = _coerce_inputs(feature_collection, bounds, options)

    projection = prepare_projection(bounds, options.width)
    lines: list[str] = []
    polygons: list[str] = []
    points: list[str] = []

    for feature in feature_collection.features:
        rendered = geometry_to_paths(feature.geometry, projection, options.point_radius)
        if rendered.lines:
            lines.append(path_element(rendered.lines))
        if rendered.polygons:
            polygons.append(path_element(rendered.polygons))
        if rendered.points:
            points.append(rendered.points)

    return "".join([
        _svg_open(projection),
        "<defs>",
        PREVIEW_STYLE,
        "</defs>",
        '<g class="geom-polygons">',
        "".join(polygons),
        "</g>",
        '<g class="geom-lines">',
        "".join(lines),
        "</g>",
        '<g class="geom-points">',
        "".join(points),
        "</g>",
        "</svg>",
    ])
