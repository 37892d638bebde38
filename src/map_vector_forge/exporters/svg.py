"""SVG map export for design tools."""

import logging

from ..core.svg import geojson_to_svg
from ..options import Bounds, ConversionOptions

logger = logging.getLogger(__name__)


def export_svg(
    feature_collection,
    bounds: Bounds,
    output_path: str,
    options: ConversionOptions | None = None,
) -> dict:
    """Render the layered SVG and write it to ``output_path`` as UTF-8."""
    svg_content = geojson_to_svg(feature_collection, bounds, options)
    data = svg_content.encode("utf-8")
    with open(output_path, "wb") as f:
        f.write(data)

    logger.info("Wrote %d bytes of SVG to %s", len(data), output_path)
    return {"filepath": output_path, "size_bytes": len(data)}
