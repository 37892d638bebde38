"""GeoJSON file loading."""

import json
import logging

from ..models import FeatureCollection

logger = logging.getLogger(__name__)


def load_feature_collection(filepath: str) -> FeatureCollection:
    """Read a GeoJSON FeatureCollection from disk.

    Raises:
        ValueError: if the file is not JSON or not a FeatureCollection.
    """
    with open(filepath, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{filepath} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise ValueError(f"{filepath} does not contain a GeoJSON FeatureCollection")

    collection = FeatureCollection.model_validate(data)
    logger.debug("Loaded %d features from %s", len(collection.features), filepath)
    return collection
