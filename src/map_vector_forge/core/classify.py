"""Feature classification into the four map layers."""

from enum import Enum
from typing import Mapping

from ..models import Feature


class Layer(str, Enum):
    ROAD = "road"
    WATER = "water"
    BUILDING = "building"
    OUTLINE = "outline"


def _has_value(tags: Mapping[str, str], key: str) -> bool:
    value = tags.get(key)
    return isinstance(value, str) and value != ""


def classify_tags(tags: Mapping[str, str]) -> Layer:
    """Pick a layer by fixed priority: highway, building, water, fallback."""
    if _has_value(tags, "highway"):
        return Layer.ROAD
    if _has_value(tags, "building"):
        return Layer.BUILDING
    if _has_value(tags, "waterway") or tags.get("natural") == "water":
        return Layer.WATER
    return Layer.OUTLINE


def classify_feature(feature: Feature) -> Layer:
    return classify_tags(feature.tags)


def layer_for_area(layer: Layer) -> Layer:
    """Bucket for an area geometry. Roads are linear only, so area roads outline."""
    if layer in (Layer.WATER, Layer.BUILDING):
        return layer
    return Layer.OUTLINE


def layer_for_line(layer: Layer) -> Layer:
    """Bucket for a linear geometry."""
    if layer in (Layer.ROAD, Layer.WATER):
        return layer
    return Layer.OUTLINE
