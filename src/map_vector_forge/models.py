"""Pydantic models for the GeoJSON input handed over by the OSM converter."""

import logging
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class Geometry(BaseModel):
    """A GeoJSON geometry.

    Kept deliberately loose: unknown geometry types and odd coordinate
    payloads must reach the renderer, which skips them instead of failing.
    """
    model_config = ConfigDict(extra="allow")

    type: str
    coordinates: Any = None


class Feature(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["Feature"] = "Feature"
    id: Any = None
    geometry: Optional[Geometry] = None
    properties: Optional[dict[str, Any]] = None

    @field_validator("geometry", mode="before")
    @classmethod
    def drop_unreadable_geometry(cls, v):
        # A geometry without a string type cannot be dispatched; the feature
        # is kept (so its siblings still validate) and renders as nothing.
        if v is None or isinstance(v, Geometry):
            return v
        if not isinstance(v, dict) or not isinstance(v.get("type"), str):
            logger.debug("Dropping unreadable geometry %r", v)
            return None
        return v

    @field_validator("properties", mode="before")
    @classmethod
    def drop_non_mapping_properties(cls, v):
        return v if v is None or isinstance(v, dict) else None

    @property
    def tags(self) -> dict[str, str]:
        """OSM tags nested under ``properties.tags``, string values only."""
        if not self.properties:
            return {}
        raw = self.properties.get("tags")
        if not isinstance(raw, dict):
            return {}
        return {k: v for k, v in raw.items() if isinstance(k, str) and isinstance(v, str)}


class FeatureCollection(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[Feature] = Field(default_factory=list)
