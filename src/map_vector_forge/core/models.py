"""Pydantic return models for core computation functions."""

from pydantic import BaseModel, ConfigDict, Field


class Projection(BaseModel):
    """Linear transform from projected Mercator units to SVG pixels."""
    model_config = ConfigDict(frozen=True)

    width: float = Field(gt=0)
    height: float = Field(gt=0)
    scale: float = Field(gt=0)
    translate_x: float
    translate_y: float


class GeometryPaths(BaseModel):
    """Return type for geometry_to_paths.

    ``lines`` and ``polygons`` hold raw path data; ``points`` holds
    complete ``<circle>`` elements.
    """
    lines: str = ""
    polygons: str = ""
    points: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.lines or self.polygons or self.points)


class StrokeWidths(BaseModel):
    """Return type for compute_stroke_widths, in SVG user units."""
    roads: float = Field(gt=0)
    outlines: float = Field(gt=0)
    water: float = Field(gt=0)
    buildings: float = Field(gt=0)
