"""Caller-supplied conversion parameters: bounds, stroke scale, options."""

from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict


class Bounds(BaseModel):
    """Geographic window in WGS84 degrees.

    Only non-finite values are rejected. Ordering, extent and pole checks
    belong to the caller (see ExportBounds); the renderer degrades a
    degenerate window to a trivial drawing instead of failing. Latitudes
    must stay away from the poles for the drawing to be meaningful.
    """
    model_config = ConfigDict(validate_assignment=True, allow_inf_nan=False)

    north: float
    south: float
    east: float
    west: float

    @property
    def lat_range(self) -> float:
        return self.north - self.south

    @property
    def lon_range(self) -> float:
        return self.east - self.west

    @property
    def center_lat(self) -> float:
        return (self.north + self.south) / 2

    @property
    def center_lon(self) -> float:
        return (self.east + self.west) / 2

    @property
    def area(self) -> float:
        """Window area in square degrees."""
        return abs(self.lat_range * self.lon_range)


class ExportBounds(Bounds):
    """Bounds as accepted from a tool request.

    Latitudes strictly inside (-90, 90) and a non-empty north-south extent.
    """

    north: float = Field(gt=-90, lt=90)
    south: float = Field(gt=-90, lt=90)
    east: float = Field(ge=-180, le=180)
    west: float = Field(ge=-180, le=180)

    @model_validator(mode="after")
    def check_north_gt_south(self) -> "ExportBounds":
        if self.north <= self.south:
            raise ValueError(f"north ({self.north}) must be greater than south ({self.south})")
        return self


class StrokeScale(BaseModel):
    model_config = ConfigDict(validate_assignment=True, allow_inf_nan=False)

    roads: float = Field(default=1.0, gt=0)
    outlines: float = Field(default=1.0, gt=0)
    water: float = Field(default=1.0, gt=0)
    buildings: float = Field(default=1.0, gt=0)

    @field_validator("roads", "outlines", "water", "buildings", mode="before")
    @classmethod
    def default_when_missing(cls, v):
        # Callers forward optional slider values; None means "untouched".
        return 1.0 if v is None else v

    def as_dict(self) -> dict[str, float]:
        return {
            "roads": self.roads,
            "outlines": self.outlines,
            "water": self.water,
            "buildings": self.buildings,
        }


class ConversionOptions(BaseModel):
    model_config = ConfigDict(validate_assignment=True, allow_inf_nan=False)

    width: float = Field(default=1024.0, gt=0)
    zoom: float = 13.0
    point_radius: float = Field(default=3.0, gt=0)
    stroke_scale: StrokeScale = Field(default_factory=StrokeScale)
