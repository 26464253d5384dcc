"""
TrailMap - Pydantic Schemas
Route payloads and the map visualization derived from them
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# =============================================================================
# Enums
# =============================================================================

class TripType(str, Enum):
    CYCLING = "cycling"
    TREKKING = "trekking"


class MarkerType(str, Enum):
    START = "start"
    END = "end"
    WAYPOINT = "waypoint"
    DAY_START = "day_start"


class EventName(str, Enum):
    """Structured events reported by the visualization core"""
    MARKERS_GENERATED = "markers_generated"
    POLYLINES_GENERATED = "polylines_generated"
    DEGENERATE_RANGE_SKIPPED = "degenerate_range_skipped"
    WAYPOINT_DROPPED = "waypoint_dropped"
    EMPTY_ROUTE = "empty_route"


# =============================================================================
# Route Models (input)
# =============================================================================

def display_distance(v: Any) -> Optional[float]:
    """Distances are display metadata: numbers or numeric strings, else None."""
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        return float(v)
    if isinstance(v, str):
        try:
            return float(v.strip())
        except ValueError:
            return None
    return None


def display_labels(v: Any) -> list[str]:
    """Label lists drop nulls and stringify anything else."""
    if not v:
        return []
    if not isinstance(v, (list, tuple)):
        v = [v]
    return [item if isinstance(item, str) else str(item) for item in v if item is not None]


class Coordinate(BaseModel):
    """A (latitude, longitude) pair. Accepts `[lat, lon]` on input."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., description="Latitude")
    lon: float = Field(..., description="Longitude")

    @model_validator(mode="before")
    @classmethod
    def from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"Coordinate must be a [lat, lon] pair, got {len(data)} values")
            return {"lat": data[0], "lon": data[1]}
        return data

    def as_pair(self) -> tuple[float, float]:
        return (self.lat, self.lon)


class DaySegment(BaseModel):
    """One day of a multi-day route. Carries labels only, no geometry."""

    model_config = ConfigDict(populate_by_name=True)

    day: int = Field(..., ge=1)
    start_point: str = Field("", alias="startPoint")
    end_point: str = Field("", alias="endPoint")
    distance: Optional[float] = None
    waypoints: list[str] = []

    @field_validator("start_point", "end_point", mode="before")
    @classmethod
    def default_label(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("distance", mode="before")
    @classmethod
    def lenient_distance(cls, v: Any) -> Optional[float]:
        return display_distance(v)

    @field_validator("waypoints", mode="before")
    @classmethod
    def lenient_waypoints(cls, v: Any) -> list[str]:
        return display_labels(v)


class Route(BaseModel):
    """Canonical route shape consumed by the visualization core."""

    model_config = ConfigDict(populate_by_name=True)

    coordinates: list[Coordinate] = []
    daily_routes: list[DaySegment] = Field(default_factory=list, alias="dailyRoutes")
    total_distance: Optional[float] = Field(None, alias="totalDistance")
    estimated_duration: Optional[str] = Field(None, alias="estimatedDuration")
    difficulty: Optional[str] = None
    waypoints: list[str] = []

    @field_validator("coordinates", "daily_routes", mode="before")
    @classmethod
    def default_empty(cls, v: Any) -> Any:
        return v or []

    @field_validator("total_distance", mode="before")
    @classmethod
    def lenient_distance(cls, v: Any) -> Optional[float]:
        return display_distance(v)

    @field_validator("waypoints", mode="before")
    @classmethod
    def lenient_waypoints(cls, v: Any) -> list[str]:
        return display_labels(v)

    @field_validator("estimated_duration", mode="before")
    @classmethod
    def duration_as_text(cls, v: Any) -> Any:
        # Generated routes sometimes give a bare number of days
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


# =============================================================================
# Visualization Models (output)
# =============================================================================

class MarkerIcon(BaseModel):
    color: str
    label: str
    size: tuple[int, int]
    anchor: tuple[int, int]
    class_name: str = "custom-marker"


class Marker(BaseModel):
    id: str
    position: Coordinate
    type: MarkerType
    title: str
    description: str = ""
    day: Optional[int] = None
    distance: Optional[float] = None
    waypoint: Optional[str] = None
    icon: MarkerIcon


class PolylineMetadata(BaseModel):
    direction: Optional[str] = None
    description: Optional[str] = None
    distance: Optional[float] = None
    start_point: Optional[str] = None
    end_point: Optional[str] = None


class Polyline(BaseModel):
    id: str
    coordinates: list[Coordinate] = Field(..., min_length=1)
    color: str
    weight: int
    opacity: float
    dash_array: Optional[str] = None
    day: Optional[int] = None
    metadata: PolylineMetadata = Field(default_factory=PolylineMetadata)

    @property
    def is_dashed(self) -> bool:
        return self.dash_array is not None


class BoundingBox(BaseModel):
    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float


class FitBoundsOptions(BaseModel):
    """Viewport framing hints handed to the rendering surface."""
    bounds: BoundingBox
    padding: tuple[int, int] = (20, 20)
    max_zoom: int = 13


class MapView(BaseModel):
    """Initial map center and zoom when there is nothing to frame."""
    center: Coordinate
    zoom: int


class Visualization(BaseModel):
    markers: list[Marker] = []
    polylines: list[Polyline] = []
    bounds: Optional[BoundingBox] = None
    fit_bounds: Optional[FitBoundsOptions] = None
    default_view: Optional[MapView] = None
    trip_type: Optional[str] = None


class VisualizationEvent(BaseModel):
    name: EventName
    count: int = 0
    day: Optional[int] = None
    detail: Optional[str] = None


# =============================================================================
# API Request Models
# =============================================================================

class VisualizeRequest(BaseModel):
    route: dict[str, Any] = Field(..., description="Route payload in any supported envelope")
    trip_type: Optional[str] = None
    day: Optional[int] = Field(None, ge=1)


class BoundsRequest(BaseModel):
    coordinates: list[Coordinate] = []


class GenerateRouteRequest(BaseModel):
    country: str = Field(..., min_length=1, max_length=100)
    trip_type: str = Field(..., min_length=1)
    city: Optional[str] = Field(None, max_length=100)
    day: Optional[int] = Field(None, ge=1)
