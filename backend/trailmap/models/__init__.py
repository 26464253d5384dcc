"""TrailMap Models Package"""

from trailmap.models.schemas import (
    Coordinate,
    DaySegment,
    Route,
    TripType,
    Marker,
    MarkerType,
    Polyline,
    BoundingBox,
    MapView,
    Visualization,
    VisualizationEvent,
)

__all__ = [
    "Coordinate",
    "DaySegment",
    "Route",
    "TripType",
    "Marker",
    "MarkerType",
    "Polyline",
    "BoundingBox",
    "MapView",
    "Visualization",
    "VisualizationEvent",
]
