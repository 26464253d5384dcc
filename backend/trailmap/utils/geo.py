"""
TrailMap Geo Utilities
Bounding boxes, viewport framing and the default map view
"""

from typing import Iterable, Optional

from trailmap.config import VisualizationSettings
from trailmap.models.schemas import BoundingBox, Coordinate, FitBoundsOptions, MapView


def bounding_box(coordinates: Iterable[Coordinate]) -> Optional[BoundingBox]:
    """
    Calculate the minimal box enclosing every coordinate.

    Args:
        coordinates: Coordinates to enclose

    Returns:
        BoundingBox, or None when there are no coordinates
    """
    box = None

    for coord in coordinates:
        if box is None:
            box = [coord.lat, coord.lon, coord.lat, coord.lon]
            continue
        box[0] = min(box[0], coord.lat)
        box[1] = min(box[1], coord.lon)
        box[2] = max(box[2], coord.lat)
        box[3] = max(box[3], coord.lon)

    if box is None:
        return None

    return BoundingBox(min_lat=box[0], min_lon=box[1], max_lat=box[2], max_lon=box[3])


def fit_bounds_options(
    bounds: Optional[BoundingBox],
    settings: Optional[VisualizationSettings] = None,
) -> Optional[FitBoundsOptions]:
    """Attach padding and zoom ceiling hints to a bounding box."""
    if bounds is None:
        return None

    settings = settings or VisualizationSettings()
    padding = settings.fit_bounds_padding

    return FitBoundsOptions(
        bounds=bounds,
        padding=(padding, padding),
        max_zoom=settings.fit_bounds_max_zoom,
    )


def default_map_view(settings: Optional[VisualizationSettings] = None) -> MapView:
    """Fallback center and zoom for a map with nothing to frame."""
    settings = settings or VisualizationSettings()
    return MapView(
        center=Coordinate(lat=settings.default_center_lat, lon=settings.default_center_lon),
        zoom=settings.default_zoom,
    )
