"""
TrailMap Map Styles
Colors, stroke styles and marker icons for the rendering surface
"""

from typing import Optional, Union

from trailmap.models.schemas import MarkerIcon, MarkerType, TripType

# Palette (Tailwind 600 shades used by the web client)
GREEN = "#16a34a"
RED = "#dc2626"
ORANGE = "#ea580c"
PURPLE = "#9333ea"
BLUE = "#2563eb"

RETURN_DASH_ARRAY = "10, 10"

WAYPOINT_ICON_SIZE = (25, 25)
WAYPOINT_ICON_ANCHOR = (12, 12)
ICON_SIZE = (35, 35)
ICON_ANCHOR = (17, 35)


def resolve_trip_type(trip_type: Union[str, TripType, None]) -> Optional[TripType]:
    """Map a trip-type string to TripType; unknown values give None."""
    if trip_type is None:
        return None
    if isinstance(trip_type, TripType):
        return trip_type
    try:
        return TripType(trip_type.strip().lower())
    except ValueError:
        return None


def route_color(trip_type: Union[str, TripType, None]) -> str:
    """Main route color: orange for cycling, green otherwise."""
    if resolve_trip_type(trip_type) == TripType.CYCLING:
        return ORANGE
    return GREEN


def cycling_day_color(day_index: int) -> str:
    """First day is orange, every later day red."""
    return ORANGE if day_index == 0 else RED


def marker_color(marker_type: MarkerType, trip_type: Union[str, TripType, None]) -> str:
    if marker_type == MarkerType.START:
        return GREEN
    if marker_type == MarkerType.END:
        return RED
    if marker_type == MarkerType.DAY_START:
        return PURPLE
    # Waypoints follow the trip's route color
    return route_color(trip_type)


def marker_icon(
    marker_type: MarkerType,
    trip_type: Union[str, TripType, None],
    day: Optional[int] = None,
) -> MarkerIcon:
    """
    Build the icon descriptor for a marker.

    Args:
        marker_type: Semantic role of the marker
        trip_type: Trip type of the route being drawn
        day: Day number, used as the label of day transition markers

    Returns:
        MarkerIcon with color, label, size and anchor
    """
    if marker_type in (MarkerType.START, MarkerType.END):
        label = "🏁"
    elif marker_type == MarkerType.WAYPOINT:
        label = "📍"
    else:
        label = str(day) if day is not None else "•"

    if marker_type == MarkerType.WAYPOINT:
        size, anchor = WAYPOINT_ICON_SIZE, WAYPOINT_ICON_ANCHOR
    else:
        size, anchor = ICON_SIZE, ICON_ANCHOR

    return MarkerIcon(
        color=marker_color(marker_type, trip_type),
        label=label,
        size=size,
        anchor=anchor,
    )
