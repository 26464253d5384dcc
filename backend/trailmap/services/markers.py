"""
TrailMap Marker Generator
Start, end, waypoint and day transition markers for a route
"""

from typing import Optional, Union

from trailmap.config import VisualizationSettings
from trailmap.models.schemas import (
    Coordinate,
    DaySegment,
    EventName,
    Marker,
    MarkerType,
    Route,
    TripType,
)
from trailmap.services.events import EventEmitter, EventHook
from trailmap.utils.ids import unique_id
from trailmap.utils.map_styles import marker_icon, resolve_trip_type
from trailmap.utils.segments import DayRange, day_index_ranges, points_per_day


class MarkerGenerator:
    """
    Places markers on a route's own coordinates.

    With daily routes, each day contributes:
    1. A start marker (`start` on the first day, `day_start` afterwards)
    2. An end marker (`end` on the last day, `waypoint` otherwise)
    3. One marker per waypoint label, spread evenly through the day

    Without daily routes the route gets a single start/end pair.
    No marker is ever placed at an interpolated position.
    """

    def __init__(
        self,
        settings: Optional[VisualizationSettings] = None,
        on_event: Optional[EventHook] = None,
    ):
        self.settings = settings or VisualizationSettings()
        self.events = EventEmitter(on_event)

    def generate(
        self,
        route: Route,
        trip_type: Union[str, TripType, None] = None,
    ) -> list[Marker]:
        """
        Generate markers for a route.

        Args:
            route: Route with coordinates and optional daily breakdown
            trip_type: Trip type context (cycling, trekking or other)

        Returns:
            Markers in day order: start, end, then waypoints for each day
        """
        coordinates = route.coordinates
        if not coordinates:
            return []

        if route.daily_routes:
            markers = self._daily_markers(route, trip_type)
        else:
            markers = self._fallback_markers(coordinates, trip_type)

        self.events.emit(EventName.MARKERS_GENERATED, count=len(markers))
        return markers

    def _daily_markers(
        self,
        route: Route,
        trip_type: Union[str, TripType, None],
    ) -> list[Marker]:
        coordinates = route.coordinates
        days = route.daily_routes
        total = len(coordinates)
        per_day = points_per_day(total, len(days))
        ranges = day_index_ranges(total, len(days))
        with_waypoints = self._samples_waypoints(trip_type)

        markers: list[Marker] = []
        seen: set[str] = set()

        for day_index, (day, day_range) in enumerate(zip(days, ranges)):
            if not day_range.is_valid_for(total):
                self.events.emit(
                    EventName.DEGENERATE_RANGE_SKIPPED,
                    day=day.day,
                    detail=f"range {day_range.start_index}..{day_range.end_index} of {total} points",
                )
                continue

            is_first = day_index == 0
            is_last = day_index == len(days) - 1

            start_type = MarkerType.START if is_first else MarkerType.DAY_START
            markers.append(
                Marker(
                    id=unique_id(f"start-day-{day.day}", seen),
                    position=coordinates[day_range.start_index],
                    type=start_type,
                    title=f"Day {day.day} Start",
                    description=day.start_point,
                    day=day.day,
                    distance=day.distance,
                    icon=marker_icon(start_type, trip_type, day.day),
                )
            )

            end_type = MarkerType.END if is_last else MarkerType.WAYPOINT
            markers.append(
                Marker(
                    id=unique_id(f"end-day-{day.day}", seen),
                    position=coordinates[day_range.end_index],
                    type=end_type,
                    title=f"Day {day.day} End",
                    description=day.end_point,
                    day=day.day,
                    distance=day.distance,
                    icon=marker_icon(end_type, trip_type, day.day),
                )
            )

            if with_waypoints:
                markers.extend(
                    self._waypoint_markers(coordinates, day, day_range, per_day, trip_type, seen)
                )

        return markers

    def _waypoint_markers(
        self,
        coordinates: list[Coordinate],
        day: DaySegment,
        day_range: DayRange,
        per_day: int,
        trip_type: Union[str, TripType, None],
        seen: set[str],
    ) -> list[Marker]:
        """Spread a day's waypoint labels over evenly spaced coordinates."""
        if not day.waypoints:
            return []

        step = max(1, per_day // (len(day.waypoints) + 1))
        markers = []

        for k, label in enumerate(day.waypoints, start=1):
            index = day_range.start_index + k * step
            if index >= day_range.end_index or index >= len(coordinates):
                self.events.emit(EventName.WAYPOINT_DROPPED, day=day.day, detail=label)
                continue

            markers.append(
                Marker(
                    id=unique_id(f"waypoint-day-{day.day}-{k}", seen),
                    position=coordinates[index],
                    type=MarkerType.WAYPOINT,
                    title=label,
                    description=f"Day {day.day} waypoint",
                    day=day.day,
                    waypoint=label,
                    icon=marker_icon(MarkerType.WAYPOINT, trip_type, day.day),
                )
            )

        return markers

    def _fallback_markers(
        self,
        coordinates: list[Coordinate],
        trip_type: Union[str, TripType, None],
    ) -> list[Marker]:
        markers = [
            Marker(
                id="start",
                position=coordinates[0],
                type=MarkerType.START,
                title="Route Start",
                description="Starting point",
                icon=marker_icon(MarkerType.START, trip_type),
            )
        ]

        if len(coordinates) > 1:
            markers.append(
                Marker(
                    id="end",
                    position=coordinates[-1],
                    type=MarkerType.END,
                    title="Route End",
                    description="Ending point",
                    icon=marker_icon(MarkerType.END, trip_type),
                )
            )

        return markers

    def _samples_waypoints(self, trip_type: Union[str, TripType, None]) -> bool:
        # Trekking loops show only their trailhead unless enabled
        if resolve_trip_type(trip_type) == TripType.TREKKING:
            return self.settings.trekking_waypoint_markers
        return True
