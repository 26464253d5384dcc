"""
TrailMap Polyline Builder
Styled path segments for trekking loops, multi-day cycling routes and plain routes
"""

from typing import Optional, Union

from trailmap.config import VisualizationSettings
from trailmap.models.schemas import (
    Coordinate,
    EventName,
    Polyline,
    PolylineMetadata,
    Route,
    TripType,
)
from trailmap.services.events import EventEmitter, EventHook
from trailmap.utils.ids import unique_id
from trailmap.utils.map_styles import (
    BLUE,
    GREEN,
    RETURN_DASH_ARRAY,
    cycling_day_color,
    resolve_trip_type,
    route_color,
)
from trailmap.utils.segments import day_slice_bounds


class PolylineBuilder:
    """
    Splits a route into drawable segments depending on trip type.

    - Trekking: outbound half (solid) and return half (dashed) sharing the midpoint
    - Cycling with daily routes: one line per day, adjacent days share a point
    - Anything else: one line over the whole route

    Geometry is never recomputed, only partitioned.
    """

    def __init__(
        self,
        settings: Optional[VisualizationSettings] = None,
        on_event: Optional[EventHook] = None,
    ):
        self.settings = settings or VisualizationSettings()
        self.events = EventEmitter(on_event)

    def build(
        self,
        route: Route,
        trip_type: Union[str, TripType, None] = None,
    ) -> list[Polyline]:
        """
        Build polylines for a route.

        Args:
            route: Route with coordinates and optional daily breakdown
            trip_type: Trip type context (cycling, trekking or other)

        Returns:
            Polylines in drawing order, empty when fewer than 2 coordinates
        """
        if len(route.coordinates) < 2:
            return []

        resolved = resolve_trip_type(trip_type)

        # Trekking wins over the no-daily-routes fallback: a trek without a
        # daily breakdown still gets the outbound/return split, not main-route.
        if resolved == TripType.TREKKING:
            polylines = self._trekking_polylines(route)
        elif resolved == TripType.CYCLING and route.daily_routes:
            polylines = self._cycling_polylines(route)
        else:
            polylines = self._fallback_polylines(route, trip_type)

        self.events.emit(EventName.POLYLINES_GENERATED, count=len(polylines))
        return polylines

    def _trekking_polylines(self, route: Route) -> list[Polyline]:
        """
        Outbound/return split at the midpoint.

        Both halves include the midpoint so the lines connect. Loops that
        retrace their path overlap; only the stroke style tells them apart.
        """
        coordinates = route.coordinates
        mid = len(coordinates) // 2
        outbound = coordinates[: mid + 1]
        inbound = coordinates[mid:]

        polylines = []

        if len(outbound) >= 2:
            polylines.append(
                self._polyline(
                    "outbound",
                    outbound,
                    color=GREEN,
                    metadata=PolylineMetadata(
                        direction="outbound",
                        description="Outbound path",
                    ),
                )
            )

        if len(inbound) >= 2:
            polylines.append(
                self._polyline(
                    "return",
                    inbound,
                    color=BLUE,
                    dash_array=RETURN_DASH_ARRAY,
                    metadata=PolylineMetadata(
                        direction="return",
                        description="Return path",
                    ),
                )
            )

        return polylines

    def _cycling_polylines(self, route: Route) -> list[Polyline]:
        coordinates = route.coordinates
        days = route.daily_routes
        bounds = day_slice_bounds(len(coordinates), len(days))

        polylines = []
        seen: set[str] = set()

        for day_index, (day, (start, stop)) in enumerate(zip(days, bounds)):
            day_coordinates = coordinates[start : stop + 1]

            if len(day_coordinates) < 2:
                self.events.emit(
                    EventName.DEGENERATE_RANGE_SKIPPED,
                    day=day.day,
                    detail=f"{len(day_coordinates)} point(s) for day line",
                )
                continue

            if day.start_point and day.end_point:
                description = f"Day {day.day}: {day.start_point} to {day.end_point}"
            else:
                description = f"Day {day.day} Route"

            polylines.append(
                self._polyline(
                    unique_id(f"day-{day.day}", seen),
                    day_coordinates,
                    color=cycling_day_color(day_index),
                    day=day.day,
                    metadata=PolylineMetadata(
                        direction="forward",
                        description=description,
                        distance=day.distance,
                        start_point=day.start_point or None,
                        end_point=day.end_point or None,
                    ),
                )
            )

        return polylines

    def _fallback_polylines(
        self,
        route: Route,
        trip_type: Union[str, TripType, None],
    ) -> list[Polyline]:
        return [
            self._polyline(
                "main-route",
                route.coordinates,
                color=route_color(trip_type),
                metadata=PolylineMetadata(
                    description="Route",
                    distance=route.total_distance,
                ),
            )
        ]

    def _polyline(
        self,
        polyline_id: str,
        coordinates: list[Coordinate],
        color: str,
        dash_array: Optional[str] = None,
        day: Optional[int] = None,
        metadata: Optional[PolylineMetadata] = None,
    ) -> Polyline:
        return Polyline(
            id=polyline_id,
            coordinates=list(coordinates),
            color=color,
            weight=self.settings.polyline_weight,
            opacity=self.settings.polyline_opacity,
            dash_array=dash_array,
            day=day,
            metadata=metadata or PolylineMetadata(),
        )
