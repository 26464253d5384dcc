"""
TrailMap Visualization Assembler
Turns a route into markers, polylines and viewport bounds
"""

from typing import Optional, Union

from trailmap.config import VisualizationSettings
from trailmap.models.schemas import (
    EventName,
    Marker,
    Polyline,
    Route,
    TripType,
    Visualization,
)
from trailmap.services.events import EventEmitter, EventHook
from trailmap.services.markers import MarkerGenerator
from trailmap.services.polylines import PolylineBuilder
from trailmap.utils.geo import bounding_box, default_map_view, fit_bounds_options


class VisualizationAssembler:
    """
    Composition root for the route-to-map transform.

    Pure: no I/O, no state kept between calls. Safe to call on every render
    and from concurrent requests. Structured events go to `on_event` when
    one is given.
    """

    def __init__(
        self,
        settings: Optional[VisualizationSettings] = None,
        on_event: Optional[EventHook] = None,
    ):
        self.settings = settings or VisualizationSettings()
        self.events = EventEmitter(on_event)
        self.markers = MarkerGenerator(self.settings, on_event=on_event)
        self.polylines = PolylineBuilder(self.settings, on_event=on_event)

    def assemble(
        self,
        route: Optional[Route],
        trip_type: Union[str, TripType, None] = None,
        day: Optional[int] = None,
    ) -> Visualization:
        """
        Build the full visualization for a route.

        Args:
            route: Canonical route (None is treated as an empty route)
            trip_type: Trip type context
            day: Optional day number to focus on

        Returns:
            Visualization with markers, polylines and framing bounds.
            Empty routes yield empty lists, no bounds and the default map view.
        """
        trip_type_value = trip_type.value if isinstance(trip_type, TripType) else trip_type

        if route is None or not route.coordinates:
            self.events.emit(EventName.EMPTY_ROUTE)
            return Visualization(
                default_view=default_map_view(self.settings),
                trip_type=trip_type_value,
            )

        markers = self.markers.generate(route, trip_type)
        polylines = self.polylines.build(route, trip_type)
        framed = route.coordinates

        if day is not None:
            markers, polylines = self._focus_day(markers, polylines, day)
            focused = [m.position for m in markers] + [c for p in polylines for c in p.coordinates]
            if focused:
                framed = focused

        bounds = bounding_box(framed)

        return Visualization(
            markers=markers,
            polylines=polylines,
            bounds=bounds,
            fit_bounds=fit_bounds_options(bounds, self.settings),
            trip_type=trip_type_value,
        )

    def _focus_day(
        self,
        markers: list[Marker],
        polylines: list[Polyline],
        day: int,
    ) -> tuple[list[Marker], list[Polyline]]:
        """Keep outputs for one day; untagged outputs span the whole route and stay."""
        kept_markers = [m for m in markers if m.day is None or m.day == day]
        kept_polylines = [p for p in polylines if p.day is None or p.day == day]
        return kept_markers, kept_polylines


def visualize_route(
    route: Optional[Route],
    trip_type: Union[str, TripType, None] = None,
    day: Optional[int] = None,
    settings: Optional[VisualizationSettings] = None,
    on_event: Optional[EventHook] = None,
) -> Visualization:
    """Shortcut for a one-off VisualizationAssembler pass."""
    return VisualizationAssembler(settings, on_event=on_event).assemble(route, trip_type, day)
