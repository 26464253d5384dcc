"""
TrailMap Visualization Events
Hook type for structured events emitted by the visualization core
"""

import logging
from typing import Callable, Optional

from trailmap.models.schemas import EventName, VisualizationEvent

EventHook = Callable[[VisualizationEvent], None]


class EventEmitter:
    """Thin wrapper so services can report events without checking for a hook."""

    def __init__(self, hook: Optional[EventHook] = None):
        self.hook = hook

    def emit(
        self,
        name: EventName,
        count: int = 0,
        day: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        if self.hook is None:
            return
        self.hook(VisualizationEvent(name=name, count=count, day=day, detail=detail))


def logging_hook(logger: logging.Logger, level: int = logging.DEBUG) -> EventHook:
    """Build a hook that forwards events to a logger."""

    def _log(event: VisualizationEvent) -> None:
        message = f"Visualization event {event.name.value}: count={event.count}"
        if event.day is not None:
            message += f" day={event.day}"
        if event.detail:
            message += f" ({event.detail})"
        logger.log(level, message)

    return _log
