"""
TrailMap Route Adapter
Unwraps route payloads from the generation backend into the canonical Route
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError

from trailmap.models.schemas import Route

logger = logging.getLogger(__name__)

# Envelope keys seen in generation responses and saved route documents,
# e.g. {"route": {"routeData": {...}}} or {"routeData": {"routeData": {...}}}
ENVELOPE_KEYS = ("routeData", "route", "route_data")
ROUTE_KEYS = ("coordinates", "dailyRoutes", "daily_routes")
TRIP_TYPE_KEYS = ("tripType", "trip_type")
MAX_DEPTH = 6


class RoutePayloadError(ValueError):
    """Raised when a payload holds a route that cannot be validated."""


def _levels(payload: Any):
    """Yield each mapping from the outer envelope down to the innermost one."""
    current = payload
    for _ in range(MAX_DEPTH):
        if not isinstance(current, Mapping):
            return
        yield current
        for key in ENVELOPE_KEYS:
            if isinstance(current.get(key), Mapping):
                current = current[key]
                break
        else:
            return


def find_route_object(payload: Any) -> Optional[Mapping]:
    """Return the innermost mapping that carries route fields, if any."""
    found = None
    for level in _levels(payload):
        if any(key in level for key in ROUTE_KEYS):
            found = level
    return found


def extract_route(payload: Any) -> Route:
    """
    Validate a route payload in any supported envelope.

    Args:
        payload: Decoded JSON from the generation backend or a saved route

    Returns:
        Route; empty when no level of the payload carries route fields

    Raises:
        RoutePayloadError: The route object exists but is malformed
    """
    route_object = find_route_object(payload)

    if route_object is None:
        logger.warning("Route payload has no coordinates at any nesting level")
        return Route()

    try:
        return Route.model_validate(dict(route_object))
    except ValidationError as e:
        raise RoutePayloadError(f"Invalid route payload: {e}") from e


def extract_trip_type(payload: Any) -> Optional[str]:
    """Read the trip type from the first envelope level that declares one."""
    for level in _levels(payload):
        for key in TRIP_TYPE_KEYS:
            value = level.get(key)
            if isinstance(value, str) and value:
                return value
    return None
