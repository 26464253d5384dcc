"""
TrailMap Route Generation Client
Fetches AI-generated routes from the route backend
"""

import logging
from typing import Optional

import httpx

from trailmap.config import Settings, get_settings
from trailmap.models.schemas import Route, TripType
from trailmap.services.route_adapter import RoutePayloadError, extract_route

logger = logging.getLogger(__name__)


class RouteGenerationClient:
    """Client for the route generation backend (`POST /api/routes/generate`)."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.base_url = self.settings.route_api_base_url.rstrip("/")
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.settings.route_api_token:
            headers["Authorization"] = f"Bearer {self.settings.route_api_token}"
        return headers

    async def generate(
        self,
        country: str,
        trip_type: str,
        city: Optional[str] = None,
    ) -> Optional[Route]:
        """
        Ask the backend for a new route.

        Args:
            country: Destination country
            trip_type: "cycling" or "trekking"
            city: Optional destination city

        Returns:
            Canonical Route, or None when the backend fails or answers garbage

        Raises:
            ValueError: Unsupported trip type
        """
        try:
            trip = TripType(trip_type)
        except ValueError:
            raise ValueError(
                f"Trip type must be either 'cycling' or 'trekking', got '{trip_type}'"
            ) from None

        body = {"country": country, "tripType": trip.value}
        if city:
            body["city"] = city

        logger.info(f"Requesting {trip.value} route for {city or country}")

        async with httpx.AsyncClient(
            transport=self.transport,
            timeout=self.settings.route_api_timeout_seconds,
        ) as client:
            try:
                response = await client.post(
                    f"{self.base_url}/api/routes/generate",
                    json=body,
                    headers=self._headers(),
                )
                response.raise_for_status()
                data = response.json()
            except (httpx.HTTPError, ValueError) as e:
                logger.error(f"Route generation failed: {type(e).__name__}: {e}")
                return None

        try:
            route = extract_route(data)
        except RoutePayloadError as e:
            logger.error(f"Route generation returned an invalid route: {e}")
            return None

        logger.info(f"Generated route with {len(route.coordinates)} points")
        return route
