"""
TrailMap Test Configuration
Pytest fixtures for routes and the API client
"""

import pytest
from fastapi.testclient import TestClient

from trailmap.main import app
from trailmap.models.schemas import Coordinate, DaySegment, Route


# Circular trekking loop: starts and ends at the same trailhead
LOOP_POINTS = [
    [46.2276, 2.2137],
    [46.2376, 2.2237],
    [46.2476, 2.2237],
    [46.2476, 2.2137],
    [46.2476, 2.2037],
    [46.2376, 2.2037],
    [46.2276, 2.2037],
    [46.2176, 2.2137],
    [46.2176, 2.2237],
    [46.2276, 2.2137],
    [46.2176, 2.2137],
    [46.2276, 2.2037],
    [46.2276, 2.2137],
]


def line_points(count: int) -> list[list[float]]:
    """Distinct points heading north-east, one per index."""
    return [[46.0 + i * 0.01, 2.0 + i * 0.02] for i in range(count)]


def line_coordinates(count: int) -> list[Coordinate]:
    return [Coordinate(lat=lat, lon=lon) for lat, lon in line_points(count)]


@pytest.fixture
def client():
    """Create a test client; dependency overrides are reset afterwards."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def loop_payload():
    """Trekking loop as returned by the generation backend."""
    return {
        "coordinates": LOOP_POINTS,
        "totalDistance": 12,
        "estimatedDuration": "4 hours",
        "difficulty": "moderate",
        "dailyRoutes": [
            {
                "day": 1,
                "startPoint": "Village Center",
                "endPoint": "Village Center",
                "distance": 12,
                "coordinates": [],
                "waypoints": ["Forest Trail", "Lake Shore"],
            }
        ],
    }


@pytest.fixture
def loop_route(loop_payload):
    return Route.model_validate(loop_payload)


@pytest.fixture
def two_day_payload():
    """Ten-point cycling route split over two days without waypoints."""
    return {
        "coordinates": line_points(10),
        "totalDistance": 45,
        "estimatedDuration": "2 days",
        "dailyRoutes": [
            {"day": 1, "startPoint": "City A", "endPoint": "City B", "distance": 25, "waypoints": []},
            {"day": 2, "startPoint": "City B", "endPoint": "City C", "distance": 20, "waypoints": []},
        ],
    }


@pytest.fixture
def two_day_route(two_day_payload):
    return Route.model_validate(two_day_payload)


@pytest.fixture
def make_route():
    """Factory for line routes with an optional daily breakdown."""

    def _make(count: int, days=None) -> Route:
        daily = []
        for i, waypoints in enumerate(days or []):
            daily.append(
                DaySegment(
                    day=i + 1,
                    start_point=f"Stage {i + 1}",
                    end_point=f"Stage {i + 2}",
                    distance=10.0 * (i + 1),
                    waypoints=waypoints,
                )
            )
        return Route(coordinates=line_coordinates(count), daily_routes=daily)

    return _make
