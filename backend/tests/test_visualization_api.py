"""
TrailMap Visualization API Tests
"""

import pytest

from trailmap.main import app
from trailmap.models.schemas import Route
from trailmap.routers.visualization import get_generation_client


class StubGenerationClient:
    """Stands in for the route generation backend."""

    def __init__(self, route=None):
        self.route = route
        self.calls = []

    async def generate(self, country, trip_type, city=None):
        self.calls.append((country, trip_type, city))
        return self.route


class TestVisualizeEndpoint:
    """Tests for POST /api/visualization."""

    def test_cycling_route(self, client, two_day_payload):
        response = client.post(
            "/api/visualization",
            json={"route": {"routeData": {"routeData": two_day_payload}}, "trip_type": "cycling"},
        )

        assert response.status_code == 200
        data = response.json()
        assert [m["type"] for m in data["markers"]] == ["start", "waypoint", "day_start", "end"]
        assert [len(p["coordinates"]) for p in data["polylines"]] == [6, 5]
        assert data["markers"][0]["position"] == {"lat": 46.0, "lon": 2.0}
        assert data["trip_type"] == "cycling"
        assert data["fit_bounds"]["max_zoom"] == 13

    def test_trip_type_from_payload(self, client, loop_payload):
        """Trip type is read from the saved route when not given."""
        response = client.post(
            "/api/visualization",
            json={"route": {"tripType": "trekking", "routeData": loop_payload}},
        )

        data = response.json()
        assert data["trip_type"] == "trekking"
        assert [p["id"] for p in data["polylines"]] == ["outbound", "return"]
        assert data["polylines"][1]["dash_array"] == "10, 10"
        assert data["polylines"][0]["dash_array"] is None

    def test_day_focus(self, client, two_day_payload):
        response = client.post(
            "/api/visualization",
            json={"route": two_day_payload, "trip_type": "cycling", "day": 1},
        )

        data = response.json()
        assert [p["id"] for p in data["polylines"]] == ["day-1"]
        assert {m["day"] for m in data["markers"]} == {1}

    def test_empty_route(self, client):
        """A route without coordinates gives an empty visualization."""
        response = client.post("/api/visualization", json={"route": {"coordinates": []}})

        assert response.status_code == 200
        data = response.json()
        assert data["markers"] == []
        assert data["polylines"] == []
        assert data["bounds"] is None
        assert data["default_view"] == {"center": {"lat": 46.2276, "lon": 2.2137}, "zoom": 8}

    def test_loose_display_metadata(self, client):
        """Unparseable distances and null labels still render the route."""
        route = {
            "coordinates": [[46.0, 2.0], [46.1, 2.1], [46.2, 2.2]],
            "totalDistance": "45 km",
            "dailyRoutes": [{"day": 1, "distance": "45 km", "waypoints": ["Col", None]}],
        }
        response = client.post("/api/visualization", json={"route": route, "trip_type": "cycling"})

        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data["polylines"]] == ["day-1"]
        assert data["polylines"][0]["metadata"]["distance"] is None

    def test_invalid_coordinates(self, client):
        response = client.post(
            "/api/visualization",
            json={"route": {"coordinates": [[1.0, 2.0, 3.0]]}},
        )

        assert response.status_code == 422

    def test_missing_route(self, client):
        response = client.post("/api/visualization", json={"trip_type": "cycling"})

        assert response.status_code == 422


class TestBoundsEndpoint:
    """Tests for POST /api/visualization/bounds."""

    def test_bounds(self, client):
        response = client.post(
            "/api/visualization/bounds",
            json={"coordinates": [[46.1, 2.5], [46.3, 2.1]]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["bounds"] == {"min_lat": 46.1, "min_lon": 2.1, "max_lat": 46.3, "max_lon": 2.5}
        assert data["padding"] == [20, 20]

    def test_no_coordinates(self, client):
        response = client.post("/api/visualization/bounds", json={"coordinates": []})

        assert response.status_code == 200
        assert response.json() is None


class TestGenerateEndpoint:
    """Tests for POST /api/visualization/generate."""

    def test_generate(self, client, loop_payload):
        stub = StubGenerationClient(Route.model_validate(loop_payload))
        app.dependency_overrides[get_generation_client] = lambda: stub

        response = client.post(
            "/api/visualization/generate",
            json={"country": "France", "trip_type": "trekking", "city": "Vichy"},
        )

        assert response.status_code == 200
        assert stub.calls == [("France", "trekking", "Vichy")]
        assert len(response.json()["polylines"]) == 2

    def test_backend_unavailable(self, client):
        app.dependency_overrides[get_generation_client] = lambda: StubGenerationClient(None)

        response = client.post(
            "/api/visualization/generate",
            json={"country": "France", "trip_type": "cycling"},
        )

        assert response.status_code == 503

    @pytest.mark.parametrize("trip_type", ["kayaking", "Cycling "])
    def test_unsupported_trip_type(self, client, trip_type):
        """Unsupported trip types are rejected before calling the backend."""
        response = client.post(
            "/api/visualization/generate",
            json={"country": "France", "trip_type": trip_type},
        )

        assert response.status_code == 400
