"""
TrailMap Geo Utilities Tests
"""

from trailmap.config import VisualizationSettings
from trailmap.models.schemas import BoundingBox, Coordinate
from trailmap.utils.geo import bounding_box, default_map_view, fit_bounds_options

from conftest import LOOP_POINTS


def inside(box: BoundingBox, coord: Coordinate) -> bool:
    return box.min_lat <= coord.lat <= box.max_lat and box.min_lon <= coord.lon <= box.max_lon


class TestBoundingBox:
    """Tests for bounding box calculation."""

    def test_empty_input(self):
        """No coordinates means no box."""
        assert bounding_box([]) is None

    def test_single_point(self):
        """A single point gives a zero-size box."""
        box = bounding_box([Coordinate(lat=46.2, lon=2.2)])

        assert box == BoundingBox(min_lat=46.2, min_lon=2.2, max_lat=46.2, max_lon=2.2)

    def test_loop_extent(self):
        """Box matches the loop's extreme latitudes and longitudes."""
        coords = [Coordinate.model_validate(p) for p in LOOP_POINTS]
        box = bounding_box(coords)

        assert box.min_lat == 46.2176
        assert box.max_lat == 46.2476
        assert box.min_lon == 2.2037
        assert box.max_lon == 2.2237

    def test_encloses_every_point(self):
        """Every input coordinate lies inside the box."""
        coords = [
            Coordinate(lat=-33.9, lon=18.4),
            Coordinate(lat=51.5, lon=-0.1),
            Coordinate(lat=35.7, lon=139.7),
        ]
        box = bounding_box(coords)

        assert all(inside(box, c) for c in coords)
        assert box.min_lon == -0.1
        assert box.max_lon == 139.7

    def test_accepts_generator(self):
        """Any iterable works, not only lists."""
        box = bounding_box(Coordinate(lat=float(i), lon=float(-i)) for i in range(3))

        assert box == BoundingBox(min_lat=0.0, min_lon=-2.0, max_lat=2.0, max_lon=0.0)


class TestFitBoundsOptions:
    """Tests for viewport framing hints."""

    def test_defaults(self):
        """Default padding is 20px with zoom capped at 13."""
        box = BoundingBox(min_lat=1, min_lon=2, max_lat=3, max_lon=4)
        options = fit_bounds_options(box)

        assert options.bounds == box
        assert options.padding == (20, 20)
        assert options.max_zoom == 13

    def test_custom_settings(self):
        """Settings override padding and zoom ceiling."""
        box = BoundingBox(min_lat=1, min_lon=2, max_lat=3, max_lon=4)
        settings = VisualizationSettings(fit_bounds_padding=40, fit_bounds_max_zoom=10)

        options = fit_bounds_options(box, settings)

        assert options.padding == (40, 40)
        assert options.max_zoom == 10

    def test_no_bounds(self):
        """Nothing to frame gives no options."""
        assert fit_bounds_options(None) is None


class TestDefaultMapView:
    """Tests for the fallback map view."""

    def test_defaults(self):
        """Centered on France at zoom 8."""
        view = default_map_view()

        assert view.center == Coordinate(lat=46.2276, lon=2.2137)
        assert view.zoom == 8

    def test_custom_settings(self):
        settings = VisualizationSettings(default_center_lat=45.8, default_center_lon=6.9, default_zoom=11)

        view = default_map_view(settings)

        assert view.center == Coordinate(lat=45.8, lon=6.9)
        assert view.zoom == 11
