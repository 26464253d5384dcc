"""TrailMap Utilities"""

from trailmap.utils.geo import bounding_box, default_map_view, fit_bounds_options
from trailmap.utils.segments import DayRange, day_index_ranges, day_slice_bounds
from trailmap.utils.map_styles import marker_icon, resolve_trip_type

__all__ = [
    "bounding_box",
    "fit_bounds_options",
    "default_map_view",
    "DayRange",
    "day_index_ranges",
    "day_slice_bounds",
    "marker_icon",
    "resolve_trip_type",
]
