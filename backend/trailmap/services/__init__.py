"""TrailMap Services"""

from trailmap.services.markers import MarkerGenerator
from trailmap.services.polylines import PolylineBuilder
from trailmap.services.visualization import VisualizationAssembler, visualize_route
from trailmap.services.route_adapter import RoutePayloadError, extract_route
from trailmap.services.route_generation import RouteGenerationClient

__all__ = [
    "MarkerGenerator",
    "PolylineBuilder",
    "VisualizationAssembler",
    "visualize_route",
    "RoutePayloadError",
    "extract_route",
    "RouteGenerationClient",
]
