"""
TrailMap Visualization Router
Map markers, polylines and viewport framing for routes
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from trailmap.config import Settings, VisualizationSettings, get_settings
from trailmap.models.schemas import (
    BoundsRequest,
    FitBoundsOptions,
    GenerateRouteRequest,
    Visualization,
    VisualizeRequest,
)
from trailmap.services.events import logging_hook
from trailmap.services.route_adapter import RoutePayloadError, extract_route, extract_trip_type
from trailmap.services.route_generation import RouteGenerationClient
from trailmap.services.visualization import VisualizationAssembler
from trailmap.utils.geo import bounding_box, fit_bounds_options

logger = logging.getLogger(__name__)

router = APIRouter()


def get_assembler(settings: Settings = Depends(get_settings)) -> VisualizationAssembler:
    return VisualizationAssembler(
        VisualizationSettings.from_settings(settings),
        on_event=logging_hook(logger),
    )


def get_generation_client(settings: Settings = Depends(get_settings)) -> RouteGenerationClient:
    return RouteGenerationClient(settings=settings)


@router.post("", response_model=Visualization)
async def visualize(
    request: VisualizeRequest,
    assembler: VisualizationAssembler = Depends(get_assembler),
):
    """
    Build map markers and polylines for a route payload.

    The payload may be wrapped in any envelope the generation backend uses
    (`route`, `routeData`, nested). Trip type falls back to the payload's
    own `tripType`.
    """
    try:
        route = extract_route(request.route)
    except RoutePayloadError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    trip_type = request.trip_type or extract_trip_type(request.route)
    return assembler.assemble(route, trip_type, request.day)


@router.post("/bounds", response_model=Optional[FitBoundsOptions])
async def bounds(
    request: BoundsRequest,
    settings: Settings = Depends(get_settings),
):
    """Viewport framing for a list of coordinates; null when empty."""
    return fit_bounds_options(
        bounding_box(request.coordinates),
        VisualizationSettings.from_settings(settings),
    )


@router.post("/generate", response_model=Visualization)
async def generate(
    request: GenerateRouteRequest,
    client: RouteGenerationClient = Depends(get_generation_client),
    assembler: VisualizationAssembler = Depends(get_assembler),
):
    """Generate a new route and return its visualization."""
    try:
        route = await client.generate(request.country, request.trip_type, request.city)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    if route is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Route generation service temporarily unavailable",
        )

    return assembler.assemble(route, request.trip_type, request.day)
