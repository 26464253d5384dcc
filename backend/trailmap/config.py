"""
TrailMap Backend Configuration
Environment variables and settings management
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Route generation backend
    route_api_base_url: str = "http://localhost:5000"
    route_api_token: Optional[str] = None
    route_api_timeout_seconds: float = 60.0  # LLM generation is slow

    # Map framing
    fit_bounds_padding: int = 20
    fit_bounds_max_zoom: int = 13
    default_center_lat: float = 46.2276  # France
    default_center_lon: float = 2.2137
    default_zoom: int = 8

    # Visualization
    trekking_waypoint_markers: bool = False
    polyline_weight: int = 4
    polyline_opacity: float = 0.8

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


class VisualizationSettings(BaseModel):
    """Style and framing knobs for one visualization pass."""

    polyline_weight: int = 4
    polyline_opacity: float = 0.8
    fit_bounds_padding: int = 20
    fit_bounds_max_zoom: int = 13
    default_center_lat: float = 46.2276
    default_center_lon: float = 2.2137
    default_zoom: int = 8
    trekking_waypoint_markers: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "VisualizationSettings":
        return cls(
            polyline_weight=settings.polyline_weight,
            polyline_opacity=settings.polyline_opacity,
            fit_bounds_padding=settings.fit_bounds_padding,
            fit_bounds_max_zoom=settings.fit_bounds_max_zoom,
            default_center_lat=settings.default_center_lat,
            default_center_lon=settings.default_center_lon,
            default_zoom=settings.default_zoom,
            trekking_waypoint_markers=settings.trekking_waypoint_markers,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
