"""Application configuration and settings management."""

from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="PATHFINDER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "PathFinder Route Planner"
    api_prefix: str = "/api"
    log_level: str = "INFO"
    google_maps_api_key: Optional[str] = Field(
        default=None,
        description="API key for the Google Maps Places, Geocoding and Distance Matrix APIs.",
    )
    google_maps_base_url: str = Field(
        default="https://maps.googleapis.com/maps/api",
        description="Base URL for the Google Maps web services.",
    )
    google_maps_region: str = Field(default="us", description="Region bias used when geocoding.")
    maps_timeout_seconds: float = Field(default=10.0, gt=0.0)
    maps_max_retries: int = Field(default=3, ge=0)
    maps_backoff_seconds: float = Field(default=1.0, ge=0.0)
    distance_unit: Literal["mi", "km"] = Field(
        default="mi",
        description="Unit used for leg distances returned by the Google Maps client.",
    )
    nearby_search_radius_meters: int = Field(default=50000, ge=1, le=50000)
    max_parallel_requests: int = Field(
        default=1,
        ge=1,
        description="Worker threads used to evaluate routes. 1 evaluates sequentially.",
    )
    evaluation_window: int = Field(default=64, ge=1)
    max_route_combinations: int = Field(
        default=10000,
        ge=1,
        description="Upper bound on the number of candidate routes a single calculation may enumerate.",
    )
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        return str(value or "INFO").strip().upper()


settings = Settings()
