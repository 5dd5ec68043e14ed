"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="DP_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Milk Distribution Planner API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Root directory for persisted plan outputs.")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Fleet and cost factor defaults, used when a request omits a value
    default_truck_capacity: float = Field(default=500.0, gt=0.0)
    fuel_cost_per_liter: float = Field(default=1.5, ge=0.0)
    driver_wage_per_hour: float = Field(default=15.0, ge=0.0)
    maintenance_cost_per_km: float = Field(default=0.5, ge=0.0)
    spoilage_rate: float = Field(default=2.0, ge=0.0, le=100.0, description="Percentage of cost lost to spoilage.")
    weather_condition: Literal["excellent", "normal", "rainy", "stormy"] = "normal"
    traffic_multiplier: float = Field(default=1.0, gt=0.0)
    seasonal_demand_multiplier: float = Field(default=1.0, ge=0.0)
    default_storage_capacity: float = Field(default=2000.0, ge=0.0, description="Storage per collection point (litres).")
    storage_cost_per_liter: float = Field(default=0.1, ge=0.0)
    delivery_time_window_hours: float = Field(default=8.0, gt=0.0)
    vehicle_breakdown_probability: float = Field(default=0.05, ge=0.0, le=1.0)
    fuel_efficiency_good_road: float = Field(default=8.0, gt=0.0, description="km per litre on good roads.")
    fuel_efficiency_poor_road: float = Field(default=6.0, gt=0.0, description="km per litre on poor roads.")

    exact_solver_backend: str = Field(default="GLOP", description="OR-Tools linear solver backend.")
    solver_time_limit_seconds: int = Field(default=30, ge=0)

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

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


settings = Settings()
