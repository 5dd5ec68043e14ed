"""Domain models for planning inputs."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import settings


@dataclass(frozen=True, slots=True)
class CostFactors:
    """Real-world cost drivers applied to every route of a single solve call.

    ``storage_capacity``, ``delivery_time_window`` and
    ``vehicle_breakdown_probability`` are carried along for reporting; the
    allocation math does not consume them.
    """

    fuel_cost_per_liter: float
    driver_wage_per_hour: float
    maintenance_cost_per_km: float
    spoilage_rate: float
    weather_condition: str
    traffic_multiplier: float
    seasonal_demand_multiplier: float
    storage_cost_per_liter: float
    fuel_efficiency_good_road: float
    fuel_efficiency_poor_road: float
    storage_capacity: tuple[float, ...] = field(default_factory=tuple)
    delivery_time_window: float = 8.0
    vehicle_breakdown_probability: float = 0.0

    @classmethod
    def from_settings(cls, source_count: int = 0, **overrides) -> "CostFactors":
        values = {
            "fuel_cost_per_liter": settings.fuel_cost_per_liter,
            "driver_wage_per_hour": settings.driver_wage_per_hour,
            "maintenance_cost_per_km": settings.maintenance_cost_per_km,
            "spoilage_rate": settings.spoilage_rate,
            "weather_condition": settings.weather_condition,
            "traffic_multiplier": settings.traffic_multiplier,
            "seasonal_demand_multiplier": settings.seasonal_demand_multiplier,
            "storage_cost_per_liter": settings.storage_cost_per_liter,
            "fuel_efficiency_good_road": settings.fuel_efficiency_good_road,
            "fuel_efficiency_poor_road": settings.fuel_efficiency_poor_road,
            "storage_capacity": tuple([settings.default_storage_capacity] * source_count),
            "delivery_time_window": settings.delivery_time_window_hours,
            "vehicle_breakdown_probability": settings.vehicle_breakdown_probability,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        values["storage_capacity"] = tuple(values["storage_capacity"])
        return cls(**values)


@dataclass(frozen=True, slots=True)
class RouteAttributes:
    """Immutable description of a single (source, destination) lane."""

    source: int
    destination: int
    base_cost: float
    distance_km: float
    road_condition: str
