"""Route cost modeling: adjusted per-unit cost and efficiency for every lane."""

from __future__ import annotations

from typing import Iterator, Sequence

from ...models.domain import CostFactors, RouteAttributes
from .conditions import road_adjustment, weather_adjustment
from .models import RouteScore

AVERAGE_SPEED_KMH = 50.0


def iter_routes(
    cost_matrix: Sequence[Sequence[float]],
    distance_matrix: Sequence[Sequence[float]],
    road_conditions: Sequence[Sequence[str]],
) -> Iterator[RouteAttributes]:
    """Yield every (source, destination) lane in row-major order."""
    for i, cost_row in enumerate(cost_matrix):
        for j, base_cost in enumerate(cost_row):
            yield RouteAttributes(
                source=i,
                destination=j,
                base_cost=base_cost,
                distance_km=distance_matrix[i][j],
                road_condition=road_conditions[i][j],
            )


def score_route(route: RouteAttributes, truck_capacity: float, factors: CostFactors) -> RouteScore:
    fuel_efficiency, road_multiplier = road_adjustment(
        route.road_condition,
        factors.fuel_efficiency_good_road,
        factors.fuel_efficiency_poor_road,
    )
    weather_fuel, weather_road = weather_adjustment(factors.weather_condition)
    fuel_efficiency *= weather_fuel
    road_multiplier *= weather_road
    road_multiplier *= factors.traffic_multiplier

    distance = route.distance_km
    fuel_cost_per_trip = (distance / fuel_efficiency) * factors.fuel_cost_per_liter
    labor_cost_per_trip = (distance / AVERAGE_SPEED_KMH) * factors.driver_wage_per_hour * road_multiplier
    maintenance_cost_per_trip = distance * factors.maintenance_cost_per_km

    unit_cost = route.base_cost + (fuel_cost_per_trip + labor_cost_per_trip + maintenance_cost_per_trip) / truck_capacity
    weighted_cost = unit_cost * road_multiplier
    # A free lane ranks ahead of everything else.
    efficiency = 1 / weighted_cost if weighted_cost != 0 else float("inf")

    return RouteScore(
        source=route.source,
        destination=route.destination,
        cost=unit_cost,
        distance=distance,
        road_condition=route.road_condition,
        road_multiplier=road_multiplier,
        efficiency=efficiency,
    )


def score_routes(
    cost_matrix: Sequence[Sequence[float]],
    distance_matrix: Sequence[Sequence[float]],
    road_conditions: Sequence[Sequence[str]],
    truck_capacity: float,
    factors: CostFactors,
) -> list[RouteScore]:
    return [
        score_route(route, truck_capacity, factors)
        for route in iter_routes(cost_matrix, distance_matrix, road_conditions)
    ]
