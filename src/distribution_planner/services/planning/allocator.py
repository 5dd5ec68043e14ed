"""Greedy flow allocation over efficiency-ranked routes."""

from __future__ import annotations

import math
from typing import Sequence

from ...models.domain import CostFactors
from .conditions import is_poor, reduces_capacity
from .cost_model import AVERAGE_SPEED_KMH
from .models import Allocation, RouteScore

POOR_ROAD_LOAD_FACTOR = 0.8


def effective_capacity(truck_capacity: float, road_condition: str) -> float:
    if reduces_capacity(road_condition):
        return truck_capacity * POOR_ROAD_LOAD_FACTOR
    return truck_capacity


def price_allocation(
    *,
    source: int,
    destination: int,
    quantity: float,
    base_cost: float,
    distance: float,
    road_condition: str,
    truck_capacity: float,
    factors: CostFactors,
) -> Allocation:
    """Cost a single shipment with the two-tier (good/poor) realized model."""
    trips = math.ceil(quantity / effective_capacity(truck_capacity, road_condition))
    fuel_efficiency = factors.fuel_efficiency_poor_road if is_poor(road_condition) else factors.fuel_efficiency_good_road

    fuel_cost = trips * (distance / fuel_efficiency) * factors.fuel_cost_per_liter
    labor_cost = trips * (distance / AVERAGE_SPEED_KMH) * factors.driver_wage_per_hour
    maintenance_cost = trips * distance * factors.maintenance_cost_per_km
    transportation_cost = quantity * base_cost

    return Allocation(
        source=source,
        destination=destination,
        quantity=quantity,
        distance=distance,
        road_condition=road_condition,
        trips=trips,
        route_cost=transportation_cost + fuel_cost + labor_cost + maintenance_cost,
        transportation_cost=transportation_cost,
        fuel_cost=fuel_cost,
        labor_cost=labor_cost,
        maintenance_cost=maintenance_cost,
    )


def rank_routes(routes: Sequence[RouteScore]) -> list[RouteScore]:
    """Best efficiency first; ties keep their original order."""
    return sorted(routes, key=lambda route: route.efficiency, reverse=True)


def allocate(
    routes: Sequence[RouteScore],
    remaining_supply: list[float],
    remaining_demand: list[float],
    cost_matrix: Sequence[Sequence[float]],
    truck_capacity: float,
    factors: CostFactors,
) -> list[Allocation]:
    """Assign flow along ranked routes until supply or demand runs out.

    ``remaining_supply`` and ``remaining_demand`` are decremented in place;
    callers pass working copies.
    """
    allocations: list[Allocation] = []
    for route in rank_routes(routes):
        source, destination = route.source, route.destination
        if remaining_supply[source] <= 0 or remaining_demand[destination] <= 0:
            continue

        quantity = min(remaining_supply[source], remaining_demand[destination])
        allocations.append(
            price_allocation(
                source=source,
                destination=destination,
                quantity=quantity,
                base_cost=cost_matrix[source][destination],
                distance=route.distance,
                road_condition=route.road_condition,
                truck_capacity=truck_capacity,
                factors=factors,
            )
        )
        remaining_supply[source] -= quantity
        remaining_demand[destination] -= quantity
    return allocations
