"""Cost-only greedy planner.

A lighter variant of :mod:`.solver` that ranks lanes by base cost alone, with a
flat 30 % surcharge on poor roads, and reports trip counts plus a few simple
route-efficiency indicators. No fuel, labor or weather modeling is involved.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

from .solver import ensure_feasible

logger = logging.getLogger(__name__)

QUICK_INFEASIBLE_MESSAGE = "Total supply is less than total demand. The problem is infeasible."
POOR_ROAD_SURCHARGE = 1.3
POOR_ROAD_IMPACT_PERCENT = 30.0
POOR_ROAD_LOAD_FACTOR = 0.8


@dataclass(slots=True)
class QuickAllocation:
    source: int
    destination: int
    quantity: float
    road_condition: str
    trips: int


@dataclass(slots=True)
class QuickRoute:
    source: int
    destination: int
    cost: float
    road_condition: str
    efficiency: float | None = None


@dataclass(slots=True)
class QuickPlan:
    allocation: List[QuickAllocation]
    total_cost: float
    total_trips: int
    poor_road_count: int
    poor_road_impact: float
    most_efficient_route: QuickRoute
    least_efficient_route: QuickRoute
    avg_trips_per_route: float
    road_improvement_priority: QuickRoute


def _is_poor(road_condition: str) -> bool:
    return road_condition.lower() == "poor"


def solve_quick(
    supply: Sequence[float],
    demand: Sequence[float],
    cost_matrix: Sequence[Sequence[float]],
    road_conditions: Sequence[Sequence[str]],
    truck_capacity: float,
) -> QuickPlan:
    ensure_feasible(supply, demand, QUICK_INFEASIBLE_MESSAGE)

    remaining_supply = list(supply)
    remaining_demand = list(demand)

    routes: list[QuickRoute] = []
    for i in range(len(supply)):
        for j in range(len(demand)):
            cost = cost_matrix[i][j]
            if _is_poor(road_conditions[i][j]):
                cost *= POOR_ROAD_SURCHARGE
            routes.append(QuickRoute(source=i, destination=j, cost=cost, road_condition=road_conditions[i][j]))

    routes.sort(key=lambda route: route.cost)

    allocation: list[QuickAllocation] = []
    for route in routes:
        source, destination = route.source, route.destination
        if remaining_supply[source] <= 0 or remaining_demand[destination] <= 0:
            continue
        quantity = min(remaining_supply[source], remaining_demand[destination])
        capacity = truck_capacity * POOR_ROAD_LOAD_FACTOR if _is_poor(route.road_condition) else truck_capacity
        allocation.append(
            QuickAllocation(
                source=source,
                destination=destination,
                quantity=quantity,
                road_condition=route.road_condition,
                trips=math.ceil(quantity / capacity),
            )
        )
        remaining_supply[source] -= quantity
        remaining_demand[destination] -= quantity

    total_cost = sum(cost_matrix[a.source][a.destination] * a.quantity for a in allocation)
    total_trips = sum(a.trips for a in allocation)
    poor_road_count = sum(1 for a in allocation if _is_poor(a.road_condition))

    ranked = sorted(
        (
            QuickRoute(
                source=a.source,
                destination=a.destination,
                cost=cost_matrix[a.source][a.destination],
                road_condition=a.road_condition,
                efficiency=a.quantity / a.trips,
            )
            for a in allocation
        ),
        key=lambda route: route.efficiency,
        reverse=True,
    )
    most_efficient = ranked[0] if ranked else routes[0]
    least_efficient = ranked[-1] if ranked else routes[-1]

    poor_allocations = sorted(
        (a for a in allocation if _is_poor(a.road_condition)),
        key=lambda a: a.quantity,
        reverse=True,
    )
    if poor_allocations:
        top = poor_allocations[0]
        priority = QuickRoute(source=top.source, destination=top.destination, cost=0.0, road_condition="poor")
    else:
        priority = QuickRoute(source=0, destination=0, cost=0.0, road_condition="good")

    logger.info("Quick plan: %d allocations, %d trips, total cost %.2f", len(allocation), total_trips, total_cost)
    return QuickPlan(
        allocation=allocation,
        total_cost=total_cost,
        total_trips=total_trips,
        poor_road_count=poor_road_count,
        poor_road_impact=POOR_ROAD_IMPACT_PERCENT,
        most_efficient_route=most_efficient,
        least_efficient_route=least_efficient,
        avg_trips_per_route=total_trips / len(allocation) if allocation else 0.0,
        road_improvement_priority=priority,
    )
