"""Greedy distribution planner entry point."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...models.domain import CostFactors
from .advisor import summarize
from .allocator import allocate
from .cost_model import score_routes
from .models import Solution

logger = logging.getLogger(__name__)

INFEASIBLE_MESSAGE = "Total supply is less than total demand. Problem is infeasible."


class InfeasibleProblemError(ValueError):
    """Raised when total supply cannot cover total demand."""

    def __init__(self, message: str = INFEASIBLE_MESSAGE) -> None:
        super().__init__(message)


def ensure_feasible(supply: Sequence[float], demand: Sequence[float], message: str = INFEASIBLE_MESSAGE) -> None:
    total_supply = sum(supply)
    total_demand = sum(demand)
    if total_supply < total_demand:
        logger.warning("Infeasible plan requested: supply=%s demand=%s", total_supply, total_demand)
        raise InfeasibleProblemError(message)


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def seasonal_demand(demand: Sequence[float], multiplier: float) -> list[float]:
    """Scale demand by the seasonal multiplier, rounded to whole units."""
    return [_round_half_up(quantity * multiplier) for quantity in demand]


def solve(
    supply: Sequence[float],
    demand: Sequence[float],
    cost_matrix: Sequence[Sequence[float]],
    distance_matrix: Sequence[Sequence[float]],
    road_conditions: Sequence[Sequence[str]],
    truck_capacity: float,
    factors: CostFactors,
) -> Solution:
    """Build a cost-aware shipment plan with the efficiency-ranked greedy heuristic.

    The feasibility gate compares raw supply against raw demand; the seasonal
    multiplier is applied afterwards. When the adjusted demand exceeds supply,
    allocation simply stops once every source is exhausted.
    """
    ensure_feasible(supply, demand)

    adjusted_demand = seasonal_demand(demand, factors.seasonal_demand_multiplier)
    remaining_supply = list(supply)
    remaining_demand = list(adjusted_demand)

    routes = score_routes(cost_matrix, distance_matrix, road_conditions, truck_capacity, factors)
    allocations = allocate(routes, remaining_supply, remaining_demand, cost_matrix, truck_capacity, factors)
    solution = summarize(allocations, supply, truck_capacity, factors)
    solution.adjusted_demand = adjusted_demand

    logger.info(
        "Greedy plan: %d sources, %d destinations, %d allocations, %d trips, total cost %.2f",
        len(supply),
        len(demand),
        len(solution.allocation),
        solution.total_trips,
        solution.total_cost,
    )
    return solution
