"""OR-Tools linear-programming alternative to the greedy planner."""

from __future__ import annotations

import logging
from typing import Sequence

try:
    from ortools.linear_solver import pywraplp
    ORTOOLS_AVAILABLE = True
except ImportError:
    ORTOOLS_AVAILABLE = False
    pywraplp = None

from ...config import settings
from ...models.domain import CostFactors
from .advisor import summarize
from .allocator import price_allocation
from .cost_model import score_routes
from .models import Solution
from .solver import ensure_feasible, seasonal_demand

logger = logging.getLogger(__name__)

# Flows are rounded to this many decimals before pricing; smaller ones are dropped.
FLOW_DECIMALS = 6


class SolverError(RuntimeError):
    """Raised when the linear program cannot be built or solved to optimality."""


def solve_exact(
    supply: Sequence[float],
    demand: Sequence[float],
    cost_matrix: Sequence[Sequence[float]],
    distance_matrix: Sequence[Sequence[float]],
    road_conditions: Sequence[Sequence[str]],
    truck_capacity: float,
    factors: CostFactors,
    *,
    backend: str | None = None,
) -> Solution:
    """Minimize total adjusted per-unit cost subject to supply and demand limits.

    The objective uses the modeled per-unit cost of each lane, so trip
    rounding is only applied afterwards when the optimal flows are priced.
    Total shipped volume equals ``min(total supply, total adjusted demand)``,
    matching what the greedy planner delivers.
    """
    if not ORTOOLS_AVAILABLE:
        raise SolverError("OR-Tools is not installed. The exact planner requires the 'ortools' package.")

    ensure_feasible(supply, demand)
    adjusted_demand = seasonal_demand(demand, factors.seasonal_demand_multiplier)
    routes = score_routes(cost_matrix, distance_matrix, road_conditions, truck_capacity, factors)

    backend = backend or settings.exact_solver_backend
    solver = pywraplp.Solver.CreateSolver(backend)
    if solver is None:
        raise SolverError(f"OR-Tools backend '{backend}' is not available.")
    if settings.solver_time_limit_seconds:
        solver.SetTimeLimit(settings.solver_time_limit_seconds * 1000)

    flows = {
        (route.source, route.destination): solver.NumVar(0.0, solver.infinity(), f"x_{route.source}_{route.destination}")
        for route in routes
    }

    for i, quantity in enumerate(supply):
        solver.Add(solver.Sum([flows[i, j] for j in range(len(adjusted_demand))]) <= quantity)
    for j, quantity in enumerate(adjusted_demand):
        solver.Add(solver.Sum([flows[i, j] for i in range(len(supply))]) <= quantity)
    solver.Add(solver.Sum(list(flows.values())) == min(sum(supply), sum(adjusted_demand)))

    solver.Minimize(solver.Sum([route.cost * flows[route.source, route.destination] for route in routes]))

    status = solver.Solve()
    if status != pywraplp.Solver.OPTIMAL:
        logger.error("Exact planner failed with status %s (backend=%s)", status, backend)
        raise SolverError(f"Linear program did not reach an optimal solution (status {status}).")

    allocations = []
    for route in routes:
        quantity = round(flows[route.source, route.destination].solution_value(), FLOW_DECIMALS)
        if quantity <= 0:
            continue
        allocations.append(
            price_allocation(
                source=route.source,
                destination=route.destination,
                quantity=quantity,
                base_cost=cost_matrix[route.source][route.destination],
                distance=route.distance,
                road_condition=route.road_condition,
                truck_capacity=truck_capacity,
                factors=factors,
            )
        )

    solution = summarize(allocations, supply, truck_capacity, factors)
    solution.adjusted_demand = adjusted_demand
    solution.method = "exact"
    logger.info(
        "Exact plan (%s): objective %.2f, %d allocations, total cost %.2f",
        backend,
        solver.Objective().Value(),
        len(allocations),
        solution.total_cost,
    )
    return solution
