"""Planning orchestration service."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Literal

from ...config import settings
from ...models.domain import CostFactors
from ...persistence.filesystem import FileStorage
from ...schemas.planning import (
    AllocationModel,
    CostBreakdownModel,
    PlanningRequest,
    PlanningResponse,
    QuickPlanRequest,
    QuickPlanResponse,
)
from ..outputs.plan_formatter import plan_to_csv, plan_to_json
from .exact_solver import solve_exact
from .models import Solution
from .quick_solver import solve_quick
from .solver import solve

logger = logging.getLogger(__name__)

PlanningMethod = Literal["greedy", "exact"]


def _build_factors(payload: PlanningRequest) -> CostFactors:
    overrides = payload.factors.model_dump() if payload.factors else {}
    return CostFactors.from_settings(len(payload.supply), **overrides)


def _persist(solution: Solution, payload: PlanningRequest, factors: CostFactors) -> str:
    storage = FileStorage()
    run_dir = storage.make_run_directory(prefix=f"plan_{solution.method}")
    summary = plan_to_json(solution)
    summary["run_label"] = payload.run_label
    summary["factors"] = asdict(factors)
    summary["truck_capacity"] = payload.truck_capacity or settings.default_truck_capacity
    storage.write_json(run_dir / "summary.json", summary)
    storage.write_csv(run_dir / "allocations.csv", plan_to_csv(solution))
    logger.info("Persisted %s plan to %s", solution.method, run_dir)
    return str(run_dir)


def _to_response(solution: Solution, metadata: dict) -> PlanningResponse:
    return PlanningResponse(
        method=solution.method,
        allocation=[AllocationModel(**asdict(alloc)) for alloc in solution.allocation],
        total_cost=solution.total_cost,
        total_distance=solution.total_distance,
        total_trips=solution.total_trips,
        cost_breakdown=CostBreakdownModel(**asdict(solution.cost_breakdown)),
        poor_road_routes=solution.poor_road_routes,
        additional_fuel_cost=solution.additional_fuel_cost,
        additional_delivery_time=solution.additional_delivery_time,
        efficiency_reduction=solution.efficiency_reduction,
        recommendations=list(solution.recommendations),
        adjusted_demand=list(solution.adjusted_demand),
        metadata=metadata,
    )


def optimize_plan(payload: PlanningRequest, method: PlanningMethod = "greedy") -> PlanningResponse:
    factors = _build_factors(payload)
    truck_capacity = payload.truck_capacity or settings.default_truck_capacity
    planner = solve_exact if method == "exact" else solve

    logger.info(
        "Planning %s distribution for %d sources and %d destinations",
        method,
        len(payload.supply),
        len(payload.demand),
    )
    solution = planner(
        payload.supply,
        payload.demand,
        payload.cost_matrix,
        payload.distance_matrix,
        payload.road_conditions,
        truck_capacity,
        factors,
    )

    metadata: dict = {
        "sources": len(payload.supply),
        "destinations": len(payload.demand),
        "truck_capacity": truck_capacity,
        "weather_condition": factors.weather_condition,
    }
    if payload.persist:
        metadata["run_directory"] = _persist(solution, payload, factors)
    return _to_response(solution, metadata)


def quick_plan(payload: QuickPlanRequest) -> QuickPlanResponse:
    truck_capacity = payload.truck_capacity or settings.default_truck_capacity
    plan = solve_quick(
        payload.supply,
        payload.demand,
        payload.cost_matrix,
        payload.road_conditions,
        truck_capacity,
    )
    return QuickPlanResponse.model_validate(asdict(plan))
