"""Serializers for planning outputs."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict

from ..planning.models import Solution


def plan_to_json(solution: Solution) -> dict:
    return {
        "method": solution.method,
        "total_cost": solution.total_cost,
        "total_distance": solution.total_distance,
        "total_trips": solution.total_trips,
        "cost_breakdown": asdict(solution.cost_breakdown),
        "poor_road_routes": solution.poor_road_routes,
        "additional_fuel_cost": solution.additional_fuel_cost,
        "additional_delivery_time": solution.additional_delivery_time,
        "efficiency_reduction": solution.efficiency_reduction,
        "recommendations": list(solution.recommendations),
        "adjusted_demand": list(solution.adjusted_demand),
        "allocation": [asdict(alloc) for alloc in solution.allocation],
    }


def plan_to_csv(solution: Solution) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "source",
        "destination",
        "quantity",
        "distance",
        "road_condition",
        "trips",
        "transportation_cost",
        "fuel_cost",
        "labor_cost",
        "maintenance_cost",
        "route_cost",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for alloc in solution.allocation:
        writer.writerow({name: getattr(alloc, name) for name in fieldnames})
    return buffer.getvalue()
