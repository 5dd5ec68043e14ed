"""Aggregation of allocations into totals, road-impact metrics and advice."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import CostFactors
from .conditions import is_poor
from .cost_model import AVERAGE_SPEED_KMH
from .models import Allocation, CostBreakdown, Solution

POOR_ROAD_SPEED_KMH = 30.0
HIGH_SPOILAGE_RATE = 3.0
TRIPS_PER_SOURCE_LIMIT = 3
MIN_TRUCK_UTILIZATION = 0.7

GPS_TRACKING_ADVICE = "Implement GPS tracking for real-time route optimization"
HUBS_ADVICE = "Consider establishing intermediate distribution hubs"


def _cost_breakdown(
    allocations: Sequence[Allocation],
    supply: Sequence[float],
    factors: CostFactors,
) -> CostBreakdown:
    route_total = sum(alloc.route_cost for alloc in allocations)
    return CostBreakdown(
        transportation=sum(alloc.transportation_cost for alloc in allocations),
        fuel=sum(alloc.fuel_cost for alloc in allocations),
        labor=sum(alloc.labor_cost for alloc in allocations),
        maintenance=sum(alloc.maintenance_cost for alloc in allocations),
        # Storage is charged on everything collected, shipped or not.
        storage=sum(quantity * factors.storage_cost_per_liter for quantity in supply),
        spoilage=route_total * (factors.spoilage_rate / 100),
    )


def good_road_fuel_baseline(allocations: Sequence[Allocation], factors: CostFactors) -> float:
    """Fuel cost had every allocated route been a good road."""
    return sum(
        alloc.trips * (alloc.distance / factors.fuel_efficiency_good_road) * factors.fuel_cost_per_liter
        for alloc in allocations
    )


def additional_delivery_hours(allocations: Sequence[Allocation]) -> float:
    actual = sum(
        alloc.trips * (alloc.distance / (POOR_ROAD_SPEED_KMH if is_poor(alloc.road_condition) else AVERAGE_SPEED_KMH))
        for alloc in allocations
    )
    baseline = sum(alloc.trips * (alloc.distance / AVERAGE_SPEED_KMH) for alloc in allocations)
    return actual - baseline


def recommend(
    *,
    poor_road_routes: int,
    total_trips: int,
    shipped_quantity: float,
    source_count: int,
    truck_capacity: float,
    factors: CostFactors,
) -> list[str]:
    recommendations: list[str] = []

    if poor_road_routes > 0:
        recommendations.append(f"Prioritize road improvements for {poor_road_routes} routes with poor conditions")

    if factors.spoilage_rate > HIGH_SPOILAGE_RATE:
        recommendations.append("Consider refrigerated trucks to reduce spoilage rate")

    if total_trips > source_count * TRIPS_PER_SOURCE_LIMIT:
        recommendations.append("Consider increasing truck capacity or adding more vehicles")

    if total_trips > 0 and shipped_quantity / (truck_capacity * total_trips) < MIN_TRUCK_UTILIZATION:
        recommendations.append("Optimize route consolidation to improve truck utilization")

    recommendations.append(GPS_TRACKING_ADVICE)
    recommendations.append(HUBS_ADVICE)
    return recommendations


def summarize(
    allocations: Sequence[Allocation],
    supply: Sequence[float],
    truck_capacity: float,
    factors: CostFactors,
) -> Solution:
    """Reduce allocations into a :class:`Solution`; inputs are left untouched."""
    breakdown = _cost_breakdown(allocations, supply, factors)
    route_total = sum(alloc.route_cost for alloc in allocations)
    total_trips = sum(alloc.trips for alloc in allocations)
    poor_road_routes = sum(1 for alloc in allocations if is_poor(alloc.road_condition))

    baseline = good_road_fuel_baseline(allocations, factors)
    additional_fuel_cost = breakdown.fuel - baseline
    efficiency_reduction = (additional_fuel_cost / baseline) * 100 if baseline else 0.0

    recommendations = recommend(
        poor_road_routes=poor_road_routes,
        total_trips=total_trips,
        shipped_quantity=sum(alloc.quantity for alloc in allocations),
        source_count=len(supply),
        truck_capacity=truck_capacity,
        factors=factors,
    )

    return Solution(
        allocation=list(allocations),
        total_cost=route_total + breakdown.storage + breakdown.spoilage,
        total_distance=sum(alloc.distance * alloc.trips for alloc in allocations),
        total_trips=total_trips,
        cost_breakdown=breakdown,
        poor_road_routes=poor_road_routes,
        additional_fuel_cost=additional_fuel_cost,
        additional_delivery_time=additional_delivery_hours(allocations),
        efficiency_reduction=efficiency_reduction,
        recommendations=recommendations,
    )
