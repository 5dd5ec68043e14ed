"""Planning domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class RouteScore:
    source: int
    destination: int
    cost: float
    distance: float
    road_condition: str
    road_multiplier: float
    efficiency: float


@dataclass(frozen=True, slots=True)
class Allocation:
    source: int
    destination: int
    quantity: float
    distance: float
    road_condition: str
    trips: int
    route_cost: float
    transportation_cost: float
    fuel_cost: float
    labor_cost: float
    maintenance_cost: float


@dataclass(slots=True)
class CostBreakdown:
    transportation: float
    fuel: float
    labor: float
    maintenance: float
    storage: float
    spoilage: float

    @property
    def total(self) -> float:
        return self.transportation + self.fuel + self.labor + self.maintenance + self.storage + self.spoilage


@dataclass(slots=True)
class Solution:
    allocation: List[Allocation]
    total_cost: float
    total_distance: float
    total_trips: int
    cost_breakdown: CostBreakdown
    poor_road_routes: int
    additional_fuel_cost: float
    additional_delivery_time: float
    efficiency_reduction: float
    recommendations: List[str]
    adjusted_demand: List[float] = field(default_factory=list)
    method: str = "greedy"
