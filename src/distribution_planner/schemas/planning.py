"""Planning request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

MAX_NODES = 10


def _check_non_negative(values: List[float], label: str) -> List[float]:
    if any(value < 0 for value in values):
        raise ValueError(f"{label} values must be non-negative.")
    return values


def _check_matrix(matrix: list[list], rows: int, columns: int, label: str) -> None:
    if len(matrix) != rows or any(len(row) != columns for row in matrix):
        raise ValueError(f"{label} must have {rows} rows of {columns} columns (sources x destinations).")


class CostFactorsModel(BaseModel):
    """Optional overrides for the configured cost factors."""

    fuel_cost_per_liter: Optional[float] = Field(None, ge=0)
    driver_wage_per_hour: Optional[float] = Field(None, ge=0)
    maintenance_cost_per_km: Optional[float] = Field(None, ge=0)
    spoilage_rate: Optional[float] = Field(None, ge=0, le=10, description="Spoilage rate in percent.")
    weather_condition: Optional[Literal["excellent", "normal", "rainy", "stormy"]] = None
    traffic_multiplier: Optional[float] = Field(None, ge=0.5, le=3)
    seasonal_demand_multiplier: Optional[float] = Field(None, ge=0)
    storage_capacity: Optional[List[float]] = Field(None, description="Storage capacity per source (litres).")
    storage_cost_per_liter: Optional[float] = Field(None, ge=0)
    delivery_time_window: Optional[float] = Field(None, ge=1, le=24)
    vehicle_breakdown_probability: Optional[float] = Field(None, ge=0, le=0.2)
    fuel_efficiency_good_road: Optional[float] = Field(None, gt=0)
    fuel_efficiency_poor_road: Optional[float] = Field(None, gt=0)

    @field_validator("storage_capacity")
    @classmethod
    def _storage_non_negative(cls, value: Optional[List[float]]) -> Optional[List[float]]:
        if value is None:
            return value
        return _check_non_negative(value, "storage_capacity")


class QuickPlanRequest(BaseModel):
    supply: List[float] = Field(..., min_length=1, max_length=MAX_NODES)
    demand: List[float] = Field(..., min_length=1, max_length=MAX_NODES)
    cost_matrix: List[List[float]]
    road_conditions: List[List[str]]
    truck_capacity: Optional[float] = Field(None, gt=0, description="Defaults to the configured capacity.")

    @field_validator("supply", "demand")
    @classmethod
    def _quantities_non_negative(cls, value: List[float], info: ValidationInfo) -> List[float]:
        return _check_non_negative(value, info.field_name)

    @field_validator("cost_matrix")
    @classmethod
    def _costs_non_negative(cls, value: List[List[float]]) -> List[List[float]]:
        for row in value:
            _check_non_negative(row, "cost_matrix")
        return value

    @model_validator(mode="after")
    def _check_dimensions(self):
        rows, columns = len(self.supply), len(self.demand)
        _check_matrix(self.cost_matrix, rows, columns, "cost_matrix")
        _check_matrix(self.road_conditions, rows, columns, "road_conditions")
        return self


class PlanningRequest(QuickPlanRequest):
    distance_matrix: List[List[float]]
    factors: Optional[CostFactorsModel] = None
    persist: bool = False
    run_label: Optional[str] = Field(default=None, description="Friendly name for persisted outputs.")

    @field_validator("distance_matrix")
    @classmethod
    def _distances_non_negative(cls, value: List[List[float]]) -> List[List[float]]:
        for row in value:
            _check_non_negative(row, "distance_matrix")
        return value

    @model_validator(mode="after")
    def _check_distance_dimensions(self):
        _check_matrix(self.distance_matrix, len(self.supply), len(self.demand), "distance_matrix")
        if self.factors and self.factors.storage_capacity is not None:
            if len(self.factors.storage_capacity) != len(self.supply):
                raise ValueError("storage_capacity must have one entry per source.")
        return self


class AllocationModel(BaseModel):
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


class CostBreakdownModel(BaseModel):
    transportation: float
    fuel: float
    labor: float
    maintenance: float
    storage: float
    spoilage: float


class PlanningResponse(BaseModel):
    method: str
    allocation: List[AllocationModel]
    total_cost: float
    total_distance: float
    total_trips: int
    cost_breakdown: CostBreakdownModel
    poor_road_routes: int
    additional_fuel_cost: float
    additional_delivery_time: float
    efficiency_reduction: float
    recommendations: List[str]
    adjusted_demand: List[float]
    metadata: dict = Field(default_factory=dict)


class QuickAllocationModel(BaseModel):
    source: int
    destination: int
    quantity: float
    road_condition: str
    trips: int


class QuickRouteModel(BaseModel):
    source: int
    destination: int
    cost: float
    road_condition: str
    efficiency: Optional[float] = None


class QuickPlanResponse(BaseModel):
    allocation: List[QuickAllocationModel]
    total_cost: float
    total_trips: int
    poor_road_count: int
    poor_road_impact: float
    most_efficient_route: QuickRouteModel
    least_efficient_route: QuickRouteModel
    avg_trips_per_route: float
    road_improvement_priority: QuickRouteModel
