import math

import pytest

from distribution_planner.models.domain import CostFactors
from distribution_planner.services.planning.allocator import allocate, effective_capacity, price_allocation, rank_routes
from distribution_planner.services.planning.models import RouteScore


def _factors(**overrides) -> CostFactors:
    values = dict(
        fuel_cost_per_liter=1.5,
        driver_wage_per_hour=15,
        maintenance_cost_per_km=0.5,
        spoilage_rate=0,
        weather_condition="normal",
        traffic_multiplier=1.0,
        seasonal_demand_multiplier=1.0,
        storage_cost_per_liter=0.1,
        fuel_efficiency_good_road=8,
        fuel_efficiency_poor_road=6,
    )
    values.update(overrides)
    return CostFactors(**values)


def _score(source: int, destination: int, efficiency: float, road: str = "good", distance: float = 10) -> RouteScore:
    return RouteScore(
        source=source,
        destination=destination,
        cost=1 / efficiency,
        distance=distance,
        road_condition=road,
        road_multiplier=1.0,
        efficiency=efficiency,
    )


def test_rank_routes_is_stable_for_ties():
    routes = [_score(0, 0, 0.5), _score(0, 1, 0.9), _score(1, 0, 0.5), _score(1, 1, 0.9)]

    ranked = rank_routes(routes)

    assert [(r.source, r.destination) for r in ranked] == [(0, 1), (1, 1), (0, 0), (1, 0)]


def test_allocate_follows_efficiency_order_and_skips_exhausted_nodes():
    routes = [_score(0, 0, 0.2), _score(0, 1, 0.8), _score(1, 0, 0.6), _score(1, 1, 0.1)]
    supply = [300.0, 200.0]
    demand = [250.0, 250.0]

    allocations = allocate(routes, supply, demand, [[1, 1], [1, 1]], 100, _factors())

    assert [(a.source, a.destination, a.quantity) for a in allocations] == [
        (0, 1, 250.0),
        (1, 0, 200.0),
        (0, 0, 50.0),
    ]
    assert supply == [0.0, 0.0]
    assert demand == [0.0, 0.0]


def test_allocate_never_emits_empty_shipments():
    routes = [_score(0, 0, 1.0), _score(0, 1, 0.5)]
    allocations = allocate(routes, [0.0], [100.0, 100.0], [[1, 1]], 100, _factors())

    assert allocations == []


@pytest.mark.parametrize(
    "road, quantity, expected_trips",
    [
        ("good", 1000, 2),
        ("fair", 1001, 3),
        ("poor", 1000, 3),
        ("VERY-POOR", 800, 2),
        ("poorly paved", 1000, 2),
    ],
)
def test_trip_rounding_uses_effective_capacity(road, quantity, expected_trips):
    alloc = price_allocation(
        source=0,
        destination=0,
        quantity=quantity,
        base_cost=5,
        distance=40,
        road_condition=road,
        truck_capacity=500,
        factors=_factors(),
    )

    assert alloc.trips == expected_trips == math.ceil(quantity / effective_capacity(500, road))


def test_price_allocation_uses_two_tier_fuel_model():
    factors = _factors(traffic_multiplier=2.0, weather_condition="stormy")
    alloc = price_allocation(
        source=1,
        destination=2,
        quantity=400,
        base_cost=10,
        distance=60,
        road_condition="very-poor",
        truck_capacity=500,
        factors=factors,
    )

    assert alloc.trips == 1
    assert alloc.fuel_cost == pytest.approx(60 / 6 * 1.5)
    # Realized labor ignores traffic and weather penalties.
    assert alloc.labor_cost == pytest.approx(60 / 50 * 15)
    assert alloc.maintenance_cost == pytest.approx(30)
    assert alloc.transportation_cost == pytest.approx(4000)
    assert alloc.route_cost == pytest.approx(4000 + 15 + 18 + 30)
