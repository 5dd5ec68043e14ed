from collections import defaultdict

import pytest

pytest.importorskip("ortools")

from distribution_planner.models.domain import CostFactors
from distribution_planner.services.planning.cost_model import score_routes
from distribution_planner.services.planning.exact_solver import SolverError, solve_exact
from distribution_planner.services.planning.solver import InfeasibleProblemError, solve

SUPPLY = [1000, 1500]
DEMAND = [800, 700, 1000]
COSTS = [[10, 12, 8], [13, 9, 14]]
DISTANCES = [[50, 60, 40], [65, 45, 70]]
ROADS = [["good", "poor", "good"], ["poor", "good", "very-poor"]]


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


def _objective(solution, unit_costs) -> float:
    return sum(a.quantity * unit_costs[a.source, a.destination] for a in solution.allocation)


def test_solve_exact_beats_greedy_where_greedy_is_myopic():
    supply = [10, 10]
    demand = [10, 10]
    costs = [[1, 2], [3, 100]]
    distances = [[0, 0], [0, 0]]
    roads = [["good", "good"], ["good", "good"]]

    greedy = solve(supply, demand, costs, distances, roads, 500, _factors())
    exact = solve_exact(supply, demand, costs, distances, roads, 500, _factors())

    assert exact.method == "exact"
    assert sorted((a.source, a.destination, a.quantity) for a in exact.allocation) == [(0, 1, 10), (1, 0, 10)]
    assert exact.cost_breakdown.transportation == pytest.approx(50)
    assert greedy.cost_breakdown.transportation == pytest.approx(1010)
    assert exact.total_cost == pytest.approx(50 + 2)


def test_solve_exact_never_worse_than_greedy_and_conserves_flow():
    factors = _factors()
    unit_costs = {
        (r.source, r.destination): r.cost for r in score_routes(COSTS, DISTANCES, ROADS, 500, factors)
    }

    greedy = solve(SUPPLY, DEMAND, COSTS, DISTANCES, ROADS, 500, factors)
    exact = solve_exact(SUPPLY, DEMAND, COSTS, DISTANCES, ROADS, 500, factors)

    assert _objective(exact, unit_costs) <= _objective(greedy, unit_costs) + 1e-6

    by_source = defaultdict(float)
    by_destination = defaultdict(float)
    for alloc in exact.allocation:
        by_source[alloc.source] += alloc.quantity
        by_destination[alloc.destination] += alloc.quantity
    for source, quantity in by_source.items():
        assert quantity <= SUPPLY[source] + 1e-6
    for destination, quantity in by_destination.items():
        assert quantity <= DEMAND[destination] + 1e-6
    assert sum(by_destination.values()) == pytest.approx(sum(DEMAND))
    assert exact.total_cost == pytest.approx(exact.cost_breakdown.total)


def test_solve_exact_shares_feasibility_gate():
    with pytest.raises(InfeasibleProblemError):
        solve_exact([1], [2], [[1]], [[1]], [["good"]], 500, _factors())


def test_solve_exact_rejects_unknown_backend():
    with pytest.raises(SolverError):
        solve_exact([5], [5], [[1]], [[1]], [["good"]], 500, _factors(), backend="NOT_A_SOLVER")
