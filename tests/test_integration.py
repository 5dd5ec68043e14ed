import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from distribution_planner.main import create_app
from distribution_planner.schemas.planning import PlanningRequest, QuickPlanRequest


def _request(**overrides) -> dict:
    payload = {
        "supply": [1000, 1500],
        "demand": [800, 700, 1000],
        "cost_matrix": [[10, 12, 8], [13, 9, 14]],
        "distance_matrix": [[50, 60, 40], [65, 45, 70]],
        "road_conditions": [["good", "poor", "good"], ["poor", "good", "poor"]],
        "truck_capacity": 500,
        "factors": {"spoilage_rate": 2, "weather_condition": "normal", "fuel_efficiency_poor_road": 6},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def api_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    from distribution_planner.persistence.filesystem import FileStorage
    from distribution_planner.services.planning import service as planning_service

    # keep persisted runs inside the test directory
    monkeypatch.setattr(planning_service, "FileStorage", lambda: FileStorage(root=tmp_path))
    return TestClient(create_app())


def test_root_and_health(api_client: TestClient):
    assert api_client.get("/").json()["status"] == "running"
    assert api_client.get("/api/health").json() == {"status": "ok"}
    assert api_client.get("/api/health/solvers").json()["greedy"] is True


def test_optimize_endpoint_returns_plan(api_client: TestClient):
    response = api_client.post("/api/plans/optimize", json=PlanningRequest(**_request()).model_dump())

    assert response.status_code == 200
    payload = response.json()
    assert payload["method"] == "greedy"
    assert payload["allocation"]
    assert payload["total_trips"] == sum(item["trips"] for item in payload["allocation"])
    breakdown = payload["cost_breakdown"]
    assert payload["total_cost"] == pytest.approx(sum(breakdown.values()))
    assert payload["recommendations"][-1] == "Consider establishing intermediate distribution hubs"
    assert payload["metadata"]["truck_capacity"] == 500
    assert "run_directory" not in payload["metadata"]


def test_optimize_endpoint_surfaces_infeasible_message(api_client: TestClient):
    response = api_client.post("/api/plans/optimize", json=_request(supply=[100, 100]))

    assert response.status_code == 400
    assert response.json()["detail"] == "Total supply is less than total demand. Problem is infeasible."


def test_optimize_endpoint_rejects_ragged_matrices(api_client: TestClient):
    response = api_client.post("/api/plans/optimize", json=_request(distance_matrix=[[50, 60], [65, 45, 70]]))

    assert response.status_code == 422


def test_optimize_endpoint_rejects_out_of_range_factors(api_client: TestClient):
    response = api_client.post("/api/plans/optimize", json=_request(factors={"traffic_multiplier": 5}))

    assert response.status_code == 422


def test_optimize_endpoint_persists_outputs(api_client: TestClient, tmp_path: Path):
    response = api_client.post("/api/plans/optimize", json=_request(persist=True, run_label="weekday"))

    assert response.status_code == 200
    run_dir = Path(response.json()["metadata"]["run_directory"])
    assert run_dir.parent == tmp_path / "outputs"

    summary = json.loads((run_dir / "summary.json").read_text(encoding="utf-8"))
    assert summary["run_label"] == "weekday"
    assert summary["method"] == "greedy"
    assert summary["factors"]["spoilage_rate"] == 2
    assert len(summary["factors"]["storage_capacity"]) == 2

    allocations = (run_dir / "allocations.csv").read_text(encoding="utf-8")
    assert allocations.startswith("source,destination,quantity")
    assert len(allocations.strip().splitlines()) == len(summary["allocation"]) + 1


def test_exact_endpoint_returns_plan(api_client: TestClient):
    pytest.importorskip("ortools")

    response = api_client.post("/api/plans/exact", json=_request())

    assert response.status_code == 200
    payload = response.json()
    assert payload["method"] == "exact"
    assert sum(item["quantity"] for item in payload["allocation"]) == pytest.approx(2500)


def test_quick_endpoint_returns_plan(api_client: TestClient):
    request = QuickPlanRequest(
        supply=[1000, 1500],
        demand=[800, 700, 1000],
        cost_matrix=[[10, 12, 8], [13, 9, 14]],
        road_conditions=[["good", "poor", "good"], ["poor", "good", "poor"]],
        truck_capacity=500,
    )
    response = api_client.post("/api/plans/quick", json=request.model_dump())

    assert response.status_code == 200
    payload = response.json()
    assert payload["total_trips"] == 6
    assert payload["poor_road_impact"] == 30
    assert payload["road_improvement_priority"]["road_condition"] == "poor"
