"""Distribution planning endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.planning import PlanningRequest, PlanningResponse, QuickPlanRequest, QuickPlanResponse
from ...services.planning.exact_solver import SolverError
from ...services.planning.service import PlanningMethod, optimize_plan, quick_plan
from ...services.planning.solver import InfeasibleProblemError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/plans", tags=["plans"])


def _run_plan(payload: PlanningRequest, method: PlanningMethod) -> PlanningResponse:
    try:
        return optimize_plan(payload, method=method)
    except InfeasibleProblemError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except SolverError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error planning distribution (%s): %s", method, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to plan distribution: {str(exc)}"
        ) from exc


@router.post("/optimize", response_model=PlanningResponse, status_code=status.HTTP_200_OK)
def optimize(payload: PlanningRequest) -> PlanningResponse:
    """Greedy, efficiency-ranked plan with the full cost model."""
    return _run_plan(payload, "greedy")


@router.post("/exact", response_model=PlanningResponse, status_code=status.HTTP_200_OK)
def optimize_exact(payload: PlanningRequest) -> PlanningResponse:
    """Linear-programming plan over the same per-unit cost model."""
    return _run_plan(payload, "exact")


@router.post("/quick", response_model=QuickPlanResponse, status_code=status.HTTP_200_OK)
def optimize_quick(payload: QuickPlanRequest) -> QuickPlanResponse:
    try:
        return quick_plan(payload)
    except InfeasibleProblemError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
