"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...services.planning.exact_solver import ORTOOLS_AVAILABLE

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/solvers", status_code=status.HTTP_200_OK)
def health_solvers() -> dict:
    """Report which planning methods can run in this deployment."""
    return {"greedy": True, "quick": True, "exact": ORTOOLS_AVAILABLE}
