"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Returns application status, version and the active error encoding.
"""

from fastapi import APIRouter, Request

from fault_responder.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        version=request.app.version,
        responder=request.app.state.responder.name,
    )
