"""
Health check endpoint.

Provides service health status for container orchestration
(Docker health checks, Kubernetes liveness checks).
"""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Query

from gateway.core.state import get_app_state
from gateway.schemas import BackendStatus, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    check_backends: bool = Query(
        default=True,
        description="Whether to check Product Service health",
    ),
) -> HealthResponse:
    """
    Check service health.

    The gateway is unhealthy whenever the Product Service is not healthy,
    since every forwarding endpoint depends on it.
    """
    backends: BackendStatus | None = None
    status: Literal["healthy", "unhealthy"] = "healthy"

    if check_backends:
        product_status = await get_app_state().product_client.health_check()
        backends = BackendStatus(product=product_status)
        if product_status != "healthy":
            status = "unhealthy"

    return HealthResponse(status=status, backends=backends)
