"""
Service information endpoint.

Exposes service identity, supported encodings and Product Service status.
"""

from __future__ import annotations

import httpx
from fastapi import APIRouter

from gateway.config import get_settings
from gateway.core.exceptions import BackendError
from gateway.core.state import get_app_state
from gateway.logging import get_logger
from gateway.payloads import ALL_PAYLOADS
from gateway.schemas import BackendInfo, InfoResponse

router = APIRouter()


@router.get("/info", response_model=InfoResponse)
async def get_info() -> InfoResponse:
    """
    Get service information and configuration.

    Returns:
        Service metadata and Product Service status
    """
    settings = get_settings()
    client = get_app_state().product_client

    product_status = await client.health_check()
    product_info = None
    try:
        product_info = await client.get_info()
    except (BackendError, httpx.HTTPError) as e:
        get_logger().debug("Could not get product backend info", extra={"error": str(e)})

    return InfoResponse(
        service=settings.service.name,
        version=settings.service.version,
        encodings=[payload.encoding for payload in ALL_PAYLOADS],
        product=BackendInfo(
            url=settings.backends.product_url,
            status=product_status,
            info=product_info,
        ),
    )
