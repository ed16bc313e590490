"""
Service information endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

from product_service.config import get_settings
from product_service.schemas import InfoResponse
from product_service.services import supported_media_types

router = APIRouter()


@router.get("/info", response_model=InfoResponse)
async def get_info() -> InfoResponse:
    """Get service information and accepted media types."""
    settings = get_settings()

    return InfoResponse(
        service=settings.service.name,
        version=settings.service.version,
        media_types=supported_media_types(),
    )
