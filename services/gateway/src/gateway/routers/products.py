"""
Add-product endpoints.

Each endpoint sends one literal payload to the Product Service and relays
the downstream body back byte for byte.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Response

from gateway import payloads
from gateway.core.exceptions import ResponseReadError, ServiceError, TransportError
from gateway.core.state import get_app_state
from gateway.schemas import ErrorResponse

if TYPE_CHECKING:
    from gateway.payloads import ProductPayload

router = APIRouter()

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse, "description": "Product Service unreachable"},
    500: {"model": ErrorResponse, "description": "Product Service response unreadable"},
}


async def relay(payload: ProductPayload) -> Response:
    """
    Forward a payload and relay the downstream response.

    The downstream status code and content type are passed through with
    the body.

    Raises:
        ServiceError: 400 on transport failure, 500 if the body could not be read
    """
    state = get_app_state()

    try:
        relayed = await state.product_client.add_product(payload)
    except TransportError as e:
        raise ServiceError(
            error="transport_error",
            message=str(e),
            status_code=400,
            details={
                "backend": e.backend,
                "url": e.url,
                "error_type": e.error_type,
                "encoding": payload.encoding,
            },
        ) from e
    except ResponseReadError as e:
        raise ServiceError(
            error="response_read_error",
            message=str(e),
            status_code=500,
            details={
                "backend": e.backend,
                "error_type": e.error_type,
                "encoding": payload.encoding,
            },
        ) from e

    return Response(
        content=relayed.body,
        status_code=relayed.status_code,
        media_type=relayed.content_type,
    )


@router.post("/add-product-for-urlencoded", responses=_ERROR_RESPONSES)
async def add_product_for_urlencoded() -> Response:
    """Forward ``name=iPhoneX&number=100`` as a URL-encoded body."""
    return await relay(payloads.URLENCODED)


@router.post("/add-product-for-post-form", responses=_ERROR_RESPONSES)
async def add_product_for_post_form() -> Response:
    """Forward name=iMac, number=1000 through httpx form encoding."""
    return await relay(payloads.POST_FORM)


@router.post("/add-product-for-json", responses=_ERROR_RESPONSES)
async def add_product_for_json() -> Response:
    """Forward the MacPro product as a JSON object."""
    return await relay(payloads.JSON)


@router.post("/add-product-for-xml", responses=_ERROR_RESPONSES)
async def add_product_for_xml() -> Response:
    """Forward the MacAir product as an XML document."""
    return await relay(payloads.XML)
