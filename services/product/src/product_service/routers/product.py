"""
Add-product endpoint.

Decodes the body by its Content-Type and echoes the product back as JSON.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_service.core.exceptions import ServiceError
from product_service.schemas import ErrorResponse, Product
from product_service.services import (
    MalformedBodyError,
    ProductValidationError,
    UnsupportedMediaTypeError,
    bind_form,
    bind_product,
    is_form_media_type,
    parse_media_type,
    supported_media_types,
)

router = APIRouter()


async def _bind_form_request(request: Request, media_type: str) -> Product:
    """Parse a form or multipart body with Starlette and bind its fields."""
    try:
        async with request.form() as form:
            return bind_form(form.multi_items())
    except StarletteHTTPException as e:
        # Starlette reports unparseable form bodies as HTTPException(400).
        raise MalformedBodyError(media_type, str(e.detail)) from e


@router.post(
    "/product",
    response_model=Product,
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Malformed body, missing field or unsupported content type",
        },
    },
)
async def add_product(request: Request) -> Product:
    """
    Decode a product from form, multipart, JSON or XML and echo it.

    Raises:
        ServiceError: 400 for malformed bodies, invalid fields and
            missing or unsupported content types
    """
    content_type = request.headers.get("content-type")
    media_type, _ = parse_media_type(content_type)

    try:
        if is_form_media_type(media_type):
            return await _bind_form_request(request, media_type)
        return bind_product(content_type, await request.body())
    except ProductValidationError as e:
        raise ServiceError(
            error="validation_error",
            message=str(e),
            status_code=400,
            details={"errors": e.errors},
        ) from e
    except MalformedBodyError as e:
        raise ServiceError(
            error="malformed_body",
            message=str(e),
            status_code=400,
            details={"media_type": e.media_type, "reason": e.reason},
        ) from e
    except UnsupportedMediaTypeError as e:
        raise ServiceError(
            error="unsupported_media_type",
            message=str(e),
            status_code=400,
            details={"content_type": content_type, "supported": supported_media_types()},
        ) from e
