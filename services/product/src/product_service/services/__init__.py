"""Request decoding for the product service."""

from product_service.services.binding import (
    BindingError,
    MalformedBodyError,
    ProductValidationError,
    UnsupportedMediaTypeError,
    bind_form,
    bind_product,
    is_form_media_type,
    parse_media_type,
    supported_media_types,
)

__all__ = [
    "BindingError",
    "MalformedBodyError",
    "ProductValidationError",
    "UnsupportedMediaTypeError",
    "bind_form",
    "bind_product",
    "is_form_media_type",
    "parse_media_type",
    "supported_media_types",
]
