"""
Bind inbound request bodies to Product records.

The parsed Content-Type media type decides how a body is read. Form and
multipart bodies are parsed by Starlette's form parser in the router and
arrive here as (name, value) pairs. JSON and XML bodies are decoded from raw
bytes through the ``DECODERS`` table. Either way the result is a flat field
mapping that is validated into a Product. Nothing here touches the web
framework; failures are raised as BindingError subclasses and mapped to
HTTP statuses by the router.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from product_service.schemas import Product

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    Decoder = Callable[[bytes], dict[str, Any]]


class BindingError(Exception):
    """Base class for failures to bind a request body to a Product."""


class UnsupportedMediaTypeError(BindingError):
    """The request has no Content-Type, or one with no decoder."""

    def __init__(self, media_type: str | None) -> None:
        self.media_type = media_type
        if media_type:
            message = f"Unsupported content type: {media_type}"
        else:
            message = "Missing content type"
        super().__init__(message)


class MalformedBodyError(BindingError):
    """The body could not be decoded in its declared encoding."""

    def __init__(self, media_type: str, reason: str) -> None:
        self.media_type = media_type
        self.reason = reason
        super().__init__(f"Malformed {media_type} body: {reason}")


class ProductValidationError(BindingError):
    """The decoded fields do not form a valid Product."""

    def __init__(self, errors: list[dict[str, str]]) -> None:
        self.errors = errors
        summary = "; ".join(f"{err['field']}: {err['reason']}" for err in errors)
        super().__init__(f"Product validation failed: {summary}")

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> ProductValidationError:
        """Flatten pydantic's error list into field/reason pairs."""
        return cls(
            [
                {
                    "field": ".".join(str(part) for part in err["loc"]),
                    "reason": err["msg"],
                    "type": err["type"],
                }
                for err in exc.errors()
            ]
        )


def parse_media_type(header: str | None) -> tuple[str, dict[str, str]]:
    """
    Split a Content-Type header into media type and parameters.

    >>> parse_media_type('multipart/form-data; boundary="xyz"')
    ('multipart/form-data', {'boundary': 'xyz'})

    Args:
        header: Raw header value, possibly None

    Returns:
        Lower-cased media type ("" when absent) and the parameter map
        with lower-cased names
    """
    if header is None:
        return "", {}

    media_type, _, raw_params = header.partition(";")
    params: dict[str, str] = {}
    for item in raw_params.split(";"):
        key, sep, value = item.partition("=")
        if sep:
            params[key.strip().lower()] = value.strip().strip('"')
    return media_type.strip().lower(), params


def decode_json(body: bytes) -> dict[str, Any]:
    """Decode a JSON object body."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedBodyError("application/json", str(e)) from e

    if not isinstance(data, dict):
        raise MalformedBodyError("application/json", "expected a JSON object")
    return data


def decode_xml(body: bytes) -> dict[str, Any]:
    """
    Decode an XML document.

    The root element name is not checked; each direct child becomes a
    field named after its tag.
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise MalformedBodyError("application/xml", str(e)) from e

    fields: dict[str, Any] = {}
    for child in root:
        fields.setdefault(child.tag, child.text or "")
    return fields


# Form bodies are read with the framework's form parser, not from raw bytes.
FORM_MEDIA_TYPES: frozenset[str] = frozenset(
    {"application/x-www-form-urlencoded", "multipart/form-data"}
)

DECODERS: dict[str, Decoder] = {
    "application/json": decode_json,
    "application/xml": decode_xml,
    "text/xml": decode_xml,
}

# JSON values carry their own types; a number must already be an integer.
STRICT_MEDIA_TYPES: frozenset[str] = frozenset({"application/json"})


def supported_media_types() -> list[str]:
    """Media types POST /product can bind."""
    return sorted(FORM_MEDIA_TYPES | DECODERS.keys())


def is_form_media_type(media_type: str) -> bool:
    """Whether the body must go through the form parser."""
    return media_type in FORM_MEDIA_TYPES


def form_fields(items: Iterable[tuple[str, object]]) -> dict[str, Any]:
    """
    Collapse parsed form items into a field mapping.

    The first value of a repeated field wins. Uploaded files are skipped.
    """
    fields: dict[str, Any] = {}
    for name, value in items:
        if isinstance(value, str):
            fields.setdefault(name, value)
    return fields


def validate_product(fields: dict[str, Any], *, strict: bool) -> Product:
    """
    Validate a field mapping into a Product.

    Raises:
        ProductValidationError: ``name`` or ``number`` missing or invalid
    """
    try:
        return Product.model_validate(fields, strict=strict)
    except ValidationError as e:
        raise ProductValidationError.from_validation_error(e) from e


def bind_form(items: Iterable[tuple[str, object]]) -> Product:
    """Bind form or multipart items, as parsed by the form parser, to a Product."""
    return validate_product(form_fields(items), strict=False)


def bind_product(content_type: str | None, body: bytes) -> Product:
    """
    Decode a raw JSON or XML body into a Product according to its content type.

    Form media types have no raw decoder; they are bound with ``bind_form``.

    Args:
        content_type: Raw Content-Type header value
        body: Raw request body

    Returns:
        Validated Product

    Raises:
        UnsupportedMediaTypeError: No decoder for the content type
        MalformedBodyError: Body is not valid in its declared encoding
        ProductValidationError: ``name`` or ``number`` missing or invalid
    """
    media_type, _ = parse_media_type(content_type)
    decoder = DECODERS.get(media_type)
    if decoder is None:
        raise UnsupportedMediaTypeError(media_type or None)

    return validate_product(decoder(body), strict=media_type in STRICT_MEDIA_TYPES)
