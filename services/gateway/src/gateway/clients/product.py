"""
Client for the Product Service.

Sends one of the fixed "add product" payloads and hands back the raw
response untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from gateway.clients.base import BackendClient
from gateway.core.exceptions import ResponseReadError, TransportError
from gateway.logging import get_logger

if TYPE_CHECKING:
    from gateway.payloads import ProductPayload

PRODUCT_PATH = "/product"


@dataclass(frozen=True)
class RelayedResponse:
    """Downstream response as received: status, media type and raw body."""

    status_code: int
    content_type: str | None
    body: bytes


class ProductClient(BackendClient):
    """Client for the Product Service's add-product endpoint."""

    async def add_product(self, payload: ProductPayload) -> RelayedResponse:
        """
        POST a fixed payload to the Product Service.

        The response is streamed inside a context manager so the connection
        is released whether or not the body is read successfully.

        Args:
            payload: One of the literal payloads from ``gateway.payloads``

        Returns:
            The downstream response with its body fully read

        Raises:
            TransportError: If no response could be obtained
            ResponseReadError: If the response body could not be read
        """
        logger = get_logger()
        url = f"{self.base_url}{PRODUCT_PATH}"

        try:
            async with self.client.stream(
                "POST", PRODUCT_PATH, **payload.request_kwargs()
            ) as response:
                try:
                    body = await response.aread()
                except (httpx.HTTPError, httpx.StreamError) as e:
                    logger.warning(
                        "Failed to read product service response",
                        extra={
                            "backend": self.service_name,
                            "encoding": payload.encoding,
                            "status_code": response.status_code,
                            "error_type": type(e).__name__,
                        },
                    )
                    raise ResponseReadError(self.service_name, url, e) from e

                logger.debug(
                    "Product service responded",
                    extra={
                        "backend": self.service_name,
                        "encoding": payload.encoding,
                        "status_code": response.status_code,
                        "body_bytes": len(body),
                    },
                )
                return RelayedResponse(
                    status_code=response.status_code,
                    content_type=response.headers.get("content-type"),
                    body=body,
                )

        except httpx.HTTPError as e:
            logger.warning(
                "Product service request failed",
                extra={
                    "backend": self.service_name,
                    "encoding": payload.encoding,
                    "url": url,
                    "error_type": type(e).__name__,
                },
            )
            raise TransportError(self.service_name, url, e) from e
