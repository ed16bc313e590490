"""
Base HTTP client for backend services.

Provides the shared httpx client, health probing, and JSON requests with
standardized error handling. Requests are sent once; there is no retry.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from gateway.core.exceptions import BackendError
from gateway.logging import get_logger


class BackendClient:
    """
    Base class for backend service clients.

    Owns one ``httpx.AsyncClient`` bound to the backend's base URL.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float,
        service_name: str,
    ) -> None:
        """
        Initialize the backend client.

        Args:
            base_url: Base URL for the service (e.g., "http://localhost:7586")
            timeout: Request timeout in seconds
            service_name: Name of the service for logging and error messages
        """
        self.base_url = base_url
        self.service_name = service_name
        self.timeout = timeout

        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def health_check(self) -> str:
        """
        Check backend health.

        Returns:
            Status string ("healthy", "unhealthy", "unavailable", "error", or "unknown")
        """
        status = "unknown"
        logger = get_logger()

        try:
            response = await self.client.get("/health")
            response.raise_for_status()
            data = response.json()

            parsed_status = data.get("status")
            if parsed_status is not None:
                status = str(parsed_status)
        except (httpx.ConnectError, httpx.TimeoutException) as e:
            status = "unavailable"
            logger.warning(
                "Backend health check failed",
                extra={"backend": self.service_name, "error_type": type(e).__name__},
            )
        except httpx.HTTPStatusError as e:
            status = "unavailable" if e.response.status_code == 503 else "error"
            logger.warning(
                "Backend health check failed: HTTP status error",
                extra={
                    "backend": self.service_name,
                    "status_code": e.response.status_code,
                },
            )
        except (httpx.HTTPError, json.JSONDecodeError, AttributeError) as e:
            status = "error"
            logger.warning(
                "Backend health check failed: unusable response",
                extra={"backend": self.service_name, "error_type": type(e).__name__},
            )

        return status

    async def get_info(self) -> dict[str, Any]:
        """
        Get service info.

        Returns:
            Service info dictionary
        """
        return await self._request("GET", "/info")

    async def _request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> dict[str, Any]:
        """
        Make a JSON request with standardized error handling.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: Request path
            **kwargs: Additional arguments passed to httpx

        Returns:
            Response JSON as dictionary

        Raises:
            BackendError: If request fails
        """
        logger = get_logger()

        try:
            response = await self.client.request(method, path, **kwargs)
            response.raise_for_status()
            return dict(response.json())

        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(
                "Backend returned invalid JSON",
                extra={"backend": self.service_name, "path": path},
            )
            raise BackendError(
                error="invalid_response",
                message=f"{self.service_name} service returned invalid JSON response",
                status_code=502,
                details={"backend": self.service_name, "path": path},
            ) from e

        except httpx.TimeoutException as e:
            logger.warning(
                "Backend timeout",
                extra={"backend": self.service_name, "path": path, "timeout": self.timeout},
            )
            raise BackendError(
                error="backend_timeout",
                message=f"{self.service_name} service timed out",
                status_code=504,
                details={"backend": self.service_name, "timeout_seconds": self.timeout},
            ) from e

        except httpx.HTTPStatusError as e:
            logger.warning(
                "Backend error",
                extra={
                    "backend": self.service_name,
                    "path": path,
                    "status_code": e.response.status_code,
                },
            )
            raise BackendError(
                error="backend_error",
                message=f"{self.service_name} service error: {e.response.status_code}",
                status_code=502,
                details={
                    "backend": self.service_name,
                    "backend_status_code": e.response.status_code,
                },
            ) from e

        except httpx.HTTPError as e:
            logger.warning(
                "Backend unavailable",
                extra={"backend": self.service_name, "url": self.base_url},
            )
            raise BackendError(
                error="backend_unavailable",
                message=f"{self.service_name} service is not responding",
                status_code=502,
                details={"backend": self.service_name, "url": self.base_url},
            ) from e
