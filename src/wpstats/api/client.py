#!/usr/bin/env python3
"""HTTP Client for the WordPress.com REST API.

This module provides a small, reusable HTTP client that handles the common
concerns of talking to the stats endpoints:

    - Bearer token authentication
    - Retry with exponential backoff on 5xx and network errors
    - Connection pooling via a shared aiohttp session
    - Typed exceptions for error statuses

Design Philosophy:
    This client knows HOW to talk to WordPress.com, but not WHAT to fetch.
    Knowledge of specific stats resources belongs in the store adapters.

Usage:
    async with StatsClient(config) as client:
        data = await client.get("/sites/123/stats/tags", params={"max": 10})
"""
import asyncio
import logging
from typing import TYPE_CHECKING, Any, Optional

import aiohttp

from .exceptions import (
    APIError,
    AuthenticationError,
    ConnectionError,
    InvalidResponseError,
    NetworkError,
    NotFoundError,
    ServerError,
    TimeoutError,
)

if TYPE_CHECKING:
    from ..config import StatsConfig

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 30


class StatsClient:
    """Async HTTP client for the WordPress.com REST API.

    Must be used as an async context manager so the session is closed:

        async with StatsClient(config) as client:
            data = await client.get("/sites/123/stats/tags")

    Attributes:
        config: StatsConfig with base URL and access token
        max_retries: Attempts per request for retryable failures
    """

    def __init__(
        self,
        config: "StatsConfig",
        max_retries: int = 3,
        initial_backoff: float = 1.0,
    ):
        self.config = config
        self.base_url = config.base_url
        self.max_retries = max_retries
        self.initial_backoff = initial_backoff
        self._session: Optional[aiohttp.ClientSession] = None

    # ----------------------------------------
    # Context Manager Protocol
    # ----------------------------------------

    async def __aenter__(self) -> "StatsClient":
        """Enter async context: create the HTTP session."""
        self._session = aiohttp.ClientSession(
            connector=aiohttp.TCPConnector(limit=10, limit_per_host=10),
            timeout=aiohttp.ClientTimeout(total=REQUEST_TIMEOUT_SECONDS, connect=10),
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context: close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    # ----------------------------------------
    # Low-Level Request Methods
    # ----------------------------------------

    def _auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.access_token}",
            "Accept": "application/json",
        }

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
    ) -> dict[str, Any]:
        """Make a single HTTP request (no retry logic).

        Args:
            method: HTTP method
            endpoint: API endpoint path (e.g., "/sites/123/stats/tags")
            params: Query parameters

        Returns:
            Parsed JSON response as dict

        Raises:
            APIError: If response status is not 2xx
            AuthenticationError: On 401/403
            RuntimeError: If called outside of async context manager
            ConnectionError: If connection to server fails
            TimeoutError: If request times out
            InvalidResponseError: If the body is not valid JSON
        """
        if not self._session:
            raise RuntimeError(
                "StatsClient must be used as async context manager: "
                "async with StatsClient(...) as client:"
            )

        url = f"{self.base_url}{endpoint}"

        try:
            async with self._session.request(
                method=method,
                url=url,
                headers=self._auth_headers(),
                params=params,
            ) as response:
                if response.status >= 400:
                    error_text = await response.text()
                    raise self._create_api_error(
                        status=response.status,
                        method=method,
                        endpoint=endpoint,
                        response_body=error_text,
                    )
                try:
                    return await response.json()
                except (aiohttp.ContentTypeError, ValueError) as e:
                    raise InvalidResponseError(
                        f"Response from {endpoint} is not valid JSON",
                        details={"endpoint": endpoint},
                        cause=e,
                    )

        except aiohttp.ClientConnectionError as e:
            raise ConnectionError(
                f"Failed to connect to {self.base_url}",
                host=self.base_url,
                cause=e,
            )

        except asyncio.TimeoutError as e:
            raise TimeoutError(
                f"Request to {endpoint} timed out",
                timeout_seconds=REQUEST_TIMEOUT_SECONDS,
                cause=e,
            )

        except aiohttp.ClientError as e:
            raise NetworkError(
                f"Network error during {method} {endpoint}: {e}",
                cause=e,
            )

    def _create_api_error(
        self,
        status: int,
        method: str,
        endpoint: str,
        response_body: str,
    ) -> Exception:
        """Create the exception matching an HTTP error status."""
        if status in (401, 403):
            return AuthenticationError(
                f"Not authorized to call {endpoint}",
                status_code=status,
                details={"endpoint": endpoint},
            )

        if status == 404:
            return NotFoundError(
                resource_type="Resource",
                resource_id=endpoint,
                endpoint=endpoint,
                response_body=response_body,
            )

        if status >= 500:
            return ServerError(
                f"Server error ({status}) for {method} {endpoint}",
                status_code=status,
                endpoint=endpoint,
                response_body=response_body,
            )

        return APIError(
            f"{method} {endpoint} failed",
            status_code=status,
            endpoint=endpoint,
            method=method,
            response_body=response_body,
        )

    async def _request_with_retry(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
    ) -> dict[str, Any]:
        """Make an HTTP request with exponential backoff retry.

        Retries recoverable API errors (5xx, 429) and network errors.
        Authentication and 404 errors fail immediately.
        """
        backoff_delay = self.initial_backoff

        for attempt in range(1, self.max_retries + 1):
            try:
                return await self._request(method, endpoint, params)

            except (AuthenticationError, NotFoundError):
                raise

            except (APIError, NetworkError) as e:
                if not e.recoverable or attempt >= self.max_retries:
                    raise
                logger.warning(
                    f"{e.__class__.__name__}: {e.message}. Retrying in {backoff_delay}s "
                    f"(attempt {attempt}/{self.max_retries})"
                )
                await asyncio.sleep(backoff_delay)
                backoff_delay = min(backoff_delay * 2, 30.0)

        raise APIError(
            "Request failed after all retries",
            status_code=0,
            endpoint=endpoint,
            method=method,
        )

    # ----------------------------------------
    # Public Methods
    # ----------------------------------------

    async def get(
        self,
        endpoint: str,
        params: Optional[dict] = None,
    ) -> dict[str, Any]:
        """Make a GET request with retry."""
        return await self._request_with_retry("GET", endpoint, params=params)
