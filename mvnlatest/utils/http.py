"""
HTTP client utilities for mvnlatest.

This module provides an asynchronous HTTP client with retry and backoff
logic used to download repository metadata. Only one request is in flight
at a time; retries never overlap.
"""

from __future__ import annotations

import random
import asyncio
from typing import Any, Optional, Tuple

import httpx

from mvnlatest.utils.logger import get_logger
from mvnlatest.__version__ import __version__
from mvnlatest.exceptions import NetworkError
from mvnlatest.constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_MAX_RETRIES,
    MAX_RATE_LIMIT_RETRIES,
    USER_AGENT_TEMPLATE,
)

logger = get_logger("http")


class HTTPClient:
    """Asynchronous HTTP client with retries and optional Basic auth.

    Timeouts, connection failures and 5xx responses are retried with
    exponential backoff. ``429`` responses are retried after the delay
    announced in ``Retry-After``. Any other 4xx response fails immediately
    with a :class:`NetworkError` carrying the status code.

    Args:
        timeout: Request timeout in seconds.
        max_retries: Maximum number of retry attempts.
        auth: ``(user, password)`` for HTTP Basic authentication.
        verify_ssl: Whether to verify SSL certificates.
        user_agent: Custom User-Agent header value.
        transport: Custom httpx transport (used by tests).

    Example:
        >>> async with HTTPClient(auth=("deployer", "secret")) as client:
        ...     text = await client.get_text("https://repo.example.com/maven2/...")
    """

    def __init__(
        self,
        *,
        timeout: int = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        auth: Optional[Tuple[str, str]] = None,
        verify_ssl: bool = True,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout = timeout
        self.max_retries = max_retries
        self.auth = auth
        self.verify_ssl = verify_ssl
        self.user_agent = user_agent or USER_AGENT_TEMPLATE.format(version=__version__)

        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._max_429_retries: int = MAX_RATE_LIMIT_RETRIES

    async def __aenter__(self) -> "HTTPClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        await self.close()

    async def _ensure_client(self) -> None:
        """Initialize the underlying httpx client if needed."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                http2=self._transport is None,
                verify=self.verify_ssl,
                follow_redirects=True,
                auth=httpx.BasicAuth(*self.auth) if self.auth else None,
                headers={"User-Agent": self.user_agent},
                transport=self._transport,
            )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request_with_retry(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Execute an HTTP request with retry and backoff logic."""
        await self._ensure_client()
        assert self._client is not None

        last_exc: Optional[Exception] = None
        last_status: Optional[int] = None
        retry_429_count = 0
        attempt = 0

        while attempt <= self.max_retries:
            try:
                response = await self._client.request(method, url, **kwargs)

                if response.status_code == 429:
                    retry_429_count += 1
                    if retry_429_count > self._max_429_retries:
                        raise NetworkError(
                            f"Rate limit exceeded after {self._max_429_retries} retries",
                            url=url,
                            status_code=429,
                        )
                    retry_after = _retry_after_seconds(response)
                    logger.warning(
                        "Rate limited (429), retrying after %ds (%d/%d)",
                        retry_after,
                        retry_429_count,
                        self._max_429_retries,
                    )
                    await asyncio.sleep(retry_after)
                    continue

                response.raise_for_status()
                return response

            except httpx.TimeoutException as exc:
                last_exc = exc
                logger.warning(
                    "Request timeout (%d/%d): %s",
                    attempt + 1,
                    self.max_retries + 1,
                    url,
                )

            except httpx.TransportError as exc:
                last_exc = exc
                logger.warning(
                    "Network error (%d/%d): %s",
                    attempt + 1,
                    self.max_retries + 1,
                    exc,
                )

            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                if 400 <= status < 500:
                    raise NetworkError(
                        f"HTTP {status} error for {url}",
                        url=url,
                        status_code=status,
                        response_body=exc.response.text,
                    ) from exc
                last_exc = exc
                last_status = status
                logger.warning(
                    "HTTP %d error (%d/%d): %s",
                    status,
                    attempt + 1,
                    self.max_retries + 1,
                    url,
                )

            if attempt < self.max_retries:
                delay = (2**attempt) + random.uniform(0.0, 0.3)
                logger.debug("Retrying in %.2fs", delay)
                await asyncio.sleep(delay)
            attempt += 1

        raise NetworkError(
            f"Request failed after {self.max_retries + 1} attempts: {url}",
            url=url,
            status_code=last_status,
        ) from last_exc

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Perform a GET request with retry logic."""
        return await self._request_with_retry("GET", url, **kwargs)

    async def get_text(self, url: str, **kwargs: Any) -> str:
        """Fetch a URL and return the decoded response body."""
        response = await self.get(url, **kwargs)
        logger.debug(
            "GET %s -> %d (%d bytes)",
            url,
            response.status_code,
            len(response.content),
        )
        return response.text


def _retry_after_seconds(response: httpx.Response) -> int:
    """Read ``Retry-After`` as whole seconds, defaulting to one."""
    try:
        return max(int(response.headers.get("Retry-After", "1")), 0)
    except ValueError:
        # HTTP-date form is not worth parsing for a CLI
        return 1
