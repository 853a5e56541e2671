from typing import Any, Dict, Optional

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.config.settings import settings

# Define common HTTP status codes that warrant a retry
RETRYABLE_STATUS_CODES = {408, 429, 500, 502, 503, 504}


class SleeperClientError(Exception):
    """Custom exception for errors raised by the data source client."""

    pass


class DataSourceUnavailableError(SleeperClientError):
    """The data source could not be reached or kept failing."""

    pass


class RateLimitError(DataSourceUnavailableError):
    """Exception raised for rate limit errors (429)."""

    pass


class _RetryableStatusError(SleeperClientError):
    """Internal marker for a retryable HTTP status."""

    def __init__(self, status_code: int, url: str):
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code


class BaseClient:
    """Base class for JSON-over-HTTP data source clients."""

    source_name: str = "unknown"

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.AsyncClient] = None,
        max_attempts: Optional[int] = None,
        backoff_multiplier: float = 1.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.max_attempts = max_attempts or settings.max_attempts
        self.backoff_multiplier = backoff_multiplier
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout),
            follow_redirects=True,
            headers={"Accept": "application/json"},
        )

    async def _get_json(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """GETs `path` and returns the decoded JSON body (None for a JSON null).

        Raises:
            DataSourceUnavailableError: transport failure, or an HTTP error that
                was not retryable or kept failing after every attempt.
            RateLimitError: still rate limited after every attempt.
            SleeperClientError: the body is not valid JSON.
        """
        url = f"{self.base_url}{path}"
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.backoff_multiplier, min=0, max=10),
            retry=retry_if_exception_type(
                (httpx.RequestError, RateLimitError, _RetryableStatusError)
            ),
            reraise=True,  # Reraise the exception after max attempts
        )
        try:
            response = await retrying(self._request, "GET", url, params)
        except httpx.RequestError as e:
            logger.error(
                f"Max retries exceeded for {self.source_name} request to {url}: {e}"
            )
            raise DataSourceUnavailableError(
                f"{self.source_name} unreachable at {url}: {e}"
            ) from e
        except _RetryableStatusError as e:
            logger.error(
                f"Max retries exceeded for {self.source_name} request to {url}: {e}"
            )
            raise DataSourceUnavailableError(str(e)) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Error parsing {self.source_name} JSON from {url}: {e}")
            logger.debug(f"Raw response content: {response.text[:500]}")
            raise SleeperClientError(f"Invalid JSON from {url}") from e

    async def _request(
        self, method: str, url: str, params: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """Makes a single HTTP request and classifies the failure, if any."""
        logger.bind(params=params).debug(f"Making request {method} {url}")
        try:
            response = await self.client.request(method, url, params=params)
        except httpx.RequestError as e:
            # Network errors, timeouts etc. - these are retryable
            logger.warning(f"Request error for {self.source_name}, retrying: {e}")
            raise

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            logger.warning(
                f"Rate limit hit (429) for {self.source_name} at {url}. Retry-After: {retry_after}"
            )
            raise RateLimitError(f"Rate limited by {self.source_name}")

        if response.status_code in RETRYABLE_STATUS_CODES:
            logger.warning(
                f"Retrying request for {self.source_name} due to status {response.status_code}"
            )
            raise _RetryableStatusError(response.status_code, url)

        if response.is_error:
            logger.error(
                f"HTTP error during request for {self.source_name}: {response.status_code} at {url}"
            )
            raise DataSourceUnavailableError(
                f"HTTP error {response.status_code} from {url}"
            )

        logger.debug(f"Request successful: {response.status_code} for {url}")
        return response

    async def close(self):
        """Closes the underlying HTTP client."""
        await self.client.aclose()
        logger.info(f"Closed HTTP client for {self.source_name}")

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
