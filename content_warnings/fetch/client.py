"""HTTP client with retries and failure isolation."""

import time
from collections.abc import Callable
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from io import BytesIO

import httpx
import structlog

from content_warnings.fetch.config import FetchConfig
from content_warnings.fetch.constants import (
    DEFAULT_CHUNK_SIZE,
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_OK_MAX,
    HTTP_STATUS_OK_MIN,
    HTTP_STATUS_SERVER_ERROR_MAX,
    HTTP_STATUS_SERVER_ERROR_MIN,
    HTTP_STATUS_TOO_MANY_REQUESTS,
    MAX_RETRY_AFTER_SECONDS,
)
from content_warnings.fetch.models import (
    FetchError,
    FetchErrorClass,
    FetchResult,
    ResponseSizeExceededError,
)
from content_warnings.fetch.redact import redact_headers, redact_url_credentials


logger = structlog.get_logger()


class HttpFetcher:
    """HTTP client with retries and failure isolation.

    Provides HTTP GET operations with:
    - Configurable retry policy with exponential backoff
    - Maximum response size enforcement
    - Header redaction for logging

    Failures never raise; they are reported through ``FetchResult.error``.
    """

    def __init__(
        self,
        config: FetchConfig | None = None,
        run_id: str = "",
        transport: httpx.BaseTransport | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        """Initialize the HTTP fetcher.

        Args:
            config: Fetch configuration.
            run_id: Run identifier for logging.
            transport: Optional httpx transport (tests use MockTransport).
            sleep: Optional sleep function used between retries.
        """
        self._config = config or FetchConfig()
        self._run_id = run_id
        self._transport = transport
        self._sleep = sleep or time.sleep
        self._log = logger.bind(
            component="fetch",
            run_id=run_id,
        )

    def fetch(
        self,
        url: str,
        extra_headers: dict[str, str] | None = None,
    ) -> FetchResult:
        """Fetch a URL with retry support.

        Args:
            url: The URL to fetch.
            extra_headers: Additional headers to include.

        Returns:
            FetchResult with status, body, and error information.
        """
        start_time_ns = time.perf_counter_ns()
        log = self._log.bind(url=redact_url_credentials(url))

        headers = self._build_headers(extra_headers)
        result = self._execute_with_retry(url=url, headers=headers, log=log)

        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000

        log.info(
            "fetch_complete",
            status_code=result.status_code,
            bytes=result.body_size,
            attempts=result.attempts,
            duration_ms=round(duration_ms, 2),
            error_class=result.error.error_class.value if result.error else None,
        )

        return result

    def _build_headers(self, extra_headers: dict[str, str] | None) -> dict[str, str]:
        """Build request headers.

        Args:
            extra_headers: Additional headers from caller.

        Returns:
            Complete headers dictionary.
        """
        headers: dict[str, str] = {
            "User-Agent": self._config.user_agent,
            "Accept": "*/*",
        }
        headers.update(self._config.headers)
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def _execute_with_retry(
        self,
        url: str,
        headers: dict[str, str],
        log: structlog.stdlib.BoundLogger,
    ) -> FetchResult:
        """Execute request with retry logic.

        Args:
            url: URL to fetch.
            headers: Request headers.
            log: Bound logger.

        Returns:
            FetchResult from the last attempt.
        """
        policy = self._config.retry_policy
        attempt = 0

        while True:
            result = self._execute_single(
                url=url, headers=headers, log=log, attempt=attempt
            )

            if result.error is None or not policy.should_retry(result.error, attempt):
                return result.model_copy(update={"attempts": attempt + 1})

            if result.error.error_class == FetchErrorClass.RATE_LIMITED:
                retry_after = result.error.retry_after
                if retry_after and retry_after > 0:
                    log.info(
                        "rate_limited",
                        retry_after=retry_after,
                        attempt=attempt,
                    )
                    self._sleep(min(retry_after, MAX_RETRY_AFTER_SECONDS))

            delay_ms = policy.get_delay_ms(attempt)
            attempt += 1
            log.debug(
                "retry_attempt",
                attempt=attempt,
                delay_ms=delay_ms,
                max_retries=policy.max_retries,
            )
            self._sleep(delay_ms / 1000.0)

    def _execute_single(
        self,
        url: str,
        headers: dict[str, str],
        log: structlog.stdlib.BoundLogger,
        attempt: int,
    ) -> FetchResult:
        """Execute a single HTTP request.

        Args:
            url: URL to fetch.
            headers: Request headers.
            log: Bound logger.
            attempt: Current attempt number.

        Returns:
            FetchResult from the request.
        """
        log = log.bind(attempt=attempt, headers=redact_headers(headers))

        try:
            with (
                httpx.Client(
                    timeout=self._config.timeout_seconds,
                    follow_redirects=True,
                    transport=self._transport,
                ) as client,
                client.stream("GET", url, headers=headers) as response,
            ):
                content_length = response.headers.get("content-length")
                if (
                    content_length
                    and content_length.isdigit()
                    and int(content_length) > self._config.max_response_size_bytes
                ):
                    return self._error_result(
                        url,
                        FetchErrorClass.RESPONSE_SIZE_EXCEEDED,
                        f"Response size {content_length} exceeds limit "
                        f"{self._config.max_response_size_bytes}",
                        status_code=response.status_code,
                    )

                body = self._read_body_with_limit(response)

                return FetchResult(
                    status_code=response.status_code,
                    final_url=str(response.url),
                    headers=dict(response.headers),
                    body_bytes=body,
                    error=self._classify_http_error(
                        response.status_code, response.headers
                    ),
                )

        except ResponseSizeExceededError as e:
            return self._error_result(
                url, FetchErrorClass.RESPONSE_SIZE_EXCEEDED, str(e)
            )

        except httpx.TimeoutException as e:
            log.debug("request_timeout", error=str(e))
            return self._error_result(
                url, FetchErrorClass.NETWORK_TIMEOUT, f"Request timed out: {e}"
            )

        except httpx.ConnectError as e:
            log.debug("request_connect_failed", error=str(e))
            return self._error_result(
                url, FetchErrorClass.CONNECTION_ERROR, f"Connection failed: {e}"
            )

        except Exception as e:  # noqa: BLE001
            log.warning("request_failed_unexpectedly", error=str(e))
            return self._error_result(
                url, FetchErrorClass.UNKNOWN, f"Unexpected error: {e}"
            )

    def _error_result(
        self,
        url: str,
        error_class: FetchErrorClass,
        message: str,
        status_code: int = 0,
    ) -> FetchResult:
        """Build a FetchResult carrying only an error."""
        return FetchResult(
            status_code=status_code,
            final_url=url,
            error=FetchError(
                error_class=error_class,
                message=message,
                status_code=status_code or None,
            ),
        )

    def _read_body_with_limit(self, response: httpx.Response) -> bytes:
        """Read response body with size limit.

        Args:
            response: Streaming HTTP response.

        Returns:
            Response body bytes.

        Raises:
            ResponseSizeExceededError: If the size limit is exceeded.
        """
        buffer = BytesIO()
        total_read = 0
        max_size = self._config.max_response_size_bytes

        for chunk in response.iter_bytes(chunk_size=DEFAULT_CHUNK_SIZE):
            total_read += len(chunk)
            if total_read > max_size:
                msg = (
                    f"Response size exceeded limit of {max_size} bytes "
                    f"(read {total_read} bytes)"
                )
                raise ResponseSizeExceededError(msg)
            buffer.write(chunk)

        return buffer.getvalue()

    def _classify_http_error(
        self,
        status_code: int,
        headers: httpx.Headers,
    ) -> FetchError | None:
        """Classify HTTP status code as error.

        Args:
            status_code: HTTP status code.
            headers: Response headers.

        Returns:
            FetchError if status indicates error, None otherwise.
        """
        if HTTP_STATUS_OK_MIN <= status_code < HTTP_STATUS_OK_MAX:
            return None

        if status_code == HTTP_STATUS_TOO_MANY_REQUESTS:
            return FetchError(
                error_class=FetchErrorClass.RATE_LIMITED,
                message="Rate limited (429 Too Many Requests)",
                status_code=status_code,
                retry_after=self._parse_retry_after(headers.get("retry-after")),
            )

        if HTTP_STATUS_BAD_REQUEST <= status_code < HTTP_STATUS_SERVER_ERROR_MIN:
            return FetchError(
                error_class=FetchErrorClass.HTTP_4XX,
                message=f"Client error ({status_code})",
                status_code=status_code,
            )

        if HTTP_STATUS_SERVER_ERROR_MIN <= status_code < HTTP_STATUS_SERVER_ERROR_MAX:
            return FetchError(
                error_class=FetchErrorClass.HTTP_5XX,
                message=f"Server error ({status_code})",
                status_code=status_code,
            )

        return None

    def _parse_retry_after(self, value: str | None) -> int | None:
        """Parse Retry-After header value.

        Args:
            value: Header value (seconds or HTTP date).

        Returns:
            Seconds to wait, or None if not parseable.
        """
        if not value:
            return None

        try:
            return int(value)
        except ValueError:
            pass

        try:
            dt = parsedate_to_datetime(value)
            delta = dt - datetime.now(UTC)
            return max(0, int(delta.total_seconds()))
        except (ValueError, TypeError):
            pass

        return None
