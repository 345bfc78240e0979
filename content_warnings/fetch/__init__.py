"""HTTP fetch layer with retries and failure isolation.

This module provides the transport used to reach the warnings service:
- Configurable retry policy with exponential backoff
- Maximum response size enforcement
- Header redaction for security
"""

from content_warnings.fetch.client import HttpFetcher
from content_warnings.fetch.config import FetchConfig
from content_warnings.fetch.models import (
    FetchError,
    FetchErrorClass,
    FetchResult,
    ResponseSizeExceededError,
    RetryPolicy,
)
from content_warnings.fetch.redact import redact_headers, redact_url_credentials


__all__ = [
    "FetchConfig",
    "FetchError",
    "FetchErrorClass",
    "FetchResult",
    "HttpFetcher",
    "ResponseSizeExceededError",
    "RetryPolicy",
    "redact_headers",
    "redact_url_credentials",
]
