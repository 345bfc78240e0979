"""Configuration model for the HTTP fetch layer."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from content_warnings.fetch.constants import DEFAULT_MAX_RESPONSE_SIZE_BYTES
from content_warnings.fetch.models import RetryPolicy


class FetchConfig(BaseModel):
    """Configuration for all HTTP fetch operations."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    user_agent: Annotated[str, Field(min_length=1, max_length=500)] = (
        "content-warnings/0.1"
    )
    timeout_seconds: Annotated[float, Field(ge=1.0, le=120.0)] = 10.0
    max_response_size_bytes: Annotated[int, Field(ge=1024, le=50 * 1024 * 1024)] = (
        DEFAULT_MAX_RESPONSE_SIZE_BYTES
    )
    retry_policy: RetryPolicy = Field(default_factory=RetryPolicy)
    headers: dict[str, str] = Field(
        default_factory=dict, description="Extra headers sent with every request"
    )

    @field_validator("headers")
    @classmethod
    def validate_no_auth_headers(cls, v: dict[str, str]) -> dict[str, str]:
        """Ensure no credentials are stored in config."""
        forbidden = {"authorization", "cookie", "x-api-key"}
        for key in v:
            if key.lower() in forbidden:
                msg = (
                    f"Header '{key}' must not be stored in config; "
                    "use environment variables"
                )
                raise ValueError(msg)
        return v
