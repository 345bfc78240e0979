"""Error hints for configuration validation errors."""

from typing import Final


# Mapping of error types to user-friendly hints
ERROR_HINTS: Final[dict[str, str]] = {
    "missing": "This field is required. Please add it to your configuration.",
    "extra_forbidden": "Unknown field. Check the spelling against the documentation.",
    "int_type": "This field must be an integer (whole number).",
    "int_parsing": "This field must be an integer (whole number).",
    "float_type": "This field must be a number.",
    "float_parsing": "This field must be a number.",
    "string_type": "This field must be a text string.",
    "greater_than": "The value is too small. Check the minimum allowed.",
    "greater_than_equal": "The value is too small. Check the minimum allowed.",
    "less_than": "The value is too large. Check the maximum allowed.",
    "less_than_equal": "The value is too large. Check the maximum allowed.",
    "string_pattern_mismatch": "The format is invalid. Use a version like '1.0'.",
    "value_error": "Check the value format and its relation to other fields.",
    "file_not_found": "The file does not exist. Check the file path.",
    "yaml_parse_error": "Invalid YAML syntax. Check for proper indentation and formatting.",
}

# Field-specific hints for more context
FIELD_HINTS: Final[dict[str, str]] = {
    "min_votes": "Must be a whole number of votes between 0 and 1000.",
    "min_votes_sensitive": "Must be a whole number no larger than min_votes.",
    "confidence_level": "Must be strictly between 0 and 1 (e.g., 0.90).",
    "sensitive_rank_bonus": "Must be a whole number between 0 and 10.",
    "search_url": "Must be a valid HTTP/HTTPS URL.",
    "media_url": "Must be a valid HTTP/HTTPS URL.",
    "categories_url": "Must be a valid HTTP/HTTPS URL.",
}


def get_error_hint(error_type: str, field_name: str | None = None) -> str:
    """Get a user-friendly hint for a validation error.

    Args:
        error_type: The Pydantic error type (e.g., 'missing').
        field_name: Optional field path for field-specific hints.

    Returns:
        A user-friendly hint string.
    """
    if field_name:
        simple_field = field_name.split(".")[-1]
        if simple_field in FIELD_HINTS:
            return FIELD_HINTS[simple_field]

    return ERROR_HINTS.get(
        error_type, "Check the configuration documentation for valid values."
    )


def format_validation_error(
    location: str,
    message: str,
    error_type: str,
    *,
    include_hint: bool = True,
) -> str:
    """Format a validation error with optional hint.

    Args:
        location: The error location (e.g., 'classifier.min_votes').
        message: The original error message.
        error_type: The error type.
        include_hint: Whether to include a hint.

    Returns:
        Formatted error string.
    """
    base = f"{location}: {message}"
    if include_hint:
        hint = get_error_hint(error_type, location)
        return f"{base}\n    Hint: {hint}"
    return base
