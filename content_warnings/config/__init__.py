"""Configuration loading and validation module."""

from content_warnings.config.loader import ConfigLoader, ConfigValidationError
from content_warnings.config.schemas import ApiConfig, ClassifierConfig, EngineConfig


__all__ = [
    "ApiConfig",
    "ClassifierConfig",
    "ConfigLoader",
    "ConfigValidationError",
    "EngineConfig",
]
