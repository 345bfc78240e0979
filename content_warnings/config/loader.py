"""Configuration loader with validation."""

import hashlib
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from content_warnings.config.constants import COMPONENT_CONFIG
from content_warnings.config.schemas import EngineConfig


logger = structlog.get_logger()


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[dict[str, str]], file_path: str) -> None:
        """Initialize the error.

        Args:
            errors: List of validation error details.
            file_path: Path to the file that failed validation.
        """
        self.errors = errors
        self.file_path = file_path
        super().__init__(f"Validation failed for {file_path}: {len(errors)} errors")


class ConfigLoader:
    """Loads and validates the engine configuration file."""

    def __init__(self, run_id: str = "") -> None:
        """Initialize the loader.

        Args:
            run_id: Identifier of the current run.
        """
        self._run_id = run_id
        self._file_checksum: str | None = None
        self._validation_errors: list[dict[str, str]] = []

    @property
    def file_checksum(self) -> str | None:
        """Get the SHA-256 checksum of the last loaded file."""
        return self._file_checksum

    @property
    def validation_errors(self) -> list[dict[str, str]]:
        """Get validation errors if any."""
        return self._validation_errors.copy()

    def load(self, config_path: Path | None) -> EngineConfig:
        """Load and validate the configuration file.

        Args:
            config_path: Path to engine.yaml, or None for defaults.

        Returns:
            Validated EngineConfig.

        Raises:
            ConfigValidationError: If the file is not valid YAML or fails
                schema validation.
            FileNotFoundError: If the file does not exist.
        """
        log = logger.bind(component=COMPONENT_CONFIG, run_id=self._run_id)
        self._validation_errors = []

        if config_path is None:
            log.debug("config_defaults_used")
            return EngineConfig()

        log.info("loading_config_file", file_path=str(config_path))
        content_bytes = config_path.read_bytes()
        self._file_checksum = hashlib.sha256(content_bytes).hexdigest()

        try:
            data = yaml.safe_load(content_bytes.decode("utf-8")) or {}
            config = EngineConfig.model_validate(data)
        except yaml.YAMLError as e:
            self._validation_errors.append(
                {"loc": "(file)", "msg": str(e), "type": "yaml_parse_error"}
            )
            log.error("config_yaml_invalid", file_path=str(config_path))
            raise ConfigValidationError(
                self._validation_errors, str(config_path)
            ) from e
        except ValidationError as e:
            for err in e.errors():
                self._validation_errors.append(
                    {
                        "loc": ".".join(str(loc) for loc in err["loc"]) or "(root)",
                        "msg": err["msg"],
                        "type": err["type"],
                    }
                )
            log.error(
                "config_validation_failed",
                file_path=str(config_path),
                validation_error_count=len(self._validation_errors),
                errors=self._validation_errors,
            )
            raise ConfigValidationError(
                self._validation_errors, str(config_path)
            ) from e

        log.info(
            "config_file_loaded",
            file_path=str(config_path),
            file_sha256=self._file_checksum,
        )
        return config
