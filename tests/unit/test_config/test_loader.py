"""Unit tests for the configuration loader."""

import hashlib
from pathlib import Path

import pytest

from content_warnings.config.loader import ConfigLoader, ConfigValidationError


class TestConfigLoader:
    """Tests for ConfigLoader.load."""

    def test_none_uses_defaults(self) -> None:
        """Test loading without a file returns defaults."""
        loader = ConfigLoader()

        config = loader.load(None)

        assert config.classifier.min_votes == 3
        assert loader.file_checksum is None

    def test_valid_file(self, tmp_path: Path) -> None:
        """Test a valid file is loaded and checksummed."""
        path = tmp_path / "engine.yaml"
        path.write_text(
            "version: '1.0'\n"
            "classifier:\n"
            "  min_votes: 4\n"
            "  confidence_level: 0.95\n"
        )
        loader = ConfigLoader(run_id="test")

        config = loader.load(path)

        assert config.classifier.min_votes == 4
        assert config.classifier.confidence_level == 0.95
        assert loader.file_checksum == hashlib.sha256(path.read_bytes()).hexdigest()

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        """Test an empty file is treated as all defaults."""
        path = tmp_path / "engine.yaml"
        path.write_text("")

        config = ConfigLoader().load(path)

        assert config.version == "1.0"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ConfigLoader().load(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test invalid YAML is reported as a validation error."""
        path = tmp_path / "engine.yaml"
        path.write_text("classifier: [unclosed\n")
        loader = ConfigLoader()

        with pytest.raises(ConfigValidationError) as exc_info:
            loader.load(path)

        assert exc_info.value.file_path == str(path)
        assert loader.validation_errors[0]["type"] == "yaml_parse_error"

    def test_schema_errors_collected(self, tmp_path: Path) -> None:
        """Test every schema violation is collected."""
        path = tmp_path / "engine.yaml"
        path.write_text(
            "classifier:\n"
            "  min_votes: many\n"
            "  bogus: 1\n"
        )
        loader = ConfigLoader()

        with pytest.raises(ConfigValidationError):
            loader.load(path)

        errors = {e["loc"]: e["type"] for e in loader.validation_errors}
        assert errors["classifier.min_votes"] == "int_parsing"
        assert errors["classifier.bogus"] == "extra_forbidden"

    def test_cross_field_error(self, tmp_path: Path) -> None:
        """Test the sensitive threshold check is reported."""
        path = tmp_path / "engine.yaml"
        path.write_text(
            "classifier:\n"
            "  min_votes: 1\n"
            "  min_votes_sensitive: 2\n"
        )
        loader = ConfigLoader()

        with pytest.raises(ConfigValidationError):
            loader.load(path)

        assert loader.validation_errors[0]["loc"] == "classifier"
        assert loader.validation_errors[0]["type"] == "value_error"

    def test_api_key_header_in_config_rejected(self, tmp_path: Path) -> None:
        """Test credentials cannot be placed in the fetch headers."""
        path = tmp_path / "engine.yaml"
        path.write_text("fetch:\n  headers:\n    X-API-KEY: secret\n")

        with pytest.raises(ConfigValidationError):
            ConfigLoader().load(path)
