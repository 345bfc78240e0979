"""Unit tests for structured logging configuration."""

import io
import json
import logging

import structlog

from content_warnings.observability.logging import (
    bind_run_context,
    clear_run_context,
    configure_logging,
    get_logger,
)


class TestConfigureLogging:
    """Tests for configure_logging and run context helpers."""

    def teardown_method(self) -> None:
        """Restore structlog defaults after each test."""
        structlog.contextvars.clear_contextvars()
        structlog.reset_defaults()

    def test_json_output_with_run_context(self) -> None:
        """Test JSON lines carry the bound run id."""
        output = io.StringIO()
        configure_logging(output=output, json_format=True)
        bind_run_context("run-1")

        get_logger().info("resolution_tier_matched", tier="EXTERNAL_ID")

        record = json.loads(output.getvalue().strip())
        assert record["event"] == "resolution_tier_matched"
        assert record["run_id"] == "run-1"
        assert record["tier"] == "EXTERNAL_ID"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_clear_run_context(self) -> None:
        """Test the run id is dropped once cleared."""
        output = io.StringIO()
        configure_logging(output=output, json_format=True)
        bind_run_context("run-2")
        clear_run_context()

        get_logger().info("panel_loaded")

        record = json.loads(output.getvalue().strip())
        assert "run_id" not in record

    def test_level_filtering(self) -> None:
        """Test messages below the configured level are dropped."""
        output = io.StringIO()
        configure_logging(level=logging.WARNING, output=output, json_format=True)

        get_logger().info("vote_classified")
        get_logger().warning("catalog_fetch_failed")

        lines = output.getvalue().strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["event"] == "catalog_fetch_failed"

    def test_console_format(self) -> None:
        """Test the console renderer writes plain text."""
        output = io.StringIO()
        configure_logging(output=output, json_format=False)

        get_logger().info("config_file_loaded", file_path="engine.yaml")

        text = output.getvalue()
        assert "config_file_loaded" in text
        assert "file_path=engine.yaml" in text
