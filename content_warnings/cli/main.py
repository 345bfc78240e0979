"""CLI commands for looking up content warnings."""

import json
import logging
import sys
import uuid
from pathlib import Path

import click

from content_warnings import __version__
from content_warnings.catalog.client import DtddClient
from content_warnings.catalog.metrics import CatalogMetrics
from content_warnings.catalog.topics import filter_topics, order_topics
from content_warnings.classifier.classifier import VoteClassifier
from content_warnings.config.constants import COMPONENT_CLI
from content_warnings.config.error_hints import format_validation_error
from content_warnings.config.loader import ConfigLoader, ConfigValidationError
from content_warnings.config.schemas import EngineConfig
from content_warnings.fetch.client import HttpFetcher
from content_warnings.observability.logging import (
    bind_run_context,
    configure_logging,
    get_logger,
)
from content_warnings.panel.models import PanelResult, PanelWarning
from content_warnings.panel.service import WarningPanelService
from content_warnings.panel.state_machine import PanelState
from content_warnings.preferences.models import UserPreferences
from content_warnings.preferences.store import YamlPreferenceStore
from content_warnings.resolver.metrics import ResolverMetrics
from content_warnings.resolver.models import WorkIdentity
from content_warnings.resolver.resolver import IdentityResolver
from content_warnings.settings.app import get_settings


logger = get_logger(__name__)


def build_client(config: EngineConfig, run_id: str) -> DtddClient:
    """Build the catalog client for a run.

    Args:
        config: Engine configuration.
        run_id: Run identifier.

    Returns:
        Configured DtddClient.
    """
    fetcher = HttpFetcher(config=config.fetch, run_id=run_id)
    return DtddClient(
        fetcher,
        settings=get_settings(),
        api_config=config.api,
        run_id=run_id,
    )


def _echo_config_errors(loader: ConfigLoader) -> None:
    click.echo("Configuration validation failed:", err=True)
    for error in loader.validation_errors:
        formatted = format_validation_error(
            location=error["loc"],
            message=error["msg"],
            error_type=error.get("type", "unknown"),
            include_hint=True,
        )
        click.echo(f"  - {formatted}", err=True)


def _load_config(config_path: Path | None, run_id: str) -> EngineConfig:
    """Load configuration, exiting with hints on failure."""
    loader = ConfigLoader(run_id=run_id)
    try:
        return loader.load(config_path)
    except ConfigValidationError:
        _echo_config_errors(loader)
        sys.exit(1)


def _load_preferences(prefs_path: Path | None, run_id: str) -> YamlPreferenceStore | None:
    """Open the preferences file, exiting on a malformed file."""
    if prefs_path is None:
        return None
    try:
        return YamlPreferenceStore(prefs_path, run_id=run_id)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _format_warning(warning: PanelWarning) -> str:
    marker = "!" if warning.is_sensitive else " "
    line = (
        f" {marker} [{warning.category.value:<7}] {warning.name} "
        f"(yes {warning.yes} / no {warning.no})"
    )
    if warning.comment:
        line += f" - {warning.comment}"
    return line


def _warning_dict(warning: PanelWarning) -> dict[str, object]:
    return {
        "topic_id": warning.topic_id,
        "name": warning.name,
        "yes": warning.yes,
        "no": warning.no,
        "category": warning.category.value,
        "is_sensitive": warning.is_sensitive,
        "is_pinned": warning.is_pinned,
        "comment": warning.comment,
    }


def _echo_panel(result: PanelResult, json_output: bool) -> None:
    """Print a panel result."""
    if json_output:
        output = {
            "state": result.state.value,
            "media_id": result.media_id,
            "media_url": result.media_url,
            "pinned": [_warning_dict(w) for w in result.pinned],
            "automatic": [_warning_dict(w) for w in result.automatic],
        }
        click.echo(json.dumps(output, indent=2))
        return

    if result.state == PanelState.ERROR:
        click.echo("Failed to load content warnings.", err=True)
        return
    if result.state == PanelState.NOT_FOUND:
        click.echo("No content warning data available for this title.")
        if result.media_url:
            click.echo(f"  {result.media_url}")
        return

    click.echo(f"Content warnings ({result.media_url})")
    click.echo("=" * 40)
    if result.pinned:
        click.echo("Pinned:")
        for warning in result.pinned:
            click.echo(_format_warning(warning))
    if result.automatic:
        click.echo("Confirmed:")
        for warning in result.automatic:
            click.echo(_format_warning(warning))
    if not result.has_warnings:
        click.echo("No confirmed warnings.")


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Content warnings for films and series from DoesTheDogDie."""


@cli.command()
@click.option("--imdb-id", default=None, help="IMDb identifier (e.g. tt0111161).")
@click.option("--tmdb-id", type=int, default=None, help="TMDB identifier.")
@click.option("--title", default=None, help="Displayed title.")
@click.option("--year", default=None, help="Release year.")
@click.option("--native-title", default=None, help="Original-language title.")
@click.option(
    "--series/--movie",
    "is_series",
    default=False,
    help="Whether the work is a series.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to engine.yaml configuration file.",
)
@click.option(
    "--prefs",
    "prefs_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to a YAML preferences file.",
)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON.")
@click.option(
    "--json-logs/--no-json-logs",
    default=False,
    help="Output logs in JSON format.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
def lookup(  # noqa: PLR0913
    imdb_id: str | None,
    tmdb_id: int | None,
    title: str | None,
    year: str | None,
    native_title: str | None,
    is_series: bool,
    config_path: Path | None,
    prefs_path: Path | None,
    json_output: bool,
    json_logs: bool,
    verbose: bool,
) -> None:
    """Look up content warnings for a film or series."""
    run_id = str(uuid.uuid4())
    log_level = logging.DEBUG if verbose else logging.WARNING
    configure_logging(level=log_level, json_format=json_logs)
    bind_run_context(run_id)

    if not (imdb_id or title or native_title):
        raise click.UsageError(
            "Provide at least one of --imdb-id, --title, or --native-title."
        )

    log = logger.bind(run_id=run_id, component=COMPONENT_CLI, command="lookup")
    config = _load_config(config_path, run_id)
    preferences = _load_preferences(prefs_path, run_id)

    identity = WorkIdentity(
        imdb_id=imdb_id,
        tmdb_id=tmdb_id,
        is_series=is_series,
        title=title,
        year=year,
        native_title=native_title,
    )

    client = build_client(config, run_id)
    service = WarningPanelService(
        resolver=IdentityResolver(client, run_id=run_id),
        details=client,
        classifier=VoteClassifier(config.classifier),
        preferences=preferences,
        api_config=config.api,
        run_id=run_id,
    )
    result = service.load(identity)
    log.info(
        "lookup_complete",
        state=result.state.value,
        media_id=result.media_id,
        catalog_metrics=CatalogMetrics.get_instance().to_dict(),
        resolver_metrics=ResolverMetrics.get_instance().to_dict(),
    )

    _echo_panel(result, json_output)
    if result.state == PanelState.ERROR:
        sys.exit(1)


@cli.command()
@click.option("--search", "query", default="", help="Filter topics by text.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to engine.yaml configuration file.",
)
@click.option(
    "--prefs",
    "prefs_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to a YAML preferences file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
def topics(
    query: str,
    config_path: Path | None,
    prefs_path: Path | None,
    verbose: bool,
) -> None:
    """List selectable warning topics, pinned topics first."""
    run_id = str(uuid.uuid4())
    configure_logging(
        level=logging.DEBUG if verbose else logging.WARNING, json_format=False
    )
    bind_run_context(run_id)

    config = _load_config(config_path, run_id)
    store = _load_preferences(prefs_path, run_id)
    prefs = store.load_preferences() if store is not None else UserPreferences()

    client = build_client(config, run_id)
    if not client.has_api_key:
        click.echo(
            "Warning: DTDD_API_KEY is not set; the topic list may be unavailable.",
            err=True,
        )

    all_topics = client.get_topics()
    if all_topics is None:
        click.echo("Failed to load topics.", err=True)
        sys.exit(1)

    ordered = order_topics(filter_topics(all_topics, query), prefs.pinned_topic_ids)
    if not ordered:
        click.echo("No topics match your search.")
        return

    for topic in ordered:
        marker = "*" if topic.id in prefs.pinned_topic_ids else " "
        click.echo(f" {marker} {topic.id:>5}  {topic.category_name} / {topic.name}")


@cli.command()
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(exists=True, path_type=Path),
    help="Path to engine.yaml configuration file.",
)
def validate(config_path: Path) -> None:
    """Validate a configuration file."""
    run_id = str(uuid.uuid4())
    configure_logging(level=logging.WARNING, json_format=False)
    bind_run_context(run_id)

    loader = ConfigLoader(run_id=run_id)
    try:
        config = loader.load(config_path)
    except ConfigValidationError:
        _echo_config_errors(loader)
        sys.exit(1)

    click.echo("Configuration is valid!")
    click.echo(f"  Version: {config.version}")
    click.echo(f"  Minimum votes: {config.classifier.min_votes}")
    click.echo(f"  Minimum votes (sensitive): {config.classifier.min_votes_sensitive}")
    click.echo(
        f"  Confidence level: {config.classifier.confidence_level} "
        f"(z = {config.classifier.z_score:.3f})"
    )
    click.echo(f"  Checksum: {loader.file_checksum}")


if __name__ == "__main__":
    cli()
