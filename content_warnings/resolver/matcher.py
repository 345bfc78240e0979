"""Match predicate for catalog search results."""

from collections.abc import Sequence

from content_warnings.catalog.models import CatalogEntry, ItemKind


def _names_match(entry: CatalogEntry, title: str, year: str | None) -> bool:
    """Check the entry name against the bare title or 'title year'."""
    if entry.name == title:
        return True
    return year is not None and entry.name == f"{title} {year}"


def match_catalog_result(
    candidates: Sequence[CatalogEntry],
    tmdb_id: int | None,
    title: str,
    year: str | None,
    is_series: bool,
) -> CatalogEntry | None:
    """Pick the first acceptable candidate from a search result.

    Candidates are scanned in order:
    - a kind label that differs from the expected kind skips the candidate;
    - an equal TMDB id accepts it immediately;
    - a different TMDB id on the candidate skips it, so a remake and its
      original sharing a title are never confused;
    - otherwise the name must equal the title (or "title year") and the
      release year must equal the year.

    Args:
        candidates: Search results in response order.
        tmdb_id: TMDB id of the viewed work, if known.
        title: Title to match.
        year: Release year to match.
        is_series: Whether the viewed work is a series.

    Returns:
        The first accepted candidate, or None.
    """
    expected_kind = ItemKind.expected(is_series)

    for entry in candidates:
        if entry.item_type_name and entry.item_type_name != expected_kind.value:
            continue

        if tmdb_id is not None and entry.tmdb_id == tmdb_id:
            return entry

        if entry.tmdb_id is not None and tmdb_id is not None:
            continue

        if _names_match(entry, title, year) and entry.release_year == year:
            return entry

    return None
