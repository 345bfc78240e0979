"""Ordering and filtering of the selectable topic list."""

from collections.abc import Iterable, Set

from content_warnings.catalog.models import TopicSummary


def order_topics(
    topics: Iterable[TopicSummary],
    pinned_ids: Set[int],
) -> list[TopicSummary]:
    """Order topics for the pin selection list.

    Pinned topics come first, then topics are grouped by category name
    and ordered by id within a category.

    Args:
        topics: Topics to order.
        pinned_ids: Identifiers of pinned topics.

    Returns:
        New ordered list.
    """
    return sorted(
        topics,
        key=lambda t: (t.id not in pinned_ids, t.category_name, t.id),
    )


def filter_topics(topics: Iterable[TopicSummary], query: str) -> list[TopicSummary]:
    """Filter topics by a case-insensitive substring query.

    Matches against the topic name, category name, and keywords.
    A blank query keeps every topic.

    Args:
        topics: Topics to filter.
        query: Search text.

    Returns:
        Matching topics in their original order.
    """
    needle = query.strip().lower()
    if not needle:
        return list(topics)

    return [
        t
        for t in topics
        if needle in t.name.lower()
        or needle in t.category_name.lower()
        or needle in t.keywords.lower()
    ]
