"""Presentation models for the warning panel."""

from dataclasses import dataclass, field

from content_warnings.catalog.models import TopicVote
from content_warnings.classifier.models import Category
from content_warnings.panel.state_machine import PanelState


@dataclass(frozen=True)
class PanelWarning:
    """One warning row of the panel.

    Attributes:
        topic_id: Topic identifier.
        name: Topic display name.
        yes: Yes vote count.
        no: No vote count.
        category: Classified category.
        is_sensitive: Whether the topic is flagged as highly sensitive.
        is_pinned: Whether the user pinned the topic.
        comment: Optional community comment.
    """

    topic_id: int
    name: str
    yes: int
    no: int
    category: Category
    is_sensitive: bool = False
    is_pinned: bool = False
    comment: str | None = None

    @classmethod
    def from_vote(
        cls,
        vote: TopicVote,
        category: Category,
        is_pinned: bool,
    ) -> "PanelWarning":
        """Build a row from a classified topic vote."""
        return cls(
            topic_id=vote.topic_id,
            name=vote.topic.name,
            yes=vote.yes_sum,
            no=vote.no_sum,
            category=category,
            is_sensitive=vote.topic.is_sensitive,
            is_pinned=is_pinned,
            comment=vote.comment,
        )


@dataclass(frozen=True)
class PanelResult:
    """Outcome of loading the panel for one work.

    Attributes:
        state: Terminal panel state.
        media_id: Matched catalog identifier, if any.
        media_url: Public page URL of the matched entry, if any.
        pinned: Rows for pinned topics.
        automatic: Rows for confidently present topics.
    """

    state: PanelState
    media_id: int | None = None
    media_url: str | None = None
    pinned: list[PanelWarning] = field(default_factory=list)
    automatic: list[PanelWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """Check whether any rows are present."""
        return bool(self.pinned or self.automatic)
