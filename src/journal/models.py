"""Reflection record."""

import re
from datetime import datetime
from typing import Optional

import structlog
from pydantic import BaseModel, ConfigDict, computed_field, field_validator

from shared_types import Theme

from .dates import parse_timestamp, resolve_now

logger = structlog.get_logger()

MAX_CONTENT_LENGTH = 100_000  # 100KB

_WHITESPACE = re.compile(r"\s+")


def word_count(text: Optional[str]) -> int:
    """Count non-empty whitespace-separated tokens."""
    if not text:
        return 0
    return len([w for w in _WHITESPACE.split(text.strip()) if w])


class Reflection(BaseModel):
    """A single themed journal reflection.

    ``word_count`` is always derived from ``content``; any stored value is
    ignored. ``date`` is fixed at creation and survives edits.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    date: Optional[datetime] = None
    theme: str = Theme.REFLECTION.value
    prompt: str = ""
    content: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return str(v)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        parsed = parse_timestamp(v)
        if parsed is None and v not in (None, ""):
            logger.warning("reflection_date_unparseable", value=str(v)[:40])
        return parsed

    @field_validator("theme", mode="before")
    @classmethod
    def coerce_theme(cls, v):
        return "" if v is None else str(v)

    @field_validator("prompt", "content", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return "" if v is None else v

    @computed_field
    @property
    def word_count(self) -> int:
        return word_count(self.content)

    @property
    def theme_key(self) -> Optional[Theme]:
        """The recognized Theme, or None for unknown stored keys."""
        return Theme.parse(self.theme)

    @classmethod
    def new(
        cls,
        content: str,
        theme: str | Theme = Theme.REFLECTION,
        prompt: str = "",
        now: Optional[datetime] = None,
    ) -> "Reflection":
        """Create a reflection stamped with the current instant.

        Raises:
            ValueError: If content is empty/too long or theme is not recognized
        """
        content = (content or "").strip()
        if not content:
            raise ValueError("Reflection content is empty")
        if len(content) > MAX_CONTENT_LENGTH:
            raise ValueError(f"Content exceeds max length ({MAX_CONTENT_LENGTH} chars)")

        key = Theme.parse(theme)
        if key is None:
            raise ValueError(f"Invalid theme '{theme}'. Must be one of {tuple(Theme)}")

        created = now if now is not None and now.tzinfo is not None else resolve_now(now)
        return cls(
            id=str(int(created.timestamp() * 1000)),
            date=created,
            theme=key.value,
            prompt=prompt or "",
            content=content,
        )

    def edit(
        self,
        content: Optional[str] = None,
        theme: Optional[str | Theme] = None,
        prompt: Optional[str] = None,
    ) -> "Reflection":
        """Return an edited copy. ``id`` and ``date`` never change."""
        changes = {}
        if content is not None:
            content = content.strip()
            if not content:
                raise ValueError("Reflection content is empty")
            if len(content) > MAX_CONTENT_LENGTH:
                raise ValueError(f"Content exceeds max length ({MAX_CONTENT_LENGTH} chars)")
            changes["content"] = content
        if theme is not None:
            key = Theme.parse(theme)
            if key is None:
                raise ValueError(f"Invalid theme '{theme}'. Must be one of {tuple(Theme)}")
            changes["theme"] = key.value
        if prompt is not None:
            changes["prompt"] = prompt
        return self.model_copy(update=changes)

    def to_metadata(self) -> dict:
        """Frontmatter fields for persistence."""
        return {
            "id": self.id,
            "date": self.date.isoformat() if self.date else "",
            "theme": self.theme,
            "prompt": self.prompt,
            "word_count": self.word_count,
        }
