"""Shared enums and types for peacefully."""

from enum import StrEnum
from typing import Optional


class Theme(StrEnum):
    PATIENCE = "patience"
    GRATITUDE = "gratitude"
    GROWTH = "growth"
    REFLECTION = "reflection"
    HOPE = "hope"

    @property
    def label(self) -> str:
        return THEME_LABELS[self]

    @property
    def icon(self) -> str:
        return THEME_ICONS[self]

    @classmethod
    def parse(cls, value) -> Optional["Theme"]:
        """Return the Theme for a stored key, or None if it isn't one of ours."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (TypeError, ValueError):
            return None


THEME_KEYS = tuple(Theme)

THEME_LABELS = {
    Theme.PATIENCE: "Patience",
    Theme.GRATITUDE: "Gratitude",
    Theme.GROWTH: "Growth",
    Theme.REFLECTION: "Reflection",
    Theme.HOPE: "Hope",
}

THEME_ICONS = {
    Theme.PATIENCE: "leaf",
    Theme.GRATITUDE: "flower",
    Theme.GROWTH: "partly-sunny",
    Theme.REFLECTION: "moon",
    Theme.HOPE: "sunny",
}

DEFAULT_THEME = Theme.REFLECTION
