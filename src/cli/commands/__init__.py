"""CLI command modules."""

from .export import export
from .growth import growth, streak
from .init import init
from .journal import delete, edit, journey, reset, view
from .reflect import reflect
from .settings import settings

__all__ = [
    "init",
    "reflect",
    "journey",
    "view",
    "edit",
    "delete",
    "reset",
    "growth",
    "streak",
    "export",
    "settings",
]
