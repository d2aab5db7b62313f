from .models import Reflection, word_count
from .stats import ReflectionStats, compute_stats
from .storage import ReflectionStore
from .streak import get_current_streak, get_longest_streak, unique_reflection_days
from .weekly import WeekView, build_week_view

__all__ = [
    "Reflection",
    "ReflectionStore",
    "ReflectionStats",
    "WeekView",
    "build_week_view",
    "compute_stats",
    "get_current_streak",
    "get_longest_streak",
    "unique_reflection_days",
    "word_count",
]
