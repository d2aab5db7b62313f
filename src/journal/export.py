"""Reflection export functionality."""

import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

from shared_types import Theme

from .dates import local_or_none, resolve_now
from .stats import filter_by_theme
from .storage import ReflectionStore


def _is_after(reflection, cutoff: datetime) -> bool:
    local = local_or_none(reflection.date)
    return local is not None and local >= cutoff


class ReflectionExporter:
    """Export reflections to various formats."""

    def __init__(self, store: ReflectionStore):
        self.store = store

    def export_json(
        self,
        output_path: Path,
        theme: Optional[str] = None,
        days: Optional[int] = None,
        limit: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> int:
        """Export reflections to JSON.

        Args:
            output_path: Output file path
            theme: Filter by theme
            days: Only include reflections from last N days
            limit: Max reflections to export

        Returns:
            Number of reflections exported
        """
        entries = self._get_entries(theme, days, limit, now)

        export_data = {
            "exported_at": resolve_now(now).isoformat(),
            "count": len(entries),
            "reflections": entries,
        }

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w") as f:
            json.dump(export_data, f, indent=2, default=str)

        return len(entries)

    def export_markdown(
        self,
        output_path: Path,
        theme: Optional[str] = None,
        days: Optional[int] = None,
        limit: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> int:
        """Export reflections to Markdown. Same filters as export_json."""
        entries = self._get_entries(theme, days, limit, now)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        lines = [
            "# Reflections Export",
            "",
            f"Exported: {resolve_now(now).strftime('%Y-%m-%d %H:%M')}",
            f"Reflections: {len(entries)}",
            "",
            "---",
            "",
        ]

        for entry in entries:
            key = Theme.parse(entry["theme"])
            label = key.label if key else entry["theme"]
            lines.append(f"## {entry['date'][:10] if entry['date'] else 'Undated'} · {label}")
            lines.append("")
            if entry["prompt"]:
                lines.append(f"*{entry['prompt']}*")
                lines.append("")
            lines.append(entry["content"])
            lines.append("")
            lines.append(f"**Words:** {entry['word_count']}")
            lines.append("")
            lines.append("---")
            lines.append("")

        with open(output_path, "w") as f:
            f.write("\n".join(lines))

        return len(entries)

    def _get_entries(
        self,
        theme: Optional[str] = None,
        days: Optional[int] = None,
        limit: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> list[dict]:
        """Filtered reflections as plain dicts, newest first."""
        reflections = filter_by_theme(self.store.list_reflections(), theme)

        if days:
            cutoff = resolve_now(now) - timedelta(days=days)
            reflections = [r for r in reflections if _is_after(r, cutoff)]

        if limit:
            reflections = reflections[:limit]

        return [r.model_dump(mode="json") for r in reflections]
