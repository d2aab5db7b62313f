"""Markdown reflection storage with YAML frontmatter."""

import re
from pathlib import Path
from typing import Optional

import frontmatter
import structlog
import yaml

from shared_types import Theme

from .dates import sort_timestamp
from .models import Reflection

logger = structlog.get_logger()

_SAFE_ID = re.compile(r"^[A-Za-z0-9-]{1,64}$")


def _validate_id(reflection_id: str) -> str:
    """Ids end up in filenames. Only [A-Za-z0-9-] allowed."""
    reflection_id = str(reflection_id)
    if not _SAFE_ID.match(reflection_id):
        raise ValueError(f"Invalid reflection id: {reflection_id!r}")
    return reflection_id


class ReflectionStore:
    """One markdown file per reflection, metadata in frontmatter."""

    def __init__(self, reflections_dir: str | Path):
        self.reflections_dir = Path(reflections_dir).expanduser().resolve()
        self.reflections_dir.mkdir(parents=True, exist_ok=True)

    def _generate_filename(self, reflection: Reflection) -> str:
        date_str = reflection.date.strftime("%Y-%m-%d") if reflection.date else "undated"
        return f"{date_str}_{_validate_id(reflection.id)}.md"

    def _validate_path(self, filepath: Path) -> Path:
        """Ensure resolved path is inside reflections_dir."""
        resolved = filepath.resolve()
        if not resolved.is_relative_to(self.reflections_dir):
            raise ValueError(f"Path escapes reflections directory: {filepath}")
        return resolved

    def _find(self, reflection_id: str) -> Optional[Path]:
        reflection_id = _validate_id(reflection_id)
        for f in self.reflections_dir.glob(f"*_{reflection_id}.md"):
            return self._validate_path(f)
        return None

    def _write(self, filepath: Path, reflection: Reflection) -> None:
        post = frontmatter.Post(reflection.content)
        for k, v in reflection.to_metadata().items():
            post[k] = v
        with open(filepath, "w") as f:
            f.write(frontmatter.dumps(post))

    @staticmethod
    def _load(filepath: Path) -> Reflection:
        post = frontmatter.load(filepath)
        return Reflection(
            id=post.get("id", filepath.stem.rsplit("_", 1)[-1]),
            date=post.get("date"),
            theme=post.get("theme", Theme.REFLECTION.value),
            prompt=post.get("prompt", ""),
            content=post.content,
        )

    def save(self, reflection: Reflection) -> Path:
        """Persist a new reflection.

        Raises:
            ValueError: If a reflection with the same id already exists
        """
        if self._find(reflection.id) is not None:
            raise ValueError(f"Reflection {reflection.id} already exists")

        filepath = self._validate_path(self.reflections_dir / self._generate_filename(reflection))
        self._write(filepath, reflection)
        logger.info("reflection_saved", id=reflection.id, theme=reflection.theme)
        return filepath

    def get(self, reflection_id: str) -> Optional[Reflection]:
        filepath = self._find(reflection_id)
        if filepath is None:
            return None
        return self._load(filepath)

    def list_reflections(self) -> list[Reflection]:
        """All reflections, newest first. Unreadable files are skipped."""
        reflections = []
        for f in self.reflections_dir.glob("*.md"):
            try:
                reflections.append(self._load(f))
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning("reflection_file_skipped", file=f.name, error=str(e))
                continue
        reflections.sort(key=lambda r: sort_timestamp(r.date), reverse=True)
        return reflections

    def update(
        self,
        reflection_id: str,
        content: Optional[str] = None,
        theme: Optional[str | Theme] = None,
        prompt: Optional[str] = None,
    ) -> Optional[Reflection]:
        """Edit content/theme/prompt. Returns None if the reflection is gone."""
        filepath = self._find(reflection_id)
        if filepath is None:
            logger.debug("reflection_update_missing", id=reflection_id)
            return None

        updated = self._load(filepath).edit(content=content, theme=theme, prompt=prompt)
        self._write(filepath, updated)
        logger.info("reflection_updated", id=reflection_id)
        return updated

    def delete(self, reflection_id: str) -> bool:
        filepath = self._find(reflection_id)
        if filepath is None:
            return False
        filepath.unlink()
        logger.info("reflection_deleted", id=reflection_id)
        return True

    def reset(self) -> int:
        """Delete every reflection. Returns how many were removed."""
        removed = 0
        for f in self.reflections_dir.glob("*.md"):
            f.unlink()
            removed += 1
        logger.info("reflections_reset", removed=removed)
        return removed
