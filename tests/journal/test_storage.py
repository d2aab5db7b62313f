"""Tests for reflection storage operations."""

import frontmatter
import pytest

from conftest import make_reflection
from journal.models import Reflection
from journal.storage import ReflectionStore


class TestReflectionStore:
    """Test ReflectionStore CRUD operations."""

    def test_save_creates_markdown_file(self, temp_dirs, now):
        store = ReflectionStore(temp_dirs["reflections_dir"])
        r = Reflection.new("Grateful for the rain", theme="gratitude", prompt="Why?", now=now)

        path = store.save(r)

        assert path.exists()
        assert path.name == f"2025-02-12_{r.id}.md"
        post = frontmatter.load(path)
        assert post.content == "Grateful for the rain"
        assert post["theme"] == "gratitude"
        assert post["word_count"] == 4

    def test_get_round_trip(self, temp_dirs, now):
        store = ReflectionStore(temp_dirs["reflections_dir"])
        r = Reflection.new("Grateful for the rain", theme="gratitude", prompt="Why?", now=now)
        store.save(r)

        loaded = store.get(r.id)

        assert loaded == r

    def test_get_missing_returns_none(self, temp_dirs):
        store = ReflectionStore(temp_dirs["reflections_dir"])
        assert store.get("12345") is None

    def test_duplicate_id_rejected(self, temp_dirs, now):
        store = ReflectionStore(temp_dirs["reflections_dir"])
        r = Reflection.new("first", now=now)
        store.save(r)
        with pytest.raises(ValueError, match="already exists"):
            store.save(r)

    def test_list_newest_first(self, populated_store):
        ids = [r.id for r in populated_store["store"].list_reflections()]
        assert ids == ["2", "1", "3", "4", "5", "6"]

    def test_list_returns_fresh_objects(self, populated_store):
        store = populated_store["store"]
        first = store.list_reflections()
        first.clear()
        assert len(store.list_reflections()) == 6

    def test_list_skips_unreadable_files(self, populated_store):
        store = populated_store["store"]
        bad = store.reflections_dir / "2025-02-01_broken.md"
        bad.write_text("---\nid: [unclosed\n---\nbody")

        assert len(store.list_reflections()) == 6

    def test_list_keeps_corrupt_dates(self, temp_dirs):
        store = ReflectionStore(temp_dirs["reflections_dir"])
        (store.reflections_dir / "undated_77.md").write_text(
            "---\nid: '77'\ndate: not-a-date\ntheme: hope\n---\nStill here"
        )

        reflections = store.list_reflections()

        assert len(reflections) == 1
        assert reflections[0].date is None
        assert reflections[0].content == "Still here"

    def test_list_survives_out_of_range_dates(self, temp_dirs):
        store = ReflectionStore(temp_dirs["reflections_dir"])
        (store.reflections_dir / "undated_1.md").write_text(
            "---\nid: '1'\ndate: '0001-01-01T00:00:00'\ntheme: hope\n---\nVery old"
        )
        (store.reflections_dir / "2025-02-10_2.md").write_text(
            "---\nid: '2'\ndate: '2025-02-10T00:00:00'\ntheme: hope\n---\nRecent"
        )

        reflections = store.list_reflections()

        assert [r.id for r in reflections] == ["2", "1"]

    def test_update_content_recomputes_word_count(self, populated_store):
        store = populated_store["store"]

        updated = store.update("1", content="A much longer reflection than before")

        assert updated.word_count == 6
        assert store.get("1").word_count == 6
        assert store.get("1").date == populated_store["reflections"][0].date

    def test_update_theme(self, populated_store):
        store = populated_store["store"]
        store.update("1", theme="hope")
        assert store.get("1").theme == "hope"

    def test_update_missing_returns_none(self, populated_store):
        assert populated_store["store"].update("999", content="x") is None

    def test_delete(self, populated_store):
        store = populated_store["store"]

        assert store.delete("1") is True
        assert store.get("1") is None
        assert store.delete("1") is False

    def test_reset(self, populated_store):
        store = populated_store["store"]

        assert store.reset() == 6
        assert store.list_reflections() == []

    def test_invalid_id_rejected(self, temp_dirs):
        store = ReflectionStore(temp_dirs["reflections_dir"])
        with pytest.raises(ValueError):
            store.get("../../etc/passwd")
        with pytest.raises(ValueError):
            store.save(make_reflection("2025-02-10T09:00:00+00:00", rid="a/b"))
