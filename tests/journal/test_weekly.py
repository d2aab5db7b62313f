"""Tests for the weekly per-theme aggregator."""

from datetime import datetime, timezone

from conftest import make_reflection
from journal.weekly import (
    build_week_view,
    get_earliest_week_offset,
    get_week_data_by_theme,
)
from shared_types import THEME_KEYS, Theme

UTC = timezone.utc


def _total(week):
    return sum(sum(day.values()) for day in week)


class TestWeekData:
    def test_shape_is_seven_days_all_themes(self, now):
        week = get_week_data_by_theme([], 0, now, UTC)
        assert len(week) == 7
        for day in week:
            assert set(day) == set(THEME_KEYS)
            assert all(v == 0 for v in day.values())

    def test_wednesday_lands_in_index_two(self, now):
        reflections = [make_reflection("2025-02-12T09:00:00+00:00", "gratitude")]
        week = get_week_data_by_theme(reflections, 0, now, UTC)
        assert week[2][Theme.GRATITUDE] == 1
        assert _total(week) == 1

    def test_monday_and_sunday_indexes(self, now):
        reflections = [
            make_reflection("2025-02-10T00:00:00+00:00", "hope"),
            make_reflection("2025-02-16T23:59:59+00:00", "patience"),
        ]
        week = get_week_data_by_theme(reflections, 0, now, UTC)
        assert week[0][Theme.HOPE] == 1
        assert week[6][Theme.PATIENCE] == 1

    def test_window_is_half_open(self, now):
        reflections = [
            make_reflection("2025-02-09T23:59:59+00:00", "hope"),
            make_reflection("2025-02-17T00:00:00+00:00", "hope"),
        ]
        assert _total(get_week_data_by_theme(reflections, 0, now, UTC)) == 0

    def test_previous_week_offset(self, now, sample_reflections):
        week = get_week_data_by_theme(sample_reflections, -1, now, UTC)
        # 2 Feb (Sunday) and 3 Feb (Monday) straddle the boundary
        assert week[0][Theme.REFLECTION] == 1
        assert _total(week) == 1

    def test_unknown_theme_skipped(self, now):
        reflections = [
            make_reflection("2025-02-12T09:00:00+00:00", "courage"),
            make_reflection("2025-02-12T10:00:00+00:00", ""),
        ]
        assert _total(get_week_data_by_theme(reflections, 0, now, UTC)) == 0

    def test_undated_skipped(self, now):
        reflections = [make_reflection(None, "hope"), make_reflection("bad", "hope")]
        assert _total(get_week_data_by_theme(reflections, 0, now, UTC)) == 0

    def test_does_not_mutate_input(self, now, sample_reflections):
        before = [r.model_dump() for r in sample_reflections]
        get_week_data_by_theme(sample_reflections, 0, now, UTC)
        assert [r.model_dump() for r in sample_reflections] == before


class TestEarliestWeek:
    def test_no_reflections(self, now):
        assert get_earliest_week_offset([], now, UTC) == 0

    def test_this_week_only(self, now):
        reflections = [make_reflection("2025-02-11T09:00:00+00:00")]
        assert get_earliest_week_offset(reflections, now, UTC) == 0

    def test_sample_goes_back_two_weeks(self, now, sample_reflections):
        # 2 Feb is the Sunday of the week starting 27 Jan
        assert get_earliest_week_offset(sample_reflections, now, UTC) == -2

    def test_out_of_range_timestamp_is_skipped(self, now, sample_reflections):
        ancient = make_reflection("0001-01-01T00:00:00+05:00", "hope", "Very old", "99")
        reflections = [*sample_reflections, ancient]
        assert get_earliest_week_offset(reflections, now, UTC) == -2
        assert _total(get_week_data_by_theme(reflections, 0, now, UTC)) == 4


class TestWeekView:
    def test_current_week_view(self, now, sample_reflections):
        view = build_week_view(sample_reflections, 0, now, UTC)
        assert view.is_current_week
        assert not view.can_go_forward
        assert view.can_go_back
        assert view.has_data
        assert view.totals == [1, 1, 2, 0, 0, 0, 0]
        assert view.max_bar == 2

    def test_earliest_week_blocks_going_back(self, now, sample_reflections):
        view = build_week_view(sample_reflections, -2, now, UTC)
        assert view.is_earliest_week
        assert not view.can_go_back
        assert view.can_go_forward

    def test_empty_week(self, now):
        view = build_week_view([], 0, now, UTC)
        assert not view.has_data
        assert view.max_bar == 1
        assert view.is_earliest_week

    def test_future_offset_clamped(self, now, sample_reflections):
        view = build_week_view(sample_reflections, 3, now, UTC)
        assert view.week_offset == 0
        assert view.is_current_week

    def test_theme_totals(self, now, sample_reflections):
        totals = build_week_view(sample_reflections, 0, now, UTC).theme_totals()
        assert totals[Theme.GRATITUDE] == 1
        assert totals[Theme.HOPE] == 1
        assert totals[Theme.PATIENCE] == 1
        assert totals[Theme.GROWTH] == 1
        assert totals[Theme.REFLECTION] == 0

    def test_label_spans_monday_to_sunday(self):
        now = datetime(2025, 2, 12, tzinfo=UTC)
        label = build_week_view([], 0, now, UTC).label
        assert label.startswith(datetime(2025, 2, 10).strftime("%a"))
        assert "16" in label
