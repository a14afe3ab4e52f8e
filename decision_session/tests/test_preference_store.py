"""Tests for the in-memory preference store."""

from datetime import datetime, timedelta, timezone

from smart_picker import DecisionLog, OptionStat
from decision_session import InMemoryPreferenceStore, ensure_stat

NOW = datetime(2024, 6, 10, 12, 0, tzinfo=timezone.utc)


class TestInMemoryPreferenceStore:

    def test_unknown_title_returns_none(self):
        assert InMemoryPreferenceStore().get_stat("Sushi") is None

    def test_upsert_then_get(self):
        store = InMemoryPreferenceStore()
        store.upsert_stat("Sushi", 2, 1, NOW)
        stat = store.get_stat("Sushi")
        assert (stat.success_count, stat.failure_count, stat.last_used_at) == (2, 1, NOW)

    def test_titles_are_trimmed(self):
        store = InMemoryPreferenceStore()
        store.upsert_stat("  Sushi  ", 1, 0, None)
        assert store.get_stat("Sushi").success_count == 1
        assert "Sushi" in store

    def test_titles_are_case_sensitive(self):
        store = InMemoryPreferenceStore()
        store.upsert_stat("Sushi", 1, 0, None)
        assert store.get_stat("sushi") is None

    def test_returned_records_are_copies(self):
        store = InMemoryPreferenceStore([OptionStat(title="Sushi", success_count=1)])
        snapshot = store.get_stat("Sushi")
        snapshot.success_count = 99
        assert store.get_stat("Sushi").success_count == 1

    def test_ensure_stat_creates_once(self):
        store = InMemoryPreferenceStore()
        created = ensure_stat(store, "Tacos")
        assert (created.success_count, created.failure_count) == (0, 0)
        store.upsert_stat("Tacos", 4, 0, NOW)
        assert ensure_stat(store, "Tacos").success_count == 4
        assert len(store) == 1

    def test_decisions_newest_first(self):
        store = InMemoryPreferenceStore()
        for i, title in enumerate(["A", "B", "C"]):
            store.record_decision(DecisionLog.for_title(title, decided_at=NOW + timedelta(minutes=i)))
        assert [d.title for d in store.list_decisions()] == ["C", "B", "A"]
        assert [d.title for d in store.list_decisions(limit=2)] == ["C", "B"]

    def test_all_stats_sorted_by_title(self):
        store = InMemoryPreferenceStore()
        for title in ["Tacos", "Burgers", "Sushi"]:
            store.upsert_stat(title, 0, 0, None)
        assert [s.title for s in store.all_stats()] == ["Burgers", "Sushi", "Tacos"]
