"""Tests for the recent-picks no-repeat queue."""

import pytest

from decision_session import RecentPicksQueue


class TestRecentPicksQueue:

    def test_push_new_drops_oldest(self):
        q = RecentPicksQueue(3, ["A", "B", "C"])
        q.push("D")
        assert q.to_list() == ["B", "C", "D"]

    def test_push_existing_moves_to_end(self):
        q = RecentPicksQueue(3, ["B", "C", "D"])
        q.push("B")
        assert q.to_list() == ["C", "D", "B"]
        assert len(q) == 3

    def test_never_exceeds_limit_or_duplicates(self):
        q = RecentPicksQueue(3)
        for title in ["A", "B", "A", "C", "D", "D", "E", "B"]:
            q.push(title)
            items = q.to_list()
            assert len(items) <= 3
            assert len(items) == len(set(items))

    def test_zero_limit_keeps_nothing(self):
        q = RecentPicksQueue(0)
        q.push("A")
        assert q.to_list() == []

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            RecentPicksQueue(-1)

    def test_exclude_from_filters_recent(self):
        q = RecentPicksQueue(3, ["A"])
        assert q.exclude_from(["A", "B", "C"]) == ["B", "C"]

    def test_exclude_from_falls_back_to_full_pool(self):
        q = RecentPicksQueue(3, ["A", "B"])
        assert q.exclude_from(["A", "B"]) == ["A", "B"]

    def test_clear(self):
        q = RecentPicksQueue(3, ["A", "B"])
        q.clear()
        assert len(q) == 0
        assert "A" not in q
