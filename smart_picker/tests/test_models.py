"""Tests for picker models: config, option stats, decision log."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from smart_picker import DEFAULT_CONFIG, DecisionLog, OptionStat, PickerConfig, resolve_config


class TestPickerConfig:

    def test_defaults(self):
        c = PickerConfig()
        assert c.min_temperature == 0.15
        assert c.base_temperature == 0.55
        assert c.temperature_span == 0.45
        assert c.softmax_floor == 1e-12
        assert c.probability_floor == 1e-9
        assert c.recent_limit == 3
        assert c.default_adventure == 0.30
        assert c.neutral_score == 0.5

    def test_resolve_config(self):
        custom = PickerConfig(recent_limit=5)
        assert resolve_config(None) is DEFAULT_CONFIG
        assert resolve_config(custom) is custom

    def test_from_dict_merges_sections(self):
        c = PickerConfig.from_dict(
            {
                "temperature": {"min": 0.1, "base": 0.6},
                "mixing": {"probability_floor": 1e-6},
                "session": {"recent_limit": 4},
                "animation": {"min_rounds": 4, "max_rounds": 8},
                "default_adventure": 0.7,
                "unknown_key": 1,
            }
        )
        assert c.min_temperature == 0.1
        assert c.base_temperature == 0.6
        assert c.probability_floor == 1e-6
        assert c.recent_limit == 4
        assert c.animation_min_rounds == 4
        assert c.animation_max_rounds == 8
        assert c.default_adventure == 0.7
        assert c.temperature_span == 0.45

    def test_temperature_order_validated(self):
        with pytest.raises(ValidationError):
            PickerConfig(min_temperature=0.8, base_temperature=0.5)

    def test_default_adventure_range_validated(self):
        with pytest.raises(ValidationError):
            PickerConfig(default_adventure=1.5)


class TestOptionStat:

    def test_new_record_is_empty(self):
        stat = OptionStat.new("  Sushi ")
        assert stat.title == "Sushi"
        assert (stat.success_count, stat.failure_count, stat.last_used_at) == (0, 0, None)
        assert stat.score == 0.5

    def test_score_is_beta_mean(self):
        assert OptionStat(title="Tacos", success_count=3, failure_count=1).score == pytest.approx(4 / 6)

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            OptionStat(title="Tacos", failure_count=-1)

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            OptionStat(title="  ")


class TestDecisionLog:

    def test_time_context(self):
        # 2024-06-09 was a Sunday
        entry = DecisionLog.for_title("Ramen", decided_at=datetime(2024, 6, 9, 19, 30, tzinfo=timezone.utc))
        assert entry.title == "Ramen"
        assert entry.hour_of_day == 19
        assert entry.weekday == 1

    def test_saturday_is_seven(self):
        entry = DecisionLog.for_title("Ramen", decided_at=datetime(2024, 6, 15, 8, tzinfo=timezone.utc))
        assert entry.weekday == 7

    def test_defaults_to_now(self):
        entry = DecisionLog.for_title("Ramen")
        assert entry.decided_at.tzinfo is not None
