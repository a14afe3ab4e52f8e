"""Tests for score helpers, labels, and title normalization."""

import pytest

from smart_picker import adventure_label, beta_mean, clamp_adventure, normalize_title


class TestBetaMean:

    def test_untouched_option_is_neutral(self):
        assert beta_mean(0, 0) == 0.5

    @pytest.mark.parametrize("n", [0, 1, 5, 100])
    def test_equal_counts_are_neutral(self, n):
        assert beta_mean(n, n) == pytest.approx(0.5)

    def test_strictly_inside_unit_interval(self):
        for s in range(0, 30):
            for f in range(0, 30):
                assert 0.0 < beta_mean(s, f) < 1.0

    def test_increasing_in_success(self):
        for f in (0, 3, 10):
            values = [beta_mean(s, f) for s in range(20)]
            assert values == sorted(values)
            assert len(set(values)) == len(values)

    def test_known_values(self):
        assert beta_mean(1, 0) == pytest.approx(2 / 3)
        assert beta_mean(0, 1) == pytest.approx(1 / 3)
        assert beta_mean(3, 1) == pytest.approx(4 / 6)

    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError):
            beta_mean(-1, 0)


class TestAdventureLabel:

    @pytest.mark.parametrize(
        "adventure,label",
        [
            (0.0, "No Adventure"),
            (0.049, "No Adventure"),
            (0.05, "Low"),
            (0.24, "Low"),
            (0.25, "Balanced-"),
            (0.30, "Balanced-"),
            (0.50, "Balanced+"),
            (0.75, "High"),
            (0.949, "High"),
            (0.95, "Surprise Me"),
            (1.0, "Surprise Me"),
        ],
    )
    def test_bands(self, adventure, label):
        assert adventure_label(adventure) == label


class TestClampAdventure:

    def test_in_range_unchanged(self):
        assert clamp_adventure(0.42) == 0.42

    def test_clamps_both_ends(self):
        assert clamp_adventure(-0.3) == 0.0
        assert clamp_adventure(1.7) == 1.0

    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            clamp_adventure(float("nan"))


class TestNormalizeTitle:

    def test_trims_whitespace(self):
        assert normalize_title("  Tacos \n") == "Tacos"

    def test_case_sensitive(self):
        assert normalize_title("tacos") != normalize_title("Tacos")

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            normalize_title("   ")
