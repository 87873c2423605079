"""Tests for the wind speed classifier."""

import pytest

from tidecast.extract.wind import WIND_BANDS, WIND_LABELS, classify_wind


class TestClassifyWind:
    @pytest.mark.parametrize(
        "speed,label",
        [
            (0, "calm"),
            (1, "calm"),
            (5, "light air"),
            (11, "light breeze"),
            (19, "gentle breeze"),
            (29, "moderate breeze"),
            (39, "fresh breeze"),
            (49, "strong"),
            (61, "near gale"),
            (74, "gale"),
            (88, "strong gale"),
            (102, "storm"),
            (117, "violent storm"),
            (118, "hurricane"),
            (250, "hurricane"),
        ],
    )
    def test_bands(self, speed: int, label: str):
        assert classify_wind(speed) == label

    def test_negative_is_calm(self):
        assert classify_wind(-1) == "calm"

    def test_each_boundary_moves_to_next_band(self):
        for i, (upper, label) in enumerate(WIND_BANDS):
            assert classify_wind(upper - 1) == label
            assert classify_wind(upper) == WIND_LABELS[i + 1]

    def test_monotonic(self):
        severity = [WIND_LABELS.index(classify_wind(s)) for s in range(-5, 200)]
        assert severity == sorted(severity)
