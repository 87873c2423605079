"""Beaufort-like wind speed descriptions."""

# (exclusive upper bound in km/h, label), checked in order
WIND_BANDS: list[tuple[int, str]] = [
    (2, "calm"),
    (6, "light air"),
    (12, "light breeze"),
    (20, "gentle breeze"),
    (30, "moderate breeze"),
    (40, "fresh breeze"),
    (50, "strong"),
    (62, "near gale"),
    (75, "gale"),
    (89, "strong gale"),
    (103, "storm"),
    (118, "violent storm"),
]
HURRICANE = "hurricane"

WIND_LABELS: list[str] = [label for _, label in WIND_BANDS] + [HURRICANE]


def classify_wind(speed_kmh: int) -> str:
    """Map a wind speed in km/h to its descriptive label."""
    for upper, label in WIND_BANDS:
        if speed_kmh < upper:
            return label
    return HURRICANE
