"""Unit and compass direction helpers shared by the classifiers."""

import math

# 16-point compass, clockwise from north
COMPASS_16 = (
    "北", "北北東", "東北", "東北東",
    "東", "東南東", "東南", "南南東",
    "南", "南南西", "西南", "西南西",
    "西", "西北西", "西北", "北北西",
)

COMPASS_8 = ("北", "東北", "東", "東南", "南", "西南", "西", "西北")

# Wind direction text fragments (direction the wind comes FROM).
# Two-character keys are matched before single characters so that
# "東北風" resolves to 45° instead of matching "北" first.
_DIRECTION_FRAGMENTS = {
    "東北": 45, "北東": 45,
    "東南": 135, "南東": 135,
    "西南": 225, "南西": 225,
    "西北": 315, "北西": 315,
    "偏北": 0, "偏東": 90, "偏南": 180, "偏西": 270,
    "北": 0, "東": 90, "南": 180, "西": 270,
}

_MISSING_TEXT = {"", "--", "-", "None", "null"}

MS_TO_KMH = 3.6


def normalize_angle(angle: float) -> float:
    """Normalize an angle into the [0, 360) range."""
    normalized = angle % 360
    if normalized < 0:
        normalized += 360
    return normalized


def angular_difference(angle1: float, angle2: float) -> float:
    """Smallest difference between two bearings, between 0 and 180 degrees."""
    diff = abs(normalize_angle(angle1) - normalize_angle(angle2))
    return 360 - diff if diff > 180 else diff


def ms_to_kmh(speed_ms: float | None) -> float | None:
    """Convert a speed in m/s to km/h, rounded to one decimal."""
    if speed_ms is None:
        return None
    return round(speed_ms * MS_TO_KMH, 1)


def parse_wind_speed(value: float | int | None) -> float | None:
    """Validate a wind speed reading.

    Returns:
        The speed as a float, or None when it is missing, not finite or negative
    """
    if value is None or isinstance(value, bool):
        return None
    speed = float(value)
    if not math.isfinite(speed) or speed < 0:
        return None
    return speed


def degrees_to_compass16(direction: float) -> str:
    """Get the 16-point compass label for a bearing."""
    index = round(normalize_angle(direction) / 22.5) % 16
    return COMPASS_16[index]


def degrees_to_compass8(direction: float) -> str:
    """Get the 8-point compass label for a bearing."""
    index = round(normalize_angle(direction) / 45) % 8
    return COMPASS_8[index]


def parse_wind_direction(value: float | int | str | None) -> float | None:
    """Parse a wind direction into degrees.

    Accepts a bearing in degrees, a numeric string, or Chinese direction
    text such as "偏東風" or "東北東".

    Args:
        value: Raw wind direction from an observation or forecast

    Returns:
        Bearing in [0, 360), or None if the value can't be interpreted
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        return normalize_angle(float(value)) if math.isfinite(value) else None

    text = value.strip()
    if text in _MISSING_TEXT:
        return None

    try:
        degrees = float(text)
    except ValueError:
        pass
    else:
        return normalize_angle(degrees) if math.isfinite(degrees) else None

    if text.endswith("風"):
        text = text[:-1]

    if text in COMPASS_16:
        return COMPASS_16.index(text) * 22.5

    for fragment, angle in _DIRECTION_FRAGMENTS.items():
        if fragment in text:
            return float(angle)

    return None
