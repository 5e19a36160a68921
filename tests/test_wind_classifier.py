import math
import random

import pytest

from conftest import wind

from surfcast.application.services.wind_classifier import (
    Impact,
    WindClassifierService,
    WindQuality,
    WindStrength,
    WindTexture,
    WindType,
)

# A beach facing east: westerly wind blows offshore, easterly onshore
EAST_FACING = 90


@pytest.mark.parametrize(
    "wind_direction, wind_type",
    [
        (270, WindType.OFFSHORE),
        (90, WindType.ONSHORE),
        (0, WindType.CROSS_SHORE),
        (180, WindType.CROSS_SHORE),
        (135, WindType.ONSHORE),  # 45° off the facing
        (136, WindType.CROSS_SHORE),
        (224, WindType.CROSS_SHORE),
        (225, WindType.OFFSHORE),  # 135° off the facing
    ],
)
def test_classify_type(wind_direction, wind_type):
    assert WindClassifierService.classify_type(wind_direction, EAST_FACING) == wind_type


def test_classify_type_wraps_around_north():
    assert WindClassifierService.classify_type(10, 350) == WindType.ONSHORE
    assert WindClassifierService.classify_type(190, 10) == WindType.OFFSHORE


def test_classify_type_missing_bearing_is_unknown():
    assert WindClassifierService.classify_type(None, 90) == WindType.UNKNOWN
    assert WindClassifierService.classify_type(270, None) == WindType.UNKNOWN


def test_classify_type_is_invariant_under_rotation():
    rng = random.Random(42)
    for _ in range(500):
        wind_direction = rng.randrange(0, 360)
        facing = rng.randrange(0, 360)
        expected = WindClassifierService.classify_type(wind_direction, facing)

        rotated = WindClassifierService.classify_type(wind_direction + 180, facing + 180)
        assert rotated == expected

        shift = rng.randrange(0, 360)
        shifted = WindClassifierService.classify_type(
            (wind_direction + shift) % 360, (facing + shift) % 360
        )
        assert shifted == expected


@pytest.mark.parametrize(
    "wind_type, speed, texture",
    [
        (WindType.OFFSHORE, 3, WindTexture.GLASSY),
        (WindType.OFFSHORE, 4.9, WindTexture.GLASSY),
        (WindType.OFFSHORE, 5, WindTexture.CLEAN),
        (WindType.OFFSHORE, 6, WindTexture.CLEAN),
        (WindType.OFFSHORE, 25, WindTexture.CLEAN),
        (WindType.OFFSHORE, 28, WindTexture.TEXTURED),
        (WindType.OFFSHORE, 30, WindTexture.TEXTURED),
        (WindType.OFFSHORE, 31, WindTexture.BLOWN_OUT),
        (WindType.CROSS_SHORE, 2, WindTexture.GLASSY),
        (WindType.CROSS_SHORE, 3, WindTexture.CLEAN),
        (WindType.CROSS_SHORE, 8, WindTexture.CLEAN),
        (WindType.CROSS_SHORE, 15, WindTexture.TEXTURED),
        (WindType.CROSS_SHORE, 25, WindTexture.CHOPPY),
        (WindType.CROSS_SHORE, 29, WindTexture.BLOWN_OUT),
        (WindType.ONSHORE, 1, WindTexture.GLASSY),
        (WindType.ONSHORE, 2, WindTexture.CLEAN),
        (WindType.ONSHORE, 6, WindTexture.CLEAN),
        (WindType.ONSHORE, 10, WindTexture.TEXTURED),
        (WindType.ONSHORE, 20, WindTexture.CHOPPY),
        (WindType.ONSHORE, 25, WindTexture.CHOPPY),
        (WindType.ONSHORE, 26, WindTexture.BLOWN_OUT),
    ],
)
def test_classify_texture(wind_type, speed, texture):
    assert WindClassifierService.classify_texture(wind_type, speed) == texture


def test_offshore_degrades_texture_less_than_onshore():
    texture_order = list(WindTexture)
    for speed in range(0, 50):
        offshore = WindClassifierService.classify_texture(WindType.OFFSHORE, speed)
        cross = WindClassifierService.classify_texture(WindType.CROSS_SHORE, speed)
        onshore = WindClassifierService.classify_texture(WindType.ONSHORE, speed)
        assert texture_order.index(offshore) <= texture_order.index(cross) <= texture_order.index(onshore)


@pytest.mark.parametrize(
    "wind_type, speed, strength",
    [
        (WindType.OFFSHORE, 4, WindStrength.CALM),
        (WindType.OFFSHORE, 12, WindStrength.LIGHT),
        (WindType.OFFSHORE, 20, WindStrength.MODERATE),
        (WindType.OFFSHORE, 30, WindStrength.STRONG),
        (WindType.OFFSHORE, 31, WindStrength.DANGEROUS),
        (WindType.CROSS_SHORE, 25, WindStrength.STRONG),
        (WindType.CROSS_SHORE, 31, WindStrength.DANGEROUS),
        (WindType.ONSHORE, 33, WindStrength.STRONG),
        (WindType.ONSHORE, 40, WindStrength.DANGEROUS),
    ],
)
def test_classify_strength(wind_type, speed, strength):
    assert WindClassifierService.classify_strength(wind_type, speed) == strength


def test_unknown_wind_has_no_features():
    assert WindClassifierService.classify_texture(WindType.UNKNOWN, 10) is None
    assert WindClassifierService.classify_strength(WindType.UNKNOWN, 10) is None
    assert WindClassifierService.classify_features(WindType.UNKNOWN, 10) is None


def test_classify_features():
    features = WindClassifierService.classify_features(WindType.ONSHORE, 40)

    assert features.texture == WindTexture.BLOWN_OUT
    assert features.strength == WindStrength.DANGEROUS
    assert features.impact is None


@pytest.mark.parametrize(
    "wind_type, features, impact",
    [
        (WindType.OFFSHORE, wind("glassy", "calm"), Impact.POSITIVE),
        (WindType.OFFSHORE, wind("textured", "strong"), Impact.NEGATIVE),
        (WindType.CROSS_SHORE, wind("glassy", "calm"), Impact.POSITIVE),
        (WindType.CROSS_SHORE, wind("clean", "light"), Impact.NEUTRAL),
        (WindType.ONSHORE, wind("clean", "light"), Impact.NEUTRAL),
        (WindType.ONSHORE, wind("choppy", "moderate"), Impact.NEGATIVE),
        (WindType.ONSHORE, wind("blown-out", "dangerous"), Impact.NEGATIVE),
    ],
)
def test_derive_impact(wind_type, features, impact):
    assert WindClassifierService.derive_impact(wind_type, features) == impact


def test_analyze_parses_direction_text():
    analysis = WindClassifierService.analyze("偏西風", 12, EAST_FACING)

    assert analysis.wind_type == WindType.OFFSHORE
    assert analysis.quality == WindQuality.EXCELLENT
    assert analysis.wind_direction_deg == 270
    assert analysis.wind_speed_kmh == 12
    assert analysis.emoji == "✨"


@pytest.mark.parametrize(
    "direction, facing",
    [("--", 90), ("", 90), (None, 90), ("東北風", None)],
)
def test_analyze_unknown(direction, facing):
    analysis = WindClassifierService.analyze(direction, None, facing)

    assert analysis.wind_type == WindType.UNKNOWN
    assert analysis.quality == WindQuality.UNKNOWN
    assert analysis.wind_direction_deg is None
    assert analysis.wind_speed_kmh == 0.0
    assert analysis.emoji == "❓"


@pytest.mark.parametrize(
    "wind_type, quality, emoji",
    [
        (WindType.OFFSHORE, WindQuality.EXCELLENT, "✨"),
        (WindType.CROSS_SHORE, WindQuality.FAIR, "🌬️"),
        (WindType.ONSHORE, WindQuality.POOR, "💨"),
        (WindType.UNKNOWN, WindQuality.UNKNOWN, "❓"),
    ],
)
def test_wind_quality_and_emoji(wind_type, quality, emoji):
    assert WindClassifierService.wind_quality(wind_type) == quality
    assert WindClassifierService.wind_emoji(wind_type) == emoji


@pytest.mark.parametrize("speed", [math.nan, math.inf, -10])
def test_invalid_speed_has_no_features(speed):
    assert WindClassifierService.classify_features(WindType.OFFSHORE, speed) is None


@pytest.mark.parametrize("speed", [None, math.nan, math.inf, -math.inf, -10])
def test_analyze_invalid_speed_is_unknown(speed):
    analysis = WindClassifierService.analyze(270, speed, EAST_FACING)

    assert analysis.wind_type == WindType.UNKNOWN
    assert analysis.wind_direction_deg is None
    assert analysis.wind_speed_kmh == 0.0
