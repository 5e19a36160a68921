import pytest

from conftest import wave

from surfcast.application.services.interaction_engine import ChemistryPattern
from surfcast.application.services.narrative import (
    MESSAGES,
    describe_features,
    generate_wave_narrative,
    generate_wind_narrative,
    render,
)
from surfcast.application.services.wind_classifier import WindQuality, WindType


def test_render_interpolates_values():
    assert render("assessment.mixed_resolved", resolution="各項條件相對平衡") == "綜合來看，各項條件相對平衡。"


def test_render_unknown_message_raises():
    with pytest.raises(KeyError):
        render("no.such.message")


def test_every_chemistry_pattern_has_a_message():
    for pattern in ChemistryPattern:
        assert f"chemistry.{pattern.value}" in MESSAGES


def test_wave_narrative():
    assert generate_wave_narrative(1.2, 10) == "浪高 1.2m (胸浪)，週期 10秒（湧浪），浪況有力。"
    assert generate_wave_narrative(0.3, 5) == "浪高 0.3m (腳踝浪)，週期 5秒（風浪），浪況軟弱。"


@pytest.mark.parametrize("height, period", [(0, 10), (1.0, 0), (None, 10), (1.0, None)])
def test_wave_narrative_insufficient(height, period):
    assert generate_wave_narrative(height, period) == "浪況資訊不足,無法分析。"


@pytest.mark.parametrize(
    "direction, speed, expected",
    [
        (270, 35, "離岸風 35 km/h,風速過強,可能將衝浪者吹離岸邊,存在安全疑慮。"),
        (270, 20, "離岸風 20 km/h,受惠於理想的風向風速,浪面乾淨,條件優異。"),
        (270, 5, "風速極輕（5 km/h）,浪面平滑如鏡,接近完美的無風狀態。"),
        (270, 10.8, "離岸風 10.8 km/h,風向良好,浪面整理得宜,適合衝浪。"),
        ("偏東風", 5, "向岸風 5 km/h,風力輕微,對浪況影響有限。"),
        (90, 12, "向岸風 12 km/h,受風況影響,浪面較為混亂,條件普通。"),
        (90, 28, "向岸風 28 km/h,強風吹向岸邊,浪面凌亂,條件不佳。"),
        (0, 6, "側風 6 km/h,風力溫和,浪況穩定,條件尚可。"),
        ("北風", 15, "側風 15 km/h,受側風影響,浪面有些波動,條件普通。"),
        (180, 22, "側風 22 km/h,側風較強,浪況不穩定,需謹慎評估。"),
    ],
)
def test_wind_narrative(direction, speed, expected):
    assert generate_wind_narrative(direction, speed, 90) == expected


def test_wind_narrative_insufficient():
    assert generate_wind_narrative("--", 10, 90) == "風況資訊不足,無法分析。"
    assert generate_wind_narrative(270, 10, None) == "風況資訊不足,無法分析。"


def test_describe_features():
    labels = describe_features(
        wave("weak", "ankle", "wind-swell"), WindType.CROSS_SHORE, WindQuality.FAIR
    )

    assert labels == {
        "size": "腳踝浪",
        "period": "風浪",
        "periodQuality": "雜亂",
        "power": "軟弱",
        "windType": "側風",
        "windQuality": "普通",
    }


def test_describe_features_without_wave():
    labels = describe_features(None, WindType.UNKNOWN, WindQuality.UNKNOWN)

    assert labels["size"] is None
    assert labels["period"] is None
    assert labels["windType"] == "風向未知"
    assert labels["windQuality"] == "--"
