import pytest

from conftest import wave, wind

from surfcast.application.services.safety import SafetyLevel, SafetyService


@pytest.mark.parametrize(
    "power, strength, level, concerns",
    [
        ("solid", "calm", SafetyLevel.SAFE, ()),
        ("moderate", "moderate", SafetyLevel.SAFE, ()),
        ("heavy", "light", SafetyLevel.WARNING, ("浪況強勁",)),
        ("moderate", "strong", SafetyLevel.WARNING, ("風力較強",)),
        ("dangerous", "calm", SafetyLevel.DANGER, ("浪況危險",)),
        ("heavy", "dangerous", SafetyLevel.DANGER, ("風速過強", "浪況強勁")),
        ("dangerous", "strong", SafetyLevel.DANGER, ("風力較強", "浪況危險")),
    ],
)
def test_derive(power, strength, level, concerns):
    result = SafetyService.derive(wave(power=power), wind(strength=strength))

    assert result.level == level
    assert result.concerns == concerns
