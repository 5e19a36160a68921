"""Shared fixtures for surfcast tests."""

import pytest

from surfcast.application.services.wave_classifier import PeriodClass, WaveFeatures, WavePower, WaveSize
from surfcast.application.services.wind_classifier import Impact, WindFeatures, WindStrength, WindTexture
from surfcast.resources.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(cwa_api_key="test-key", max_retries=1, http_timeout=5)


def wave(power="moderate", size="waist", period="ground-swell") -> WaveFeatures:
    return WaveFeatures(power=WavePower(power), size=WaveSize(size), period=PeriodClass(period))


def wind(texture="clean", strength="light", impact=None) -> WindFeatures:
    return WindFeatures(
        texture=WindTexture(texture),
        strength=WindStrength(strength),
        impact=Impact(impact) if impact else None,
    )
