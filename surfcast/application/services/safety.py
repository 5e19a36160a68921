"""Safety level derivation from wave and wind features."""

from dataclasses import dataclass, field
from enum import Enum

from surfcast.application.services.wave_classifier import WaveFeatures, WavePower
from surfcast.application.services.wind_classifier import WindFeatures, WindStrength


class SafetyLevel(str, Enum):
    """Overall safety level for entering the water."""

    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class SafetyAssessment:
    """Safety level with the concerns that triggered it."""

    level: SafetyLevel
    concerns: tuple[str, ...] = field(default_factory=tuple)


# strength or power -> (level it triggers, concern text)
_WIND_CONCERNS = {
    WindStrength.DANGEROUS: (SafetyLevel.DANGER, "風速過強"),
    WindStrength.STRONG: (SafetyLevel.WARNING, "風力較強"),
}

_WAVE_CONCERNS = {
    WavePower.DANGEROUS: (SafetyLevel.DANGER, "浪況危險"),
    WavePower.HEAVY: (SafetyLevel.WARNING, "浪況強勁"),
}

_SEVERITY = {SafetyLevel.SAFE: 0, SafetyLevel.WARNING: 1, SafetyLevel.DANGER: 2}


class SafetyService:
    """Derives the safety level the evaluators are threaded with."""

    @classmethod
    def derive(cls, wave: WaveFeatures, wind: WindFeatures) -> SafetyAssessment:
        """Derive the safety level from wave power and wind strength.

        Danger when either the wind strength or the wave power is dangerous,
        warning when either is strong/heavy, safe otherwise.

        Args:
            wave: Classified wave features
            wind: Classified wind features

        Returns:
            SafetyAssessment with the level and every triggering concern
        """
        level = SafetyLevel.SAFE
        concerns: list[str] = []

        for triggered in (_WIND_CONCERNS.get(wind.strength), _WAVE_CONCERNS.get(wave.power)):
            if triggered is None:
                continue
            triggered_level, concern = triggered
            concerns.append(concern)
            if _SEVERITY[triggered_level] > _SEVERITY[level]:
                level = triggered_level

        return SafetyAssessment(level=level, concerns=tuple(concerns))
