"""Surf assessment facade combining every classifier and evaluator."""

import logging
from dataclasses import dataclass, replace
from typing import Any

from surfcast.application.services.board_evaluator import BoardEvaluatorService, BoardSuitability
from surfcast.application.services.interaction_engine import InteractionEngine, InteractionReport
from surfcast.application.services.narrative import (
    describe_features,
    generate_wave_narrative,
    generate_wind_narrative,
    render,
)
from surfcast.application.services.safety import SafetyLevel, SafetyService
from surfcast.application.services.units import degrees_to_compass16
from surfcast.application.services.wave_classifier import WaveClassifierService, WaveFeatures
from surfcast.application.services.wind_classifier import (
    WindAnalysis,
    WindClassifierService,
    WindFeatures,
    WindType,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Assessment:
    """Complete surf assessment for one spot."""

    sufficient: bool
    wind: WindAnalysis
    wave_features: WaveFeatures | None
    wind_features: WindFeatures | None
    safety_level: SafetyLevel | None
    safety_concerns: tuple[str, ...]
    board_suitability: BoardSuitability | None
    interactions: InteractionReport | None
    overall_assessment: str
    wave_narrative: str
    wind_narrative: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON payload returned by the service."""
        direction = self.wind.wind_direction_deg
        return {
            "sufficient": self.sufficient,
            "waveFeatures": self.wave_features.to_dict() if self.wave_features else None,
            "windFeatures": self.wind_features.to_dict() if self.wind_features else None,
            "wind": {
                "type": self.wind.wind_type.value,
                "quality": self.wind.quality.value,
                "direction": direction,
                "directionLabel": degrees_to_compass16(direction) if direction is not None else None,
                "speedKmh": self.wind.wind_speed_kmh,
                "emoji": self.wind.emoji,
            },
            "safetyLevel": self.safety_level.value if self.safety_level else None,
            "safetyConcerns": list(self.safety_concerns),
            "boardSuitability": (
                self.board_suitability.to_dict() if self.board_suitability else None
            ),
            "interactions": self.interactions.to_dict() if self.interactions else None,
            "overallAssessment": self.overall_assessment,
            "labels": describe_features(self.wave_features, self.wind.wind_type, self.wind.quality),
            "narratives": {
                "wave": self.wave_narrative,
                "wind": self.wind_narrative,
            },
        }


class SurfAssessmentService:
    """Service producing board and overall assessments from raw readings."""

    @classmethod
    def evaluate(
        cls,
        wave_height_m: float | None,
        wave_period_s: float | None,
        wind_direction: float | str | None,
        wind_speed_kmh: float | None,
        beach_facing_deg: float | None,
        safety_level: SafetyLevel | None = None,
    ) -> Assessment:
        """Evaluate surf conditions for one spot.

        Args:
            wave_height_m: Wave height in meters
            wave_period_s: Wave period in seconds
            wind_direction: Direction wind comes FROM, degrees or text (e.g. "偏東風")
            wind_speed_kmh: Wind speed in km/h
            beach_facing_deg: Direction the beach faces (0-360°)
            safety_level: Safety level override; derived from the features when omitted

        Returns:
            Assessment with board suitability and overall narrative. When wave
            or wind data is insufficient, only the narratives are filled in.
        """
        wind = WindClassifierService.analyze(wind_direction, wind_speed_kmh, beach_facing_deg)
        wave_narrative = generate_wave_narrative(wave_height_m, wave_period_s)
        wind_narrative = generate_wind_narrative(wind_direction, wind_speed_kmh, beach_facing_deg)

        has_wave_data = WaveClassifierService.has_sufficient_data(wave_height_m, wave_period_s)
        if not has_wave_data or wind.wind_type == WindType.UNKNOWN:
            logger.debug(
                f"Insufficient data for assessment (height={wave_height_m}, "
                f"period={wave_period_s}, wind_type={wind.wind_type.value})"
            )
            return Assessment(
                sufficient=False,
                wind=wind,
                wave_features=None,
                wind_features=None,
                safety_level=safety_level,
                safety_concerns=(),
                board_suitability=None,
                interactions=None,
                overall_assessment=render("insufficient.overall"),
                wave_narrative=wave_narrative,
                wind_narrative=wind_narrative,
            )

        wave_features = WaveClassifierService.classify(wave_height_m, wave_period_s)
        wind_features = WindClassifierService.classify_features(wind.wind_type, wind.wind_speed_kmh)
        wind_features = replace(
            wind_features,
            impact=WindClassifierService.derive_impact(wind.wind_type, wind_features),
        )

        derived = SafetyService.derive(wave_features, wind_features)
        level = safety_level or derived.level

        board_suitability = BoardEvaluatorService.evaluate(wave_features, wind_features, level)
        report = InteractionEngine.analyze(wave_features, wind_features, level, derived.concerns)

        return Assessment(
            sufficient=True,
            wind=wind,
            wave_features=wave_features,
            wind_features=wind_features,
            safety_level=level,
            safety_concerns=derived.concerns,
            board_suitability=board_suitability,
            interactions=report,
            overall_assessment=report.assessment,
            wave_narrative=wave_narrative,
            wind_narrative=wind_narrative,
        )
