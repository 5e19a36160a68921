"""Interaction analysis between wave, wind and safety features.

Runs in fixed stages: pairwise interactions, overall synergy, conflict
resolution (safety > quality > size), chemistry pattern detection, and
finally the overall assessment text.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from surfcast.application.services.narrative import render
from surfcast.application.services.safety import SafetyLevel
from surfcast.application.services.wave_classifier import (
    PeriodClass,
    WaveFeatures,
    WavePower,
    WaveSize,
)
from surfcast.application.services.wind_classifier import (
    Impact,
    WindFeatures,
    WindStrength,
    WindTexture,
)


class InteractionType(str, Enum):
    """How two features combine."""

    SYNERGY = "synergy"
    CONFLICT = "conflict"
    NEUTRAL = "neutral"


class Synergy(str, Enum):
    """Overall synergy category across all interactions."""

    EXCELLENT = "excellent"
    GOOD = "good"
    MIXED = "mixed"
    POOR = "poor"


class DominantFactor(str, Enum):
    """Factor that wins conflict resolution."""

    SAFETY = "safety"
    QUALITY = "quality"
    SIZE = "size"
    NONE = "none"


class ChemistryPattern(str, Enum):
    """Named feature combinations worth calling out."""

    PERFECT_CONDITIONS = "perfect-conditions"
    WASTED_POTENTIAL = "wasted-potential"
    LONGBOARD_PARADISE = "longboard-paradise"
    HIDDEN_GEM = "hidden-gem"
    NONE = "none"


@dataclass(frozen=True)
class Interaction:
    """Result of one pairwise interaction."""

    type: InteractionType
    key: str
    description: str
    impact: Impact

    def to_dict(self) -> dict[str, str]:
        return {
            "type": self.type.value,
            "key": self.key,
            "description": self.description,
            "impact": self.impact.value,
        }


@dataclass(frozen=True)
class ConflictResolution:
    """Outcome of resolving conflicts by priority."""

    dominant_factor: DominantFactor
    key: str
    resolution: str
    priority_applied: bool

    def to_dict(self) -> dict:
        return {
            "dominantFactor": self.dominant_factor.value,
            "key": self.key,
            "resolution": self.resolution,
            "priorityApplied": self.priority_applied,
        }


@dataclass(frozen=True)
class Chemistry:
    """Detected chemistry pattern, if any."""

    pattern: ChemistryPattern
    description: str

    @property
    def has_chemistry(self) -> bool:
        return self.pattern != ChemistryPattern.NONE

    def to_dict(self) -> dict:
        return {
            "hasChemistry": self.has_chemistry,
            "pattern": self.pattern.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class InteractionReport:
    """All intermediate results of the interaction analysis."""

    wave_power_vs_texture: Interaction
    period_vs_size: Interaction
    wind_vs_safety: Interaction
    overall_synergy: Synergy
    conflict_resolution: ConflictResolution
    chemistry: Chemistry
    assessment: str

    @property
    def interactions(self) -> tuple[Interaction, Interaction, Interaction]:
        return (self.wave_power_vs_texture, self.period_vs_size, self.wind_vs_safety)

    def to_dict(self) -> dict:
        return {
            "wavePowerVsTexture": self.wave_power_vs_texture.to_dict(),
            "periodVsHeight": self.period_vs_size.to_dict(),
            "windVsSafety": self.wind_vs_safety.to_dict(),
            "overallSynergy": self.overall_synergy.value,
            "conflictResolution": self.conflict_resolution.to_dict(),
            "chemistry": self.chemistry.to_dict(),
        }


def _interaction(type_: InteractionType, key: str, impact: Impact) -> Interaction:
    return Interaction(type=type_, key=key, description=render(key), impact=impact)


def _resolution(factor: DominantFactor, key: str, applied: bool = True) -> ConflictResolution:
    return ConflictResolution(
        dominant_factor=factor,
        key=key,
        resolution=render(key),
        priority_applied=applied,
    )


def _chemistry(pattern: ChemistryPattern) -> Chemistry:
    return Chemistry(pattern=pattern, description=render(f"chemistry.{pattern.value}"))


POWERFUL = {WavePower.SOLID, WavePower.HEAVY}
LONG_PERIODS = {PeriodClass.GROUND_SWELL, PeriodClass.LONG_PERIOD}
CLEAN_TEXTURES = {WindTexture.GLASSY, WindTexture.CLEAN}
ROUGH_TEXTURES = {WindTexture.CHOPPY, WindTexture.BLOWN_OUT}


class InteractionEngine:
    """Service combining feature categories into an overall assessment."""

    @classmethod
    def wave_power_vs_texture(cls, power: WavePower, texture: WindTexture) -> Interaction:
        """Analyze how wave power and surface texture combine."""
        if texture == WindTexture.BLOWN_OUT:
            return _interaction(InteractionType.CONFLICT, "power_texture.blown_out", Impact.NEGATIVE)

        if texture in CLEAN_TEXTURES:
            if power in (WavePower.WEAK, WavePower.MODERATE):
                return _interaction(
                    InteractionType.SYNERGY, "power_texture.small_clean", Impact.POSITIVE
                )
            if power in POWERFUL:
                return _interaction(
                    InteractionType.SYNERGY, "power_texture.powerful_clean", Impact.POSITIVE
                )

        if texture == WindTexture.CHOPPY:
            return _interaction(InteractionType.CONFLICT, "power_texture.choppy", Impact.NEGATIVE)

        return _interaction(InteractionType.NEUTRAL, "power_texture.neutral", Impact.NEUTRAL)

    @classmethod
    def period_vs_size(cls, period: PeriodClass, size: WaveSize) -> Interaction:
        """Analyze how swell period and wave size combine."""
        if period in LONG_PERIODS and size in (
            WaveSize.ANKLE,
            WaveSize.KNEE,
            WaveSize.THIGH,
            WaveSize.WAIST,
        ):
            return _interaction(
                InteractionType.SYNERGY, "period_size.small_long_period", Impact.POSITIVE
            )

        if period == PeriodClass.WIND_SWELL and size in (
            WaveSize.CHEST,
            WaveSize.SHOULDER,
            WaveSize.HEAD,
            WaveSize.OVERHEAD,
        ):
            return _interaction(
                InteractionType.CONFLICT, "period_size.big_short_period", Impact.NEGATIVE
            )

        if period in LONG_PERIODS and size in (WaveSize.CHEST, WaveSize.SHOULDER, WaveSize.HEAD):
            return _interaction(
                InteractionType.SYNERGY, "period_size.big_long_period", Impact.POSITIVE
            )

        return _interaction(InteractionType.NEUTRAL, "period_size.neutral", Impact.NEUTRAL)

    @classmethod
    def wind_vs_safety(cls, strength: WindStrength, impact: Impact | None) -> Interaction:
        """Analyze wind strength against its effect on safety."""
        if strength == WindStrength.DANGEROUS:
            return _interaction(InteractionType.CONFLICT, "wind_safety.dangerous", Impact.NEGATIVE)

        if strength == WindStrength.STRONG:
            return _interaction(InteractionType.CONFLICT, "wind_safety.strong", Impact.NEGATIVE)

        if impact == Impact.POSITIVE:
            return _interaction(InteractionType.SYNERGY, "wind_safety.ideal", Impact.POSITIVE)

        return _interaction(InteractionType.NEUTRAL, "wind_safety.neutral", Impact.NEUTRAL)

    @classmethod
    def overall_synergy(
        cls,
        interactions: Sequence[Interaction],
        safety_level: SafetyLevel,
    ) -> Synergy:
        """Summarize the pairwise interactions into one synergy category.

        Any safety concern forces POOR before the interactions are counted.
        """
        if safety_level in (SafetyLevel.DANGER, SafetyLevel.WARNING):
            return Synergy.POOR

        positive = sum(1 for i in interactions if i.impact == Impact.POSITIVE)
        negative = sum(1 for i in interactions if i.impact == Impact.NEGATIVE)

        if positive == len(interactions):
            return Synergy.EXCELLENT
        if positive >= 2 and negative == 0:
            return Synergy.GOOD
        if negative >= 2:
            return Synergy.POOR
        return Synergy.MIXED

    @classmethod
    def resolve_conflicts(
        cls,
        wave: WaveFeatures,
        wind: WindFeatures,
        power_vs_texture: Interaction,
        period_vs_size: Interaction,
        safety_level: SafetyLevel,
    ) -> ConflictResolution:
        """Resolve conflicting signals by priority: safety > quality > size.

        Args:
            wave: Classified wave features
            wind: Classified wind features
            power_vs_texture: Wave power vs texture interaction
            period_vs_size: Period vs size interaction
            safety_level: Safety level for the spot

        Returns:
            ConflictResolution naming the dominant factor
        """
        if safety_level == SafetyLevel.DANGER:
            return _resolution(DominantFactor.SAFETY, "resolution.danger")

        if safety_level == SafetyLevel.WARNING:
            return _resolution(DominantFactor.SAFETY, "resolution.warning")

        has_quality_conflict = InteractionType.CONFLICT in (power_vs_texture.type, period_vs_size.type)

        if has_quality_conflict:
            if wind.texture in ROUGH_TEXTURES:
                return _resolution(DominantFactor.QUALITY, "resolution.texture")

            if wave.period == PeriodClass.WIND_SWELL and wave.size in (
                WaveSize.CHEST,
                WaveSize.SHOULDER,
            ):
                return _resolution(DominantFactor.QUALITY, "resolution.period")

        if wave.power == WavePower.DANGEROUS or wave.size == WaveSize.DOUBLE_OVERHEAD:
            return _resolution(DominantFactor.SIZE, "resolution.size")

        return _resolution(DominantFactor.NONE, "resolution.balanced", applied=False)

    @classmethod
    def detect_chemistry(cls, wave: WaveFeatures, wind: WindFeatures) -> Chemistry:
        """Detect named chemistry patterns, first match wins."""
        if (
            wave.power in POWERFUL
            and wind.texture in CLEAN_TEXTURES
            and wave.period in LONG_PERIODS
            and wave.size in (WaveSize.CHEST, WaveSize.SHOULDER, WaveSize.HEAD)
        ):
            return _chemistry(ChemistryPattern.PERFECT_CONDITIONS)

        if wave.power in POWERFUL and wind.texture == WindTexture.BLOWN_OUT:
            return _chemistry(ChemistryPattern.WASTED_POTENTIAL)

        if (
            wave.power == WavePower.WEAK
            and wind.texture in CLEAN_TEXTURES
            and wave.period in LONG_PERIODS
            and wave.size in (WaveSize.ANKLE, WaveSize.KNEE)
        ):
            return _chemistry(ChemistryPattern.LONGBOARD_PARADISE)

        if (
            wave.size in (WaveSize.THIGH, WaveSize.WAIST)
            and wave.period in LONG_PERIODS
            and wind.texture not in ROUGH_TEXTURES
        ):
            return _chemistry(ChemistryPattern.HIDDEN_GEM)

        return _chemistry(ChemistryPattern.NONE)

    @classmethod
    def render_assessment(
        cls,
        safety_level: SafetyLevel,
        safety_concerns: Sequence[str],
        synergy: Synergy,
        resolution: ConflictResolution,
        chemistry: Chemistry,
    ) -> str:
        """Render the overall assessment.

        Priority: safety alarm, then chemistry, then the synergy category.
        """
        concerns = "、".join(safety_concerns)

        if safety_level == SafetyLevel.DANGER:
            if concerns:
                return render("assessment.danger", concerns=concerns)
            return render("assessment.danger_unspecified")

        if safety_level == SafetyLevel.WARNING:
            if concerns:
                return render(
                    "assessment.warning", concerns=concerns, resolution=resolution.resolution
                )
            return render("assessment.warning_unspecified", resolution=resolution.resolution)

        if chemistry.has_chemistry:
            return chemistry.description

        if synergy == Synergy.EXCELLENT:
            return render("assessment.excellent")
        if synergy == Synergy.GOOD:
            return render("assessment.good")
        if synergy == Synergy.MIXED:
            if resolution.priority_applied:
                return render("assessment.mixed_resolved", resolution=resolution.resolution)
            return render("assessment.mixed")
        if resolution.priority_applied:
            return render("assessment.poor_resolved", resolution=resolution.resolution)
        return render("assessment.poor")

    @classmethod
    def analyze(
        cls,
        wave: WaveFeatures,
        wind: WindFeatures,
        safety_level: SafetyLevel,
        safety_concerns: Sequence[str] = (),
    ) -> InteractionReport:
        """Run every stage and produce the overall assessment.

        Args:
            wave: Classified wave features
            wind: Classified wind features, impact set by the caller
            safety_level: Safety level for the spot
            safety_concerns: Concerns listed in safety alarm text

        Returns:
            InteractionReport with intermediate results and the assessment text
        """
        power_vs_texture = cls.wave_power_vs_texture(wave.power, wind.texture)
        period_vs_size = cls.period_vs_size(wave.period, wave.size)
        wind_vs_safety = cls.wind_vs_safety(wind.strength, wind.impact or Impact.NEUTRAL)

        synergy = cls.overall_synergy(
            (power_vs_texture, period_vs_size, wind_vs_safety), safety_level
        )
        resolution = cls.resolve_conflicts(
            wave, wind, power_vs_texture, period_vs_size, safety_level
        )
        chemistry = cls.detect_chemistry(wave, wind)

        assessment = cls.render_assessment(
            safety_level, safety_concerns, synergy, resolution, chemistry
        )

        return InteractionReport(
            wave_power_vs_texture=power_vs_texture,
            period_vs_size=period_vs_size,
            wind_vs_safety=wind_vs_safety,
            overall_synergy=synergy,
            conflict_resolution=resolution,
            chemistry=chemistry,
            assessment=assessment,
        )
