"""Wave classification: body-scale size, period class and wave power."""

from dataclasses import dataclass
from enum import Enum


class WaveSize(str, Enum):
    """Wave height expressed against a standing surfer's body."""

    FLAT = "flat"
    ANKLE = "ankle"
    KNEE = "knee"
    THIGH = "thigh"
    WAIST = "waist"
    CHEST = "chest"
    SHOULDER = "shoulder"
    HEAD = "head"
    OVERHEAD = "overhead"
    DOUBLE_OVERHEAD = "double-overhead"


class PeriodClass(str, Enum):
    """Swell period quality class."""

    WIND_SWELL = "wind-swell"
    MIXED = "mixed"
    GROUND_SWELL = "ground-swell"
    LONG_PERIOD = "long-period"


class WavePower(str, Enum):
    """Wave energy class, derived from height and period together."""

    WEAK = "weak"
    MODERATE = "moderate"
    SOLID = "solid"
    HEAVY = "heavy"
    DANGEROUS = "dangerous"


@dataclass(frozen=True)
class WaveFeatures:
    """Categorical wave features consumed by the evaluators."""

    power: WavePower
    size: WaveSize
    period: PeriodClass

    def to_dict(self) -> dict[str, str]:
        return {
            "power": self.power.value,
            "size": self.size.value,
            "period": self.period.value,
        }


# Upper bounds (exclusive, meters) for each size bucket, ascending
SIZE_THRESHOLDS: tuple[tuple[float, WaveSize], ...] = (
    (0.2, WaveSize.FLAT),
    (0.4, WaveSize.ANKLE),
    (0.6, WaveSize.KNEE),
    (0.8, WaveSize.THIGH),
    (1.0, WaveSize.WAIST),
    (1.3, WaveSize.CHEST),
    (1.6, WaveSize.SHOULDER),
    (2.0, WaveSize.HEAD),
    (2.5, WaveSize.OVERHEAD),
)

# Upper bounds (exclusive, seconds) for each period class
PERIOD_THRESHOLDS: tuple[tuple[float, PeriodClass], ...] = (
    (6.0, PeriodClass.WIND_SWELL),
    (9.0, PeriodClass.MIXED),
    (12.0, PeriodClass.GROUND_SWELL),
)

# Height bounds (exclusive, meters) per period class, followed by the
# ceiling reached above the last bound. Short-period wind swell tops out
# at moderate no matter how high it gets.
POWER_TABLE: dict[PeriodClass, tuple[tuple[tuple[float, WavePower], ...], WavePower]] = {
    PeriodClass.WIND_SWELL: (
        ((0.8, WavePower.WEAK), (1.5, WavePower.MODERATE)),
        WavePower.MODERATE,
    ),
    PeriodClass.MIXED: (
        ((0.5, WavePower.WEAK), (1.0, WavePower.MODERATE), (2.0, WavePower.SOLID)),
        WavePower.HEAVY,
    ),
    PeriodClass.GROUND_SWELL: (
        (
            (0.4, WavePower.WEAK),
            (0.8, WavePower.MODERATE),
            (1.5, WavePower.SOLID),
            (2.5, WavePower.HEAVY),
        ),
        WavePower.DANGEROUS,
    ),
    PeriodClass.LONG_PERIOD: (
        ((0.5, WavePower.MODERATE), (1.0, WavePower.SOLID), (2.0, WavePower.HEAVY)),
        WavePower.DANGEROUS,
    ),
}


class WaveClassifierService:
    """Service for bucketing raw wave measurements into categories."""

    @classmethod
    def has_sufficient_data(
        cls,
        wave_height_m: float | None,
        wave_period_s: float | None,
    ) -> bool:
        """Check whether a height/period pair can be classified meaningfully.

        A zero height or period is how the upstream observation feeds
        report a missing reading.
        """
        if wave_height_m is None or wave_period_s is None:
            return False
        return wave_height_m > 0 and wave_period_s > 0

    @classmethod
    def classify_size(cls, wave_height_m: float) -> WaveSize:
        """Map a wave height in meters to its body-scale bucket."""
        for upper, size in SIZE_THRESHOLDS:
            if wave_height_m < upper:
                return size
        return WaveSize.DOUBLE_OVERHEAD

    @classmethod
    def classify_period(cls, wave_period_s: float) -> PeriodClass:
        """Map a wave period in seconds to its period class."""
        for upper, period in PERIOD_THRESHOLDS:
            if wave_period_s < upper:
                return period
        return PeriodClass.LONG_PERIOD

    @classmethod
    def classify_power(cls, wave_height_m: float, wave_period_s: float) -> WavePower:
        """Determine wave power from height and period.

        The period band is picked first; each longer band lowers the
        height needed for every tier and raises the achievable ceiling.

        Args:
            wave_height_m: Wave height in meters
            wave_period_s: Wave period in seconds

        Returns:
            WavePower tier
        """
        bounds, ceiling = POWER_TABLE[cls.classify_period(wave_period_s)]
        for upper, power in bounds:
            if wave_height_m < upper:
                return power
        return ceiling

    @classmethod
    def classify(cls, wave_height_m: float, wave_period_s: float) -> WaveFeatures:
        """Classify a height/period pair into WaveFeatures.

        Args:
            wave_height_m: Wave height in meters (>= 0)
            wave_period_s: Wave period in seconds (>= 0)

        Returns:
            WaveFeatures with power, size and period class
        """
        return WaveFeatures(
            power=cls.classify_power(wave_height_m, wave_period_s),
            size=cls.classify_size(wave_height_m),
            period=cls.classify_period(wave_period_s),
        )
