"""Board suitability evaluation for longboards, shortboards and funboards."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from surfcast.application.services.narrative import BOARD_NAMES, render
from surfcast.application.services.safety import SafetyLevel
from surfcast.application.services.wave_classifier import (
    PeriodClass,
    WaveFeatures,
    WavePower,
    WaveSize,
)
from surfcast.application.services.wind_classifier import WindFeatures, WindTexture


class Suitability(str, Enum):
    """Suitability verdict for a board type."""

    PERFECT = "perfect"
    GOOD = "good"
    FAIR = "fair"
    CHALLENGING = "challenging"
    UNSUITABLE = "unsuitable"


class BoardType(str, Enum):
    """Board archetypes that can be recommended."""

    LONGBOARD = "longboard"
    SHORTBOARD = "shortboard"
    FUNBOARD = "funboard"
    NONE = "none"


SUITABILITY_SCORES = {
    Suitability.PERFECT: 5,
    Suitability.GOOD: 4,
    Suitability.FAIR: 3,
    Suitability.CHALLENGING: 2,
    Suitability.UNSUITABLE: 1,
}

SUITABILITY_EMOJI = {
    Suitability.PERFECT: "✅",
    Suitability.GOOD: "👍",
    Suitability.FAIR: "😐",
    Suitability.CHALLENGING: "⚠️",
    Suitability.UNSUITABLE: "❌",
}

# Nothing at or below this score is worth recommending
MIN_RECOMMENDABLE_SCORE = 2


@dataclass(frozen=True)
class Conditions:
    """Feature sets a board rule is evaluated against."""

    wave: WaveFeatures
    wind: WindFeatures
    safety: SafetyLevel


@dataclass(frozen=True)
class BoardRule:
    """One row of a board's ordered rule table."""

    matches: Callable[[Conditions], bool]
    suitability: Suitability
    reason: str


@dataclass(frozen=True)
class BoardAssessment:
    """Suitability verdict for one board type."""

    suitability: Suitability
    reasoning: str
    emoji: str

    @property
    def score(self) -> int:
        return SUITABILITY_SCORES[self.suitability]

    def to_dict(self) -> dict[str, str]:
        return {
            "suitability": self.suitability.value,
            "reasoning": self.reasoning,
            "emoji": self.emoji,
        }


@dataclass(frozen=True)
class BoardSuitability:
    """Verdicts for all board types plus the recommended one."""

    longboard: BoardAssessment
    shortboard: BoardAssessment
    funboard: BoardAssessment
    recommended: BoardType
    recommended_name: str

    def to_dict(self) -> dict:
        return {
            "longboard": self.longboard.to_dict(),
            "shortboard": self.shortboard.to_dict(),
            "funboard": self.funboard.to_dict(),
            "recommended": self.recommended.value,
            "recommendedName": self.recommended_name,
        }


SMALL_SIZES = {WaveSize.ANKLE, WaveSize.KNEE, WaveSize.THIGH, WaveSize.WAIST}
BIG_SIZES = {WaveSize.SHOULDER, WaveSize.HEAD, WaveSize.OVERHEAD, WaveSize.DOUBLE_OVERHEAD}
LONG_PERIODS = {PeriodClass.GROUND_SWELL, PeriodClass.LONG_PERIOD}
CLEAN_TEXTURES = {WindTexture.GLASSY, WindTexture.CLEAN}


def _is_danger(c: Conditions) -> bool:
    return c.safety == SafetyLevel.DANGER


DANGER_RULE = BoardRule(_is_danger, Suitability.UNSUITABLE, "board.danger")

# Rule tables are evaluated top to bottom, first match wins. The danger
# guard must stay the first row of every table.
LONGBOARD_RULES: tuple[BoardRule, ...] = (
    DANGER_RULE,
    BoardRule(
        lambda c: c.wave.size in SMALL_SIZES
        and c.wave.period in LONG_PERIODS
        and c.wind.texture in CLEAN_TEXTURES,
        Suitability.PERFECT,
        "longboard.perfect",
    ),
    BoardRule(
        lambda c: c.wave.size in SMALL_SIZES | {WaveSize.CHEST}
        and c.wave.period in LONG_PERIODS | {PeriodClass.MIXED}
        and c.wind.texture in CLEAN_TEXTURES,
        Suitability.GOOD,
        "longboard.good",
    ),
    BoardRule(
        lambda c: c.wave.size in SMALL_SIZES | {WaveSize.CHEST}
        and c.wave.period in LONG_PERIODS | {PeriodClass.MIXED}
        and c.wind.texture == WindTexture.TEXTURED,
        Suitability.FAIR,
        "longboard.textured",
    ),
    BoardRule(
        lambda c: c.wave.size == WaveSize.FLAT and c.wave.period in LONG_PERIODS,
        Suitability.FAIR,
        "longboard.flat_long_period",
    ),
    BoardRule(
        lambda c: c.wave.size in BIG_SIZES
        and c.wave.power in (WavePower.HEAVY, WavePower.DANGEROUS),
        Suitability.CHALLENGING,
        "longboard.big_heavy",
    ),
    BoardRule(
        lambda c: c.wave.size in BIG_SIZES,
        Suitability.FAIR,
        "longboard.big_manageable",
    ),
    BoardRule(
        lambda c: c.wave.period == PeriodClass.WIND_SWELL,
        Suitability.CHALLENGING,
        "longboard.wind_swell",
    ),
    BoardRule(lambda c: True, Suitability.FAIR, "longboard.default"),
)

SHORTBOARD_RULES: tuple[BoardRule, ...] = (
    DANGER_RULE,
    BoardRule(
        lambda c: c.wave.size in (WaveSize.CHEST, WaveSize.SHOULDER, WaveSize.HEAD)
        and c.wave.power in (WavePower.SOLID, WavePower.HEAVY)
        and c.wind.texture in CLEAN_TEXTURES
        and c.wave.period in LONG_PERIODS,
        Suitability.PERFECT,
        "shortboard.perfect",
    ),
    BoardRule(
        lambda c: c.wave.size in (WaveSize.WAIST, WaveSize.CHEST, WaveSize.SHOULDER)
        and c.wave.power in (WavePower.MODERATE, WavePower.SOLID)
        and c.wave.period != PeriodClass.WIND_SWELL
        and c.wind.texture in CLEAN_TEXTURES,
        Suitability.GOOD,
        "shortboard.good",
    ),
    BoardRule(
        lambda c: c.wave.size in (WaveSize.WAIST, WaveSize.CHEST, WaveSize.SHOULDER)
        and c.wave.power in (WavePower.MODERATE, WavePower.SOLID)
        and c.wave.period != PeriodClass.WIND_SWELL
        and c.wind.texture == WindTexture.TEXTURED,
        Suitability.FAIR,
        "shortboard.textured",
    ),
    BoardRule(
        lambda c: c.wave.size in (WaveSize.FLAT, WaveSize.ANKLE, WaveSize.KNEE, WaveSize.THIGH)
        and c.wave.power == WavePower.WEAK,
        Suitability.CHALLENGING,
        "shortboard.too_small",
    ),
    BoardRule(
        lambda c: c.wave.size in (WaveSize.THIGH, WaveSize.WAIST)
        and c.wave.period in LONG_PERIODS
        and c.wind.texture in CLEAN_TEXTURES,
        Suitability.FAIR,
        "shortboard.small_long_period",
    ),
    BoardRule(
        lambda c: c.wave.size in (WaveSize.CHEST, WaveSize.SHOULDER, WaveSize.HEAD)
        and c.wave.period == PeriodClass.WIND_SWELL,
        Suitability.CHALLENGING,
        "shortboard.big_short_period",
    ),
    BoardRule(
        lambda c: (
            c.wave.size in (WaveSize.OVERHEAD, WaveSize.DOUBLE_OVERHEAD)
            or c.wave.power == WavePower.DANGEROUS
        )
        and c.safety == SafetyLevel.WARNING,
        Suitability.CHALLENGING,
        "shortboard.big_warning",
    ),
    BoardRule(
        lambda c: c.wave.size in (WaveSize.OVERHEAD, WaveSize.DOUBLE_OVERHEAD)
        or c.wave.power == WavePower.DANGEROUS,
        Suitability.FAIR,
        "shortboard.big",
    ),
    BoardRule(
        lambda c: c.wind.texture == WindTexture.BLOWN_OUT,
        Suitability.CHALLENGING,
        "shortboard.blown_out",
    ),
    BoardRule(lambda c: True, Suitability.FAIR, "shortboard.default"),
)

FUNBOARD_RULES: tuple[BoardRule, ...] = (
    DANGER_RULE,
    BoardRule(
        lambda c: c.wave.size in (WaveSize.THIGH, WaveSize.WAIST, WaveSize.CHEST)
        and c.wave.power in (WavePower.MODERATE, WavePower.SOLID)
        and c.wind.texture in CLEAN_TEXTURES | {WindTexture.TEXTURED},
        Suitability.PERFECT,
        "funboard.perfect",
    ),
    BoardRule(
        lambda c: c.wave.size
        in (WaveSize.KNEE, WaveSize.THIGH, WaveSize.WAIST, WaveSize.CHEST, WaveSize.SHOULDER)
        and c.wave.power != WavePower.DANGEROUS
        and c.wind.texture != WindTexture.BLOWN_OUT,
        Suitability.GOOD,
        "funboard.good",
    ),
    BoardRule(
        lambda c: c.wave.size in (WaveSize.FLAT, WaveSize.ANKLE) and c.wave.power == WavePower.WEAK,
        Suitability.FAIR,
        "funboard.too_small",
    ),
    BoardRule(
        lambda c: c.wave.size in (WaveSize.HEAD, WaveSize.OVERHEAD)
        and c.wave.power in (WavePower.HEAVY, WavePower.DANGEROUS),
        Suitability.FAIR,
        "funboard.too_big",
    ),
    BoardRule(
        lambda c: c.wind.texture == WindTexture.BLOWN_OUT or c.safety == SafetyLevel.WARNING,
        Suitability.CHALLENGING,
        "funboard.poor",
    ),
    # Funboards are versatile enough to default to good
    BoardRule(lambda c: True, Suitability.GOOD, "funboard.default"),
)

BOARD_RULES = {
    BoardType.LONGBOARD: LONGBOARD_RULES,
    BoardType.SHORTBOARD: SHORTBOARD_RULES,
    BoardType.FUNBOARD: FUNBOARD_RULES,
}


class BoardEvaluatorService:
    """Service for rating each board type against current conditions."""

    @classmethod
    def assess(
        cls,
        board: BoardType,
        wave: WaveFeatures,
        wind: WindFeatures,
        safety_level: SafetyLevel,
    ) -> BoardAssessment:
        """Rate a single board type.

        Args:
            board: Board type to rate (not NONE)
            wave: Classified wave features
            wind: Classified wind features
            safety_level: Safety level for the spot

        Returns:
            BoardAssessment from the first matching rule
        """
        conditions = Conditions(wave=wave, wind=wind, safety=safety_level)
        rule = next(r for r in BOARD_RULES[board] if r.matches(conditions))
        return BoardAssessment(
            suitability=rule.suitability,
            reasoning=render(rule.reason),
            emoji=SUITABILITY_EMOJI[rule.suitability],
        )

    @classmethod
    def recommend(
        cls,
        longboard: BoardAssessment,
        shortboard: BoardAssessment,
        funboard: BoardAssessment,
    ) -> BoardType:
        """Pick the board to recommend.

        The funboard wins any tie at the top score; nothing is recommended
        when every board is challenging or worse.
        """
        max_score = max(longboard.score, shortboard.score, funboard.score)

        if max_score <= MIN_RECOMMENDABLE_SCORE:
            return BoardType.NONE

        if funboard.score == max_score:
            return BoardType.FUNBOARD
        if longboard.score == max_score:
            return BoardType.LONGBOARD
        if shortboard.score == max_score:
            return BoardType.SHORTBOARD

        return BoardType.FUNBOARD

    @classmethod
    def evaluate(
        cls,
        wave: WaveFeatures,
        wind: WindFeatures,
        safety_level: SafetyLevel,
    ) -> BoardSuitability:
        """Rate all board types and select a recommendation.

        Args:
            wave: Classified wave features
            wind: Classified wind features
            safety_level: Safety level for the spot

        Returns:
            BoardSuitability with every verdict and the recommendation
        """
        longboard = cls.assess(BoardType.LONGBOARD, wave, wind, safety_level)
        shortboard = cls.assess(BoardType.SHORTBOARD, wave, wind, safety_level)
        funboard = cls.assess(BoardType.FUNBOARD, wave, wind, safety_level)

        recommended = cls.recommend(longboard, shortboard, funboard)

        return BoardSuitability(
            longboard=longboard,
            shortboard=shortboard,
            funboard=funboard,
            recommended=recommended,
            recommended_name=BOARD_NAMES[recommended.value],
        )
