"""Wind classification relative to a beach's facing direction."""

from dataclasses import dataclass
from enum import Enum

from surfcast.application.services.units import (
    angular_difference,
    parse_wind_direction,
    parse_wind_speed,
)


class WindType(str, Enum):
    """Wind type relative to the beach orientation."""

    OFFSHORE = "offshore"
    ONSHORE = "onshore"
    CROSS_SHORE = "cross-shore"
    UNKNOWN = "unknown"


class WindTexture(str, Enum):
    """Surface texture produced by the wind."""

    GLASSY = "glassy"
    CLEAN = "clean"
    TEXTURED = "textured"
    CHOPPY = "choppy"
    BLOWN_OUT = "blown-out"


class WindStrength(str, Enum):
    """Wind strength class."""

    CALM = "calm"
    LIGHT = "light"
    MODERATE = "moderate"
    STRONG = "strong"
    DANGEROUS = "dangerous"


class Impact(str, Enum):
    """Direction of an effect on overall surf quality."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class WindQuality(str, Enum):
    """Coarse wind quality rating by wind type."""

    EXCELLENT = "excellent"
    FAIR = "fair"
    POOR = "poor"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class WindFeatures:
    """Categorical wind features consumed by the evaluators."""

    texture: WindTexture
    strength: WindStrength
    impact: Impact | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {
            "texture": self.texture.value,
            "strength": self.strength.value,
            "impact": self.impact.value if self.impact else None,
        }


@dataclass(frozen=True)
class WindAnalysis:
    """Wind direction, type and quality for a surf spot."""

    wind_type: WindType
    quality: WindQuality
    wind_direction_deg: float | None
    wind_speed_kmh: float
    emoji: str


# Wind direction thresholds (angular difference from beach facing)
OFFSHORE_MIN_ANGLE = 135
ONSHORE_MAX_ANGLE = 45

# Speeds strictly below these (km/h) are glassy
GLASSY_BELOW: dict[WindType, float] = {
    WindType.OFFSHORE: 5,
    WindType.CROSS_SHORE: 3,
    WindType.ONSHORE: 2,
}

# Inclusive upper speed limits (km/h) from the glassy bound up. Speeds above
# the last limit fall into the final tier. At any speed, offshore texture is
# never rougher than cross-shore, and cross-shore never rougher than onshore.
TEXTURE_LIMITS: dict[WindType, tuple[tuple[float, WindTexture], ...]] = {
    WindType.OFFSHORE: (
        (25, WindTexture.CLEAN),
        (30, WindTexture.TEXTURED),
    ),
    WindType.CROSS_SHORE: (
        (10, WindTexture.CLEAN),
        (18, WindTexture.TEXTURED),
        (28, WindTexture.CHOPPY),
    ),
    WindType.ONSHORE: (
        (7, WindTexture.CLEAN),
        (12, WindTexture.TEXTURED),
        (25, WindTexture.CHOPPY),
    ),
}

STRENGTH_LIMITS: dict[WindType, tuple[tuple[float, WindStrength], ...]] = {
    WindType.OFFSHORE: (
        (5, WindStrength.CALM),
        (15, WindStrength.LIGHT),
        (25, WindStrength.MODERATE),
        (30, WindStrength.STRONG),
    ),
    WindType.CROSS_SHORE: (
        (5, WindStrength.CALM),
        (12, WindStrength.LIGHT),
        (20, WindStrength.MODERATE),
        (30, WindStrength.STRONG),
    ),
    WindType.ONSHORE: (
        (5, WindStrength.CALM),
        (12, WindStrength.LIGHT),
        (20, WindStrength.MODERATE),
        (35, WindStrength.STRONG),
    ),
}

WIND_QUALITY = {
    WindType.OFFSHORE: WindQuality.EXCELLENT,
    WindType.CROSS_SHORE: WindQuality.FAIR,
    WindType.ONSHORE: WindQuality.POOR,
    WindType.UNKNOWN: WindQuality.UNKNOWN,
}

WIND_EMOJI = {
    WindType.OFFSHORE: "✨",
    WindType.CROSS_SHORE: "🌬️",
    WindType.ONSHORE: "💨",
    WindType.UNKNOWN: "❓",
}


def _bucket(speed: float, limits, fallback):
    for limit, tier in limits:
        if speed <= limit:
            return tier
    return fallback


class WindClassifierService:
    """Service for classifying wind against a beach orientation."""

    @classmethod
    def classify_type(
        cls,
        wind_direction_deg: float | None,
        beach_facing_deg: float | None,
    ) -> WindType:
        """Classify wind as offshore, onshore or cross-shore.

        Offshore wind blows from land out to sea, so its bearing is roughly
        opposite the direction the beach faces. Onshore wind comes from the
        same bearing the beach faces.

        Args:
            wind_direction_deg: Direction wind comes FROM (0-360°)
            beach_facing_deg: Direction the beach looks toward the sea (0-360°)

        Returns:
            WindType classification, UNKNOWN if either bearing is missing
        """
        if wind_direction_deg is None or beach_facing_deg is None:
            return WindType.UNKNOWN

        diff = angular_difference(wind_direction_deg, beach_facing_deg)

        if OFFSHORE_MIN_ANGLE <= diff <= 180:
            return WindType.OFFSHORE

        if diff <= ONSHORE_MAX_ANGLE:
            return WindType.ONSHORE

        return WindType.CROSS_SHORE

    @classmethod
    def classify_texture(cls, wind_type: WindType, wind_speed_kmh: float) -> WindTexture | None:
        """Surface texture for a wind type and speed, None for unknown wind."""
        limits = TEXTURE_LIMITS.get(wind_type)
        if limits is None:
            return None
        if wind_speed_kmh < GLASSY_BELOW[wind_type]:
            return WindTexture.GLASSY
        return _bucket(wind_speed_kmh, limits, WindTexture.BLOWN_OUT)

    @classmethod
    def classify_strength(cls, wind_type: WindType, wind_speed_kmh: float) -> WindStrength | None:
        """Wind strength for a wind type and speed, None for unknown wind."""
        limits = STRENGTH_LIMITS.get(wind_type)
        if limits is None:
            return None
        return _bucket(wind_speed_kmh, limits, WindStrength.DANGEROUS)

    @classmethod
    def classify_features(
        cls,
        wind_type: WindType,
        wind_speed_kmh: float,
    ) -> WindFeatures | None:
        """Build WindFeatures for a classified wind.

        Args:
            wind_type: Wind type relative to the beach
            wind_speed_kmh: Wind speed in km/h

        Returns:
            WindFeatures without impact, or None when the wind type is unknown
            or the speed is not a valid reading
        """
        if parse_wind_speed(wind_speed_kmh) is None:
            return None
        texture = cls.classify_texture(wind_type, wind_speed_kmh)
        strength = cls.classify_strength(wind_type, wind_speed_kmh)
        if texture is None or strength is None:
            return None
        return WindFeatures(texture=texture, strength=strength)

    @classmethod
    def wind_quality(cls, wind_type: WindType) -> WindQuality:
        """Coarse quality rating for a wind type."""
        return WIND_QUALITY[wind_type]

    @classmethod
    def wind_emoji(cls, wind_type: WindType) -> str:
        return WIND_EMOJI[wind_type]

    @classmethod
    def derive_impact(cls, wind_type: WindType, features: WindFeatures) -> Impact:
        """Judge whether the wind helps or hurts the surf overall."""
        if features.strength in (WindStrength.STRONG, WindStrength.DANGEROUS):
            return Impact.NEGATIVE
        if wind_type == WindType.OFFSHORE:
            return Impact.POSITIVE
        if features.texture == WindTexture.GLASSY:
            return Impact.POSITIVE
        if wind_type == WindType.ONSHORE and features.texture in (
            WindTexture.TEXTURED,
            WindTexture.CHOPPY,
            WindTexture.BLOWN_OUT,
        ):
            return Impact.NEGATIVE
        return Impact.NEUTRAL

    @classmethod
    def analyze(
        cls,
        wind_direction: float | str | None,
        wind_speed_kmh: float | None,
        beach_facing_deg: float | None,
    ) -> WindAnalysis:
        """Analyze wind conditions for a surf spot.

        Args:
            wind_direction: Direction wind comes FROM, as degrees or text (e.g. "偏東風")
            wind_speed_kmh: Wind speed in km/h
            beach_facing_deg: Beach facing direction in degrees

        Returns:
            WindAnalysis with type, quality and emoji
        """
        direction = parse_wind_direction(wind_direction)
        speed = parse_wind_speed(wind_speed_kmh)

        # A wind without a usable speed reading can't be classified either
        if speed is None:
            wind_type = WindType.UNKNOWN
        else:
            wind_type = cls.classify_type(direction, beach_facing_deg)

        return WindAnalysis(
            wind_type=wind_type,
            quality=cls.wind_quality(wind_type),
            wind_direction_deg=direction if wind_type != WindType.UNKNOWN else None,
            wind_speed_kmh=speed if speed is not None else 0.0,
            emoji=cls.wind_emoji(wind_type),
        )
