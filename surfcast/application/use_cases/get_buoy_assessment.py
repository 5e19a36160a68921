"""Use case for assessing surf conditions from a marine buoy observation."""

import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any

from surfcast.application.services.assessment import Assessment, SurfAssessmentService
from surfcast.application.services.units import degrees_to_compass8, ms_to_kmh, normalize_angle
from surfcast.repository.cwa_marine_repository import BuoyObservation, CwaMarineRepository

logger = logging.getLogger(__name__)


@dataclass
class BuoyAssessmentResponse:
    """Complete buoy-based assessment response."""

    station: dict[str, str]
    observation: BuoyObservation
    assessment: Assessment
    metadata: dict[str, str]

    def to_dict(self) -> dict[str, Any]:
        observation = asdict(self.observation)
        observation["wind_speed_kmh"] = ms_to_kmh(self.observation.wind_speed_ms)
        wave_direction = self.observation.wave_direction_deg
        observation["wave_direction_label"] = (
            degrees_to_compass8(wave_direction) if wave_direction is not None else None
        )
        return {
            "station": self.station,
            "observation": observation,
            "assessment": self.assessment.to_dict(),
            "metadata": self.metadata,
        }


class GetBuoyAssessmentUseCase:
    """Use case for fetching a buoy observation and assessing it."""

    def __init__(self, repository: CwaMarineRepository | None = None):
        """Initialize use case.

        Args:
            repository: Optional CwaMarineRepository instance
        """
        self._repository = repository

    async def _get_repository(self) -> CwaMarineRepository:
        """Get or create repository."""
        if self._repository is None:
            self._repository = CwaMarineRepository()
        return self._repository

    def _validate_beach_facing(self, beach_facing_deg: float) -> float:
        """Validate and normalize the beach facing bearing.

        Raises:
            ValueError: If the bearing is outside -360 to 360
        """
        if not -360 <= beach_facing_deg <= 360:
            raise ValueError(
                f"Beach facing must be a bearing between -360 and 360, got {beach_facing_deg}"
            )
        return normalize_angle(beach_facing_deg)

    async def execute(
        self,
        station_id: str,
        beach_facing_deg: float,
        backup_station_id: str | None = None,
    ) -> BuoyAssessmentResponse:
        """Execute the use case to assess conditions at a buoy.

        Args:
            station_id: CWA marine station ID
            beach_facing_deg: Direction the beach faces (0-360°)
            backup_station_id: Optional station to use when the primary is down

        Returns:
            BuoyAssessmentResponse with observation and assessment

        Raises:
            ValueError: If the beach facing is invalid
            CwaApiError: If the observation can't be fetched
        """
        if not station_id:
            raise ValueError("Station ID is required")
        beach_facing_deg = self._validate_beach_facing(beach_facing_deg)

        repository = await self._get_repository()

        logger.info(f"Fetching marine observation for station {station_id}")

        observation = await repository.get_observation_with_fallback(station_id, backup_station_id)

        if observation.station_id != station_id:
            logger.info(f"Using backup station {observation.station_id} for {station_id}")

        assessment = SurfAssessmentService.evaluate(
            wave_height_m=observation.wave_height_m,
            wave_period_s=observation.wave_period_s,
            wind_direction=observation.wind_direction_deg,
            wind_speed_kmh=ms_to_kmh(observation.wind_speed_ms),
            beach_facing_deg=beach_facing_deg,
        )

        return BuoyAssessmentResponse(
            station={
                "id": observation.station_id,
                "name": observation.station_name,
                "requested_id": station_id,
            },
            observation=observation,
            assessment=assessment,
            metadata={
                "source": "CWA O-B0075-001",
                "generated_at": datetime.now(tz=timezone.utc).isoformat(),
            },
        )

    async def close(self) -> None:
        """Close repository."""
        if self._repository:
            await self._repository.close()

    async def __aenter__(self) -> "GetBuoyAssessmentUseCase":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
