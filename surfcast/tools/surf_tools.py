"""MCP tools for surf condition assessment."""

import logging
from typing import Any

from surfcast.application.services.assessment import SurfAssessmentService
from surfcast.application.services.safety import SafetyLevel
from surfcast.application.use_cases.get_buoy_assessment import GetBuoyAssessmentUseCase
from surfcast.repository.cwa_marine_repository import (
    CwaApiError,
    CwaNoObservationError,
    CwaStationNotFoundError,
)

logger = logging.getLogger(__name__)


def register_tools(mcp) -> None:
    """Register surf tools with the MCP server.

    Args:
        mcp: FastMCP server instance
    """

    @mcp.tool()
    async def assess_surf_conditions(
        wave_height_m: float,
        wave_period_s: float,
        wind_direction: str,
        wind_speed_kmh: float,
        beach_facing_deg: float,
        safety_level: str | None = None,
    ) -> dict[str, Any]:
        """Assess surf conditions from wave and wind readings.

        Classifies the waves (size, period, power) and the wind (offshore,
        onshore or cross-shore, texture, strength), rates longboards,
        shortboards and funboards, and writes an overall assessment in
        Traditional Chinese.

        Args:
            wave_height_m: Wave height in meters
            wave_period_s: Wave period in seconds
            wind_direction: Direction wind comes FROM, degrees ("270") or text ("偏東風")
            wind_speed_kmh: Wind speed in km/h
            beach_facing_deg: Direction the beach faces toward the sea (0-360°)
            safety_level: Optional override: "safe", "warning" or "danger"

        Returns:
            Dictionary containing:
            - sufficient: Whether there was enough data to assess
            - waveFeatures: {power, size, period}
            - windFeatures: {texture, strength, impact}
            - wind: {type, quality, direction, directionLabel, speedKmh, emoji}
            - safetyLevel / safetyConcerns
            - boardSuitability: {longboard, shortboard, funboard, recommended, recommendedName}
            - interactions: pairwise interactions, synergy, conflict resolution, chemistry
            - overallAssessment: Narrative summary
            - labels: zh-TW display labels for the classified features
            - narratives: {wave, wind}

        Example:
            >>> assess_surf_conditions(1.2, 11, "西南風", 12, 45)
            {
                "sufficient": true,
                "waveFeatures": {"power": "solid", "size": "chest", "period": "ground-swell"},
                "boardSuitability": {"recommended": "funboard", ...},
                "overallAssessment": "理想的浪高、長週期與乾淨的浪面，完美組合",
                ...
            }
        """
        try:
            level = SafetyLevel(safety_level) if safety_level else None
            assessment = SurfAssessmentService.evaluate(
                wave_height_m=wave_height_m,
                wave_period_s=wave_period_s,
                wind_direction=wind_direction,
                wind_speed_kmh=wind_speed_kmh,
                beach_facing_deg=beach_facing_deg,
                safety_level=level,
            )
            return assessment.to_dict()

        except ValueError as e:
            logger.warning(f"Invalid input: {e}")
            return {
                "error": str(e),
                "error_type": "validation_error",
                "hint": 'safety_level must be one of "safe", "warning" or "danger".',
            }

        except Exception as e:
            logger.exception(f"Unexpected error: {e}")
            return {
                "error": f"Unexpected error: {str(e)}",
                "error_type": "internal_error",
            }

    @mcp.tool()
    async def get_buoy_assessment(
        station_id: str,
        beach_facing_deg: float,
        backup_station_id: str | None = None,
    ) -> dict[str, Any]:
        """Assess surf conditions at a beach from its nearest CWA buoy.

        Fetches the latest sea surface observation from the Central Weather
        Administration open data API (O-B0075-001), converts wind speed to
        km/h and runs the full surf assessment.

        Args:
            station_id: CWA marine station ID (e.g. "46708A" for 龜山島浮標)
            beach_facing_deg: Direction the beach faces toward the sea (0-360°)
            backup_station_id: Optional station to use when the primary has no data

        Returns:
            Dictionary containing:
            - station: {id, name, requested_id}
            - observation: Raw buoy reading (wave height/period/direction, wind, sea temperature)
            - assessment: Same structure as assess_surf_conditions
            - metadata: {source, generated_at}
        """
        try:
            async with GetBuoyAssessmentUseCase() as use_case:
                result = await use_case.execute(station_id, beach_facing_deg, backup_station_id)
                return result.to_dict()

        except ValueError as e:
            logger.warning(f"Invalid input: {e}")
            return {
                "error": str(e),
                "error_type": "validation_error",
            }

        except CwaStationNotFoundError as e:
            logger.warning(f"Station not found: {e}")
            return {
                "error": str(e),
                "error_type": "station_not_found",
                "hint": "Check the station ID, or pass a backup_station_id for buoys under maintenance.",
            }

        except CwaNoObservationError as e:
            logger.warning(f"No observation: {e}")
            return {
                "error": str(e),
                "error_type": "no_observation",
                "hint": "The buoy is not reporting wave data. Try a nearby backup station.",
            }

        except CwaApiError as e:
            logger.error(f"CWA API error: {e}")
            return {
                "error": str(e),
                "error_type": "api_error",
                "hint": "Check if CWA_API_KEY is configured correctly.",
            }

        except Exception as e:
            logger.exception(f"Unexpected error: {e}")
            return {
                "error": f"Unexpected error: {str(e)}",
                "error_type": "internal_error",
            }
