"""Repository for CWA open data marine (buoy) observations."""

import logging
import math
from dataclasses import dataclass
from typing import Any

from surfcast.resources.config import get_settings
from surfcast.resources.http_client import HttpClient, HttpClientError

logger = logging.getLogger(__name__)


class CwaApiError(Exception):
    """Raised when CWA API request fails."""

    pass


class CwaStationNotFoundError(CwaApiError):
    """Raised when the requested station is not in the dataset."""

    pass


class CwaNoObservationError(CwaApiError):
    """Raised when a station has no usable wave observation."""

    pass


@dataclass
class BuoyObservation:
    """Latest usable observation from a marine station."""

    station_id: str
    station_name: str
    observed_at: str | None
    wave_height_m: float | None
    wave_period_s: float | None
    wave_direction_deg: float | None
    wind_speed_ms: float | None
    wind_direction_deg: float | None
    sea_temperature_c: float | None


def parse_number(value: Any) -> float | None:
    """Parse a CWA numeric field.

    The API reports missing readings as "None", "-", "--", "X" or an empty
    string, and sometimes as sentinel values like -99 or as "NaN".
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= -99:
        return None
    return number


class CwaMarineRepository:
    """Repository for the CWA sea surface observation dataset."""

    def __init__(self, http_client: HttpClient | None = None):
        """Initialize repository.

        Args:
            http_client: Optional HTTP client instance
        """
        self._http_client = http_client
        self._settings = get_settings()

    async def _get_client(self) -> HttpClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = HttpClient()
        return self._http_client

    def _validate_api_key(self) -> None:
        """Validate that API key is configured."""
        if not self._settings.cwa_api_key:
            raise CwaApiError(
                "CWA_API_KEY environment variable is not set. "
                "Please configure your CWA open data API key."
            )

    async def get_observation(self, station_id: str) -> BuoyObservation:
        """Fetch the latest observation for a marine station.

        Args:
            station_id: CWA station ID (e.g. "46708A")

        Returns:
            BuoyObservation with the most recent valid wave reading

        Raises:
            CwaApiError: If API request fails
            CwaStationNotFoundError: If the station is not in the response
            CwaNoObservationError: If the station has no valid wave reading
        """
        self._validate_api_key()

        client = await self._get_client()
        url = f"{self._settings.cwa_api_url}/{self._settings.marine_dataset_id}"
        params = {
            "Authorization": self._settings.cwa_api_key,
            "StationID": station_id,
        }

        logger.debug(f"Marine observation request for station {station_id}")

        try:
            response = await client.get(url, params=params)
        except HttpClientError as e:
            logger.error(f"CWA marine API error for station {station_id}: {e}")
            raise CwaApiError(f"Failed to fetch marine observation: {e}") from e

        return self._parse_observation_response(response, station_id)

    async def get_observation_with_fallback(
        self,
        station_id: str,
        backup_station_id: str | None = None,
    ) -> BuoyObservation:
        """Fetch an observation, falling back to a backup station.

        Buoys regularly go offline for maintenance, so a spot can name a
        nearby backup station.

        Args:
            station_id: Primary CWA station ID
            backup_station_id: Optional backup CWA station ID

        Returns:
            BuoyObservation from the first station that has data

        Raises:
            CwaApiError: If neither station yields an observation
        """
        try:
            return await self.get_observation(station_id)
        except (CwaStationNotFoundError, CwaNoObservationError) as e:
            if not backup_station_id:
                raise
            logger.warning(
                f"Station {station_id} unavailable ({e}), "
                f"falling back to {backup_station_id}"
            )
            return await self.get_observation(backup_station_id)

    def _parse_observation_response(
        self,
        response: dict[str, Any],
        station_id: str,
    ) -> BuoyObservation:
        """Parse CWA sea surface observation response.

        Args:
            response: Raw API response
            station_id: Station the observation was requested for

        Returns:
            Parsed BuoyObservation
        """
        records = response.get("records") or response.get("Records") or {}
        locations = (records.get("SeaSurfaceObs") or {}).get("Location") or []

        location = next(
            (loc for loc in locations if (loc.get("Station") or {}).get("StationID") == station_id),
            None,
        )
        if location is None:
            raise CwaStationNotFoundError(f"Station {station_id} not found in marine dataset")

        station = location.get("Station") or {}
        obs_times = (location.get("StationObsTimes") or {}).get("StationObsTime") or []

        # Observations are chronological; use the latest with a wave reading
        for obs in reversed(obs_times):
            elements = obs.get("WeatherElements") or {}
            wave_height = parse_number(elements.get("WaveHeight"))
            if wave_height is None:
                continue

            anemometer = elements.get("PrimaryAnemometer") or {}
            return BuoyObservation(
                station_id=station_id,
                station_name=station.get("StationName", station_id),
                observed_at=obs.get("DateTime"),
                wave_height_m=wave_height,
                wave_period_s=parse_number(elements.get("WavePeriod")),
                wave_direction_deg=parse_number(elements.get("WaveDirection")),
                wind_speed_ms=parse_number(anemometer.get("WindSpeed")),
                wind_direction_deg=parse_number(anemometer.get("WindDirection")),
                sea_temperature_c=parse_number(elements.get("SeaTemperature")),
            )

        raise CwaNoObservationError(f"Station {station_id} has no valid wave observation")

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client:
            await self._http_client.close()

    async def __aenter__(self) -> "CwaMarineRepository":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
