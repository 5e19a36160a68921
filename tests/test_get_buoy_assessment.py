import asyncio

import pytest

from surfcast.application.use_cases.get_buoy_assessment import GetBuoyAssessmentUseCase
from surfcast.repository.cwa_marine_repository import BuoyObservation


class FakeRepository:
    def __init__(self, observation: BuoyObservation):
        self.observation = observation
        self.calls = []
        self.closed = False

    async def get_observation_with_fallback(self, station_id, backup_station_id=None):
        self.calls.append((station_id, backup_station_id))
        return self.observation

    async def close(self):
        self.closed = True


def _observation(station_id="46708A", wind_speed_ms=5.0, wind_direction_deg=270.0):
    return BuoyObservation(
        station_id=station_id,
        station_name="龜山島浮標",
        observed_at="2026-10-19T09:00:00+08:00",
        wave_height_m=1.2,
        wave_period_s=10.0,
        wave_direction_deg=90.0,
        wind_speed_ms=wind_speed_ms,
        wind_direction_deg=wind_direction_deg,
        sea_temperature_c=26.4,
    )


def test_execute_assesses_observation():
    repository = FakeRepository(_observation())

    async def run():
        async with GetBuoyAssessmentUseCase(repository=repository) as use_case:
            return await use_case.execute("46708A", 90)

    result = asyncio.run(run())

    assert repository.closed is True
    assert repository.calls == [("46708A", None)]
    assert result.assessment.sufficient is True
    assert result.assessment.wind.wind_speed_kmh == 18.0

    data = result.to_dict()
    assert data["station"] == {"id": "46708A", "name": "龜山島浮標", "requested_id": "46708A"}
    assert data["observation"]["wind_speed_kmh"] == 18.0
    assert data["observation"]["wave_direction_label"] == "東"
    assert data["assessment"]["wind"]["type"] == "offshore"
    assert data["metadata"]["source"] == "CWA O-B0075-001"


def test_backup_station_is_reported():
    repository = FakeRepository(_observation(station_id="46706A"))
    use_case = GetBuoyAssessmentUseCase(repository=repository)

    result = asyncio.run(use_case.execute("46708A", 90, backup_station_id="46706A"))

    assert repository.calls == [("46708A", "46706A")]
    assert result.station["id"] == "46706A"
    assert result.station["requested_id"] == "46708A"


def test_missing_wind_yields_insufficient_assessment():
    repository = FakeRepository(_observation(wind_speed_ms=None, wind_direction_deg=None))

    result = asyncio.run(GetBuoyAssessmentUseCase(repository=repository).execute("46708A", 90))

    assert result.assessment.sufficient is False
    assert result.to_dict()["observation"]["wind_speed_kmh"] is None


@pytest.mark.parametrize("facing", [361, -400])
def test_invalid_beach_facing(facing):
    use_case = GetBuoyAssessmentUseCase(repository=FakeRepository(_observation()))

    with pytest.raises(ValueError, match="Beach facing"):
        asyncio.run(use_case.execute("46708A", facing))


def test_missing_station_id():
    use_case = GetBuoyAssessmentUseCase(repository=FakeRepository(_observation()))

    with pytest.raises(ValueError, match="Station ID"):
        asyncio.run(use_case.execute("", 90))
