import asyncio

from surfcast.repository.cwa_marine_repository import CwaApiError, CwaStationNotFoundError
from surfcast.tools import surf_tools


class FakeMCP:
    def __init__(self):
        self.tools = {}

    def tool(self):
        def decorator(fn):
            self.tools[fn.__name__] = fn
            return fn

        return decorator


def _tools():
    mcp = FakeMCP()
    surf_tools.register_tools(mcp)
    return mcp.tools


def test_tools_are_registered():
    assert set(_tools()) == {"assess_surf_conditions", "get_buoy_assessment"}


def test_assess_surf_conditions():
    assess = _tools()["assess_surf_conditions"]

    result = asyncio.run(assess(1.2, 11, "西南風", 12, 45))

    assert result["sufficient"] is True
    assert result["wind"]["type"] == "offshore"
    assert result["boardSuitability"]["recommended"] == "funboard"
    assert result["overallAssessment"] == "理想的浪高、長週期與乾淨的浪面，完美組合"


def test_assess_surf_conditions_with_safety_override():
    assess = _tools()["assess_surf_conditions"]

    result = asyncio.run(assess(1.2, 11, "270", 12, 90, safety_level="danger"))

    assert result["safetyLevel"] == "danger"
    assert result["boardSuitability"]["recommended"] == "none"


def test_assess_surf_conditions_invalid_safety_level():
    assess = _tools()["assess_surf_conditions"]

    result = asyncio.run(assess(1.2, 11, "270", 12, 90, safety_level="extreme"))

    assert result["error_type"] == "validation_error"
    assert "hint" in result


class _FailingUseCase:
    error: Exception

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    async def execute(self, station_id, beach_facing_deg, backup_station_id=None):
        raise self.error


def test_get_buoy_assessment_station_not_found(monkeypatch):
    class NotFound(_FailingUseCase):
        error = CwaStationNotFoundError("Station 46708A not found in marine dataset")

    monkeypatch.setattr(surf_tools, "GetBuoyAssessmentUseCase", NotFound)
    get_buoy = _tools()["get_buoy_assessment"]

    result = asyncio.run(get_buoy("46708A", 90))

    assert result["error_type"] == "station_not_found"
    assert "backup_station_id" in result["hint"]


def test_get_buoy_assessment_api_error(monkeypatch):
    class ApiDown(_FailingUseCase):
        error = CwaApiError("Failed to fetch marine observation")

    monkeypatch.setattr(surf_tools, "GetBuoyAssessmentUseCase", ApiDown)
    get_buoy = _tools()["get_buoy_assessment"]

    result = asyncio.run(get_buoy("46708A", 90))

    assert result["error_type"] == "api_error"


def test_get_buoy_assessment_validation_error():
    get_buoy = _tools()["get_buoy_assessment"]

    result = asyncio.run(get_buoy("46708A", 400))

    assert result["error_type"] == "validation_error"
