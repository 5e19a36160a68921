"""Use cases - application orchestration."""

from surfcast.application.use_cases.get_buoy_assessment import GetBuoyAssessmentUseCase

__all__ = ["GetBuoyAssessmentUseCase"]
