"""Services - surf condition classification and assessment rules."""

from surfcast.application.services.assessment import Assessment, SurfAssessmentService
from surfcast.application.services.safety import SafetyLevel

__all__ = ["Assessment", "SurfAssessmentService", "SafetyLevel"]
