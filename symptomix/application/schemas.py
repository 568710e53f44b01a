from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field

from symptomix.domain.models import (
    AlternativeDiagnosis,
    Answers,
    CamelModel,
    Recommendation,
    UrgencyLevel,
)


class AssessmentRequest(CamelModel):
    user_id: Optional[str] = None
    answers: Optional[Answers] = None
    timestamp: Optional[str] = None


class AssessmentResult(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    user_id: Optional[str] = None
    primary_diagnosis: str
    description: Optional[str] = None
    confidence: float = Field(..., ge=0.0, le=1.0)
    urgency: UrgencyLevel
    urgency_message: Optional[str] = None
    alternative_diagnoses: List[AlternativeDiagnosis] = []
    recommendations: List[Recommendation] = []
    created_at: datetime
    user_answers: Answers = {}
