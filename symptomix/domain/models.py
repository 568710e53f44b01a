from datetime import datetime
from typing import Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, confloat, field_validator
from pydantic.alias_generators import to_camel


AnswerValue = Union[List[str], str, int, float]
Answers = Dict[str, AnswerValue]
UrgencyLevel = Literal["low", "medium", "high"]
Weight = confloat(ge=0.0, le=1.0)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnswerFields(BaseModel):
    """Question ids the pipeline reads from an answer set."""

    model_config = ConfigDict(frozen=True)

    symptoms: str = "primary_symptoms"
    duration: str = "duration"
    severity: str = "severity"
    temperature: str = "fever_temp"


class StoredRecord(CamelModel):
    """Anything kept in a record collection.

    The store only talks to records through these methods. Types that carry
    timestamps override the stamp methods.
    """

    id: Optional[str] = None

    def with_id(self, record_id: str):
        return self.model_copy(update={"id": record_id})

    def stamp_created(self, when: datetime):
        return self

    def stamp_updated(self, when: datetime):
        return self


class TimestampedRecord(StoredRecord):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def stamp_created(self, when: datetime):
        return self.model_copy(update={"created_at": when})

    def stamp_updated(self, when: datetime):
        return self.model_copy(update={"updated_at": when})


class Rule(BaseModel):
    model_config = ConfigDict(frozen=True)

    condition: str
    description: str
    required_symptoms: Tuple[str, ...] = ()
    min_confidence: float = Field(..., ge=0.0, le=1.0)
    priority: int = 0
    duration_factors: Dict[str, Weight] = {}
    severity_factors: Dict[str, Weight] = {}


class DiagnosisMatch(BaseModel):
    condition: str
    description: str
    confidence: float = Field(..., ge=0.0, le=1.0)


class UrgencyAssessment(BaseModel):
    level: UrgencyLevel
    message: str


class AlternativeDiagnosis(CamelModel):
    model_config = ConfigDict(frozen=True)

    condition: str
    description: Optional[str] = None
    confidence: float = Field(..., ge=0.0, le=1.0)


class Recommendation(CamelModel):
    model_config = ConfigDict(frozen=True)

    type: str  # "urgent" | "medical" | "self-care" | "general"
    title: str
    description: str


class Assessment(StoredRecord):
    """Reduced projection of an assessment result, as persisted."""

    user_id: Optional[str] = None
    symptoms: List[str] = []
    diagnosis: str
    confidence: float = 0.0
    urgency: str
    date: datetime
    answers: Answers = {}


class UserProfile(TimestampedRecord):
    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    phone: Optional[str] = None
    emergency_contact: Optional[str] = None
    medical_conditions: Optional[str] = None
    allergies: Optional[str] = None
    medications: Optional[str] = None

    @field_validator("name", "email")
    @classmethod
    def strip_blank(cls, v: Optional[str]):
        if v is not None:
            v = v.strip()
            if len(v) == 0:
                return None
        return v
