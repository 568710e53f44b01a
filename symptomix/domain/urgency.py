from typing import Optional, Sequence

from .models import AnswerFields, Answers, UrgencyAssessment
from .scoring import DEFAULT_FIELDS


CRITICAL_SYMPTOMS = {"chest pain", "shortness of breath", "severe abdominal pain"}
CONCERNING_SYMPTOMS = {"fever", "persistent headache", "severe fatigue"}
HIGH_FEVER_F = 103.0

HIGH_MESSAGE = (
    "Seek immediate medical attention. Consider visiting an emergency room "
    "or calling emergency services."
)
MEDIUM_MESSAGE = "Consider scheduling an appointment with your healthcare provider within 24-48 hours."
LOW_MESSAGE = "Monitor your symptoms and consider rest, hydration, and over-the-counter remedies as appropriate."


def _temperature(answers: Optional[Answers], key: str) -> Optional[float]:
    if not answers or answers.get(key) is None:
        return None
    try:
        return float(str(answers[key]).strip())
    except ValueError:
        return None


def classify_urgency(
    symptoms: Sequence[str],
    answers: Optional[Answers],
    fields: AnswerFields = DEFAULT_FIELDS,
) -> UrgencyAssessment:
    # Tier matching is on the whole symptom name: "Headache" is not "Persistent headache".
    reported = {s.lower() for s in symptoms}

    if reported & CRITICAL_SYMPTOMS:
        return UrgencyAssessment(level="high", message=HIGH_MESSAGE)

    temperature = _temperature(answers, fields.temperature)
    if temperature is not None and temperature >= HIGH_FEVER_F:
        return UrgencyAssessment(level="high", message=HIGH_MESSAGE)

    if reported & CONCERNING_SYMPTOMS:
        return UrgencyAssessment(level="medium", message=MEDIUM_MESSAGE)

    return UrgencyAssessment(level="low", message=LOW_MESSAGE)
