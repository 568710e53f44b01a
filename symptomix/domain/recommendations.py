from typing import List, Sequence

from .models import Recommendation, UrgencyLevel


URGENCY_RECOMMENDATIONS = {
    "high": Recommendation(
        type="urgent",
        title="Seek Immediate Care",
        description="Visit the nearest emergency room or call emergency services immediately.",
    ),
    "medium": Recommendation(
        type="medical",
        title="Consult Healthcare Provider",
        description="Schedule an appointment with your doctor within 24-48 hours.",
    ),
    "low": Recommendation(
        type="self-care",
        title="Self-Care and Monitoring",
        description="Rest, stay hydrated, and monitor your symptoms.",
    ),
}

FEVER_TIP = Recommendation(
    type="self-care",
    title="Fever Management",
    description="Take fever reducers as directed, stay hydrated, and rest.",
)

COUGH_TIP = Recommendation(
    type="self-care",
    title="Cough Relief",
    description="Use a humidifier, drink warm liquids, and consider over-the-counter cough suppressants.",
)

FOLLOW_UP = Recommendation(
    type="general",
    title="Follow Up",
    description="If symptoms worsen or persist, consult with a healthcare professional.",
)


def _mentions(symptoms: Sequence[str], word: str) -> bool:
    return any(word in s.lower() for s in symptoms)


def build_recommendations(urgency: UrgencyLevel, symptoms: Sequence[str]) -> List[Recommendation]:
    """Urgency advice first, then symptom tips, then the follow-up reminder."""
    recommendations = [URGENCY_RECOMMENDATIONS[urgency]]
    if _mentions(symptoms, "fever"):
        recommendations.append(FEVER_TIP)
    if _mentions(symptoms, "cough"):
        recommendations.append(COUGH_TIP)
    recommendations.append(FOLLOW_UP)
    return recommendations
