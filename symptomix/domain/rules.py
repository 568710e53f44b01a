from typing import Iterable, Iterator, Tuple

from .models import Rule


MILD = "Mild - Does not interfere with daily activities"
MODERATE = "Moderate - Some interference with daily activities"
SEVERE = "Severe - Significantly impacts daily activities"
VERY_SEVERE = "Very severe - Unable to perform normal activities"


SAMPLE_RULES: Tuple[Rule, ...] = (
    Rule(
        condition="Common Cold",
        description="A viral infection affecting the nose and throat, typically lasting 7-10 days.",
        required_symptoms=("Cough", "Sore throat", "Fatigue"),
        min_confidence=0.6,
        priority=5,
        duration_factors={"1-3 days": 0.8, "4-7 days": 1.0, "More than a week": 0.6},
        severity_factors={MILD: 1.0, MODERATE: 0.8},
    ),
    Rule(
        condition="Influenza (Flu)",
        description="A viral infection that attacks your respiratory system with sudden onset of symptoms.",
        required_symptoms=("Fever", "Fatigue", "Headache"),
        min_confidence=0.7,
        priority=7,
        duration_factors={"Less than 24 hours": 1.0, "1-3 days": 1.0, "4-7 days": 0.8},
        severity_factors={MODERATE: 0.8, SEVERE: 1.0},
    ),
    Rule(
        condition="Gastroenteritis",
        description="Inflammation of the stomach and intestines, often called stomach flu.",
        required_symptoms=("Nausea", "Vomiting", "Diarrhea"),
        min_confidence=0.7,
        priority=6,
        duration_factors={"Less than 24 hours": 0.8, "1-3 days": 1.0, "4-7 days": 0.6},
    ),
    Rule(
        condition="Migraine",
        description=(
            "A type of headache characterized by severe pain, often accompanied by "
            "nausea and sensitivity to light."
        ),
        required_symptoms=("Headache",),
        min_confidence=0.6,
        priority=4,
        severity_factors={SEVERE: 1.0, VERY_SEVERE: 1.0},
    ),
)


class RuleCatalog:
    """Rules in evaluation order: highest priority first, declaration order on ties."""

    def __init__(self, rules: Iterable[Rule]):
        # sorted() is stable, which gives the declaration-order tie-break
        self._rules: Tuple[Rule, ...] = tuple(sorted(rules, key=lambda r: -r.priority))

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


def default_catalog() -> RuleCatalog:
    return RuleCatalog(SAMPLE_RULES)
