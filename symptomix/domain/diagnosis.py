from typing import List, Optional, Sequence

from .models import AlternativeDiagnosis, AnswerFields, Answers, DiagnosisMatch
from .rules import RuleCatalog
from .scoring import DEFAULT_FIELDS, score_rule


GENERAL_SYMPTOMS = DiagnosisMatch(
    condition="General Symptoms",
    description=(
        "Based on your symptoms, you may be experiencing a common condition. "
        "Please monitor your symptoms and consider consulting a healthcare professional."
    ),
    confidence=0.6,
)

ALTERNATIVE_THRESHOLD = 0.3
MAX_ALTERNATIVES = 3


class DiagnosisSelector:
    def __init__(self, catalog: RuleCatalog, fields: AnswerFields = DEFAULT_FIELDS):
        self.catalog = catalog
        self.fields = fields

    def select_primary(self, symptoms: Sequence[str], answers: Optional[Answers]) -> DiagnosisMatch:
        """First rule, in catalog order, that clears its own threshold.

        Not the best-scoring rule: a higher-priority rule
        that qualifies wins over a lower-priority one with a higher score.
        """
        for rule in self.catalog:
            score = score_rule(symptoms, answers, rule, self.fields)
            if score >= rule.min_confidence:
                return DiagnosisMatch(
                    condition=rule.condition,
                    description=rule.description,
                    confidence=score,
                )
        return GENERAL_SYMPTOMS

    def rank_alternatives(
        self,
        symptoms: Sequence[str],
        answers: Optional[Answers],
        primary_condition: str,
    ) -> List[AlternativeDiagnosis]:
        alternatives: List[AlternativeDiagnosis] = []
        for rule in self.catalog:
            if rule.condition == primary_condition:
                continue
            score = score_rule(symptoms, answers, rule, self.fields)
            if score >= ALTERNATIVE_THRESHOLD:
                alternatives.append(
                    AlternativeDiagnosis(
                        condition=rule.condition,
                        description=rule.description,
                        confidence=score,
                    )
                )
        alternatives.sort(key=lambda a: a.confidence, reverse=True)
        return alternatives[:MAX_ALTERNATIVES]
