from typing import List, Optional, Sequence

from .models import AnswerFields, Answers, Rule


DEFAULT_FIELDS = AnswerFields()


def extract_symptoms(answers: Optional[Answers], fields: AnswerFields = DEFAULT_FIELDS) -> List[str]:
    """Reported symptoms; only a list answer counts, blank entries are dropped."""
    if not answers:
        return []
    value = answers.get(fields.symptoms)
    if not isinstance(value, list):
        return []
    return [str(s) for s in value if s is not None and str(s) != ""]


def _answer_text(answers: Answers, key: str) -> str:
    value = answers.get(key)
    return "" if value is None else str(value)


def score_rule(
    symptoms: Sequence[str],
    answers: Optional[Answers],
    rule: Rule,
    fields: AnswerFields = DEFAULT_FIELDS,
) -> float:
    """
    Normalised match score of one rule, in [0, 1].

    Each required symptom is one criterion, matched when any reported symptom
    contains it (case-insensitive). A duration or severity answer, when
    present at all, is one more criterion worth the rule's table weight for
    that exact answer text, or nothing if the table has no entry.
    """
    score = 0.0
    total_criteria = 0
    reported = [s.lower() for s in symptoms]

    for required in rule.required_symptoms:
        total_criteria += 1
        needle = required.lower()
        if any(needle in s for s in reported):
            score += 1.0

    answers = answers or {}
    if fields.duration in answers:
        total_criteria += 1
        score += rule.duration_factors.get(_answer_text(answers, fields.duration), 0.0)
    if fields.severity in answers:
        total_criteria += 1
        score += rule.severity_factors.get(_answer_text(answers, fields.severity), 0.0)

    if total_criteria == 0:
        return 0.0
    return score / total_criteria
