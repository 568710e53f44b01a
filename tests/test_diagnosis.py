"""Unit tests for primary diagnosis selection and alternative ranking."""
import pytest

from symptomix.domain.diagnosis import GENERAL_SYMPTOMS, DiagnosisSelector
from symptomix.domain.models import Rule
from symptomix.domain.rules import MILD, SEVERE, RuleCatalog, default_catalog


def rule(condition, required, priority, min_confidence=0.9):
    return Rule(
        condition=condition,
        description=f"{condition} description",
        required_symptoms=tuple(required),
        min_confidence=min_confidence,
        priority=priority,
    )


REPORTED = ["alpha", "beta", "gamma", "delta"]


@pytest.fixture
def ranked_selector():
    """Primary rule plus five candidates scoring 0.8, 0.75, 0.5, 0.33 and 0.25."""
    return DiagnosisSelector(RuleCatalog([
        rule("Primary", ["alpha"], priority=10, min_confidence=0.5),
        rule("Three of four", ["alpha", "beta", "gamma", "omega"], priority=5),
        rule("Two of four", ["alpha", "beta", "omega", "sigma"], priority=5),
        rule("One of three", ["alpha", "omega", "sigma"], priority=4),
        rule("One of four", ["alpha", "omega", "sigma", "kappa"], priority=3),
        rule("Four of five", ["alpha", "beta", "gamma", "delta", "omega"], priority=2),
    ]))


class TestSelectPrimary:
    """Test first-match-wins primary selection."""

    def test_first_qualifying_rule_wins_over_best_score(self):
        """An earlier rule that clears its threshold beats a later, higher-scoring one."""
        selector = DiagnosisSelector(RuleCatalog([
            rule("Later", ["Cough"], priority=1, min_confidence=0.5),
            rule("Earlier", ["Cough", "Fever"], priority=10, min_confidence=0.5),
        ]))
        primary = selector.select_primary(["Cough"], {})
        assert primary.condition == "Earlier"
        assert primary.confidence == pytest.approx(0.5)

    def test_rule_below_its_threshold_is_skipped(self):
        selector = DiagnosisSelector(RuleCatalog([
            rule("Later", ["Cough"], priority=1, min_confidence=0.5),
            rule("Earlier", ["Cough", "Fever"], priority=10, min_confidence=0.6),
        ]))
        primary = selector.select_primary(["Cough"], {})
        assert primary.condition == "Later"
        assert primary.confidence == pytest.approx(1.0)

    def test_default_when_nothing_qualifies(self):
        selector = DiagnosisSelector(default_catalog())
        primary = selector.select_primary([], {})
        assert primary == GENERAL_SYMPTOMS
        assert primary.condition == "General Symptoms"
        assert primary.confidence == 0.6

    def test_common_cold(self):
        selector = DiagnosisSelector(default_catalog())
        symptoms = ["Cough", "Sore throat", "Fatigue"]
        answers = {"primary_symptoms": symptoms, "duration": "4-7 days", "severity": MILD}
        primary = selector.select_primary(symptoms, answers)
        assert primary.condition == "Common Cold"
        assert primary.confidence == pytest.approx(1.0)

    def test_migraine_on_headache_alone(self):
        selector = DiagnosisSelector(default_catalog())
        primary = selector.select_primary(["Headache"], {"severity": SEVERE})
        assert primary.condition == "Migraine"
        assert primary.confidence == pytest.approx(1.0)


class TestRankAlternatives:
    """Test alternative diagnosis ranking."""

    def test_top_three_descending(self, ranked_selector):
        alternatives = ranked_selector.rank_alternatives(REPORTED, {}, "Primary")
        assert [a.condition for a in alternatives] == ["Four of five", "Three of four", "Two of four"]
        assert [a.confidence for a in alternatives] == pytest.approx([0.8, 0.75, 0.5])

    def test_excludes_primary(self, ranked_selector):
        alternatives = ranked_selector.rank_alternatives(REPORTED, {}, "Primary")
        assert "Primary" not in {a.condition for a in alternatives}

    def test_threshold_independent_of_min_confidence(self, ranked_selector):
        """Rules with a 0.9 own threshold still appear once they score 0.3."""
        alternatives = ranked_selector.rank_alternatives(REPORTED, {}, "Four of five")
        names = [a.condition for a in alternatives]
        assert names == ["Primary", "Three of four", "Two of four"]

    def test_below_point_three_dropped(self):
        selector = DiagnosisSelector(RuleCatalog([
            rule("Primary", ["alpha"], priority=10, min_confidence=0.5),
            rule("Weak", ["alpha", "omega", "sigma", "kappa"], priority=1),
            rule("Just enough", ["alpha", "omega", "sigma"], priority=1),
        ]))
        alternatives = selector.rank_alternatives(REPORTED, {}, "Primary")
        assert [a.condition for a in alternatives] == ["Just enough"]

    def test_default_primary_allows_every_rule(self):
        """With the fallback diagnosis no catalog rule is excluded."""
        selector = DiagnosisSelector(default_catalog())
        alternatives = selector.rank_alternatives(["Fever", "Fatigue"], {}, GENERAL_SYMPTOMS.condition)
        assert [a.condition for a in alternatives] == ["Influenza (Flu)", "Common Cold"]
        assert [a.confidence for a in alternatives] == pytest.approx([2 / 3, 1 / 3])

    def test_alternatives_carry_descriptions(self):
        selector = DiagnosisSelector(default_catalog())
        alternatives = selector.rank_alternatives(["Headache"], {"severity": SEVERE}, "Migraine")
        assert alternatives[0].condition == "Influenza (Flu)"
        assert alternatives[0].confidence == pytest.approx(0.5)
        assert alternatives[0].description.startswith("A viral infection")
