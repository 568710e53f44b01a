"""Unit tests for urgency classification."""
import pytest

from symptomix.domain.models import AnswerFields
from symptomix.domain.urgency import HIGH_MESSAGE, LOW_MESSAGE, MEDIUM_MESSAGE, classify_urgency


class TestClassifyUrgency:
    """Test the three urgency tiers."""

    @pytest.mark.parametrize("symptom", [
        "Chest pain",
        "chest PAIN",
        "Shortness of breath",
        "Severe abdominal pain",
    ])
    def test_critical_symptom_is_high(self, symptom):
        result = classify_urgency([symptom], {})
        assert result.level == "high"
        assert result.message == HIGH_MESSAGE

    def test_critical_overrides_medium(self):
        result = classify_urgency(["Fever", "Shortness of breath"], {})
        assert result.level == "high"

    def test_critical_requires_exact_name(self):
        """Critical symptoms match on the whole name, not a substring."""
        result = classify_urgency(["Chest pain when running"], {})
        assert result.level == "low"

    @pytest.mark.parametrize("temperature", ["103", "103.0", "104.5", 105, 103.2])
    def test_high_fever_is_high(self, temperature):
        result = classify_urgency([], {"fever_temp": temperature})
        assert result.level == "high"

    def test_below_high_fever_threshold(self):
        result = classify_urgency(["Fever"], {"fever_temp": "102.9"})
        assert result.level == "medium"

    @pytest.mark.parametrize("temperature", ["hot", "", ["103"], None])
    def test_unparseable_temperature_ignored(self, temperature):
        result = classify_urgency([], {"fever_temp": temperature})
        assert result.level == "low"

    def test_configured_temperature_field(self):
        fields = AnswerFields(temperature="temp_f")
        assert classify_urgency([], {"temp_f": "104"}, fields).level == "high"
        assert classify_urgency([], {"fever_temp": "104"}, fields).level == "low"

    @pytest.mark.parametrize("symptom", ["Fever", "persistent headache", "Severe fatigue"])
    def test_medium_symptoms(self, symptom):
        result = classify_urgency([symptom], {})
        assert result.level == "medium"
        assert result.message == MEDIUM_MESSAGE

    def test_headache_alone_is_low(self):
        """Plain "Headache" is not "Persistent headache"."""
        result = classify_urgency(["Headache"], {"severity": "Severe - Significantly impacts daily activities"})
        assert result.level == "low"
        assert result.message == LOW_MESSAGE

    def test_no_symptoms_is_low(self):
        assert classify_urgency([], None).level == "low"
