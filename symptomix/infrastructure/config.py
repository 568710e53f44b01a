import os
import logging

from symptomix.domain.models import AnswerFields


logger = logging.getLogger(__name__)


def get_setting(name: str, default: str | None = None) -> str | None:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


class Settings:
    @property
    def data_dir(self) -> str:
        return get_setting("SYMPTOMIX_DATA_DIR", "data") or "data"

    @property
    def log_level(self) -> str:
        return (get_setting("LOG_LEVEL", "INFO") or "INFO").upper()

    @property
    def answer_fields(self) -> AnswerFields:
        defaults = AnswerFields()
        return AnswerFields(
            symptoms=get_setting("SYMPTOMIX_SYMPTOMS_FIELD", defaults.symptoms),
            duration=get_setting("SYMPTOMIX_DURATION_FIELD", defaults.duration),
            severity=get_setting("SYMPTOMIX_SEVERITY_FIELD", defaults.severity),
            temperature=get_setting("SYMPTOMIX_TEMPERATURE_FIELD", defaults.temperature),
        )
