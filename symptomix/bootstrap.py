"""Wires settings, storage and use cases together for the HTTP layer."""
import logging
from typing import NamedTuple, Optional

from symptomix.application.use_cases import SymptomAssessmentUseCase, UserProfileUseCase
from symptomix.domain.rules import RuleCatalog, default_catalog
from symptomix.infrastructure.config import Settings
from symptomix.infrastructure.storage.json_store import JsonRecordStore


logger = logging.getLogger(__name__)


class Services(NamedTuple):
    assessments: SymptomAssessmentUseCase
    users: UserProfileUseCase
    store: JsonRecordStore


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level)


def build_services(settings: Optional[Settings] = None, catalog: Optional[RuleCatalog] = None) -> Services:
    settings = settings or Settings()
    configure_logging(settings)
    catalog = catalog or default_catalog()
    store = JsonRecordStore(settings.data_dir)
    logger.info("Using data directory %s with %d rules", store.data_dir, len(catalog))
    return Services(
        assessments=SymptomAssessmentUseCase(store, catalog, settings.answer_fields),
        users=UserProfileUseCase(store),
        store=store,
    )
