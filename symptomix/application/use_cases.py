import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from symptomix.application.errors import (
    AssessmentValidationError,
    PersistenceWriteError,
    ProfileValidationError,
    UserNotFoundError,
)
from symptomix.application.ports import RecordStorePort
from symptomix.application.schemas import AssessmentRequest, AssessmentResult
from symptomix.domain.diagnosis import DiagnosisSelector
from symptomix.domain.models import AnswerFields, Assessment, UserProfile
from symptomix.domain.recommendations import build_recommendations
from symptomix.domain.rules import RuleCatalog
from symptomix.domain.scoring import DEFAULT_FIELDS, extract_symptoms
from symptomix.domain.urgency import classify_urgency
from symptomix.domain.validators import validate_age, validate_email, validate_name, validate_phone


logger = logging.getLogger(__name__)


ASSESSMENTS = "assessments"
USERS = "users"


class SymptomAssessmentUseCase:
    def __init__(
        self,
        store: RecordStorePort,
        catalog: RuleCatalog,
        fields: AnswerFields = DEFAULT_FIELDS,
    ):
        self.store = store
        self.fields = fields
        self.selector = DiagnosisSelector(catalog, fields)

    def assess(self, request: AssessmentRequest) -> AssessmentResult:
        if request is None or request.answers is None:
            raise AssessmentValidationError("Assessment data is required.")

        answers = request.answers
        symptoms = extract_symptoms(answers, self.fields)

        primary = self.selector.select_primary(symptoms, answers)
        alternatives = self.selector.rank_alternatives(symptoms, answers, primary.condition)
        urgency = classify_urgency(symptoms, answers, self.fields)
        recommendations = build_recommendations(urgency.level, symptoms)

        created_at = datetime.now(timezone.utc)
        record = Assessment(
            user_id=request.user_id,
            symptoms=symptoms,
            diagnosis=primary.condition,
            confidence=primary.confidence,
            urgency=urgency.level,
            date=created_at,
            answers=answers,
        )
        try:
            assessment_id = self.store.add(ASSESSMENTS, record)
        except PersistenceWriteError as e:
            # The caller still gets the computed result; it just won't show up in history.
            assessment_id = str(uuid.uuid4())
            logger.error(
                "Assessment %s for user %s was not saved: %s", assessment_id, request.user_id, e
            )

        logger.info(
            "Assessment %s: %s (%.2f), urgency %s",
            assessment_id, primary.condition, primary.confidence, urgency.level,
        )
        return AssessmentResult(
            id=assessment_id,
            user_id=request.user_id,
            primary_diagnosis=primary.condition,
            description=primary.description,
            confidence=primary.confidence,
            urgency=urgency.level,
            urgency_message=urgency.message,
            alternative_diagnoses=alternatives,
            recommendations=recommendations,
            created_at=created_at,
            user_answers=answers,
        )

    def get_assessment(self, assessment_id: str) -> Optional[AssessmentResult]:
        """Stored assessment in result form. Only the persisted fields are filled in."""
        assessment = self.store.get_by_id(ASSESSMENTS, assessment_id, Assessment)
        if assessment is None:
            return None
        # Stored records may hold values the pipeline never produces.
        return AssessmentResult.model_construct(
            id=assessment.id,
            user_id=assessment.user_id,
            primary_diagnosis=assessment.diagnosis,
            confidence=assessment.confidence,
            urgency=assessment.urgency,
            created_at=assessment.date,
            user_answers=assessment.answers,
        )

    def get_user_history(self, user_id: str) -> List[Assessment]:
        history = [a for a in self.store.load_all(ASSESSMENTS, Assessment) if a.user_id == user_id]
        history.sort(key=lambda a: a.date, reverse=True)
        return history


class UserProfileUseCase:
    def __init__(self, store: RecordStorePort):
        self.store = store

    def _validated(self, profile: UserProfile) -> UserProfile:
        is_valid, error = validate_name(profile.name)
        if not is_valid:
            raise ProfileValidationError(error)
        if profile.email is not None:
            is_valid, error = validate_email(profile.email)
            if not is_valid:
                raise ProfileValidationError(error)
            profile = profile.model_copy(update={"email": profile.email.lower()})
        if profile.phone:
            is_valid, error = validate_phone(profile.phone)
            if not is_valid:
                raise ProfileValidationError(error)
        is_valid, error = validate_age(profile.age)
        if not is_valid:
            raise ProfileValidationError(error)
        return profile

    def create_user(self, profile: UserProfile) -> UserProfile:
        profile = self._validated(profile)
        user_id = self.store.add(USERS, profile)
        logger.info("Created user %s", user_id)
        return self.store.get_by_id(USERS, user_id, UserProfile) or profile.with_id(user_id)

    def get_user(self, user_id: str) -> Optional[UserProfile]:
        return self.store.get_by_id(USERS, user_id, UserProfile)

    def get_user_by_email(self, email: str) -> Optional[UserProfile]:
        email = email.strip().lower()
        for user in self.store.load_all(USERS, UserProfile):
            if user.email is not None and user.email.lower() == email:
                return user
        return None

    def update_user(self, user_id: str, profile: UserProfile) -> UserProfile:
        existing = self.store.get_by_id(USERS, user_id, UserProfile)
        if existing is None:
            raise UserNotFoundError(f"User with ID {user_id} not found.")
        profile = self._validated(profile).model_copy(update={"created_at": existing.created_at})
        if not self.store.update(USERS, user_id, profile):
            raise UserNotFoundError(f"User with ID {user_id} not found.")
        return self.store.get_by_id(USERS, user_id, UserProfile) or profile.with_id(user_id)

    def delete_user(self, user_id: str) -> bool:
        deleted = self.store.delete(USERS, user_id, UserProfile)
        if deleted:
            logger.info("Deleted user %s", user_id)
        return deleted
