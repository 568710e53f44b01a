class SymptomixError(Exception):
    """Base class for errors raised to callers of the use cases."""


class AssessmentValidationError(SymptomixError):
    """The assessment request has no answer set."""


class ProfileValidationError(SymptomixError):
    pass


class UserNotFoundError(SymptomixError):
    pass


class PersistenceReadError(SymptomixError):
    """A collection could not be read or parsed.

    Stores log this and fall back to an empty collection; it is only raised
    inside the store itself.
    """


class PersistenceWriteError(SymptomixError):
    """A collection could not be durably saved."""
