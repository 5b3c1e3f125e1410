class SchedulingError(Exception):
    """Base class for every guard failure raised by the reminder engine."""

    pass


class ValidationError(SchedulingError):
    """Raised when a protocol or one of its steps is malformed."""

    def __init__(self, errors):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("Invalid protocol:\n" + "".join(f" • {e}\n" for e in self.errors))


class IneligibleSubjectError(SchedulingError):
    """Raised when a protocol is applied to a cow whose status disqualifies it (sick, retired, pregnant)."""

    pass


class DuplicateActiveProtocolError(SchedulingError):
    """Raised when a cow already has a pending protocol reminder due today or later."""

    pass


class FutureCompletionError(SchedulingError):
    """Raised when completing a reminder whose due date has not arrived yet."""

    pass


class NotFoundError(SchedulingError):
    """Raised when an unknown protocol, cow, or reminder id is referenced."""

    pass


class FileReadingError(Exception):
    """Raised when there is an error reading a file."""

    pass


class FileContentError(Exception):
    """Raised when the content of a file is not as expected."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    ValidationError: 400,
    IneligibleSubjectError: 409,
    DuplicateActiveProtocolError: 409,
    FutureCompletionError: 400,
    NotFoundError: 404,
    FileReadingError: 500,
    FileContentError: 400,
}


def http_status_for(exc: Exception) -> int:
    """Status code an API layer should answer with for `exc`, 500 if it is not one of ours."""
    for err_cls, status in CUSTOM_ERRORS.items():
        if isinstance(exc, err_cls):
            return status
    return 500
