"""Error kinds raised by the session services and mapped to HTTP responses in ``main``."""


class AppError(Exception):
    status_code = 500
    error_name = "InternalServerError"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInput(AppError):
    status_code = 400
    error_name = "BadRequest"


class NotFound(AppError):
    status_code = 404
    error_name = "NotFound"


class StorageFailure(AppError):
    """Persistence error inside a unit of work. The transaction has been rolled back."""


class RetrievalInconsistency(AppError):
    """A committed write could not be read back."""
