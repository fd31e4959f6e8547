"""
Domain exceptions for the Instafeed API.

Every error carries the HTTP status code the boundary should answer with,
so the exception handler in ``instafeed.main`` renders them without
re-classifying.  None of these are transient; nothing retries them.
"""


class InstafeedError(Exception):
    """Base exception for all business-rule violations."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


# Data state
class DataNotFoundError(InstafeedError):
    """Referenced row is absent or logically deleted."""

    status_code = 404

    def __init__(self, message: str = "Id does not exist"):
        super().__init__(message)


class DataAlreadyDeletedError(InstafeedError):
    """Delete requested on a row that is already soft-deleted."""

    status_code = 409

    def __init__(self, message: str = "The requested data has already been deleted"):
        super().__init__(message)


class DataConflictError(InstafeedError):
    """A unique constraint would be violated."""

    status_code = 409


# Invalid input
class InvalidEmailError(InstafeedError):
    status_code = 400


class InvalidFollowRequestError(InstafeedError):
    status_code = 400


class InvalidPasswordError(InstafeedError):
    status_code = 401

    def __init__(self, message: str = "Password does not match"):
        super().__init__(message)
