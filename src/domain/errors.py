"""Failure taxonomy shared by the use cases and the HTTP layer."""


class DomainError(Exception):
    """Base class for failures raised by the use cases."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError, ValueError):
    """Malformed or missing input."""

    status_code = 400


class NotFoundError(DomainError, ValueError):
    """A referenced entity does not exist."""

    status_code = 404


class PermissionDeniedError(DomainError, PermissionError):
    """The acting user is not allowed to touch the entity."""

    status_code = 403


class InternalError(DomainError):
    """The store accepted the call but returned no result."""

    status_code = 500
