# File: library_membership/core/errors.py

"""
Domain errors raised by the service layer.

Route handlers translate these into HTTP responses; services never
build ``HTTPException`` themselves.
"""


class ServiceError(Exception):
    """Base class for every recoverable, request-scoped failure."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    pass


class AuthenticationError(ServiceError):
    pass


class AuthorizationError(ServiceError):
    pass


class ValidationError(ServiceError):
    pass


class ConflictError(ServiceError):
    pass
