from typing import Optional


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(
        self, message: str, status_code: int = 500, headers: Optional[dict[str, str]] = None
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.headers = headers
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class AuthenticationError(CustomBaseError):
    """401; ``headers`` lets the gate clear a stale session cookie on the error response"""

    def __init__(
        self, message: str = 'Unauthorized', headers: Optional[dict[str, str]] = None
    ) -> None:
        super().__init__(message, 401, headers)


class IntegrityViolationError(CustomBaseError):
    """Raised when the store rejects a write that the core should have prevented."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)
