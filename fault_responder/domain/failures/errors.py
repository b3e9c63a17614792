"""
Domain-specific errors for the failures bounded context.

Pipeline stages raise these to tell the caller which category a failure
belongs to. They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from typing import Optional

from fault_responder.domain.failures.entities import ErrorCategory


class FailureError(Exception):
    """Base error for all categorised pipeline failures."""

    category = ErrorCategory.IRRECOVERABLE

    def __init__(self, message: str = "", error_code: Optional[str] = None) -> None:
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class RecoverableError(FailureError):
    """Raised when a retryable operation has exhausted its retries."""

    category = ErrorCategory.RECOVERABLE

    def __init__(
        self,
        message: str = "",
        attempts: int = 0,
        error_code: Optional[str] = None,
    ) -> None:
        super().__init__(message, error_code)
        self.attempts = attempts


class IrrecoverableError(FailureError):
    """Raised when a failure cannot be fixed by retrying."""

    category = ErrorCategory.IRRECOVERABLE


class RequestValidationFailedError(FailureError):
    """Raised when an incoming request is invalid."""

    category = ErrorCategory.VALIDATION


class AuthorizationFailedError(FailureError):
    """Raised when the caller is not allowed to make the request."""

    category = ErrorCategory.AUTHORIZATION


class TransformationError(FailureError):
    """Raised when a message cannot be transformed between formats."""

    category = ErrorCategory.TRANSFORMATION
