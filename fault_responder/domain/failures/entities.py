"""
Domain entities for the failures bounded context.

The failure context is the mutable per-request carrier handed to a
responder; the responder writes the final error response into its
response slot. No framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

DEFAULT_ERROR_CODE = "E0000"
DEFAULT_ERROR_MESSAGE = "Internal Exception Occurred"
DEFAULT_API_VERSION = 1
DEFAULT_DATE_FORMAT = "yyyy-MM-dd'T'HH:mm:ss"


class ErrorCategory(Enum):
    """The closed set of failure kinds this layer handles."""

    RECOVERABLE = "recoverable"
    IRRECOVERABLE = "irrecoverable"
    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    TRANSFORMATION = "transformation"


class ErrorType(Enum):
    """Severity reported in a simple error response."""

    FATAL = "FATAL"
    WARNING = "WARNING"


@dataclass
class ResponseSlot:
    """The outgoing message: status code, headers and body."""

    status_code: Optional[int] = None
    headers: dict[str, Any] = field(default_factory=dict)
    body: Any = None

    @property
    def content_type(self) -> Optional[str]:
        """Return the Content-Type header, matched case-insensitively."""
        for name, value in self.headers.items():
            if name.lower() == "content-type":
                return value
        return None


@dataclass
class FailureContext:
    """A single failed in-flight request.

    Attributes:
        exception: The error that caused the failure.
        failure_stage: Identifier of the pipeline stage that failed, if known.
        error_code: Error code attached by the caller (e.g. a validator).
        response: The response slot rewritten by the responder.
    """

    exception: BaseException
    failure_stage: Optional[str] = None
    error_code: Optional[str] = None
    response: ResponseSlot = field(default_factory=ResponseSlot)


@dataclass
class ResponderConfig:
    """Responder configuration, set once at wiring time.

    Attributes:
        default_error_code: Code used when the context carries none.
        default_error_message: Message used when the cause has none.
        api_version: Version reported in enveloped responses.
        date_format: Pattern for the enveloped response date. Java-style
            (``yyyy-MM-dd``) or strftime-style (``%Y-%m-%d``).
        category_messages: Optional per-category default messages that
            take precedence over ``default_error_message``.
    """

    default_error_code: str = DEFAULT_ERROR_CODE
    default_error_message: str = DEFAULT_ERROR_MESSAGE
    api_version: int = DEFAULT_API_VERSION
    date_format: str = DEFAULT_DATE_FORMAT
    category_messages: dict[ErrorCategory, str] = field(default_factory=dict)
