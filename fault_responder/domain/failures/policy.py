"""
Status-code and message resolution policy shared by every responder.

All functions here are pure: they read the failure context and the
responder configuration and return values. Nothing is stored.
"""

from typing import Optional

from fault_responder.domain.failures.entities import (
    ErrorCategory,
    FailureContext,
    ResponderConfig,
)

HTTP_400 = 400
HTTP_401 = 401
HTTP_500 = 500

STATUS_CODES: dict[ErrorCategory, int] = {
    ErrorCategory.RECOVERABLE: HTTP_500,
    ErrorCategory.IRRECOVERABLE: HTTP_500,
    ErrorCategory.TRANSFORMATION: HTTP_500,
    ErrorCategory.VALIDATION: HTTP_400,
    ErrorCategory.AUTHORIZATION: HTTP_401,
}

LOG_TEMPLATES: dict[ErrorCategory, str] = {
    ErrorCategory.RECOVERABLE: (
        "Recoverable failure exhausted its retries in stage %s: %s"
    ),
    ErrorCategory.IRRECOVERABLE: "Irrecoverable failure in stage %s: %s",
    ErrorCategory.TRANSFORMATION: "Transformation failed in stage %s: %s",
    ErrorCategory.VALIDATION: "Validation failed in stage %s: %s",
    ErrorCategory.AUTHORIZATION: "Authorization failed in stage %s: %s",
}

UNKNOWN_STAGE = "<unknown>"


def status_for(category: ErrorCategory) -> int:
    """Return the HTTP status code for a failure category."""
    return STATUS_CODES[category]


def extract_message(cause: Optional[BaseException]) -> str:
    """Return the message text of a cause, or an empty string.

    Exceptions carrying a ``message`` string attribute report it,
    otherwise the string form of the exception is used.
    """
    if cause is None:
        return ""
    message = getattr(cause, "message", None)
    if isinstance(message, str):
        return message
    return str(cause)


def default_message(category: ErrorCategory, config: ResponderConfig) -> str:
    """Return the configured fallback message for a category."""
    return config.category_messages.get(category) or config.default_error_message


def resolve_message(
    context: FailureContext, category: ErrorCategory, config: ResponderConfig
) -> str:
    """Return the cause's message, or the configured default when empty."""
    return extract_message(context.exception) or default_message(category, config)


def resolve_code(context: FailureContext, config: ResponderConfig) -> str:
    """Return the caller-supplied error code, or the configured default."""
    if context.error_code is not None:
        return context.error_code
    return config.default_error_code
