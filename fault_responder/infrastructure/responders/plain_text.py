"""
Plain-text responder.

The body is the bare failure message; no error code is surfaced.
"""

from fault_responder.domain.failures.entities import ErrorCategory, FailureContext
from fault_responder.infrastructure.responders.base import CONTENT_TYPE, Responder

TEXT_PLAIN = "text/plain"


class PlainTextResponder(Responder):
    """Writes the resolved message as a ``text/plain`` body."""

    name = "text"

    def write(
        self,
        context: FailureContext,
        category: ErrorCategory,
        status_code: int,
        message: str,
    ) -> None:
        context.response.headers[CONTENT_TYPE] = TEXT_PLAIN
        context.response.body = message
