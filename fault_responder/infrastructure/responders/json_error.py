"""
JSON error-object responder.

Writes ``{"code": ..., "message": ..., "errorType": "FATAL"}`` as a JSON
string. The code comes from the failure context when the caller attached
one, otherwise from configuration.
"""

import logging

from fault_responder.domain.failures.entities import (
    ErrorCategory,
    ErrorType,
    FailureContext,
)
from fault_responder.domain.failures.policy import resolve_code
from fault_responder.infrastructure.responders.base import CONTENT_TYPE, Responder
from fault_responder.infrastructure.responders.models import ErrorResponse

logger = logging.getLogger(__name__)

APPLICATION_JSON = "application/json"


def _to_json(payload: ErrorResponse) -> str:
    return payload.model_dump_json(by_alias=True)


class JsonErrorResponder(Responder):
    """Writes an ErrorResponse serialized as JSON."""

    name = "json"

    def write(
        self,
        context: FailureContext,
        category: ErrorCategory,
        status_code: int,
        message: str,
    ) -> None:
        payload = ErrorResponse(
            code=resolve_code(context, self.config),
            message=message,
            error_type=ErrorType.FATAL,
        )
        context.response.headers[CONTENT_TYPE] = APPLICATION_JSON
        context.response.body = None
        # A failure while formatting must not fail the pipeline a second time.
        try:
            context.response.body = _to_json(payload)
        except (TypeError, ValueError) as exc:
            logger.error("Error serializing error response: %s", exc)
