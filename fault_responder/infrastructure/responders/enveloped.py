"""
Enveloped JSON responder.

Writes an EnvelopeHeader carrying the status, a freshly formatted
response date, the API version and the fault. The fault code always
mirrors the status code and the fault message is passed through as-is.

No Content-Type header is set: the body is a structured object and the
caller serializes it with its own default content type.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from fault_responder.domain.failures.dates import format_date, validate_pattern
from fault_responder.domain.failures.entities import (
    DEFAULT_DATE_FORMAT,
    ErrorCategory,
    FailureContext,
    ResponderConfig,
)
from fault_responder.domain.failures.policy import extract_message
from fault_responder.infrastructure.responders.base import Responder
from fault_responder.infrastructure.responders.models import EnvelopeHeader

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now().astimezone()


class EnvelopedResponder(Responder):
    """Writes an EnvelopeHeader body.

    Args:
        config: Responder configuration.
        clock: Returns the current time; called once per handled failure.

    Raises:
        ValueError: If the configured date format is not a valid pattern
            at construction time. A pattern broken later falls back to the
            default format.
    """

    name = "envelope"

    def __init__(
        self,
        config: Optional[ResponderConfig] = None,
        clock: Callable[[], datetime] = _now,
    ) -> None:
        super().__init__(config)
        validate_pattern(self.config.date_format)
        self.clock = clock

    def resolve_message(
        self, context: FailureContext, category: ErrorCategory
    ) -> str:
        return extract_message(context.exception)

    def write(
        self,
        context: FailureContext,
        category: ErrorCategory,
        status_code: int,
        message: str,
    ) -> None:
        moment = self.clock()
        # date_format may have been replaced after wiring.
        try:
            response_date = format_date(moment, self.config.date_format)
        except ValueError as exc:
            logger.error("Invalid response date format: %s", exc)
            response_date = format_date(moment, DEFAULT_DATE_FORMAT)

        context.response.body = EnvelopeHeader(
            status_code=status_code,
            response_date=response_date,
            api_version=self.config.api_version,
            fault_code=status_code,
            fault_message=message,
        )
