"""
Common handling flow for all responders.

Resolves the status code and message, logs the failure once, resets the
outgoing headers and delegates body encoding to the concrete responder.
Per-call values stay local so one instance can serve concurrent requests.
"""

import logging
from abc import abstractmethod
from typing import Optional

from fault_responder.domain.failures.entities import (
    ErrorCategory,
    FailureContext,
    ResponderConfig,
)
from fault_responder.domain.failures.policy import (
    LOG_TEMPLATES,
    UNKNOWN_STAGE,
    resolve_message,
    status_for,
)
from fault_responder.domain.failures.ports import ExceptionHandler

logger = logging.getLogger(__name__)

CONTENT_TYPE = "Content-Type"


class Responder(ExceptionHandler):
    """Base class for the concrete response encodings."""

    name = ""

    def __init__(self, config: Optional[ResponderConfig] = None) -> None:
        self.config = config or ResponderConfig()

    def handle(self, context: FailureContext, category: ErrorCategory) -> None:
        status_code = status_for(category)
        message = self.resolve_message(context, category)
        stage = context.failure_stage or UNKNOWN_STAGE
        logger.error(
            LOG_TEMPLATES[category],
            stage,
            message,
            extra={"category": category.value, "failure_stage": stage},
        )

        response = context.response
        response.headers = {}
        response.status_code = status_code
        self.write(context, category, status_code, message)

    def resolve_message(
        self, context: FailureContext, category: ErrorCategory
    ) -> str:
        """Return the message reported for this failure."""
        return resolve_message(context, category, self.config)

    @abstractmethod
    def write(
        self,
        context: FailureContext,
        category: ErrorCategory,
        status_code: int,
        message: str,
    ) -> None:
        """Write the encoded body (and content type) into the response slot."""
        raise NotImplementedError
