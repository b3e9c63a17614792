"""
Centralized error handlers for FastAPI.

Classifies exceptions raised by routes, hands them to the configured
responder and converts the populated failure context into an HTTP
response. No stack traces or exception types are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.responses import Response

from fault_responder.domain.failures.entities import (
    ErrorCategory,
    FailureContext,
    ResponseSlot,
)
from fault_responder.domain.failures.errors import (
    FailureError,
    RequestValidationFailedError,
)
from fault_responder.domain.failures.policy import HTTP_500
from fault_responder.domain.failures.ports import ExceptionHandler

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_TYPE = "text/plain"


def classify(exc: BaseException) -> ErrorCategory:
    """Choose the failure category for an exception raised in a route."""
    if isinstance(exc, FailureError):
        return exc.category
    if isinstance(exc, RequestValidationError):
        return ErrorCategory.VALIDATION
    return ErrorCategory.IRRECOVERABLE


def _validation_failure(exc: RequestValidationError) -> RequestValidationFailedError:
    message = "; ".join(err.get("msg", "validation error") for err in exc.errors())
    return RequestValidationFailedError(message)


def build_failure_context(request: Request, exc: BaseException) -> FailureContext:
    """Build the failure context for a request that raised ``exc``.

    The request headers are copied into the response slot as the
    in-flight message; the responder is expected to reset them.
    """
    route = request.scope.get("route")
    stage = getattr(route, "path", None) or request.url.path
    cause = _validation_failure(exc) if isinstance(exc, RequestValidationError) else exc
    return FailureContext(
        exception=cause,
        failure_stage=stage,
        error_code=getattr(exc, "error_code", None),
        response=ResponseSlot(headers=dict(request.headers)),
    )


def to_response(context: FailureContext) -> Response:
    """Convert a handled failure context into a Starlette response.

    Structured bodies are rendered as JSON with camelCase keys; string
    bodies use the content type the responder set.
    """
    slot = context.response
    status_code = slot.status_code or HTTP_500
    headers = {
        name: str(value)
        for name, value in slot.headers.items()
        if name.lower() != "content-type"
    }
    if isinstance(slot.body, BaseModel):
        return JSONResponse(
            status_code=status_code,
            content=slot.body.model_dump(mode="json", by_alias=True),
            headers=headers,
        )
    return Response(
        content=slot.body or "",
        status_code=status_code,
        headers=headers,
        media_type=slot.content_type or DEFAULT_MEDIA_TYPE,
    )


def register_error_handlers(app: FastAPI, responder: ExceptionHandler) -> None:
    """Register failure handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        responder: The responder that formats every error response.
    """

    def respond(request: Request, exc: BaseException) -> Response:
        context = build_failure_context(request, exc)
        responder.handle(context, classify(exc))
        return to_response(context)

    @app.exception_handler(FailureError)
    async def handle_failure(request: Request, exc: FailureError) -> Response:
        """Handle categorised pipeline failures."""
        return respond(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> Response:
        """Handle request payloads rejected by FastAPI."""
        return respond(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors, reported as irrecoverable."""
        logger.debug("Unexpected %s treated as irrecoverable", type(exc).__name__)
        return respond(request, exc)
