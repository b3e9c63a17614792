"""
Pydantic models for error response bodies.

Both models are immutable and serialize with camelCase keys.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from fault_responder.domain.failures.entities import ErrorType

_CAMEL_CASE = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    use_enum_values=True,
)


class ErrorResponse(BaseModel):
    """Simple error body: ``{"code", "message", "errorType"}``."""

    model_config = _CAMEL_CASE

    code: str
    message: str
    error_type: ErrorType = ErrorType.FATAL


class EnvelopeHeader(BaseModel):
    """Enveloped error body combining API metadata with the fault."""

    model_config = _CAMEL_CASE

    status_code: int
    response_date: str
    api_version: int
    fault_code: int
    fault_message: str
