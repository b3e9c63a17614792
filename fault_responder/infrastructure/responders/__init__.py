"""
Responder adapters implementing the ExceptionHandler port.

- ``text``: plain-text body
- ``json``: JSON error object
- ``envelope``: versioned header+fault envelope
"""

from typing import Optional

from fault_responder.domain.failures.entities import ResponderConfig
from fault_responder.infrastructure.responders.base import Responder
from fault_responder.infrastructure.responders.enveloped import EnvelopedResponder
from fault_responder.infrastructure.responders.json_error import JsonErrorResponder
from fault_responder.infrastructure.responders.plain_text import PlainTextResponder

RESPONDERS: dict[str, type[Responder]] = {
    PlainTextResponder.name: PlainTextResponder,
    JsonErrorResponder.name: JsonErrorResponder,
    EnvelopedResponder.name: EnvelopedResponder,
}


def build_responder(name: str, config: Optional[ResponderConfig] = None) -> Responder:
    """Create the responder registered under ``name``.

    Raises:
        ValueError: If no responder has that name.
    """
    try:
        responder_cls = RESPONDERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown responder '{name}'. Expected one of: {', '.join(RESPONDERS)}"
        ) from None
    return responder_cls(config)


__all__ = [
    "EnvelopedResponder",
    "JsonErrorResponder",
    "PlainTextResponder",
    "Responder",
    "RESPONDERS",
    "build_responder",
]
