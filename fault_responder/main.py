"""
Application entry point.

Creates the FastAPI application and wires together:
- Logging configuration
- The responder selected in settings
- Error handlers (exception-to-response translation)
- Routers

No business logic belongs here.
"""

from typing import Optional

from fastapi import FastAPI

from fault_responder.core.config import Settings, settings as default_settings
from fault_responder.infrastructure.responders import build_responder
from fault_responder.interfaces.health import router as health_router
from fault_responder.shared.errors.handlers import register_error_handlers
from fault_responder.shared.logging import configure_logging


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        settings: Settings to build from; defaults to the environment.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Responder ---
    responder = build_responder(settings.responder, settings.responder_config())
    app.state.responder = responder

    # --- Error Handlers ---
    register_error_handlers(app, responder)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")

    return app


app = create_app()
