"""
Shared error handling package.

Bridges FastAPI exception handling to the configured responder so that
failures are consistently translated into API responses.
"""
