"""
Logging configuration for the application.

Sets up structured logging with a consistent format. Failure records
carry the failure category and the failing pipeline stage as extra
fields; records without them show ``-`` in those columns.
Never logs request bodies or headers.
"""

import logging
import sys

LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(category)s | %(failure_stage)s | %(message)s"
)
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

FAILURE_FIELDS = ("category", "failure_stage")


class FailureFieldsFilter(logging.Filter):
    """Fill in the failure fields on records that do not set them."""

    def filter(self, record: logging.LogRecord) -> bool:
        for name in FAILURE_FIELDS:
            if not hasattr(record, name):
                setattr(record, name, "-")
        return True


def configure_logging(level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(FailureFieldsFilter())
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[handler],
        force=True,
    )
