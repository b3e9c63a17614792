"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fault_responder.domain.failures.dates import validate_pattern
from fault_responder.domain.failures.entities import (
    DEFAULT_API_VERSION,
    DEFAULT_DATE_FORMAT,
    DEFAULT_ERROR_CODE,
    DEFAULT_ERROR_MESSAGE,
    ResponderConfig,
)


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current application version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        responder: Error encoding: ``text``, ``json`` or ``envelope``.
        default_error_code: Code reported when the caller attached none.
        default_error_message: Message reported when the cause has none.
        api_version: API version reported in enveloped responses.
        date_format: Pattern for the enveloped response date.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "fault-responder"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    responder: str = "json"
    default_error_code: str = DEFAULT_ERROR_CODE
    default_error_message: str = DEFAULT_ERROR_MESSAGE
    api_version: int = DEFAULT_API_VERSION
    date_format: str = DEFAULT_DATE_FORMAT

    @field_validator("date_format")
    @classmethod
    def _check_date_format(cls, value: str) -> str:
        return validate_pattern(value)

    def responder_config(self) -> ResponderConfig:
        """Return the responder configuration derived from these settings."""
        return ResponderConfig(
            default_error_code=self.default_error_code,
            default_error_message=self.default_error_message,
            api_version=self.api_version,
            date_format=self.date_format,
        )


settings = Settings()
