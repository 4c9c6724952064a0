"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ensembl_service.adapters import adapters_validate_http_url


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the service host and the Ensembl REST call.

    Environment variable names map directly to field names in uppercase.
    Example: `ensembl_rest_base_url` reads from `ENSEMBL_REST_BASE_URL`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        ensembl_rest_base_url: Root URL of the Ensembl Genomes REST API.
        ensembl_request_timeout_seconds: HTTP request timeout for the sequence lookup.
        ensembl_user_agent: User-Agent header sent to the REST API.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    ensembl_rest_base_url: str = Field(default="http://rest.ensemblgenomes.org/")
    ensembl_request_timeout_seconds: float = Field(default=30.0, gt=0)
    ensembl_user_agent: str = Field(default="ensembl-service/1.0 (Python/httpx)")
    log_level: str = Field(default="INFO")

    @field_validator("ensembl_rest_base_url", "ensembl_user_agent")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("ensembl_rest_base_url")
    @classmethod
    def _validate_http_url(cls, value: str) -> str:
        return adapters_validate_http_url(value)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError("log_level must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG")
        return normalized_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
