"""
Parity - Structural Equality Engine

Application settings, overridable through environment variables or .env.
"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application Info
    APP_NAME: str = "Parity"
    APP_VERSION: str = "1.2.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"

    # Comparison
    # Deepest container nesting deep_equal() will descend into before
    # raising ComparisonDepthExceeded. Keep well below sys.getrecursionlimit().
    MAX_DEPTH: int = Field(default=500, ge=1)
    # Fail key/value comparison as soon as a key of the left container is
    # missing from the right one. False compares b.get(key) instead, so
    # {"a": None} equals {} when both have the same size.
    STRICT_MAP_KEYS: bool = True

    # Capability markers are named "is" + MARKER_PREFIX + kind name.
    # Every copy of a container module must agree on this value.
    MARKER_PREFIX: str = "Parity"

    # API
    API_PREFIX: str = "/api"
    # Comma-separated list of allowed origins, or "*" for all
    CORS_ORIGINS: str = "*"
    # Maximum request body size in bytes (1MB default). Bounds the cost
    # of a single comparison request.
    MAX_REQUEST_SIZE: int = 1024 * 1024

    @field_validator("MARKER_PREFIX")
    @classmethod
    def _check_marker_prefix(cls, value: str) -> str:
        if not value or not value.isidentifier():
            raise ValueError("MARKER_PREFIX must be usable inside an attribute name")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
