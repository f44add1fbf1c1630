"""Configuration management using environment variables."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Client settings loaded from ``RGL_``-prefixed environment variables."""

    # API
    api_base_url: str = Field(default="https://api.rgl.gg/v0/", description="RGL API root")
    request_timeout: float = Field(default=30.0, description="HTTP timeout in seconds")
    user_agent: str = Field(default="rgl-api-python", description="User-Agent header")

    # Rate Limiting
    rate_limit: int = Field(default=2, description="Requests admitted per rate_period")
    rate_period: float = Field(default=1.0, description="Refill period in seconds")
    rate_burst: int = Field(default=2, description="Maximum tokens held at once")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format (json or console)")
    log_dir: str = Field(default="logs", description="Directory for log files")
    log_to_file: bool = Field(default=False, description="Also write JSON logs to log_dir")

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Endpoint paths are appended, so the root must end with a slash."""
        return v if v.endswith("/") else v + "/"

    @field_validator("rate_limit", "rate_burst")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid option."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is a valid option."""
        if v not in {"json", "console"}:
            raise ValueError("log_format must be 'json' or 'console'")
        return v

    class Config:
        """Pydantic configuration."""

        env_prefix = "RGL_"
        case_sensitive = False
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Client settings.
    """
    return Settings()
