"""
Configuration management for tabtimetrack.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tabtimetrack.calculators.time_utils import RateParseError, parse_rate


class TabTimeTrackConfig(BaseSettings):
    """Configuration settings for tabtimetrack."""

    # Application Configuration
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    # Report Configuration
    default_rate: Optional[str] = Field(default=None, alias="DEFAULT_RATE")
    output_format: str = Field(default="table", alias="OUTPUT_FORMAT")
    description_limit: int = Field(default=50, alias="DESCRIPTION_LIMIT")

    # Parsing Configuration
    max_line_hours: int = Field(default=10, gt=0, alias="MAX_LINE_HOURS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v):
        """Ensure output format is one the report writer supports."""
        valid_formats = ["table", "tsv", "csv"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Output format must be one of: {valid_formats}")
        return v.lower()

    @field_validator("default_rate")
    @classmethod
    def validate_default_rate(cls, v):
        """Reject malformed rates at load time instead of at report time."""
        if v is None or v == "":
            return None
        try:
            parse_rate(v)
        except RateParseError as e:
            raise ValueError(str(e)) from e
        return v


def load_config(env_file: Optional[str] = None) -> TabTimeTrackConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return TabTimeTrackConfig()


# Global configuration instance
_config: Optional[TabTimeTrackConfig] = None


def get_config() -> TabTimeTrackConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> TabTimeTrackConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
