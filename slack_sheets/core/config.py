"""
Configuration module for Slack Sheets.
All settings are loaded from environment variables (and .env).
"""
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Slack
    SLACK_TOKEN: str = Field(default="", description="Slack OAuth token (xoxb-... or xoxp-...)")
    SLACK_API_BASE_URL: str = Field(
        default="https://slack.com/api/",
        description="Slack Web API endpoint prefix"
    )

    # Spreadsheet
    WORKBOOK_PATH: Path = Field(
        default=Path("./slack.xlsx"),
        description="Workbook that exports are written to"
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_DIR: str = Field(default="./logs", description="Directory for log files")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is one the logging module knows."""
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v


def get_settings(**overrides) -> Settings:
    """
    Build settings from the environment.

    Args:
        **overrides: Values that take precedence over the environment
            (e.g. from CLI options); None values are ignored

    Returns:
        Settings instance to pass to the components that need it
    """
    return Settings(**{key: value for key, value in overrides.items() if value is not None})
