"""Schedule session configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class ScheduleConfig(BaseSettings):
    """Configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # Rendering
    use_device_time_zone: bool = Field(
        default=False,
        description="Format start times in the device zone instead of the session offset",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: ScheduleConfig | None = None


def get_config() -> ScheduleConfig:
    """Get the schedule configuration singleton.

    Returns:
        ScheduleConfig: Schedule configuration instance
    """
    global _config
    if _config is None:
        _config = ScheduleConfig()
    return _config


def reset_config() -> None:
    """Drop the cached singleton so the next get_config() re-reads the environment."""
    global _config
    _config = None
