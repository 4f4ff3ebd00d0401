"""
Configuration management for the gomenasai incident notice service.

Process settings (listener, paths, logging, display timezone) come from the
environment and ``.env``. The incident itself is described by the HCL file
loaded in config_loader.
"""

import logging
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class AppConfig(BaseSettings):
    """Application configuration with environment variable support."""

    # Flask Configuration
    flask_debug: bool = Field(
        default=False,
        description="Enable Flask debug mode"
    )
    flask_host: str = Field(
        default="127.0.0.1",
        description="Flask server host"
    )
    flask_port: int = Field(
        default=8000,
        description="Flask server port"
    )
    testing: bool = Field(
        default=False,
        description="Enable testing mode"
    )

    # Security Configuration
    https_enabled: bool = Field(
        default=False,
        description="Enable HTTPS enforcement with Talisman (set when served behind TLS)"
    )

    # Incident notice Configuration
    incident_config_path: str = Field(
        default="setting.hcl",
        description="Path to the HCL incident configuration file"
    )
    templates_dir: str = Field(
        default="templates",
        description="Directory holding the notice template"
    )
    assets_dir: str = Field(
        default="assets",
        description="Directory served under /assets"
    )
    display_timezone: Optional[str] = Field(
        default=None,
        description="IANA timezone for dates shown on the notice (host local time when unset)"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_file: str = Field(
        default="logs/app.log",
        description="Log file path"
    )
    log_max_bytes: int = Field(
        default=10485760,  # 10MB
        description="Maximum log file size in bytes"
    )
    log_backup_count: int = Field(
        default=10,
        description="Number of backup log files to keep"
    )

    @field_validator('flask_debug', 'testing', 'https_enabled', mode='before')
    @classmethod
    def parse_bool(cls, v):
        """Parse boolean values from environment strings."""
        if isinstance(v, str):
            return v.lower() in ('true', '1', 'yes', 'on')
        return v

    @field_validator('log_level', mode='before')
    @classmethod
    def parse_log_level(cls, v):
        """Normalise and check the logging level name."""
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level

    @field_validator('display_timezone', mode='before')
    @classmethod
    def parse_timezone(cls, v):
        """Reject timezone names zoneinfo does not know."""
        if v in (None, ''):
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone {v!r}") from e
        return v

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra environment variables


# Global configuration instance
config = AppConfig()


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    return config
