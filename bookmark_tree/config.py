"""
BookmarkTree - Configuration Module

Loads settings from environment variables (and an optional .env file) and
provides typed access. Command-line options override these values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class InputSettings(BaseSettings):
    """Bookmarks file configuration"""
    bookmarks_file: str = Field(default="bookmarks.html", alias="BOOKMARKS_FILE")
    encoding: str = Field(default="utf-8", alias="FILE_ENCODING")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class OutputSettings(BaseSettings):
    """JSON output and tree assembly configuration"""
    json_indent: Optional[int] = Field(default=None, ge=0, alias="JSON_INDENT")
    strict_titles: bool = Field(default=False, alias="STRICT_TITLES")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class AppSettings(BaseSettings):
    """General application settings"""
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        alias="LOG_FORMAT",
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class Config:
    """Main configuration class that combines all settings"""

    def __init__(self):
        self.input = InputSettings()
        self.output = OutputSettings()
        self.app = AppSettings()


_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance, loading it on first use"""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it"""
    global _config
    _config = None
