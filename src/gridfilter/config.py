"""
Configuration management for gridfilter.

Configuration is loaded from:
1. Environment variables (highest priority), e.g.
   GRIDFILTER_FILTER__MATCH_STRATEGY=tokens
2. YAML file: gridfilter.yaml, config/gridfilter.yaml or ~/.gridfilter/config.yaml
3. Default values (lowest priority)
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gridfilter.core.types import FilterOptions, MatchStrategy
from gridfilter.exceptions import ConfigurationError


class FilterSettings(BaseSettings):
    """Filter engine configuration."""

    model_config = SettingsConfigDict(env_prefix="GRIDFILTER_FILTER__", extra="ignore")

    # How multi-word keywords match when no operator applies
    match_strategy: Literal["default", "fuzzy", "tokens"] = "default"
    # Reuse column formatter output within a filter pass
    cache_formatted: bool = True

    @field_validator("match_strategy", mode="before")
    @classmethod
    def normalise_strategy(cls, value):
        if value is None or value == "":
            return "default"
        return str(value).lower()

    def to_options(self) -> FilterOptions:
        strategy = MatchStrategy(self.match_strategy)
        return FilterOptions(filter_match_strategy=None if strategy is MatchStrategy.DEFAULT else strategy)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="GRIDFILTER_LOGGING__", extra="ignore")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["text", "json"] = "text"
    file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalise_level(cls, value):
        return str(value).upper()


class Settings(BaseSettings):
    """Main settings class that combines all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="GRIDFILTER_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    filter: FilterSettings = Field(default_factory=FilterSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # YAML values arrive as init kwargs; environment variables override them
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def load_yaml_config(path: Path | None = None) -> dict:
    """Load configuration from YAML file."""
    if path is None:
        # Look for gridfilter.yaml in standard locations
        candidates = [
            Path("gridfilter.yaml"),
            Path("config/gridfilter.yaml"),
            Path.home() / ".gridfilter" / "config.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                path = candidate
                break

    if path and path.exists():
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}", config_path=str(path)) from e
        if not isinstance(data, dict):
            raise ConfigurationError("Top-level YAML value must be a mapping", config_path=str(path))
        return data

    return {}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    yaml_config = load_yaml_config()
    return Settings(**yaml_config)


def reload_settings() -> Settings:
    """Force reload of settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
