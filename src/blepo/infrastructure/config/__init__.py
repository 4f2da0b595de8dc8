"""Configuration providers and models."""

from blepo.infrastructure.config.models import (
    AppConfig,
    FetchSettings,
    LoggingConfig,
    PlayerSettings,
)
from blepo.infrastructure.config.yaml_provider import YamlConfigurationProvider

__all__ = [
    "AppConfig",
    "FetchSettings",
    "LoggingConfig",
    "PlayerSettings",
    "YamlConfigurationProvider",
]
