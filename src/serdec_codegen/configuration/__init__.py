"""Configuration domain exports."""

from .generator_settings import (
    DEFAULT_GENERATOR_SETTINGS,
    SETTINGS_PATH_ENV_VAR,
    GeneratorSettings,
)
from .loader import ConfigurationError, load_generator_settings

__all__ = [
    "DEFAULT_GENERATOR_SETTINGS",
    "SETTINGS_PATH_ENV_VAR",
    "GeneratorSettings",
    "ConfigurationError",
    "load_generator_settings",
]
