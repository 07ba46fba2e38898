"""Configuration for marklint."""

from .loader import CONFIG_ENV_VAR, CONFIG_FILE, ConfigLoader, load_config
from .models import LintConfig, LoggingConfig, ParserSettings

__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILE",
    "ConfigLoader",
    "LintConfig",
    "LoggingConfig",
    "ParserSettings",
    "load_config",
]
