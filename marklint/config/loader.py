"""Configuration loading from the project directory.

Precedence (highest to lowest):
1. Explicit overrides passed to load()
2. The file named by the MARKLINT_CONFIG environment variable
3. .marklintrc.json in the project directory
4. Defaults
"""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..exceptions import ConfigurationError
from ..lint_logging import get_logger
from .models import LintConfig

logger = get_logger("config")

CONFIG_FILE = ".marklintrc.json"
CONFIG_ENV_VAR = "MARKLINT_CONFIG"


class ConfigLoader:
    """Loads LintConfig for a project."""

    def __init__(self, project_path: Path | None = None):
        """Initialize the configuration loader.

        Args:
            project_path: Path to the project root. Defaults to current directory.
        """
        self.project_path = Path(project_path) if project_path else Path.cwd()

    @property
    def config_path(self) -> Path:
        """Path of the configuration file that load() reads."""
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path)
        return self.project_path / CONFIG_FILE

    def load(self, **overrides: Any) -> LintConfig:
        """Load configuration from file and overrides.

        Returns:
            LintConfig with file values and overrides merged

        Raises:
            ConfigurationError: If the file is not valid JSON or does not
                match the configuration schema
        """
        data: dict[str, Any] = {}
        path = self.config_path

        if path.exists():
            data = self._read(path)
            logger.info(f"Loaded lint config from {path}")
        else:
            logger.debug(f"No lint config at {path}")

        for key, value in overrides.items():
            if key == "rules" and isinstance(value, dict):
                data["rules"] = {**data.get("rules", {}), **value}
            else:
                data[key] = value

        try:
            return LintConfig(**data)
        except ValidationError as e:
            logger.error(f"Invalid lint config: {e}")
            raise ConfigurationError(f"Invalid lint config: {e}") from None

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in lint config: {e}")
            raise ConfigurationError(f"Invalid lint config {path}: {e}") from None

        if not isinstance(data, dict):
            raise ConfigurationError(f"Invalid lint config {path}: expected an object")
        return data


def load_config(project_path: Path | None = None, **overrides: Any) -> LintConfig:
    """Load configuration for a project."""
    return ConfigLoader(project_path).load(**overrides)


__all__ = ["CONFIG_ENV_VAR", "CONFIG_FILE", "ConfigLoader", "load_config"]
