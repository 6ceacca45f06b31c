"""
Configuration Management.

Loads settings from config/settings/*.yaml, found relative to the
.project_root marker file. Note storage itself takes no configuration;
these files drive logging setup.

Settings (YAML):
    application.yaml   - App identity, stamped onto every log record
    logging.yaml       - Level, renderer and handlers
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from notestore.core.config_schema import ApplicationSchema, LoggingSchema


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration.

    Sections not passed in are loaded from their YAML file and validated
    against the matching schema, so a bad value fails here rather than
    partway through logging setup.
    """

    def __init__(
        self,
        application: ApplicationSchema | None = None,
        logging: LoggingSchema | None = None,
    ) -> None:
        self._application = application or _load_validated(ApplicationSchema, "application.yaml")
        self._logging = logging or _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application identity."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()
