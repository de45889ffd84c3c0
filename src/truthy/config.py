"""
Truthy configuration.

Selects which adapters take part in value dispatch, and the library log
level. Loadable from YAML or the environment.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union
import logging
import os

import yaml

logger = logging.getLogger(__name__)

DEFAULT_ADAPTERS = ["bool", "optional-bool", "as-str", "str"]

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class TruthyConfig:
    """Configuration for truthy value dispatch."""

    adapters: List[str] = field(default_factory=lambda: list(DEFAULT_ADAPTERS))
    log_level: str = "WARNING"
    validate: bool = True  # Set to False to skip validation (for testing)

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.adapters, str):
            self.adapters = [self.adapters]
        if not isinstance(self.adapters, (list, tuple)):
            raise ValueError(
                f"adapters must be a list of adapter names, "
                f"got {type(self.adapters).__name__}"
            )
        for name in self.adapters:
            # YAML reads unquoted yes/no/on/off as booleans
            if not isinstance(name, str):
                raise ValueError(
                    f"Adapter names must be strings, got {type(name).__name__}: {name!r}"
                )
        if not isinstance(self.log_level, str):
            raise ValueError(
                f"log_level must be a string, got {type(self.log_level).__name__}"
            )

        self.adapters = [name.strip().lower() for name in self.adapters]
        self.log_level = self.log_level.upper()

        if not self.validate:
            return

        # Import here to avoid circular dependency
        from .adapters import AdapterRegistry

        unknown = [
            name for name in self.adapters if not AdapterRegistry.is_registered(name)
        ]
        if unknown:
            available = AdapterRegistry.list_adapters()
            raise ValueError(
                f"Unknown adapters: {unknown}. "
                f"Registered adapters: {available}"
            )

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {VALID_LOG_LEVELS}"
            )

    @classmethod
    def from_env(cls) -> "TruthyConfig":
        """
        Create configuration with environment variable overrides.

        ``TRUTHY_ADAPTERS`` is a comma-separated list of adapter names;
        ``TRUTHY_LOG_LEVEL`` a logging level name.
        """
        kwargs = {}

        adapters = os.environ.get("TRUTHY_ADAPTERS")
        if adapters is not None:
            kwargs["adapters"] = [name for name in adapters.split(",") if name.strip()]

        log_level = os.environ.get("TRUTHY_LOG_LEVEL")
        if log_level:
            kwargs["log_level"] = log_level

        return cls(**kwargs)


def load_config(config_path: Union[str, Path]) -> TruthyConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        TruthyConfig instance
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    config = TruthyConfig(
        adapters=data.get("adapters", list(DEFAULT_ADAPTERS)),
        log_level=data.get("log_level", "WARNING"),
    )
    logger.info(f"Loaded truthy config from {path}: adapters={config.adapters}")
    return config


_config: Optional[TruthyConfig] = None


def get_config() -> TruthyConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = TruthyConfig.from_env()
    return _config


def set_config(config: TruthyConfig):
    """Set the global configuration instance."""
    global _config
    _config = config


def reset_config():
    """Reset to default configuration."""
    global _config
    _config = None
