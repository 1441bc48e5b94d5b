"""Application layer: configuration loading and the design configuration store."""

from everwood.application.config import (
    ConfigError,
    EverwoodConfiguration,
    load_config,
    load_config_from_dict,
)
from everwood.application.store import DesignConfigurationStore

__all__ = [
    "ConfigError",
    "DesignConfigurationStore",
    "EverwoodConfiguration",
    "load_config",
    "load_config_from_dict",
]
