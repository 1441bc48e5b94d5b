"""Application configuration: schema and loading.

Example:
    >>> from pathlib import Path
    >>> from everwood.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("everwood.json"))
    ...     print(config.share.origin)
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from everwood.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from everwood.application.config.schema import (
    SUPPORTED_VERSIONS,
    EverwoodConfiguration,
    LoggingConfig,
    ShareConfig,
)

__all__ = [
    "ConfigError",
    "EverwoodConfiguration",
    "LoggingConfig",
    "SUPPORTED_VERSIONS",
    "ShareConfig",
    "load_config",
    "load_config_from_dict",
]
