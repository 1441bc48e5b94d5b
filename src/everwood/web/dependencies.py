"""FastAPI dependency injection for Everwood settings."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends

from everwood.application import EverwoodConfiguration, load_config
from everwood.application.config import ShareConfig

CONFIG_ENV_VAR = "EVERWOOD_CONFIG"

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> EverwoodConfiguration:
    """Load settings from the file named by EVERWOOD_CONFIG, or defaults.

    Raises:
        ConfigError: If the configured file is missing or invalid.
    """
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return EverwoodConfiguration()
    logger.info(f"Loading configuration from {path}")
    return load_config(Path(path))


def get_share_config(
    settings: Annotated[EverwoodConfiguration, Depends(get_settings)],
) -> ShareConfig:
    """Dependency for share link settings."""
    return settings.share


# Type aliases for cleaner endpoint signatures
SettingsDep = Annotated[EverwoodConfiguration, Depends(get_settings)]
ShareConfigDep = Annotated[ShareConfig, Depends(get_share_config)]
