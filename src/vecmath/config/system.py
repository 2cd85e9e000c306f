"""Locating, loading and applying the library-level configuration."""

import os
from pathlib import Path
from typing import Optional

from vecmath import rng
from vecmath.config.models import LibraryConfig
from vecmath.utils import configure_logging, get_logger

CONFIG_FILENAME = "vecmath-config.json"
CONFIG_ENV_VAR = "VECMATH_CONFIG_PATH"

logger = get_logger("config")


def resolve_config_path(base_dir: Optional[Path] = None) -> Path:
    """
    Resolve the path of the configuration file.

    ``VECMATH_CONFIG_PATH`` wins when set (relative values are resolved
    against the working directory); otherwise the file is looked up in
    ``base_dir``, defaulting to the working directory.
    """
    env_value = os.getenv(CONFIG_ENV_VAR)
    if env_value:
        candidate = Path(env_value)
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate
    root = Path(base_dir) if base_dir is not None else Path.cwd()
    return (root / CONFIG_FILENAME).resolve()


def load_library_config(base_dir: Optional[Path] = None) -> LibraryConfig:
    """
    Load the library configuration, falling back to defaults when no file exists.

    Raises:
        ValueError: if the file is not valid JSON or holds invalid values.
    """
    path = resolve_config_path(base_dir)
    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return LibraryConfig.from_dict(None)
    config = LibraryConfig.from_file(path)
    logger.info(f"Loaded vecmath config from {path}")
    return config


def apply_library_config(config: LibraryConfig) -> None:
    """Configure logging at ``config.log_level`` and seed the random generators."""
    configure_logging(level=config.log_level)
    rng.configure(config.random)
