from .models import LibraryConfig, RandomConfig, ToleranceConfig
from .system import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    apply_library_config,
    load_library_config,
    resolve_config_path,
)

__all__ = [
    "LibraryConfig",
    "RandomConfig",
    "ToleranceConfig",
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "apply_library_config",
    "load_library_config",
    "resolve_config_path",
]
