from .loader import (
    ConfigError,
    config_path,
    load_flowmates_config,
    write_flowmates_config,
)
from .models import FlowmatesConfig

__all__ = [
    "ConfigError",
    "FlowmatesConfig",
    "config_path",
    "load_flowmates_config",
    "write_flowmates_config",
]
