from .builder import build_config
from .models import ConfigError, RecentConfig

__all__ = [
    "ConfigError",
    "RecentConfig",
    "build_config",
]
