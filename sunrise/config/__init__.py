from .loader import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE, load_config
from .models import RenderConfig, SunriseConfig, WalkerConfig

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG_TEMPLATE",
    "RenderConfig",
    "SunriseConfig",
    "WalkerConfig",
    "load_config",
]
