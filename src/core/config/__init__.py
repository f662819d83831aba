"""Engine configuration loading."""

from .config_loader import ConfigLoader, SlayConfig, DEFAULT_CONFIG_PATH

__all__ = [
    "ConfigLoader",
    "SlayConfig",
    "DEFAULT_CONFIG_PATH",
]
