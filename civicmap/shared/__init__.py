from civicmap.shared.config import Settings, get_config, reload_config
from civicmap.shared.logging_setup import JsonFormatter, configure_logging

__all__ = [
    "get_config",
    "reload_config",
    "Settings",
    "configure_logging",
    "JsonFormatter",
]
