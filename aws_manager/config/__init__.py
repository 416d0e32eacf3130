from .settings import AwsSettings, Options, Settings, resolve_options, settings
from .logger import configure_logging, get_logger

__all__ = [
    "AwsSettings",
    "Options",
    "Settings",
    "resolve_options",
    "settings",
    "configure_logging",
    "get_logger",
]
