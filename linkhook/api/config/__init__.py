"""Config API module."""

from .ConfigurationError import ConfigurationError
from .LinkConfig import ERROR_LEVELS, LinkConfig
from .LinkhookConfig import LinkhookConfig
from .LogConfig import LogConfig
from .is_development_environment import is_development_environment

__all__ = [
    "ERROR_LEVELS",
    "ConfigurationError",
    "LinkConfig",
    "LinkhookConfig",
    "LogConfig",
    "is_development_environment",
]
