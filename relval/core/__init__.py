"""Core domain types and logic."""

from .config import Config, ConfigError, load_config, load_config_or_default
from .errors import ErrorCode
from .options import OptionsError, ValidationOptions, resolve_options
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    # errors
    "ErrorCode",
    # options
    "OptionsError",
    "ValidationOptions",
    "resolve_options",
    # result
    "Err",
    "Ok",
    "Result",
]
