"""Core types: results, exit codes, configuration, build environment."""

from .build_env import current_env, with_env
from .config import ConfigError, RelmanConfig, load_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # build_env
    "current_env",
    "with_env",
    # config
    "ConfigError",
    "RelmanConfig",
    "load_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
