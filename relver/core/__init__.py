"""Core types: results, failures, config and exit codes."""

from .config import BranchConfig, Config, ConfigError, load_config
from .errors import ErrorCode
from .failures import Failure, MultipleFailures, SingleFailure, extract_errors
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "BranchConfig",
    "Config",
    "ConfigError",
    "load_config",
    # errors
    "ErrorCode",
    # failures
    "Failure",
    "MultipleFailures",
    "SingleFailure",
    "extract_errors",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
