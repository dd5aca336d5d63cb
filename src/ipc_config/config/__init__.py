"""
Configuration Module

Schema models for the messaging runtime configuration together with the
validated value types (file names, paths, durations) they are built from.

Author: ipc-config Project
License: MIT
"""

from .duration import Duration
from .schema import (
    Config,
    Defaults,
    EventDefaults,
    GlobalConfig,
    NodeConfig,
    PublishSubscribeDefaults,
    ServiceConfig,
    UnableToDeliverStrategy,
    normalize_keys,
)
from .semantic_string import (
    EmptyValueError,
    ExceedsMaximumLengthError,
    InvalidCharacterError,
    SemanticStringError,
    ValidatedFileName,
    ValidatedPath,
)

__all__ = [
    "Config",
    "Defaults",
    "Duration",
    "EmptyValueError",
    "EventDefaults",
    "ExceedsMaximumLengthError",
    "GlobalConfig",
    "InvalidCharacterError",
    "NodeConfig",
    "PublishSubscribeDefaults",
    "SemanticStringError",
    "ServiceConfig",
    "UnableToDeliverStrategy",
    "ValidatedFileName",
    "ValidatedPath",
    "normalize_keys",
]
