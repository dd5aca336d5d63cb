"""
ipc_config

Validated, mutable configuration for an inter-process messaging runtime:
file naming conventions, capacity limits, buffering policy and behavioral
switches read by the runtime's services and nodes.

Author: ipc-config Project
License: MIT
"""

__version__ = "0.1.0"

from .config import (
    Config,
    Defaults,
    Duration,
    EmptyValueError,
    EventDefaults,
    ExceedsMaximumLengthError,
    GlobalConfig,
    InvalidCharacterError,
    NodeConfig,
    PublishSubscribeDefaults,
    SemanticStringError,
    ServiceConfig,
    UnableToDeliverStrategy,
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
]
