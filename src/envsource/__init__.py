"""
envsource - Environment variable source for layered configuration.

Turns the process environment into a normalized key-value mapping that a
merge engine can combine with other configuration sources.
"""

from .core import (
    ENVIRONMENT_ORIGIN,
    ConfigError,
    SourceError,
    SourcePort,
    Value,
    ValueKind,
)
from .adapters import EnvironmentSource, MappingSource

__version__ = "0.1.0"

__all__ = [
    "ENVIRONMENT_ORIGIN",
    "ConfigError",
    "SourceError",
    "SourcePort",
    "Value",
    "ValueKind",
    "EnvironmentSource",
    "MappingSource",
]
