"""
Source Adapters - Load configuration from various origins.
"""

from .environment import EnvironmentSource, parse_value
from .memory import MappingSource

__all__ = ["EnvironmentSource", "MappingSource", "parse_value"]
