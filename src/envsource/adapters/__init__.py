"""
Adapters - Concrete implementations of ports.

This module contains implementations for:
- Sources: Environment variables, in-memory mappings
  (future: TOML/JSON files)
"""

from .sources import EnvironmentSource, MappingSource

__all__ = [
    "EnvironmentSource",
    "MappingSource",
]
