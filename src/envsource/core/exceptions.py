"""
Exceptions - Centralized exception hierarchy.
"""

from typing import Optional

__all__ = ["ConfigError", "SourceError"]


class ConfigError(Exception):
    """Base exception for all configuration errors."""


class SourceError(ConfigError):
    """A source could not produce its configuration mapping."""
    
    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.source = source
    
    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message
