"""
Domain - Value objects produced by configuration sources.
"""

from .value import ENVIRONMENT_ORIGIN, Value, ValueKind

__all__ = ["ENVIRONMENT_ORIGIN", "Value", "ValueKind"]
