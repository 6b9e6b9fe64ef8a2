"""
Ports - Abstract interfaces for configuration sources.

Every origin of configuration (environment, files, defaults) implements
SourcePort so the merge engine can treat them uniformly.
"""

from .source import SourcePort

__all__ = ["SourcePort"]
