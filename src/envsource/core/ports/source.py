"""
Source Port - Abstract interface for configuration sources.

Implementations: EnvironmentSource, MappingSource
(future: file and remote sources)
"""

from abc import ABC, abstractmethod

from ..domain.value import Value


class SourcePort(ABC):
    """
    Abstract interface for a configuration source.

    A source produces a flat mapping of dotted, lower-case keys to values.
    Combining the output of several sources is the caller's job: later
    sources override earlier ones on duplicate keys.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the source name (e.g., 'Environment')."""
        ...

    @abstractmethod
    def collect(self) -> dict[str, Value]:
        """
        Collect the configuration held by this source.

        Each call builds a new mapping; nothing is cached between calls.

        Returns:
            Mapping of normalized keys to values

        Raises:
            SourceError: If the source cannot be read
        """
        ...

    @abstractmethod
    def clone(self) -> "SourcePort":
        """Return an independent copy of this source."""
        ...
