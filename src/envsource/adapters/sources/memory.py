"""
Mapping Source - Serve configuration from an in-memory mapping.

Useful for built-in defaults and for tests that need a second source
next to the environment.
"""

import logging
from typing import Mapping, Optional, Union

from ...core.domain.value import Value
from ...core.exceptions import SourceError
from ...core.ports.source import SourcePort


DEFAULTS_ORIGIN = "the defaults"


class MappingSource(SourcePort):
    """
    Configuration source holding a fixed set of values.

    Keys are lower-cased on collection, matching EnvironmentSource.
    """

    def __init__(
        self,
        values: Mapping[str, Union[str, int, float]],
        origin: Optional[str] = DEFAULTS_ORIGIN,
    ):
        """
        Initialize the source.

        Args:
            values: Keys (dotted for nesting) and their raw values
            origin: Provenance attached to every collected value
        """
        self._values = dict(values)
        self.origin = origin
        self.logger = logging.getLogger("MappingSource")

    @property
    def name(self) -> str:
        return "Mapping"

    def clone(self) -> "MappingSource":
        return MappingSource(self._values, self.origin)

    def collect(self) -> dict[str, Value]:
        collected: dict[str, Value] = {}

        for key, raw in self._values.items():
            collected[key.lower()] = self._to_value(key, raw)

        self.logger.debug(f"Collected {len(collected)} keys from {self.origin}")
        return collected

    def _to_value(self, key: str, raw: Union[str, int, float]) -> Value:
        # bool is an int subclass; it has no kind of its own here
        if isinstance(raw, bool):
            raise SourceError(f"Unsupported value type bool for key '{key}'", source=self.name)
        if isinstance(raw, str):
            return Value.string(raw, self.origin)
        if isinstance(raw, int):
            return Value.integer(raw, self.origin)
        if isinstance(raw, float):
            return Value.float_(raw, self.origin)
        raise SourceError(
            f"Unsupported value type {type(raw).__name__} for key '{key}'",
            source=self.name,
        )
