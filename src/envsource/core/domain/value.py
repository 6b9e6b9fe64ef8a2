"""
Value Objects - Configuration values with provenance.

A Value pairs a typed payload with the origin it was read from, so that
a merge engine can report where a winning setting came from.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


ENVIRONMENT_ORIGIN = "the environment"

ValueData = Union[str, int, float]


class ValueKind(Enum):
    """Discriminator for the payload held by a Value."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"


@dataclass(frozen=True, eq=False)
class Value:
    """
    A single configuration value.

    Use the named constructors rather than building the kind by hand:

        Value.string("secret", ENVIRONMENT_ORIGIN)
        Value.integer(8080)
    """

    kind: ValueKind
    data: ValueData
    origin: Optional[str] = None

    @classmethod
    def string(cls, data: str, origin: Optional[str] = None) -> "Value":
        return cls(ValueKind.STRING, data, origin)

    @classmethod
    def integer(cls, data: int, origin: Optional[str] = None) -> "Value":
        return cls(ValueKind.INTEGER, data, origin)

    @classmethod
    def float_(cls, data: float, origin: Optional[str] = None) -> "Value":
        return cls(ValueKind.FLOAT, data, origin)

    def _identity(self) -> tuple:
        # NaN never equals itself; two NaN floats are the same setting
        if self.kind is ValueKind.FLOAT and math.isnan(self.data):
            return (self.kind, "nan", self.origin)
        return (self.kind, self.data, self.origin)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    @property
    def is_numeric(self) -> bool:
        return self.kind in (ValueKind.INTEGER, ValueKind.FLOAT)

    def __str__(self) -> str:
        return str(self.data)
