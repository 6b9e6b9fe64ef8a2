"""
Environment Source - Load configuration from environment variables.

Supports:
- Prefix filtering (CONFIG_DEBUG -> debug with prefix "config")
- Nested keys via a separator (REDIS_PASSWORD -> redis.password with "_")
- Treating empty variables as unset
- Opportunistic integer/float coercion
"""

import logging
import os
import re
from dataclasses import dataclass, field, replace
from typing import Callable, Mapping, Optional

from ...core.domain.value import ENVIRONMENT_ORIGIN, Value
from ...core.exceptions import SourceError
from ...core.ports.source import SourcePort


EnvironProvider = Callable[[], Mapping[str, str]]

# Full-string numeric grammars. int() and float() alone would also accept
# surrounding whitespace and digit-group underscores.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)

INTEGER_MIN = -(2 ** 63)
INTEGER_MAX = 2 ** 63 - 1

# Most significant digits a 64-bit integer can have; longer strings skip int()
INTEGER_MAX_DIGITS = 19


def _read_process_environ() -> Mapping[str, str]:
    return dict(os.environ)


def parse_value(raw: str, origin: Optional[str] = ENVIRONMENT_ORIGIN) -> Value:
    """
    Coerce a raw string to the narrowest numeric Value it fully matches.

    Integers must fit in 64 bits; anything else that still reads as a
    decimal or exponent number becomes a float. Strings that are neither
    are returned unchanged.

    Args:
        raw: Raw environment value
        origin: Provenance to attach to the value

    Returns:
        Integer, Float or String value
    """
    significant = raw.lstrip("+-").lstrip("0")
    if _INTEGER_PATTERN.fullmatch(raw) and len(significant) <= INTEGER_MAX_DIGITS:
        number = int(raw)
        if INTEGER_MIN <= number <= INTEGER_MAX:
            return Value.integer(number, origin)

    if _FLOAT_PATTERN.fullmatch(raw):
        return Value.float_(float(raw), origin)

    return Value.string(raw, origin)


@dataclass(frozen=True)
class EnvironmentSource(SourcePort):
    """
    Configuration source backed by the process environment.

    Instances are immutable. The fluent ``with_*`` methods return a
    modified copy:

        source = (
            EnvironmentSource.for_prefix("app")
            .with_separator("__")
            .with_parse_numbers(True)
        )
        config = source.collect()
    """

    # Only keys starting with prefix + "_" (case-insensitive) are kept.
    prefix: Optional[str] = None

    # Replaced by "." in every key, e.g. "_" turns REDIS_PASSWORD into redis.password.
    separator: Optional[str] = None

    ignore_empty: bool = False
    parse_numbers: bool = False

    # Enumerates the variables to read; defaults to os.environ.
    environ: Optional[EnvironProvider] = field(default=None, compare=False, repr=False)

    @classmethod
    def for_prefix(cls, prefix: str) -> "EnvironmentSource":
        """Build a source for the given prefix with every other option at its default."""
        return cls(prefix=prefix)

    # -------------------------------------------------------------------------
    # Fluent Configuration
    # -------------------------------------------------------------------------

    def with_prefix(self, prefix: str) -> "EnvironmentSource":
        return replace(self, prefix=prefix)

    def with_separator(self, separator: str) -> "EnvironmentSource":
        return replace(self, separator=separator)

    def with_ignore_empty(self, ignore: bool) -> "EnvironmentSource":
        return replace(self, ignore_empty=ignore)

    def with_parse_numbers(self, parse_numbers: bool) -> "EnvironmentSource":
        return replace(self, parse_numbers=parse_numbers)

    def with_environ(self, environ: EnvironProvider) -> "EnvironmentSource":
        return replace(self, environ=environ)

    # -------------------------------------------------------------------------
    # SourcePort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "Environment"

    @property
    def logger(self) -> logging.Logger:
        return logging.getLogger("EnvironmentSource")

    def clone(self) -> "EnvironmentSource":
        return replace(self)

    def collect(self) -> dict[str, Value]:
        """
        Collect configuration from the environment.

        Variables are processed in ascending order of their original name,
        so when several names normalize to the same key the greatest name
        wins.

        Returns:
            Mapping of normalized keys to values

        Raises:
            SourceError: If the environment cannot be enumerated
        """
        variables = self._snapshot()
        collected: dict[str, Value] = {}
        sources: dict[str, str] = {}

        for raw_key in sorted(variables):
            raw_value = variables[raw_key]

            # Treat empty variables as unset
            if self.ignore_empty and raw_value == "":
                continue

            key = self._normalize_key(raw_key)
            if key is None:
                continue

            if key in collected:
                self.logger.debug(
                    f"Key '{key}' from {sources[key]} overwritten by {raw_key}"
                )

            collected[key] = self._make_value(raw_value)
            sources[key] = raw_key

        self.logger.debug(
            f"Collected {len(collected)} keys from {len(variables)} environment variables"
        )
        return collected

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _snapshot(self) -> Mapping[str, str]:
        """Take one snapshot of the environment."""
        provider = self.environ or _read_process_environ
        try:
            return dict(provider())
        except Exception as e:
            raise SourceError(f"Cannot enumerate environment: {e}", source=self.name) from e

    def _normalize_key(self, key: str) -> Optional[str]:
        """
        Apply prefix stripping, separator replacement and lower-casing.

        Returns:
            The normalized key, or None if the key is filtered out by the prefix
        """
        if self.prefix is not None:
            pattern = f"{self.prefix}_"
            # Compare the original-case slice so the strip length matches it
            if key[:len(pattern)].lower() != pattern.lower():
                return None
            key = key[len(pattern):]

        if self.separator:
            key = key.replace(self.separator, ".")

        return key.lower()

    def _make_value(self, raw: str) -> Value:
        if self.parse_numbers:
            return parse_value(raw, ENVIRONMENT_ORIGIN)
        return Value.string(raw, ENVIRONMENT_ORIGIN)
