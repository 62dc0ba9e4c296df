# threadsafety_registry/flags.py
"""
Analysis flags.

Flags are ``Name=Value`` pairs, optionally written with the ``-XepOpt:``
prefix used on analyzer command lines::

    -XepOpt:ThreadSafe:KnownThreadSafe=mylib.Pool,mylib.Cache
    Immutable:KnownImmutable=mylib.Point

A bare ``Name`` means ``Name=true``.  When a name is given twice the last
value wins.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from threadsafety_registry.errors import FlagError

FLAG_PREFIX = "-XepOpt:"

KNOWN_THREAD_SAFE_FLAG = "ThreadSafe:KnownThreadSafe"
KNOWN_IMMUTABLE_FLAG = "Immutable:KnownImmutable"


class AnalysisFlags:
    """Read-only view over parsed flag values."""

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(values or {})

    @classmethod
    def empty(cls) -> AnalysisFlags:
        return cls()

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> AnalysisFlags:
        return cls(values)

    @classmethod
    def parse(cls, args: Iterable[str]) -> AnalysisFlags:
        """Parse ``[-XepOpt:]Name[=Value]`` items."""
        values: Dict[str, str] = {}
        for raw in args:
            item = raw.strip()
            if item.startswith(FLAG_PREFIX):
                item = item[len(FLAG_PREFIX):]
            name, sep, value = item.partition("=")
            name = name.strip()
            if not name:
                raise FlagError(
                    f"Malformed flag {raw!r}: missing flag name",
                    hint="write flags as Name=Value",
                )
            values[name] = value if sep else "true"
        return cls(values)

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def get_list(self, name: str) -> Optional[List[str]]:
        """Comma-separated value of *name*, trimmed, without empty items."""
        value = self._values.get(name)
        if value is None:
            return None
        return [item.strip() for item in value.split(",") if item.strip()]

    def __repr__(self) -> str:
        return f"AnalysisFlags({self._values!r})"


__all__ = [
    "AnalysisFlags",
    "FLAG_PREFIX",
    "KNOWN_IMMUTABLE_FLAG",
    "KNOWN_THREAD_SAFE_FLAG",
]
