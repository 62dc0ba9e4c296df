# threadsafety_registry/mutability.py
"""
Interface to the mutability knowledge base.

The registry does not decide immutability itself.  It asks a
``MutabilityKnowledgeBase`` for the types known to be deeply immutable
(these are thread-safe too) and for the types known to be mutable.
``StaticMutability`` is a plain in-memory implementation for callers that
already hold both tables.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import AbstractSet, FrozenSet, Iterable, Mapping, Optional, Protocol

from threadsafety_registry.annotation_info import AnnotationInfo
from threadsafety_registry.flags import KNOWN_IMMUTABLE_FLAG, AnalysisFlags


class MutabilityKnowledgeBase(Protocol):

    def get_known_immutable_types(self) -> Mapping[str, AnnotationInfo]:
        ...

    def get_known_mutable_types(self) -> AbstractSet[str]:
        ...


class StaticMutability:
    """Fixed immutable-types table and mutable-types set."""

    def __init__(
        self,
        immutable: Optional[Mapping[str, AnnotationInfo]] = None,
        mutable: Optional[Iterable[str]] = None,
    ) -> None:
        self._immutable = MappingProxyType(dict(immutable or {}))
        self._mutable: FrozenSet[str] = frozenset(mutable or ())

    @classmethod
    def from_names(
        cls,
        immutable: Iterable[str] = (),
        mutable: Iterable[str] = (),
    ) -> StaticMutability:
        """Immutable names become entries with no container-of parameters."""
        return cls({name: AnnotationInfo.create(name) for name in immutable}, mutable)

    @classmethod
    def from_flags(
        cls,
        flags: AnalysisFlags,
        mutable: Iterable[str] = (),
    ) -> StaticMutability:
        """Immutable names come from ``Immutable:KnownImmutable``; *mutable* is taken as given."""
        return cls.from_names(flags.get_list(KNOWN_IMMUTABLE_FLAG) or [], mutable)

    def get_known_immutable_types(self) -> Mapping[str, AnnotationInfo]:
        return self._immutable

    def get_known_mutable_types(self) -> FrozenSet[str]:
        return self._mutable


__all__ = ["MutabilityKnowledgeBase", "StaticMutability"]
