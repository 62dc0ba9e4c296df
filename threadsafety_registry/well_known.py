# threadsafety_registry/well_known.py
"""
Types with known thread safety.

``WellKnownThreadSafety`` is assembled once, when the analyzer starts,
and is read-only afterwards.  Assembly order decides who wins when the
same name is registered twice:

  1. types the mutability knowledge base knows to be immutable
  2. names from the ``ThreadSafe:KnownThreadSafe`` flag
  3. the fixed catalog

Later sources override earlier ones, so a catalog entry beats both a
user-supplied name and an immutable-types entry for the same type.
A catalog defect raises ``CatalogDefectError`` and no registry is built.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Protocol

from threadsafety_registry.annotation_info import AnnotationInfo
from threadsafety_registry.builder import ThreadSafeTypesBuilder
from threadsafety_registry.catalog import register_catalog
from threadsafety_registry.flags import KNOWN_THREAD_SAFE_FLAG, AnalysisFlags
from threadsafety_registry.mutability import MutabilityKnowledgeBase, StaticMutability

logger = logging.getLogger(__name__)


class KnownTypes(Protocol):
    """What a thread-safety checker needs from a registry.

    A name missing from both results has no a-priori judgement.
    """

    def get_known_safe_types(self) -> Mapping[str, AnnotationInfo]:
        ...

    def get_known_unsafe_types(self) -> FrozenSet[str]:
        ...


def build_thread_safe_types(
    extra_known_thread_safe: Iterable[str],
    mutability: MutabilityKnowledgeBase,
) -> Mapping[str, AnnotationInfo]:
    """Merge immutable types, user names and the catalog; last write wins."""
    result: Dict[str, AnnotationInfo] = {}
    result.update(mutability.get_known_immutable_types())
    immutable_count = len(result)

    builder = ThreadSafeTypesBuilder().add_names(extra_known_thread_safe)
    register_catalog(builder)
    result.update(builder.build())

    logger.info(
        "Assembled %d known thread-safe types (%d from the immutable-types table)",
        len(result), immutable_count,
    )
    return MappingProxyType(result)


class WellKnownThreadSafety:
    """Read-only registry of known thread-safe and known unsafe types."""

    def __init__(
        self,
        flags: AnalysisFlags,
        mutability: MutabilityKnowledgeBase,
    ) -> None:
        known_thread_safe = flags.get_list(KNOWN_THREAD_SAFE_FLAG) or []
        self._known_thread_safe_types = build_thread_safe_types(
            known_thread_safe, mutability
        )
        self._known_unsafe_types: FrozenSet[str] = frozenset(
            mutability.get_known_mutable_types()
        )

    @classmethod
    def from_flags(
        cls,
        flags: Optional[AnalysisFlags] = None,
    ) -> WellKnownThreadSafety:
        flags = flags or AnalysisFlags.empty()
        return cls(flags, StaticMutability.from_flags(flags))

    def get_known_thread_safe_types(self) -> Mapping[str, AnnotationInfo]:
        return self._known_thread_safe_types

    def get_known_safe_types(self) -> Mapping[str, AnnotationInfo]:
        return self.get_known_thread_safe_types()

    def get_known_unsafe_types(self) -> FrozenSet[str]:
        return self._known_unsafe_types


__all__ = ["KnownTypes", "WellKnownThreadSafety", "build_thread_safe_types"]
