# threadsafety_registry/builder.py
"""
Accumulator for the safe-types mapping.

Two ways in
───────────

  add_class(cls, *container_of)
      ``cls`` is a live class.  Its declared type parameters are read
      off the class and every requested container-of name must be one
      of them; anything else is a ``CatalogDefectError``.

  add_name(qualified_name, *container_of)
      The type may not be importable here (an optional dependency, a
      platform-specific module), so the names are trusted.

Both insert ``name → AnnotationInfo`` and overwrite whatever was there:
the last registration for a name wins.  ``build()`` freezes the result
and retires the builder.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from threadsafety_registry.annotation_info import AnnotationInfo
from threadsafety_registry.errors import BuilderStateError, CatalogDefectError

logger = logging.getLogger(__name__)


def qualified_name(cls: type) -> str:
    """``module.QualName`` of *cls*, e.g. ``concurrent.futures._base.Future``."""
    return f"{cls.__module__}.{cls.__qualname__}"


def declared_type_parameters(cls: type) -> Tuple[str, ...]:
    """Names of the type variables *cls* declares, in declaration order.

    PEP 695 classes list them in ``__type_params__``; ``typing.Generic``
    subclasses in ``__parameters__``.  Classes that are only subscriptable
    through ``__class_getitem__`` declare nothing at runtime.
    """
    params = getattr(cls, "__type_params__", ()) or getattr(cls, "__parameters__", ())
    if not isinstance(params, tuple):
        return ()
    return tuple(getattr(p, "__name__", str(p)) for p in params)


class ThreadSafeTypesBuilder:
    """
    Single-use builder for ``Mapping[str, AnnotationInfo]``.

    Usage
    -----
    >>> builder = ThreadSafeTypesBuilder()
    >>> _ = builder.add_name("threading.Lock").add_name("queue.Queue", "_T")
    >>> known = builder.build()
    >>> known["queue.Queue"].container_of
    ('_T',)
    """

    def __init__(self) -> None:
        self._entries: Dict[str, AnnotationInfo] = {}
        self._built: Optional[Mapping[str, AnnotationInfo]] = None

    # ── mutators ─────────────────────────────────────────────────────

    def add_class(self, cls: type, *container_of: str) -> ThreadSafeTypesBuilder:
        """Register *cls*, validating *container_of* against its type parameters."""
        self._check_mutable()
        name = qualified_name(cls)
        declared = declared_type_parameters(cls)
        invalid = [p for p in dict.fromkeys(container_of) if p not in declared]
        if invalid:
            raise CatalogDefectError(name, invalid, declared)
        self._put(AnnotationInfo.create(name, *container_of))
        return self

    def add_name(self, qualified_name: str, *container_of: str) -> ThreadSafeTypesBuilder:
        """Register a type by name without validation."""
        self._check_mutable()
        self._put(AnnotationInfo.create(qualified_name, *container_of))
        return self

    def add_classes(self, classes: Iterable[type]) -> ThreadSafeTypesBuilder:
        for cls in classes:
            self.add_class(cls)
        return self

    def add_names(self, names: Iterable[str]) -> ThreadSafeTypesBuilder:
        for name in names:
            self.add_name(name)
        return self

    # ── result ───────────────────────────────────────────────────────

    def build(self) -> Mapping[str, AnnotationInfo]:
        """Freeze and return the accumulated mapping."""
        if self._built is None:
            self._built = MappingProxyType(self._entries)
            logger.debug("Built thread-safe type table with %d entries",
                         len(self._entries))
        return self._built

    # ── internals ────────────────────────────────────────────────────

    def _check_mutable(self) -> None:
        if self._built is not None:
            raise BuilderStateError(
                "ThreadSafeTypesBuilder is single-use; build() was already called",
                hint="create a new builder",
            )

    def _put(self, info: AnnotationInfo) -> None:
        previous = self._entries.get(info.type_name)
        if previous is not None:
            logger.debug("Overriding %s with %s", previous, info)
        self._entries[info.type_name] = info


__all__ = [
    "ThreadSafeTypesBuilder",
    "declared_type_parameters",
    "qualified_name",
]
