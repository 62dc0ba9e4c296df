# threadsafety_registry/annotation_info.py
"""
Thread-safety metadata for a single named type.

An ``AnnotationInfo`` says that ``type_name`` is safe to share between
threads.  When ``container_of`` is non-empty the judgement is conditional:
the type is only safe if every type argument substituted for one of those
type parameters is itself safe.  ``Future[T]`` with ``container_of=("T",)``
is safe to share exactly when ``T`` is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class AnnotationInfo:
    """Immutable (type name, container-of parameters) record."""

    type_name: str
    container_of: Tuple[str, ...] = ()

    @classmethod
    def create(cls, type_name: str, *container_of: str) -> AnnotationInfo:
        """Build a record; the parameter names are trusted as given."""
        return cls(type_name=type_name, container_of=tuple(container_of))

    @property
    def is_conditional(self) -> bool:
        return bool(self.container_of)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type_name": self.type_name,
            "container_of": list(self.container_of),
        }

    def __str__(self) -> str:
        if not self.container_of:
            return self.type_name
        return f"{self.type_name}[{', '.join(self.container_of)}]"


__all__ = ["AnnotationInfo"]
