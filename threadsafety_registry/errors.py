# threadsafety_registry/errors.py
"""
Error types for the thread-safety registry.

Error Hierarchy:
────────────────
┌──────────────────────────────────────────────────────────────────────┐
│  RegistryError (base)                                                │
│  ├── CatalogDefectError  - container-of names not declared by type   │
│  ├── BuilderStateError   - builder mutated after build()             │
│  └── FlagError           - malformed configuration flag              │
└──────────────────────────────────────────────────────────────────────┘

Error Codes:
────────────
Each error carries a code of the form TSR-XXXX:
  - 1000-1999: Registry construction defects (fatal at startup)
  - 2000-2999: Configuration errors

A catalog defect is a bug in the registry itself, never a per-file
diagnostic: it aborts startup and is not retried.  Lookups against the
finished registry never raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class ErrorCode:
    """A structured error code such as ``TSR-1001``."""

    prefix: str
    number: int
    title: str = ""

    def __str__(self) -> str:
        return f"{self.prefix}-{self.number:04d}"


class RegistryErrorCodes:
    """Predefined error codes."""

    CATALOG_DEFECT = ErrorCode("TSR", 1001, "catalog defect")
    BUILDER_STATE = ErrorCode("TSR", 1002, "builder already built")
    INVALID_FLAG = ErrorCode("TSR", 2001, "invalid flag")


class RegistryError(Exception):
    """
    Base exception for all registry errors.

    Carries a structured ``code`` and an optional ``hint`` telling the
    maintainer how to fix the problem.
    """

    default_code: ErrorCode = RegistryErrorCodes.CATALOG_DEFECT

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        hint: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.hint = hint

    def format(self) -> str:
        """Render ``[TSR-XXXX] message`` plus the hint, if any."""
        text = f"[{self.code}] {self.message}"
        if self.hint:
            text += f"\n  hint: {self.hint}"
        return text


class CatalogDefectError(RegistryError):
    """An entry names container-of parameters its type does not declare."""

    default_code = RegistryErrorCodes.CATALOG_DEFECT

    def __init__(
        self,
        type_name: str,
        invalid_parameters: Sequence[str],
        declared_parameters: Sequence[str],
    ) -> None:
        self.type_name = type_name
        self.invalid_parameters: Tuple[str, ...] = tuple(invalid_parameters)
        self.declared_parameters: Tuple[str, ...] = tuple(declared_parameters)
        super().__init__(
            f"For {type_name}, please update the type parameter(s) from "
            f"{list(self.invalid_parameters)} to "
            f"{list(self.declared_parameters)}",
            hint="fix the entry in the thread-safety catalog",
        )


class BuilderStateError(RegistryError):
    """A builder was mutated after ``build()`` froze it."""

    default_code = RegistryErrorCodes.BUILDER_STATE


class FlagError(RegistryError):
    """A configuration flag could not be parsed."""

    default_code = RegistryErrorCodes.INVALID_FLAG


__all__ = [
    "BuilderStateError",
    "CatalogDefectError",
    "ErrorCode",
    "FlagError",
    "RegistryError",
    "RegistryErrorCodes",
]
