"""threadsafety_registry — types with known thread safety.

A curated table a thread-safety checker consults for types it cannot see
annotated: standard-library and third-party concurrency primitives, plus
whatever the mutability knowledge base reports as immutable.

Submodules
----------
annotation_info
    ``AnnotationInfo``: a type name and its container-of parameters.

builder
    ``ThreadSafeTypesBuilder``: validating, last-wins accumulator.

catalog
    The fixed table of well-known thread-safe types.

well_known
    ``WellKnownThreadSafety`` façade and the assembly order.

mutability
    Interface to the mutability knowledge base.

flags
    ``AnalysisFlags`` parsing (``-XepOpt:Name=Value``).

errors
    ``RegistryError`` hierarchy with ``TSR-XXXX`` codes.

main
    CLI entry-point with subcommands ``list`` and ``lookup``.

Usage
-----
Command-line::

    python -m threadsafety_registry list
    python -m threadsafety_registry lookup queue.Queue

Programmatic::

    from threadsafety_registry.flags import AnalysisFlags
    from threadsafety_registry.well_known import WellKnownThreadSafety

    flags = AnalysisFlags.parse(["ThreadSafe:KnownThreadSafe=mylib.Pool"])
    known = WellKnownThreadSafety.from_flags(flags)
    known.get_known_safe_types()["queue.Queue"].container_of   # ('_T',)
"""

from __future__ import annotations

__version__: str = "0.1.0"
__all__: list[str] = [
    "__version__",
    "annotation_info",
    "builder",
    "catalog",
    "errors",
    "flags",
    "mutability",
    "well_known",
]
