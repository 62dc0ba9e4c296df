#!/usr/bin/env python3
"""threadsafety_registry/main.py — inspect the known thread-safety registry.

Usage examples
--------------
    # List every known thread-safe type
    python -m threadsafety_registry list

    # Same, as JSON, with an extra type supplied through the flags
    python -m threadsafety_registry --flag ThreadSafe:KnownThreadSafe=mylib.Pool \\
        list --format json

    # Treat an extra type as immutable, then ask about it
    python -m threadsafety_registry --flag Immutable:KnownImmutable=mylib.Point lookup mylib.Point

    # Ask about individual types
    python -m threadsafety_registry lookup queue.Queue mylib.Widget

    # Mark types as known mutable, then list them
    python -m threadsafety_registry --mutable builtins.list --mutable builtins.dict \\
        list --unsafe

Exit codes
----------
    0   Success.
    1   The registry itself is defective (catalog defect).
    2   Bad command-line flags.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence, TextIO

from termcolor import colored

from threadsafety_registry import __version__
from threadsafety_registry.errors import FlagError, RegistryError
from threadsafety_registry.flags import AnalysisFlags
from threadsafety_registry.mutability import StaticMutability
from threadsafety_registry.well_known import KnownTypes, WellKnownThreadSafety

_log = logging.getLogger("threadsafety_registry")

EXIT_OK: int = 0
EXIT_ERROR: int = 1
EXIT_INFRA: int = 2


# ===========================================================================
# Utility helpers
# ===========================================================================

def _configure_logging(verbosity: int) -> None:
    """Set up the ``threadsafety_registry`` logger.

    Parameters
    ----------
    verbosity:
        0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root = logging.getLogger("threadsafety_registry")
    root.setLevel(level)
    root.handlers = [handler]


def _describe(registry: KnownTypes, name: str) -> str:
    """One-word verdict for *name*, with container-of parameters if any."""
    info = registry.get_known_safe_types().get(name)
    if info is not None:
        if info.is_conditional:
            return f"safe if {', '.join(info.container_of)} safe"
        return "safe"
    if name in registry.get_known_unsafe_types():
        return "unsafe"
    return "unknown"


_VERDICT_COLORS = {"safe": "green", "unsafe": "red", "unknown": "yellow"}


# ===========================================================================
# Sub-command implementations
# ===========================================================================

def cmd_list(args: argparse.Namespace, registry: KnownTypes,
             stream: TextIO) -> int:
    if args.unsafe:
        names = sorted(registry.get_known_unsafe_types())
        if args.format == "json":
            stream.write(json.dumps(names, indent=2) + "\n")
        else:
            for name in names:
                stream.write(colored(name, "red") + "\n")
        return EXIT_OK

    safe = registry.get_known_safe_types()
    if args.format == "json":
        payload = [safe[name].to_dict() for name in sorted(safe)]
        stream.write(json.dumps(payload, indent=2) + "\n")
        return EXIT_OK

    for name in sorted(safe):
        info = safe[name]
        line = colored(name, "green")
        if info.is_conditional:
            params = ", ".join(info.container_of)
            line += " " + colored(f"[container of {params}]", "cyan")
        stream.write(line + "\n")
    stream.write(f"\n--- {len(safe)} known thread-safe type(s) ---\n")
    return EXIT_OK


def cmd_lookup(args: argparse.Namespace, registry: KnownTypes,
               stream: TextIO) -> int:
    for name in args.names:
        verdict = _describe(registry, name)
        color = _VERDICT_COLORS.get(verdict.split(" ", 1)[0], "green")
        stream.write(f"{name}: {colored(verdict, color)}\n")
    return EXIT_OK


# ===========================================================================
# Argument parser
# ===========================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="threadsafety-registry",
        description="Inspect the registry of types with known thread safety.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase log verbosity (-v INFO, -vv DEBUG).",
    )
    parser.add_argument(
        "--flag", action="append", default=[], metavar="NAME=VALUE",
        help="Analysis flag, e.g. ThreadSafe:KnownThreadSafe=a.B,c.D "
             "(repeatable).",
    )
    parser.add_argument(
        "--mutable", action="append", default=[], metavar="NAME",
        help="Fully qualified name of a type known to be mutable "
             "(repeatable).",
    )

    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.required = True

    p_list = sub.add_parser("list", help="List known types.")
    p_list.add_argument("--format", choices=("text", "json"), default="text")
    p_list.add_argument(
        "--unsafe", action="store_true",
        help="List the types known to be mutable instead.",
    )
    p_list.set_defaults(func=cmd_list)

    p_lookup = sub.add_parser("lookup", help="Classify individual type names.")
    p_lookup.add_argument("names", nargs="+", metavar="NAME")
    p_lookup.set_defaults(func=cmd_lookup)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[Sequence[str]] = None,
         stream: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    out = stream or sys.stdout

    try:
        flags = AnalysisFlags.parse(args.flag)
    except FlagError as exc:
        _log.error("%s", exc.format())
        return EXIT_INFRA

    try:
        mutability = StaticMutability.from_flags(flags, mutable=args.mutable)
        registry = WellKnownThreadSafety(flags, mutability)
    except RegistryError as exc:
        _log.error("%s", exc.format())
        return EXIT_ERROR

    return args.func(args, registry, out)


if __name__ == "__main__":
    sys.exit(main())
