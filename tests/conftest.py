# tests/conftest.py
"""
Shared fixtures for the thread-safety registry tests.
"""

from typing import Generic, TypeVar

import pytest

from threadsafety_registry.annotation_info import AnnotationInfo
from threadsafety_registry.mutability import StaticMutability

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


class Box(Generic[T]):
    """One type parameter, ``T``."""


class Pair(Generic[K, V]):
    """Two type parameters, ``K`` and ``V``."""


class IntBox(Box[int]):
    """Concrete subclass; declares no type parameters of its own."""


class Plain:
    """Not generic at all."""


@pytest.fixture
def empty_mutability():
    return StaticMutability()


@pytest.fixture
def sample_mutability():
    return StaticMutability(
        immutable={
            "mylib.Point": AnnotationInfo.create("mylib.Point"),
            "queue.Queue": AnnotationInfo.create("queue.Queue"),
            "mylib.Frozen": AnnotationInfo.create("mylib.Frozen", "E"),
        },
        mutable={"builtins.list", "builtins.dict", "mylib.Counter"},
    )
