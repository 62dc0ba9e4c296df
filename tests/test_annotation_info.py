# tests/test_annotation_info.py
"""
Tests for the AnnotationInfo value type.
"""

import dataclasses

import pytest

from threadsafety_registry.annotation_info import AnnotationInfo


class TestCreate:

    def test_unconditional(self):
        info = AnnotationInfo.create("threading.Semaphore")
        assert info.type_name == "threading.Semaphore"
        assert info.container_of == ()
        assert not info.is_conditional

    def test_container_of_keeps_order(self):
        info = AnnotationInfo.create("mylib.Table", "V", "K")
        assert info.container_of == ("V", "K")
        assert info.is_conditional

    def test_names_are_not_validated(self):
        info = AnnotationInfo.create("mylib.Opaque", "NotAParam")
        assert info.container_of == ("NotAParam",)


class TestValueSemantics:

    def test_frozen(self):
        info = AnnotationInfo.create("queue.Queue", "_T")
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.type_name = "queue.LifoQueue"  # type: ignore[misc]

    def test_equality_and_hash(self):
        a = AnnotationInfo.create("queue.Queue", "_T")
        b = AnnotationInfo.create("queue.Queue", "_T")
        assert a == b
        assert hash(a) == hash(b)
        assert a != AnnotationInfo.create("queue.Queue")

    def test_to_dict(self):
        info = AnnotationInfo.create("mylib.Table", "K", "V")
        assert info.to_dict() == {
            "type_name": "mylib.Table",
            "container_of": ["K", "V"],
        }

    def test_str(self):
        assert str(AnnotationInfo.create("threading.Event")) == "threading.Event"
        assert str(AnnotationInfo.create("queue.Queue", "_T")) == "queue.Queue[_T]"
