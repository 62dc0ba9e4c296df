# tests/test_main.py
"""
Tests for the command-line entry point.
"""

import io
import json

import pytest

from threadsafety_registry import catalog
from threadsafety_registry.catalog import CatalogEntry
from threadsafety_registry.main import EXIT_ERROR, EXIT_INFRA, EXIT_OK, main
from tests.conftest import Box


def _run(*argv):
    out = io.StringIO()
    code = main(list(argv), stream=out)
    return code, out.getvalue()


class TestList:

    def test_text(self):
        code, out = _run("list")
        assert code == EXIT_OK
        assert "threading.Lock" in out
        assert "container of _T" in out
        assert "known thread-safe type(s)" in out

    def test_json(self):
        code, out = _run("list", "--format", "json")
        assert code == EXIT_OK
        entries = {e["type_name"]: e["container_of"] for e in json.loads(out)}
        assert entries["threading.Lock"] == []
        assert entries["queue.Queue"] == ["_T"]

    def test_extension_flag(self):
        code, out = _run(
            "--flag", "ThreadSafe:KnownThreadSafe=mylib.Pool",
            "list", "--format", "json",
        )
        assert code == EXIT_OK
        names = [e["type_name"] for e in json.loads(out)]
        assert "mylib.Pool" in names
        assert names == sorted(names)

    def test_unsafe_json_empty_by_default(self):
        code, out = _run("list", "--unsafe", "--format", "json")
        assert code == EXIT_OK
        assert json.loads(out) == []

    def test_unsafe_json(self):
        code, out = _run(
            "--mutable", "builtins.list", "--mutable", "builtins.dict",
            "list", "--unsafe", "--format", "json",
        )
        assert code == EXIT_OK
        assert json.loads(out) == ["builtins.dict", "builtins.list"]

    def test_unsafe_text(self):
        code, out = _run("--mutable", "mylib.Counter", "list", "--unsafe")
        assert code == EXIT_OK
        assert "mylib.Counter" in out


class TestLookup:

    def test_verdicts(self):
        code, out = _run(
            "--flag", "Immutable:KnownImmutable=mylib.Point",
            "lookup", "threading.Lock", "queue.Queue", "mylib.Point", "mylib.Other",
        )
        assert code == EXIT_OK
        lines = dict(line.split(": ", 1) for line in out.splitlines())
        assert "safe" in lines["threading.Lock"]
        assert "safe if _T safe" in lines["queue.Queue"]
        assert "safe" in lines["mylib.Point"]
        assert "unknown" in lines["mylib.Other"]

    def test_unsafe_verdict(self):
        code, out = _run(
            "--mutable", "builtins.list", "lookup", "builtins.list", "threading.Lock",
        )
        assert code == EXIT_OK
        lines = dict(line.split(": ", 1) for line in out.splitlines())
        assert "unsafe" in lines["builtins.list"]
        assert "unsafe" not in lines["threading.Lock"]

    def test_safe_entry_beats_mutable_listing(self):
        code, out = _run("--mutable", "queue.Queue", "lookup", "queue.Queue")
        assert code == EXIT_OK
        assert "safe if _T safe" in out


class TestExitCodes:

    def test_bad_flag(self):
        code, out = _run("--flag", "=oops", "list")
        assert code == EXIT_INFRA
        assert out == ""

    def test_catalog_defect(self, monkeypatch, capsys):
        monkeypatch.setattr(
            catalog, "CATALOG", (CatalogEntry(Box, ("Nope",)),)
        )
        code, out = _run("list")
        assert code == EXIT_ERROR
        assert out == ""
        err = capsys.readouterr().err
        assert "[TSR-1001]" in err
        assert "Box" in err
        assert "'Nope'" in err

    def test_command_required(self):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2
