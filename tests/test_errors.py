# tests/test_errors.py
"""
Tests for the registry error hierarchy.
"""

from threadsafety_registry.errors import (
    BuilderStateError,
    CatalogDefectError,
    ErrorCode,
    FlagError,
    RegistryError,
    RegistryErrorCodes,
)


class TestErrorCode:

    def test_str(self):
        assert str(ErrorCode("TSR", 7)) == "TSR-0007"
        assert str(RegistryErrorCodes.CATALOG_DEFECT) == "TSR-1001"


class TestHierarchy:

    def test_subclasses(self):
        for cls in (CatalogDefectError, BuilderStateError, FlagError):
            assert issubclass(cls, RegistryError)

    def test_default_codes(self):
        assert BuilderStateError("x").code == RegistryErrorCodes.BUILDER_STATE
        assert FlagError("x").code == RegistryErrorCodes.INVALID_FLAG


class TestCatalogDefectError:

    def test_message_names_type_and_parameters(self):
        err = CatalogDefectError("mylib.Table", ["X"], ["K", "V"])
        assert str(err) == (
            "For mylib.Table, please update the type parameter(s) "
            "from ['X'] to ['K', 'V']"
        )
        assert err.invalid_parameters == ("X",)
        assert err.declared_parameters == ("K", "V")

    def test_format_includes_code_and_hint(self):
        text = CatalogDefectError("mylib.Table", ["X"], []).format()
        assert text.startswith("[TSR-1001] For mylib.Table")
        assert "hint:" in text

    def test_format_without_hint(self):
        assert FlagError("bad").format() == "[TSR-2001] bad"
