"""Tests for minimum-version checks."""

import sys
import types

import pytest
from modrequire.errors import VersionMismatchError
from modrequire.versions import check_version


@pytest.fixture
def versioned(monkeypatch):
    """Register a module with a given __version__ (None for no attribute)."""

    def register(name, version):
        module = types.ModuleType(name)
        if version is not None:
            module.__version__ = version  # type: ignore[attr-defined]
        monkeypatch.setitem(sys.modules, name, module)
        return module

    return register


class TestCheckVersion:
    """Tests for check_version."""

    def test_returns_declared_version(self, versioned):
        versioned("vmod_ok", "2.5.1")
        assert check_version("vmod_ok", "2.5") == "2.5.1"

    def test_equal_version_passes(self, versioned):
        versioned("vmod_equal", "1.0")
        assert check_version("vmod_equal", "1.0.0") == "1.0"

    def test_numeric_requirement(self, versioned):
        versioned("vmod_numeric", "1.5")

        with pytest.raises(VersionMismatchError) as exc_info:
            check_version("vmod_numeric", 2)

        error = exc_info.value
        assert str(error) == "vmod_numeric version 2 required--this is only version 1.5"
        assert error.module == "vmod_numeric"
        assert error.required == 2
        assert error.declared == "1.5"

    def test_pre_release_is_older(self, versioned):
        versioned("vmod_rc", "2.0rc1")
        with pytest.raises(VersionMismatchError):
            check_version("vmod_rc", "2.0")

    def test_no_version_attribute(self, versioned):
        versioned("vmod_bare", None)

        with pytest.raises(VersionMismatchError) as exc_info:
            check_version("vmod_bare", "1")

        assert str(exc_info.value) == (
            "vmod_bare does not define vmod_bare.__version__--version check failed"
        )
        assert exc_info.value.declared is None

    def test_module_not_loaded(self):
        with pytest.raises(VersionMismatchError) as exc_info:
            check_version("vmod_never_loaded", "1")

        assert str(exc_info.value) == (
            "vmod_never_loaded defines neither module nor __version__--version check failed"
        )

    def test_invalid_declared_version(self, versioned):
        versioned("vmod_garbage", "not a version")

        with pytest.raises(VersionMismatchError, match="Invalid version format"):
            check_version("vmod_garbage", "1.0")

    def test_invalid_required_version(self, versioned):
        versioned("vmod_fine", "1.0")

        with pytest.raises(VersionMismatchError, match="Invalid version format"):
            check_version("vmod_fine", "banana")

    def test_apostrophe_name_uses_dotted_module(self, versioned):
        versioned("vpkg.leaf", "4.0")
        assert check_version("vpkg'leaf", "3") == "4.0"
