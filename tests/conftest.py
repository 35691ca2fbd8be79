"""
Shared fixtures for modrequire tests.

Provides a throwaway plugin directory on ``sys.path`` and a load counter
that plugin modules can bump to prove whether their top-level code ran.
"""

import importlib
import sys
import textwrap
import types
from pathlib import Path

import pytest


class PluginDir:
    """Writes importable modules into a directory on sys.path."""

    def __init__(self, root: Path):
        self.root = root

    def write(self, name: str, source: str = "") -> Path:
        """Write module ``name`` (dotted) with ``source``, creating packages as needed."""
        parts = name.split(".")
        directory = self.root
        for part in parts[:-1]:
            directory = directory / part
            directory.mkdir(exist_ok=True)
            init = directory / "__init__.py"
            if not init.exists():
                init.write_text("", encoding="utf-8")
        path = directory / f"{parts[-1]}.py"
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        importlib.invalidate_caches()
        return path


@pytest.fixture
def plugins(tmp_path, monkeypatch):
    """Plugin directory prepended to sys.path; its modules are unloaded afterwards."""
    root = tmp_path / "plugins"
    root.mkdir()
    monkeypatch.syspath_prepend(str(root))
    before = set(sys.modules)

    yield PluginDir(root)

    for name in set(sys.modules) - before:
        module = sys.modules.get(name)
        origin = getattr(module, "__file__", None) or ""
        if origin.startswith(str(root)):
            del sys.modules[name]


@pytest.fixture
def load_counter(monkeypatch):
    """Module importable as ``load_counter``; plugins append to ``hits`` when executed."""
    counter = types.ModuleType("load_counter")
    counter.hits = []  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "load_counter", counter)
    return counter
