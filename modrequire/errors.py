"""Error taxonomy for runtime module loading.

Every failure raised by modrequire derives from ``ModuleRuntimeError`` and
also from the builtin exception a plain ``import`` would have raised, so
existing ``except ImportError`` / ``except ValueError`` handlers keep working.

Chain preservation: errors translated from the import system are raised
with ``raise X(...) from original`` so the native exception stays available
via ``__cause__``.
"""

from __future__ import annotations

from typing import Any


class ModuleRuntimeError(Exception):
    """Base for all modrequire errors."""

    pass


class InvalidNameError(ModuleRuntimeError, ValueError):
    """A value is not a syntactically valid module name.

    Attributes:
        value: The rejected value (may be ``None``).
    """

    def __init__(self, value: Any) -> None:
        shown = "argument" if value is None else f"'{value}'"
        super().__init__(f"{shown} is not a module name")
        self.value = value


class NotFoundError(ModuleRuntimeError, ModuleNotFoundError):
    """No module exists at the notional filename on ``sys.path``.

    Attributes:
        name: Import name of the module that could not be found.
        filename: Notional filename that was looked up (e.g. ``foo/bar.py``).
    """

    def __init__(self, message: str, *, name: str | None = None, filename: str) -> None:
        super().__init__(message, name=name)
        self.filename = filename

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, filename={self.filename!r})"


class CompilationError(ModuleRuntimeError, ImportError):
    """The module exists but raised while it was being loaded.

    Covers syntax errors, exceptions raised by top-level code and import
    errors other than "not found" raised from inside the module.

    Attributes:
        filename: Notional filename of the module that failed.
    """

    def __init__(self, message: str, *, name: str | None = None, filename: str) -> None:
        super().__init__(message, name=name)
        self.filename = filename


class VersionMismatchError(ModuleRuntimeError):
    """A loaded module does not satisfy a minimum version requirement.

    Attributes:
        module: Module name the check ran against.
        required: Requested minimum version, as given by the caller.
        declared: The module's ``__version__`` (``None`` when absent).
    """

    def __init__(
        self,
        message: str,
        *,
        module: str,
        required: Any,
        declared: Any = None,
    ) -> None:
        super().__init__(message)
        self.module = module
        self.required = required
        self.declared = declared
