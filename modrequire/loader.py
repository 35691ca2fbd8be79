"""
Load modules by notional filename through the import system.

- ``require_file`` performs a single import attempt and translates the
  import system's failures into the modrequire error taxonomy
- ``require_module`` maps a module name to its filename first
- ``search_path`` makes extra directories importable for a block

``sys.modules`` is the load registry: a module that imported successfully is
returned from it without being executed again, and a failed attempt never
leaves an entry behind that a retry would mistake for success.
"""

import contextlib
import importlib
import logging
import os
import sys
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType

from .errors import CompilationError
from .errors import ModuleRuntimeError
from .errors import NotFoundError
from .names import MODULE_SUFFIX
from .names import filename_import_name
from .names import module_notional_filename

logger = logging.getLogger(__name__)


def _not_found(filename: str, name: str | None) -> NotFoundError:
    """Build the standard "Can't locate" error for ``filename``."""
    message = f"Can't locate {filename} in sys.path"
    if name:
        message += f" (you may need to install the {name} module)"
    message += f" (sys.path contains: {' '.join(sys.path)})"
    return NotFoundError(message, name=name, filename=filename)


def _is_target(missing: str | None, module_name: str) -> bool:
    """True if a missing import name is the target or one of its parent packages."""
    if not missing:
        return False
    return missing == module_name or module_name.startswith(missing + ".")


@contextlib.contextmanager
def _registry_guard(module_name: str) -> Iterator[None]:
    """Drop a stale ``sys.modules`` entry for ``module_name`` if the block raises.

    Only an entry created during the block is removed; a module that was
    already registered before the attempt is left alone.
    """
    was_registered = module_name in sys.modules
    try:
        yield
    except BaseException:
        if not was_registered and sys.modules.pop(module_name, None) is not None:
            logger.debug(f"Removed stale registry entry for '{module_name}' after failed load")
        raise


def require_file(filename: str) -> ModuleType:
    """
    Load the module stored at a notional filename.

    Args:
        filename: Relative filename such as ``"foo/bar.py"``

    Returns:
        The loaded module (the cached one if it was loaded before)

    Raises:
        NotFoundError: Nothing importable exists at ``filename``, or a module
            imported by it does not exist
        CompilationError: The module exists but raised while executing
    """
    module_name = filename_import_name(filename)
    if module_name is None:
        raise _not_found(filename, None)

    cached = sys.modules.get(module_name)
    if cached is not None:
        logger.debug(f"'{module_name}' already loaded")
        return cached

    logger.debug(f"Loading '{module_name}' from {filename}")
    try:
        with _registry_guard(module_name):
            module = importlib.import_module(module_name)
    except ModuleRuntimeError:
        # Raised by a nested require; already in final form
        raise
    except ModuleNotFoundError as e:
        if _is_target(e.name, module_name):
            raise _not_found(filename, module_name) from e
        if e.name:
            nested = e.name.replace(".", "/") + MODULE_SUFFIX
            raise _not_found(nested, e.name) from e
        raise CompilationError(
            f"{e}\nCompilation failed in require {filename}",
            name=module_name,
            filename=filename,
        ) from e
    except Exception as e:
        raise CompilationError(
            f"{type(e).__name__}: {e}\nCompilation failed in require {filename}",
            name=module_name,
            filename=filename,
        ) from e

    logger.debug(f"Loaded '{module_name}'")
    return module


def require_module(name: str) -> ModuleType:
    """Load a module by name. See ``require_file`` for errors."""
    return require_file(module_notional_filename(name))


@contextlib.contextmanager
def search_path(*paths: str | os.PathLike[str]) -> Iterator[list[str]]:
    """
    Make directories importable for the duration of a ``with`` block.

    Paths are prepended to ``sys.path`` in the given order. On exit only the
    entries this call added are removed; paths already present are untouched.

    Yields:
        The list of entries that were added
    """
    added: list[str] = []
    for path in reversed(paths):
        path_str = str(Path(path))
        if path_str not in sys.path:
            sys.path.insert(0, path_str)
            added.append(path_str)
            logger.debug(f"Added '{path_str}' to sys.path")
    if added:
        importlib.invalidate_caches()
    try:
        yield list(reversed(added))
    finally:
        for path_str in added:
            try:
                sys.path.remove(path_str)
                logger.debug(f"Removed '{path_str}' from sys.path")
            except ValueError:
                logger.debug(f"Path '{path_str}' already removed from sys.path")
