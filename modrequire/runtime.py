"""
Public loading entry points.

- ``use_module``: strict, every failure propagates
- ``use_package_optimistically``: a missing module is not an error
- ``try_require_module``: like the optimistic load, but reports whether the
  module was actually loaded (and new enough) as a bool

"Missing" always means the target's own module is absent. A module that
exists but fails because something *it* imports is missing is broken, not
absent, and that error is never swallowed.
"""

import logging
import re
from typing import Any

from .errors import NotFoundError
from .errors import VersionMismatchError
from .loader import require_module
from .names import module_notional_filename
from .versions import check_version

logger = logging.getLogger(__name__)

_NESTED_COMPILE_FAILURE = re.compile(r"^Compilation failed in require ", re.MULTILINE)


def is_missing_module_error(error: BaseException, filename: str) -> bool:
    """Return True if ``error`` reports that ``filename`` itself does not exist.

    Args:
        error: Exception raised by a load attempt
        filename: Notional filename of the module that was being loaded

    Returns:
        True only for a NotFoundError about exactly ``filename`` that does
        not also report a nested compilation failure
    """
    if not isinstance(error, NotFoundError) or error.filename != filename:
        return False
    message = str(error)
    if not message.startswith(f"Can't locate {filename} "):
        return False
    return _NESTED_COMPILE_FAILURE.search(message) is None


def use_module(name: str, version: Any = None) -> str:
    """Load a module, optionally requiring a minimum version.

    Returns:
        ``name``

    Raises:
        InvalidNameError, NotFoundError, CompilationError, VersionMismatchError
    """
    require_module(name)
    if version is not None:
        check_version(name, version)
    return name


def _load_unless_missing(name: str) -> bool:
    """Load ``name``; return False if it does not exist, raise on anything else."""
    filename = module_notional_filename(name)
    try:
        require_module(name)
    except NotFoundError as e:
        if not is_missing_module_error(e, filename):
            raise
        logger.debug(f"'{name}' not found, continuing without it")
        return False
    return True


def use_package_optimistically(name: str, version: Any = None) -> str:
    """Load a module if it exists.

    A missing module is ignored. Everything else (broken modules, missing
    dependencies of an existing module, version mismatches) is raised.

    Returns:
        ``name``, whether or not the module was loaded
    """
    _load_unless_missing(name)
    if version is not None:
        check_version(name, version)
    return name


def try_require_module(name: str, version: Any = None) -> bool:
    """Try to load a module.

    Returns:
        True if the module loaded and satisfies ``version`` (when given),
        False if it does not exist or is too old

    Raises:
        CompilationError: The module exists but failed to load
        NotFoundError: Something the module imports does not exist
    """
    if not _load_unless_missing(name):
        return False
    if version is not None:
        try:
            check_version(name, version)
        except VersionMismatchError as e:
            logger.debug(f"Version check failed: {e}")
            return False
    return True
