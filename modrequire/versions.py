"""Minimum-version checks against a module's ``__version__``."""

import logging
import sys
from typing import Any

from packaging.version import InvalidVersion
from packaging.version import Version

from .errors import VersionMismatchError
from .names import module_import_name

logger = logging.getLogger(__name__)


def _parse(value: Any, *, module: str, required: Any, declared: Any) -> Version:
    try:
        return Version(str(value))
    except InvalidVersion as e:
        raise VersionMismatchError(
            f"Invalid version format ({e})",
            module=module,
            required=required,
            declared=declared,
        ) from e


def check_version(name: str, required: Any) -> str:
    """Check that the loaded module ``name`` is at least version ``required``.

    The module is looked up in ``sys.modules``; this never loads anything.

    Args:
        name: Module name
        required: Minimum version (string or number, e.g. ``"1.2"`` or ``2``)

    Returns:
        The module's declared version string

    Raises:
        VersionMismatchError: The module is not loaded, declares no
            ``__version__``, declares an unparsable one, or is too old
    """
    import_name = module_import_name(name)
    module = sys.modules.get(import_name)
    declared = getattr(module, "__version__", None) if module is not None else None

    if module is None:
        raise VersionMismatchError(
            f"{name} defines neither module nor __version__--version check failed",
            module=name,
            required=required,
        )
    if declared is None:
        raise VersionMismatchError(
            f"{name} does not define {import_name}.__version__--version check failed",
            module=name,
            required=required,
        )

    wanted = _parse(required, module=name, required=required, declared=declared)
    actual = _parse(declared, module=name, required=required, declared=declared)
    if actual < wanted:
        raise VersionMismatchError(
            f"{name} version {required} required--this is only version {declared}",
            module=name,
            required=required,
            declared=declared,
        )

    logger.debug(f"{name} version {declared} satisfies {required}")
    return str(declared)
