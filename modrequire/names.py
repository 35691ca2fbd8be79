"""
Module name validation and name-to-filename mapping.

A module name is a run of segments separated by ``.``; an apostrophe inside
a segment is accepted as an alternate separator (``A'B`` is ``A.B``).
"""

import re
from typing import Any

from .errors import InvalidNameError

MODULE_SUFFIX = ".py"

# First character may not be a digit, a quote or a separator; the body is any
# mix of ".", word characters and quotes followed by a non-digit word
# character. Empty is rejected by the lookahead. One token per alternative
# keeps matching linear.
MODULE_NAME_RX = re.compile(
    r"""
    (?=[^0-9'.])
    (?:
        \.
    |
        \w
    |
        '[^\W0-9]
    )*
    """,
    re.VERBOSE,
)

_SEPARATOR_RX = re.compile(r"[.']")


def is_module_name(value: Any) -> bool:
    """Return True if ``value`` is a valid module name. Never raises."""
    return isinstance(value, str) and MODULE_NAME_RX.fullmatch(value) is not None


def check_module_name(value: Any) -> None:
    """Raise InvalidNameError unless ``value`` is a valid module name."""
    if not is_module_name(value):
        raise InvalidNameError(value)


def module_notional_filename(name: str) -> str:
    """Map a module name to its relative filename.

    Example:
        >>> module_notional_filename("foo.bar")
        'foo/bar.py'
    """
    check_module_name(name)
    return _SEPARATOR_RX.sub("/", name) + MODULE_SUFFIX


def module_import_name(name: str) -> str:
    """Map a module name to the dotted name understood by importlib."""
    check_module_name(name)
    return name.replace("'", ".")


def filename_import_name(filename: str) -> str | None:
    """Map a notional filename back to a dotted import name.

    Returns None when ``filename`` cannot name an importable module:
    absolute paths, a missing ``.py`` suffix, or a path segment that is not
    an identifier (empty, ``.``, ``..`` or containing a dot).
    """
    if not filename.endswith(MODULE_SUFFIX) or filename.startswith("/"):
        return None
    parts = filename[: -len(MODULE_SUFFIX)].split("/")
    if not all(part.isidentifier() for part in parts):
        return None
    return ".".join(parts)
