"""
modrequire - Load Python modules by name at runtime.
"""

__version__ = "0.1.0"

from .errors import CompilationError
from .errors import InvalidNameError
from .errors import ModuleRuntimeError
from .errors import NotFoundError
from .errors import VersionMismatchError
from .loader import require_file
from .loader import require_module
from .loader import search_path
from .names import MODULE_NAME_RX
from .names import check_module_name
from .names import is_module_name
from .names import module_import_name
from .names import module_notional_filename
from .runtime import is_missing_module_error
from .runtime import try_require_module
from .runtime import use_module
from .runtime import use_package_optimistically
from .settings import LoaderSettings
from .settings import LoadReport
from .versions import check_version

__all__ = [
    # Name handling
    "MODULE_NAME_RX",
    "is_module_name",
    "check_module_name",
    "module_notional_filename",
    "module_import_name",
    # Loading
    "require_file",
    "require_module",
    "search_path",
    "use_module",
    "use_package_optimistically",
    "try_require_module",
    "is_missing_module_error",
    "check_version",
    # Configuration
    "LoaderSettings",
    "LoadReport",
    # Error taxonomy
    "ModuleRuntimeError",
    "InvalidNameError",
    "NotFoundError",
    "CompilationError",
    "VersionMismatchError",
]
