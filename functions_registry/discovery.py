"""Import-time registration by scanning a package.

Handler modules register themselves with the decorators when imported.
discover() imports every module below a package so that happens in one
call during setup.

Usage:
    from functions_registry.discovery import discover
    imported = discover("myapp.functions")
"""
import importlib
import logging
import pkgutil
from types import ModuleType
from typing import Optional, Union

from .global_registry import set_global_registry
from .registry import Registry

logger = logging.getLogger(__name__)


def _reraise(name: str) -> None:
    # walk_packages calls this from inside its except block
    raise


def _import_all(package: ModuleType) -> list[str]:
    imported: list[str] = []
    # package.__path__ works for both normal and namespace packages
    for finder, name, ispkg in pkgutil.walk_packages(
        package.__path__, prefix=f"{package.__name__}.", onerror=_reraise
    ):
        importlib.import_module(name)
        logger.debug("Imported function module: %s", name)
        imported.append(name)
    return imported


def discover(
    package: Union[str, ModuleType],
    *,
    registry: Optional[Registry] = None,
) -> list[str]:
    """Import all modules of a package so their decorators register.

    Args:
        package: Dotted package name or an already imported package
        registry: If given, installed as the global registry while scanning
            and the previous one restored afterwards. The swap is
            process-wide, not per thread: decorators running on other
            threads during the scan also register into this registry.

    Returns:
        Dotted names of the imported modules, in import order.

    Raises:
        ImportError: If the package or one of its modules fails to import.
        AlreadyRegisteredError: If two modules register the same name.
        TypeError: If package is a plain module rather than a package.
    """
    if registry is None:
        return _scan(package)

    previous = set_global_registry(registry)
    try:
        return _scan(package)
    finally:
        set_global_registry(previous)


def _scan(package: Union[str, ModuleType]) -> list[str]:
    if isinstance(package, str):
        package = importlib.import_module(package)
    if not hasattr(package, "__path__"):
        raise TypeError(f"{package.__name__} is a module, not a package")
    return _import_all(package)
