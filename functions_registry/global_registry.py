"""Process-wide default registry.

Decorators and discovery register into this registry unless told otherwise.
Hosts that need isolation (tests, embedded servers) can swap it out with
set_global_registry().
"""
import threading
from typing import Optional

from .registry import Registry

_lock = threading.Lock()
_registry: Optional[Registry] = None


def global_registry() -> Registry:
    """Return the global registry, creating an empty one on first use."""
    global _registry
    with _lock:
        if _registry is None:
            _registry = Registry()
        return _registry


def set_global_registry(registry: Optional[Registry]) -> Optional[Registry]:
    """Install registry as the global registry.

    Passing None drops the current registry; the next global_registry()
    call creates a fresh empty one.

    Returns:
        The previously installed registry (None if none was created yet),
        so callers can restore it afterwards.
    """
    global _registry
    with _lock:
        previous = _registry
        _registry = registry
        return previous
