"""
functions_registry - concurrent name registry for function handlers.

Maps logical function names to handler definitions so a request-dispatch
layer can resolve the handler to invoke at call time.
"""

from .config import RegistryConfig
from .decorators import Function, cloud_event, event, http
from .discovery import discover
from .errors import AlreadyRegisteredError, InvalidNameError, RegistryError
from .function import FunctionDefinition, FunctionKind
from .global_registry import global_registry, set_global_registry
from .registry import Registry

__version__ = "0.1.0"

__all__ = [
    "AlreadyRegisteredError",
    "Function",
    "FunctionDefinition",
    "FunctionKind",
    "InvalidNameError",
    "Registry",
    "RegistryConfig",
    "RegistryError",
    "cloud_event",
    "discover",
    "event",
    "global_registry",
    "http",
    "set_global_registry",
]
