from typing import Any, Callable, Optional, Union
import logging

from .function import FunctionKind
from .global_registry import global_registry
from .registry import Registry

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Function - Decorator class that registers callables as functions
# ------------------------------------------------------------------------------
# Usage:
#   @Function("greet", "http")
#   def greet(request):
#       ...
#
# Parameters:
#   - name: Unique function name looked up by the dispatch layer
#   - kind: "http", "event" or "cloud_event" (or a FunctionKind)
#   - handler: Register immediately instead of acting as a decorator
#   - registry: Target registry (defaults to the global registry)
#
# What happens at import time:
#   1. Resolves the target registry
#   2. Registers the callable under name (AlreadyRegisteredError on conflict)
#   3. Returns the original callable so it can still be called directly
# ------------------------------------------------------------------------------
class Function:
    """Decorator that registers a callable in a Registry.

    Usage:
        @Function("greet", "http")
        def greet(request):
            return "Hello"

        Function("audit", FunctionKind.EVENT, handler=audit)

    Args:
        name: Unique function name
        kind: Calling convention of the callable
        handler: Optional callable to register right away
        registry: Registry to add to; the global registry when omitted
    """

    def __init__(
        self,
        name: Any,
        kind: Union[FunctionKind, str],
        handler: Optional[Callable[..., Any]] = None,
        *,
        registry: Optional[Registry] = None,
    ):
        self.name = str(name)
        self.kind = FunctionKind(kind)
        self.registry = registry

        # Support both @Function(...) decorator and Function(..., handler=fn) direct call
        if handler is not None:
            self._register(handler)

    def __call__(self, func: Callable[..., Any]) -> Callable[..., Any]:
        self._register(func)
        return func

    def _register(self, func: Callable[..., Any]) -> None:
        # Resolve lazily so a registry swapped in after import is honoured
        registry = self.registry if self.registry is not None else global_registry()
        registry.register(self.name, self.kind, func)
        logger.debug("Decorated %s as %s function", getattr(func, "__qualname__", func), self.kind)


def http(name: Any, *, registry: Optional[Registry] = None) -> Function:
    """Decorator registering an HTTP function (one request argument)."""
    return Function(name, FunctionKind.HTTP, registry=registry)


def event(name: Any, *, registry: Optional[Registry] = None) -> Function:
    """Decorator registering an event function (data and context arguments)."""
    return Function(name, FunctionKind.EVENT, registry=registry)


def cloud_event(name: Any, *, registry: Optional[Registry] = None) -> Function:
    """Decorator registering a CloudEvent function (one event argument)."""
    return Function(name, FunctionKind.CLOUD_EVENT, registry=registry)
