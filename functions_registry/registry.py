"""Central registry mapping function names to their definitions.

Setup code registers handlers, either directly or through the decorators in
functions_registry.decorators. The dispatch layer calls lookup() once per
request to resolve the handler to invoke.

Thread Safety:
    - One lock guards the name -> definition map
    - register() checks and inserts inside a single critical section, so two
      threads registering the same name can never both succeed
    - Definitions are fully built before insertion; readers see either no
      entry or a complete one
    - Nothing here blocks on I/O; the lock is held only for a dict operation
"""
import logging
import threading
from typing import Any, Callable, Optional, Union

from .config import RegistryConfig
from .errors import AlreadyRegisteredError, InvalidNameError
from .function import FunctionDefinition, FunctionKind

logger = logging.getLogger(__name__)


class Registry:
    """Write-once registry of function definitions keyed by name.

    Names are coerced with str() before every comparison, so any stringable
    identifier may be used. A name, once bound, can never be rebound or
    removed for the lifetime of the registry.

    Usage:
        >>> registry = Registry()
        >>> registry.add_http("greet", greet).add_event("audit", audit)
        >>> registry.lookup("greet").kind
        <FunctionKind.HTTP: 'http'>
        >>> registry.names()
        ['audit', 'greet']
    """

    def __init__(self, config: Optional[RegistryConfig] = None) -> None:
        self._config = config or RegistryConfig()
        self._lock = threading.RLock()
        self._functions: dict[str, FunctionDefinition] = {}

    @property
    def config(self) -> RegistryConfig:
        return self._config

    def lookup(self, name: Any) -> Optional[FunctionDefinition]:
        """Look up a function definition by name.

        Args:
            name: The function name (coerced with str())

        Returns:
            The stored FunctionDefinition, or None if the name was never
            registered.
        """
        with self._lock:
            return self._functions.get(str(name))

    def names(self) -> list[str]:
        """Return every registered name in ascending lexicographic order."""
        with self._lock:
            return sorted(self._functions)

    def describe(self) -> list[dict[str, str]]:
        """Return name/kind summaries of all definitions, ordered by name."""
        with self._lock:
            definitions = [self._functions[name] for name in sorted(self._functions)]
        return [definition.summary() for definition in definitions]

    def register(
        self,
        name: Any,
        kind: Union[FunctionKind, str],
        body: Callable[..., Any],
    ) -> "Registry":
        """Bind a name to a new function definition.

        The body is stored as-is. Its expected shape depends on kind (see
        FunctionKind) but is checked by the dispatch layer, not here.

        Args:
            name: The function name (coerced with str())
            kind: FunctionKind member or its string value
            body: The handler callable

        Returns:
            This registry, to allow chaining.

        Raises:
            AlreadyRegisteredError: If name is already bound. Nothing is
                modified in that case.
            InvalidNameError: If name is empty and the config disallows it.
            ValueError: If kind is not a known FunctionKind.
            pydantic.ValidationError: If body is not callable. Nothing is
                inserted in that case.
        """
        name = str(name)
        kind = FunctionKind(kind)
        if not name and not self._config.allow_empty_names:
            raise InvalidNameError(name)

        with self._lock:
            if name in self._functions:
                logger.warning("Rejected duplicate registration: %s", name)
                raise AlreadyRegisteredError(name)
            self._functions[name] = FunctionDefinition(name=name, kind=kind, body=body)

        if self._config.log_registrations:
            logger.debug("Registered function: %s (%s)", name, kind)
        return self

    # Kind-specific entry points - same operation as register()

    def add_http(self, name: Any, body: Callable[..., Any]) -> "Registry":
        """Register an HTTP function.

        The body takes one request argument and returns a string, structured
        data to be encoded as JSON, or a ``(status, headers, body)`` tuple.
        """
        return self.register(name, FunctionKind.HTTP, body)

    def add_event(self, name: Any, body: Callable[..., Any]) -> "Registry":
        """Register an event function.

        The body takes two arguments: the event data (bytes for binary
        payloads, otherwise JSON-representable data) and the event context.
        Any return value is ignored.
        """
        return self.register(name, FunctionKind.EVENT, body)

    def add_cloud_event(self, name: Any, body: Callable[..., Any]) -> "Registry":
        """Register a CloudEvent function taking a single event object."""
        return self.register(name, FunctionKind.CLOUD_EVENT, body)

    def __contains__(self, name: Any) -> bool:
        with self._lock:
            return str(name) in self._functions

    def __len__(self) -> int:
        with self._lock:
            return len(self._functions)

    def __repr__(self) -> str:
        return f"Registry(names={self.names()!r})"
