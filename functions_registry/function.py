"""Function definition value type stored by the registry.

A FunctionDefinition pairs a registered name with the calling-convention
kind its body expects. The body itself is opaque: the registry stores it
and hands it back, it never calls it.
"""
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field


class FunctionKind(str, Enum):
    """Calling convention a registered body expects.

    - HTTP: ``body(request)`` returning a string, structured data, or a
      ``(status, headers, body)`` tuple
    - EVENT: ``body(data, context)``, return value ignored
    - CLOUD_EVENT: ``body(event)``, return value ignored
    """

    HTTP = "http"
    EVENT = "event"
    CLOUD_EVENT = "cloud_event"

    def __str__(self) -> str:
        return self.value


class FunctionDefinition(BaseModel):
    """Immutable record of one registered handler.

    Instances are created by Registry.register and never change afterwards.
    Assigning to a field raises pydantic.ValidationError.

    Example:
        >>> definition = FunctionDefinition(name="greet", kind="http", body=handler)
        >>> definition.kind
        <FunctionKind.HTTP: 'http'>
        >>> definition.body is handler
        True
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name the function is registered under")
    kind: FunctionKind = Field(description="Calling convention of the body")
    body: Callable[..., Any] = Field(description="Handler callable, stored as-is")

    def summary(self) -> dict[str, str]:
        """Name and kind without the body, for listings and diagnostics."""
        return {"name": self.name, "kind": self.kind.value}
