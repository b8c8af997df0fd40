# errors.py
"""Exceptions raised by the function registry.

Error Handling Strategy:
    Registration conflicts are configuration mistakes, not runtime
    conditions. They are raised synchronously from register() and propagate
    to the setup code unmodified. A lookup miss is not an error: lookup()
    returns None and the dispatch layer decides what "not found" means.
"""

from typing import Any, Optional


# ------------------------------------------------------------------------------
# RegistryError - Base exception with structured error info
# ------------------------------------------------------------------------------
# - message: What went wrong
# - hint: Actionable suggestion for the caller (optional)
# - **data: Extra context like the function name (optional)
# ------------------------------------------------------------------------------
class RegistryError(Exception):
    """Base class for registry errors.

    Args:
        message: Description of what went wrong
        hint: Actionable suggestion (optional)
        **data: Extra context such as the offending name (optional)
    """
    def __init__(self, message: str, hint: Optional[str] = None, **data: Any):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.data = data

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message


# ------------------------------------------------------------------------------
# AlreadyRegisteredError - Name is already bound in the registry
# ------------------------------------------------------------------------------
# Subclasses ValueError so callers catching the builtin still see it.
# ------------------------------------------------------------------------------
class AlreadyRegisteredError(RegistryError, ValueError):
    """Raised by register() when a name already has a binding.

    The registry is left untouched; the entry from the first successful
    registration stays in place.
    """
    def __init__(self, name: str):
        super().__init__(
            f"Function already defined: {name}",
            hint="Function names are write-once; pick a different name",
            name=name,
        )
        self.name = name


class InvalidNameError(RegistryError, ValueError):
    """Raised by register() for an empty name when the config forbids it."""
    def __init__(self, name: str):
        super().__init__(
            "Function name must not be empty",
            hint="Set allow_empty_names=True to accept empty names",
            name=name,
        )
        self.name = name
