"""Configuration for the function registry.

Hosts build a RegistryConfig directly or from a plain dict (for example one
read from their own settings) and pass it to Registry.
"""

from dataclasses import dataclass, asdict


@dataclass
class RegistryConfig:
    """
    Registry configuration.

    All fields have sensible defaults - a Registry works without any
    configuration.
    """

    # Empty names are accepted unless a host opts in to rejecting them
    allow_empty_names: bool = True

    # Emit a DEBUG record for each successful registration
    log_registrations: bool = True

    def is_valid(self) -> tuple[bool, str]:
        """
        Check that every field holds a value of the right type.

        Returns:
            Tuple of (is_valid, error_message). If valid, error_message is empty string.

        Examples:
            >>> RegistryConfig().is_valid()
            (True, '')

            >>> RegistryConfig(allow_empty_names="no").is_valid()
            (False, 'allow_empty_names must be a bool')
        """
        for name in self.__dataclass_fields__:
            if not isinstance(getattr(self, name), bool):
                return False, f"{name} must be a bool"
        return True, ""

    def to_dict(self) -> dict:
        """
        Convert to a plain dict.

        Returns:
            Dictionary representation of config (JSON-serializable).
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "RegistryConfig":
        """
        Create from dict, using defaults for missing keys.

        Only includes keys that are actual dataclass fields, ignoring
        any extra keys in the input dict.

        Args:
            data: Dictionary with config values (typically from JSON).

        Returns:
            RegistryConfig instance with provided values merged with defaults.

        Examples:
            >>> RegistryConfig.from_dict({"allow_empty_names": False})
            RegistryConfig(allow_empty_names=False, log_registrations=True)

            >>> RegistryConfig.from_dict({"unknown_field": "ignored"})
            RegistryConfig(allow_empty_names=True, log_registrations=True)
        """
        return cls(
            **{k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        )
