from __future__ import annotations


class ConfigError(Exception):
    """Base class for every error raised while building or running a loader."""


class InvalidFormatError(ConfigError, ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f"invalid config format {value!r}. valid values are: json, yaml")
        self.value = value


class MissingDefaultError(ConfigError, ValueError):
    def __init__(self) -> None:
        super().__init__(
            "default value is None. you must provide a valid default value for your configuration type"
        )


class SerializationError(ConfigError):
    """The default value could not be encoded into the configured format."""


class FileParseError(ConfigError):
    """A config file was found but could not be read or parsed."""

    def __init__(self, message: str, *, path: object = None) -> None:
        super().__init__(message)
        self.path = path


class DecodeError(ConfigError):
    """The merged configuration does not fit the target type."""
