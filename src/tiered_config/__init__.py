"""Layered configuration loading: defaults, then a file, then environment variables."""

from tiered_config.errors import (
    ConfigError,
    DecodeError,
    FileParseError,
    InvalidFormatError,
    MissingDefaultError,
    SerializationError,
)
from tiered_config.formats import JSON, YAML, ConfigFormat, is_valid_format
from tiered_config.interfaces import ConfigLoader
from tiered_config.loader import TieredConfigLoader, new_loader
from tiered_config.models import LoaderOptions

__all__ = [
    "JSON",
    "YAML",
    "ConfigError",
    "ConfigFormat",
    "ConfigLoader",
    "DecodeError",
    "FileParseError",
    "InvalidFormatError",
    "LoaderOptions",
    "MissingDefaultError",
    "SerializationError",
    "TieredConfigLoader",
    "is_valid_format",
    "new_loader",
]
