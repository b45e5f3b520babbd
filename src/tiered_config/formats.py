from __future__ import annotations

from typing import Final, Literal, Mapping, Sequence

ConfigFormat = Literal["json", "yaml"]

JSON: Final[ConfigFormat] = "json"
YAML: Final[ConfigFormat] = "yaml"

DEFAULT_FORMAT: Final[ConfigFormat] = YAML

# Extensions tried, in order, when looking for the config file of a format.
FILE_EXTENSIONS: Mapping[str, Sequence[str]] = {
    JSON: ("json",),
    YAML: ("yaml", "yml"),
}


def is_valid_format(value: object) -> bool:
    """Return True only for the exact strings ``"json"`` and ``"yaml"``."""
    return value == JSON or value == YAML


def file_extensions(fmt: str) -> Sequence[str]:
    return FILE_EXTENSIONS[fmt]
