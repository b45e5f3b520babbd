from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Protocol, Sequence, Tuple, TypeVar

from tiered_config.models import PathType

T_co = TypeVar("T_co", covariant=True)


class Serializer(Protocol):
    def encode(self, value: Any, fmt: str) -> bytes:
        ...

    def decode(self, data: bytes, fmt: str) -> dict[str, Any]:
        ...


class FileLocator(Protocol):
    def locate(
        self, directories: Sequence[PathType], file_name: str, fmt: str
    ) -> Optional[Tuple[Path, bytes]]:
        """
        Return the path and contents of the first existing config file.

        ``None`` means no candidate exists in any directory. Any other read
        failure must raise.
        """
        ...


class EnvironmentReader(Protocol):
    def get(self, name: str) -> Optional[str]:
        ...


class StructuralDecoder(Protocol):
    def encode(self, value: Any, target_type: type) -> Any:
        """Return a plain data view of ``value`` keyed by its external field names."""
        ...

    def decode(self, data: Mapping[str, Any], target_type: type) -> Any:
        ...


class ConfigLoader(Protocol[T_co]):
    """
    Loads effective runtime configuration.

    Precedence is environment over file over default, per key.
    """

    def load(self) -> T_co:
        ...
