from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Generic, Optional, Sequence, TypeVar, Union

T = TypeVar("T")

PathType = Union[str, PathLike]


@dataclass(frozen=True, slots=True)
class LoaderOptions(Generic[T]):
    """
    Inputs for building a configuration loader.

    Only ``default`` is required. Empty ``format`` and ``file_name`` fall back to
    ``"yaml"`` and ``"config"`` when the loader is built.
    """

    # Fully populated instance of the target configuration type.
    default: Optional[T] = None

    # "json" or "yaml". Case-sensitive.
    format: str = ""

    # Base name of the config file, without extension.
    file_name: str = ""

    # Directories searched in order for <file_name>.<ext>. Empty disables the file tier.
    file_locations: Sequence[PathType] = ()

    env_enabled: bool = False

    # Only variables named <ENV_PREFIX>_<KEY> are considered when set.
    env_prefix: str = ""

    # Type to materialize into. Defaults to type(default).
    target_type: Optional[type] = None

    # Optional dotenv file whose entries act as environment variables.
    # The process environment wins over it.
    dotenv_path: Optional[PathType] = None
