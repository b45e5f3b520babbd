from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any, Generic, Optional, Sequence, Tuple, TypeVar

from pydantic import ValidationError

from tiered_config.decoder import PydanticDecoder
from tiered_config.environment import ProcessEnvironment
from tiered_config.errors import (
    ConfigError,
    DecodeError,
    FileParseError,
    InvalidFormatError,
    MissingDefaultError,
    SerializationError,
)
from tiered_config.formats import DEFAULT_FORMAT, is_valid_format
from tiered_config.interfaces import EnvironmentReader, FileLocator, Serializer, StructuralDecoder
from tiered_config.locator import DirectoryFileLocator
from tiered_config.merge import apply_env_overrides, deep_merge_dicts
from tiered_config.models import LoaderOptions, PathType
from tiered_config.serializers import FormatSerializer

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_FILE_NAME = "config"


def _expand_locations(locations: Sequence[PathType]) -> Tuple[str, ...]:
    """Expand ``~`` and ``$VAR``/``${VAR}`` in every search directory."""
    # A single path would otherwise be iterated character by character.
    if isinstance(locations, (str, os.PathLike)):
        locations = (locations,)
    return tuple(os.path.expandvars(os.path.expanduser(os.fspath(path))) for path in locations)


def new_loader(
    options: LoaderOptions[T],
    *,
    serializer: Optional[Serializer] = None,
    locator: Optional[FileLocator] = None,
    environment: Optional[EnvironmentReader] = None,
    decoder: Optional[StructuralDecoder] = None,
) -> TieredConfigLoader[T]:
    """
    Validate ``options`` and build a reusable loader for ``type(options.default)``.

    No file access happens here; only ``file_locations`` reads the environment,
    to expand variables. ``environment`` replaces the
    process environment reader (and with it ``dotenv_path``) when given.
    """
    # Without a default there is nothing for the file and environment tiers to override.
    if options.default is None:
        raise MissingDefaultError()

    fmt = options.format or DEFAULT_FORMAT
    if not is_valid_format(fmt):
        raise InvalidFormatError(fmt)

    normalized = dataclasses.replace(
        options,
        format=fmt,
        file_name=options.file_name or DEFAULT_FILE_NAME,
        file_locations=_expand_locations(options.file_locations),
        env_prefix=options.env_prefix.upper() if options.env_enabled else options.env_prefix,
        target_type=options.target_type or type(options.default),
    )
    return TieredConfigLoader(
        normalized,
        serializer=serializer or FormatSerializer(),
        locator=locator or DirectoryFileLocator(),
        environment=environment,
        decoder=decoder or PydanticDecoder(),
    )


class TieredConfigLoader(Generic[T]):
    """
    Merges the default value, an optional config file and environment overrides.

    Every ``load`` starts again from the default, so file and environment
    changes made between calls are picked up. Instances hold no per-call state
    and can be shared between threads.
    """

    def __init__(
        self,
        options: LoaderOptions[T],
        *,
        serializer: Serializer,
        locator: FileLocator,
        environment: Optional[EnvironmentReader],
        decoder: StructuralDecoder,
    ) -> None:
        self._opts = options
        self._serializer = serializer
        self._locator = locator
        self._environment = environment
        self._decoder = decoder

    @property
    def options(self) -> LoaderOptions[T]:
        return self._opts

    def load(self) -> T:
        config = self._seed_from_default()
        self._merge_file(config)
        if self._opts.env_enabled:
            self._merge_environment(config)
        return self._materialize(config)

    def _seed_from_default(self) -> dict[str, Any]:
        # The default goes through the configured format so that it follows the
        # same representation rules as the file layer.
        fmt = self._opts.format
        try:
            plain = self._decoder.encode(self._opts.default, self._opts.target_type)
            data = self._serializer.encode(plain, fmt)
            return self._serializer.decode(data, fmt)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Cannot serialize default value as {fmt}: {exc}") from exc

    def _merge_file(self, config: dict[str, Any]) -> None:
        if not self._opts.file_locations:
            return

        try:
            found = self._locator.locate(self._opts.file_locations, self._opts.file_name, self._opts.format)
        except OSError as exc:
            raise FileParseError(f"Cannot read config file: {exc}", path=exc.filename) from exc
        if found is None:
            logger.debug("config.file_not_found file_name=%s", self._opts.file_name)
            return

        path, contents = found
        try:
            layer = self._serializer.decode(contents, self._opts.format)
        except ConfigError:
            raise
        except ValueError as exc:
            raise FileParseError(f"Cannot parse config file {path}: {exc}", path=path) from exc

        deep_merge_dicts(config, layer)
        logger.debug("config.file_merged path=%s keys=%s", path, len(layer))

    def _merge_environment(self, config: dict[str, Any]) -> None:
        env = self._environment or ProcessEnvironment(dotenv_path=self._opts.dotenv_path)
        apply_env_overrides(config, env, self._opts.env_prefix)

    def _materialize(self, config: dict[str, Any]) -> T:
        target_type = self._opts.target_type
        try:
            return self._decoder.decode(config, target_type)
        except (ValidationError, TypeError, ValueError) as exc:
            name = getattr(target_type, "__name__", repr(target_type))
            raise DecodeError(f"Merged configuration does not match {name}: {exc}") from exc
