from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, MutableMapping, Sequence, Tuple

from tiered_config.interfaces import EnvironmentReader

logger = logging.getLogger(__name__)

LIST_SEPARATOR = ","


def deep_merge_dicts(base: MutableMapping[str, Any], override: Mapping[str, Any]) -> None:
    for k, v in override.items():
        if isinstance(v, Mapping) and isinstance(base.get(k), MutableMapping):
            deep_merge_dicts(base[k], v)
            continue
        base[k] = v


def iter_leaves(
    config: MutableMapping[str, Any], prefix: Sequence[str] = ()
) -> Iterator[Tuple[MutableMapping[str, Any], str, Tuple[str, ...]]]:
    """Yield ``(parent, key, path)`` for every non-mapping value in ``config``."""
    # Snapshot the keys so callers may assign to parent[key] while iterating.
    for key in list(config.keys()):
        path = (*prefix, str(key))
        value = config[key]
        if isinstance(value, MutableMapping):
            yield from iter_leaves(value, path)
        else:
            yield config, key, path


def key_path(segments: Sequence[str]) -> str:
    return ".".join(segments)


def env_var_name(path: str, prefix: str = "") -> str:
    name = path.replace(".", "_").upper()
    if prefix:
        return f"{prefix.upper()}_{name}"
    return name


def _coerce_env_value(existing: Any, raw: str) -> Any:
    if isinstance(existing, list):
        return raw.split(LIST_SEPARATOR)
    return raw


def apply_env_overrides(config: MutableMapping[str, Any], env: EnvironmentReader, prefix: str = "") -> int:
    """
    Replace every known leaf that has a matching environment variable.

    Returns the number of keys overridden. Keys absent from ``config`` are
    never created and empty variables are ignored.
    """
    overridden = 0
    for parent, key, segments in iter_leaves(config):
        dotted = key_path(segments)
        name = env_var_name(dotted, prefix)
        raw = env.get(name)
        # Empty variables count as unset.
        if not raw:
            continue
        parent[key] = _coerce_env_value(parent[key], raw)
        overridden += 1
        logger.debug("config.env_override key=%s env_var=%s", dotted, name)
    return overridden
