from __future__ import annotations

import json
from typing import Any

import yaml

from tiered_config.errors import InvalidFormatError
from tiered_config.formats import JSON, is_valid_format


class FormatSerializer:
    """
    JSON and YAML codec used to exchange layers as plain mappings.

    Malformed input is reported as ``ValueError`` for both formats, so callers
    do not need to know which parser produced it.
    """

    def encode(self, value: Any, fmt: str) -> bytes:
        _check_format(fmt)
        if fmt == JSON:
            return json.dumps(value, ensure_ascii=False).encode("utf-8")
        try:
            text = yaml.safe_dump(value, allow_unicode=True, sort_keys=False)
        except yaml.YAMLError as e:
            raise ValueError(f"Cannot encode value as YAML: {e}") from e
        return text.encode("utf-8")

    def decode(self, data: bytes, fmt: str) -> dict[str, Any]:
        _check_format(fmt)
        raw = data.decode("utf-8")
        if fmt == JSON:
            parsed = json.loads(raw) if raw.strip() else None
        else:
            try:
                parsed = yaml.safe_load(raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML document: {e}") from e

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise ValueError(f"Top-level {fmt.upper()} must be a mapping, got: {type(parsed).__name__}")
        return parsed


def _check_format(fmt: str) -> None:
    if not is_valid_format(fmt):
        raise InvalidFormatError(fmt)
