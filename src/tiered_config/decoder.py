from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

from pydantic import TypeAdapter


@lru_cache(maxsize=64)
def _adapter(target_type: type) -> TypeAdapter:
    return TypeAdapter(target_type)


class PydanticDecoder:
    """
    Maps between config objects and plain data using pydantic.

    Works for ``BaseModel`` subclasses, dataclasses and ``TypedDict`` types.
    Field aliases are used as keys in both directions.
    """

    def encode(self, value: Any, target_type: type) -> Any:
        return _adapter(target_type).dump_python(value, mode="json", by_alias=True)

    def decode(self, data: Mapping[str, Any], target_type: type) -> Any:
        return _adapter(target_type).validate_python(data)
