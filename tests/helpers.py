from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MockConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    foo: str
    bar: str
    baz: str


DEFAULT_MOCK_CONFIG = MockConfig(foo="foo", bar="bar", baz="baz")


class DatabaseSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str = "localhost"
    port: int = 5432


class ServiceConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str = "svc"
    debug: bool = False
    timeout_seconds: float = Field(default=30, alias="timeout")
    tags: list[str] = Field(default_factory=lambda: ["a", "b"])
    db: DatabaseSettings = Field(default_factory=DatabaseSettings)
    replica: Optional[str] = None


@dataclass
class WorkerConfig:
    queue: str = "default"
    concurrency: int = 4
    labels: dict[str, str] = field(default_factory=dict)
