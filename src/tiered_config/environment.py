from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from tiered_config.models import PathType


class ProcessEnvironment:
    """
    Reads variables from ``os.environ``, falling back to a dotenv file.

    The dotenv file is read once per instance and never written into the
    process environment. Loaders create a fresh instance for every load.
    """

    def __init__(self, *, dotenv_path: Optional[PathType] = None, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ
        self._dotenv = _read_dotenv(dotenv_path)

    def get(self, name: str) -> Optional[str]:
        value = self._environ.get(name)
        if value is not None:
            return value
        return self._dotenv.get(name)


def _read_dotenv(dotenv_path: Optional[PathType]) -> dict[str, str]:
    if dotenv_path is None:
        return {}
    path = Path(dotenv_path)
    if not path.exists():
        return {}
    # Keys declared without a value (e.g. "FOO") come back as None.
    return {k: v for k, v in dotenv_values(dotenv_path=path).items() if v is not None}
