from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from tiered_config.formats import file_extensions
from tiered_config.models import PathType

logger = logging.getLogger(__name__)


class DirectoryFileLocator:
    """Finds ``<file_name>.<ext>`` in the first directory that has it."""

    def locate(
        self, directories: Sequence[PathType], file_name: str, fmt: str
    ) -> Optional[Tuple[Path, bytes]]:
        extensions = file_extensions(fmt)
        for directory in directories:
            for ext in extensions:
                candidate = Path(directory) / f"{file_name}.{ext}"
                try:
                    return candidate, candidate.read_bytes()
                except (FileNotFoundError, NotADirectoryError):
                    continue
        logger.debug("config.file_search_exhausted file_name=%s directories=%s", file_name, len(directories))
        return None
