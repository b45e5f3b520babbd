from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field

from tiered_config import LoaderOptions, new_loader


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    dry_run: bool = False
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    loader = new_loader(
        LoaderOptions(
            default=AppConfig(),
            file_locations=[os.path.dirname(__file__)],
            env_enabled=True,
            env_prefix="smoke",
            dotenv_path=".env",
        )
    )
    config = loader.load()

    logger = logging.getLogger("smoke")
    logger.info("Config loaded dry_run=%s", config.dry_run)
    logger.info("Logging level=%s", config.logging.level)


if __name__ == "__main__":
    main()
