# File: dircontainer/core/config/settings.py

import os
import logging
from typing import FrozenSet, Tuple


class Settings:
    # --- Identity ---
    # Logger name used by the default diagnostic sink
    PLUGIN_ID: str = "dircontainer"
    # First segment of every encoded container path
    CONTAINER_ID: str = os.getenv("DCC_CONTAINER_ID", "dircontainer.DIR_CONTAINER")
    # Directory segment that stands for the project root itself
    ROOT_DIR: str = os.getenv("DCC_ROOT_DIR", "-")

    # --- Companion archive naming ---
    SOURCE_SUFFIXES: Tuple[str, ...] = ("-src", "-source", "-sources")
    JAVADOC_SUFFIXES: Tuple[str, ...] = ("-javadoc",)

    # --- Defaults ---
    DEFAULT_EXTENSIONS: str = os.getenv("DCC_DEFAULT_EXTENSIONS", "jar,zip")
    LOG_LEVEL: str = os.getenv("DCC_LOG_LEVEL", "INFO")

    @property
    def default_extensions(self) -> FrozenSet[str]:
        return frozenset(
            ext.strip().lower() for ext in self.DEFAULT_EXTENSIONS.split(",") if ext.strip()
        )

    def configure_logging(self):
        """Applies LOG_LEVEL to the package logger."""
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.INFO
        logging.getLogger(self.PLUGIN_ID).setLevel(level)


settings = Settings()
