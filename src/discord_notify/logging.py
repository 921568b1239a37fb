"""Central logging setup for the discord-notify CLI."""

from __future__ import annotations

import logging
import logging.config
import os

from discord_notify.paths import repo_file

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
NOISY_LIBRARY_LOGGERS = ("urllib3", "urllib3.connectionpool")


def _resolve_level(level: str | None = None, default: str = "INFO") -> int:
    level_name = (level or os.getenv("LOG_LEVEL") or default).upper()
    return getattr(logging, level_name, logging.INFO)


def _quiet_libraries() -> None:
    # urllib3 logs every pooled connection at DEBUG
    for logger_name in NOISY_LIBRARY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.INFO)


def configure_logging(level: str | None = None) -> logging.Logger:
    """Configure the root logger from logging.ini, or a plain stream handler if it is missing.

    ``level`` wins over the LOG_LEVEL environment variable.
    """
    root = logging.getLogger()
    config_path = repo_file("logging.ini")
    if config_path.is_file():
        logging.config.fileConfig(str(config_path), disable_existing_loggers=False)
    elif not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    root.setLevel(_resolve_level(level))
    _quiet_libraries()
    return root
