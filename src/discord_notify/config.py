"""discord_notify configuration helpers.

The bot token is only read here, at the caller boundary. ``DiscordBot`` itself
takes the token as a plain argument.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from discord_notify.errors import ConfigurationError
from discord_notify.paths import settings_file

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://discord.com/api/v9"
DEFAULT_IDENTIFIER = "discord-notify"
TOKEN_ENV = "DISCORD_TOKEN"


@dataclass(frozen=True)
class Settings:
    identifier: str = DEFAULT_IDENTIFIER
    channel_id: str | None = None
    api_base_url: str = DEFAULT_API_BASE_URL
    timeout: float | None = None


def _env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _to_float(value: Any, name: str) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as err:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from err


def load_env_file(env_path: Path | None = None) -> bool:
    """Load a .env file into the process environment without overriding set variables.

    With no path, search the working directory and its parents. An explicit
    path that does not exist is logged and skipped.
    """
    if env_path is None:
        return load_dotenv(find_dotenv(usecwd=True))
    if not env_path.is_file():
        logger.warning("env file %s does not exist, using the process environment only", env_path)
        return False
    return load_dotenv(env_path)


def load_yaml_settings(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping, got {type(data).__name__}")
    logger.debug("loaded settings from %s", path)
    return data


def load_settings(env_path: Path | None = None, settings_path: Path | None = None) -> Settings:
    """Build Settings from the YAML file, then environment variables on top."""
    load_env_file(env_path)
    data = load_yaml_settings(settings_path or settings_file())

    channel_id = _env("DISCORD_CHANNEL_ID", data.get("channel_id"))
    return Settings(
        identifier=_env("DISCORD_IDENTIFIER", data.get("identifier")) or DEFAULT_IDENTIFIER,
        channel_id=str(channel_id) if channel_id is not None else None,
        api_base_url=_env("DISCORD_API_BASE_URL", data.get("api_base_url")) or DEFAULT_API_BASE_URL,
        timeout=_to_float(_env("DISCORD_TIMEOUT", data.get("timeout")), "timeout"),
    )


def load_token(env_path: Path | None = None) -> str:
    """Return DISCORD_TOKEN from the environment or a .env file."""
    load_env_file(env_path)
    token = _env(TOKEN_ENV)
    if not token:
        raise ConfigurationError(f"{TOKEN_ENV} must be set in the environment or .env file")
    return token
