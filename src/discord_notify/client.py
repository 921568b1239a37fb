"""REST client for posting notifications to a Discord channel as a bot."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import requests

from discord_notify.config import DEFAULT_API_BASE_URL, load_token
from discord_notify.embeds import EmbedMessage, content_payload, embed_payload
from discord_notify.errors import ConfigurationError, RequestError

logger = logging.getLogger(__name__)


class DiscordBot:
    """Post messages to one channel through the Discord bot API.

    The client keeps no state between calls apart from a pooled
    ``requests.Session``. Sends from several threads each check out their own
    connection from the session pool.

    Example:
        >>> bot = DiscordBot("My Discord Bot", "1234", token="...")
        >>> bot.send_notification("Hello from discord-notify!")
        >>> bot.send_advanced_notification("Title", "Body", 0x3498DB, "https://example.com/image.png")
    """

    def __init__(
        self,
        identifier: str,
        channel_id: str,
        token: str,
        api_base_url: str = DEFAULT_API_BASE_URL,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not token:
            raise ConfigurationError("a Discord bot token is required")
        if not channel_id:
            raise ConfigurationError("a Discord channel id is required")
        self._identifier = identifier
        self._channel_id = str(channel_id)
        self._token = token
        self._api_base_url = api_base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_env(cls, identifier: str, channel_id: str, env_path: Path | None = None) -> DiscordBot:
        """Create a bot for the default API, reading DISCORD_TOKEN from the environment or .env."""
        return cls(identifier, channel_id, load_token(env_path))

    @classmethod
    def with_base_url(
        cls, identifier: str, channel_id: str, base_url: str, env_path: Path | None = None
    ) -> DiscordBot:
        """Same as from_env with another API root, e.g. a local mock server."""
        return cls(identifier, channel_id, load_token(env_path), api_base_url=base_url)

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def channel_id(self) -> str:
        return self._channel_id

    @property
    def api_base_url(self) -> str:
        return self._api_base_url

    @property
    def messages_url(self) -> str:
        return f"{self._api_base_url}/channels/{self._channel_id}/messages"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(identifier={self._identifier!r}, "
            f"channel_id={self._channel_id!r}, api_base_url={self._api_base_url!r})"
        )

    def __enter__(self) -> DiscordBot:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def send_notification(self, message: str) -> None:
        """Send ``message`` as the description of an embed titled with the bot identifier."""
        self._post(embed_payload(EmbedMessage(title=self._identifier, description=message)))

    def send_message(self, content: str) -> None:
        """Send ``content`` as a plain text message."""
        self._post(content_payload(content))

    def send_advanced_notification(
        self,
        title: str,
        description: str,
        color: int,
        image_url: str | None = None,
    ) -> dict[str, Any]:
        """Send a custom embed and return the created message object.

        Args:
            title: The title of the embed.
            description: The main content of the embed.
            color: Sidebar color as a 24-bit RGB integer.
            image_url: Optional URL of an image displayed in the embed.

        Returns:
            The decoded JSON message object returned by Discord.
        """
        embed = EmbedMessage(title=title, description=description, color=color, image_url=image_url)
        response = self._post(embed_payload(embed))
        try:
            return response.json()
        except ValueError as err:
            raise RequestError(
                "Discord returned a non-JSON body", status_code=response.status_code, body=response.text
            ) from err

    def _post(self, payload: dict[str, Any]) -> requests.Response:
        url = self.messages_url
        headers = {"Authorization": f"Bot {self._token}"}
        try:
            response = self._session.post(url, json=payload, headers=headers, timeout=self._timeout)
        except requests.RequestException as err:
            logger.warning("POST %s failed: %s", url, err)
            raise RequestError(f"request to {url} failed: {err}") from err

        if not 200 <= response.status_code < 300:
            logger.warning("POST %s returned HTTP %s", url, response.status_code)
            raise RequestError(
                f"Discord returned HTTP {response.status_code} for {url}",
                status_code=response.status_code,
                body=response.text,
            )
        logger.debug("POST %s returned HTTP %s", url, response.status_code)
        return response
