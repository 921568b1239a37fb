"""Send notifications to a Discord channel through the bot REST API."""

from discord_notify.client import DiscordBot
from discord_notify.embeds import DEFAULT_COLOR, EmbedMessage
from discord_notify.errors import ConfigurationError, NotifyError, RequestError

__all__ = [
    "DEFAULT_COLOR",
    "ConfigurationError",
    "DiscordBot",
    "EmbedMessage",
    "NotifyError",
    "RequestError",
]
