"""Startup diagnostics: a small table of the bot's non-secret attributes."""

from __future__ import annotations

import logging

from discord_notify.client import DiscordBot

HEADER = "BOT_ATTRIBUTES"


def format_bot_details(bot: DiscordBot) -> str:
    rows = [(HEADER, ""), ("IDENTIFIER", bot.identifier), ("CHANNEL ID", bot.channel_id)]
    key_width = max(len(key) for key, _ in rows)
    value_width = max(len(value) for _, value in rows)
    border = f"+-{'-' * key_width}-+-{'-' * value_width}-+"

    lines = [border]
    for key, value in rows:
        lines.append(f"| {key.ljust(key_width)} | {value.ljust(value_width)} |")
        if key == HEADER:
            lines.append(border)
    lines.append(border)
    return "\n".join(lines)


def log_bot_details(bot: DiscordBot, logger: logging.Logger | None = None) -> None:
    (logger or logging.getLogger(__name__)).info("bot details\n%s", format_bot_details(bot))
