"""Embed values and the JSON bodies posted to the channel messages endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_COLOR = 3447003  # 0x3498DB


@dataclass(frozen=True)
class EmbedMessage:
    title: str
    description: str
    color: int = DEFAULT_COLOR
    image_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        embed: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "color": self.color,
        }
        if self.image_url is not None:
            embed["image"] = {"url": self.image_url}
        return embed


def embed_payload(*embeds: EmbedMessage) -> dict[str, Any]:
    """Wrap one or more embeds in a message body."""
    return {"embeds": [embed.to_dict() for embed in embeds]}


def content_payload(content: str) -> dict[str, Any]:
    return {"content": content}


def parse_color(value: str) -> int:
    """Parse a color given as decimal, ``0x``-prefixed hex or ``#``-prefixed hex."""
    text = value.strip()
    if text.startswith("#"):
        return int(text[1:], 16)
    return int(text, 0)
