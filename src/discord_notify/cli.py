"""Send a notification to a Discord channel from the command line."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

from discord_notify.client import DiscordBot
from discord_notify.config import load_settings, load_token
from discord_notify.diagnostics import log_bot_details
from discord_notify.embeds import DEFAULT_COLOR, parse_color
from discord_notify.errors import ConfigurationError, RequestError
from discord_notify.logging import configure_logging

logger = logging.getLogger(__name__)

EXIT_REQUEST_ERROR = 1
EXIT_CONFIGURATION_ERROR = 2


def _color(value: str) -> int:
    try:
        return parse_color(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"invalid color: {value!r}") from err


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="discord-notify", description="Send a notification to a Discord channel")
    parser.add_argument("--env", help="Path to .env file")
    parser.add_argument("--channel-id", help="Target channel id (defaults to DISCORD_CHANNEL_ID)")
    parser.add_argument("--identifier", help="Bot display name used as the embed title")
    parser.add_argument("--base-url", help="Discord API root, e.g. a local mock server")
    parser.add_argument("--show-details", action="store_true", help="Log the bot attributes before sending")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")

    subparsers = parser.add_subparsers(dest="command", required=True)

    send_parser = subparsers.add_parser("send", help="Send MESSAGE as an embed titled with the identifier")
    send_parser.add_argument("message")

    text_parser = subparsers.add_parser("send-text", help="Send MESSAGE as plain content")
    text_parser.add_argument("message")

    advanced_parser = subparsers.add_parser("send-advanced", help="Send a custom embed")
    advanced_parser.add_argument("--title", required=True)
    advanced_parser.add_argument("--description", required=True)
    advanced_parser.add_argument(
        "--color", type=_color, default=DEFAULT_COLOR, help="Decimal, 0x or # hex color (default 0x3498db)"
    )
    advanced_parser.add_argument("--image-url", help="Image shown in the embed")
    return parser


def create_bot(args: argparse.Namespace) -> DiscordBot:
    env_path = Path(args.env) if args.env else None
    settings = load_settings(env_path)
    channel_id = args.channel_id or settings.channel_id
    if not channel_id:
        raise ConfigurationError("a channel id is required: pass --channel-id or set DISCORD_CHANNEL_ID")
    return DiscordBot(
        args.identifier or settings.identifier,
        channel_id,
        load_token(env_path),
        api_base_url=args.base_url or settings.api_base_url,
        timeout=settings.timeout,
    )


def run(args: argparse.Namespace) -> int:
    with create_bot(args) as bot:
        if args.show_details:
            log_bot_details(bot, logger)

        if args.command == "send":
            bot.send_notification(args.message)
        elif args.command == "send-text":
            bot.send_message(args.message)
        elif args.command == "send-advanced":
            created = bot.send_advanced_notification(args.title, args.description, args.color, args.image_url)
            print(json.dumps(created, indent=2))
        logger.info("notification sent to channel %s", bot.channel_id)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    start = time.perf_counter()
    try:
        return run(args)
    except ConfigurationError as err:
        logger.error("configuration error: %s", err)
        return EXIT_CONFIGURATION_ERROR
    except RequestError as err:
        logger.error("failed to send notification: %s", err)
        return EXIT_REQUEST_ERROR
    finally:
        print(f"Elapsed wall time: {time.perf_counter() - start:.3f}s")


if __name__ == "__main__":
    sys.exit(main())
