"""Exception types raised by discord_notify."""

from __future__ import annotations


class NotifyError(Exception):
    """Base class for discord_notify errors."""


class ConfigurationError(NotifyError):
    """A required credential or setting is missing."""


class RequestError(NotifyError):
    """The notification request failed in transport or returned a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
