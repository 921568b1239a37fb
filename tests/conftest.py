import logging
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

DISCORD_ENV_VARS = (
    "DISCORD_TOKEN",
    "DISCORD_CHANNEL_ID",
    "DISCORD_IDENTIFIER",
    "DISCORD_API_BASE_URL",
    "DISCORD_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_discord_env(monkeypatch):
    for name in DISCORD_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ("" if payload is None else repr(payload))

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse(200, {"id": "1"})
        self.error = error
        self.calls = []
        self.closed = False

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def restore_logging():
    """Put the root logger and the quieted library loggers back after a test reconfigures them."""
    from discord_notify.logging import NOISY_LIBRARY_LOGGERS

    root = logging.getLogger()
    saved_level, saved_handlers = root.level, root.handlers[:]
    saved_library_levels = [(name, logging.getLogger(name).level) for name in NOISY_LIBRARY_LOGGERS]
    yield root
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    for name, level in saved_library_levels:
        logging.getLogger(name).setLevel(level)
