import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# app.py builds its app at import time and needs a key
os.environ.setdefault("VOLKERN_API_KEY", "test-key")

from core.config import Settings  # noqa: E402
from core.volkern_api import VolkernAPI  # noqa: E402


class DummyResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        if text is None:
            text = "" if payload is None else json.dumps(payload)
        self.text = text
        self.content = text.encode("utf-8")

    def json(self) -> Any:
        return json.loads(self.text)


class DummySession:
    """
    Minimal stand-in for requests.Session that records every request
    and replies with queued responses (or raises queued exceptions).
    """

    def __init__(self, *responses):
        self.responses: List[Any] = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        reply = self.responses.pop(0) if self.responses else DummyResponse(200, {})
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self):
        self.closed = True


class RecordingTransport:
    """Transport double for the dispatcher: keeps the RequestSpec it was given."""

    def __init__(self, result: Any = None, error: Optional[Exception] = None):
        self.result = {"ok": True} if result is None else result
        self.error = error
        self.specs = []

    def perform(self, spec):
        self.specs.append(spec)
        if self.error is not None:
            raise self.error
        return self.result

    @property
    def last(self):
        return self.specs[-1]


@pytest.fixture
def settings() -> Settings:
    return Settings(api_url="https://crm.example.test/api", api_key="secret-token", timeout=5.0)


@pytest.fixture
def make_api(settings):
    def _make(*responses):
        session = DummySession(*responses)
        return VolkernAPI(settings, session=session), session

    return _make
