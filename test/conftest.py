import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from psdb import Config, Connection

GOLDEN_DIR = Path(__file__).parent / "golden"

MOCK_SESSION = 42


@dataclass
class SentRequest:
    url: str
    body: Any
    headers: Dict[str, str]
    timeout: Optional[float]


class FakeResponse:
    """The slice of ``requests.Response`` the driver reads."""

    def __init__(self, status_code: int = 200, body: Any = None, reason: str = "OK", text: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    def json(self) -> Any:
        return json.loads(self.text)


class FakeGateway:
    """Stands in for ``requests.post``: records each call and replays queued responses."""

    def __init__(self):
        self.requests: List[SentRequest] = []
        self._responses: List[Any] = []

    def reply(self, body: Any = None, status_code: int = 200, reason: str = "OK", text: Optional[str] = None) -> None:
        self._responses.append(FakeResponse(status_code, body, reason, text))

    def fail(self, exc: Exception) -> None:
        self._responses.append(exc)

    def __call__(self, url: str, data: Optional[str] = None, headers: Optional[Dict[str, str]] = None, timeout: Optional[float] = None):
        self.requests.append(SentRequest(url, json.loads(data), dict(headers or {}), timeout))
        if not self._responses:
            raise AssertionError(f"unexpected request to {url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def queries(self) -> List[str]:
        return [r.body["query"] for r in self.requests if "query" in r.body]


def load_golden(name: str) -> Dict[str, Any]:
    with open(GOLDEN_DIR / name, "r") as file:
        return json.load(file)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def config(gateway: FakeGateway) -> Config:
    return Config(username="someuser", password="password", host="example.com", fetch=gateway)


@pytest.fixture
def conn(config: Config) -> Connection:
    return Connection(config)
