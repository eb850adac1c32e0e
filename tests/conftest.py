"""
Shared pytest fixtures for OpenVidu client tests.

This module provides common fixtures including:
- FakeOpenViduServer: httpx MockTransport handler with canned responses
- httpx client and session handles wired to the fake server
"""

import json
import os
import sys
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from openvidu_client.modules.auth import build_basic_auth
from openvidu_client.modules.session import Session

TEST_HOSTNAME = "openvidu.test"
TEST_PORT = 4443
TEST_SECRET = "MY_SECRET"


# =============================================================================
# Fake OpenVidu Server
# =============================================================================

@dataclass
class FakeResponse:
    """Represents a canned server response."""
    status_code: int = 200
    json_body: Any = None
    raw_body: Optional[bytes] = None
    chunks: Optional[List[bytes]] = None

    def to_httpx(self) -> httpx.Response:
        """Convert to an httpx.Response."""
        if self.chunks is not None:
            return httpx.Response(self.status_code, content=_iterate(self.chunks))
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.json_body)


async def _iterate(chunks: List[bytes]) -> AsyncIterator[bytes]:
    for chunk in chunks:
        yield chunk


class FakeOpenViduServer:
    """
    Stand-in for the OpenVidu REST API.

    Usage:
        def test_something(fake_server, session):
            fake_server.register("/api/sessions", FakeResponse(json_body={"id": "ses_1"}))
            ...
            assert fake_server.call_count("/api/sessions") == 1
    """

    def __init__(self):
        self._responses: Dict[str, List[FakeResponse]] = {}
        self._errors: Dict[str, Exception] = {}
        self.requests: List[httpx.Request] = []

    def register(self, path: str, *responses: FakeResponse) -> "FakeOpenViduServer":
        """Queue responses for a path; the last one is repeated once the queue drains."""
        self._responses.setdefault(path, []).extend(responses)
        return self

    def fail(self, path: str, error: Exception) -> "FakeOpenViduServer":
        """Raise a transport error for every request to the path."""
        self._errors[path] = error
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path in self._errors:
            raise self._errors[path]

        queued = self._responses.get(path)
        if not queued:
            return httpx.Response(404)
        response = queued.pop(0) if len(queued) > 1 else queued[0]
        return response.to_httpx()

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def call_count(self, path: str) -> int:
        return len(self.requests_to(path))

    def last_body(self, path: str) -> Dict[str, Any]:
        return json.loads(self.requests_to(path)[-1].content)


@pytest.fixture
def fake_server():
    """Fake OpenVidu server with no responses registered."""
    return FakeOpenViduServer()


@pytest_asyncio.fixture
async def http_client(fake_server):
    """httpx client routed to the fake server."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_server.handler)) as client:
        yield client


@pytest.fixture
def basic_auth():
    return build_basic_auth(TEST_SECRET)


@pytest.fixture
def make_session(http_client, basic_auth):
    """Factory for Session handles bound to the fake server."""

    def _make(properties=None, client=None) -> Session:
        return Session(
            TEST_HOSTNAME,
            TEST_PORT,
            basic_auth,
            properties,
            http_client=client or http_client,
        )

    return _make


@pytest.fixture
def session(make_session):
    """Session handle with default properties."""
    return make_session()
