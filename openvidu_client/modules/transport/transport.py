"""
JSON POST executor for the OpenVidu REST API.

Every REST operation in this package has the same shape: serialize a JSON
body, POST it with the server credential, collect the whole response body,
and succeed only on HTTP 200. This module owns that shape so the session
handle only decides which path to call and which field to read back.
"""

import json
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional, Union

import httpx

logger = logging.getLogger(__name__)


class OpenViduError(RuntimeError):
    """Base class for failures reported by this package."""


class RemoteRejectionError(OpenViduError):
    """
    Raised when the server answers with a status other than 200.

    Only the status code is kept; the response body is never read. Callers
    map codes to meaning themselves (400 is malformed properties or options,
    404 an unknown session).
    """

    def __init__(self, status_code: int) -> None:
        super().__init__(f"OpenVidu server responded with HTTP {status_code}")
        self.status_code = status_code


class TransportFailureError(OpenViduError):
    """Raised when the request never produced a response (DNS, TCP, TLS, I/O)."""

    def __init__(self, error: httpx.TransportError) -> None:
        super().__init__(f"OpenVidu server unreachable: {error!r}")
        self.error = error


class MalformedResponseError(OpenViduError, ValueError):
    """Raised when a 200 response body does not carry the expected JSON field."""

    def __init__(self, message: str, body: bytes = b"") -> None:
        super().__init__(message)
        self.body = body


class JSONPoster:
    """
    Issues authenticated JSON POST requests to one OpenVidu server.

    The poster holds no per-request state, so one instance is shared by
    every operation of a session handle and concurrent calls are safe.
    """

    def __init__(
        self,
        hostname: str,
        port: int,
        basic_auth: str,
        verify: Union[bool, str] = True,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the poster.

        Args:
            hostname: Server hostname
            port: Server HTTPS port
            basic_auth: Pre-encoded Authorization header value
            verify: TLS verification flag or CA bundle path
            timeout: Request timeout in seconds, None waits indefinitely
            http_client: Optional shared client. It is reused as-is and
                never closed here; verify and timeout are then ignored.
        """
        self.hostname = hostname
        self.port = port
        self.basic_auth = basic_auth
        self.verify = verify
        self.timeout = timeout
        self._http_client = http_client

    @property
    def base_url(self) -> str:
        return f"https://{self.hostname}:{self.port}"

    @staticmethod
    def encode_body(body: Dict[str, Any]) -> bytes:
        """Serialize a request body compactly as UTF-8 JSON."""
        return json.dumps(body, ensure_ascii=False, separators=(",", ":")).encode("utf-8")

    def build_headers(self, payload: bytes) -> Dict[str, str]:
        """Headers sent with every request; Content-Length counts bytes."""
        return {
            "Authorization": self.basic_auth,
            "Content-Type": "application/json",
            "Content-Length": str(len(payload)),
        }

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
            return

        async with httpx.AsyncClient(verify=self.verify, timeout=self.timeout) as client:
            yield client

    async def post(self, path: str, body: Dict[str, Any], field: str = "id") -> Any:
        """
        POST a JSON body and return one field of the JSON response.

        Args:
            path: Resource path, e.g. "/api/sessions"
            body: Request body
            field: Key to read from the response object

        Returns:
            Value of `field` in the parsed response

        Raises:
            RemoteRejectionError: Status other than 200
            TransportFailureError: Connection or I/O failure before completion
            MalformedResponseError: 200 body that is not a JSON object with `field`
        """
        payload = self.encode_body(body)
        headers = self.build_headers(payload)
        url = f"{self.base_url}{path}"

        logger.debug(f"POST {url} ({len(payload)} bytes)")
        try:
            async with self._client() as client:
                async with client.stream(
                    "POST", url, content=payload, headers=headers
                ) as response:
                    if response.status_code != 200:
                        logger.warning(f"POST {path} rejected with HTTP {response.status_code}")
                        raise RemoteRejectionError(response.status_code)

                    # Chunks are joined in arrival order; parsing waits for the end of stream
                    chunks = []
                    async for chunk in response.aiter_bytes():
                        chunks.append(chunk)
        except httpx.TransportError as e:
            logger.error(f"POST {path} failed: {e!r}")
            raise TransportFailureError(e) from e

        return self._extract_field(b"".join(chunks), field, path)

    @staticmethod
    def _extract_field(raw: bytes, field: str, path: str) -> Any:
        try:
            parsed = json.loads(raw)
        except ValueError as e:
            logger.error(f"POST {path} returned a body that is not JSON")
            raise MalformedResponseError(f"Response from {path} is not valid JSON", raw) from e

        if not isinstance(parsed, dict) or field not in parsed:
            logger.error(f"POST {path} response has no '{field}' field")
            raise MalformedResponseError(f"Response from {path} has no '{field}' field", raw)

        return parsed[field]
