"""
OpenVidu server entry point.

This is the composition root of the package:
- Parses the server URL and encodes the credential once
- Hands out Session handles wired to the same server and HTTP settings
"""

import logging
from typing import Optional, Tuple
from urllib.parse import urlsplit

import httpx

from .config.provider import (
    ConfigProvider,
    EnvConfigProvider,
    OpenViduConfig,
    resolve_verify,
)
from .modules.api.models import SessionProperties
from .modules.auth.auth import build_basic_auth
from .modules.session.session import Session

logger = logging.getLogger(__name__)

DEFAULT_HTTPS_PORT = 443


def parse_server_url(url: str) -> Tuple[str, int]:
    """
    Split an OpenVidu server URL into hostname and port.

    Args:
        url: Server URL, with or without scheme (https assumed)

    Returns:
        Tuple of (hostname, port)

    Raises:
        ValueError: If no hostname can be found

    Example:
        >>> parse_server_url("https://openvidu.example.com:4443/")
        ('openvidu.example.com', 4443)
    """
    if "://" not in url:
        url = f"https://{url}"

    parts = urlsplit(url)
    if not parts.hostname:
        raise ValueError(f"Invalid OpenVidu server URL: {url}")

    return parts.hostname, parts.port or DEFAULT_HTTPS_PORT


class OpenVidu:
    """Connection to one OpenVidu server."""

    def __init__(
        self,
        url: str,
        secret: str,
        *,
        verify_ssl: bool = True,
        ca_cert_path: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the server connection.

        Args:
            url: Server URL, e.g. "https://localhost:4443"
            secret: Server secret
            verify_ssl: Verify the server certificate
            ca_cert_path: CA bundle used for verification, system store when None
            timeout: Request timeout in seconds, None waits indefinitely
            http_client: Optional httpx client shared by all sessions
        """
        self.hostname, self.port = parse_server_url(url)
        self.basic_auth = build_basic_auth(secret)
        self.verify = resolve_verify(verify_ssl, ca_cert_path)
        self.timeout = timeout
        self.http_client = http_client

        # An injected client carries its own TLS settings
        if self.verify is False and http_client is None:
            logger.warning("TLS verification disabled - this should only be used for local development!")

    @classmethod
    def from_config(
        cls, config: OpenViduConfig, http_client: Optional[httpx.AsyncClient] = None
    ) -> "OpenVidu":
        """Instantiate from a configuration object."""
        return cls(
            config.url,
            config.secret,
            verify_ssl=config.verify_ssl,
            ca_cert_path=config.ca_cert_path,
            timeout=config.timeout,
            http_client=http_client,
        )

    @classmethod
    def from_env(cls, config_provider: Optional[ConfigProvider] = None) -> "OpenVidu":
        """Instantiate using environment variables (or the given provider)."""
        provider = config_provider or EnvConfigProvider()
        return cls.from_config(provider.get_openvidu_config())

    def create_session(self, properties: Optional[SessionProperties] = None) -> Session:
        """
        Create a session handle.

        No request is made here; the server-side session is created by the
        first Session.get_session_id() call.
        """
        return Session(
            self.hostname,
            self.port,
            self.basic_auth,
            properties,
            verify=self.verify,
            timeout=self.timeout,
            http_client=self.http_client,
        )
