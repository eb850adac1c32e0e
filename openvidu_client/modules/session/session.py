import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

import httpx

from ..api.models import SessionProperties, TokenOptions
from ..transport.transport import JSONPoster

logger = logging.getLogger(__name__)


class Session:
    """
    Client-side handle of one OpenVidu session.

    The session id is fetched from the server on first use and cached for
    the lifetime of the handle. Tokens are always minted by a new request.
    """

    API_SESSIONS = "/api/sessions"
    API_TOKENS = "/api/tokens"

    def __init__(
        self,
        hostname: str,
        port: int,
        basic_auth: str,
        properties: Optional[SessionProperties] = None,
        verify: Union[bool, str] = True,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize session handle.

        Args:
            hostname: OpenVidu server hostname
            port: OpenVidu server HTTPS port
            basic_auth: Pre-encoded Authorization header value
            properties: Creation properties, defaults applied when None
            verify: TLS verification flag or CA bundle path
            timeout: Request timeout in seconds, None waits indefinitely
            http_client: Optional shared httpx client
        """
        self.hostname = hostname
        self.port = port
        self.properties = properties if properties is not None else SessionProperties()
        self.session_id: Optional[str] = None
        self._poster = JSONPoster(
            hostname,
            port,
            basic_auth,
            verify=verify,
            timeout=timeout,
            http_client=http_client,
        )

    async def get_session_id(self) -> str:
        """
        Get the unique identifier of the session.

        The first call creates the session on the server; later calls return
        the cached value without any network traffic. Overlapping first calls
        are not merged: each one creates a session and the cached id is the
        one from whichever response is processed last.

        Returns:
            Session ID carried by this call's response, or the cached one

        Raises:
            RemoteRejectionError: Server refused the properties (e.g. HTTP 400)
            TransportFailureError: Server unreachable
            MalformedResponseError: Success response without an id
        """
        if self.session_id:
            return self.session_id

        session_id = await self._poster.post(
            self.API_SESSIONS, self.properties.to_request_body()
        )
        self.session_id = session_id
        logger.info(f"Session {session_id} created on {self.hostname}:{self.port}")
        return session_id

    async def generate_token(
        self, token_options: Union[TokenOptions, Mapping, None] = None
    ) -> str:
        """
        Get a new token associated to the session.

        The current session id is sent as-is; if it has not been fetched yet
        the server rejects the request.

        Args:
            token_options: TokenOptions, a mapping of its fields, or None for
                the defaults (PUBLISHER role, empty data)

        Returns:
            Token string

        Raises:
            TypeError: token_options has an unsupported type
            pydantic.ValidationError: token_options mapping has invalid values
            RemoteRejectionError: Server refused the request (e.g. HTTP 400)
            TransportFailureError: Server unreachable
            MalformedResponseError: Success response without an id
        """
        options = self._coerce_token_options(token_options)
        token = await self._poster.post(
            self.API_TOKENS, options.to_request_body(self.session_id)
        )
        logger.debug(f"Token generated for session {self.session_id}")
        return token

    @staticmethod
    def _coerce_token_options(token_options: Any) -> TokenOptions:
        if token_options is None:
            return TokenOptions()
        if isinstance(token_options, TokenOptions):
            return token_options
        if isinstance(token_options, Mapping):
            return TokenOptions.model_validate(dict(token_options))
        raise TypeError(
            f"token_options must be TokenOptions, a mapping or None, not {type(token_options).__name__}"
        )

    def __repr__(self) -> str:
        return f"Session(hostname={self.hostname!r}, port={self.port}, session_id={self.session_id!r})"
