"""
OpenVidu Client - Session control-plane client

A client for provisioning OpenVidu sessions and minting participant tokens
over the server's REST API.

Architecture:
- Each module is self-contained with clear interfaces
- Modules communicate only through their public exports
- The HTTP layer is shared by every REST operation

Modules:
- api: Session properties, token options and wire enumerations
- auth: Server credential encoding
- transport: JSON POST execution and error types
- session: Session handle (session id provisioning, token generation)
"""

from .client import OpenVidu
from .modules.api import (
    MediaMode,
    OpenViduRole,
    RecordingLayout,
    RecordingMode,
    SessionProperties,
    TokenOptions,
)
from .modules.session import Session
from .modules.transport import (
    MalformedResponseError,
    OpenViduError,
    RemoteRejectionError,
    TransportFailureError,
)

__version__ = "1.0.0"

__all__ = [
    "OpenVidu",
    "Session",
    "SessionProperties",
    "TokenOptions",
    "MediaMode",
    "RecordingMode",
    "RecordingLayout",
    "OpenViduRole",
    "OpenViduError",
    "RemoteRejectionError",
    "TransportFailureError",
    "MalformedResponseError",
]
