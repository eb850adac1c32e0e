"""
Transport Module - Black Box Interface

Purpose: Execute authenticated JSON POST requests against the server
Interface: JSONPoster.post(), error types
Hidden: HTTP client lifecycle, body encoding, response accumulation

Replaceable with any HTTP stack that honours the same error contract.
"""

from .transport import (
    JSONPoster,
    MalformedResponseError,
    OpenViduError,
    RemoteRejectionError,
    TransportFailureError,
)

__all__ = [
    "JSONPoster",
    "OpenViduError",
    "RemoteRejectionError",
    "TransportFailureError",
    "MalformedResponseError",
]
