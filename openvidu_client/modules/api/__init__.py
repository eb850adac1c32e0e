"""
API Module - Black Box Interface

Purpose: Data carried by session and token requests
Interface: SessionProperties, TokenOptions, wire enumerations
Hidden: Default substitution and request body layout
"""

from .models import (
    MediaMode,
    OpenViduRole,
    RecordingLayout,
    RecordingMode,
    SessionProperties,
    TokenOptions,
)

__all__ = [
    "SessionProperties",
    "TokenOptions",
    "MediaMode",
    "RecordingMode",
    "RecordingLayout",
    "OpenViduRole",
]
