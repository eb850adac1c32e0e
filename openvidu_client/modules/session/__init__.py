"""
Session Module - Black Box Interface

Purpose: Represent one server-side session
Interface: get_session_id(), generate_token()
Hidden: Request bodies, endpoint paths, session id caching
"""

from .session import Session

__all__ = ["Session"]
