"""
Authentication Module - Black Box Interface

Purpose: Produce the credential sent with every REST call
Interface: build_basic_auth()
Hidden: Credential format
"""

from .auth import OPENVIDU_USERNAME, build_basic_auth

__all__ = ["build_basic_auth", "OPENVIDU_USERNAME"]
