"""
Config Module - Black Box Interface

Purpose: Server connection configuration
Interface: OpenViduConfig, ConfigProvider, EnvConfigProvider
Hidden: Environment parsing
"""

from .provider import ConfigProvider, EnvConfigProvider, OpenViduConfig, resolve_verify

__all__ = ["OpenViduConfig", "ConfigProvider", "EnvConfigProvider", "resolve_verify"]
