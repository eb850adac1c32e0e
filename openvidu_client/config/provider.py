"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol, Union


def resolve_verify(verify_ssl: bool, ca_cert_path: Optional[str] = None) -> Union[bool, str]:
    """Value for the HTTP client's TLS verification setting."""
    if not verify_ssl:
        return False
    return ca_cert_path or True


@dataclass
class OpenViduConfig:
    """OpenVidu server connection configuration."""
    url: str
    secret: str
    verify_ssl: bool = True
    ca_cert_path: Optional[str] = None
    timeout: Optional[float] = None

    @property
    def verify(self) -> Union[bool, str]:
        """Value for the HTTP client's TLS verification setting."""
        return resolve_verify(self.verify_ssl, self.ca_cert_path)


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_openvidu_config(self) -> OpenViduConfig:
        """Get OpenVidu server configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_openvidu_config(self) -> OpenViduConfig:
        """Get OpenVidu server configuration from environment variables."""
        url = os.getenv("OPENVIDU_URL")
        secret = os.getenv("OPENVIDU_SECRET")

        # No defaults for the server location or its secret
        missing = [
            name
            for name, value in (("OPENVIDU_URL", url), ("OPENVIDU_SECRET", secret))
            if not value
        ]
        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Example: OPENVIDU_URL=https://openvidu.example.com:4443 OPENVIDU_SECRET=MY_SECRET"
            )

        timeout_env = os.getenv("OPENVIDU_TIMEOUT")

        return OpenViduConfig(
            url=url,
            secret=secret,
            verify_ssl=os.getenv("OPENVIDU_SSL_VERIFY", "true").lower() == "true",
            ca_cert_path=os.getenv("OPENVIDU_CA_CERT") or None,
            timeout=float(timeout_env) if timeout_env else None,
        )
