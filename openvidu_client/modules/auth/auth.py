"""
Credential encoding for the OpenVidu REST API.

The server authenticates every REST call with HTTP Basic credentials where
the username is fixed and the password is the server secret.
"""

import base64

OPENVIDU_USERNAME = "OPENVIDUAPP"


def build_basic_auth(secret: str, username: str = OPENVIDU_USERNAME) -> str:
    """
    Encode the value of the Authorization header.

    Args:
        secret: OpenVidu server secret
        username: Basic auth username

    Returns:
        Header value in the form "Basic <base64(username:secret)>"

    Raises:
        ValueError: If the secret is empty

    Example:
        >>> build_basic_auth("MY_SECRET")
        'Basic T1BFTlZJRFVBUFA6TVlfU0VDUkVU'
    """
    if not secret:
        raise ValueError("OpenVidu secret is required to authenticate REST calls")

    token = base64.b64encode(f"{username}:{secret}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"
