"""
OpenVidu client data models.

These models define the options a caller passes in when creating a
session or a token, and how they are rendered into REST request bodies.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

# Enums


class MediaMode(str, Enum):
    """How media streams are exchanged between participants."""

    ROUTED = "ROUTED"
    RELAYED = "RELAYED"


class RecordingMode(str, Enum):
    """Whether the session is recorded automatically."""

    ALWAYS = "ALWAYS"
    MANUAL = "MANUAL"


class RecordingLayout(str, Enum):
    """Layout of the composed recording."""

    BEST_FIT = "BEST_FIT"
    PICTURE_IN_PICTURE = "PICTURE_IN_PICTURE"
    VERTICAL_PRESENTATION = "VERTICAL_PRESENTATION"
    HORIZONTAL_PRESENTATION = "HORIZONTAL_PRESENTATION"
    CUSTOM = "CUSTOM"


class OpenViduRole(str, Enum):
    """Permissions granted to the holder of a token."""

    SUBSCRIBER = "SUBSCRIBER"
    PUBLISHER = "PUBLISHER"
    MODERATOR = "MODERATOR"


# Request Models (API Input)


class SessionProperties(BaseModel):
    """Properties used when the server creates the session."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    media_mode: Optional[MediaMode] = Field(
        None, alias="mediaMode", description="Media routing mode"
    )
    recording_mode: Optional[RecordingMode] = Field(
        None, alias="recordingMode", description="Recording trigger mode"
    )
    default_recording_layout: Optional[RecordingLayout] = Field(
        None, alias="defaultRecordingLayout", description="Layout for recordings"
    )
    default_custom_layout: Optional[str] = Field(
        None,
        alias="defaultCustomLayout",
        description="Relative path of the custom layout, used with RecordingLayout.CUSTOM",
    )

    def to_request_body(self) -> Dict[str, Any]:
        """
        Build the body of a session creation request.

        Empty or unset fields are replaced by the server defaults.

        Returns:
            Dictionary ready to be serialized as JSON
        """
        return {
            "mediaMode": (self.media_mode or MediaMode.ROUTED).value,
            "recordingMode": (self.recording_mode or RecordingMode.MANUAL).value,
            "defaultRecordingLayout": (
                self.default_recording_layout or RecordingLayout.BEST_FIT
            ).value,
            "defaultCustomLayout": self.default_custom_layout or "",
        }


class TokenOptions(BaseModel):
    """Options for a single participant token."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    role: Optional[OpenViduRole] = Field(None, description="Role granted by the token")
    data: Optional[str] = Field(
        None, description="Opaque metadata delivered to other participants"
    )

    def to_request_body(self, session_id: Optional[str]) -> Dict[str, Any]:
        """
        Build the body of a token request.

        Args:
            session_id: Identifier of the owning session. Sent as-is, even
                when None; the server rejects unknown sessions.

        Returns:
            Dictionary ready to be serialized as JSON
        """
        return {
            "session": session_id,
            "role": (self.role or OpenViduRole.PUBLISHER).value,
            "data": self.data or "",
        }
