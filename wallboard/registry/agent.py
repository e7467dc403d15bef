"""
Agent Record Model

Represents a call-center agent tracked by the wallboard.
Contains identity, display information and presence state.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AgentStatus(str, Enum):
    """Work states an agent can be moved into."""
    AVAILABLE = "Available"
    ACTIVE = "Active"
    WRAP_UP = "Wrap Up"
    NOT_READY = "Not Ready"
    OFFLINE = "Offline"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]


class AgentRecord(BaseModel):
    """
    Represents an agent held by the registry.

    Serialized with camelCase keys (``loginTime``) since that is what
    wallboard clients read.
    """

    model_config = ConfigDict(populate_by_name=True)

    # === Identity ===
    code: str = Field(
        ...,
        description="Unique agent code, used as the lookup key"
    )
    name: str = Field(
        ...,
        description="Display name"
    )

    # === Presence ===
    # Plain str rather than AgentStatus: seed data may carry legacy values
    # (e.g. "Busy") that are passed through as-is.
    status: str = Field(
        default=AgentStatus.AVAILABLE.value,
        description="Current agent status"
    )
    department: str = Field(
        default="Unknown",
        description="Department the agent belongs to"
    )
    login_time: str | None = Field(
        default=None,
        alias="loginTime",
        description="ISO-8601 login timestamp, null when logged out"
    )

    def to_public_dict(self) -> dict:
        """Return the JSON view of the agent."""
        return self.model_dump(by_alias=True)
