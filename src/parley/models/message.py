"""
Transcript entries.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

USER_ROLE = "user"
ASSISTANT_ROLE = "assistant"
Role = Literal["user", "assistant"]


class Message(BaseModel):
    """One transcript entry. Frozen: order and content never change once appended."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str

    @field_validator("content")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message content must not be empty")
        return value

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(role=USER_ROLE, content=text.strip())

    @classmethod
    def assistant(cls, text: str) -> "Message":
        return cls(role=ASSISTANT_ROLE, content=text)
