"""
Submission state and the view handed to renderers.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from parley.models.errors import ErrorKind
from parley.models.message import Message


class Phase(str, Enum):
    IDLE = "idle"
    SENDING = "sending"


class SubmitOutcome(str, Enum):
    REJECTED = "rejected"   # empty draft or already sending
    REPLIED = "replied"
    FAILED = "failed"


class SubmissionState(BaseModel):
    """Idle, Sending, or Idle carrying the last error."""

    model_config = ConfigDict(frozen=True)

    phase: Phase = Phase.IDLE
    draft: str = ""
    pending: Optional[str] = None
    user_message_appended: bool = False
    last_error: Optional[ErrorKind] = None

    @property
    def sending(self) -> bool:
        return self.phase is Phase.SENDING


class ChatView(BaseModel):
    """Everything a renderer needs; rebuilt on every state change."""

    model_config = ConfigDict(frozen=True)

    transcript: tuple[Message, ...] = ()
    draft: str = ""
    busy: bool = False
    error: Optional[ErrorKind] = None
