"""
Wire payloads exchanged with the remote responder.
"""

from pydantic import BaseModel


class ReplyRequest(BaseModel):
    message: str


class ReplyPayload(BaseModel):
    """2xx body; `response` becomes the assistant message verbatim."""

    response: str
