"""
parley — single-conversation chat client for Python.

Sends each message to an HTTP responder and keeps the exchange as an
append-only transcript.
"""

from parley.client import Parley, AsyncParley
from parley.controller import SubmissionController
from parley.transcript import TranscriptStore
from parley.classifier import classify_failure
from parley.errors import ParleyError, ServerStatusError, MalformedReplyError, ConfigError
from parley.models.message import Message
from parley.models.errors import ServerError, NoResponse, RequestFailed
from parley.models.state import ChatView, SubmitOutcome

__version__ = "0.1.0"
__all__ = [
    "Parley",
    "AsyncParley",
    "SubmissionController",
    "TranscriptStore",
    "classify_failure",
    "ParleyError",
    "ServerStatusError",
    "MalformedReplyError",
    "ConfigError",
    "Message",
    "ServerError",
    "NoResponse",
    "RequestFailed",
    "ChatView",
    "SubmitOutcome",
]
