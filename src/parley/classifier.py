"""
Map a failed responder call to the error kind shown to the user.

Checks run in a fixed order: a response carrying a status wins, then a request
that went out without an answer, then the generic fallback. The function never
raises.
"""

import asyncio
from typing import Any, Optional

import httpx

from parley.models.errors import ErrorKind, NoResponse, RequestFailed, ServerError

# Raised before anything reaches the wire.
_UNDISPATCHED = (httpx.UnsupportedProtocol, httpx.LocalProtocolError)

_NO_RESPONSE = (httpx.TransportError, asyncio.TimeoutError, TimeoutError, ConnectionError)


def _attr(obj: Any, name: str) -> Any:
    # httpx raises RuntimeError from .request/.response when they were never set
    try:
        return getattr(obj, name, None)
    except Exception:
        return None


def _status_of(exc: BaseException) -> Optional[int]:
    for candidate in (exc, _attr(exc, "response")):
        status = _attr(candidate, "status_code")
        if isinstance(status, int) and not isinstance(status, bool):
            return status
    return None


def classify_failure(exc: BaseException) -> ErrorKind:
    status = _status_of(exc)
    if status is not None:
        return ServerError(status_code=status)
    if isinstance(exc, _NO_RESPONSE) and not isinstance(exc, _UNDISPATCHED):
        return NoResponse()
    return RequestFailed()
