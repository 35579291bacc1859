"""
HTTP responder — POSTs {"message": ...} and reads {"response": ...} back.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from parley.errors import MalformedReplyError, ServerStatusError
from parley.models.payload import ReplyPayload, ReplyRequest

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000/chat"
DEFAULT_TIMEOUT_S = 30.0


class HttpResponder:
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_url = api_url
        self._client = httpx.AsyncClient(
            headers={"User-Agent": "parley/0.1.0", "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def api_url(self) -> str:
        return self._api_url

    async def reply(self, message: str) -> str:
        """Send one message and return the reply text verbatim.

        Raises ServerStatusError on any non-2xx status, MalformedReplyError when a
        2xx body is not a usable reply; transport failures propagate as httpx errors.
        """
        body = ReplyRequest(message=message).model_dump()
        logger.debug(f"POST {self._api_url} ({len(message)} chars)")
        resp = await self._client.post(self._api_url, json=body)
        logger.debug(f"POST {self._api_url} -> {resp.status_code}")
        if not resp.is_success:
            raise ServerStatusError(resp.status_code, resp.text)
        try:
            payload = ReplyPayload.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise MalformedReplyError(f"Unusable reply body: {resp.text[:200]}", {"status_code": resp.status_code}) from e
        if not payload.response.strip():
            raise MalformedReplyError("Reply body has an empty response", {"status_code": resp.status_code})
        return payload.response

    async def close(self) -> None:
        await self._client.aclose()
