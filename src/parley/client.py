"""
Parley / AsyncParley — main client objects.
"""

import asyncio
import os
from typing import Any, Callable, Optional

from parley.controller import Listener, RemoteResponder, SubmissionController
from parley.models.errors import ErrorKind
from parley.models.state import ChatView, SubmitOutcome
from parley.transcript import TranscriptStore
from parley.transport.http import DEFAULT_API_URL, DEFAULT_TIMEOUT_S, HttpResponder

API_URL_ENV = "PARLEY_API_URL"


def resolve_api_url(provided: Optional[str] = None) -> str:
    return provided or os.environ.get(API_URL_ENV) or DEFAULT_API_URL


class AsyncParley:
    """Async single-conversation client (primary)."""

    def __init__(
        self,
        api_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_S,
        responder: Optional[RemoteResponder] = None,
    ):
        self._api_url = resolve_api_url(api_url)
        self._http: Optional[HttpResponder] = None
        if responder is None:
            self._http = HttpResponder(api_url=self._api_url, timeout=timeout)
            responder = self._http
        self.transcript = TranscriptStore()
        self.controller = SubmissionController(responder, self.transcript)

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def busy(self) -> bool:
        return self.controller.busy

    @property
    def last_error(self) -> Optional[ErrorKind]:
        return self.controller.last_error

    def snapshot(self) -> ChatView:
        return self.controller.snapshot()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.controller.subscribe(listener)

    def update_draft(self, text: str) -> bool:
        return self.controller.update_draft(text)

    async def submit(self) -> SubmitOutcome:
        return await self.controller.submit()

    async def say(self, text: str) -> SubmitOutcome:
        """Convenience: replace the draft and submit it."""
        if not self.controller.update_draft(text):
            return SubmitOutcome.REJECTED
        return await self.controller.submit()

    async def close(self) -> None:
        if self._http:
            await self._http.close()

    async def __aenter__(self) -> "AsyncParley":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()


class Parley:
    """Sync wrapper around AsyncParley. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncParley(**kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def transcript(self) -> TranscriptStore:
        return self._async.transcript

    @property
    def api_url(self) -> str:
        return self._async.api_url

    @property
    def busy(self) -> bool:
        return self._async.busy

    @property
    def last_error(self) -> Optional[ErrorKind]:
        return self._async.last_error

    def snapshot(self) -> ChatView:
        return self._async.snapshot()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._async.subscribe(listener)

    def update_draft(self, text: str) -> bool:
        return self._async.update_draft(text)

    def submit(self) -> SubmitOutcome:
        return self._run(self._async.submit())

    def say(self, text: str) -> SubmitOutcome:
        return self._run(self._async.say(text))

    def close(self) -> None:
        try:
            self._run(self._async.close())
        finally:
            self._loop.close()
