"""Shared fixtures: an in-process responder standing in for the HTTP endpoint."""

import asyncio
from typing import Optional

import pytest

from parley.controller import SubmissionController


class FakeResponder:
    """Records calls; optionally waits on `gate` and raises `error` instead of replying."""

    def __init__(self, reply: str = "Hi there", error: Optional[BaseException] = None):
        self.reply_text = reply
        self.error = error
        self.gate: Optional[asyncio.Event] = None
        self.calls: list[str] = []

    async def reply(self, message: str) -> str:
        self.calls.append(message)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.reply_text


@pytest.fixture
def responder() -> FakeResponder:
    return FakeResponder()


@pytest.fixture
def controller(responder: FakeResponder) -> SubmissionController:
    return SubmissionController(responder)
