"""AsyncParley / Parley facades and API URL resolution."""

import pytest

from parley.client import API_URL_ENV, AsyncParley, Parley, resolve_api_url
from parley.errors import ServerStatusError
from parley.models.errors import ServerError
from parley.models.message import Message
from parley.models.state import SubmitOutcome
from parley.transport.http import DEFAULT_API_URL


class TestResolveApiUrl:
    def test_explicit_wins(self, monkeypatch):
        monkeypatch.setenv(API_URL_ENV, "http://env.test/chat")
        assert resolve_api_url("http://explicit.test/chat") == "http://explicit.test/chat"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv(API_URL_ENV, "http://env.test/chat")
        assert resolve_api_url() == "http://env.test/chat"

    def test_default(self, monkeypatch):
        monkeypatch.delenv(API_URL_ENV, raising=False)
        assert resolve_api_url() == DEFAULT_API_URL


class TestAsyncParley:
    @pytest.mark.asyncio
    async def test_say_round_trip(self, responder):
        async with AsyncParley(responder=responder) as client:
            assert await client.say("  Hello ") is SubmitOutcome.REPLIED
            view = client.snapshot()

        assert view.transcript == (Message.user("Hello"), Message.assistant("Hi there"))
        assert view.busy is False
        assert view.error is None

    @pytest.mark.asyncio
    async def test_say_failure_sets_error(self, responder):
        responder.error = ServerStatusError(500)
        client = AsyncParley(responder=responder)

        assert await client.say("Ping") is SubmitOutcome.FAILED
        assert client.last_error == ServerError(status_code=500)
        assert client.transcript.all() == (Message.user("Ping"),)
        await client.close()

    @pytest.mark.asyncio
    async def test_update_draft_then_submit(self, responder):
        client = AsyncParley(responder=responder)
        assert client.update_draft("Hello") is True
        assert await client.submit() is SubmitOutcome.REPLIED
        assert len(client.transcript) == 2

    @pytest.mark.asyncio
    async def test_blank_say_rejected(self, responder):
        client = AsyncParley(responder=responder)
        assert await client.say("   ") is SubmitOutcome.REJECTED
        assert responder.calls == []

    def test_builds_http_responder_from_url(self):
        client = AsyncParley(api_url="http://responder.test/chat")
        assert client.api_url == "http://responder.test/chat"


class TestParley:
    def test_sync_round_trip(self, responder):
        client = Parley(responder=responder)
        views = []
        client.subscribe(views.append)
        try:
            assert client.say("Hello") is SubmitOutcome.REPLIED
            assert client.busy is False
            assert client.last_error is None
            assert client.transcript.all()[-1] == Message.assistant("Hi there")
            assert views[-1] == client.snapshot()
        finally:
            client.close()

    def test_sync_submit(self, responder):
        client = Parley(responder=responder)
        try:
            client.update_draft("Hello")
            assert client.submit() is SubmitOutcome.REPLIED
        finally:
            client.close()
