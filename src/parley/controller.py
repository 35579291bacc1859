"""
Submission controller — drives one submit-and-reply cycle at a time.

States:
- idle:     draft is editable, last_error may be set from the previous cycle
- sending:  one request in flight; edits and new submissions are rejected

The user's message is appended before the responder is awaited, and the
sending flag is cleared on every exit path.
"""

import logging
from typing import Callable, Optional, Protocol

from parley.classifier import classify_failure
from parley.models.errors import ErrorKind
from parley.models.message import Message
from parley.models.state import ChatView, Phase, SubmissionState, SubmitOutcome
from parley.transcript import TranscriptStore

logger = logging.getLogger(__name__)

Listener = Callable[[ChatView], None]


class RemoteResponder(Protocol):
    async def reply(self, message: str) -> str: ...


class SubmissionController:
    def __init__(self, responder: RemoteResponder, transcript: Optional[TranscriptStore] = None):
        self._responder = responder
        self._transcript = transcript if transcript is not None else TranscriptStore()
        self._state = SubmissionState()
        self._listeners: list[Listener] = []

    @property
    def transcript(self) -> TranscriptStore:
        return self._transcript

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._state.sending

    @property
    def draft(self) -> str:
        return self._state.draft

    @property
    def last_error(self) -> Optional[ErrorKind]:
        return self._state.last_error

    def snapshot(self) -> ChatView:
        return ChatView(
            transcript=self._transcript.all(),
            draft=self._state.draft,
            busy=self._state.sending,
            error=self._state.last_error,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` with a fresh ChatView after every change. Returns an unsubscribe function."""
        self._listeners.append(listener)
        def remove() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass
        return remove

    def update_draft(self, text: str) -> bool:
        """Replace the draft verbatim and clear any shown error. Ignored while sending."""
        if self._state.sending:
            logger.debug("Draft update rejected: request in flight")
            return False
        self._set(self._state.model_copy(update={"draft": text, "last_error": None}))
        return True

    async def submit(self) -> SubmitOutcome:
        if self._state.sending or not self._state.draft.strip():
            logger.debug("Submit rejected: empty draft or request in flight")
            return SubmitOutcome.REJECTED

        user_message = self._state.draft.strip()
        error: Optional[ErrorKind] = None
        try:
            self._set(SubmissionState(phase=Phase.SENDING, pending=user_message))
            self._transcript.append(Message.user(user_message))
            self._set(self._state.model_copy(update={"user_message_appended": True}))
            try:
                reply = await self._responder.reply(user_message)
                self._transcript.append(Message.assistant(reply))
            except Exception as e:
                error = classify_failure(e)
                logger.warning(f"Reply failed ({error.kind}): {e!r}")
        finally:
            self._set(SubmissionState(phase=Phase.IDLE, last_error=error))

        return SubmitOutcome.FAILED if error is not None else SubmitOutcome.REPLIED

    def _set(self, state: SubmissionState) -> None:
        if state.phase is not self._state.phase:
            logger.debug(f"Submission {self._state.phase.value} -> {state.phase.value}")
        self._state = state
        view = self.snapshot()
        for listener in list(self._listeners):
            listener(view)
