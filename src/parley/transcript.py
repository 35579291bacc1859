"""
Append-only transcript for one conversation.
"""

from typing import Iterator, Optional

from parley.models.message import Message


class TranscriptStore:
    def __init__(self) -> None:
        self._messages: list[Message] = []

    def append(self, message: Message) -> None:
        self._messages.append(message)

    def all(self) -> tuple[Message, ...]:
        """Snapshot in insertion order; later appends do not affect it."""
        return tuple(self._messages)

    def last(self) -> Optional[Message]:
        return self._messages[-1] if self._messages else None

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.all())

    def __repr__(self) -> str:
        return f"TranscriptStore(messages={len(self._messages)})"
