"""In-memory session storage; sessions vanish when the process exits."""

from __future__ import annotations

from collections import OrderedDict

from .base import SessionFactory, SessionStore
from ..domain.session import PackSession


class InMemorySessionStore(SessionStore):
    """Keep one PackSession per chat, evicting the least recently used past ``maxlen``."""

    def __init__(self, factory: SessionFactory, *, maxlen: int = 1000) -> None:
        self._factory = factory
        self._maxlen = maxlen
        self._sessions: OrderedDict[int, PackSession] = OrderedDict()

    def get_or_create(self, chat_id: int) -> PackSession:
        session = self._sessions.get(chat_id)
        if session is None:
            session = self._factory()
            self._sessions[chat_id] = session
            while len(self._sessions) > self._maxlen:
                self._sessions.popitem(last=False)
        else:
            self._sessions.move_to_end(chat_id)
        return session

    def discard(self, chat_id: int) -> None:
        self._sessions.pop(chat_id, None)

    def __len__(self) -> int:
        return len(self._sessions)
