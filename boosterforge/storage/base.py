"""Storage abstractions used by the BoosterForge surfaces."""

from __future__ import annotations

from typing import Callable, Protocol

from ..domain.session import PackSession

SessionFactory = Callable[[], PackSession]


class SessionStore(Protocol):
    def get_or_create(self, chat_id: int) -> PackSession:
        ...

    def discard(self, chat_id: int) -> None:
        ...

    def __len__(self) -> int:
        ...
