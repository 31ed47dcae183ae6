"""Catalog abstractions used by the BoosterForge services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.cards import Card, CardSet

DEFAULT_PAGE_SIZE = 100


class CardSource(Protocol):
    async def list_sets(self) -> Sequence[CardSet]:
        ...

    async def find_cards_by_rarity(
        self, set_id: str, rarity: str, page_size: int = DEFAULT_PAGE_SIZE
    ) -> Sequence[Card]:
        ...
