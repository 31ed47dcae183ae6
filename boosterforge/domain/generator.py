"""Pack generation: rarity slots, rare-slot roll and duplicate-free draws."""

from __future__ import annotations

import logging
from random import Random
from typing import Protocol, Sequence, TypeVar

from .cards import Card, CardSet, Pack, SlotResult
from .exceptions import CatalogUnavailable, PackGenerationFailed
from .layout import DEFAULT_LAYOUT, PackLayout, RareSlot, Slot
from ..catalog.base import DEFAULT_PAGE_SIZE, CardSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything producing uniform floats in [0, 1); ``random.Random`` qualifies."""

    def random(self) -> float:
        ...


def draw_without_replacement(pool: Sequence[T], amount: int, rng: RandomSource) -> list[T]:
    """Pick up to ``amount`` distinct entries from ``pool`` uniformly at random."""
    remaining = list(pool)
    selections: list[T] = []
    for _ in range(amount):
        if not remaining:
            break
        index = int(rng.random() * len(remaining))
        selections.append(remaining.pop(index))
    return selections


class PackGenerator:
    """Build packs for a set by querying the catalog slot by slot."""

    def __init__(
        self,
        source: CardSource,
        layout: PackLayout = DEFAULT_LAYOUT,
        *,
        rng: RandomSource | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._source = source
        self._layout = layout
        self._rng = rng or Random()
        self._page_size = page_size

    @property
    def layout(self) -> PackLayout:
        return self._layout

    async def generate(self, card_set: CardSet | None) -> Pack:
        if card_set is None:
            raise ValueError("A set must be selected before opening a pack")

        results: list[SlotResult] = []
        for slot in self._layout.slots:
            try:
                results.append(await self._resolve_slot(card_set, slot))
            except CatalogUnavailable as exc:
                logger.warning(
                    "Pack generation for set %s failed: %s", card_set.set_id, exc.message
                )
                raise PackGenerationFailed(exc) from exc

        pack = Pack.assemble(card_set, results)
        logger.info(
            "Opened pack for set %s: %s/%s cards",
            card_set.set_id,
            len(pack),
            pack.requested,
        )
        return pack

    async def _resolve_slot(self, card_set: CardSet, slot: Slot) -> SlotResult:
        rarity = self._slot_rarity(slot)
        pool = await self._source.find_cards_by_rarity(
            card_set.set_id, rarity, self._page_size
        )
        drawn: list[Card] = draw_without_replacement(pool, slot.count, self._rng)
        if len(drawn) < slot.count:
            logger.warning(
                "Set %s has only %s '%s' cards; slot wanted %s",
                card_set.set_id,
                len(drawn),
                rarity,
                slot.count,
            )
        return SlotResult(rarity=rarity, requested=slot.count, cards=tuple(drawn))

    def _slot_rarity(self, slot: Slot) -> str:
        if isinstance(slot, RareSlot):
            return slot.pick(self._rng.random())
        return slot.rarity
