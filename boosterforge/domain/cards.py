"""Set, card and pack models."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Iterator, Sequence
from uuid import uuid4


@dataclass(frozen=True, slots=True)
class CardSet:
    """A released expansion the user can open packs from."""

    set_id: str
    name: str
    series: str
    release_date: date
    logo_url: str | None = None
    symbol_url: str | None = None
    total: int | None = None


@dataclass(frozen=True, slots=True)
class Card:
    """A card as returned by the catalog."""

    card_id: str
    name: str
    rarity: str = ""
    small_image: str | None = None
    large_image: str | None = None
    set_id: str | None = None

    @property
    def image_url(self) -> str | None:
        return self.large_image or self.small_image


@dataclass(frozen=True, slots=True)
class PackCard:
    """Card placed in a pack, tagged with a key used only for display identity."""

    card: Card
    key: str

    @classmethod
    def wrap(cls, card: Card) -> "PackCard":
        return cls(card=card, key=f"{card.card_id}-{uuid4().hex[:12]}")


@dataclass(frozen=True, slots=True)
class SlotResult:
    """Cards drawn for one slot of the layout."""

    rarity: str
    requested: int
    cards: tuple[Card, ...] = ()

    @property
    def is_short(self) -> bool:
        return len(self.cards) < self.requested


@dataclass(frozen=True, slots=True)
class Pack:
    """Opened booster pack: slot results in layout order and the flattened card list."""

    card_set: CardSet
    slots: tuple[SlotResult, ...] = ()
    cards: tuple[PackCard, ...] = ()

    @classmethod
    def assemble(cls, card_set: CardSet, slots: Sequence[SlotResult]) -> "Pack":
        cards = tuple(PackCard.wrap(card) for slot in slots for card in slot.cards)
        return cls(card_set=card_set, slots=tuple(slots), cards=cards)

    @property
    def is_short(self) -> bool:
        return any(slot.is_short for slot in self.slots)

    @property
    def requested(self) -> int:
        return sum(slot.requested for slot in self.slots)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[PackCard]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> PackCard:
        return self.cards[index]


_SLUG_SPACES = re.compile(r"\s+")


def rarity_slug(rarity: str) -> str:
    """Return a lower-case, hyphenated form of a rarity label ("Rare Ultra" -> "rare-ultra")."""
    return _SLUG_SPACES.sub("-", rarity.strip().lower())
