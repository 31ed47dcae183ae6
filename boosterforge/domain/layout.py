"""Pack layouts: which rarities a pack contains and how many of each."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union


@dataclass(frozen=True, slots=True)
class PackSlot:
    """Fixed slot: always filled with ``count`` cards of ``rarity``."""

    rarity: str
    count: int

    def rarities(self) -> tuple[str, ...]:
        return (self.rarity,)


@dataclass(frozen=True, slots=True)
class RarityBand:
    """Rarity picked when the roll is below ``upper`` and no earlier band matched."""

    rarity: str
    upper: float


@dataclass(frozen=True, slots=True)
class RareSlot:
    """Slot whose rarity is rolled once per pack from cumulative bands."""

    bands: tuple[RarityBand, ...]
    count: int = 1

    def pick(self, value: float) -> str:
        """Return the rarity for a roll in [0, 1)."""
        for band in self.bands:
            if value < band.upper:
                return band.rarity
        return self.bands[-1].rarity

    def rarities(self) -> tuple[str, ...]:
        return tuple(band.rarity for band in self.bands)


Slot = Union[PackSlot, RareSlot]


@dataclass(frozen=True, slots=True)
class PackLayout:
    """Ordered slot declaration for one pack."""

    slots: tuple[Slot, ...]

    @classmethod
    def of(cls, slots: Sequence[Slot]) -> "PackLayout":
        return cls(slots=tuple(slots))

    @property
    def size(self) -> int:
        return sum(slot.count for slot in self.slots)

    def rare_slots(self) -> tuple[RareSlot, ...]:
        return tuple(slot for slot in self.slots if isinstance(slot, RareSlot))


DEFAULT_RARE_BANDS = (
    RarityBand("Secret Rare", 0.02),
    RarityBand("Rare Ultra", 0.15),
    RarityBand("Rare", 1.0),
)

DEFAULT_LAYOUT = PackLayout.of(
    [
        PackSlot("Common", 6),
        PackSlot("Uncommon", 3),
        RareSlot(DEFAULT_RARE_BANDS),
    ]
)
