"""Monte-Carlo check of rare-slot odds without touching the catalog."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from random import Random

from ..domain.generator import RandomSource
from ..domain.layout import PackLayout


@dataclass(slots=True)
class SimulationResult:
    rolls: int
    counts: list[Counter[str]] = field(default_factory=list)

    def ratios(self, slot_index: int = 0) -> dict[str, float]:
        counts = self.counts[slot_index]
        if not self.rolls:
            return {rarity: 0.0 for rarity in counts}
        return {rarity: amount / self.rolls for rarity, amount in counts.items()}


class RareSlotSimulator:
    """Roll every rare slot of a layout many times and tally the picked rarities."""

    def __init__(self, layout: PackLayout, *, rng: RandomSource | None = None) -> None:
        self._layout = layout
        self._rng = rng or Random()

    def simulate(self, *, rolls: int = 10000) -> SimulationResult:
        rare_slots = self._layout.rare_slots()
        result = SimulationResult(rolls=rolls)
        for slot in rare_slots:
            counts: Counter[str] = Counter({rarity: 0 for rarity in slot.rarities()})
            for _ in range(rolls):
                counts[slot.pick(self._rng.random())] += 1
            result.counts.append(counts)
        return result
