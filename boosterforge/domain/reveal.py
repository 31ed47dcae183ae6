"""Card-by-card reveal state machine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .cards import Pack, PackCard

SWIPE_THRESHOLD = 50


class RevealPhase(str, Enum):
    NO_PACK = "no_pack"
    REVEALING = "revealing"
    SUMMARY = "summary"


@dataclass(frozen=True, slots=True)
class RevealState:
    pack: Pack | None = None
    index: int = 0
    complete: bool = False

    @property
    def phase(self) -> RevealPhase:
        if self.pack is None:
            return RevealPhase.NO_PACK
        if self.complete:
            return RevealPhase.SUMMARY
        return RevealPhase.REVEALING

    @property
    def current(self) -> PackCard | None:
        if self.phase is not RevealPhase.REVEALING:
            return None
        return self.pack[self.index]

    @property
    def total(self) -> int:
        return len(self.pack) if self.pack is not None else 0


def start_reveal(pack: Pack) -> RevealState:
    """Begin revealing ``pack``; an empty pack goes straight to the summary."""
    return RevealState(pack=pack, index=0, complete=len(pack) == 0)


def advance(state: RevealState) -> RevealState:
    """Show the next card, or the summary after the last one."""
    if state.phase is not RevealPhase.REVEALING:
        return state
    if state.index < state.total - 1:
        return replace(state, index=state.index + 1)
    return replace(state, complete=True)


def reset_reveal() -> RevealState:
    return RevealState()


def is_swipe_advance(start_x: float, end_x: float, threshold: float = SWIPE_THRESHOLD) -> bool:
    """Leftward swipes longer than ``threshold`` count as an advance."""
    return start_x - end_x > threshold
