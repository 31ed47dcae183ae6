"""Per-user view model tying set selection, pack generation and the reveal together."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Sequence

from .cards import CardSet, PackCard
from .exceptions import CatalogUnavailable, GenerationInProgress, PackGenerationFailed
from .generator import PackGenerator
from .reveal import (
    RevealPhase,
    RevealState,
    advance,
    is_swipe_advance,
    reset_reveal,
    start_reveal,
)
from ..catalog.base import CardSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionState:
    """Everything a view needs to render the simulator."""

    sets: tuple[CardSet, ...] = ()
    selected_set: CardSet | None = None
    reveal: RevealState = field(default_factory=RevealState)
    loading: bool = False
    error: str | None = None


class PackSession:
    """Apply user actions to a single immutable ``SessionState``."""

    def __init__(self, source: CardSource, generator: PackGenerator) -> None:
        self._source = source
        self._generator = generator
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def phase(self) -> RevealPhase:
        return self._state.reveal.phase

    @property
    def current_card(self) -> PackCard | None:
        return self._state.reveal.current

    async def load_sets(self) -> Sequence[CardSet]:
        self._state = replace(self._state, error=None)
        try:
            sets = tuple(await self._source.list_sets())
        except CatalogUnavailable as exc:
            logger.warning("Could not load sets: %s", exc.message)
            self._state = replace(self._state, error=exc.message)
            return self._state.sets

        selected = self._state.selected_set
        if selected is None or selected not in sets:
            selected = sets[0] if sets else None
        self._state = replace(self._state, sets=sets, selected_set=selected)
        return sets

    def select_set(self, set_id: str) -> CardSet:
        for card_set in self._state.sets:
            if card_set.set_id == set_id:
                self._state = replace(self._state, selected_set=card_set)
                return card_set
        raise KeyError(f"Set {set_id} not found")

    async def open_pack(self) -> bool:
        """Generate a pack for the selected set and start revealing it.

        Returns False when nothing happened: no set selected, a reveal still
        running, or the catalog failing (the message lands in ``state.error``).
        Raises GenerationInProgress when called while a pack is being opened.
        """
        if self._state.loading:
            raise GenerationInProgress("A pack is already being opened")
        card_set = self._state.selected_set
        if card_set is None:
            return False
        if self.phase is RevealPhase.REVEALING:
            logger.debug("Ignoring open request while a pack is being revealed")
            return False

        self._state = replace(self._state, loading=True, error=None)
        try:
            pack = await self._generator.generate(card_set)
        except PackGenerationFailed as exc:
            self._state = replace(self._state, error=str(exc))
            return False
        else:
            self._state = replace(self._state, reveal=start_reveal(pack))
            return True
        finally:
            self._state = replace(self._state, loading=False)

    def next_card(self) -> RevealState:
        self._state = replace(self._state, reveal=advance(self._state.reveal))
        return self._state.reveal

    def swipe(self, start_x: float, end_x: float) -> RevealState:
        if is_swipe_advance(start_x, end_x):
            return self.next_card()
        return self._state.reveal

    def reset(self) -> RevealState:
        if self._state.loading:
            return self._state.reveal
        self._state = replace(self._state, reveal=reset_reveal())
        return self._state.reveal

    def dismiss_error(self) -> None:
        self._state = replace(self._state, error=None)
