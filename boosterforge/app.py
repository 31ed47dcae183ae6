"""Top level application object for BoosterForge front ends."""

from __future__ import annotations

import logging
from random import Random
from typing import Any

from .catalog.base import CardSource
from .catalog.http import PokemonTCGClient
from .config import BoosterForgeConfig
from .domain.generator import PackGenerator, RandomSource
from .domain.layout import DEFAULT_LAYOUT, PackLayout
from .domain.session import PackSession
from .loaders import load_layout_from_json
from .storage.base import SessionStore
from .storage.memory import InMemorySessionStore

logger = logging.getLogger(__name__)


class SimulatorApp:
    """Central dependency container used by the bot and the terminal opener."""

    def __init__(
        self,
        config: BoosterForgeConfig,
        *,
        source: CardSource | None = None,
        rng: RandomSource | None = None,
        layout: PackLayout | None = None,
        session_store: SessionStore | None = None,
    ) -> None:
        self.config = config
        self._owned_client: PokemonTCGClient | None = None
        self.source = source or self._build_client()
        self.layout = layout or self._resolve_layout()

        self._rng = rng or (Random(config.rng_seed) if config.rng_seed is not None else Random())
        self.generator = PackGenerator(
            self.source,
            self.layout,
            rng=self._rng,
            page_size=config.catalog.page_size,
        )
        self.sessions = session_store or InMemorySessionStore(self.new_session)

    def _build_client(self) -> PokemonTCGClient:
        catalog = self.config.catalog
        client = PokemonTCGClient(
            self.config.require_api_key(),
            base_url=catalog.base_url,
            timeout=catalog.timeout_seconds,
        )
        self._owned_client = client
        return client

    def _resolve_layout(self) -> PackLayout:
        if self.config.layout_path is None:
            return DEFAULT_LAYOUT
        logger.info("Loading pack layout from %s", self.config.layout_path)
        return load_layout_from_json(self.config.layout_path)

    def new_session(self) -> PackSession:
        return PackSession(self.source, self.generator)

    def session(self, chat_id: int) -> PackSession:
        return self.sessions.get_or_create(chat_id)

    def snapshot(self) -> dict[str, Any]:
        """Export current configuration for debugging."""
        return {
            "catalog": self.config.catalog.base_url,
            "page_size": self.config.catalog.page_size,
            "pack_size": self.layout.size,
            "slots": [list(slot.rarities()) for slot in self.layout.slots],
            "sessions": len(self.sessions),
        }

    async def aclose(self) -> None:
        """Release the HTTP client created by the app, if any."""
        if self._owned_client is not None:
            await self._owned_client.aclose()
