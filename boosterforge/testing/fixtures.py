"""Pytest fixtures for BoosterForge."""

from __future__ import annotations

from datetime import date

import pytest

from ..app import SimulatorApp
from ..config import BoosterForgeConfig
from ..domain.cards import CardSet
from .catalog import InMemoryCatalog
from .factory import CardFactory

DEFAULT_RARITIES = {
    "Common": 100,
    "Uncommon": 100,
    "Rare": 100,
    "Rare Ultra": 100,
    "Secret Rare": 100,
}


def stocked_catalog(
    set_id: str = "base1",
    rarities: dict[str, int] | None = None,
) -> InMemoryCatalog:
    """Catalog with one set and ``rarities`` cards of each rarity."""
    card_set = CardSet(
        set_id=set_id,
        name="Base",
        series="Base",
        release_date=date(1999, 1, 9),
        logo_url="https://images.example.test/base1/logo.png",
    )
    catalog = InMemoryCatalog(sets=[card_set])
    factory = CardFactory()
    for rarity, amount in (DEFAULT_RARITIES if rarities is None else rarities).items():
        catalog.add_cards(factory.batch(amount, set_id, rarity))
    return catalog


@pytest.fixture()
def catalog() -> InMemoryCatalog:
    return stocked_catalog()


@pytest.fixture()
def memory_app(catalog: InMemoryCatalog) -> SimulatorApp:
    config = BoosterForgeConfig(rng_seed=7)
    return SimulatorApp(config, source=catalog)


def app_fixture(catalog: InMemoryCatalog | None = None, **kwargs) -> SimulatorApp:
    """Helper for ad-hoc scripts where pytest is not available."""
    config = BoosterForgeConfig(**kwargs)
    return SimulatorApp(config, source=catalog or stocked_catalog())
