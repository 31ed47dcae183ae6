"""Domain models and services."""

from .cards import Card, CardSet, Pack, PackCard, SlotResult, rarity_slug
from .exceptions import (
    BoosterForgeError,
    CatalogUnavailable,
    ConfigurationMissing,
    GenerationInProgress,
    PackGenerationFailed,
)
from .generator import PackGenerator, RandomSource, draw_without_replacement
from .layout import DEFAULT_LAYOUT, PackLayout, PackSlot, RareSlot, RarityBand
from .reveal import RevealPhase, RevealState, advance, is_swipe_advance, reset_reveal, start_reveal
from .session import PackSession, SessionState

__all__ = [
    "Card",
    "CardSet",
    "Pack",
    "PackCard",
    "SlotResult",
    "rarity_slug",
    "BoosterForgeError",
    "CatalogUnavailable",
    "ConfigurationMissing",
    "GenerationInProgress",
    "PackGenerationFailed",
    "PackGenerator",
    "RandomSource",
    "draw_without_replacement",
    "DEFAULT_LAYOUT",
    "PackLayout",
    "PackSlot",
    "RareSlot",
    "RarityBand",
    "RevealPhase",
    "RevealState",
    "advance",
    "is_swipe_advance",
    "reset_reveal",
    "start_reveal",
    "PackSession",
    "SessionState",
]
