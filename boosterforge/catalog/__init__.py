"""Card catalog access."""

from .base import DEFAULT_PAGE_SIZE, CardSource
from .http import DEFAULT_BASE_URL, PokemonTCGClient

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_PAGE_SIZE",
    "CardSource",
    "PokemonTCGClient",
]
