"""BoosterForge public API."""

from .app import SimulatorApp
from .config import BoosterForgeConfig, CatalogConfig
from .domain.layout import DEFAULT_LAYOUT, PackLayout

__all__ = [
    "SimulatorApp",
    "BoosterForgeConfig",
    "CatalogConfig",
    "DEFAULT_LAYOUT",
    "PackLayout",
]
