"""Testing utilities for BoosterForge."""

from .catalog import InMemoryCatalog
from .factory import CardFactory, SetFactory
from .fixtures import app_fixture, memory_app, stocked_catalog
from .rng import ScriptedRandom

__all__ = [
    "InMemoryCatalog",
    "CardFactory",
    "SetFactory",
    "app_fixture",
    "memory_app",
    "stocked_catalog",
    "ScriptedRandom",
]
