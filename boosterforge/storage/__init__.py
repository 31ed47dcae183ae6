"""Session storage backends for BoosterForge."""

from .base import SessionFactory, SessionStore
from .memory import InMemorySessionStore

__all__ = [
    "SessionFactory",
    "SessionStore",
    "InMemorySessionStore",
]
