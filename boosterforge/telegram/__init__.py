"""Telegram integration helpers."""

from .aiogram_router import build_router
from .keyboards import pack_keyboard, reveal_keyboard, set_picker_keyboard, summary_keyboard

__all__ = [
    "build_router",
    "pack_keyboard",
    "reveal_keyboard",
    "set_picker_keyboard",
    "summary_keyboard",
]
