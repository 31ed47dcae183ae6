"""Keyboard helpers for the BoosterForge bot."""

from __future__ import annotations

from typing import Sequence

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from ..domain.cards import CardSet

SETS_PER_PAGE = 8

CALLBACK_PREFIX = "bf"
PAGE = f"{CALLBACK_PREFIX}:page:"
SELECT_SET = f"{CALLBACK_PREFIX}:set:"
OPEN_PACK = f"{CALLBACK_PREFIX}:open"
NEXT_CARD = f"{CALLBACK_PREFIX}:next"
RESET_PACK = f"{CALLBACK_PREFIX}:reset"
SHOW_SETS = f"{CALLBACK_PREFIX}:page:0"


def page_count(total: int, per_page: int = SETS_PER_PAGE) -> int:
    return max(1, -(-total // per_page))


def set_picker_keyboard(
    sets: Sequence[CardSet],
    page: int = 0,
    *,
    selected_id: str | None = None,
    per_page: int = SETS_PER_PAGE,
) -> InlineKeyboardMarkup:
    pages = page_count(len(sets), per_page)
    page = min(max(page, 0), pages - 1)
    chunk = sets[page * per_page : (page + 1) * per_page]

    rows = []
    for card_set in chunk:
        marker = "✅ " if card_set.set_id == selected_id else ""
        rows.append(
            [
                InlineKeyboardButton(
                    text=f"{marker}{card_set.name} ({card_set.series})",
                    callback_data=f"{SELECT_SET}{card_set.set_id}",
                )
            ]
        )

    nav = []
    if page > 0:
        nav.append(InlineKeyboardButton(text="◀️ Newer", callback_data=f"{PAGE}{page - 1}"))
    if page < pages - 1:
        nav.append(InlineKeyboardButton(text="Older ▶️", callback_data=f"{PAGE}{page + 1}"))
    if nav:
        rows.append(nav)
    return InlineKeyboardMarkup(inline_keyboard=rows)


def pack_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [InlineKeyboardButton(text="✨ Open pack", callback_data=OPEN_PACK)],
            [InlineKeyboardButton(text="📚 Choose another set", callback_data=SHOW_SETS)],
        ]
    )


def reveal_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[[InlineKeyboardButton(text="➡️ Next card", callback_data=NEXT_CARD)]]
    )


def summary_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [InlineKeyboardButton(text="🔄 Open another pack", callback_data=RESET_PACK)],
            [InlineKeyboardButton(text="📚 Choose another set", callback_data=SHOW_SETS)],
        ]
    )
