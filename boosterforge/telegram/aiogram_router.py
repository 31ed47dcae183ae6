"""Factory helpers to wire BoosterForge sessions into aiogram."""

from __future__ import annotations

import logging

from aiogram import Router
from aiogram.filters import Command
from aiogram.types import CallbackQuery, InlineKeyboardMarkup, InputMediaPhoto, Message

from ..app import SimulatorApp
from ..domain.cards import CardSet, Pack, PackCard
from ..domain.exceptions import GenerationInProgress
from ..domain.reveal import RevealPhase
from ..domain.session import PackSession, SessionState
from .api_utils import (
    safe_api_call,
    safe_callback_answer,
    safe_replace_photo,
    safe_send_photo,
    safe_send_text,
)
from .keyboards import (
    NEXT_CARD,
    OPEN_PACK,
    PAGE,
    RESET_PACK,
    SELECT_SET,
    SETS_PER_PAGE,
    pack_keyboard,
    page_count,
    reveal_keyboard,
    set_picker_keyboard,
    summary_keyboard,
)

logger = logging.getLogger(__name__)

LOADING_TEXT = "⏳ Opening pack..."
MEDIA_GROUP_LIMIT = 10


def build_router(app: SimulatorApp) -> Router:
    router = Router()

    @router.message(Command("start", "sets"))
    async def handle_start(message: Message) -> None:
        session = app.session(message.chat.id)
        await session.load_sets()
        await safe_send_text(
            message,
            format_set_picker(session.state, page=0),
            reply_markup=_picker_markup(session.state, 0),
        )

    @router.message(Command("open"))
    async def handle_open_command(message: Message) -> None:
        session = app.session(message.chat.id)
        if session.state.selected_set is None:
            await session.load_sets()
        await _open_pack(message, session)

    @router.callback_query(lambda c: c.data and c.data.startswith(PAGE))
    async def handle_page(callback: CallbackQuery) -> None:
        if not callback.message or not callback.data:
            return
        session = app.session(callback.message.chat.id)
        if not session.state.sets:
            await session.load_sets()
        page = _parse_page(callback.data)
        await safe_callback_answer(callback)
        await safe_api_call(
            "message.edit_text",
            callback.message.edit_text,
            format_set_picker(session.state, page=page),
            reply_markup=_picker_markup(session.state, page),
        )

    @router.callback_query(lambda c: c.data and c.data.startswith(SELECT_SET))
    async def handle_select_set(callback: CallbackQuery) -> None:
        if not callback.message or not callback.data:
            return
        session = app.session(callback.message.chat.id)
        set_id = callback.data.removeprefix(SELECT_SET)
        try:
            card_set = session.select_set(set_id)
        except KeyError:
            await session.load_sets()
            try:
                card_set = session.select_set(set_id)
            except KeyError:
                await safe_callback_answer(callback, "This set is no longer available.", show_alert=True)
                return
        await safe_callback_answer(callback)
        await safe_api_call(
            "message.edit_text",
            callback.message.edit_text,
            format_pack_message(card_set),
            reply_markup=pack_keyboard(),
        )

    @router.callback_query(lambda c: c.data == OPEN_PACK)
    async def handle_open(callback: CallbackQuery) -> None:
        if not callback.message:
            return
        session = app.session(callback.message.chat.id)
        if session.state.loading:
            await safe_callback_answer(callback, LOADING_TEXT, show_alert=True)
            return
        await safe_callback_answer(callback)
        await _open_pack(callback.message, session)

    @router.callback_query(lambda c: c.data == NEXT_CARD)
    async def handle_next(callback: CallbackQuery) -> None:
        if not callback.message:
            return
        session = app.session(callback.message.chat.id)
        if session.phase is not RevealPhase.REVEALING:
            await safe_callback_answer(callback, "No pack is being revealed.", show_alert=True)
            return
        await safe_callback_answer(callback)
        reveal = session.next_card()
        if reveal.phase is RevealPhase.REVEALING:
            await _show_current_card(callback.message, session, replace=True)
            return
        await safe_api_call(
            "message.edit_reply_markup", callback.message.edit_reply_markup, reply_markup=None
        )
        await _show_summary(callback.message, reveal.pack)

    @router.callback_query(lambda c: c.data == RESET_PACK)
    async def handle_reset(callback: CallbackQuery) -> None:
        if not callback.message:
            return
        session = app.session(callback.message.chat.id)
        if session.state.loading:
            await safe_callback_answer(callback, LOADING_TEXT, show_alert=True)
            return
        session.reset()
        await safe_callback_answer(callback)
        card_set = session.state.selected_set
        if card_set is None:
            await safe_send_text(callback.message, format_set_picker(session.state, page=0))
            return
        await safe_send_text(
            callback.message, format_pack_message(card_set), reply_markup=pack_keyboard()
        )

    return router


async def _open_pack(message: Message, session: PackSession) -> None:
    if session.state.selected_set is None:
        await safe_send_text(message, format_set_picker(session.state, page=0))
        return
    if session.phase is RevealPhase.REVEALING:
        await safe_send_text(message, "Finish revealing the current pack first.")
        return

    loading = await safe_send_text(message, LOADING_TEXT)
    try:
        opened = await session.open_pack()
    except GenerationInProgress:
        logger.info("Duplicate open request in chat %s ignored", message.chat.id)
        opened = None
    finally:
        if loading is not None:
            await safe_api_call("message.delete", loading.delete)

    if opened is None:
        await safe_send_text(message, "A pack is already being opened, hang on.")
        return
    if not opened:
        card_set = session.state.selected_set
        text = format_error(session.state.error or "The pack could not be opened.")
        if card_set is not None:
            text = f"{text}\n\n{format_pack_message(card_set)}"
        await safe_send_text(message, text, reply_markup=pack_keyboard())
        return

    if session.phase is RevealPhase.SUMMARY:
        await _show_summary(message, session.state.reveal.pack)
        return
    await _show_current_card(message, session, replace=False)


async def _show_current_card(message: Message, session: PackSession, *, replace: bool) -> None:
    reveal = session.state.reveal
    pack_card = reveal.current
    if pack_card is None:
        return
    caption = format_card_caption(pack_card, reveal.index, reveal.total)
    photo = pack_card.card.image_url
    if replace:
        await safe_replace_photo(message, photo, caption, reply_markup=reveal_keyboard())
    else:
        await safe_send_photo(message, photo, caption, reply_markup=reveal_keyboard())


async def _show_summary(message: Message, pack: Pack | None) -> None:
    if pack is None:
        return
    photos = [
        InputMediaPhoto(media=pack_card.card.image_url, caption=pack_card.card.name)
        for pack_card in pack
        if pack_card.card.image_url
    ]
    for start in range(0, len(photos), MEDIA_GROUP_LIMIT):
        chunk = photos[start : start + MEDIA_GROUP_LIMIT]
        if len(chunk) == 1:
            await safe_api_call(
                "message.answer_photo", message.answer_photo, chunk[0].media, caption=chunk[0].caption
            )
        else:
            await safe_api_call("message.answer_media_group", message.answer_media_group, chunk)
    await safe_send_text(message, format_summary(pack), reply_markup=summary_keyboard())


def _picker_markup(state: SessionState, page: int) -> InlineKeyboardMarkup | None:
    if not state.sets:
        return None
    selected_id = state.selected_set.set_id if state.selected_set else None
    return set_picker_keyboard(state.sets, page, selected_id=selected_id)


def _parse_page(data: str) -> int:
    try:
        return max(0, int(data.removeprefix(PAGE)))
    except ValueError:
        return 0


def format_error(message: str) -> str:
    return f"⚠️ Error: {message}"


def format_set_picker(state: SessionState, *, page: int = 0) -> str:
    lines: list[str] = []
    if state.error:
        lines.append(format_error(state.error))
        lines.append("")
    if not state.sets:
        lines.append("No sets are available right now. Try /sets again later.")
        return "\n".join(lines)

    pages = page_count(len(state.sets), SETS_PER_PAGE)
    page = min(max(page, 0), pages - 1)
    lines.append("🎴 Pick a set to open a booster pack from:")
    if state.selected_set:
        lines.append(f"Selected: {state.selected_set.name} ({state.selected_set.series})")
    lines.append(f"Page {page + 1} of {pages}")
    return "\n".join(lines)


def format_pack_message(card_set: CardSet) -> str:
    lines = [
        f"📦 {card_set.name}",
        card_set.series,
        f"Released {card_set.release_date.isoformat()}",
    ]
    if card_set.logo_url:
        lines.append(card_set.logo_url)
    lines.append("")
    lines.append("Tap “Open pack” to rip it open.")
    return "\n".join(lines)


def format_card_caption(pack_card: PackCard, index: int, total: int) -> str:
    card = pack_card.card
    return "\n".join(
        [
            f"Card {index + 1} of {total}",
            f"{card.name}",
            f"[{card.rarity or 'Unknown rarity'}]",
            "",
            "Tap “Next card” to reveal the next one.",
        ]
    )


def format_summary(pack: Pack) -> str:
    lines = [f"🃏 Your complete pack: {pack.card_set.name}"]
    for pack_card in pack:
        card = pack_card.card
        lines.append(f"• {card.name} [{card.rarity or 'Unknown rarity'}]")
    if not len(pack):
        lines.append("The catalog had no cards for this pack.")
    short = [slot for slot in pack.slots if slot.is_short]
    if short:
        lines.append("")
        lines.append("Some slots came up short:")
        for slot in short:
            lines.append(f"  {slot.rarity}: {len(slot.cards)} of {slot.requested}")
    return "\n".join(lines)
