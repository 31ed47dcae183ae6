"""Shared helpers to interact with the Telegram Bot API safely."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from aiogram.exceptions import (
    TelegramAPIError,
    TelegramBadRequest,
    TelegramForbiddenError,
    TelegramRetryAfter,
)
from aiogram.types import CallbackQuery, InlineKeyboardMarkup, InputMediaPhoto, Message

P = ParamSpec("P")
T = TypeVar("T")

logger = logging.getLogger(__name__)


async def safe_api_call(
    label: str,
    func: Callable[P, Awaitable[T]],
    *args: P.args,
    retries: int = 3,
    **kwargs: P.kwargs,
) -> T | None:
    """Run a Telegram API call; rate limits are retried, API errors are logged and dropped."""
    attempt = 0
    while True:
        try:
            return await func(*args, **kwargs)
        except TelegramRetryAfter as exc:
            attempt += 1
            if attempt >= retries:
                logger.warning(
                    "Telegram call '%s' gave up after %s rate-limited attempts.", label, attempt
                )
                return None
            delay = float(getattr(exc, "retry_after", 0) or 1.0)
            logger.info(
                "Telegram call '%s' rate limited; retrying in %.1f s (%s/%s).",
                label,
                delay,
                attempt,
                retries,
            )
            await asyncio.sleep(delay)
        except TelegramForbiddenError:
            logger.info("Telegram call '%s' forbidden; the chat blocked the bot.", label)
            return None
        except TelegramBadRequest as exc:
            if "message is not modified" in str(exc).lower():
                logger.debug("Telegram call '%s' skipped: nothing changed.", label)
            else:
                logger.warning("Telegram call '%s' rejected: %s", label, exc)
            return None
        except TelegramAPIError as exc:
            logger.error("Telegram call '%s' failed: %s", label, exc, exc_info=True)
            return None


async def safe_send_text(
    message: Message | None,
    text: str,
    *,
    reply_markup: InlineKeyboardMarkup | None = None,
) -> Message | None:
    if not message:
        return None
    return await safe_api_call("message.answer", message.answer, text, reply_markup=reply_markup)


async def safe_send_photo(
    message: Message | None,
    photo: str | None,
    caption: str,
    *,
    reply_markup: InlineKeyboardMarkup | None = None,
) -> Message | None:
    """Send a photo, falling back to a text message when the card has no image."""
    if not message:
        return None
    if not photo:
        return await safe_send_text(message, caption, reply_markup=reply_markup)
    return await safe_api_call(
        "message.answer_photo",
        message.answer_photo,
        photo,
        caption=caption,
        reply_markup=reply_markup,
    )


async def safe_replace_photo(
    message: Message | None,
    photo: str | None,
    caption: str,
    *,
    reply_markup: InlineKeyboardMarkup | None = None,
) -> bool:
    """Swap the photo of a sent card message; sends a new message when that is impossible."""
    if not message:
        return False
    if photo and message.photo:
        edited = await safe_api_call(
            "message.edit_media",
            message.edit_media,
            media=InputMediaPhoto(media=photo, caption=caption),
            reply_markup=reply_markup,
        )
        if edited is not None:
            return True
    return await safe_send_photo(message, photo, caption, reply_markup=reply_markup) is not None


async def safe_callback_answer(
    callback: CallbackQuery | None,
    text: str | None = None,
    *,
    show_alert: bool = False,
) -> bool:
    """Acknowledge a callback query so the client stops its spinner."""
    if not callback:
        return False
    return (
        await safe_api_call("callback.answer", callback.answer, text=text, show_alert=show_alert)
    ) is not None
