"""Turn catalog JSON payloads into domain objects."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..domain.cards import Card, CardSet


def parse_release_date(raw: Any) -> date:
    """Parse ``2023/03/31`` (catalog format) or ISO ``2023-03-31``."""
    if not isinstance(raw, str) or not raw.strip():
        raise ValueError(f"Invalid release date {raw!r}")
    text = raw.strip().replace("/", "-")
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return datetime.fromisoformat(text).date()


def _mapping(entry: dict[str, Any], key: str) -> dict[str, Any]:
    value = entry.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be an object, got {type(value).__name__}")
    return value


def parse_set(entry: dict[str, Any]) -> CardSet:
    images = _mapping(entry, "images")
    total = entry.get("printedTotal", entry.get("total"))
    return CardSet(
        set_id=str(entry["id"]),
        name=str(entry.get("name", entry["id"])),
        series=str(entry.get("series", "")),
        release_date=parse_release_date(entry.get("releaseDate")),
        logo_url=images.get("logo"),
        symbol_url=images.get("symbol"),
        total=int(total) if total is not None else None,
    )


def parse_card(entry: dict[str, Any]) -> Card:
    images = _mapping(entry, "images")
    set_data = _mapping(entry, "set")
    return Card(
        card_id=str(entry["id"]),
        name=str(entry.get("name", entry["id"])),
        rarity=str(entry.get("rarity") or ""),
        small_image=images.get("small"),
        large_image=images.get("large"),
        set_id=set_data.get("id"),
    )


def error_message(body: Any) -> str | None:
    """Extract the service-provided message from an error body, if any."""
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    if body.get("message"):
        return str(body["message"])
    return None
