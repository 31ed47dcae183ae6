"""Load pack layouts from JSON definitions."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..domain.layout import PackLayout, PackSlot, RareSlot, RarityBand, Slot


def load_layout_from_json(path: str | Path) -> PackLayout:
    """Read, validate and parse a layout JSON file."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return parse_layout_dict(data)


def parse_layout_dict(data: dict[str, Any]) -> PackLayout:
    """Parse a JSON dict (already decoded) into a PackLayout."""
    errors = validate_layout_dict(data)
    if errors:
        raise ValueError(_format_errors("Layout validation failed", errors))
    return PackLayout.of([parse_slot(entry) for entry in data["slots"]])


def parse_slot(entry: dict[str, Any]) -> Slot:
    count = int(entry.get("count", 1))
    if "bands" in entry:
        bands = tuple(
            RarityBand(rarity=str(band["rarity"]), upper=float(band["upper"]))
            for band in entry["bands"]
        )
        return RareSlot(bands=bands, count=count)
    return PackSlot(rarity=str(entry["rarity"]), count=count)


def validate_layout_file(path: str | Path) -> list[str]:
    """Validate layout JSON file and return a list of errors."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        return [f"Cannot read layout file: {exc}"]
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        return [f"Layout file is not valid JSON: {exc}"]
    return validate_layout_dict(data)


def validate_layout_dict(data: Any) -> list[str]:
    errors: list[str] = []
    if not isinstance(data, dict):
        return ["Layout must be a JSON object."]

    slots = data.get("slots")
    if not isinstance(slots, list) or not slots:
        return ["Layout must contain non-empty 'slots' array."]

    for idx, entry in enumerate(slots, start=1):
        if not isinstance(entry, dict):
            errors.append(f"Slot #{idx} must be an object.")
            continue

        count = entry.get("count", 1)
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            errors.append(f"Slot #{idx} has non-positive count '{count}'.")

        has_rarity = "rarity" in entry
        has_bands = "bands" in entry
        if has_rarity == has_bands:
            errors.append(f"Slot #{idx} must define exactly one of 'rarity' or 'bands'.")
            continue
        if has_rarity:
            rarity = entry.get("rarity")
            if not isinstance(rarity, str) or not rarity.strip():
                errors.append(f"Slot #{idx} must define non-empty 'rarity'.")
            continue
        errors.extend(_validate_bands(idx, entry.get("bands")))

    return errors


def _validate_bands(idx: int, bands: Any) -> list[str]:
    if not isinstance(bands, list) or not bands:
        return [f"Slot #{idx} must contain non-empty 'bands' array."]

    errors: list[str] = []
    previous = 0.0
    for band_idx, band in enumerate(bands, start=1):
        if not isinstance(band, dict):
            errors.append(f"Slot #{idx} band #{band_idx} must be an object.")
            continue
        rarity = band.get("rarity")
        if not isinstance(rarity, str) or not rarity.strip():
            errors.append(f"Slot #{idx} band #{band_idx} must define non-empty 'rarity'.")
        upper = band.get("upper")
        if isinstance(upper, bool) or not isinstance(upper, (int, float)):
            errors.append(f"Slot #{idx} band #{band_idx} must define numeric 'upper'.")
            continue
        if not previous < upper <= 1.0:
            errors.append(
                f"Slot #{idx} band #{band_idx} upper bound {upper} must be above {previous} and at most 1."
            )
        previous = max(previous, float(upper))

    last = bands[-1]
    if isinstance(last, dict) and last.get("upper") != 1.0:
        errors.append(f"Slot #{idx} last band must have upper bound 1.0.")
    return errors


def _format_errors(title: str, errors: list[str]) -> str:
    return title + ":\n" + "\n".join(f"- {err}" for err in errors)
