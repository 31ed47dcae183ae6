"""Automated checks to highlight configuration problems."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import BoosterForgeConfig
from ..domain.layout import PackLayout


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(config: BoosterForgeConfig, layout: PackLayout) -> list[ChecklistIssue]:
    issues: list[ChecklistIssue] = []
    if not config.catalog.api_key:
        issues.append(ChecklistIssue("error", "Catalog API key is not configured."))
    if not config.bot_token:
        issues.append(
            ChecklistIssue("warning", "Bot token is not configured; only the terminal opener will work.")
        )

    if not layout.slots:
        issues.append(ChecklistIssue("error", "Pack layout does not declare any slots."))

    for idx, slot in enumerate(layout.slots, start=1):
        if slot.count > config.catalog.page_size:
            issues.append(
                ChecklistIssue(
                    "warning",
                    f"Slot #{idx} wants {slot.count} cards but only {config.catalog.page_size} "
                    "candidates are fetched per rarity.",
                )
            )

    if layout.size == 0:
        issues.append(ChecklistIssue("warning", "Pack layout produces empty packs."))
    return issues
