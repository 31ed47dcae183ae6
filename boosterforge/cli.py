"""Command line helpers for BoosterForge."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.console import Console

from .app import SimulatorApp
from .config import BoosterForgeConfig
from .diagnostics.checklist import run_checklist as checklist_run
from .diagnostics.odds_simulator import RareSlotSimulator
from .domain.exceptions import ConfigurationMissing
from .domain.layout import DEFAULT_LAYOUT, PackLayout
from .loaders import load_layout_from_json, validate_layout_file
from .logging_config import setup_logging
from .terminal import run_terminal

logger = logging.getLogger(__name__)
console = Console()


def run_bot() -> None:
    parser = argparse.ArgumentParser(description="Run the BoosterForge Telegram bot")
    parser.parse_args()
    config = BoosterForgeConfig.from_env()
    setup_logging(config.log_level)
    try:
        asyncio.run(_serve_bot(config))
    except ConfigurationMissing as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(2)


async def _serve_bot(config: BoosterForgeConfig) -> None:
    from aiogram import Bot, Dispatcher

    from .telegram import build_router

    token = config.require_bot_token()
    app = SimulatorApp(config)
    bot = Bot(token)
    dp = Dispatcher()
    dp.include_router(build_router(app))
    logger.info("Starting bot with layout of %s cards", app.layout.size)
    try:
        await dp.start_polling(bot)
    finally:
        await bot.session.close()
        await app.aclose()


def run_open() -> None:
    parser = argparse.ArgumentParser(description="Open booster packs in the terminal")
    parser.add_argument("--layout", help="Path to pack layout JSON", default=None)
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible packs")
    args = parser.parse_args()

    config = BoosterForgeConfig.from_env()
    setup_logging("WARNING")
    if args.layout:
        config.layout_path = Path(args.layout)
    if args.seed is not None:
        config.rng_seed = args.seed
    try:
        asyncio.run(_open_in_terminal(config))
    except ConfigurationMissing as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(2)


async def _open_in_terminal(config: BoosterForgeConfig) -> None:
    app = SimulatorApp(config)
    try:
        await run_terminal(app, console)
    finally:
        await app.aclose()


def run_odds() -> None:
    parser = argparse.ArgumentParser(description="Simulate rare slot odds")
    parser.add_argument("--layout", help="Path to pack layout JSON", default=None)
    parser.add_argument("--rolls", type=int, default=10000, help="Number of packs to simulate")
    args = parser.parse_args()

    layout = _load_layout(args.layout)
    result = RareSlotSimulator(layout).simulate(rolls=args.rolls)
    console.print(f"Simulated {result.rolls} packs.")
    for slot_index, counts in enumerate(result.counts):
        console.print(f"Rare slot #{slot_index + 1}:")
        for rarity, ratio in result.ratios(slot_index).items():
            console.print(f"  {rarity}: {counts[rarity]} ({ratio:.2%})")


def run_checklist() -> None:
    parser = argparse.ArgumentParser(description="BoosterForge sanity checks")
    parser.add_argument("--layout", help="Path to pack layout JSON", default=None)
    args = parser.parse_args()

    config = BoosterForgeConfig.from_env()
    layout_path = args.layout or config.layout_path
    if layout_path:
        errors = validate_layout_file(layout_path)
        if errors:
            console.print("Layout errors:")
            for err in errors:
                console.print(f"- {err}")
            sys.exit(1)

    issues = checklist_run(config, _load_layout(layout_path))
    if not issues:
        console.print("No problems found ✅")
        return
    for issue in issues:
        console.print(f"[{issue.severity.upper()}] {issue.message}", markup=False)
    if any(issue.severity == "error" for issue in issues):
        sys.exit(1)


def _load_layout(path: str | Path | None) -> PackLayout:
    if not path:
        return DEFAULT_LAYOUT
    return load_layout_from_json(path)
