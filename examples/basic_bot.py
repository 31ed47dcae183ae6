"""Example wiring of BoosterForge with a custom layout and an odds preview."""

from __future__ import annotations

import asyncio
from pathlib import Path

from boosterforge import BoosterForgeConfig, SimulatorApp
from boosterforge.diagnostics import RareSlotSimulator
from boosterforge.loaders import load_layout_from_json
from boosterforge.logging_config import setup_logging

LAYOUT_PATH = Path(__file__).with_name("layouts") / "holo_era.json"


def preview_odds() -> None:
    layout = load_layout_from_json(LAYOUT_PATH)
    result = RareSlotSimulator(layout).simulate(rolls=5000)
    for slot_index in range(len(result.counts)):
        ratios = ", ".join(f"{rarity} {ratio:.1%}" for rarity, ratio in result.ratios(slot_index).items())
        print(f"Rare slot #{slot_index + 1}: {ratios}")


async def run_bot() -> None:
    from aiogram import Bot, Dispatcher

    from boosterforge.telegram import build_router

    config = BoosterForgeConfig.from_env()
    config.layout_path = LAYOUT_PATH
    setup_logging(config.log_level)
    app = SimulatorApp(config)

    bot = Bot(config.require_bot_token())
    dp = Dispatcher()
    dp.include_router(build_router(app))
    try:
        await dp.start_polling(bot)
    finally:
        await bot.session.close()
        await app.aclose()


if __name__ == "__main__":
    preview_odds()
    asyncio.run(run_bot())
