"""Configuration models for BoosterForge."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, TypeVar

from .catalog.base import DEFAULT_PAGE_SIZE
from .catalog.http import DEFAULT_BASE_URL
from .domain.exceptions import ConfigurationMissing

ENV_PREFIX = "BOOSTERFORGE_"

Number = TypeVar("Number", int, float)


@dataclass(slots=True)
class CatalogConfig:
    """Connection settings for the card catalog service."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(slots=True)
class BoosterForgeConfig:
    """Top-level configuration container."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    bot_token: str = ""
    layout_path: Path | None = None
    rng_seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "BoosterForgeConfig":
        """Create config from environment variables prefixed with BOOSTERFORGE_."""
        prefix = ENV_PREFIX
        layout_path = os.getenv(f"{prefix}LAYOUT_PATH")
        rng_seed = os.getenv(f"{prefix}RNG_SEED")

        catalog = CatalogConfig(
            api_key=os.getenv(f"{prefix}API_KEY", "").strip(),
            base_url=os.getenv(f"{prefix}API_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL,
            timeout_seconds=_parse_number(
                f"{prefix}TIMEOUT_SECONDS", os.getenv(f"{prefix}TIMEOUT_SECONDS"), 10.0, float
            ),
            page_size=_parse_number(
                f"{prefix}PAGE_SIZE", os.getenv(f"{prefix}PAGE_SIZE"), DEFAULT_PAGE_SIZE, int
            ),
        )

        return cls(
            catalog=catalog,
            bot_token=os.getenv(f"{prefix}BOT_TOKEN", ""),
            layout_path=Path(layout_path).expanduser() if layout_path else None,
            rng_seed=_parse_number(f"{prefix}RNG_SEED", rng_seed, None, int, positive=False),
            log_level=(os.getenv(f"{prefix}LOG_LEVEL") or "INFO").upper(),
        )

    def require_api_key(self) -> str:
        if not self.catalog.api_key:
            raise ConfigurationMissing(f"{ENV_PREFIX}API_KEY")
        return self.catalog.api_key

    def require_bot_token(self) -> str:
        if not self.bot_token:
            raise ConfigurationMissing(f"{ENV_PREFIX}BOT_TOKEN")
        return self.bot_token


def _parse_number(
    name: str,
    raw: str | None,
    default: Number | None,
    kind: Callable[[str], Number],
    *,
    positive: bool = True,
) -> Number | None:
    if raw is None or not raw.strip():
        return default
    try:
        value = kind(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from exc
    if positive and value <= 0:
        raise ValueError(f"{name} must be positive")
    return value
