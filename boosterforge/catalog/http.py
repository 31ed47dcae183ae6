"""HTTP client for the Pokémon TCG catalog API."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx

from .base import DEFAULT_PAGE_SIZE
from .payloads import error_message, parse_card, parse_set
from ..domain.cards import Card, CardSet
from ..domain.exceptions import CatalogUnavailable

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.pokemontcg.io/v2"


class PokemonTCGClient:
    """Read-only access to the set listing and card search endpoints.

    Each call issues exactly one request; nothing is cached or retried.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._timeout = timeout

    async def __aenter__(self) -> "PokemonTCGClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def list_sets(self) -> Sequence[CardSet]:
        body = await self._get("/sets")
        try:
            sets = [parse_set(entry) for entry in _data(body)]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise CatalogUnavailable(f"Unexpected set listing payload: {exc}") from exc
        return sorted(sets, key=lambda card_set: card_set.release_date, reverse=True)

    async def find_cards_by_rarity(
        self, set_id: str, rarity: str, page_size: int = DEFAULT_PAGE_SIZE
    ) -> Sequence[Card]:
        params = {"q": f'set.id:{set_id} rarity:"{rarity}"', "pageSize": page_size}
        body = await self._get("/cards", params=params)
        try:
            cards = [parse_card(entry) for entry in _data(body)]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise CatalogUnavailable(f"Unexpected card search payload: {exc}") from exc
        return cards[:page_size]

    async def _get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        url = f"{self._base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = await self._client.get(
                url,
                params=params,
                headers={"X-Api-Key": self._api_key, "Accept": "application/json"},
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            raise CatalogUnavailable("Request timed out") from exc
        except httpx.HTTPError as exc:
            raise CatalogUnavailable(f"Network error: {exc}") from exc

        if response.is_error:
            raise CatalogUnavailable(
                _failure_message(response), status_code=response.status_code
            )
        try:
            return response.json()
        except ValueError as exc:
            raise CatalogUnavailable(f"Invalid JSON from {path}") from exc


def _data(body: Any) -> list[dict[str, Any]]:
    if not isinstance(body, dict) or not isinstance(body.get("data"), list):
        raise ValueError("missing 'data' array")
    return body["data"]


def _failure_message(response: httpx.Response) -> str:
    try:
        message = error_message(response.json())
    except ValueError:
        message = None
    return message or f"Request failed with status code {response.status_code}"
