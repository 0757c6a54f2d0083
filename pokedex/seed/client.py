# pokedex/seed/client.py
from __future__ import annotations

import asyncio
from typing import Any, Optional

import httpx
from loguru import logger

from pokedex import config

USER_AGENT = "Pokedex-App/1.0.0"


class FetchError(Exception):
    """Raised when PokeAPI answers with a non-success status."""

    def __init__(self, url: str, status_text: str, status_code: int | None = None):
        self.url = url
        self.status_text = status_text
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {status_text}")


class PokeAPIClient:
    """
    Sequential PokeAPI reader.

    Every request is preceded by a fixed sleep of ``delay_ms`` so a seed run
    never bursts the public API. There is no retry: callers decide what a
    failure means for them.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        delay_ms: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ):
        self.base_url = (base_url or config.POKEAPI_BASE_URL).rstrip("/")
        # POKEAPI_RATE_LIMIT_DELAY unless overridden
        self.delay_ms = config.POKEAPI_RATE_LIMIT_DELAY if delay_ms is None else delay_ms
        self._client = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "PokeAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def fetch(self, url: str) -> Any:
        if self.delay_ms > 0:
            await asyncio.sleep(self.delay_ms / 1000)

        logger.debug("Fetching {}", url)
        response = await self._client.get(url)
        if not response.is_success:
            raise FetchError(url, response.reason_phrase, response.status_code)
        return response.json()

    async def get(self, path_or_url: str) -> Any:
        return await self.fetch(self.url(path_or_url))

    async def get_pokemon(self, number: int) -> dict:
        return await self.get(f"pokemon/{number}")

    async def get_species(self, number_or_url: int | str) -> dict:
        if isinstance(number_or_url, int):
            return await self.get(f"pokemon-species/{number_or_url}")
        return await self.get(number_or_url)

    async def get_type_list(self) -> dict:
        return await self.get("type?limit=100")
