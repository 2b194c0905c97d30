"""Best-effort image enrichment for player records.

Lookups go to the Wikipedia page-summary endpoint. Any failure degrades to a
deterministic avatar built from the player's initials, so enrichment never
fails a request.
"""

from __future__ import annotations

import asyncio
import logging
import urllib.parse
from typing import Optional, Sequence

import httpx

from nbalegends.models import Player


logger = logging.getLogger("uvicorn.error")

WIKIPEDIA_SUMMARY_URL = "https://en.wikipedia.org/api/rest_v1/page/summary/{title}"
AVATAR_URL = "https://ui-avatars.com/api/?name={initials}&size=256&background=1d428a&color=ffffff&bold=true"
USER_AGENT = "nbalegends/0.1 (image lookup)"


def initials(name: str) -> str:
    letters = [part[0].upper() for part in name.split() if part]
    return "".join(letters[:2]) or "?"


def fallback_image_url(name: str) -> str:
    return AVATAR_URL.format(initials=urllib.parse.quote(initials(name)))


def wikipedia_title(name: str) -> str:
    return urllib.parse.quote(name.strip().replace(" ", "_"), safe="")


class ImageResolver:
    """Attach ``image_url`` to players using a shared ``httpx.AsyncClient``."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None, *, timeout: float = 3.0):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, headers={"User-Agent": USER_AGENT})

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def lookup(self, name: str) -> Optional[str]:
        """Return a thumbnail URL for ``name`` or ``None`` if none is available."""

        url = WIKIPEDIA_SUMMARY_URL.format(title=wikipedia_title(name))
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
            payload = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Image lookup failed for %s: %s", name, exc)
            return None
        thumbnail = payload.get("thumbnail") if isinstance(payload, dict) else None
        if not isinstance(thumbnail, dict):
            return None
        source = thumbnail.get("source")
        return source if isinstance(source, str) and source else None

    async def enrich(self, player: Player) -> Player:
        if player.image_url:
            return player
        # Generated players have no real photo to find.
        url = None if player.generated else await self.lookup(player.name)
        return player.model_copy(update={"image_url": url or fallback_image_url(player.name)})

    async def enrich_many(self, players: Sequence[Player]) -> list[Player]:
        return list(await asyncio.gather(*(self.enrich(player) for player in players)))
