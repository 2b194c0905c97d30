"""REST API for the NBA legends service."""

from __future__ import annotations

import logging
import random
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional, Sequence

from fastapi import FastAPI, HTTPException, Request

from nbalegends import service, store
from nbalegends.api.schemas import ChatRequest, CompareRequest, GeneratePlayerRequest
from nbalegends.config import Settings, load_settings
from nbalegends.images import ImageResolver
from nbalegends.models import ChatTurn, ComparisonResult, Player


logger = logging.getLogger("uvicorn.error")


def _require_text(value: Optional[str], detail: str) -> str:
    if value is None or not value.strip():
        raise HTTPException(status_code=400, detail=detail)
    return value


async def _enrich(request: Request, players: Sequence[Player]) -> List[Player]:
    resolver: Optional[ImageResolver] = request.app.state.image_resolver
    if resolver is None:
        return list(players)
    return await resolver.enrich_many(players)


def create_app(settings: Settings | None = None, image_resolver: ImageResolver | None = None) -> FastAPI:
    settings = settings or load_settings()
    owns_resolver = image_resolver is None and settings.image_lookup
    if owns_resolver:
        image_resolver = ImageResolver(timeout=settings.image_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        if owns_resolver and image_resolver is not None:
            await image_resolver.aclose()

    app = FastAPI(title="NBA legends", lifespan=lifespan)
    app.state.settings = settings
    app.state.image_resolver = image_resolver
    rng = random.Random(settings.seed) if settings.seed is not None else None

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/players", response_model=List[Player])
    async def list_players(request: Request):
        return await _enrich(request, list(store.iter_players()))

    @app.get("/api/players/{name}", response_model=Player)
    async def get_player(request: Request, name: str):
        player = service.get_player(name)
        if player is None:
            if not settings.allow_generation:
                raise HTTPException(status_code=404, detail="Player not found")
            player = service.generate_or_lookup(name, rng)
        (enriched,) = await _enrich(request, [player])
        return enriched

    @app.post("/api/generate-player", response_model=Player)
    async def generate_player(request: Request, payload: GeneratePlayerRequest):
        name = _require_text(payload.player_name, "Player name is required")
        player = service.generate_or_lookup(name, rng)
        (enriched,) = await _enrich(request, [player])
        return enriched

    @app.post("/api/compare", response_model=ComparisonResult)
    async def compare(request: Request, payload: CompareRequest):
        names = [name for name in payload.players or [] if name and name.strip()]
        if len(names) < 2:
            raise HTTPException(status_code=400, detail="Please provide at least 2 players to compare")
        result = service.compare(names, rng)
        if not result.ok:
            raise HTTPException(status_code=400, detail=result.comparison)
        players = await _enrich(request, result.players)
        logger.info("Compared %s", ", ".join(player.name for player in players))
        return result.model_copy(update={"players": players})

    @app.post("/api/chat", response_model=ChatTurn)
    async def chat(payload: ChatRequest):
        message = _require_text(payload.message, "Message is required")
        return service.chat(message, payload.context)

    return app
