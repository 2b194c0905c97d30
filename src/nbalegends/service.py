"""Lookup orchestration: store hits, generation fallback, comparison and chat."""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from nbalegends import store
from nbalegends.chat import respond
from nbalegends.compare import compare_players
from nbalegends.generator import generate_player
from nbalegends.models import ChatTurn, ComparisonResult, Player


logger = logging.getLogger("uvicorn.error")


def get_player(name: str) -> Optional[Player]:
    """Return the seeded record for ``name``; ``None`` when it is not stored."""

    return store.lookup(name)


def generate_or_lookup(name: str, rng: Optional[random.Random] = None) -> Player:
    player = store.lookup(name)
    if player is not None:
        return player
    logger.info("No stored record for %r; generating one", name)
    return generate_player(store.normalize_name(name), rng)


def resolve(names: Iterable[str], rng: Optional[random.Random] = None) -> List[Player]:
    """Resolve every name in input order, generating the ones not stored."""

    return [generate_or_lookup(name, rng) for name in names]


def compare(names: Iterable[str], rng: Optional[random.Random] = None) -> ComparisonResult:
    return compare_players(resolve(names, rng))


def chat(message: str, context: Optional[str] = None) -> ChatTurn:
    return respond(message, context)
