"""Rule-based chat replies.

Replies are chosen by walking :data:`RULES` in order and answering with the
first rule whose predicate matches the parsed message. Nothing is remembered
between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Optional, Sequence, Tuple

from nbalegends.models import ChatTurn

from .rules import (
    COMPARISON_KEYWORDS,
    COMPARISON_REPLY,
    CURRENT_ERA_REPLIES,
    CURRENT_KEYWORDS,
    DISPLAY_NAMES,
    FALLBACK_REPLY,
    FALLBACK_VARIANTS,
    GENERIC_PLAYER_SUGGESTIONS,
    GENERIC_PLAYER_TEMPLATES,
    INTENT_KEYWORDS,
    MULTI_PLAYER_FALLBACK,
    PLAYER_ALIASES,
    PLAYER_PROFILES,
    PLAYER_SUGGESTIONS,
    RIVALRIES,
    STATS_KEYWORDS,
    STATS_REPLY,
    Reply,
)


@dataclass(frozen=True)
class ChatQuery:
    """Normalized message plus everything the rules match on."""

    text: str
    players: Tuple[str, ...]
    intents: FrozenSet[str]

    def mentions(self, keywords: Iterable[str]) -> bool:
        return contains_any(self.text, keywords)


@dataclass(frozen=True)
class ChatRule:
    name: str
    matches: Callable[[ChatQuery], bool]
    reply: Callable[[ChatQuery], Reply]


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def display_name(identity: str) -> str:
    return DISPLAY_NAMES.get(identity, identity[:1].upper() + identity[1:])


def extract_players(text: str) -> Tuple[str, ...]:
    """Return mentioned player identities ordered by first appearance."""

    positions: dict[str, int] = {}
    for identity, phrases in PLAYER_ALIASES:
        hits = [text.find(phrase) for phrase in phrases if phrase in text]
        if hits:
            positions[identity] = min(hits)
    return tuple(sorted(positions, key=lambda identity: positions[identity]))


def detect_intents(text: str) -> FrozenSet[str]:
    return frozenset(intent for intent, keywords in INTENT_KEYWORDS if contains_any(text, keywords))


def parse_message(message: str, context: Optional[str] = None) -> ChatQuery:
    raw = f"{context}\n\nUser question: {message}" if context else message
    text = raw.lower().strip()
    return ChatQuery(text=text, players=extract_players(text), intents=detect_intents(text))


def _select_by_keyword(query: ChatQuery, table: Sequence[Tuple[Tuple[str, ...], Reply]], default: Reply) -> Reply:
    for keywords, reply in table:
        if query.mentions(keywords):
            return reply
    return default


def _multi_player_reply(query: ChatQuery) -> Reply:
    if len(query.players) == 2:
        rivalry = RIVALRIES.get(frozenset(query.players))
        if rivalry is not None:
            return rivalry
    names = ", ".join(display_name(identity) for identity in query.players[:-1])
    names = f"{names} and {display_name(query.players[-1])}"
    return Reply(MULTI_PLAYER_FALLBACK.response.format(names=names), MULTI_PLAYER_FALLBACK.suggestions)


def _single_player_reply(query: ChatQuery) -> Reply:
    identity = query.players[0]
    ordered_intents = [intent for intent, _ in INTENT_KEYWORDS if intent in query.intents]
    suggestions = PLAYER_SUGGESTIONS.get(identity, GENERIC_PLAYER_SUGGESTIONS)

    profile = PLAYER_PROFILES.get(identity)
    if profile is not None:
        for intent in ordered_intents:
            if intent in profile:
                return Reply(profile[intent], suggestions)
        return Reply(profile["default"], suggestions)

    template = next(
        (GENERIC_PLAYER_TEMPLATES[intent] for intent in ordered_intents if intent in GENERIC_PLAYER_TEMPLATES),
        GENERIC_PLAYER_TEMPLATES["default"],
    )
    return Reply(template.format(name=display_name(identity)), suggestions)


RULES: Tuple[ChatRule, ...] = (
    ChatRule("multi_player", lambda q: len(q.players) >= 2, _multi_player_reply),
    ChatRule("single_player", lambda q: len(q.players) == 1, _single_player_reply),
    ChatRule(
        "current_era",
        lambda q: q.mentions(CURRENT_KEYWORDS),
        lambda q: _select_by_keyword(q, CURRENT_ERA_REPLIES, CURRENT_ERA_REPLIES[0][1]),
    ),
    ChatRule("comparison", lambda q: q.mentions(COMPARISON_KEYWORDS), lambda q: COMPARISON_REPLY),
    ChatRule("stats", lambda q: q.mentions(STATS_KEYWORDS), lambda q: STATS_REPLY),
    ChatRule("fallback", lambda q: True, lambda q: _select_by_keyword(q, FALLBACK_VARIANTS, FALLBACK_REPLY)),
)


def match_rule(query: ChatQuery) -> ChatRule:
    return next(rule for rule in RULES if rule.matches(query))


def respond(message: str, context: Optional[str] = None) -> ChatTurn:
    """Answer ``message`` from the rule table.

    ``context`` is prepended to the message before matching, so players named
    earlier in a conversation still steer the reply.
    """

    query = parse_message(message, context)
    reply = match_rule(query).reply(query)
    turn_context = None
    if query.players:
        turn_context = "Discussing: " + ", ".join(display_name(identity) for identity in query.players)
    return ChatTurn(response=reply.response, context=turn_context, suggestions=list(reply.suggestions))
