"""Keyword-driven chat responses about NBA legends."""

from .responder import RULES, ChatQuery, ChatRule, extract_players, match_rule, parse_message, respond
from .rules import Reply

__all__ = [
    "RULES",
    "ChatQuery",
    "ChatRule",
    "Reply",
    "extract_players",
    "match_rule",
    "parse_message",
    "respond",
]
