"""Command-line interface for looking up, comparing and chatting about legends."""

from __future__ import annotations

import argparse
import json
import random
from typing import Any

from nbalegends import service, store
from nbalegends.config import load_settings


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Look up and compare NBA legends")
    parser.add_argument("--seed", type=int, default=None, help="Seed for generated players (repeatable output)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Print every stored legend")

    player = subparsers.add_parser("player", help="Look up a player, generating one if not stored")
    player.add_argument("name", nargs="+", help="Player name")
    player.add_argument(
        "--no-generate",
        action="store_true",
        help="Fail instead of generating a record for unknown names",
    )

    compare = subparsers.add_parser("compare", help="Compare two or more players by category")
    compare.add_argument("names", nargs="+", help="Player names (quote names containing spaces)")

    chat = subparsers.add_parser("chat", help="Ask the rule-based assistant a question")
    chat.add_argument("message", nargs="+", help="Message text")
    chat.add_argument("--context", default=None, help="Earlier conversation context")

    serve = subparsers.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve.add_argument("--host", default=None, help="Bind address (default from HOST)")
    serve.add_argument("--port", type=int, default=None, help="Bind port (default from PORT)")

    return parser.parse_args(argv)


def _dump(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = load_settings()
    seed = args.seed if args.seed is not None else settings.seed
    rng = random.Random(seed) if seed is not None else None

    if args.command == "list":
        _dump([player.model_dump(by_alias=True) for player in store.iter_players()])
        return

    if args.command == "player":
        name = " ".join(args.name)
        if args.no_generate:
            player = service.get_player(name)
            if player is None:
                raise SystemExit(f"player {name!r} not found")
        else:
            player = service.generate_or_lookup(name, rng)
        _dump(player.model_dump(by_alias=True))
        return

    if args.command == "compare":
        result = service.compare(args.names, rng)
        if not result.ok:
            raise SystemExit(result.comparison)
        _dump(result.model_dump(by_alias=True))
        return

    if args.command == "chat":
        turn = service.chat(" ".join(args.message), args.context)
        _dump(turn.model_dump())
        return

    if args.command == "serve":
        import uvicorn

        from nbalegends.api import create_app

        uvicorn.run(create_app(settings), host=args.host or settings.host, port=args.port or settings.port)


if __name__ == "__main__":
    main()
