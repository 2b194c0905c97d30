"""Lightweight REST client for the NBA legends API."""

from __future__ import annotations

import argparse
import json

import httpx


def _print(resp: httpx.Response) -> None:
    if resp.status_code in (400, 404):
        raise SystemExit(resp.json().get("detail", resp.text))
    resp.raise_for_status()
    print(json.dumps(resp.json(), indent=2, ensure_ascii=False))


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the NBA legends REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:3000")
    parser.add_argument("--list", action="store_true", help="List stored legends and exit")
    parser.add_argument("--player", metavar="NAME", help="Fetch (or generate) a single player")
    parser.add_argument("--generate", metavar="NAME", help="Generate a player through POST /api/generate-player")
    parser.add_argument("--compare", nargs="+", metavar="NAME", help="Compare two or more players")
    parser.add_argument("--chat", metavar="MESSAGE", help="Send a chat message")
    parser.add_argument("--context", default=None, help="Context to send with --chat")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list:
            _print(client.get("/api/players"))
        if args.player:
            _print(client.get(f"/api/players/{args.player}"))
        if args.generate:
            _print(client.post("/api/generate-player", json={"playerName": args.generate}))
        if args.compare:
            _print(client.post("/api/compare", json={"players": args.compare}))
        if args.chat:
            _print(client.post("/api/chat", json={"message": args.chat, "context": args.context}))


if __name__ == "__main__":
    main()
