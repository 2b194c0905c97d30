import random

import httpx
import pytest

from nbalegends import store
from nbalegends.generator import generate_player
from nbalegends.images import ImageResolver, fallback_image_url, initials


def _resolver(handler) -> ImageResolver:
    return ImageResolver(httpx.AsyncClient(transport=httpx.MockTransport(handler)))


def test_initials():
    assert initials("Michael Jordan") == "MJ"
    assert initials("Shaquille O'Neal") == "SO"
    assert initials("Nene") == "N"
    assert initials("") == "?"


def test_fallback_is_deterministic():
    assert fallback_image_url("Larry Bird") == fallback_image_url("Larry Bird")
    assert "name=LB" in fallback_image_url("Larry Bird")


@pytest.mark.anyio
async def test_enrich_uses_thumbnail():
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        return httpx.Response(200, json={"thumbnail": {"source": "https://img.example/mj.jpg"}})

    resolver = _resolver(handler)
    jordan = store.lookup("michael jordan")

    enriched = await resolver.enrich(jordan)

    assert enriched.image_url == "https://img.example/mj.jpg"
    assert jordan.image_url is None
    assert requested == ["/api/rest_v1/page/summary/Michael_Jordan"]


@pytest.mark.anyio
async def test_enrich_falls_back_on_http_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    enriched = await _resolver(handler).enrich(store.lookup("kobe bryant"))

    assert enriched.image_url == fallback_image_url("Kobe Bryant")


@pytest.mark.anyio
async def test_enrich_falls_back_on_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    enriched = await _resolver(handler).enrich(store.lookup("larry bird"))

    assert enriched.image_url == fallback_image_url("Larry Bird")


@pytest.mark.anyio
async def test_enrich_falls_back_without_thumbnail():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"title": "Magic Johnson"})

    enriched = await _resolver(handler).enrich(store.lookup("magic johnson"))

    assert enriched.image_url == fallback_image_url("Magic Johnson")


@pytest.mark.anyio
async def test_generated_players_skip_network():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no lookup expected")

    player = generate_player("made up", random.Random(5))

    enriched = await _resolver(handler).enrich(player)

    assert enriched.image_url == fallback_image_url("Made Up")


@pytest.mark.anyio
async def test_enrich_many_keeps_order():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"thumbnail": {"source": f"https://img.example{request.url.path}"}})

    players = [store.lookup("larry bird"), store.lookup("lebron james")]

    enriched = await _resolver(handler).enrich_many(players)

    assert [player.name for player in enriched] == ["Larry Bird", "LeBron James"]
    assert enriched[1].image_url.endswith("/LeBron_James")
