import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from nbalegends.api import create_app
from nbalegends.chat.rules import RIVALRIES
from nbalegends.config import Settings
from nbalegends.images import ImageResolver


@pytest.fixture
async def client():
    app = create_app(Settings(seed=11))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_list_players(client: AsyncClient):
    resp = await client.get("/api/players")
    assert resp.status_code == 200
    names = [player["name"] for player in resp.json()]
    assert names[:2] == ["Michael Jordan", "LeBron James"]
    assert len(names) == 6


@pytest.mark.anyio
async def test_get_stored_player_uses_camel_case(client: AsyncClient):
    resp = await client.get("/api/players/Michael Jordan")
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["name"] == "Michael Jordan"
    assert payload["careerStats"]["pointsPerGame"] == 30.1
    assert payload["yearsActive"] == "1984-1993, 1995-1998, 2001-2003"
    assert payload["generated"] is False
    assert payload["imageUrl"] is None


@pytest.mark.anyio
async def test_get_stored_player_twice_is_identical(client: AsyncClient):
    first = await client.get("/api/players/larry bird")
    second = await client.get("/api/players/LARRY BIRD")
    assert first.json() == second.json()


@pytest.mark.anyio
async def test_get_unknown_player_generates(client: AsyncClient):
    resp = await client.get("/api/players/not a real person xyz")
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["name"] == "Not A"
    assert payload["generated"] is True


@pytest.mark.anyio
async def test_get_unknown_player_404_when_generation_disabled():
    app = create_app(Settings(allow_generation=False))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        resp = await client.get("/api/players/someone else")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Player not found"

        stored = await client.get("/api/players/kobe bryant")
        assert stored.status_code == 200


@pytest.mark.anyio
async def test_generate_player_endpoint(client: AsyncClient):
    resp = await client.post("/api/generate-player", json={"playerName": "Spud Webb"})
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["name"] == "Spud Webb"
    assert payload["generated"] is True
    assert 0 <= payload["championships"] <= 5


@pytest.mark.anyio
async def test_generate_player_returns_stored_record(client: AsyncClient):
    resp = await client.post("/api/generate-player", json={"playerName": "kobe bryant"})
    assert resp.status_code == 200
    assert resp.json()["generated"] is False


@pytest.mark.anyio
@pytest.mark.parametrize("body", [{}, {"playerName": ""}, {"playerName": "   "}])
async def test_generate_player_requires_name(client: AsyncClient, body):
    resp = await client.post("/api/generate-player", json=body)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Player name is required"


@pytest.mark.anyio
async def test_compare_endpoint(client: AsyncClient):
    resp = await client.post("/api/compare", json={"players": ["Michael Jordan", "Magic Johnson"]})
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["ok"] is True
    assert payload["categories"]["Scoring"]["winner"] == "Michael Jordan"
    assert payload["categories"]["Assists"]["winner"] == "Magic Johnson"
    assert payload["players"][0]["careerStats"]["assistsPerGame"] == 5.3
    assert len(payload["categories"]) == 7


@pytest.mark.anyio
async def test_compare_with_generated_player(client: AsyncClient):
    resp = await client.post("/api/compare", json={"players": ["larry bird", "made up name"]})
    assert resp.status_code == 200
    players = resp.json()["players"]
    assert [player["generated"] for player in players] == [False, True]
    assert players[1]["name"] == "Made Up"


@pytest.mark.anyio
@pytest.mark.parametrize("body", [{}, {"players": []}, {"players": ["michael jordan"]}, {"players": ["jordan", " "]}])
async def test_compare_requires_two_players(client: AsyncClient, body):
    resp = await client.post("/api/compare", json=body)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please provide at least 2 players to compare"


@pytest.mark.anyio
async def test_chat_endpoint(client: AsyncClient):
    resp = await client.post("/api/chat", json={"message": "jordan vs lebron"})
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["response"] == RIVALRIES[frozenset({"jordan", "lebron"})].response
    assert payload["context"] == "Discussing: Jordan, LeBron"
    assert len(payload["suggestions"]) == 3


@pytest.mark.anyio
async def test_chat_with_context(client: AsyncClient):
    resp = await client.post("/api/chat", json={"message": "and his stats?", "context": "Talking about Shaq"})
    assert resp.status_code == 200
    assert resp.json()["context"] == "Discussing: Shaq"


@pytest.mark.anyio
async def test_chat_requires_message(client: AsyncClient):
    resp = await client.post("/api/chat", json={"message": "  "})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Message is required"


@pytest.mark.anyio
async def test_images_attached_when_resolver_configured():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"thumbnail": {"source": "https://img.example/photo.jpg"}})

    resolver = ImageResolver(httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    app = create_app(Settings(), image_resolver=resolver)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        resp = await client.get("/api/players/magic johnson")
        assert resp.json()["imageUrl"] == "https://img.example/photo.jpg"

        compared = await client.post("/api/compare", json={"players": ["magic johnson", "larry bird"]})
        assert [player["imageUrl"] for player in compared.json()["players"]] == [
            "https://img.example/photo.jpg",
            "https://img.example/photo.jpg",
        ]
