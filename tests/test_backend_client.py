"""
Tests for the backend REST client against a mocked transport
"""

import json

import httpx
import pytest

from app.core.exceptions import BackendError
from app.services.backend_client import BackendClient
from factories import fail, make_venue, ok


def client_for(handler):
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://backend")
    return BackendClient(http_client=http)


@pytest.mark.unit
@pytest.mark.asyncio
class TestEnvelope:
    """Envelope unwrapping and error mapping"""

    async def test_branches_field_mapping(self, backend_client):
        venues = await backend_client.get_branches()

        first = venues[0]
        assert first.id == "1"
        assert first.brand_name == "셜록홈즈"
        assert first.branch_name == "강남 1호점"
        assert (first.lat, first.lng) == (37.498095, 127.02761)
        assert first.phone == "02-000-0000"
        assert [t.id for t in first.themes] == ["11", "12"]
        assert first.themes[0].tags == ["판타지", "감성", "초보추천"]
        assert first.themes[0].poster_url == "https://img.example.com/11.png"

    async def test_error_envelope(self, backend_client, fake_backend):
        fake_backend.fail_with = fail("BRANCH_NOT_FOUND", "지점을 찾을 수 없습니다")

        with pytest.raises(BackendError) as exc_info:
            await backend_client.get_branches()

        assert exc_info.value.code == "BRANCH_NOT_FOUND"
        assert exc_info.value.message == "지점을 찾을 수 없습니다"
        assert exc_info.value.status_code == 502

    async def test_error_envelope_without_code(self):
        backend = client_for(lambda request: httpx.Response(
            404, json={"success": False, "error": {"message": "Branch not found"}}
        ))

        with pytest.raises(BackendError) as exc_info:
            await backend.get_branch("9")

        assert exc_info.value.message == "Branch not found"
        assert exc_info.value.code == "BACKEND_ERROR"

    async def test_error_envelope_without_message(self):
        backend = client_for(lambda request: httpx.Response(
            200, json={"success": False, "error": {"code": "THEME_CLOSED"}}
        ))

        with pytest.raises(BackendError) as exc_info:
            await backend.get_theme("11")

        assert exc_info.value.code == "THEME_CLOSED"
        assert exc_info.value.message == "Failed to fetch theme"

    async def test_error_envelope_without_details(self):
        backend = client_for(lambda request: httpx.Response(200, json={"success": False}))

        with pytest.raises(BackendError) as exc_info:
            await backend.get_themes()

        assert exc_info.value.code == "BACKEND_ERROR"
        assert exc_info.value.message == "Failed to fetch themes"

    async def test_transport_error(self, backend_client, fake_backend):
        fake_backend.unreachable = True

        with pytest.raises(BackendError) as exc_info:
            await backend_client.get_branches()

        assert exc_info.value.message.startswith("Failed to fetch branches")

    async def test_non_envelope_response(self):
        backend = client_for(lambda request: httpx.Response(503, text="<html>down</html>"))

        with pytest.raises(BackendError) as exc_info:
            await backend.get_branches()

        assert exc_info.value.details == {"status_code": 503}

    async def test_malformed_payload(self):
        backend = client_for(lambda request: httpx.Response(200, json=ok([{"brandName": "no id"}])))

        with pytest.raises(BackendError):
            await backend.get_branches()

    async def test_null_data_list(self):
        backend = client_for(lambda request: httpx.Response(200, json=ok(None)))

        assert await backend.get_branches() == []


@pytest.mark.unit
@pytest.mark.asyncio
class TestEndpoints:
    """Request paths and payloads"""

    async def test_create_review_payload(self, backend_client, fake_backend):
        review = await backend_client.create_review(
            theme_id="11",
            nickname="탈출왕",
            scores={"difficulty": 4, "fear": 2, "activity": 6, "recommendation": 8},
            comment="재밌어요"
        )

        body = json.loads(fake_backend.requests[-1].content)
        assert body == {
            "themeId": 11,
            "nickname": "탈출왕",
            "comment": "재밌어요",
            "pointDifficulty": 4,
            "pointFear": 2,
            "pointActivity": 6,
            "pointRecommendation": 8,
        }
        assert review.theme_id == "11"
        assert review.nickname == "탈출왕"
        assert review.recommendation == 8

    async def test_theme_reviews(self, backend_client, fake_backend):
        await backend_client.create_review("11", "a", {"difficulty": 1, "fear": 1, "activity": 1, "recommendation": 1}, "")
        await backend_client.create_review("21", "b", {"difficulty": 2, "fear": 2, "activity": 2, "recommendation": 2}, "")

        reviews = await backend_client.get_theme_reviews("11")

        assert [r.nickname for r in reviews] == ["a"]
        assert fake_backend.requests[-1].url.path == "/themes/11/reviews"

    async def test_delete_uses_post(self):
        seen = []

        def handler(request):
            seen.append((request.method, request.url.path))
            return httpx.Response(200, json=ok(None))

        backend = client_for(handler)
        await backend.delete_branch("7")
        await backend.delete_review("42")

        assert seen == [("POST", "/branches/7/delete"), ("POST", "/reviews/42/delete")]

    async def test_create_branch_payload(self):
        seen = []

        def handler(request):
            body = json.loads(request.content)
            seen.append(body)
            return httpx.Response(200, json=ok(dict(body, id=99, themes=[])))

        backend = client_for(handler)
        created = await backend.create_branch(make_venue("local", lat=37.5, lng=127.0, brand="A", branch="B"))

        assert seen[0]["latitude"] == 37.5
        assert seen[0]["longitude"] == 127.0
        assert seen[0]["brandName"] == "A"
        assert created.id == "99"

    async def test_single_branch(self, backend_client, fake_backend):
        venue = await backend_client.get_branch("2")

        assert fake_backend.requests[-1].url.path == "/branches/2"
        assert venue.brand_name == "키이스케이프"
        assert venue.branch_name == "홍대점"
        assert [t.id for t in venue.themes] == ["21"]

    async def test_missing_branch(self, backend_client):
        with pytest.raises(BackendError) as exc_info:
            await backend_client.get_branch("404")

        assert exc_info.value.code == "NOT_FOUND"
        assert exc_info.value.message == "Branch not found"

    async def test_single_theme(self, backend_client):
        theme = await backend_client.get_theme("12")

        assert theme.name == "지하감옥"
        assert theme.tags == ["탈출", "스릴러"]
        assert (theme.difficulty, theme.fear) == (7, 5)

    async def test_branch_themes(self, backend_client, fake_backend):
        themes = await backend_client.get_branch_themes("1")

        assert fake_backend.requests[-1].url.path == "/branches/1/themes"
        assert [t.id for t in themes] == ["11", "12"]
        assert themes[0].recommendation == 8

    async def test_advertisements_sorted(self, backend_client):
        ads = await backend_client.get_advertisements()

        assert [ad.id for ad in ads] == ["1", "2"]
        assert ads[0].image_url == "https://img.example.com/ad1.png"
        assert ads[0].link_text == "보기"

    async def test_themes_list(self, backend_client):
        themes = await backend_client.get_themes()

        assert [t.id for t in themes] == ["11", "12", "21", "31"]
        assert themes[2].tags == ["SF", "활동성"]

    async def test_login_forwards_credentials(self, backend_client, fake_backend):
        data = await backend_client.login("user@example.com", "secret")

        assert json.loads(fake_backend.requests[-1].content) == {
            "email": "user@example.com",
            "password": "secret",
        }
        assert data["userId"] == 1

    async def test_owned_client_closed(self):
        backend = BackendClient()
        await backend.close()

        assert backend.http.is_closed
