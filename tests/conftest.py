"""
Test configuration and fixtures

The REST backend and the geocoder are faked with ``httpx.MockTransport``;
persisted state goes to an in-process fake Redis.
"""

import json
import os
from typing import Any, Dict, List, Optional

import fakeredis
import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment before the app modules read settings
os.environ["APP_ENV"] = "testing"
os.environ["PROMETHEUS_ENABLED"] = "false"

from app.core.state import AppState
from app.core.storage import StateStorage
from app.services.backend_client import BackendClient
from app.services.geocoding_service import GeocodingService
from factories import fail, ok, server_branch, server_theme


class FakeBackend:
    """
    Minimal in-memory stand-in for the REST backend, served through
    ``httpx.MockTransport``
    """

    def __init__(self):
        self.branches: List[Dict[str, Any]] = [
            server_branch(1, "셜록홈즈", "강남 1호점", 37.498095, 127.027610, [
                server_theme(11, "빛과 그림자", (4, 2, 6, 8), "판타지,감성,초보추천"),
                server_theme(12, "지하감옥", (7, 5, 3, 7), "탈출,스릴러"),
            ]),
            server_branch(2, "키이스케이프", "홍대점", 37.556289, 126.922648, [
                server_theme(21, "삐릿-뽀", (8, 1, 9, 10), "SF,활동성"),
            ]),
            server_branch(3, "비트포비아", "강남던전", 37.4985, 127.0285, [
                server_theme(31, "강남목욕탕", (5, 0, 4, 9), "코믹"),
            ]),
        ]
        self.reviews: List[Dict[str, Any]] = []
        self.advertisements: List[Dict[str, Any]] = [
            {
                "id": 2, "title": "두번째 광고", "description": "", "imageUrl": "https://img.example.com/ad2.png",
                "linkUrl": "https://ad2.example.com", "linkText": "보기", "displayOrder": 2,
            },
            {
                "id": 1, "title": "첫번째 광고", "description": "", "imageUrl": "https://img.example.com/ad1.png",
                "linkUrl": "https://ad1.example.com", "linkText": "보기", "displayOrder": 1,
            },
        ]
        self.fail_with: Optional[Dict[str, Any]] = None
        self.unreachable = False
        self.requests: List[httpx.Request] = []
        self._next_review_id = 100

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if self.fail_with is not None:
            return httpx.Response(200, json=self.fail_with)

        method, path = request.method, request.url.path
        parts = [p for p in path.split("/") if p]

        if method == "GET" and parts == ["branches"]:
            return httpx.Response(200, json=ok(self.branches))
        if method == "GET" and parts == ["advertisements"]:
            return httpx.Response(200, json=ok(self.advertisements))
        if method == "GET" and parts == ["themes"]:
            themes = [dict(t, branchId=b["id"]) for b in self.branches for t in b["themes"]]
            return httpx.Response(200, json=ok(themes))
        if method == "GET" and len(parts) in (2, 3) and parts[0] == "branches" and parts[2:] in ([], ["themes"]):
            branch = next((b for b in self.branches if str(b["id"]) == parts[1]), None)
            if branch is None:
                return httpx.Response(404, json=fail("NOT_FOUND", "Branch not found"))
            return httpx.Response(200, json=ok(branch if len(parts) == 2 else branch["themes"]))
        if method == "GET" and len(parts) == 2 and parts[0] == "themes":
            theme = next((t for b in self.branches for t in b["themes"] if str(t["id"]) == parts[1]), None)
            if theme is None:
                return httpx.Response(404, json=fail("NOT_FOUND", "Theme not found"))
            return httpx.Response(200, json=ok(theme))
        if method == "GET" and len(parts) == 3 and parts[0] == "themes" and parts[2] == "reviews":
            theme_id = int(parts[1])
            return httpx.Response(200, json=ok([r for r in self.reviews if r["themeId"] == theme_id]))
        if method == "POST" and parts == ["reviews"]:
            body = json.loads(request.content)
            self._next_review_id += 1
            review = {
                "id": self._next_review_id,
                "themeId": body["themeId"],
                "userNickname": body["nickname"],
                "pointDifficulty": body["pointDifficulty"],
                "pointFear": body["pointFear"],
                "pointActivity": body["pointActivity"],
                "pointRecommendation": body["pointRecommendation"],
                "comment": body["comment"],
                "createdAt": "2026-01-15T10:30:00",
            }
            self.reviews.append(review)
            return httpx.Response(201, json=ok(review))
        if method == "POST" and len(parts) == 3 and parts[0] == "reviews" and parts[2] == "delete":
            self.reviews = [r for r in self.reviews if str(r["id"]) != parts[1]]
            return httpx.Response(200, json=ok(None))
        if method == "POST" and parts[:1] == ["auth"]:
            body = json.loads(request.content)
            return httpx.Response(200, json=ok({"userId": 1, "nickname": body.get("nickname", "Escaper")}))

        return httpx.Response(404, json=fail("NOT_FOUND", f"No route for {method} {path}"))


class FakeGeocoder:
    """Kakao address search stand-in keyed by address"""

    def __init__(self):
        self.results: Dict[str, Dict[str, str]] = {
            "서울 강남구 강남대로 123": {"x": "127.027610", "y": "37.498095"},
            "서울 마포구 어울마당로 45": {"x": "126.922648", "y": "37.556289"},
        }
        self.status_code = 200
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, text="upstream error")
        hit = self.results.get(request.url.params.get("query"))
        return httpx.Response(200, json={"documents": [hit] if hit else []})


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def fake_geocoder():
    return FakeGeocoder()


@pytest_asyncio.fixture
async def redis_client():
    client = fakeredis.FakeAsyncRedis(decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()


@pytest.fixture
def storage(redis_client):
    return StateStorage(redis_client)


@pytest_asyncio.fixture
async def backend_client(fake_backend):
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(fake_backend.handler),
        base_url="http://backend"
    )
    yield BackendClient(http_client=http)
    await http.aclose()


@pytest_asyncio.fixture
async def geocoder(fake_geocoder):
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake_geocoder.handler))
    yield GeocodingService(api_key="test-key", http_client=http)
    await http.aclose()


@pytest_asyncio.fixture
async def app_state(storage, backend_client, geocoder):
    """State after a normal startup against the fake backend"""
    state = AppState(storage=storage, backend=backend_client, geocoder=geocoder)
    await state.load()
    return state


@pytest_asyncio.fixture
async def client(app_state):
    """Test client bound to ``app_state``"""
    from app.main import app

    app.state.app_state = app_state
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_client(client, app_state):
    app_state.user.toggle_admin()
    return client
