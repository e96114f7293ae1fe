"""
Unit Tests for DirectoryClient.
"""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi import FastAPI
from fastapi.testclient import TestClient

from core.dependencies import get_http_client
from modules.directory.services.client import (
    BODIES_PATH,
    OFFICIALS_PATH,
    DirectoryClient,
    DirectoryClientDep,
    DirectoryFetchError,
)


def _response(status_code: int = 200, json_data=None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.json.return_value = json_data
    response.text = text
    return response


def _http_client(bodies_response, officials_response) -> MagicMock:
    responses = {
        f"http://directory.test{BODIES_PATH}": bodies_response,
        f"http://directory.test{OFFICIALS_PATH}": officials_response,
    }
    client = MagicMock()
    client.get = AsyncMock(side_effect=lambda url: responses[url])
    return client


class TestFetchDirectory:

    @pytest.mark.asyncio
    async def test_fetches_both_payloads(self, sample_bodies_payload, sample_officials_payload):
        http_client = _http_client(
            _response(json_data=sample_bodies_payload),
            _response(json_data=sample_officials_payload),
        )
        client = DirectoryClient(http_client, "http://directory.test/")

        snapshot = await client.fetch_directory()

        assert http_client.get.await_count == 2
        assert [b.id for b in snapshot.bodies] == [1, 3, 2]
        assert snapshot.officials[0].name_en == "Xi Jinping"
        assert snapshot.bodies[2].members[1].title is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bodies_status, officials_status", [(500, 200), (200, 503), (404, 404)])
    async def test_non_ok_response_raises(self, bodies_status, officials_status):
        http_client = _http_client(
            _response(bodies_status, [], text='{"error": "Failed to fetch bodies"}'),
            _response(officials_status, [], text="[]"),
        )
        client = DirectoryClient(http_client, "http://directory.test")

        with pytest.raises(DirectoryFetchError, match="Failed to fetch data"):
            await client.fetch_directory()

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        http_client = MagicMock()
        http_client.get = AsyncMock(side_effect=httpx.ConnectError("connection refused"))
        client = DirectoryClient(http_client, "http://directory.test")

        with pytest.raises(DirectoryFetchError):
            await client.fetch_directory()

    @pytest.mark.asyncio
    async def test_malformed_payload_raises(self, sample_officials_payload):
        http_client = _http_client(
            _response(json_data=[{"name": "missing id"}]),
            _response(json_data=sample_officials_payload),
        )
        client = DirectoryClient(http_client, "http://directory.test")

        with pytest.raises(DirectoryFetchError):
            await client.fetch_directory()

    @pytest.mark.asyncio
    async def test_works_with_real_transport(self, sample_bodies_payload, sample_officials_payload):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == BODIES_PATH:
                return httpx.Response(200, json=sample_bodies_payload)
            return httpx.Response(200, json=sample_officials_payload)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            snapshot = await DirectoryClient(http_client, "http://directory.test").fetch_directory()

        assert len(snapshot.bodies) == 3
        assert len(snapshot.officials) == 3

    @pytest.mark.asyncio
    async def test_both_requests_failing_raises_once(self):
        http_client = MagicMock()
        http_client.get = AsyncMock(side_effect=httpx.ConnectError("connection refused"))
        client = DirectoryClient(http_client, "http://directory.test")

        with pytest.raises(DirectoryFetchError, match="Failed to fetch data") as exc_info:
            await client.fetch_directory()

        assert http_client.get.await_count == 2
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_failed_request_does_not_abandon_the_other(self, sample_officials_payload):
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url.path)
            if request.url.path == BODIES_PATH:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(200, json=sample_officials_payload)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            with pytest.raises(DirectoryFetchError):
                await DirectoryClient(http_client, "http://directory.test").fetch_directory()

        assert sorted(requested) == sorted([BODIES_PATH, OFFICIALS_PATH])

    @pytest.mark.asyncio
    async def test_non_2xx_from_real_response_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == BODIES_PATH:
                return httpx.Response(204)
            return httpx.Response(302, headers={"location": "/elsewhere"})

        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport) as http_client:
            with pytest.raises(DirectoryFetchError):
                await DirectoryClient(http_client, "http://directory.test").fetch_directory()


class TestGetDirectoryClient:

    @pytest.fixture
    def app(self):
        app = FastAPI()

        @app.get("/base")
        async def base(client: DirectoryClientDep):
            return {"base_url": client._base_url}

        app.dependency_overrides[get_http_client] = lambda: MagicMock()
        return app

    def _use_base_url(self, monkeypatch, base_url):
        settings = MagicMock()
        settings.api_base_url = base_url
        monkeypatch.setattr(
            "modules.directory.services.client.get_directory_settings", lambda: settings
        )

    def test_configured_base_url_wins(self, app, monkeypatch):
        self._use_base_url(monkeypatch, "http://directory.test/")

        response = TestClient(app).get("/base")

        assert response.json() == {"base_url": "http://directory.test"}

    def test_falls_back_to_request_origin(self, app, monkeypatch):
        self._use_base_url(monkeypatch, None)

        response = TestClient(app, base_url="http://127.0.0.1:9123").get("/base")

        assert response.json() == {"base_url": "http://127.0.0.1:9123"}
