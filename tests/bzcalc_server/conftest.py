"""Shared fixtures and utilities for BZCalc server tests."""

import asyncio
from typing import Any, Awaitable, Callable

import pytest
from aiohttp.test_utils import TestClient, TestServer

from bzcalc_server import BZCalcServer, BZCalcServerSettings, BZCalcDispatchMode


@pytest.fixture
def resource_dir(tmp_path):
    """Create a resource directory holding a couple of static pages."""
    resources = tmp_path / "resources"
    resources.mkdir()
    (resources / "index.html").write_text("<h1>Calculator</h1>", encoding="utf-8")
    (resources / "pages").mkdir()
    (resources / "pages" / "about.html").write_text("<p>About</p>", encoding="utf-8")
    (resources / "notes.txt").write_text("not served", encoding="utf-8")
    (tmp_path / "secret.html").write_text("outside", encoding="utf-8")
    return resources


@pytest.fixture
def settings(resource_dir):
    """Server settings pointing at the test resource directory."""
    return BZCalcServerSettings(
        host="127.0.0.1",
        port=49212,
        resource_path=str(resource_dir),
        max_workers=2
    )


@pytest.fixture(params=[BZCalcDispatchMode.POOL, BZCalcDispatchMode.THREAD_PER_REQUEST], ids=["pool", "thread"])
def server(request, settings):
    """A server in each dispatch mode, shut down after the test."""
    settings.dispatch_mode = request.param
    bzcalc_server = BZCalcServer(settings)
    yield bzcalc_server
    asyncio.run(bzcalc_server.stop())


class BZCalcServerTestHelpers:
    """Helper utilities for driving the aiohttp application."""

    @staticmethod
    def run_with_client(server: BZCalcServer, test: Callable[[TestClient], Awaitable[Any]]) -> Any:
        """Run an async test function against a test client for the server's application."""
        async def runner() -> Any:
            async with TestClient(TestServer(server.create_app())) as client:
                return await test(client)

        return asyncio.run(runner())

    @staticmethod
    def calculate(server: BZCalcServer, body: Any, raw: bool = False) -> tuple[int, Any]:
        """POST a calculation request and return (status, decoded JSON body)."""
        async def test(client: TestClient) -> tuple[int, Any]:
            if raw:
                response = await client.post("/calculate", data=body)

            else:
                response = await client.post("/calculate", json=body)

            return response.status, await response.json()

        return BZCalcServerTestHelpers.run_with_client(server, test)

    @staticmethod
    def get(server: BZCalcServer, path: str) -> tuple[int, str, str]:
        """GET a path and return (status, content type, text)."""
        async def test(client: TestClient) -> tuple[int, str, str]:
            response = await client.get(path)
            return response.status, response.content_type, await response.text()

        return BZCalcServerTestHelpers.run_with_client(server, test)


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return BZCalcServerTestHelpers
