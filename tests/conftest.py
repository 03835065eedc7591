"""
Pytest configuration and shared fixtures.
"""

import asyncio
import sys
from pathlib import Path

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

# Add project root to path
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from stress_config import StressConfig, Endpoint


@pytest.fixture
def config(tmp_path):
    """Config with two endpoints and results written under tmp_path."""
    return StressConfig(
        base_url="http://127.0.0.1:9",
        endpoints=(
            Endpoint(api_name="API_Endpoint1", path="/one"),
            Endpoint(api_name="API_Endpoint2", path="/two"),
        ),
        method="POST",
        preset="academic",
        timeout=5.0,
        results_file=str(tmp_path / "results.csv"),
    )


class TargetState:
    """Requests seen by the test server."""

    def __init__(self):
        self.bodies = []
        self.in_flight = 0
        self.peak_in_flight = 0


@pytest_asyncio.fixture
async def target_server():
    """
    In-process aiohttp server:
      /ok     200 after a short delay, records the request body
      /fail   500
      /slow   sleeps 2s before answering
    """
    state = TargetState()

    async def ok(request):
        state.in_flight += 1
        state.peak_in_flight = max(state.peak_in_flight, state.in_flight)
        try:
            state.bodies.append(await request.read())
            await asyncio.sleep(float(request.query.get("delay", "0.05")))
            return web.json_response({"status": "ok"})
        finally:
            state.in_flight -= 1

    async def fail(request):
        await request.read()
        return web.json_response({"error": "boom"}, status=500)

    async def slow(request):
        await asyncio.sleep(2)
        return web.json_response({"status": "late"})

    app = web.Application()
    for path, handler in (("/ok", ok), ("/fail", fail), ("/slow", slow)):
        app.router.add_route("*", path, handler)

    server = TestServer(app)
    await server.start_server()
    server.state = state
    server.base_url = f"http://{server.host}:{server.port}"
    yield server
    await server.close()
