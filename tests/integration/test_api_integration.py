"""
Integration tests for TrainInfoClient against a local mock portal.

Runs the real aiohttp stack end to end, emphasizing actual network calls
over mocking to catch real-world integration issues.
"""

import asyncio
import json
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from iceportal.api.exceptions import (
    PortalDeserializationException,
    PortalHttpStatusException,
    PortalNetworkException,
)
from iceportal.api.portal_api_manager import PortalAPIFactory
from iceportal.managers.portal_config import PortalConfigFactory

STATUS_PATH = "/api1/rs/status"
TRIP_PATH = "/api1/rs/tripInfo/trip"


def build_portal(status_handler, trip_handler=None) -> web.Application:
    """Build a mock portal application."""
    app = web.Application()
    app.router.add_get(STATUS_PATH, status_handler)
    if trip_handler is not None:
        app.router.add_get(TRIP_PATH, trip_handler)
    return app


def base_url(server: TestServer) -> str:
    return str(server.make_url("/")).rstrip("/")


class TestMockPortal:
    """Test the client against a local portal."""

    @pytest.mark.asyncio
    async def test_fetch_train_information(self, status_payload, trip_payload):
        seen_agents = []

        async def status_handler(request):
            seen_agents.append(request.headers.get("User-Agent"))
            return web.json_response(status_payload)

        async def trip_handler(request):
            return web.json_response(trip_payload)

        async with TestServer(build_portal(status_handler, trip_handler)) as server:
            async with PortalAPIFactory.create_client_for_base_url(
                base_url(server), user_agent="integration-test"
            ) as client:
                info = await client.fetch_train_information()

        assert info.speed == 254.0
        assert info.trip_identifier == "ICE 599"
        assert info.next_stop.platform == "11"
        assert seen_agents == ["integration-test"]

    @pytest.mark.asyncio
    async def test_http_500(self):
        async def status_handler(request):
            return web.Response(status=500, text="<html>Internal Server Error</html>")

        async with TestServer(build_portal(status_handler)) as server:
            async with PortalAPIFactory.create_client_for_base_url(base_url(server)) as client:
                with pytest.raises(PortalHttpStatusException) as exc_info:
                    await client.fetch_status()

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_missing_trip_endpoint(self, status_payload):
        async def status_handler(request):
            return web.json_response(status_payload)

        async with TestServer(build_portal(status_handler)) as server:
            async with PortalAPIFactory.create_client_for_base_url(base_url(server)) as client:
                with pytest.raises(PortalHttpStatusException) as exc_info:
                    await client.fetch_train_information()

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_truncated_body(self):
        async def status_handler(request):
            return web.Response(text='{"speed": 12, "latit', content_type="application/json")

        async with TestServer(build_portal(status_handler)) as server:
            async with PortalAPIFactory.create_client_for_base_url(base_url(server)) as client:
                with pytest.raises(PortalDeserializationException):
                    await client.fetch_status()

    @pytest.mark.asyncio
    async def test_wrong_content_type_still_parsed(self, status_payload):
        async def status_handler(request):
            return web.Response(text=json.dumps(status_payload), content_type="text/html")

        async with TestServer(build_portal(status_handler)) as server:
            async with PortalAPIFactory.create_client_for_base_url(base_url(server)) as client:
                status = await client.fetch_status()

        assert status.speed == 254.0

    @pytest.mark.asyncio
    async def test_timeout(self, status_payload):
        async def status_handler(request):
            await asyncio.sleep(3)
            return web.json_response(status_payload)

        async with TestServer(build_portal(status_handler)) as server:
            async with PortalAPIFactory.create_client_for_base_url(
                base_url(server), timeout_seconds=1
            ) as client:
                with pytest.raises(PortalNetworkException):
                    await client.fetch_status()


class TestUnreachablePortal:
    """Test behaviour when not connected to the train network."""

    @pytest.mark.asyncio
    async def test_connection_refused(self):
        config = PortalConfigFactory.create_for_base_url("http://127.0.0.1:1", timeout_seconds=2)

        async with PortalAPIFactory.create_client(config) as client:
            with pytest.raises(PortalNetworkException):
                await asyncio.wait_for(client.fetch_status(), timeout=10)
