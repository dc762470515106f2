"""Tests against the layer installed on the real libraries."""

import http.client
import json
import re
import urllib.request

import httpx
import pytest
import respx
from respx.patterns import M

from stubnet.allowlist import ALLOWLIST_ROUTE_NAME, LOOPBACK_HOST_PATTERN
from stubnet.config import Settings
from stubnet.installer import install, installed_components

pytestmark = pytest.mark.usefixtures("installed_layer")


class TestInstalledState:
    def test_every_component_active(self):
        assert installed_components() == {"substitution": True, "hosts": True, "allowlist": True}

    def test_reinstall_changes_nothing(self):
        assert not install(Settings()).changed

    def test_global_re_sub(self):
        assert re.sub("Yale", "Fale", "Yale, YALE, yale", flags=re.IGNORECASE) == "Fale, FALE, fale"
        assert re.sub("Yale", "Fale", "Yale Yale", count=1) == "Fale Yale"
        assert re.sub("Yale", "Fale", "no Yale references: Yale", flags=re.I) == "no Yale references: Yale"
        assert re.sub(r"\d", "#", "a1b2") == "a#b#"


class TestInstalledHttpx:
    def test_module_level_get(self, loopback_server):
        port = loopback_server.server_port

        response = httpx.get(f"http://localhost:{port}/plain", timeout=5)

        assert response.json() == {"host": f"127.0.0.1:{port}", "path": "/plain"}
        assert response.request.url.host == "localhost"

    def test_cookies_round_trip(self, loopback_server):
        port = loopback_server.server_port

        with httpx.Client(timeout=5) as client:
            client.get(f"http://localhost:{port}/login")
            response = client.get(f"http://localhost:{port}/whoami")

        assert response.json()["cookie"] == "session=abc"

    def test_same_host_redirect_keeps_authorization(self, loopback_server):
        port = loopback_server.server_port

        with httpx.Client(timeout=5, follow_redirects=True) as client:
            response = client.get(
                f"http://localhost:{port}/to-whoami",
                headers={"Authorization": "Bearer t"},
            )

        assert response.json() == {
            "host": f"127.0.0.1:{port}",
            "cookie": None,
            "authorization": "Bearer t",
        }
        assert str(response.url) == f"http://localhost:{port}/whoami"

    @pytest.mark.asyncio
    async def test_async_client(self, loopback_server):
        port = loopback_server.server_port

        async with httpx.AsyncClient(timeout=5) as client:
            response = await client.get(f"http://localhost:{port}/async")

        assert response.json() == {"host": f"127.0.0.1:{port}", "path": "/async"}


class TestInstalledHttpClient:
    def test_connection_to_alias(self, loopback_server):
        port = loopback_server.server_port
        connection = http.client.HTTPConnection("localhost", port, timeout=5)
        try:
            connection.request("GET", "/raw")
            payload = json.loads(connection.getresponse().read())
        finally:
            connection.close()

        assert connection.host == "127.0.0.1"
        assert payload == {"host": f"127.0.0.1:{port}", "path": "/raw"}

    def test_plain_urlopen_sends_numeric_host(self, loopback_server):
        port = loopback_server.server_port

        with urllib.request.urlopen(f"http://localhost:{port}/plain", timeout=5) as response:
            payload = json.loads(response.read())

        assert payload == {"host": f"127.0.0.1:{port}", "path": "/plain"}


class TestInstalledRespx:
    def test_alias_passes_through_and_later_mock_wins(self, loopback_server):
        port = loopback_server.server_port

        with respx.mock:
            mocked = respx.get(f"http://127.0.0.1:{port}/mocked").respond(json={"mocked": True})
            assert respx.mock.routes[-1].name == ALLOWLIST_ROUTE_NAME

            mocked_response = httpx.get(f"http://localhost:{port}/mocked", timeout=5)
            live_response = httpx.get(f"http://localhost:{port}/live", timeout=5)
            assert mocked.call_count == 1

        assert mocked_response.json() == {"mocked": True}
        assert live_response.json() == {"host": f"127.0.0.1:{port}", "path": "/live"}

    def test_numeric_pass_through_registration_is_broadened(self):
        with respx.mock(assert_all_called=False) as router:
            allowed = router.route(host="127.0.0.1").pass_through()
            mocked = router.route(host="127.0.0.1", path="/x").respond(204)

            assert allowed.pattern == M(host__regex=LOOPBACK_HOST_PATTERN)
            assert mocked.pattern == M(host="127.0.0.1", path="/x")
