"""
Tests pour HttpxTransport - transport ITransport base sur httpx.

Utilise respx pour simuler les appels httpx et verifie:
- La reponse est retournee sans verification du statut
- Les exceptions httpx sont traduites en erreurs de transport
- Les cookies ne sont pas renvoyes, ni d'une requete a l'autre ni au fil des redirections
"""

import httpx
import pytest
import respx

from xtream_api.adapters.api.transport import HttpxTransport
from xtream_api.core.ports.transport import (
    ITransport,
    TransportConnectionError,
    TransportTimeout,
)

URL = "http://example.com:8080/player_api.php?username=user&password=pass&action=get_profile"


class TestHttpxTransport:
    """Tests pour HttpxTransport.get()."""

    def test_implements_interface(self):
        assert isinstance(HttpxTransport(), ITransport)

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_returns_response(self):
        route = respx.get("http://example.com:8080/player_api.php").mock(
            return_value=httpx.Response(200, json={"user_info": {}})
        )
        transport = HttpxTransport()

        response = await transport.get(URL, {"Accept": "application/json"})
        await transport.close()

        assert response.status_code == 200
        assert response.json() == {"user_info": {}}
        assert route.calls.last.request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_status_is_not_raised(self):
        respx.get("http://example.com:8080/player_api.php").mock(
            return_value=httpx.Response(500)
        )
        transport = HttpxTransport()

        response = await transport.get(URL, {})
        await transport.close()

        assert response.status_code == 500
        assert response.is_success is False

    @pytest.mark.asyncio
    @respx.mock
    async def test_connect_error_becomes_transport_connection_error(self):
        respx.get("http://example.com:8080/player_api.php").mock(
            side_effect=httpx.ConnectError("Connection refused")
        )
        transport = HttpxTransport()

        with pytest.raises(TransportConnectionError) as exc_info:
            await transport.get(URL, {})
        await transport.close()

        assert "Connection refused" in exc_info.value.reason
        assert exc_info.value.cross_origin is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout_exception_becomes_transport_timeout(self):
        respx.get("http://example.com:8080/player_api.php").mock(
            side_effect=httpx.ReadTimeout("read timed out")
        )
        transport = HttpxTransport()

        with pytest.raises(TransportTimeout):
            await transport.get(URL, {})
        await transport.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_cookies_are_not_forwarded(self):
        route = respx.get("http://example.com:8080/player_api.php").mock(
            return_value=httpx.Response(200, json=[], headers={"Set-Cookie": "session=abc"})
        )
        transport = HttpxTransport()

        await transport.get(URL, {})
        await transport.get(URL, {})
        await transport.close()

        assert "cookie" not in route.calls.last.request.headers

    @pytest.mark.asyncio
    @respx.mock
    async def test_cookies_are_not_forwarded_across_redirects(self):
        respx.get("http://example.com:8080/player_api.php").mock(
            return_value=httpx.Response(
                302,
                headers={
                    "Location": "http://example.com:8080/moved.php",
                    "Set-Cookie": "session=abc; Path=/",
                },
            )
        )
        target = respx.get("http://example.com:8080/moved.php").mock(
            return_value=httpx.Response(200, json=[])
        )
        transport = HttpxTransport()

        response = await transport.get(URL, {})

        assert response.status_code == 200
        assert "cookie" not in target.calls.last.request.headers
        assert len(transport._get_client().cookies) == 0
        await transport.close()

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        transport = HttpxTransport()
        transport._get_client()

        await transport.close()
        await transport.close()

        assert transport._client is None
