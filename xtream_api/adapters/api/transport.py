"""
Transport HTTP par defaut, base sur httpx.

Implemente ITransport avec un httpx.AsyncClient cree a la demande.
Le delai de reponse est gere par le dispatcher (asyncio.wait_for): le
client httpx n'a pas de timeout propre, l'annulation de la coroutine
suffit a abandonner la requete en cours.

Usage:
    transport = HttpxTransport()
    response = await transport.get(url, {"Accept": "application/json"})
    await transport.close()
"""

from http.cookiejar import CookieJar, DefaultCookiePolicy
from typing import Mapping, Optional

import httpx

from xtream_api.core.ports.transport import (
    ITransport,
    TransportConnectionError,
    TransportTimeout,
)


class _RejectAllCookies(DefaultCookiePolicy):
    """Politique de cookies refusant tout stockage et tout envoi."""

    def set_ok(self, cookie, request):
        return False

    def return_ok(self, cookie, request):
        return False


class HttpxTransport(ITransport):
    """
    Transport ITransport s'appuyant sur httpx.AsyncClient.

    Le client HTTP est unique pour beneficier du connection pooling.
    Les cookies recus ne sont jamais conserves ni renvoyes, y compris
    entre les etapes d'une redirection.

    Example:
        transport = HttpxTransport()
        client = XtreamClient(config, transport=transport)
        ...
        await transport.close()
    """

    def __init__(self, verify: bool = True, follow_redirects: bool = True) -> None:
        """
        Initialise le transport.

        Args:
            verify: Verification des certificats TLS (de nombreux panels
                    Xtream utilisent des certificats auto-signes)
            follow_redirects: Suivre les redirections HTTP
        """
        self._verify = verify
        self._follow_redirects = follow_redirects
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=None,
                verify=self._verify,
                follow_redirects=self._follow_redirects,
                cookies=CookieJar(policy=_RejectAllCookies()),
            )
        return self._client

    async def get(self, url: str, headers: Mapping[str, str]) -> httpx.Response:
        """
        Execute un GET et retourne la reponse sans verifier le statut.

        Raises:
            TransportTimeout: Sur httpx.TimeoutException
            TransportConnectionError: Sur les autres httpx.TransportError
        """
        try:
            return await self._get_client().get(url, headers=dict(headers))
        except httpx.TimeoutException as e:
            raise TransportTimeout(str(e) or type(e).__name__) from e
        except httpx.TransportError as e:
            # httpx n'applique pas de politique CORS: aucune information cross-origin
            raise TransportConnectionError(str(e) or type(e).__name__) from e

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
