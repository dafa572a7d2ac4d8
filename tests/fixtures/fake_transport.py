"""
Transport de test scriptable, sans reseau.

FakeTransport implemente ITransport: il enregistre les requetes recues et
retourne une reponse preparee, leve une erreur, ou attend avant de repondre
(pour les tests de delai).
"""

import asyncio
from typing import Any, Mapping, Optional

import httpx

from xtream_api.core.ports.transport import ITransport


class FakeTransport(ITransport):
    """
    Transport de test: retourne une reponse ou leve une erreur preparee.

    Attributes:
        requests: Liste des (url, headers) recus, dans l'ordre
        cancelled: True si la requete a ete annulee pendant l'attente
        closed: True apres close()
    """

    def __init__(
        self,
        response: Optional[httpx.Response] = None,
        error: Optional[BaseException] = None,
        delay: float = 0.0,
    ) -> None:
        self.response = response if response is not None else httpx.Response(200, json=[])
        self.error = error
        self.delay = delay
        self.requests: list[tuple[str, dict[str, str]]] = []
        self.cancelled = False
        self.closed = False

    async def get(self, url: str, headers: Mapping[str, str]) -> httpx.Response:
        self.requests.append((url, dict(headers)))
        if self.delay:
            try:
                await asyncio.sleep(self.delay)
            except asyncio.CancelledError:
                self.cancelled = True
                raise
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self) -> None:
        self.closed = True


def json_response(data: Any, status_code: int = 200) -> httpx.Response:
    """Reponse httpx avec un corps JSON."""
    return httpx.Response(status_code, json=data)
