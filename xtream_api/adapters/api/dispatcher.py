"""
Envoi des requetes vers l'API Xtream et classement des echecs.

Chaque appel logique correspond a exactement un GET: pas de retry, pas de
file d'attente. Les echecs sont traduits dans la taxonomie XtreamError puis
remontes une seule fois a l'appelant.

Classement:
- delai depasse -> RequestTimeoutError
- statut hors 2xx -> HttpStatusError (corps non lu)
- echec transport -> NetworkError, ou CorsError si rejet cross-origin
- JSON invalide -> ProtocolError
- tout le reste -> RequestFailedError
"""

import asyncio
from typing import TYPE_CHECKING, Any, Mapping, Optional

import httpx
from loguru import logger

from xtream_api.adapters.api.url_builder import build_action_url, build_base_api_url
from xtream_api.core.errors import (
    CorsError,
    HttpStatusError,
    NetworkError,
    ProtocolError,
    RequestFailedError,
    RequestTimeoutError,
    XtreamError,
)
from xtream_api.core.ports.transport import (
    ITransport,
    TransportConnectionError,
    TransportResponse,
    TransportTimeout,
)
from xtream_api.core.value_objects import ActionRequest, Scalar

if TYPE_CHECKING:
    from xtream_api.config import ClientConfig

REQUEST_HEADERS = {"Accept": "application/json"}


def redact_url(url: str) -> str:
    """Masque le mot de passe d'une URL d'API avant journalisation."""
    parsed = httpx.URL(url)
    if "password" not in parsed.params:
        return url
    return str(parsed.copy_set_param("password", "***"))


class RequestDispatcher:
    """
    Execute les actions de l'API avec un delai maximal par appel.

    L'URL de base (chemin + identifiants) est calculee une seule fois.
    Le dispatcher ne conserve aucun etat mutable entre deux appels: des
    appels concurrents sont totalement independants.

    Example:
        dispatcher = RequestDispatcher(config, HttpxTransport())
        categories = await dispatcher.dispatch("get_live_categories")
    """

    def __init__(self, config: "ClientConfig", transport: ITransport) -> None:
        """
        Initialise le dispatcher.

        Args:
            config: Configuration du client (adresse, identifiants, delai)
            transport: Transport HTTP utilise pour les GET
        """
        self._config = config
        self._transport = transport
        self._base_api_url = build_base_api_url(config)

    @property
    def base_api_url(self) -> str:
        """URL de l'API avec les identifiants, sans action."""
        return self._base_api_url

    async def dispatch(
        self,
        action: str,
        parameters: Optional[Mapping[str, Optional[Scalar]]] = None,
    ) -> Any:
        """
        Execute une action et retourne le JSON decode.

        Args:
            action: Nom de l'action (ex: "get_live_streams")
            parameters: Parametres optionnels, les valeurs None sont ignorees

        Returns:
            Corps de la reponse decode

        Raises:
            RequestTimeoutError: Pas de reponse dans timeout_ms
            HttpStatusError: Statut HTTP hors 2xx
            NetworkError: Echec reseau (CorsError si rejet cross-origin)
            ProtocolError: Corps JSON invalide
            RequestFailedError: Tout autre echec
        """
        request = ActionRequest(action=action, parameters=dict(parameters or {}))
        url = build_action_url(self._base_api_url, request.action, request.query_params)

        logger.debug("Xtream request", action=action, url=redact_url(url))
        response = await self._send(request, url)

        if not response.is_success:
            raise HttpStatusError(response.status_code, response.reason_phrase)

        try:
            data = response.json()
        except ValueError as e:
            raise ProtocolError(str(e)) from e
        except XtreamError:
            raise
        except Exception as e:
            raise RequestFailedError(action, str(e)) from e

        logger.debug("Xtream request successful", action=action)
        return data

    async def _send(self, request: ActionRequest, url: str) -> TransportResponse:
        """Envoie le GET sous delai et traduit les echecs de transport."""
        timeout_ms = self._config.timeout_ms
        try:
            return await asyncio.wait_for(
                self._transport.get(url, REQUEST_HEADERS),
                timeout=timeout_ms / 1000,
            )
        except (asyncio.TimeoutError, TransportTimeout) as e:
            raise RequestTimeoutError(timeout_ms) from e
        except TransportConnectionError as e:
            raise self._classify_connection_error(e) from e
        except XtreamError:
            raise
        except Exception as e:
            raise RequestFailedError(request.action, str(e)) from e

    def _classify_connection_error(self, error: TransportConnectionError) -> NetworkError:
        cross_origin = error.cross_origin
        if cross_origin is None:
            # Pas d'information structuree: heuristique sur le message
            cross_origin = "CORS" in error.reason
        if cross_origin:
            return CorsError(self._config.base_url, error.reason)
        return NetworkError(self._config.base_url, error.reason)
