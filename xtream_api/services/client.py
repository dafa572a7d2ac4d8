"""
Client Xtream: surface publique, une methode par action de l'API.

Compose le RequestDispatcher (requete, delai, erreurs) et le serialiseur
configure (forme des reponses). Les methodes d'URL de lecture sont
synchrones et n'accedent pas au reseau.

Usage:
    config = ClientConfig(
        base_url="http://example.com:8080",
        username="user",
        password="pass",
        serializer=CamelCaseSerializer,
    )
    async with XtreamClient(config) as client:
        profile = await client.get_profile()
        channels = await client.get_channels(category_id=5)
        url = client.get_channel_url(channels[0]["streamId"])
"""

from typing import Any, Optional

from xtream_api.adapters.api.dispatcher import RequestDispatcher
from xtream_api.adapters.api.transport import HttpxTransport
from xtream_api.adapters.api.url_builder import build_stream_url
from xtream_api.config import ClientConfig
from xtream_api.core.ports.serializer import Operation, apply_serializer
from xtream_api.core.ports.transport import ITransport
from xtream_api.core.value_objects import Scalar, StreamKind, StreamLocator, Timeshift

DEFAULT_VOD_EXTENSION = "mp4"


class XtreamClient:
    """
    Client de l'API player_api.php d'un panel Xtream.

    Chaque methode d'API execute exactement une requete et applique le
    serialiseur de la configuration pour l'operation correspondante.
    Sans serialiseur, les reponses sont retournees brutes.

    Les echecs sont remontes sous forme de XtreamError, sans retry.

    Example:
        client = XtreamClient(config)
        movies = await client.get_movies()
        details = await client.get_movie(movies[0]["stream_id"])
        await client.close()
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[ITransport] = None,
    ) -> None:
        """
        Initialise le client.

        Args:
            config: Configuration immutable (adresse, identifiants, serialiseur)
            transport: Transport HTTP, HttpxTransport par defaut
        """
        self._config = config
        self._transport = transport or HttpxTransport()
        self._dispatcher = RequestDispatcher(config, self._transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def _call(
        self,
        action: str,
        operation: Operation,
        **params: Optional[Scalar],
    ) -> Any:
        data = await self._dispatcher.dispatch(action, params)
        return apply_serializer(self._config.serializer, data, operation)

    # Profil et serveur

    async def get_profile(self) -> Any:
        """Profil du compte: {"user_info": {...}, "server_info": {...}}."""
        return await self._call("get_profile", Operation.PROFILE)

    async def get_server_info(self) -> Any:
        """Informations serveur (protocole, fuseau horaire...)."""
        return await self._call("get_server_info", Operation.SERVER_INFO)

    # Chaines live

    async def get_channel_categories(self) -> Any:
        return await self._call("get_live_categories", Operation.CHANNEL_CATEGORIES)

    async def get_channels(self, category_id: Optional[Scalar] = None) -> Any:
        """
        Liste des chaines live.

        Args:
            category_id: Filtre optionnel par categorie (0 est transmis)
        """
        return await self._call(
            "get_live_streams", Operation.CHANNELS, category_id=category_id
        )

    # Films

    async def get_movie_categories(self) -> Any:
        return await self._call("get_vod_categories", Operation.MOVIE_CATEGORIES)

    async def get_movies(self, category_id: Optional[Scalar] = None) -> Any:
        return await self._call(
            "get_vod_streams", Operation.MOVIES, category_id=category_id
        )

    async def get_movie(self, movie_id: Scalar) -> Any:
        """Details d'un film: {"info": {...}, "movie_data": {...}}."""
        return await self._call("get_vod_info", Operation.MOVIE, vod_id=movie_id)

    # Series

    async def get_show_categories(self) -> Any:
        return await self._call("get_series_categories", Operation.SHOW_CATEGORIES)

    async def get_shows(self, category_id: Optional[Scalar] = None) -> Any:
        return await self._call("get_series", Operation.SHOWS, category_id=category_id)

    async def get_show(self, show_id: Scalar) -> Any:
        """Details d'une serie: {"seasons": [...], "info": {...}, "episodes": {...}}."""
        return await self._call("get_series_info", Operation.SHOW, series_id=show_id)

    # Guide des programmes (EPG)

    async def get_short_epg(
        self,
        channel_id: Scalar,
        limit: Optional[int] = None,
    ) -> Any:
        """
        Programmes a venir d'une chaine.

        Args:
            channel_id: Identifiant du flux live
            limit: Nombre maximal de programmes retournes par le serveur
        """
        return await self._call(
            "get_short_epg", Operation.SHORT_EPG, stream_id=channel_id, limit=limit
        )

    async def get_full_epg(self, channel_id: Scalar) -> Any:
        """Guide complet d'une chaine (action get_simple_data_table)."""
        return await self._call(
            "get_simple_data_table", Operation.FULL_EPG, stream_id=channel_id
        )

    # URLs de lecture

    def generate_stream_url(self, locator: StreamLocator) -> str:
        """
        URL de lecture d'un flux.

        Raises:
            InvalidArgumentError: Si le type de flux n'est pas supporte
        """
        return build_stream_url(self._config, locator)

    def get_channel_url(
        self,
        stream_id: int,
        extension: Optional[str] = None,
        timeshift: Optional[Timeshift] = None,
    ) -> str:
        """URL d'une chaine live, au format prefere si aucune extension n'est donnee."""
        return self.generate_stream_url(
            StreamLocator(
                kind=StreamKind.CHANNEL,
                stream_id=stream_id,
                extension=extension or self._config.preferred_format,
                timeshift=timeshift,
            )
        )

    def get_movie_url(
        self,
        stream_id: int,
        extension: str = DEFAULT_VOD_EXTENSION,
        timeshift: Optional[Timeshift] = None,
    ) -> str:
        return self.generate_stream_url(
            StreamLocator(StreamKind.MOVIE, stream_id, extension, timeshift)
        )

    def get_episode_url(
        self,
        stream_id: int,
        extension: str = DEFAULT_VOD_EXTENSION,
        timeshift: Optional[Timeshift] = None,
    ) -> str:
        return self.generate_stream_url(
            StreamLocator(StreamKind.EPISODE, stream_id, extension, timeshift)
        )

    # Cycle de vie

    async def close(self) -> None:
        """Ferme le transport HTTP."""
        await self._transport.close()

    async def __aenter__(self) -> "XtreamClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
