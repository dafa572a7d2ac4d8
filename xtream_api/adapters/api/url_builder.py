"""
Construction des URLs de l'API Xtream et des URLs de lecture.

Deux familles d'URLs:
- API: {base}/player_api.php?username=...&password=...&action=...
- Lecture: {base}/{live|movie|series}/{username}/{password}/{id}.{ext}

Les fonctions de ce module sont pures: aucun acces reseau.

Usage:
    base_api_url = build_base_api_url(config)
    url = build_action_url(base_api_url, "get_live_streams", {"category_id": 5})
    stream = build_stream_url(config, StreamLocator(StreamKind.MOVIE, 42, "mp4"))
"""

from typing import Mapping, Optional, Protocol

import httpx

from xtream_api.core.errors import InvalidArgumentError
from xtream_api.core.value_objects import Scalar, StreamKind, StreamLocator, format_param

API_PATH = "/player_api.php"


class Credentials(Protocol):
    """Adresse et identifiants d'un serveur Xtream (ClientConfig les fournit)."""

    base_url: str
    username: str
    password: str


def build_base_api_url(config: Credentials) -> str:
    """
    Construit l'URL de base de l'API avec les identifiants.

    Le chemin de base_url est remplace par /player_api.php.

    Args:
        config: Adresse et identifiants du serveur

    Returns:
        URL de l'API avec username et password en parametres
    """
    url = httpx.URL(config.base_url).join(API_PATH)
    url = url.copy_set_param("username", config.username)
    url = url.copy_set_param("password", config.password)
    return str(url)


def build_action_url(
    base_api_url: str,
    action: str,
    parameters: Optional[Mapping[str, Optional[Scalar]]] = None,
) -> str:
    """
    Ajoute l'action et ses parametres a l'URL de base de l'API.

    Un parametre deja present est remplace; les parametres a None sont ignores.
    L'action n'est pas validee: une action inconnue est un probleme serveur.

    Args:
        base_api_url: URL retournee par build_base_api_url
        action: Nom de l'action (ex: "get_vod_info")
        parameters: Parametres de l'action, valeurs converties en chaines

    Returns:
        URL complete de la requete
    """
    url = httpx.URL(base_api_url).copy_set_param("action", action)
    for key, value in (parameters or {}).items():
        if value is None:
            continue
        url = url.copy_set_param(key, format_param(value))
    return str(url)


def _resolve_kind(kind: StreamKind | str) -> StreamKind:
    try:
        return StreamKind(kind)
    except ValueError:
        raise InvalidArgumentError(f"Unsupported stream type: {kind}") from None


def build_stream_url(config: Credentials, locator: StreamLocator) -> str:
    """
    Construit l'URL de lecture d'un flux.

    Si le locator porte un timeshift complet (debut et duree), les
    parametres utc et duration sont ajoutes; sinon l'URL n'a pas de
    query string.

    Args:
        config: Adresse et identifiants du serveur
        locator: Type, identifiant, extension et timeshift du flux

    Returns:
        URL de lecture

    Raises:
        InvalidArgumentError: Si le type de flux n'est pas supporte

    Example:
        build_stream_url(config, StreamLocator("movie", 42, "mp4"))
        # -> "http://h:8080/movie/u/p/42.mp4"
    """
    kind = _resolve_kind(locator.kind)
    base_url = config.base_url.rstrip("/")
    url = (
        f"{base_url}/{kind.segment}/{config.username}/{config.password}/"
        f"{locator.stream_id}.{locator.extension}"
    )

    timeshift = locator.timeshift
    if timeshift is not None and timeshift.is_complete:
        url = str(
            httpx.URL(url).copy_merge_params(
                {"utc": str(timeshift.utc), "duration": str(timeshift.duration)}
            )
        )

    return url
