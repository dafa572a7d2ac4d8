"""
Taxonomie des erreurs du client Xtream.

Toutes les erreurs remontees a l'appelant derivent de XtreamError.
Aucune n'est relancee ni masquee par la bibliotheque: le dispatcher
se contente de classer l'echec et d'y ajouter le contexte de l'action.

Hierarchie:
- XtreamError
  - RequestTimeoutError : delai de reponse depasse
  - HttpStatusError : statut HTTP hors 2xx
  - NetworkError : echec de transport (DNS, connexion refusee...)
    - CorsError : rejet cross-origin
  - ProtocolError : corps de reponse JSON invalide
  - RequestFailedError : tout autre echec, avec l'action concernee
  - InvalidArgumentError : argument invalide fourni par l'appelant
"""

from typing import Optional


class XtreamError(Exception):
    """Erreur de base du client Xtream."""


class RequestTimeoutError(XtreamError):
    """
    Levee quand le serveur ne repond pas dans le delai configure.

    Attributes:
        timeout_ms: Delai configure en millisecondes
    """

    def __init__(self, timeout_ms: int) -> None:
        self.timeout_ms = timeout_ms
        super().__init__(f"Request timeout after {timeout_ms}ms")


class HttpStatusError(XtreamError):
    """
    Levee quand le serveur repond avec un statut HTTP d'erreur.

    Le corps de la reponse n'est pas lu dans ce cas.

    Attributes:
        status: Code de statut HTTP (ex: 404)
        reason: Phrase de raison associee (ex: "Not Found")
    """

    def __init__(self, status: int, reason: str) -> None:
        self.status = status
        self.reason = reason
        super().__init__(f"HTTP {status}: {reason}")


class NetworkError(XtreamError):
    """
    Echec au niveau transport: resolution DNS, connexion refusee, etc.

    Attributes:
        url: Adresse du serveur vise
        reason: Message d'origine de l'echec
    """

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        super().__init__(self._describe())

    def _describe(self) -> str:
        return (
            f"Network error: Unable to connect to {self.url}. "
            "Please check if the server is running and accessible."
        )


class CorsError(NetworkError):
    """Le serveur a rejete une requete cross-origin."""

    def _describe(self) -> str:
        return (
            f"CORS error: The server at {self.url} doesn't allow cross-origin "
            "requests from this domain. This is a server-side configuration issue."
        )


class ProtocolError(XtreamError):
    """
    Le corps de la reponse n'est pas un JSON valide.

    Attributes:
        reason: Message de l'erreur de parsing d'origine
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed response body: {reason}")


class RequestFailedError(XtreamError):
    """
    Echec non classe, enveloppe avec le nom de l'action.

    Attributes:
        action: Action Xtream concernee (ex: "get_live_streams")
        reason: Message de l'erreur d'origine
    """

    def __init__(self, action: str, reason: Optional[str] = None) -> None:
        self.action = action
        self.reason = reason or ""
        super().__init__(f"Xtream API request failed ({action}): {self.reason}")


class InvalidArgumentError(XtreamError, ValueError):
    """Argument invalide fourni par l'appelant (ex: type de flux inconnu)."""
