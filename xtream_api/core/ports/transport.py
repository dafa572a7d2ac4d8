"""
Interface port pour le transport HTTP.

Le client ne parle jamais directement a une bibliotheque HTTP: il passe
par ITransport. L'adaptateur par defaut (HttpxTransport) s'appuie sur httpx,
mais tout transport capable d'un GET annulable convient.

Les adaptateurs traduisent leurs propres exceptions en TransportTimeout et
TransportConnectionError, ce qui permet au dispatcher de classer les echecs
sur une information structuree plutot que sur le texte des messages.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Protocol


class TransportResponse(Protocol):
    """
    Reponse HTTP minimale attendue d'un transport.

    httpx.Response satisfait deja ce protocole.
    """

    @property
    def status_code(self) -> int: ...

    @property
    def reason_phrase(self) -> str: ...

    @property
    def is_success(self) -> bool: ...

    def json(self) -> Any: ...


class TransportTimeout(Exception):
    """Le transport a abandonne la requete faute de reponse."""


class TransportConnectionError(Exception):
    """
    Echec de connexion remonte par le transport.

    Attributes:
        reason: Message d'origine
        cross_origin: True si le transport sait que la requete a ete
                      rejetee pour une raison cross-origin, None s'il
                      n'a aucune information a ce sujet.
    """

    def __init__(self, reason: str, cross_origin: bool | None = None) -> None:
        self.reason = reason
        self.cross_origin = cross_origin
        super().__init__(reason)


class ITransport(ABC):
    """
    Contrat d'un transport HTTP pour l'API Xtream.

    L'annulation passe par asyncio: quand la coroutine get() est annulee,
    la requete en cours doit etre abandonnee.
    """

    @abstractmethod
    async def get(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        """
        Execute un GET et retourne la reponse sans verifier le statut.

        Args:
            url: URL complete, parametres de requete inclus
            headers: En-tetes HTTP a envoyer

        Returns:
            Reponse dont le statut peut etre inspecte avant lecture du corps

        Raises:
            TransportTimeout: Si le transport abandonne faute de reponse
            TransportConnectionError: Pour les echecs reseau
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources reseau du transport."""
        ...
