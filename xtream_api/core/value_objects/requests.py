"""
Objets valeur decrivant les requetes vers le serveur Xtream.

Tous les objets valeur utilisent @dataclass(frozen=True) pour garantir l'immutabilite.
Ils sont construits a chaque appel et jamais conserves par le client.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Mapping, Optional, Union

Scalar = Union[str, int, float]


def format_param(value: Scalar) -> str:
    """
    Convertit une valeur scalaire en parametre de requete.

    Les booleens sont ecrits en minuscules ("true"/"false") et les flottants
    entiers sans partie decimale (1.0 -> "1"), comme les attend le serveur.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class ActionRequest:
    """
    Appel d'une action de l'API player_api.php.

    Attributs :
        action : Nom de l'action (ex: "get_live_streams"), non valide localement
        parameters : Parametres specifiques a l'action; une valeur None
                     signifie "parametre absent" et n'est pas transmise
    """

    action: str
    parameters: Mapping[str, Optional[Scalar]] = field(default_factory=dict)

    @property
    def query_params(self) -> dict[str, str]:
        """Parametres presents, convertis en chaines."""
        return {
            key: format_param(value)
            for key, value in self.parameters.items()
            if value is not None
        }


class StreamKind(str, Enum):
    """Type de contenu d'un flux, avec son segment de chemin."""

    CHANNEL = "channel"
    MOVIE = "movie"
    EPISODE = "episode"

    @property
    def segment(self) -> str:
        """Segment de chemin de l'URL de lecture."""
        return _SEGMENTS[self]


_SEGMENTS = {
    StreamKind.CHANNEL: "live",
    StreamKind.MOVIE: "movie",
    StreamKind.EPISODE: "series",
}


@dataclass(frozen=True)
class Timeshift:
    """
    Fenetre de rattrapage (catch-up) pour un flux en direct.

    Attributs :
        start : Instant de debut; une date naive est consideree en UTC
        duration : Duree transmise telle quelle (minutes par convention)
    """

    start: Optional[datetime] = None
    duration: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        """True si debut et duree sont tous deux renseignes."""
        return self.start is not None and self.duration is not None

    @property
    def utc(self) -> int:
        """Debut en secondes Unix, arrondi a la seconde inferieure."""
        if self.start is None:
            raise ValueError("Timeshift has no start instant")
        start = self.start
        if start.tzinfo is None:
            start = start.replace(tzinfo=timezone.utc)
        return math.floor(start.timestamp())


@dataclass(frozen=True)
class StreamLocator:
    """
    Designation d'un flux a lire.

    Attributs :
        kind : Type de contenu (StreamKind ou sa valeur "channel"/"movie"/"episode")
        stream_id : Identifiant du flux cote serveur
        extension : Extension du conteneur (ex: "m3u8", "mp4")
        timeshift : Fenetre de rattrapage optionnelle
    """

    kind: Union[StreamKind, str]
    stream_id: int
    extension: str
    timeshift: Optional[Timeshift] = None
