"""
Objets valeur immutables decrivant les requetes du client.

Exports :
- ActionRequest : Action player_api.php et ses parametres optionnels
- StreamKind : Type de flux (CHANNEL, MOVIE, EPISODE)
- Timeshift : Fenetre de rattrapage d'un flux en direct
- StreamLocator : Designation d'un flux a lire
- format_param : Conversion d'une valeur en parametre de requete
"""

from xtream_api.core.value_objects.requests import (
    ActionRequest,
    Scalar,
    StreamKind,
    StreamLocator,
    Timeshift,
    format_param,
)

__all__ = [
    "ActionRequest",
    "Scalar",
    "StreamKind",
    "StreamLocator",
    "Timeshift",
    "format_param",
]
