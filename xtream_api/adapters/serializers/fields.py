"""
Conversions de champs partagees par les serialiseurs de reference.

Les panels Xtream sont peu rigoureux sur les types: un meme champ peut
arriver en entier, en chaine ou etre absent selon le serveur.
"""

import math
import re
from typing import Any, Optional

_FALSE_STRINGS = frozenset({"", "0", "false", "no", "off", "null", "none"})
_SNAKE_SEGMENT = re.compile(r"_([a-z0-9])")


def to_camel(key: str) -> str:
    """Convertit une cle snake_case en camelCase (rating_5based -> rating5based)."""
    return _SNAKE_SEGMENT.sub(lambda match: match.group(1).upper(), key)


def as_id(value: Any) -> Optional[str]:
    """Identifiant sous forme de chaine, None si absent."""
    if value is None:
        return None
    return str(value)


def as_bool(value: Any) -> bool:
    """
    Convertit un drapeau brut (0/1, "0"/"1", "true"/"false") en booleen.

    Les chaines sont interpretees par leur contenu: "0" vaut False.
    """
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


def as_float(value: Any) -> float:
    """Convertit une note en flottant, 0.0 si la valeur n'est pas exploitable."""
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(result) or math.isinf(result):
        return 0.0
    return result


def has_reference(value: Any) -> bool:
    """True si une cle etrangere brute est presente et non nulle."""
    if value is None:
        return False
    if isinstance(value, str):
        value = value.strip()
        return value not in ("", "0")
    return value != 0
