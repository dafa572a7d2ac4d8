"""
Serialiseurs de reference et registre des bundles integres.

Bundles fournis (constantes partagees, immutables):
- CamelCaseSerializer : cles camelCase, champs conserves 1:1
- StandardizedSerializer : ids en chaines, drapeaux booleens, notes flottantes
- JSONAPISerializer : documents JSON:API {data: [...]}

Chaque bundle couvre les categories des trois types de contenu ainsi que
les listes de chaines et de films; les autres operations passent telles quelles.
"""

from xtream_api.adapters.serializers.camel_case import CamelCaseSerializer
from xtream_api.adapters.serializers.json_api import JSONAPISerializer
from xtream_api.adapters.serializers.standardized import StandardizedSerializer
from xtream_api.core.errors import InvalidArgumentError
from xtream_api.core.ports.serializer import SerializerBundle

BUILTIN_SERIALIZERS: dict[str, SerializerBundle] = {
    bundle.name.lower(): bundle
    for bundle in (CamelCaseSerializer, StandardizedSerializer, JSONAPISerializer)
}


def get_serializer(name: str) -> SerializerBundle:
    """
    Retourne un bundle integre par son nom (insensible a la casse).

    Raises:
        InvalidArgumentError: Si aucun bundle integre ne porte ce nom
    """
    try:
        return BUILTIN_SERIALIZERS[name.strip().lower()]
    except KeyError:
        known = ", ".join(bundle.name for bundle in BUILTIN_SERIALIZERS.values())
        raise InvalidArgumentError(
            f"Unknown serializer {name!r} (available: {known})"
        ) from None


__all__ = [
    "BUILTIN_SERIALIZERS",
    "CamelCaseSerializer",
    "JSONAPISerializer",
    "StandardizedSerializer",
    "get_serializer",
]
