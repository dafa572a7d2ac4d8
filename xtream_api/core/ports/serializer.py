"""
Protocole de serialisation des reponses de l'API Xtream.

Un SerializerBundle associe a chaque operation du client une fonction de
transformation appliquee au payload brut avant de le rendre a l'appelant.
Une operation absente du bundle laisse passer le payload tel quel.

Les bundles sont immutables: ils peuvent etre partages entre autant de
clients que necessaire, y compris en concurrence.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Union

from xtream_api.core.errors import InvalidArgumentError

Transform = Callable[[Any], Any]


class Operation(str, Enum):
    """Operations du client dont la reponse peut etre transformee."""

    PROFILE = "profile"
    SERVER_INFO = "serverInfo"
    CHANNEL_CATEGORIES = "channelCategories"
    CHANNELS = "channels"
    MOVIE_CATEGORIES = "movieCategories"
    MOVIES = "movies"
    MOVIE = "movie"
    SHOW_CATEGORIES = "showCategories"
    SHOWS = "shows"
    SHOW = "show"
    SHORT_EPG = "shortEPG"
    FULL_EPG = "fullEPG"


class SerializerBundle:
    """
    Ensemble nomme de transformations, une par operation couverte.

    Attributes:
        name: Nom du bundle (ex: "CamelCase")
        transforms: Transformations indexees par Operation (lecture seule)
    """

    __slots__ = ("_name", "_transforms")

    def __init__(self, name: str, transforms: Optional[Mapping[Operation, Transform]] = None) -> None:
        self._name = name
        self._transforms = MappingProxyType(dict(transforms or {}))

    @property
    def name(self) -> str:
        return self._name

    @property
    def transforms(self) -> Mapping[Operation, Transform]:
        return self._transforms

    def covers(self, operation: Operation) -> bool:
        """Indique si le bundle transforme cette operation."""
        return operation in self.transforms

    def serialize(self, payload: Any, operation: Operation) -> Any:
        """
        Applique la transformation de l'operation, ou l'identite.

        Les exceptions levees par la transformation ne sont pas capturees.
        """
        transform = self.transforms.get(operation)
        if transform is None:
            return payload
        return transform(payload)

    def __repr__(self) -> str:
        covered = ", ".join(op.value for op in self.transforms)
        return f"SerializerBundle(name={self.name!r}, operations=[{covered}])"


def _as_operation(key: Union[Operation, str]) -> Operation:
    if isinstance(key, Operation):
        return key
    try:
        return Operation(key)
    except ValueError:
        raise InvalidArgumentError(f"Unknown serializer operation: {key!r}") from None


def define_serializers(
    name: str,
    transforms: Mapping[Union[Operation, str], Transform],
) -> SerializerBundle:
    """
    Construit un bundle a partir de transformations fournies par l'appelant.

    Permet de definir ses propres serialiseurs sans modifier la bibliotheque.

    Args:
        name: Nom du bundle
        transforms: Transformations indexees par Operation ou par son nom
                    (ex: "channels", "movieCategories")

    Returns:
        SerializerBundle immutable

    Raises:
        InvalidArgumentError: Si une cle ne correspond a aucune operation
                              ou si une transformation n'est pas appelable

    Example:
        upper = define_serializers(
            "Upper",
            {"channels": lambda data: [c["name"].upper() for c in data]},
        )
    """
    normalized: dict[Operation, Transform] = {}
    for key, transform in transforms.items():
        operation = _as_operation(key)
        if not callable(transform):
            raise InvalidArgumentError(
                f"Serializer for {operation.value!r} must be callable"
            )
        normalized[operation] = transform
    return SerializerBundle(name=name, transforms=normalized)


def apply_serializer(
    bundle: Optional[SerializerBundle],
    payload: Any,
    operation: Operation,
) -> Any:
    """
    Applique le bundle configure au payload brut d'une operation.

    Sans bundle, ou si le bundle ne couvre pas l'operation, le payload
    est retourne tel quel (meme instance).
    """
    if bundle is None:
        return payload
    return bundle.serialize(payload, operation)
