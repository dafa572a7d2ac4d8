"""
xtream_api - Client asynchrone pour l'API des panels IPTV "Xtream".

Ce package fournit la construction des requetes avec les identifiants,
la normalisation de la forme des reponses via des serialiseurs
interchangeables, et la generation des URLs de lecture.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Ports, objets valeur, erreurs
- adapters/ : Transport httpx, dispatcher, serialiseurs de reference
- services/ : Client facade

Les traces loguru du package sont desactivees tant que
configure_logging() n'a pas ete appele.
"""

from loguru import logger

from xtream_api.adapters.serializers import (
    BUILTIN_SERIALIZERS,
    CamelCaseSerializer,
    JSONAPISerializer,
    StandardizedSerializer,
    get_serializer,
)
from xtream_api.config import ClientConfig
from xtream_api.core.errors import (
    CorsError,
    HttpStatusError,
    InvalidArgumentError,
    NetworkError,
    ProtocolError,
    RequestFailedError,
    RequestTimeoutError,
    XtreamError,
)
from xtream_api.core.ports import (
    ITransport,
    Operation,
    SerializerBundle,
    apply_serializer,
    define_serializers,
)
from xtream_api.core.value_objects import StreamKind, StreamLocator, Timeshift
from xtream_api.logging_config import configure_logging
from xtream_api.services.client import XtreamClient

logger.disable("xtream_api")

__all__ = [
    # Client
    "XtreamClient",
    "ClientConfig",
    "ITransport",
    # Serialiseurs
    "Operation",
    "SerializerBundle",
    "define_serializers",
    "apply_serializer",
    "get_serializer",
    "BUILTIN_SERIALIZERS",
    "CamelCaseSerializer",
    "StandardizedSerializer",
    "JSONAPISerializer",
    # URLs de lecture
    "StreamKind",
    "StreamLocator",
    "Timeshift",
    # Erreurs
    "XtreamError",
    "RequestTimeoutError",
    "HttpStatusError",
    "NetworkError",
    "CorsError",
    "ProtocolError",
    "RequestFailedError",
    "InvalidArgumentError",
    # Logging
    "configure_logging",
]
