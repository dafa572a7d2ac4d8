"""
Ports (interfaces abstraites) definissant les contrats du client.

Ports transport : Contrat du collaborateur HTTP
- ITransport : GET annulable avec inspection du statut
- TransportResponse : Reponse minimale attendue
- TransportTimeout, TransportConnectionError : Echecs de transport

Ports serialisation : Contrat des transformations de reponses
- Operation : Enumeration des operations serialisables
- SerializerBundle : Ensemble nomme de transformations
- define_serializers, apply_serializer
"""

from xtream_api.core.ports.serializer import (
    Operation,
    SerializerBundle,
    Transform,
    apply_serializer,
    define_serializers,
)
from xtream_api.core.ports.transport import (
    ITransport,
    TransportConnectionError,
    TransportResponse,
    TransportTimeout,
)

__all__ = [
    # Transport
    "ITransport",
    "TransportResponse",
    "TransportTimeout",
    "TransportConnectionError",
    # Serialisation
    "Operation",
    "SerializerBundle",
    "Transform",
    "define_serializers",
    "apply_serializer",
]
