"""
Container d'injection de dependances via dependency-injector.

Fournit un client pret a l'emploi a partir de la configuration chargee
depuis l'environnement (variables XTREAM_*).
"""

from dependency_injector import containers, providers

from .adapters.api.transport import HttpxTransport
from .config import ClientConfig
from .services.client import XtreamClient


class Container(containers.DeclarativeContainer):
    """Container DI du client.

    Utilisation :
        container = Container()
        client = container.client()

    Pour une configuration explicite :
        container.config.override(providers.Object(ClientConfig(...)))
    """

    # Configuration - singleton chargee une seule fois
    config = providers.Singleton(ClientConfig)

    # Transport - partage par tous les clients du container
    transport = providers.Singleton(HttpxTransport)

    # Client - nouvelle instance a chaque appel
    client = providers.Factory(
        XtreamClient,
        config=config,
        transport=transport,
    )
