"""
Acces HTTP a l'API Xtream.

Ce module fournit:
- url_builder: URLs de l'API (player_api.php) et URLs de lecture
- HttpxTransport: Transport par defaut implementant ITransport avec httpx
- RequestDispatcher: Un GET par action, delai maximal, classement des echecs

Le dispatcher ne relance jamais une requete: la politique de retry
reste a la charge de l'appelant.
"""

from xtream_api.adapters.api.dispatcher import RequestDispatcher
from xtream_api.adapters.api.transport import HttpxTransport
from xtream_api.adapters.api.url_builder import (
    build_action_url,
    build_base_api_url,
    build_stream_url,
)

__all__ = [
    "HttpxTransport",
    "RequestDispatcher",
    "build_action_url",
    "build_base_api_url",
    "build_stream_url",
]
