"""
Couche application: client facade de l'API Xtream.

- XtreamClient : une methode par action, serialiseur applique aux reponses
"""

from xtream_api.services.client import XtreamClient

__all__ = ["XtreamClient"]
