"""
Fixtures pytest partagees pour les tests du client Xtream.

Ce module contient les fixtures communes utilisees dans les tests:
- Environnement isole des variables XTREAM_*
- Configuration de test sans serialiseur
- FakeTransport repondant une liste vide
"""

import os

import pytest

from tests.fixtures.fake_transport import FakeTransport
from xtream_api.config import ClientConfig

BASE_URL = "http://example.com:8080"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Retire les variables XTREAM_* de l'environnement du test."""
    for key in list(os.environ):
        if key.upper().startswith("XTREAM_"):
            monkeypatch.delenv(key)


@pytest.fixture
def client_config() -> ClientConfig:
    """Configuration de test sans serialiseur."""
    return ClientConfig(
        base_url=BASE_URL,
        username="user",
        password="pass",
        _env_file=None,
    )


@pytest.fixture
def fake_transport() -> FakeTransport:
    """FakeTransport repondant 200 avec une liste vide."""
    return FakeTransport()
