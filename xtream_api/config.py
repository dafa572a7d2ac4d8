"""
Configuration du client via pydantic-settings.

La configuration peut etre fournie directement a la construction, ou chargee
depuis les variables d'environnement avec le prefixe XTREAM_ (et
optionnellement depuis un fichier .env).

Elle est immutable: adresse et identifiants sont fixes pour toute la duree
de vie d'un client.
"""

from typing import Annotated, Any, Optional

import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from xtream_api.adapters.serializers import get_serializer
from xtream_api.core.ports.serializer import SerializerBundle


class ClientConfig(BaseSettings):
    """Parametres du client Xtream avec support des variables d'environnement.

    Tous les parametres peuvent etre fournis via des variables d'environnement
    avec le prefixe XTREAM_.
    Exemple : XTREAM_BASE_URL=http://example.com:8080

    Le serialiseur accepte un SerializerBundle ou le nom d'un bundle integre
    ("CamelCase", "Standardized", "JSON:API").
    """

    model_config = SettingsConfigDict(
        env_prefix="XTREAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        arbitrary_types_allowed=True,
    )

    # Serveur et identifiants
    base_url: str
    username: str
    password: str

    # Format de conteneur par defaut pour les chaines live
    preferred_format: str = Field(default="m3u8", min_length=1)

    # Serialiseur applique aux reponses (None: reponses brutes)
    serializer: Annotated[Optional[SerializerBundle], NoDecode] = Field(default=None)

    # Delai maximal par requete, en millisecondes
    timeout_ms: int = Field(default=30000, gt=0)

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        """Verifie que l'URL est absolue (http/https) et retire le slash final."""
        try:
            url = httpx.URL(v.strip())
        except httpx.InvalidURL as e:
            raise ValueError(f"base_url is not a valid URL: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"base_url must be an absolute http(s) URL, got {v!r}")
        return str(url).rstrip("/")

    @field_validator("serializer", mode="before")
    @classmethod
    def resolve_serializer(cls, v: Any) -> Any:
        """Resout le nom d'un bundle integre; une chaine vide vaut None."""
        if isinstance(v, str):
            return get_serializer(v) if v.strip() else None
        return v
