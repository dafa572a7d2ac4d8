"""
Serialiseur CamelCase: renomme les cles snake_case en camelCase.

Chaque enregistrement garde ses champs 1:1, seuls les noms changent.
Exceptions: parentId vaut 0 en l'absence de parent, categoryIds vaut []
quand le serveur ne fournit pas la liste.
"""

from typing import Any

from xtream_api.adapters.serializers.fields import to_camel
from xtream_api.core.ports.serializer import Operation, define_serializers

CATEGORY_FIELDS = ("category_id", "category_name", "parent_id")

CHANNEL_FIELDS = (
    "stream_id",
    "num",
    "name",
    "stream_type",
    "stream_icon",
    "epg_channel_id",
    "added",
    "is_adult",
    "category_id",
    "category_ids",
    "custom_sid",
    "tv_archive",
    "direct_source",
    "tv_archive_duration",
)

MOVIE_FIELDS = (
    "stream_id",
    "name",
    "stream_icon",
    "rating",
    "rating_5based",
    "added",
    "category_id",
    "container_extension",
    "custom_sid",
    "direct_source",
)


def _rename(item: dict[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    return {to_camel(key): item.get(key) for key in fields}


def serialize_categories(data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Categories (live, vod ou series) en camelCase."""
    categories = []
    for item in data:
        category = _rename(item, CATEGORY_FIELDS)
        category["parentId"] = item.get("parent_id") or 0
        categories.append(category)
    return categories


def serialize_channels(data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Chaines live en camelCase, categoryIds toujours present."""
    channels = []
    for item in data:
        channel = _rename(item, CHANNEL_FIELDS)
        channel["categoryIds"] = list(item.get("category_ids") or [])
        channels.append(channel)
    return channels


def serialize_movies(data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Films (vod) en camelCase."""
    return [_rename(item, MOVIE_FIELDS) for item in data]


CamelCaseSerializer = define_serializers(
    "CamelCase",
    {
        Operation.CHANNEL_CATEGORIES: serialize_categories,
        Operation.MOVIE_CATEGORIES: serialize_categories,
        Operation.SHOW_CATEGORIES: serialize_categories,
        Operation.CHANNELS: serialize_channels,
        Operation.MOVIES: serialize_movies,
    },
)
