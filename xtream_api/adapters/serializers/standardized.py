"""
Serialiseur Standardized: forme stable et typee, independante du panel.

- Identifiants toujours en chaines (parentId: chaine ou None)
- Drapeaux (is_adult, tv_archive) en vrais booleens
- Notes en flottants, 0.0 si illisibles
"""

from typing import Any

from xtream_api.adapters.serializers.fields import as_bool, as_float, as_id, has_reference
from xtream_api.core.ports.serializer import Operation, define_serializers


def serialize_categories(data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [
        {
            "id": as_id(item.get("category_id")),
            "name": item.get("category_name"),
            "parentId": as_id(item["parent_id"]) if has_reference(item.get("parent_id")) else None,
        }
        for item in data
    ]


def serialize_channels(data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [
        {
            "id": as_id(item.get("stream_id")),
            "number": item.get("num"),
            "name": item.get("name"),
            "icon": item.get("stream_icon"),
            "epgId": item.get("epg_channel_id"),
            "categoryId": as_id(item.get("category_id")),
            "isAdult": as_bool(item.get("is_adult")),
            "hasArchive": as_bool(item.get("tv_archive")),
        }
        for item in data
    ]


def serialize_movies(data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [
        {
            "id": as_id(item.get("stream_id")),
            "name": item.get("name"),
            "icon": item.get("stream_icon"),
            "rating": as_float(item.get("rating")),
            "categoryId": as_id(item.get("category_id")),
            "extension": item.get("container_extension"),
        }
        for item in data
    ]


StandardizedSerializer = define_serializers(
    "Standardized",
    {
        Operation.CHANNEL_CATEGORIES: serialize_categories,
        Operation.MOVIE_CATEGORIES: serialize_categories,
        Operation.SHOW_CATEGORIES: serialize_categories,
        Operation.CHANNELS: serialize_channels,
        Operation.MOVIES: serialize_movies,
    },
)
