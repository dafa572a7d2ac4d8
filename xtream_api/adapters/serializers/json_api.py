"""
Serialiseur JSON:API: chaque enregistrement devient un objet ressource.

Forme produite pour les listes:
    {"data": [{"type": ..., "id": "...", "attributes": {...},
               "relationships": {...}}]}

Une relation (parent d'une categorie, categorie d'un flux) n'est incluse
que si la cle etrangere brute est presente et differente de 0.
"""

from typing import Any, Callable, Optional

from xtream_api.adapters.serializers.fields import as_bool, as_float, as_id, has_reference
from xtream_api.core.ports.serializer import Operation, define_serializers

Record = dict[str, Any]


def _relationship(name: str, resource_type: str, foreign_key: Any) -> Optional[Record]:
    if not has_reference(foreign_key):
        return None
    return {name: {"data": {"type": resource_type, "id": as_id(foreign_key)}}}


def _resource(
    resource_type: str,
    resource_id: Any,
    attributes: Record,
    relationships: Optional[Record] = None,
) -> Record:
    resource = {"type": resource_type, "id": as_id(resource_id), "attributes": attributes}
    if relationships:
        resource["relationships"] = relationships
    return resource


def _document(data: list[Record], build: Callable[[Record], Record]) -> Record:
    return {"data": [build(item) for item in data]}


def categories_serializer(resource_type: str) -> Callable[[list[Record]], Record]:
    """Fabrique le serialiseur de categories pour un type de ressource."""

    def serialize(data: list[Record]) -> Record:
        return _document(
            data,
            lambda item: _resource(
                resource_type,
                item.get("category_id"),
                {"name": item.get("category_name")},
                _relationship("parent", resource_type, item.get("parent_id")),
            ),
        )

    return serialize


def serialize_channels(data: list[Record]) -> Record:
    return _document(
        data,
        lambda item: _resource(
            "channel",
            item.get("stream_id"),
            {
                "number": item.get("num"),
                "name": item.get("name"),
                "icon": item.get("stream_icon"),
                "epgId": item.get("epg_channel_id"),
                "isAdult": as_bool(item.get("is_adult")),
                "hasArchive": as_bool(item.get("tv_archive")),
            },
            _relationship("category", "channel-category", item.get("category_id")),
        ),
    )


def serialize_movies(data: list[Record]) -> Record:
    return _document(
        data,
        lambda item: _resource(
            "movie",
            item.get("stream_id"),
            {
                "name": item.get("name"),
                "icon": item.get("stream_icon"),
                "rating": as_float(item.get("rating")),
                "extension": item.get("container_extension"),
            },
            _relationship("category", "movie-category", item.get("category_id")),
        ),
    )


JSONAPISerializer = define_serializers(
    "JSON:API",
    {
        Operation.CHANNEL_CATEGORIES: categories_serializer("channel-category"),
        Operation.MOVIE_CATEGORIES: categories_serializer("movie-category"),
        Operation.SHOW_CATEGORIES: categories_serializer("show-category"),
        Operation.CHANNELS: serialize_channels,
        Operation.MOVIES: serialize_movies,
    },
)
