"""
Tests pour CamelCaseSerializer.

Verifie le renommage 1:1 des cles, parentId a 0 par defaut et
categoryIds a [] par defaut.
"""

import re

import pytest

from tests.fixtures.xtream_responses import (
    LIVE_CATEGORIES_RESPONSE,
    LIVE_STREAMS_RESPONSE,
    VOD_STREAMS_RESPONSE,
)
from xtream_api.adapters.serializers import CamelCaseSerializer
from xtream_api.adapters.serializers.camel_case import CHANNEL_FIELDS, MOVIE_FIELDS
from xtream_api.adapters.serializers.fields import to_camel
from xtream_api.core.ports.serializer import Operation, apply_serializer


def to_snake(key: str) -> str:
    return re.sub(r"([A-Z])", lambda m: "_" + m.group(1).lower(), key)


class TestCamelCaseCategories:
    """Tests des categories (live, vod, series)."""

    @pytest.mark.parametrize(
        "operation",
        [Operation.CHANNEL_CATEGORIES, Operation.MOVIE_CATEGORIES, Operation.SHOW_CATEGORIES],
    )
    def test_categories_are_renamed(self, operation: Operation):
        result = apply_serializer(CamelCaseSerializer, LIVE_CATEGORIES_RESPONSE, operation)

        assert result[1] == {"categoryId": "7", "categoryName": "Regional News", "parentId": 1}

    def test_missing_parent_defaults_to_zero(self):
        result = CamelCaseSerializer.serialize(LIVE_CATEGORIES_RESPONSE, Operation.CHANNEL_CATEGORIES)

        assert result[2]["parentId"] == 0

    def test_keys_map_back_to_snake_case(self):
        """Le renommage est une bijection sur les noms de champs."""
        raw = {"category_id": 1, "category_name": "News", "parent_id": 0}

        result = CamelCaseSerializer.serialize([raw], Operation.CHANNEL_CATEGORIES)

        assert {to_snake(key) for key in result[0]} == set(raw)


class TestCamelCaseChannels:
    """Tests des chaines live."""

    def test_channel_fields(self):
        result = CamelCaseSerializer.serialize(LIVE_STREAMS_RESPONSE, Operation.CHANNELS)

        channel = result[0]
        assert channel["streamId"] == 123
        assert channel["streamIcon"] == "http://example.com/icons/nasa.png"
        assert channel["epgChannelId"] == "nasa.us"
        assert channel["isAdult"] == "0"
        assert channel["tvArchiveDuration"] == 7

    def test_category_ids_are_preserved(self):
        result = CamelCaseSerializer.serialize(LIVE_STREAMS_RESPONSE, Operation.CHANNELS)

        assert result[0]["categoryIds"] == [5, 9]

    def test_missing_category_ids_default_to_empty_list(self):
        result = CamelCaseSerializer.serialize(LIVE_STREAMS_RESPONSE, Operation.CHANNELS)

        assert result[1]["categoryIds"] == []

    def test_keys_map_back_to_snake_case(self):
        result = CamelCaseSerializer.serialize(LIVE_STREAMS_RESPONSE, Operation.CHANNELS)

        assert {to_snake(key) for key in result[0]} == set(CHANNEL_FIELDS)


class TestCamelCaseMovies:
    """Tests des films."""

    def test_movie_fields(self):
        result = CamelCaseSerializer.serialize(VOD_STREAMS_RESPONSE, Operation.MOVIES)

        movie = result[0]
        assert movie["streamId"] == 456
        assert movie["rating"] == "8.3"
        assert movie["rating5based"] == 4.2
        assert movie["containerExtension"] == "mp4"
        assert set(movie) == {to_camel(field) for field in MOVIE_FIELDS}

    def test_raw_payload_is_not_mutated(self):
        raw = [dict(VOD_STREAMS_RESPONSE[0])]

        CamelCaseSerializer.serialize(raw, Operation.MOVIES)

        assert raw == [VOD_STREAMS_RESPONSE[0]]


class TestCamelCaseCoverage:
    """Tests de la couverture partielle."""

    @pytest.mark.parametrize(
        "operation",
        [Operation.PROFILE, Operation.SHOWS, Operation.MOVIE, Operation.SHORT_EPG],
    )
    def test_uncovered_operations_pass_through(self, operation: Operation):
        payload = {"info": {}}
        assert apply_serializer(CamelCaseSerializer, payload, operation) is payload


class TestToCamel:
    """Tests pour to_camel()."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("stream_id", "streamId"),
            ("tv_archive_duration", "tvArchiveDuration"),
            ("rating_5based", "rating5based"),
            ("name", "name"),
        ],
    )
    def test_to_camel(self, key: str, expected: str):
        assert to_camel(key) == expected
