"""Tests for the lazily filled genre cache."""

from unittest.mock import MagicMock

from cache import GenreCache
from models.media import Genre, MediaType


def make_client(genres=None):
    client = MagicMock()
    client.genre_list.return_value = genres if genres is not None else [
        Genre(id=28, name="Action"),
        Genre(id=35, name="Comedy"),
    ]
    return client


class TestGenreCache:
    def test_first_call_fills_then_reuses(self):
        client = make_client()
        cache = GenreCache(client)

        first = cache.genres_for(MediaType.MOVIE, "en")
        second = cache.genres_for(MediaType.MOVIE, "en")

        assert first == [Genre(id=28, name="Action"), Genre(id=35, name="Comedy")]
        assert second is first
        client.genre_list.assert_called_once_with(MediaType.MOVIE, locale="en")

    def test_entries_are_keyed_by_media_type_and_locale(self):
        client = make_client()
        cache = GenreCache(client)

        cache.genres_for(MediaType.MOVIE, "en")
        cache.genres_for(MediaType.MOVIE, "id")
        cache.genres_for(MediaType.TV, "en")
        cache.genres_for(MediaType.MOVIE, "id")

        assert client.genre_list.call_count == 3
        assert cache.get_stats()["size"] == 3

    def test_refills_never_evict_other_entries(self):
        client = make_client()
        cache = GenreCache(client)
        keys = [(media_type, locale) for media_type in MediaType for locale in ("en", "id", "fr")]

        for media_type, locale in keys:
            cache.genres_for(media_type, locale)
        # A second writer for an existing key, as happens when two first requests race
        cache._genres[(MediaType.MOVIE.value, "en")] = [Genre(id=28, name="Action")]
        cache.genres_for(MediaType.TV, "de")

        assert cache.get_stats()["size"] == len(keys) + 1
        for media_type, locale in keys:
            cache.genres_for(media_type, locale)
        assert client.genre_list.call_count == len(keys) + 1

    def test_upstream_failure_is_not_cached(self):
        client = make_client()
        client.genre_list.side_effect = [None, [Genre(id=18, name="Drama")]]
        cache = GenreCache(client)

        assert cache.genres_for(MediaType.TV, "en") == []
        assert cache.genres_for(MediaType.TV, "en") == [Genre(id=18, name="Drama")]
        assert client.genre_list.call_count == 2

    def test_find(self):
        cache = GenreCache(make_client())
        assert cache.find(MediaType.MOVIE, 35, "en") == Genre(id=35, name="Comedy")
        assert cache.find(MediaType.MOVIE, 99999, "en") is None

    def test_full_cache_never_evicts(self):
        client = make_client()
        cache = GenreCache(client)
        for media_type in MediaType:
            for locale in ("en", "id"):
                cache.genres_for(media_type, locale)
        for media_type in MediaType:
            for locale in ("en", "id"):
                cache.genres_for(media_type, locale)
        assert client.genre_list.call_count == 4
