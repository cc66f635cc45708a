"""Shared fixtures: a canned TMDB client and a TestClient wired to it."""

import copy

import pytest
from fastapi.testclient import TestClient

import config
import deps
from api import app
from cache import GenreCache
from clients.tmdb import TMDBClient

SITE_URL = "https://streamingzone.test"

MATRIX = {
    "id": 603,
    "title": "The Matrix",
    "overview": "A hacker learns the truth about his reality.",
    "poster_path": "/matrix.jpg",
    "backdrop_path": "/matrix-bg.jpg",
    "vote_average": 8.2,
    "vote_count": 25000,
    "release_date": "1999-03-31",
    "genre_ids": [28, 878],
}

INCEPTION = {
    "id": 27205,
    "title": "Inception",
    "overview": "Dreams within dreams.",
    "poster_path": "/inception.jpg",
    "vote_average": 8.4,
    "release_date": "2010-07-15",
    "genre_ids": [28, 878],
}

GAME_OF_THRONES = {
    "id": 1399,
    "name": "Game of Thrones",
    "overview": "Seven noble families fight for control of Westeros.",
    "poster_path": "/got.jpg",
    "vote_average": 8.5,
    "first_air_date": "2011-04-17",
    "genre_ids": [18],
}


def page_of(*results, page=1, total_pages=3, media_type=None):
    items = []
    for result in results:
        item = dict(result)
        if media_type:
            item["media_type"] = media_type
        items.append(item)
    return {"page": page, "total_pages": total_pages, "results": items}


def default_responses():
    return {
        "/trending/movie/week": page_of(MATRIX, INCEPTION, media_type="movie"),
        "/trending/tv/week": page_of(GAME_OF_THRONES, media_type="tv"),
        "/movie/popular": page_of(INCEPTION, MATRIX, total_pages=1),
        "/movie/603": {
            **MATRIX,
            "tagline": "Welcome to the Real World.",
            "runtime": 136,
            "genres": [{"id": 28, "name": "Action"}, {"id": 878, "name": "Science Fiction"}],
            "videos": {"results": [
                {"key": "teaser1", "site": "YouTube", "type": "Teaser"},
                {"key": "vKQi3bBA1y8", "site": "YouTube", "type": "Trailer"},
            ]},
            "credits": {"cast": [{"name": "Keanu Reeves"}, {"name": "Carrie-Anne Moss"}]},
            "similar": {"results": [INCEPTION]},
        },
        "/tv/1399": {
            **GAME_OF_THRONES,
            "number_of_seasons": 8,
            "episode_run_time": [60],
            "genres": [{"id": 18, "name": "Drama"}],
            "videos": {"results": []},
            "credits": {"cast": []},
            "similar": {"results": []},
        },
        "/search/multi": page_of(
            dict(MATRIX, media_type="movie"),
            {"id": 6384, "name": "Keanu Reeves", "media_type": "person"},
            dict(GAME_OF_THRONES, media_type="tv"),
            total_pages=1,
        ),
        "/genre/movie/list": {"genres": [
            {"id": 28, "name": "Action"},
            {"id": 878, "name": "Science Fiction"},
        ]},
        "/genre/tv/list": {"genres": [{"id": 18, "name": "Drama"}]},
        "/discover/movie": lambda params: page_of(
            MATRIX, INCEPTION, page=params.get("page", 1), total_pages=10
        ),
        "/discover/tv": page_of(GAME_OF_THRONES, total_pages=1),
    }


class FakeTMDBClient(TMDBClient):
    """TMDB client answering from canned payloads instead of the network."""

    def __init__(self, responses=None):
        super().__init__(api_key="test-key")
        self.responses = responses if responses is not None else default_responses()
        self.calls = []

    def fetch(self, endpoint, params=None, locale="en"):
        self.calls.append((endpoint, dict(params or {}), locale))
        response = self.responses.get(endpoint)
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(dict(params or {}))
        return copy.deepcopy(response)

    def calls_to(self, endpoint):
        return [call for call in self.calls if call[0] == endpoint]


@pytest.fixture(autouse=True)
def site_url(monkeypatch):
    monkeypatch.setattr(config, "SITE_URL", SITE_URL)
    return SITE_URL


@pytest.fixture
def tmdb():
    return FakeTMDBClient()


@pytest.fixture
def genre_cache(tmdb):
    return GenreCache(tmdb)


@pytest.fixture
def client(tmdb, genre_cache):
    """Create a test client with the fake TMDB client injected."""
    app.dependency_overrides[deps.get_tmdb_client] = lambda: tmdb
    app.dependency_overrides[deps.get_genre_cache] = lambda: genre_cache
    yield TestClient(app)
    app.dependency_overrides.clear()
