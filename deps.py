"""FastAPI dependency providers for collaborators built at startup."""

from fastapi import Request

from cache import GenreCache
from clients.tmdb import TMDBClient


def get_tmdb_client(request: Request) -> TMDBClient:
    """The TMDB client created in the app lifespan."""
    return request.app.state.tmdb_client


def get_genre_cache(request: Request) -> GenreCache:
    """The process-wide genre cache created in the app lifespan."""
    return request.app.state.genre_cache
