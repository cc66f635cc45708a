"""Cache package for upstream taxonomy data."""

from cache.genre_cache import GenreCache

__all__ = [
    "GenreCache",
]
