"""Process-wide genre list cache using cachetools."""

import logging
from typing import Dict, List, Optional

from cachetools import Cache

from models.media import Genre, MediaType

logger = logging.getLogger(__name__)


class GenreCache:
    """
    Lazily filled genre lists keyed by (media_type, locale).

    Entries are never evicted: genre taxonomies are effectively static, and the
    key space is bounded by the media types and locales the site serves. There
    is no lock around the fill; two concurrent first requests may both call
    TMDB and the last write wins. The cache is unbounded so that race can never
    push out another entry.
    """

    def __init__(self, client):
        self.client = client
        self._genres: Cache = Cache(maxsize=float("inf"))

    def genres_for(self, media_type: MediaType, locale: str) -> List[Genre]:
        """Get the genre list for a media type, fetching it on first use."""
        key = (media_type.value, locale)
        cached = self._genres.get(key)
        if cached is not None:
            return cached

        genres = self.client.genre_list(media_type, locale=locale)
        if genres is None:
            # Upstream failure is not cached so the next request retries
            return []
        self._genres[key] = genres
        logger.info(f"Cached {len(genres)} {media_type.value} genres ({locale})")
        return genres

    def find(self, media_type: MediaType, genre_id: int, locale: str) -> Optional[Genre]:
        """Find a genre by id."""
        for genre in self.genres_for(media_type, locale):
            if genre.id == genre_id:
                return genre
        return None

    def get_stats(self) -> Dict[str, float]:
        """Get cache statistics for monitoring."""
        return {
            "size": len(self._genres),
            "maxsize": self._genres.maxsize,
        }
