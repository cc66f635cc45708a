import logging
from typing import Any, Dict, List, Optional

import config
from clients.base import BaseClient
from models.media import Genre, MediaDetail, MediaType, PagedResult

logger = logging.getLogger(__name__)

# Site locale -> TMDB language code
TMDB_LANGUAGES = {
    "en": "en-US",
    "id": "id-ID",
}


class TMDBClient(BaseClient):
    """Client for The Movie Database API."""

    BASE_URL = "https://api.themoviedb.org/3"

    def __init__(self, api_key: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__(timeout=timeout if timeout is not None else config.TMDB_TIMEOUT_SECONDS)
        self.api_key = api_key if api_key is not None else config.TMDB_API_KEY
        # TMDB v3 API uses api_key as query parameter

    @property
    def is_available(self) -> bool:
        """Check if TMDB API key is configured."""
        return bool(self.api_key)

    def _redact(self, message: str) -> str:
        if self.api_key:
            return message.replace(self.api_key, "***")
        return message

    def fetch(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        locale: str = "en",
    ) -> Optional[Dict[str, Any]]:
        """
        Call a TMDB endpoint such as "/movie/popular".

        The API key and language are always injected. Returns the parsed JSON
        body, or None when the call fails for any reason.
        """
        if not self.is_available:
            logger.warning(f"TMDB_API_KEY not set, skipping {endpoint}")
            return None

        query = dict(params or {})
        query["api_key"] = self.api_key
        query["language"] = TMDB_LANGUAGES.get(locale, TMDB_LANGUAGES["en"])
        return self.get_json(f"{self.BASE_URL}{endpoint}", params=query)

    # --- Collections ---

    def trending(self, media_type: MediaType, page: int = 1, locale: str = "en") -> PagedResult:
        data = self.fetch(f"/trending/{media_type.value}/week", {"page": page}, locale)
        return PagedResult.from_tmdb(data, media_type.value, page)

    def popular_movies(self, page: int = 1, locale: str = "en") -> PagedResult:
        data = self.fetch("/movie/popular", {"page": page}, locale)
        return PagedResult.from_tmdb(data, MediaType.MOVIE.value, page)

    def search_multi(self, query: str, page: int = 1, locale: str = "en") -> PagedResult:
        """Search movies and TV shows; people in the results are dropped."""
        data = self.fetch("/search/multi", {"query": query, "page": page, "include_adult": "false"}, locale)
        if data:
            data = dict(data)
            data["results"] = [
                r for r in data.get("results") or []
                if r.get("media_type") in (MediaType.MOVIE.value, MediaType.TV.value)
            ]
        return PagedResult.from_tmdb(data, MediaType.MOVIE.value, page)

    def discover_by_genre(
        self, media_type: MediaType, genre_id: int, page: int = 1, locale: str = "en"
    ) -> PagedResult:
        data = self.fetch(
            f"/discover/{media_type.value}",
            {"with_genres": genre_id, "sort_by": "popularity.desc", "page": page},
            locale,
        )
        return PagedResult.from_tmdb(data, media_type.value, page)

    def discover_by_year(
        self, media_type: MediaType, year: int, page: int = 1, locale: str = "en"
    ) -> PagedResult:
        year_param = "first_air_date_year" if media_type is MediaType.TV else "primary_release_year"
        data = self.fetch(
            f"/discover/{media_type.value}",
            {year_param: year, "sort_by": "popularity.desc", "page": page},
            locale,
        )
        return PagedResult.from_tmdb(data, media_type.value, page)

    # --- Single titles ---

    def detail(self, media_type: MediaType, item_id: int, locale: str = "en") -> Optional[MediaDetail]:
        """Get a movie or TV show with videos, credits and similar titles appended."""
        data = self.fetch(
            f"/{media_type.value}/{item_id}",
            {"append_to_response": "videos,credits,similar"},
            locale,
        )
        if not data or data.get("id") is None:
            return None
        return MediaDetail.from_tmdb(data, media_type.value)

    # --- Taxonomy ---

    def genre_list(self, media_type: MediaType, locale: str = "en") -> Optional[List[Genre]]:
        """Official genre list for a media type, or None when TMDB is unreachable."""
        data = self.fetch(f"/genre/{media_type.value}/list", locale=locale)
        if data is None:
            return None
        return [
            Genre(id=g["id"], name=g.get("name", ""))
            for g in data.get("genres") or []
            if g.get("id") is not None
        ]
