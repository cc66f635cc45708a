from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from dataclasses_json import dataclass_json

from utils.slug import detail_path, slugify_title

IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
POSTER_SIZE = "w500"
BACKDROP_SIZE = "w1280"

# TMDB refuses page numbers above 500
MAX_PAGE = 500


class MediaType(str, Enum):
    """Kinds of titles served by the site."""
    MOVIE = "movie"
    TV = "tv"

    @property
    def label(self) -> str:
        return "TV shows" if self is MediaType.TV else "movies"


def image_url(path: Optional[str], size: str = POSTER_SIZE) -> Optional[str]:
    """Absolute TMDB image URL for a poster/backdrop path."""
    if not path:
        return None
    return f"{IMAGE_BASE_URL}/{size}{path}"


@dataclass_json
@dataclass
class Genre:
    id: int
    name: str

    @property
    def slug(self) -> str:
        return slugify_title(self.name)


@dataclass_json
@dataclass
class MediaItem:
    """A movie or TV show as listed by TMDB, normalized once at the API boundary."""
    id: int
    media_type: str = MediaType.MOVIE.value
    title: str = ""
    overview: str = ""
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    date: str = ""  # ISO format: YYYY-MM-DD, release or first air date
    genre_ids: List[int] = field(default_factory=list)

    @staticmethod
    def _common_fields(data: Dict[str, Any], media_type: str) -> Dict[str, Any]:
        return {
            "id": int(data["id"]),
            "media_type": data.get("media_type") or media_type,
            "title": data.get("title") or data.get("name") or data.get("original_name") or "",
            "overview": data.get("overview") or "",
            "poster_path": data.get("poster_path"),
            "backdrop_path": data.get("backdrop_path"),
            "vote_average": data.get("vote_average"),
            "vote_count": data.get("vote_count"),
            "date": (data.get("release_date") or data.get("first_air_date") or "").split("T")[0],
            "genre_ids": list(data.get("genre_ids") or []),
        }

    @classmethod
    def from_tmdb(cls, data: Dict[str, Any], media_type: str = MediaType.MOVIE.value) -> "MediaItem":
        """Build an item from a TMDB list/search result."""
        return cls(**cls._common_fields(data, media_type))

    @property
    def slug(self) -> str:
        return slugify_title(self.title)

    @property
    def path(self) -> str:
        """Canonical site path for this title."""
        return detail_path(self.media_type, self.id, self.slug)

    @property
    def year(self) -> Optional[int]:
        if self.date and len(self.date) >= 4 and self.date[:4].isdigit():
            return int(self.date[:4])
        return None

    @property
    def poster_url(self) -> Optional[str]:
        return image_url(self.poster_path)

    @property
    def backdrop_url(self) -> Optional[str]:
        return image_url(self.backdrop_path, BACKDROP_SIZE)


@dataclass_json
@dataclass
class MediaDetail(MediaItem):
    """Full detail payload for a movie or TV show page."""
    tagline: Optional[str] = None
    genres: List[Genre] = field(default_factory=list)
    runtime: Optional[int] = None
    number_of_seasons: Optional[int] = None
    status: Optional[str] = None
    trailer_key: Optional[str] = None
    cast: List[str] = field(default_factory=list)
    similar: List[MediaItem] = field(default_factory=list)

    @classmethod
    def from_tmdb(cls, data: Dict[str, Any], media_type: str = MediaType.MOVIE.value) -> "MediaDetail":
        """Build a detail from a TMDB payload fetched with videos, credits and similar appended."""
        fields = cls._common_fields(data, media_type)
        # Detail payloads carry no media_type; the route decides it
        fields["media_type"] = media_type

        genres = [
            Genre(id=g["id"], name=g.get("name", ""))
            for g in data.get("genres") or []
            if g.get("id") is not None
        ]
        fields["genre_ids"] = fields["genre_ids"] or [g.id for g in genres]

        # Prefer a YouTube trailer, fall back to the first video
        videos = (data.get("videos") or {}).get("results") or []
        trailer = next(
            (v for v in videos if v.get("type") == "Trailer" and v.get("site") == "YouTube"),
            videos[0] if videos else None,
        )

        credits = data.get("credits") or {}
        cast = [c["name"] for c in (credits.get("cast") or [])[:10] if c.get("name")]

        similar = [
            MediaItem.from_tmdb(s, media_type)
            for s in ((data.get("similar") or {}).get("results") or [])[:12]
            if s.get("id") is not None
        ]

        runtime = data.get("runtime")
        if runtime is None and data.get("episode_run_time"):
            runtime = data["episode_run_time"][0]

        return cls(
            **fields,
            tagline=data.get("tagline") or None,
            genres=genres,
            runtime=runtime,
            number_of_seasons=data.get("number_of_seasons"),
            status=data.get("status"),
            trailer_key=trailer.get("key") if trailer and trailer.get("site") == "YouTube" else None,
            cast=cast,
            similar=similar,
        )

    @property
    def trailer_url(self) -> Optional[str]:
        if self.trailer_key:
            return f"https://www.youtube.com/embed/{self.trailer_key}"
        return None


@dataclass_json
@dataclass
class PagedResult:
    """One page of a TMDB collection endpoint."""
    page: int = 1
    total_pages: int = 1
    items: List[MediaItem] = field(default_factory=list)

    @classmethod
    def from_tmdb(
        cls,
        data: Optional[Dict[str, Any]],
        media_type: str = MediaType.MOVIE.value,
        page: int = 1,
    ) -> "PagedResult":
        """Build a page from a TMDB collection payload; None yields an empty page."""
        if not data:
            return cls(page=page, total_pages=1, items=[])
        items = [
            MediaItem.from_tmdb(r, media_type)
            for r in data.get("results") or []
            if r.get("id") is not None
        ]
        return cls(
            page=data.get("page") or page,
            total_pages=min(max(data.get("total_pages") or 1, 1), MAX_PAGE),
            items=items,
        )

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
