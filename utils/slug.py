"""URL slug and canonical URL helpers for SEO-friendly pages."""

from typing import Optional

from slugify import slugify

import config


def slugify_title(text: Optional[str]) -> str:
    """
    Generate a URL-friendly slug from a title.

    Examples:
        "The Matrix (1999)" -> "the-matrix-1999"
        "Amélie" -> "amelie"
        "" -> ""
    """
    if not text:
        return ""
    if not isinstance(text, str):
        text = str(text)
    return slugify(text, lowercase=True)


def build_canonical(path: str, site_url: Optional[str] = None) -> str:
    """Build an absolute canonical URL for a site path."""
    origin = (site_url if site_url is not None else config.SITE_URL).rstrip("/")
    if not path.startswith("/"):
        path = "/" + path
    return origin + path


def detail_path(media_type: str, item_id: int, slug: str) -> str:
    """Path of a movie/TV detail page; the slug segment is dropped when empty."""
    if slug:
        return f"/{media_type}/{item_id}/{slug}"
    return f"/{media_type}/{item_id}"


def genre_path(media_type: str, genre_id: int, slug: str) -> str:
    """Path of a genre listing page."""
    if slug:
        return f"/genre/{media_type}/{genre_id}/{slug}"
    return f"/genre/{media_type}/{genre_id}"
