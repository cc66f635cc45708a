from dataclasses import dataclass
from typing import Any, Dict, Optional

from dataclasses_json import dataclass_json

from models.media import MediaItem


@dataclass_json
@dataclass
class SectionItem:
    """Minimal item shape returned to the browser by the section API."""
    id: int
    title: str
    media_type: str
    poster_path: Optional[str] = None
    vote_average: Optional[float] = None
    date: str = ""
    slug: str = ""

    @classmethod
    def from_media(cls, item: MediaItem) -> "SectionItem":
        # poster_path is sent as an absolute URL so the browser can use it as-is
        return cls(
            id=item.id,
            title=item.title,
            media_type=item.media_type,
            poster_path=item.poster_url,
            vote_average=item.vote_average,
            date=item.date,
            slug=item.slug,
        )


@dataclass
class PageMeta:
    """SEO metadata shared by every rendered page."""
    page_title: str
    page_description: str
    canonical_url: str
    structured_data: str
    og_image: Optional[str] = None
    og_type: str = "website"

    def to_context(self) -> Dict[str, Any]:
        return {
            "page_title": self.page_title,
            "page_description": self.page_description,
            "canonical_url": self.canonical_url,
            "structured_data": self.structured_data,
            "og_image": self.og_image,
            "og_type": self.og_type,
        }
