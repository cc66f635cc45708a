"""Structured data (JSON-LD) and sitemap helpers."""

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional
from xml.sax.saxutils import escape

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def json_ld(data: Dict[str, Any]) -> str:
    """Serialize a schema.org object, dropping empty fields."""
    payload = {"@context": "https://schema.org"}
    payload.update({k: v for k, v in data.items() if v is not None and v != ""})
    # Keep "</script>" out of the inline script block
    return json.dumps(payload, indent=2, ensure_ascii=False).replace("</", "<\\/")


def website_schema(name: str, url: str, search_target: str) -> str:
    return json_ld({
        "@type": "WebSite",
        "url": url,
        "name": name,
        "potentialAction": {
            "@type": "SearchAction",
            "target": search_target,
            "query-input": "required name=search_term_string",
        },
    })


def movie_schema(detail, url: str, image: Optional[str]) -> str:
    rating = None
    if detail.vote_average:
        rating = {
            "@type": "AggregateRating",
            "ratingValue": detail.vote_average,
            "ratingCount": detail.vote_count or 1,
            "bestRating": 10,
        }
    return json_ld({
        "@type": "Movie",
        "name": detail.title,
        "image": image,
        "description": detail.overview,
        "url": url,
        "aggregateRating": rating,
        "datePublished": detail.date or None,
        "genre": [g.name for g in detail.genres] or None,
        "actor": [{"@type": "Person", "name": name} for name in detail.cast] or None,
    })


def tv_series_schema(detail, url: str, image: Optional[str]) -> str:
    return json_ld({
        "@type": "TVSeries",
        "name": detail.title,
        "image": image,
        "description": detail.overview,
        "url": url,
        "numberOfSeasons": detail.number_of_seasons or None,
        "startDate": detail.date or None,
        "genre": [g.name for g in detail.genres] or None,
    })


def item_list_schema(name: str, url: str, number_of_items: int) -> str:
    return json_ld({
        "@type": "ItemList",
        "name": name,
        "url": url,
        "numberOfItems": number_of_items,
    })


def search_page_schema(name: str, url: str) -> str:
    return json_ld({
        "@type": "SearchResultsPage",
        "name": name,
        "url": url,
    })


def web_page_schema(name: str, description: str, url: str) -> str:
    return json_ld({
        "@type": "WebPage",
        "name": name,
        "description": description,
        "url": url,
    })


@dataclass
class SitemapEntry:
    loc: str
    changefreq: str
    priority: str
    lastmod: Optional[str] = None


def render_sitemap(entries: Iterable[SitemapEntry]) -> str:
    """Render entries as a sitemap 0.9 document."""
    xml_content = '<?xml version="1.0" encoding="UTF-8"?>\n'
    xml_content += f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n'

    for entry in entries:
        xml_content += "  <url>\n"
        xml_content += f"    <loc>{escape(entry.loc)}</loc>\n"
        if entry.lastmod:
            xml_content += f"    <lastmod>{escape(entry.lastmod)}</lastmod>\n"
        xml_content += f"    <changefreq>{entry.changefreq}</changefreq>\n"
        xml_content += f"    <priority>{entry.priority}</priority>\n"
        xml_content += "  </url>\n"

    xml_content += "</urlset>"
    return xml_content
