#!/usr/bin/env python3
"""
StreamingZone - server-rendered movie & TV discovery pages on top of TMDB.

Run with: uvicorn api:app --reload
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from fastapi import Depends, FastAPI, Path as PathParam, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

import config
from cache import GenreCache
from clients.tmdb import TMDBClient
from deps import get_genre_cache, get_tmdb_client
from models.media import MAX_PAGE, Genre, MediaType, PagedResult
from models.page import PageMeta, SectionItem
from utils.i18n import get_translations, translate
from utils.locale import (
    LOCALE_QUERY_PARAM,
    SUPPORTED_LOCALES,
    CookieDirective,
    apply_cookie,
    default_locale,
    resolve_locale,
)
from utils.seo import (
    SitemapEntry,
    item_list_schema,
    movie_schema,
    render_sitemap,
    search_page_schema,
    tv_series_schema,
    web_page_schema,
    website_schema,
)
from utils.slug import build_canonical, genre_path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"
TEMPLATES_DIR = Path(__file__).parent / "templates"

# Static trust pages: path -> translation key prefix
STATIC_PAGES = {
    "/about": "about",
    "/privacy-policy": "privacy",
    "/terms": "terms",
    "/dmca": "dmca",
    "/contact": "contact",
}

# Section ids accepted by the section API
SECTIONS = ("trending-movie", "trending-tv", "popular-movie")

# Genres linked from the sitemap
SITEMAP_MOVIE_GENRES = [
    Genre(id=28, name="Action"),
    Genre(id=35, name="Comedy"),
    Genre(id=18, name="Drama"),
    Genre(id=27, name="Horror"),
    Genre(id=878, name="Science Fiction"),
]
SITEMAP_YEARS = 4
SITEMAP_DETAIL_LIMIT = 100


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the TMDB client and genre cache once per process."""
    client = TMDBClient()
    if not client.is_available:
        logger.warning("TMDB_API_KEY not set - pages will render without upstream data")
    app.state.tmdb_client = client
    app.state.genre_cache = GenreCache(client)
    logger.info(f"Serving {config.SITE_NAME} at {config.SITE_URL}")
    yield
    client.close()


app = FastAPI(
    title="StreamingZone",
    description="Trending movies & TV shows, server rendered from TMDB",
    version="1.0.0",
    lifespan=lifespan,
)

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


# --- Helpers ---

def default_og_image() -> str:
    return build_canonical("/static/og-default.jpg")


def recent_years() -> List[int]:
    this_year = date.today().year
    return [this_year - offset for offset in range(SITEMAP_YEARS)]


def parse_media_type(value: str) -> Optional[MediaType]:
    try:
        return MediaType(value)
    except ValueError:
        return None


def render(
    request: Request,
    template: str,
    locale: str,
    directive: Optional[CookieDirective],
    meta: PageMeta,
    **context: Any,
) -> Response:
    """Render a page template with the shared layout context."""
    page_context: Dict[str, Any] = {
        "locale": locale,
        "t": get_translations(locale),
        "supported_locales": SUPPORTED_LOCALES,
        "lang_param": LOCALE_QUERY_PARAM,
        "site_name": config.SITE_NAME,
        "recent_years": recent_years(),
        "current_year": date.today().year,
    }
    page_context.update(meta.to_context())
    page_context.update(context)
    response = templates.TemplateResponse(request, template, page_context)
    return apply_cookie(response, directive)


def redirect(url: str, directive: Optional[CookieDirective], status_code: int = 301) -> Response:
    return apply_cookie(RedirectResponse(url=url, status_code=status_code), directive)


def not_found(message: str, directive: Optional[CookieDirective]) -> Response:
    return apply_cookie(PlainTextResponse(message, status_code=404), directive)


def server_error(message: str) -> Response:
    return PlainTextResponse(message, status_code=500)


# --- SSR Routes ---

@app.get("/")
async def home(
    request: Request,
    client: TMDBClient = Depends(get_tmdb_client),
    genre_cache: GenreCache = Depends(get_genre_cache),
):
    """SSR home page with trending and popular sections."""
    locale, directive = resolve_locale(request)
    try:
        trending_movies, trending_tv, popular_movies, movie_genres, tv_genres = await asyncio.gather(
            run_in_threadpool(client.trending, MediaType.MOVIE, 1, locale),
            run_in_threadpool(client.trending, MediaType.TV, 1, locale),
            run_in_threadpool(client.popular_movies, 1, locale),
            run_in_threadpool(genre_cache.genres_for, MediaType.MOVIE, locale),
            run_in_threadpool(genre_cache.genres_for, MediaType.TV, locale),
        )

        canonical_url = build_canonical("/")
        meta = PageMeta(
            page_title=translate(locale, "home_title", site=config.SITE_NAME),
            page_description=translate(locale, "home_description"),
            canonical_url=canonical_url,
            structured_data=website_schema(
                config.SITE_NAME,
                canonical_url,
                build_canonical("/search") + "?q={search_term_string}",
            ),
            og_image=default_og_image(),
        )
        return render(
            request, "index.html", locale, directive, meta,
            search_mode=False,
            sections=[
                {"id": "trending-movie", "target": "gridTrendingMovies",
                 "title_key": "trending_movies", "result": trending_movies},
                {"id": "trending-tv", "target": "gridTrendingTv",
                 "title_key": "trending_tv", "result": trending_tv},
                {"id": "popular-movie", "target": "gridPopularMovies",
                 "title_key": "popular_movies", "result": popular_movies},
            ],
            movie_genres=movie_genres,
            tv_genres=tv_genres,
        )
    except Exception:
        logger.exception("Error loading homepage")
        return server_error("Error loading homepage")


async def render_detail(
    request: Request,
    media_type: MediaType,
    item_id: int,
    slug: Optional[str],
    client: TMDBClient,
) -> Response:
    """Detail page with canonical slug enforcement."""
    locale, directive = resolve_locale(request)
    label = "movie" if media_type is MediaType.MOVIE else "TV"
    try:
        detail = await run_in_threadpool(client.detail, media_type, item_id, locale)
        if detail is None:
            return not_found("Movie not found" if media_type is MediaType.MOVIE else "TV show not found", directive)

        if (slug or "") != detail.slug:
            return redirect(detail.path, directive)

        canonical_url = build_canonical(detail.path)
        og_image = detail.poster_url or default_og_image()
        if media_type is MediaType.MOVIE:
            structured_data = movie_schema(detail, canonical_url, og_image)
            og_type = "video.movie"
        else:
            structured_data = tv_series_schema(detail, canonical_url, og_image)
            og_type = "video.tv_show"

        meta = PageMeta(
            page_title=translate(locale, f"{media_type.value}_title", title=detail.title),
            page_description=(
                detail.overview[:155]
                or translate(locale, f"{media_type.value}_description", title=detail.title)
            ),
            canonical_url=canonical_url,
            structured_data=structured_data,
            og_image=og_image,
            og_type=og_type,
        )
        return render(
            request, "detail.html", locale, directive, meta,
            media_type=media_type.value,
            item=detail,
        )
    except Exception:
        logger.exception(f"Error loading {label} detail {item_id}")
        return server_error(f"Error loading {label} detail")


@app.get("/movie/{movie_id}")
async def movie_detail_without_slug(
    request: Request,
    movie_id: int,
    client: TMDBClient = Depends(get_tmdb_client),
):
    return await render_detail(request, MediaType.MOVIE, movie_id, None, client)


@app.get("/movie/{movie_id}/{slug}")
async def movie_detail(
    request: Request,
    movie_id: int,
    slug: str,
    client: TMDBClient = Depends(get_tmdb_client),
):
    """SSR movie page."""
    return await render_detail(request, MediaType.MOVIE, movie_id, slug, client)


@app.get("/tv/{tv_id}")
async def tv_detail_without_slug(
    request: Request,
    tv_id: int,
    client: TMDBClient = Depends(get_tmdb_client),
):
    return await render_detail(request, MediaType.TV, tv_id, None, client)


@app.get("/tv/{tv_id}/{slug}")
async def tv_detail(
    request: Request,
    tv_id: int,
    slug: str,
    client: TMDBClient = Depends(get_tmdb_client),
):
    """SSR TV show page."""
    return await render_detail(request, MediaType.TV, tv_id, slug, client)


@app.get("/search")
async def search_page(
    request: Request,
    q: str = Query(""),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """SSR search results page."""
    locale, directive = resolve_locale(request)
    query = q.strip()
    if not query:
        return redirect("/", directive, status_code=302)

    try:
        result = await run_in_threadpool(client.search_multi, query, page, locale)

        params = {"q": query}
        if page > 1:
            params["page"] = page
        canonical_url = build_canonical("/search?" + urlencode(params))
        title = translate(locale, "search_title", query=query, site=config.SITE_NAME)
        meta = PageMeta(
            page_title=title,
            page_description=translate(locale, "search_description", query=query),
            canonical_url=canonical_url,
            structured_data=search_page_schema(f"Search: {query}", canonical_url),
            og_image=default_og_image(),
        )
        return render(
            request, "index.html", locale, directive, meta,
            search_mode=True,
            search_query=query,
            search_result=result,
            sections=[],
            movie_genres=[],
            tv_genres=[],
        )
    except Exception:
        logger.exception(f"Error searching for {query!r}")
        return server_error("Error searching")


async def render_genre(
    request: Request,
    media_type_value: str,
    genre_id: int,
    slug: Optional[str],
    page: int,
    client: TMDBClient,
    genre_cache: GenreCache,
) -> Response:
    """Genre listing with canonical slug enforcement."""
    locale, directive = resolve_locale(request)
    media_type = parse_media_type(media_type_value)
    if media_type is None:
        return not_found("Not found", directive)

    try:
        genre = await run_in_threadpool(genre_cache.find, media_type, genre_id, locale)
        if genre is None:
            return not_found("Genre not found", directive)

        path = genre_path(media_type.value, genre_id, genre.slug)
        if (slug or "") != genre.slug:
            target = f"{path}?page={page}" if page > 1 else path
            return redirect(target, directive)

        result = await run_in_threadpool(client.discover_by_genre, media_type, genre_id, page, locale)

        canonical_url = build_canonical(f"{path}?page={page}" if page > 1 else path)
        label = translate(locale, media_type.value)
        label_lower = translate(locale, f"{media_type.value}_lower")
        meta = PageMeta(
            page_title=translate(locale, "genre_title", genre=genre.name, label=label, site=config.SITE_NAME),
            page_description=translate(locale, "genre_description", genre=genre.name, label_lower=label_lower),
            canonical_url=canonical_url,
            structured_data=item_list_schema(
                f"{genre.name} {media_type.label}", canonical_url, len(result.items)
            ),
            og_image=default_og_image(),
        )
        return render(
            request, "listing.html", locale, directive, meta,
            mode="genre",
            media_type=media_type.value,
            heading=f"{genre.name} – {label}",
            genre=genre,
            year=None,
            base_path=path,
            result=result,
        )
    except Exception:
        logger.exception(f"Error loading genre {media_type.value}/{genre_id}")
        return server_error("Error loading genre page")


@app.get("/genre/{media_type}/{genre_id}")
async def genre_page_without_slug(
    request: Request,
    media_type: str,
    genre_id: int,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    client: TMDBClient = Depends(get_tmdb_client),
    genre_cache: GenreCache = Depends(get_genre_cache),
):
    return await render_genre(request, media_type, genre_id, None, page, client, genre_cache)


@app.get("/genre/{media_type}/{genre_id}/{slug}")
async def genre_page(
    request: Request,
    media_type: str,
    genre_id: int,
    slug: str,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    client: TMDBClient = Depends(get_tmdb_client),
    genre_cache: GenreCache = Depends(get_genre_cache),
):
    """SSR genre page showing popular titles in a genre."""
    return await render_genre(request, media_type, genre_id, slug, page, client, genre_cache)


@app.get("/year/{media_type}/{year}")
async def year_page(
    request: Request,
    media_type: str,
    year: int = PathParam(..., ge=1870, le=2100),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """SSR year page showing popular titles released in a year."""
    locale, directive = resolve_locale(request)
    parsed = parse_media_type(media_type)
    if parsed is None:
        return not_found("Not found", directive)

    try:
        result = await run_in_threadpool(client.discover_by_year, parsed, year, page, locale)

        path = f"/year/{parsed.value}/{year}"
        canonical_url = build_canonical(f"{path}?page={page}" if page > 1 else path)
        label = translate(locale, parsed.value)
        label_lower = translate(locale, f"{parsed.value}_lower")
        meta = PageMeta(
            page_title=translate(locale, "year_title", label=label, year=year, site=config.SITE_NAME),
            page_description=translate(locale, "year_description", label_lower=label_lower, year=year),
            canonical_url=canonical_url,
            structured_data=item_list_schema(
                f"{parsed.label.capitalize()} in {year}", canonical_url, len(result.items)
            ),
            og_image=default_og_image(),
        )
        return render(
            request, "listing.html", locale, directive, meta,
            mode="year",
            media_type=parsed.value,
            heading=f"{label} {year}",
            genre=None,
            year=year,
            base_path=path,
            result=result,
        )
    except Exception:
        logger.exception(f"Error loading year {parsed.value}/{year}")
        return server_error("Error loading year page")


# --- Static Trust Pages ---

def render_static(request: Request, path: str) -> Response:
    locale, directive = resolve_locale(request)
    try:
        key = STATIC_PAGES[path]
        title = translate(locale, f"{key}_title", site=config.SITE_NAME)
        description = translate(locale, f"{key}_description", site=config.SITE_NAME)
        canonical_url = build_canonical(path)
        meta = PageMeta(
            page_title=title,
            page_description=description,
            canonical_url=canonical_url,
            structured_data=web_page_schema(title, description, canonical_url),
            og_image=default_og_image(),
        )
        return render(
            request, "static_page.html", locale, directive, meta,
            page_key=key,
            body=translate(locale, f"{key}_body", site=config.SITE_NAME),
        )
    except Exception:
        logger.exception(f"Error loading static page {path}")
        return server_error("Error loading page")


@app.get("/about")
def about_page(request: Request):
    return render_static(request, "/about")


@app.get("/privacy-policy")
def privacy_page(request: Request):
    return render_static(request, "/privacy-policy")


@app.get("/terms")
def terms_page(request: Request):
    return render_static(request, "/terms")


@app.get("/dmca")
def dmca_page(request: Request):
    return render_static(request, "/dmca")


@app.get("/contact")
def contact_page(request: Request):
    return render_static(request, "/contact")


# --- SEO ---

@app.get("/robots.txt")
def robots():
    """Serve robots.txt with sitemap reference."""
    content = f"""User-agent: *
Allow: /
Disallow: /api/

Sitemap: {build_canonical("/sitemap.xml")}
"""
    return PlainTextResponse(content)


@app.get("/sitemap.xml")
async def sitemap(client: TMDBClient = Depends(get_tmdb_client)):
    """Generate dynamic XML sitemap for SEO."""
    locale = default_locale()
    try:
        trending_movies, trending_tv, popular_movies = await asyncio.gather(
            run_in_threadpool(client.trending, MediaType.MOVIE, 1, locale),
            run_in_threadpool(client.trending, MediaType.TV, 1, locale),
            run_in_threadpool(client.popular_movies, 1, locale),
        )

        entries = [SitemapEntry(loc=build_canonical("/"), changefreq="hourly", priority="1.0")]

        for path in STATIC_PAGES:
            entries.append(SitemapEntry(loc=build_canonical(path), changefreq="monthly", priority="0.5"))

        for genre in SITEMAP_MOVIE_GENRES:
            entries.append(SitemapEntry(
                loc=build_canonical(genre_path(MediaType.MOVIE.value, genre.id, genre.slug)),
                changefreq="daily",
                priority="0.7",
            ))

        for year in recent_years():
            for media_type in MediaType:
                entries.append(SitemapEntry(
                    loc=build_canonical(f"/year/{media_type.value}/{year}"),
                    changefreq="weekly",
                    priority="0.6",
                ))

        today = date.today().isoformat()
        seen = {entry.loc for entry in entries}
        for result in (trending_movies, popular_movies, trending_tv):
            for item in result.items[:SITEMAP_DETAIL_LIMIT]:
                loc = build_canonical(item.path)
                if loc in seen:
                    continue
                seen.add(loc)
                entries.append(SitemapEntry(
                    loc=loc,
                    changefreq="daily",
                    priority="0.8",
                    # Unreleased titles carry future dates, which are not valid lastmod values
                    lastmod=item.date if item.date and item.date <= today else None,
                ))

        return Response(content=render_sitemap(entries), media_type="application/xml")
    except Exception:
        logger.exception("Error generating sitemap")
        return server_error("Error generating sitemap")


# --- API Endpoints ---

def fetch_section(client: TMDBClient, section: str, page: int, locale: str) -> PagedResult:
    """Fetch one page of a home page section."""
    if section == "trending-movie":
        return client.trending(MediaType.MOVIE, page, locale)
    if section == "trending-tv":
        return client.trending(MediaType.TV, page, locale)
    return client.popular_movies(page, locale)


@app.get("/api/section")
async def api_section(
    request: Request,
    section: Optional[str] = Query(None),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Next page of a home page section for the load-more buttons."""
    if section not in SECTIONS:
        return JSONResponse({"error": "Unknown section"}, status_code=400)

    locale, directive = resolve_locale(request)
    try:
        result = await run_in_threadpool(fetch_section, client, section, page, locale)
        payload = {
            "page": result.page,
            "total_pages": result.total_pages,
            "results": [SectionItem.from_media(item).to_dict() for item in result.items],
        }
        return apply_cookie(JSONResponse(payload), directive)
    except Exception:
        logger.exception(f"Error fetching section {section} page {page}")
        return JSONResponse({"error": "Failed to fetch section"}, status_code=500)


@app.get("/health")
async def health_check(
    client: TMDBClient = Depends(get_tmdb_client),
    genre_cache: GenreCache = Depends(get_genre_cache),
):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "tmdb_configured": client.is_available,
        "genre_cache": genre_cache.get_stats(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
