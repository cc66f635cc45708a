"""Per-request locale detection."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from fastapi import Request, Response

import config

SUPPORTED_LOCALES = ("en", "id")
LOCALE_COOKIE = "lang_preference"
LOCALE_COOKIE_MAX_AGE = 60 * 60 * 24 * 365  # one year
LOCALE_QUERY_PARAM = "lang"


@dataclass
class CookieDirective:
    """A cookie the caller should set on its outgoing response."""
    name: str
    value: str
    max_age: int = LOCALE_COOKIE_MAX_AGE
    samesite: str = "lax"


def normalize_locale(value: Optional[str]) -> Optional[str]:
    """Return the supported locale matching value, or None."""
    if not value:
        return None
    value = value.strip().lower()
    return value if value in SUPPORTED_LOCALES else None


def parse_accept_language(header: Optional[str]) -> List[str]:
    """
    Primary language subtags from an Accept-Language header, best first.

    Example:
        "id-ID,id;q=0.9,en;q=0.8" -> ["id", "id", "en"]
    """
    if not header:
        return []

    weighted = []
    for position, part in enumerate(header.split(",")):
        pieces = part.strip().split(";")
        tag = pieces[0].strip().lower()
        if not tag or tag == "*":
            continue
        quality = 1.0
        for param in pieces[1:]:
            name, _, value = param.strip().partition("=")
            if name.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality <= 0:
            continue
        weighted.append((-quality, position, tag.split("-")[0]))

    weighted.sort()
    return [tag for _, _, tag in weighted]


def default_locale() -> str:
    return normalize_locale(config.DEFAULT_LOCALE) or SUPPORTED_LOCALES[0]


def resolve_locale(request: Request) -> Tuple[str, Optional[CookieDirective]]:
    """
    Pick the locale for a request.

    Precedence: valid ?lang= (also returns a directive to remember it in a
    cookie) > lang_preference cookie > Accept-Language > default.
    """
    requested = normalize_locale(request.query_params.get(LOCALE_QUERY_PARAM))
    if requested:
        return requested, CookieDirective(name=LOCALE_COOKIE, value=requested)

    from_cookie = normalize_locale(request.cookies.get(LOCALE_COOKIE))
    if from_cookie:
        return from_cookie, None

    for tag in parse_accept_language(request.headers.get("accept-language")):
        if tag in SUPPORTED_LOCALES:
            return tag, None

    return default_locale(), None


def apply_cookie(response: Response, directive: Optional[CookieDirective]) -> Response:
    """Set the cookie described by directive (if any) on response."""
    if directive is not None:
        response.set_cookie(
            directive.name,
            directive.value,
            max_age=directive.max_age,
            samesite=directive.samesite,
            path="/",
        )
    return response
