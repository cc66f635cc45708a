"""Runtime configuration read from the environment (and an optional .env file)."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).parent / ".env")

PORT = int(os.getenv("PORT", "3000"))

# Public origin used for canonical URLs, sitemap and robots.txt
SITE_URL = os.getenv("SITE_URL", f"http://localhost:{PORT}")
SITE_NAME = os.getenv("SITE_NAME", "StreamingZone")

TMDB_API_KEY = os.getenv("TMDB_API_KEY", "")
TMDB_TIMEOUT_SECONDS = float(os.getenv("TMDB_TIMEOUT_SECONDS", "10"))

DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en")
