"""
Runtime settings, read from the environment.

Values may be defined in a .env file in the backend root:

SEO_USER_AGENT=Mozilla/5.0 (compatible; SEOAnalyzer/1.0; +http://example.com)
SEO_FETCH_TIMEOUT_SECONDS=12
SEO_CORS_ORIGINS=*
SEO_LOG_LEVEL=INFO

The app loads environment variables automatically using python-dotenv.
Only the fetcher and the HTTP layer read these; the analysis engine takes none.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

USER_AGENT = os.getenv(
    "SEO_USER_AGENT",
    "Mozilla/5.0 (compatible; SEOAnalyzer/1.0; +http://example.com)",
).strip()
FETCH_TIMEOUT_SECONDS = float(os.getenv("SEO_FETCH_TIMEOUT_SECONDS", "12"))
CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("SEO_CORS_ORIGINS", "*").split(",") if origin.strip()
] or ["*"]
LOG_LEVEL = os.getenv("SEO_LOG_LEVEL", "INFO").strip().upper() or "INFO"
