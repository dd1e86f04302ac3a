"""Page fetcher and meta tag extractor.

Fetches a single URL and turns its HTML into the title, description,
canonical URL and ordered meta tag records the analysis engine consumes.
Does NOT crawl subpages or execute JavaScript.
"""

import logging
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

import config
from models import MetaTag, PageData

logger = logging.getLogger(__name__)

_WELL_IMPLEMENTED_NAMES = {
    "description",
    "twitter:card",
    "twitter:title",
    "twitter:description",
    "twitter:image",
}
_WELL_IMPLEMENTED_PROPERTIES = {
    "og:title",
    "og:description",
    "og:image",
    "og:url",
    "og:type",
}
_DIMENSION_PROPERTIES = {"og:image:width", "og:image:height"}


class FetchError(Exception):
    """Raised when the page could not be fetched; carries the HTTP status to report."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def validate_url(url: str) -> bool:
    """Accept only absolute http(s) URLs."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def fetch_html(url: str) -> str:
    """
    GET `url` once with the configured user agent and return the body text.
    Non-2xx responses and network errors raise FetchError. No retries.
    """
    try:
        response = requests.get(
            url,
            timeout=config.FETCH_TIMEOUT_SECONDS,
            headers={"User-Agent": config.USER_AGENT},
        )
    except requests.RequestException as e:
        logger.warning("Fetch failed for %s: %s", url, e)
        raise FetchError(500, f"Error fetching or parsing the webpage: {e}") from e

    if not 200 <= response.status_code < 300:
        logger.warning("Upstream returned %s for %s", response.status_code, url)
        raise FetchError(response.status_code, f"Failed to fetch URL: {response.reason}")

    response.encoding = response.apparent_encoding or "utf-8"
    return response.text


def _tag_status(name: str | None, prop: str | None) -> tuple[str, str] | None:
    if name in _WELL_IMPLEMENTED_NAMES or prop in _WELL_IMPLEMENTED_PROPERTIES:
        return "good", "Well implemented"
    if prop in _DIMENSION_PROPERTIES:
        return "good", "Image dimensions properly defined"
    return None


def _attr(element, key: str) -> str | None:
    value = element.get(key)
    if isinstance(value, list):
        value = " ".join(value)
    return value or None


def extract_meta_tags(soup: BeautifulSoup) -> list[MetaTag]:
    """
    Collect every <meta> carrying a name or property and non-empty content,
    in document order, plus a synthesized entry for the canonical link.

    Each recognized tag gets a provisional status here. This pass is
    independent of the metric analyzers, which compute their own verdicts.
    """
    meta_tags: list[MetaTag] = []

    for element in soup.find_all("meta"):
        name = _attr(element, "name")
        prop = _attr(element, "property")
        content = _attr(element, "content")
        if not (name or prop) or not content:
            continue

        tag: MetaTag = {"type": "meta", "content": content}
        if name:
            tag["name"] = name
        if prop:
            tag["property"] = prop

        status = _tag_status(name, prop)
        if status is not None:
            tag["status"], tag["message"] = status

        meta_tags.append(tag)

    canonical_link = soup.find("link", rel="canonical")
    if canonical_link is not None:
        meta_tags.append(
            {
                "type": "link",
                "property": "canonical",
                "content": _attr(canonical_link, "href") or "",
                "status": "good",
                "message": "Canonical URL defined",
            }
        )

    props = {tag.get("property") for tag in meta_tags}
    if "og:image" in props and not _DIMENSION_PROPERTIES.issubset(props):
        og_image = next(tag for tag in meta_tags if tag.get("property") == "og:image")
        og_image["status"] = "warning"
        og_image["message"] = "Missing dimensions (og:image:width, og:image:height)"

    return meta_tags


def extract_page_data(html: str) -> PageData:
    """Parse raw HTML into the structure the analysis engine consumes."""
    soup = BeautifulSoup(html, "html.parser")

    # --- Title ---
    title = soup.title.get_text() if soup.title else ""

    # --- Meta description ---
    description = None
    description_tag = soup.find("meta", attrs={"name": "description"})
    if description_tag is not None:
        description = _attr(description_tag, "content")

    # --- Canonical URL ---
    canonical_url = None
    canonical_tag = soup.find("link", rel="canonical")
    if canonical_tag is not None:
        canonical_url = _attr(canonical_tag, "href")

    return {
        "title": title or None,
        "description": description,
        "canonical_url": canonical_url,
        "meta_tags": extract_meta_tags(soup),
    }
