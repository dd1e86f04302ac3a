"""Tests for the fetcher and tag extractor in scraper.py."""

import pytest
import requests

import scraper
from scraper import FetchError, extract_page_data, fetch_html, validate_url

PAGE = """
<html>
<head>
  <title>Example Domain | A page about example things</title>
  <meta charset="utf-8">
  <meta name="description" content="An example description.">
  <meta name="viewport" content="width=device-width">
  <meta property="og:title" content="OG title">
  <meta property="og:image" content="https://example.com/a.jpg">
  <meta property="og:type" content="website">
  <meta name="twitter:card" content="summary">
  <meta name="robots" content="">
  <link rel="canonical" href="https://example.com/canonical">
</head>
<body></body>
</html>
"""


class FakeResponse:
    def __init__(self, status_code=200, text="<html></html>", reason="OK"):
        self.status_code = status_code
        self.text = text
        self.reason = reason
        self.encoding = None
        self.apparent_encoding = "utf-8"


@pytest.mark.parametrize(
    "url,valid",
    [
        ("https://example.com", True),
        ("http://example.com/path?q=1", True),
        ("ftp://example.com", False),
        ("example.com", False),
        ("https://", False),
        ("not a url", False),
    ],
)
def test_validate_url(url, valid):
    assert validate_url(url) is valid


def test_extract_page_data_basics():
    page = extract_page_data(PAGE)
    assert page["title"] == "Example Domain | A page about example things"
    assert page["description"] == "An example description."
    assert page["canonical_url"] == "https://example.com/canonical"


def test_extract_meta_tags_keeps_document_order_and_drops_empty():
    tags = extract_page_data(PAGE)["meta_tags"]
    keys = [tag.get("name") or tag.get("property") for tag in tags]
    assert keys == [
        "description",
        "viewport",
        "og:title",
        "og:image",
        "og:type",
        "twitter:card",
        "canonical",
    ]


def test_extract_meta_tags_provisional_status():
    tags = {tag.get("name") or tag.get("property"): tag for tag in extract_page_data(PAGE)["meta_tags"]}
    assert tags["description"]["status"] == "good"
    assert tags["og:title"]["message"] == "Well implemented"
    assert "status" not in tags["viewport"]
    assert tags["canonical"] == {
        "type": "link",
        "property": "canonical",
        "content": "https://example.com/canonical",
        "status": "good",
        "message": "Canonical URL defined",
    }


def test_og_image_downgraded_without_dimensions():
    tags = extract_page_data(PAGE)["meta_tags"]
    og_image = next(tag for tag in tags if tag.get("property") == "og:image")
    assert og_image["status"] == "warning"
    assert og_image["message"] == "Missing dimensions (og:image:width, og:image:height)"


def test_og_image_dimensions_marked_good():
    html = """
    <meta property="og:image" content="a.jpg">
    <meta property="og:image:width" content="1200">
    <meta property="og:image:height" content="630">
    """
    tags = extract_page_data(html)["meta_tags"]
    assert [tag["status"] for tag in tags] == ["good", "good", "good"]
    assert tags[1]["message"] == "Image dimensions properly defined"


def test_extract_page_data_empty_document():
    page = extract_page_data("<html><head></head></html>")
    assert page == {"title": None, "description": None, "canonical_url": None, "meta_tags": []}


def test_fetch_html_sends_user_agent(monkeypatch):
    seen = {}

    def fake_get(url, timeout, headers):
        seen["url"] = url
        seen["headers"] = headers
        return FakeResponse(text="<html>ok</html>")

    monkeypatch.setattr(scraper.requests, "get", fake_get)
    assert fetch_html("https://example.com") == "<html>ok</html>"
    assert seen["headers"]["User-Agent"] == scraper.config.USER_AGENT


def test_fetch_html_non_2xx_propagates_status(monkeypatch):
    monkeypatch.setattr(
        scraper.requests, "get", lambda url, timeout, headers: FakeResponse(404, reason="Not Found")
    )
    with pytest.raises(FetchError) as excinfo:
        fetch_html("https://example.com/missing")
    assert excinfo.value.status_code == 404
    assert excinfo.value.message == "Failed to fetch URL: Not Found"


def test_fetch_html_network_error(monkeypatch):
    def fake_get(url, timeout, headers):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(scraper.requests, "get", fake_get)
    with pytest.raises(FetchError) as excinfo:
        fetch_html("https://example.com")
    assert excinfo.value.status_code == 500
    assert excinfo.value.message.startswith("Error fetching or parsing the webpage:")
