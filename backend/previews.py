"""Resolve what search and social previews would show for an analyzed page."""

from models import MetaTag, SEOAnalysis

PREVIEW_TAGS = [
    "og:title",
    "og:description",
    "og:image",
    "og:url",
    "og:type",
    "twitter:card",
    "twitter:title",
    "twitter:description",
    "twitter:image",
]


def find_meta_tag(meta_tags: list[MetaTag], key: str) -> MetaTag | None:
    """First tag whose property or name equals `key`."""
    for tag in meta_tags:
        if tag.get("property") == key or tag.get("name") == key:
            return tag
    return None


def _content(meta_tags: list[MetaTag], key: str) -> str:
    tag = find_meta_tag(meta_tags, key)
    return tag["content"] if tag else ""


def tag_display_status(meta_tags: list[MetaTag], key: str) -> str:
    tag = find_meta_tag(meta_tags, key)
    if tag is None:
        return "missing"
    return tag.get("status") or "good"


def build_previews(analysis: SEOAnalysis) -> dict:
    """
    Google, Facebook and Twitter preview fields, each falling back to the
    next best source when its own tag is absent.
    """
    meta_tags = analysis["metaTags"]
    title = analysis.get("title") or ""
    description = analysis.get("description") or ""

    og_title = _content(meta_tags, "og:title") or title
    og_description = _content(meta_tags, "og:description") or description
    og_image = _content(meta_tags, "og:image")
    og_url = _content(meta_tags, "og:url") or analysis["url"]

    statuses = [point["status"] for point in analysis["summaryPoints"]]

    return {
        "google": {
            "title": title,
            "description": description,
            "url": analysis["url"],
            "title_length": len(title),
            "description_length": len(description),
        },
        "facebook": {
            "title": og_title,
            "description": og_description,
            "image": og_image,
            "url": og_url,
            "type": _content(meta_tags, "og:type"),
        },
        "twitter": {
            "card": _content(meta_tags, "twitter:card"),
            "title": _content(meta_tags, "twitter:title") or og_title,
            "description": _content(meta_tags, "twitter:description") or og_description,
            "image": _content(meta_tags, "twitter:image") or og_image,
        },
        "tag_statuses": {key: tag_display_status(meta_tags, key) for key in PREVIEW_TAGS},
        "summary_counts": {
            "good": statuses.count("good"),
            "warning": statuses.count("warning"),
            "error": statuses.count("error"),
        },
    }
