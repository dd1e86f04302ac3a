"""On-page SEO analysis engine.

Pure functions over extracted page data: four metric analyzers, the weighted
score calculator, the recommendation generator and the report assembler.
No I/O happens here; the same input always yields the same report.
"""

from models import MetaTag, Recommendation, SEOAnalysis, Verdict

TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
DESCRIPTION_MIN_LENGTH = 80
DESCRIPTION_MAX_LENGTH = 158

REQUIRED_OG_TAGS = ["og:title", "og:description", "og:image", "og:url"]
CRITICAL_OG_TAGS = {"og:title", "og:description"}
REQUIRED_TWITTER_TAGS = ["twitter:card", "twitter:title", "twitter:description", "twitter:image"]


def has_property(meta_tags: list[MetaTag], prop: str) -> bool:
    return any(tag.get("property") == prop for tag in meta_tags)


def has_name(meta_tags: list[MetaTag], name: str) -> bool:
    return any(tag.get("name") == name for tag in meta_tags)


def has_canonical(meta_tags: list[MetaTag]) -> bool:
    return any(tag.get("type") == "link" and tag.get("property") == "canonical" for tag in meta_tags)


def has_og_image_dimensions(meta_tags: list[MetaTag]) -> bool:
    return has_property(meta_tags, "og:image:width") and has_property(meta_tags, "og:image:height")


def missing_og_tags(meta_tags: list[MetaTag]) -> list[str]:
    return [tag for tag in REQUIRED_OG_TAGS if not has_property(meta_tags, tag)]


def missing_twitter_tags(meta_tags: list[MetaTag]) -> list[str]:
    return [tag for tag in REQUIRED_TWITTER_TAGS if not has_name(meta_tags, tag)]


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


# --- Metric analyzers ---


def analyze_title_tag(title: str | None) -> Verdict:
    if not title:
        return {"status": "error", "message": "Missing title tag"}

    length = len(title)
    if length < TITLE_MIN_LENGTH:
        return {"status": "warning", "message": "Title tag is too short (under 30 characters)"}
    if length > TITLE_MAX_LENGTH:
        return {"status": "warning", "message": f"Title tag is too long at {length} characters (over 60)"}

    return {"status": "good", "message": f"Title tag is well-optimized at {length} characters"}


def analyze_description_tag(description: str | None) -> Verdict:
    if not description:
        return {"status": "error", "message": "Missing meta description"}

    length = len(description)
    if length < DESCRIPTION_MIN_LENGTH:
        return {"status": "warning", "message": "Meta description is too short (under 80 characters)"}
    if length > DESCRIPTION_MAX_LENGTH:
        return {
            "status": "warning",
            "message": f"Meta description is too long at {length} characters (over 158)",
        }

    return {"status": "good", "message": "Meta description is present and well-formatted"}


def analyze_open_graph_tags(meta_tags: list[MetaTag]) -> Verdict:
    """
    Critical tags (og:title, og:description) are checked before the
    recommended ones; image dimensions only matter once all four are present.
    """
    missing = missing_og_tags(meta_tags)

    if missing:
        if CRITICAL_OG_TAGS.intersection(missing):
            return {"status": "error", "message": f"Missing critical Open Graph tags: {', '.join(missing)}"}
        return {"status": "warning", "message": f"Missing recommended Open Graph tags: {', '.join(missing)}"}

    if has_property(meta_tags, "og:image") and not has_og_image_dimensions(meta_tags):
        return {"status": "warning", "message": "Missing Open Graph image dimensions"}

    return {"status": "good", "message": "Open Graph tags are well implemented"}


def analyze_twitter_card_tags(meta_tags: list[MetaTag]) -> Verdict:
    missing = missing_twitter_tags(meta_tags)

    # Total absence is an error, partial coverage only a warning.
    if len(missing) == len(REQUIRED_TWITTER_TAGS):
        return {"status": "error", "message": "Twitter card meta tags are missing"}
    if missing:
        return {"status": "warning", "message": f"Some Twitter card tags are missing: {', '.join(missing)}"}

    return {"status": "good", "message": "Twitter card tags are well implemented"}


# --- Score ---


def calculate_seo_score(
    title: str | None,
    description: str | None,
    meta_tags: list[MetaTag] | None,
) -> int:
    """
    Weighted 0-100 score computed from the raw page data, not from the
    analyzer verdicts.

    Title 20, description 20, Open Graph 30 (4 x 5 required, 5 og:type,
    5 image dimensions), Twitter 20 (4 x 5), canonical 10. Open Graph and
    Twitter only count towards the maximum when meta tags were supplied.
    """
    earned = 0
    max_points = 0

    max_points += 20
    if title:
        earned += 20 if TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH else 10

    max_points += 20
    if description:
        earned += 20 if DESCRIPTION_MIN_LENGTH <= len(description) <= DESCRIPTION_MAX_LENGTH else 10

    if meta_tags is not None:
        max_points += 30
        for tag in REQUIRED_OG_TAGS:
            if has_property(meta_tags, tag):
                earned += 5
        if has_property(meta_tags, "og:type"):
            earned += 5
        if has_og_image_dimensions(meta_tags):
            earned += 5

        max_points += 20
        for tag in REQUIRED_TWITTER_TAGS:
            if has_name(meta_tags, tag):
                earned += 5

    max_points += 10
    if meta_tags is not None and has_canonical(meta_tags):
        earned += 10

    return _round_half_up(earned * 100 / max_points)


# --- Recommendations ---

OG_TAGS_SNIPPET = (
    '<meta property="og:title" content="Your Page Title">\n'
    '<meta property="og:description" content="Your page description">\n'
    '<meta property="og:image" content="https://example.com/image.jpg">\n'
    '<meta property="og:url" content="https://example.com/page-url">'
)
OG_TYPE_SNIPPET = '\n<meta property="og:type" content="website">'
OG_IMAGE_DIMENSIONS_SNIPPET = (
    '<meta property="og:image:width" content="1200">\n'
    '<meta property="og:image:height" content="630">'
)
TWITTER_TAGS_SNIPPET = (
    '<meta name="twitter:card" content="summary_large_image">\n'
    '<meta name="twitter:title" content="Your Title">\n'
    '<meta name="twitter:description" content="Your Description">\n'
    '<meta name="twitter:image" content="https://example.com/image.jpg">'
)


def generate_recommendations(
    title: str | None,
    description: str | None,
    meta_tags: list[MetaTag] | None,
) -> list[Recommendation]:
    """
    Return fix-it suggestions in a fixed order: title, description,
    Open Graph, image dimensions, Twitter Card, canonical. Ids are
    assigned sequentially from 1 in that order.
    """
    pending: list[tuple[str, str, str]] = []

    if not title:
        pending.append(
            (
                "Add a title tag",
                "Every page should have a unique, descriptive title tag (50-60 characters).",
                "<title>Your Page Title | Your Website Name</title>",
            )
        )
    elif len(title) > TITLE_MAX_LENGTH:
        pending.append(
            (
                "Shorten your title tag",
                "Your title tag is too long. Keep it under 60 characters to avoid truncation in search results.",
                "<title>Shorter, More Concise Title | Website</title>",
            )
        )

    if not description:
        pending.append(
            (
                "Add a meta description",
                "Every page should have a unique meta description (120-158 characters).",
                '<meta name="description" content="A concise description of your page content '
                'that will entice users to click through from search results.">',
            )
        )
    elif len(description) > DESCRIPTION_MAX_LENGTH:
        pending.append(
            (
                "Shorten your meta description",
                "Your meta description is too long. Keep it under 158 characters "
                "to avoid truncation in search results.",
                '<meta name="description" content="A shorter, more concise description of your page content.">',
            )
        )

    if meta_tags is not None:
        if missing_og_tags(meta_tags):
            snippet = OG_TAGS_SNIPPET
            if not has_property(meta_tags, "og:type"):
                snippet += OG_TYPE_SNIPPET
            pending.append(
                (
                    "Add Open Graph meta tags",
                    "Open Graph tags improve how your content appears when shared on "
                    "social media platforms like Facebook.",
                    snippet,
                )
            )

        if has_property(meta_tags, "og:image") and not has_og_image_dimensions(meta_tags):
            pending.append(
                (
                    "Add Open Graph image dimensions",
                    "Include width and height for og:image to improve social media previews.",
                    OG_IMAGE_DIMENSIONS_SNIPPET,
                )
            )

        if missing_twitter_tags(meta_tags):
            pending.append(
                (
                    "Add Twitter Card meta tags",
                    "Implement basic Twitter Card meta tags to improve visibility when sharing on Twitter.",
                    TWITTER_TAGS_SNIPPET,
                )
            )

        if not has_canonical(meta_tags):
            pending.append(
                (
                    "Add canonical URL",
                    "Implement a canonical URL to avoid duplicate content issues.",
                    '<link rel="canonical" href="https://example.com/page-url">',
                )
            )

    return [
        {"id": index, "title": rec_title, "description": rec_description, "implementation": implementation}
        for index, (rec_title, rec_description, implementation) in enumerate(pending, start=1)
    ]


# --- Report ---


def build_analysis(
    title: str | None,
    description: str | None,
    url: str,
    meta_tags: list[MetaTag],
) -> SEOAnalysis:
    """Run every analyzer over the extracted data and assemble the report."""
    summary_points = [
        analyze_title_tag(title),
        analyze_description_tag(description),
        analyze_open_graph_tags(meta_tags),
        analyze_twitter_card_tags(meta_tags),
    ]

    return {
        "title": title,
        "url": url,
        "description": description,
        "score": calculate_seo_score(title, description, meta_tags),
        "metaTags": meta_tags,
        "recommendations": generate_recommendations(title, description, meta_tags),
        "summaryPoints": summary_points,
    }
