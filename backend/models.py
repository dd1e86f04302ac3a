"""Data models and types used across the backend.

HTTP response schemas are in schemas.py.
Types for the extractor and the analysis engine live here.
"""

from typing import Literal, NotRequired, TypedDict

# Per-tag status set at extraction time.
TagStatus = Literal["good", "warning", "missing"]

# Per-dimension status returned by the metric analyzers.
SummaryStatus = Literal["good", "warning", "error"]


class MetaTag(TypedDict):
    """One discovered <meta> or <link> tag."""

    type: Literal["meta", "link"]
    content: str
    name: NotRequired[str]
    property: NotRequired[str]
    status: NotRequired[TagStatus]
    message: NotRequired[str]


class Verdict(TypedDict):
    """Result of a single metric analyzer."""

    status: SummaryStatus
    message: str


class Recommendation(TypedDict):
    """Single fix-it suggestion with a literal HTML snippet."""

    id: int
    title: str
    description: str
    implementation: str


class PageData(TypedDict):
    """Structured output from the tag extractor."""

    title: str | None
    description: str | None
    canonical_url: str | None
    meta_tags: list[MetaTag]


class SEOAnalysis(TypedDict):
    """Full report for one analyzed page."""

    title: str | None
    url: str
    description: str | None
    score: int
    metaTags: list[MetaTag]
    recommendations: list[Recommendation]
    summaryPoints: list[Verdict]
