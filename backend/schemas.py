"""Pydantic schemas for API responses."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class MetaTagItem(BaseModel):
    """Single extracted meta or link tag."""

    model_config = ConfigDict(frozen=True)

    type: Literal["meta", "link"]
    name: str | None = None
    property: str | None = None
    content: str
    status: Literal["good", "warning", "missing"] | None = None
    message: str | None = None


class RecommendationItem(BaseModel):
    """Fix-it suggestion with an HTML snippet."""

    id: int
    title: str
    description: str
    implementation: str


class SummaryPoint(BaseModel):
    """Verdict for one SEO dimension."""

    status: Literal["good", "warning", "error"]
    message: str


class SEOAnalysisResponse(BaseModel):
    """Full report returned by GET /api/analyze."""

    title: str | None = None
    url: str
    description: str | None = None
    score: int
    metaTags: list[MetaTagItem]
    recommendations: list[RecommendationItem]
    summaryPoints: list[SummaryPoint]


class GooglePreview(BaseModel):
    title: str
    description: str
    url: str
    title_length: int
    description_length: int


class FacebookPreview(BaseModel):
    title: str
    description: str
    image: str
    url: str
    type: str


class TwitterPreview(BaseModel):
    card: str
    title: str
    description: str
    image: str


class PreviewResponse(BaseModel):
    """Search and social previews returned by GET /api/preview."""

    score: int
    google: GooglePreview
    facebook: FacebookPreview
    twitter: TwitterPreview
    tag_statuses: dict[str, Literal["good", "warning", "missing"]]
    summary_counts: dict[str, int]


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    message: str
