"""SEO meta tag analyzer API – FastAPI app and endpoints."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from analyzer import build_analysis
from models import SEOAnalysis
from previews import build_previews
from schemas import ErrorResponse, PreviewResponse, SEOAnalysisResponse
from scraper import FetchError, extract_page_data, fetch_html, validate_url

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SEO Meta Tag Analyzer API",
    description="Fetch a page, score its SEO meta tags and suggest fixes",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


class BadRequest(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@app.exception_handler(BadRequest)
def bad_request_handler(request: Request, exc: BadRequest) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": exc.message})


@app.exception_handler(FetchError)
def fetch_error_handler(request: Request, exc: FetchError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(Exception)
def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Error in %s", request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def analyze_url(url: str | None) -> SEOAnalysis:
    """
    Pipeline: validate url -> fetch html -> extract tags -> analyze.
    Raises BadRequest or FetchError; the handlers above turn them into JSON.
    """
    if not url:
        raise BadRequest("URL parameter is required")
    if not validate_url(url):
        raise BadRequest("Invalid URL format")

    html = fetch_html(url)
    try:
        page = extract_page_data(html)
    except Exception as e:
        logger.warning("Could not parse %s: %s", url, e)
        raise FetchError(500, f"Error fetching or parsing the webpage: {e}") from e

    analysis = build_analysis(
        title=page["title"],
        description=page["description"],
        url=page["canonical_url"] or url,
        meta_tags=page["meta_tags"],
    )
    logger.info("Analyzed %s: score %s", url, analysis["score"])
    return analysis


@app.get(
    "/api/analyze",
    response_model=SEOAnalysisResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def analyze(url: str | None = None) -> SEOAnalysis:
    """Fetch `url` and return its full SEO report."""
    return analyze_url(url)


@app.get("/api/preview", response_model=PreviewResponse, responses=ERROR_RESPONSES)
def preview(url: str | None = None) -> dict:
    """Return the Google, Facebook and Twitter previews for `url`."""
    analysis = analyze_url(url)
    return {"score": analysis["score"], **build_previews(analysis)}


@app.get("/health")
def health() -> dict:
    """Health check for deployment."""
    return {"status": "ok"}
