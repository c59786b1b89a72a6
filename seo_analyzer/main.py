"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates

from .analyzer import analyze_url
from .errors import SeoAnalyzerError, ValidationError
from .fetch import fetch_page
from .logging_setup import configure_logging
from .preview import build_cards, severity_style
from .schemas import AnalyzeRequest
from .urls import INVALID_URL_MESSAGE, is_valid_url, normalize_url

LOG_FILE_PATH = configure_logging(os.getenv("LOG_LEVEL"))
logger = logging.getLogger(__name__)
logger.info("Logging configured. File output: %s", LOG_FILE_PATH)

app = FastAPI(title="SEO Meta Analyzer")

TEMPLATES = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))
TEMPLATES.env.globals["severity_style"] = severity_style

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET",
}


@app.exception_handler(SeoAnalyzerError)
async def analyzer_error_handler(request: Request, exc: SeoAnalyzerError) -> JSONResponse:
    if exc.status_code < 500:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    else:
        logger.error("Failed %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    missing = any(error.get("type") == "missing" for error in exc.errors())
    message = "URL is required" if missing else INVALID_URL_MESSAGE
    logger.warning("Rejected malformed %s %s body: %s", request.method, request.url.path, message)
    return JSONResponse({"error": message}, status_code=400)


@app.get("/", response_class=HTMLResponse)
def index(request: Request) -> HTMLResponse:
    return TEMPLATES.TemplateResponse(request, "index.html", {"url": "", "result": None, "error": None})


@app.post("/", response_class=HTMLResponse)
def analyze_form(request: Request, url: str = Form("")) -> HTMLResponse:
    context = {"url": url, "result": None, "cards": None, "error": None}
    status_code = 200
    try:
        normalised = normalize_url(url)
        context["url"] = normalised
        result = analyze_url(normalised)
    except SeoAnalyzerError as exc:
        logger.info("Form analysis of %r failed: %s", url, exc.message)
        context["error"] = exc.message
        status_code = exc.status_code
    else:
        context["result"] = result
        context["cards"] = build_cards(result)
    return TEMPLATES.TemplateResponse(request, "index.html", context, status_code=status_code)


@app.post("/api/analyze")
def api_analyze(payload: AnalyzeRequest) -> JSONResponse:
    result = analyze_url(payload.url)
    return JSONResponse(result.to_dict())


@app.get("/api/fetch-site")
def fetch_site(url: str | None = None) -> Response:
    if not url:
        raise ValidationError("URL parameter is required")
    if not is_valid_url(url):
        raise ValidationError(INVALID_URL_MESSAGE)

    page = fetch_page(url)
    return Response(content=page.html, media_type="text/html", headers=CORS_HEADERS)
