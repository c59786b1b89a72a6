"""Fetch, extract and evaluate a single page."""
from __future__ import annotations

import logging
import time
from typing import Optional

from .errors import ValidationError
from .extract import extract_metadata
from .fetch import fetch_page
from .rules import compute_score, evaluate
from .schemas import AnalysisResult
from .urls import INVALID_URL_MESSAGE, is_valid_url

logger = logging.getLogger(__name__)


def analyze_html(
    html: str,
    url: Optional[str] = None,
    final_url: Optional[str] = None,
) -> AnalysisResult:
    """Analyse an already retrieved document.

    ``url`` and ``final_url`` are only used for the HTTPS redirect check and
    are echoed back in the result.
    """

    metadata = extract_metadata(html)
    issues = evaluate(metadata, requested_url=url, final_url=final_url)
    return AnalysisResult(
        metadata=metadata,
        issues=tuple(issues),
        score=compute_score(issues),
        url=url,
        final_url=final_url,
    )


def analyze_url(url: Optional[str]) -> AnalysisResult:
    """Fetch ``url`` and analyse the returned HTML.

    Raises :class:`ValidationError` before any network access when the URL is
    missing or not http(s); fetch and parse failures propagate unchanged.
    """

    if not url:
        raise ValidationError("URL is required")
    if not is_valid_url(url):
        raise ValidationError(INVALID_URL_MESSAGE)

    start = time.perf_counter()
    page = fetch_page(url)
    result = analyze_html(page.html, url=url, final_url=page.final_url)
    logger.info(
        "Analysed %s in %.2fs: %d issue(s), score %d",
        url,
        time.perf_counter() - start,
        len(result.issues),
        result.score,
    )
    return result
