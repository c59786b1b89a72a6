"""Named thresholds, penalties and request settings."""
from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

TIMEOUT_ENV_VAR = "SEO_ANALYZER_FETCH_TIMEOUT"


def _timeout_from_env(value: str | None) -> float | None:
    """Parse the optional fetch timeout in seconds; unusable values disable it."""

    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, requests will not time out", TIMEOUT_ENV_VAR, value)
        return None
    if seconds <= 0:
        logger.warning("Ignoring %s=%r: must be positive, requests will not time out", TIMEOUT_ENV_VAR, value)
        return None
    return seconds


USER_AGENT = "SEOAnalyzer/1.0"
REQUEST_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}
# No timeout unless the deployment asks for one.
REQUEST_TIMEOUT = _timeout_from_env(os.getenv(TIMEOUT_ENV_VAR))

HTML_PARSER = "html.parser"

TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
DESCRIPTION_MIN_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 160

MAX_SCORE = 100
SEVERITY_PENALTIES = {
    "error": 20,
    "warning": 10,
    "info": 0,
}
