"""Page fetching."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from . import config
from .errors import FetchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FetchedPage:
    requested_url: str
    final_url: str
    status_code: int
    html: str


def fetch_page(url: str) -> FetchedPage:
    """Fetch ``url`` with a single GET, following redirects.

    Raises :class:`FetchError` when the request fails or the final response
    is not a 2xx.
    """

    logger.info("Fetching %s", url)
    try:
        response = requests.get(
            url,
            headers=config.REQUEST_HEADERS,
            timeout=config.REQUEST_TIMEOUT,
            allow_redirects=True,
        )
    except requests.RequestException as exc:
        logger.warning("Failed to fetch %s: %s", url, exc)
        raise FetchError(f"Failed to fetch URL: {exc}") from exc

    if not 200 <= response.status_code < 300:
        reason = response.reason or str(response.status_code)
        logger.info("Fetch of %s returned status %s", url, response.status_code)
        raise FetchError(f"Failed to fetch URL: {reason}", status=response.status_code)

    # requests assumes ISO-8859-1 when the server omits a charset.
    if response.encoding is None or response.encoding.upper() == "ISO-8859-1":
        response.encoding = response.apparent_encoding or "utf-8"

    final_url = str(response.url)
    if final_url != url:
        logger.info("Followed redirects from %s to %s", url, final_url)
    return FetchedPage(
        requested_url=url,
        final_url=final_url,
        status_code=response.status_code,
        html=response.text,
    )
