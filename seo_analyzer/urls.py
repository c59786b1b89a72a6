"""Validation and normalisation of user supplied URLs."""
from __future__ import annotations

import logging
from urllib.parse import urlparse, urlunparse

import validators

from .errors import ValidationError

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http", "https")
# Order in which schemes are tried for input typed without one.
FALLBACK_SCHEMES = ("https", "http")
# Schemes that make input an absolute, non-web URL even without "//".
NON_WEB_SCHEMES = frozenset(
    {"mailto", "data", "javascript", "file", "ftp", "ftps", "tel", "sms", "ws", "wss", "ssh", "sftp", "about", "blob"}
)
INVALID_URL_MESSAGE = "Invalid URL format"


def is_valid_url(url: str) -> bool:
    """Return True for absolute http(s) URLs with a well-formed host and port."""

    try:
        parsed = urlparse(url)
        # Raises ValueError for non-numeric or out of range ports.
        parsed.port
    except ValueError:
        return False
    if parsed.scheme.lower() not in ALLOWED_SCHEMES or not parsed.hostname:
        return False
    return bool(validators.url(url, simple_host=True))


def _is_foreign_absolute(value: str) -> bool:
    """True when ``value`` already names a scheme other than http(s)."""

    parsed = urlparse(value)
    scheme = parsed.scheme.lower()
    if not scheme or scheme in ALLOWED_SCHEMES:
        return False
    return bool(parsed.netloc) or scheme in NON_WEB_SCHEMES


def _normalise(url: str) -> str:
    parsed = urlparse(url)
    return urlunparse(parsed._replace(scheme=parsed.scheme.lower(), path=parsed.path or "/"))


def normalize_url(raw: str | None) -> str:
    """Turn free-form input into an absolute http(s) URL.

    Input that is already an absolute http(s) URL is kept. Input naming any
    other scheme is rejected. Everything else is retried with ``https://``
    and then ``http://``, so ``example.com`` becomes ``https://example.com/``.
    """

    value = (raw or "").strip()
    if not value:
        raise ValidationError("URL is required")

    if is_valid_url(value):
        return _normalise(value)
    try:
        scheme = urlparse(value).scheme.lower()
        rejected = scheme in ALLOWED_SCHEMES or _is_foreign_absolute(value)
    except ValueError:
        rejected = True
    if rejected:
        raise ValidationError(INVALID_URL_MESSAGE)

    for scheme in FALLBACK_SCHEMES:
        candidate = f"{scheme}://{value}"
        if is_valid_url(candidate):
            normalised = _normalise(candidate)
            logger.debug("Normalised %r to %s", value, normalised)
            return normalised

    raise ValidationError(INVALID_URL_MESSAGE)
