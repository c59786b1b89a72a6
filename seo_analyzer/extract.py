"""HTML metadata extraction."""
from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from . import config
from .errors import ParseError
from .schemas import MetaTag, OpenGraphPreview, PageMetadata, TwitterPreview

logger = logging.getLogger(__name__)

FAVICON_SELECTORS = ('link[rel="icon"]', 'link[rel="shortcut icon"]')


def _attribute(soup: BeautifulSoup, selector: str, attribute: str) -> Optional[str]:
    """Return the attribute of the first element matching ``selector``.

    Empty values are treated the same as missing ones.
    """

    tag = soup.select_one(selector)
    if tag is None:
        return None
    value = tag.get(attribute)
    if isinstance(value, list):
        value = " ".join(value)
    return value or None


def _meta_content(soup: BeautifulSoup, attribute: str, key: str) -> Optional[str]:
    return _attribute(soup, f'meta[{attribute}="{key}"]', "content")


def _title(soup: BeautifulSoup) -> str:
    tag = soup.find("title")
    if tag is None:
        return ""
    return " ".join(tag.get_text().split())


def _meta_tags(soup: BeautifulSoup) -> List[MetaTag]:
    tags: List[MetaTag] = []
    for tag in soup.find_all("meta"):
        content = tag.get("content")
        if not content:
            continue
        tags.append(
            MetaTag(
                content=content,
                name=tag.get("name") or None,
                property=tag.get("property") or None,
            )
        )
    return tags


def _favicon(soup: BeautifulSoup) -> Optional[str]:
    for selector in FAVICON_SELECTORS:
        if soup.select_one(selector) is not None:
            return _attribute(soup, selector, "href")
    return None


def parse_html(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, config.HTML_PARSER)
    except Exception as exc:  # html.parser is lenient; anything raised here is unexpected
        logger.error("Unable to parse HTML document: %s", exc)
        raise ParseError(f"Failed to parse HTML: {exc}") from exc


def extract_metadata(html: str) -> PageMetadata:
    """Read the SEO relevant metadata from an HTML document."""

    soup = parse_html(html)

    open_graph = OpenGraphPreview(
        title=_meta_content(soup, "property", "og:title"),
        description=_meta_content(soup, "property", "og:description"),
        image=_meta_content(soup, "property", "og:image"),
        url=_meta_content(soup, "property", "og:url"),
    )
    twitter = TwitterPreview(
        card=_meta_content(soup, "name", "twitter:card"),
        title=_meta_content(soup, "name", "twitter:title"),
        description=_meta_content(soup, "name", "twitter:description"),
        image=_meta_content(soup, "name", "twitter:image"),
    )

    return PageMetadata(
        title=_title(soup),
        description=_meta_content(soup, "name", "description") or "",
        canonical=_attribute(soup, 'link[rel="canonical"]', "href"),
        favicon=_favicon(soup),
        open_graph=open_graph,
        twitter=twitter,
        meta_tags=tuple(_meta_tags(soup)),
    )
