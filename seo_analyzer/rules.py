"""Heuristic checks applied to extracted page metadata.

Each check looks at one aspect of the page and returns at most one
:class:`Issue`. Checks never depend on each other and always run in the
order of :data:`CHECKS`, which is also the order of the resulting issues.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from . import config
from .schemas import Issue, PageMetadata

logger = logging.getLogger(__name__)

REQUIRED_OPEN_GRAPH_FIELDS = ("title", "description", "image")
REQUIRED_TWITTER_FIELDS = ("card", "title", "description")

MISSING_TITLE = "Missing page title"
MISSING_DESCRIPTION = "Missing meta description"
MISSING_OPEN_GRAPH = "Missing OpenGraph tags (og:title, og:description, or og:image)"
MISSING_TWITTER = "Missing Twitter card tags"
MISSING_CANONICAL = "Missing canonical URL tag"
HTTPS_REDIRECT = "Site redirects to HTTPS. Consider updating links to use HTTPS directly."

Check = Callable[[PageMetadata], Optional[Issue]]


def _length_issue(label: str, value: str, minimum: int, maximum: int) -> Optional[Issue]:
    length = len(value)
    if minimum <= length <= maximum:
        return None
    return Issue(
        severity="warning",
        message=f"{label} length ({length} characters) should be between {minimum}-{maximum} characters",
    )


def check_title(metadata: PageMetadata) -> Optional[Issue]:
    if not metadata.title:
        return Issue(severity="error", message=MISSING_TITLE)
    return _length_issue("Title", metadata.title, config.TITLE_MIN_LENGTH, config.TITLE_MAX_LENGTH)


def check_description(metadata: PageMetadata) -> Optional[Issue]:
    if not metadata.description:
        return Issue(severity="error", message=MISSING_DESCRIPTION)
    return _length_issue(
        "Description",
        metadata.description,
        config.DESCRIPTION_MIN_LENGTH,
        config.DESCRIPTION_MAX_LENGTH,
    )


def _missing(preview: object, required: Sequence[str]) -> List[str]:
    return [name for name in required if not getattr(preview, name)]


def check_open_graph(metadata: PageMetadata) -> Optional[Issue]:
    if _missing(metadata.open_graph, REQUIRED_OPEN_GRAPH_FIELDS):
        return Issue(severity="warning", message=MISSING_OPEN_GRAPH)
    return None


def check_twitter(metadata: PageMetadata) -> Optional[Issue]:
    if _missing(metadata.twitter, REQUIRED_TWITTER_FIELDS):
        return Issue(severity="warning", message=MISSING_TWITTER)
    return None


def check_canonical(metadata: PageMetadata) -> Optional[Issue]:
    if not metadata.canonical:
        return Issue(severity="warning", message=MISSING_CANONICAL)
    return None


def check_https_redirect(requested_url: Optional[str], final_url: Optional[str]) -> Optional[Issue]:
    """Flag pages only reachable over HTTPS through a redirect from HTTP."""

    if not requested_url or not final_url:
        return None
    if requested_url.lower().startswith("http://") and final_url.lower().startswith("https://"):
        return Issue(severity="warning", message=HTTPS_REDIRECT)
    return None


CHECKS: tuple[Check, ...] = (
    check_title,
    check_description,
    check_open_graph,
    check_twitter,
    check_canonical,
)


def evaluate(
    metadata: PageMetadata,
    requested_url: Optional[str] = None,
    final_url: Optional[str] = None,
) -> List[Issue]:
    """Run every check and collect the issues in check order."""

    issues = [issue for issue in (check(metadata) for check in CHECKS) if issue is not None]
    redirect_issue = check_https_redirect(requested_url, final_url)
    if redirect_issue is not None:
        issues.append(redirect_issue)
    logger.debug("Evaluated metadata: %d issue(s)", len(issues))
    return issues


def compute_score(issues: Iterable[Issue]) -> int:
    """Deduct the fixed per-severity penalty from 100, never going below 0."""

    score = config.MAX_SCORE
    for issue in issues:
        score -= config.SEVERITY_PENALTIES.get(issue.severity, 0)
    return max(score, 0)
