"""Social preview cards as rendered in the results page."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from .schemas import AnalysisResult

# Sources consulted, most specific first, when a card field is missing.
OPEN_GRAPH_TEXT_PRECEDENCE = ("open_graph", "page")
OPEN_GRAPH_IMAGE_PRECEDENCE = ("open_graph",)
TWITTER_TEXT_PRECEDENCE = ("twitter", "open_graph", "page")
TWITTER_IMAGE_PRECEDENCE = ("twitter", "open_graph")

SEVERITY_STYLES = {
    "error": "issue-error",
    "warning": "issue-warning",
    "info": "issue-info",
}


@dataclass(frozen=True, slots=True)
class PreviewCard:
    title: str
    description: str
    image: Optional[str]
    url: Optional[str] = None


def coalesce(*values: Optional[str]) -> Optional[str]:
    """Return the first non-empty value."""

    for value in values:
        if value:
            return value
    return None


def _lookup(result: AnalysisResult, precedence: Sequence[str], field: str) -> Optional[str]:
    sources = {
        "page": result.metadata,
        "open_graph": result.open_graph,
        "twitter": result.twitter,
    }
    return coalesce(*(getattr(sources[name], field, None) for name in precedence))


def open_graph_card(result: AnalysisResult) -> PreviewCard:
    return PreviewCard(
        title=_lookup(result, OPEN_GRAPH_TEXT_PRECEDENCE, "title") or "",
        description=_lookup(result, OPEN_GRAPH_TEXT_PRECEDENCE, "description") or "",
        image=_lookup(result, OPEN_GRAPH_IMAGE_PRECEDENCE, "image"),
        url=result.url,
    )


def twitter_card(result: AnalysisResult) -> PreviewCard:
    return PreviewCard(
        title=_lookup(result, TWITTER_TEXT_PRECEDENCE, "title") or "",
        description=_lookup(result, TWITTER_TEXT_PRECEDENCE, "description") or "",
        image=_lookup(result, TWITTER_IMAGE_PRECEDENCE, "image"),
    )


def build_cards(result: AnalysisResult) -> Dict[str, PreviewCard]:
    return {"open_graph": open_graph_card(result), "twitter": twitter_card(result)}


def severity_style(severity: str) -> str:
    return SEVERITY_STYLES.get(severity, SEVERITY_STYLES["info"])
