"""Shared data structures used across modules."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Literal, Tuple

from pydantic import BaseModel

Severity = Literal["error", "warning", "info"]


def _present(preview: Any) -> Dict[str, str]:
    return {
        item.name: getattr(preview, item.name)
        for item in fields(preview)
        if getattr(preview, item.name) is not None
    }


@dataclass(frozen=True, slots=True)
class MetaTag:
    content: str
    name: str | None = None
    property: str | None = None

    def to_dict(self) -> Dict[str, str]:
        return _present(self)


@dataclass(frozen=True, slots=True)
class OpenGraphPreview:
    title: str | None = None
    description: str | None = None
    image: str | None = None
    url: str | None = None

    def to_dict(self) -> Dict[str, str]:
        return _present(self)


@dataclass(frozen=True, slots=True)
class TwitterPreview:
    card: str | None = None
    title: str | None = None
    description: str | None = None
    image: str | None = None

    def to_dict(self) -> Dict[str, str]:
        return _present(self)


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"severity": self.severity, "message": self.message}


@dataclass(frozen=True, slots=True)
class PageMetadata:
    """Everything read from a single HTML document."""

    title: str = ""
    description: str = ""
    canonical: str | None = None
    favicon: str | None = None
    open_graph: OpenGraphPreview = field(default_factory=OpenGraphPreview)
    twitter: TwitterPreview = field(default_factory=TwitterPreview)
    meta_tags: Tuple[MetaTag, ...] = ()


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    metadata: PageMetadata
    issues: Tuple[Issue, ...]
    score: int
    url: str | None = None
    final_url: str | None = None

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def description(self) -> str:
        return self.metadata.description

    @property
    def canonical(self) -> str | None:
        return self.metadata.canonical

    @property
    def favicon(self) -> str | None:
        return self.metadata.favicon

    @property
    def open_graph(self) -> OpenGraphPreview:
        return self.metadata.open_graph

    @property
    def twitter(self) -> TwitterPreview:
        return self.metadata.twitter

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON payload served by ``POST /api/analyze``."""

        return {
            "url": self.url,
            "finalUrl": self.final_url,
            "title": self.title,
            "description": self.description,
            "canonical": self.canonical,
            "favicon": self.favicon,
            "openGraph": self.open_graph.to_dict(),
            "twitter": self.twitter.to_dict(),
            "metaTags": [tag.to_dict() for tag in self.metadata.meta_tags],
            "issues": [issue.to_dict() for issue in self.issues],
            "score": self.score,
        }


class AnalyzeRequest(BaseModel):
    url: str | None = None
