import os
import tempfile

import pytest

# Keep application logs out of the working tree while testing.
os.environ.setdefault("APP_LOG_DIR", tempfile.mkdtemp(prefix="seo-analyzer-logs-"))

TITLE = "Acme Widgets | Durable tools for every workshop"
DESCRIPTION = ("Acme builds durable widgets for workshops. " * 3).strip()


def build_page(
    title: str | None = TITLE,
    description: str | None = DESCRIPTION,
    og: dict[str, str] | None = None,
    twitter: dict[str, str] | None = None,
    canonical: str | None = "https://example.com/",
    extra_head: str = "",
) -> str:
    head: list[str] = []
    if title is not None:
        head.append(f"<title>{title}</title>")
    if description is not None:
        head.append(f'<meta name="description" content="{description}">')
    for key, value in (og or {}).items():
        head.append(f'<meta property="og:{key}" content="{value}">')
    for key, value in (twitter or {}).items():
        head.append(f'<meta name="twitter:{key}" content="{value}">')
    if canonical is not None:
        head.append(f'<link rel="canonical" href="{canonical}">')
    head.append(extra_head)
    return "<!DOCTYPE html><html><head>{}</head><body><h1>Widgets</h1></body></html>".format("\n".join(head))


FULL_OG = {
    "title": "Acme Widgets",
    "description": "Durable widgets for every workshop",
    "image": "https://example.com/og.png",
    "url": "https://example.com/",
}
FULL_TWITTER = {
    "card": "summary_large_image",
    "title": "Acme Widgets on Twitter",
    "description": "Widgets that last",
    "image": "https://example.com/tw.png",
}


@pytest.fixture
def full_page() -> str:
    return build_page(og=FULL_OG, twitter=FULL_TWITTER, extra_head='<link rel="icon" href="/favicon.ico">')
