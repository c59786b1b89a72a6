import pytest

from conftest import DESCRIPTION, FULL_OG, FULL_TWITTER, TITLE, build_page

from seo_analyzer.extract import extract_metadata
from seo_analyzer.schemas import MetaTag, PageMetadata


def test_extract_metadata_reads_all_fields(full_page):
    metadata = extract_metadata(full_page)

    assert metadata.title == TITLE
    assert metadata.description == DESCRIPTION
    assert metadata.canonical == "https://example.com/"
    assert metadata.favicon == "/favicon.ico"
    assert metadata.open_graph.title == FULL_OG["title"]
    assert metadata.open_graph.description == FULL_OG["description"]
    assert metadata.open_graph.image == FULL_OG["image"]
    assert metadata.open_graph.url == FULL_OG["url"]
    assert metadata.twitter.card == "summary_large_image"
    assert metadata.twitter.title == FULL_TWITTER["title"]
    assert metadata.twitter.description == FULL_TWITTER["description"]
    assert metadata.twitter.image == FULL_TWITTER["image"]


def test_extract_metadata_defaults_for_bare_document():
    metadata = extract_metadata("<html><body><p>Nothing here</p></body></html>")

    assert metadata == PageMetadata()
    assert metadata.title == ""
    assert metadata.description == ""
    assert metadata.canonical is None
    assert metadata.favicon is None
    assert metadata.open_graph.title is None
    assert metadata.twitter.card is None
    assert metadata.meta_tags == ()


def test_meta_tags_keep_document_order_and_skip_empty_content():
    html = build_page(
        og={"title": "OG"},
        twitter={"card": "summary"},
        canonical=None,
        extra_head='<meta charset="utf-8"><meta name="robots" content="">',
    )

    tags = extract_metadata(html).meta_tags

    assert tags == (
        MetaTag(name="description", content=DESCRIPTION),
        MetaTag(property="og:title", content="OG"),
        MetaTag(name="twitter:card", content="summary"),
    )


def test_first_matching_tag_wins():
    html = (
        "<html><head>"
        "<title>First title</title><title>Second title</title>"
        '<meta name="description" content="first">'
        '<meta name="description" content="second">'
        '<link rel="canonical" href="https://example.com/a">'
        '<link rel="canonical" href="https://example.com/b">'
        "</head></html>"
    )

    metadata = extract_metadata(html)

    assert metadata.title == "First title"
    assert metadata.description == "first"
    assert metadata.canonical == "https://example.com/a"


def test_empty_attribute_values_count_as_missing():
    html = '<head><meta property="og:title" content=""><link rel="canonical" href=""></head>'

    metadata = extract_metadata(html)

    assert metadata.open_graph.title is None
    assert metadata.canonical is None


def test_title_whitespace_is_collapsed():
    metadata = extract_metadata("<title>\n   Spaced    out\n  title </title>")
    assert metadata.title == "Spaced out title"


def test_favicon_prefers_icon_over_shortcut_icon():
    html = '<link rel="shortcut icon" href="/legacy.ico"><link rel="icon" href="/modern.png">'
    assert extract_metadata(html).favicon == "/modern.png"


def test_favicon_falls_back_to_shortcut_icon():
    html = '<link rel="shortcut icon" href="/legacy.ico">'
    assert extract_metadata(html).favicon == "/legacy.ico"


def test_lenient_parsing_of_malformed_markup():
    html = "<title>Widgets</title><meta name=description content=Hello><body><div><p>unclosed <b>tags"

    metadata = extract_metadata(html)

    assert metadata.title == "Widgets"
    assert metadata.description == "Hello"


def test_extraction_is_idempotent(full_page):
    assert extract_metadata(full_page) == extract_metadata(full_page)


def test_parser_failure_is_reported_as_parse_error(monkeypatch):
    from seo_analyzer import extract
    from seo_analyzer.errors import ParseError

    def broken_parser(html, features):
        raise AssertionError("unexpected token")

    monkeypatch.setattr(extract, "BeautifulSoup", broken_parser)

    with pytest.raises(ParseError, match="unexpected token"):
        extract.extract_metadata("<html>")
