"""
Tests for the pattern-based markup extractors.
"""

from seo_toolkit.markup import (
    HeadingInfo,
    MetaTag,
    extract_canonical,
    extract_headings,
    extract_links,
    extract_meta_tags,
    extract_title,
    get_attr,
    strip_tags,
)


class TestTitle:
    """Test <title> extraction."""

    def test_first_title_trimmed(self):
        html = "<head><title>\n  First  </title><title>Second</title></head>"
        assert extract_title(html) == "First"

    def test_title_with_attributes(self):
        assert extract_title('<TITLE lang="en">Hello</TITLE>') == "Hello"

    def test_missing_title(self):
        assert extract_title("<html><body>No title</body></html>") is None

    def test_empty_input(self):
        assert extract_title("") is None


class TestMetaTags:
    """Test <meta> tag extraction."""

    def test_name_and_property_in_document_order(self, full_page_html):
        tags = extract_meta_tags(full_page_html)
        keys = [t.property or t.name for t in tags]
        assert keys == [
            "description", "viewport", "og:title", "og:description",
            "og:image", "og:url", "twitter:card",
        ]

    def test_tag_without_name_or_property_skipped(self):
        assert extract_meta_tags('<meta charset="utf-8"><meta http-equiv="refresh" content="5">') == []

    def test_missing_content_is_empty_string(self):
        assert extract_meta_tags('<meta name="robots">') == [MetaTag(content="", name="robots")]

    def test_single_quotes_and_attribute_order(self):
        tags = extract_meta_tags("<meta content='Hello' property='og:title'/>")
        assert tags == [MetaTag(content="Hello", property="og:title")]

    def test_apostrophe_inside_double_quotes(self):
        tags = extract_meta_tags('<meta name="description" content="Don\'t panic">')
        assert tags[0].content == "Don't panic"

    def test_data_attribute_not_mistaken_for_name(self):
        tags = extract_meta_tags('<meta data-name="x" property="og:url" content="u">')
        assert tags[0].name is None
        assert tags[0].property == "og:url"


class TestCanonical:
    """Test canonical link extraction."""

    def test_rel_before_href(self):
        assert extract_canonical('<link rel="canonical" href="https://a.com/x">') == "https://a.com/x"

    def test_href_before_rel(self):
        assert extract_canonical("<link href='https://a.com/y' rel='canonical' />") == "https://a.com/y"

    def test_other_link_rels_ignored(self):
        html = '<link rel="stylesheet" href="/s.css"><link rel="canonical" href="/c">'
        assert extract_canonical(html) == "/c"

    def test_missing_canonical(self):
        assert extract_canonical('<link rel="icon" href="/f.ico">') is None


class TestHeadings:
    """Test heading extraction."""

    def test_headings_in_document_order(self, full_page_html):
        assert extract_headings(full_page_html) == [
            HeadingInfo(1, "Project management made simple"),
            HeadingInfo(2, "Boards"),
            HeadingInfo(3, "Custom columns"),
            HeadingInfo(2, "Reports dashboards"),
        ]

    def test_empty_heading_skipped(self):
        assert extract_headings("<h1>  </h1><h2><span></span></h2><h3>Real</h3>") == [HeadingInfo(3, "Real")]

    def test_mismatched_closing_tag_not_matched(self):
        assert extract_headings("<h1>Broken</h2>") == []

    def test_whitespace_collapsed(self):
        assert extract_headings("<h2 class='x'>A\n\n   B</h2>")[0].text == "A B"


class TestLinks:
    """Test anchor extraction."""

    def test_internal_flag(self, full_page_html):
        links = extract_links(full_page_html)
        assert [(l.href, l.text, l.is_internal) for l in links] == [
            ("/pricing", "Pricing", True),
            ("https://other.example.org/", "Partner", False),
        ]

    def test_fragment_is_internal(self):
        assert extract_links('<a href="#top">Top</a>')[0].is_internal is True

    def test_anchor_without_href_skipped(self):
        assert extract_links('<a name="x">Anchor</a>') == []


class TestHelpers:
    """Test attribute and tag helpers."""

    def test_get_attr_case_insensitive(self):
        assert get_attr('NAME="x"', "name") == "x"

    def test_get_attr_missing(self):
        assert get_attr('content="x"', "name") is None

    def test_strip_tags_entities_become_space(self):
        assert strip_tags("a&nbsp;<b>b</b>") == "a b"
