"""Markup extraction package.

Regex-driven helpers that pull titles, meta tags, canonical links, headings
and anchors out of raw HTML without building a document tree.
"""

from .extractors import (
    MetaTag,
    HeadingInfo,
    LinkInfo,
    get_attr,
    strip_tags,
    extract_title,
    extract_meta_tags,
    extract_canonical,
    extract_headings,
    extract_links,
)
