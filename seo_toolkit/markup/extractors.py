"""Pattern-based extraction of SEO-relevant elements from raw markup.

No DOM is built: each extractor scans the markup text with a regular
expression, so unbalanced or malformed markup simply yields fewer results.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, asdict

_META_RE = re.compile(r"<meta\s+([^>]*?)/?>", re.I)
_TITLE_RE = re.compile(r"<title[^>]*>([\s\S]*?)</title>", re.I)
_HEADING_RE = re.compile(r"<h([1-6])[^>]*>([\s\S]*?)</h\1>", re.I)
_LINK_TAG_RE = re.compile(r"<link\s+([^>]*?)/?>", re.I)
_ANCHOR_RE = re.compile(r"<a\s+([^>]*?)>([\s\S]*?)</a>", re.I)
_TAG_RE = re.compile(r"<[^>]*>")
_ENTITY_RE = re.compile(r"&[a-z]+;", re.I)
_WS_RE = re.compile(r"\s+")


@dataclass
class MetaTag:
    content: str
    name: str | None = None
    property: str | None = None


@dataclass
class HeadingInfo:
    level: int
    text: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class LinkInfo:
    href: str
    text: str
    is_internal: bool


def get_attr(attrs: str, name: str) -> str | None:
    """Returns the quoted value of attribute `name` in an attribute string, or None."""
    match = re.search(
        rf"""(?<![\w:-]){re.escape(name)}\s*=\s*(?:"([^"]*)"|'([^']*)')""",
        attrs,
        re.I,
    )
    if not match:
        return None
    return match.group(1) if match.group(1) is not None else match.group(2)


def strip_tags(html: str) -> str:
    """Drops inner tags, turns named entities into spaces and collapses whitespace."""
    text = _TAG_RE.sub("", html)
    text = _ENTITY_RE.sub(" ", text)
    return _WS_RE.sub(" ", text)


def extract_title(html: str) -> str | None:
    match = _TITLE_RE.search(html or "")
    return match.group(1).strip() if match else None


def extract_meta_tags(html: str) -> list[MetaTag]:
    """Every <meta> carrying a name or property attribute, in document order."""
    tags = []
    for match in _META_RE.finditer(html or ""):
        attrs = match.group(1)
        prop = get_attr(attrs, "property")
        name = get_attr(attrs, "name")
        if not (prop or name):
            continue
        tags.append(MetaTag(content=get_attr(attrs, "content") or "", name=name or None, property=prop or None))
    return tags


def extract_canonical(html: str) -> str | None:
    for match in _LINK_TAG_RE.finditer(html or ""):
        attrs = match.group(1)
        rel = get_attr(attrs, "rel")
        if rel is not None and rel.strip().lower() == "canonical":
            href = get_attr(attrs, "href")
            if href is not None:
                return href
    return None


def extract_headings(html: str) -> list[HeadingInfo]:
    headings = []
    for match in _HEADING_RE.finditer(html or ""):
        text = strip_tags(match.group(2)).strip()
        if text:
            headings.append(HeadingInfo(level=int(match.group(1)), text=text))
    return headings


def extract_links(html: str) -> list[LinkInfo]:
    links = []
    for match in _ANCHOR_RE.finditer(html or ""):
        href = get_attr(match.group(1), "href")
        if not href:
            continue
        links.append(LinkInfo(
            href=href,
            text=strip_tags(match.group(2)).strip(),
            is_internal=href.startswith(("/", "#")),
        ))
    return links
