from __future__ import annotations

from typing import List, Dict, Any, Optional
from urllib.parse import urlparse
from xml.etree import ElementTree as ET

from ..base_module import SEOModule, FetchError

MAX_URLS_PER_SITEMAP = 50000
SAMPLE_URLS = 10
SAMPLE_LASTMODS = 5


def sitemap_url_for(url: str) -> Optional[str]:
    """A bare domain maps to /sitemap.xml; any other path is taken as the sitemap itself."""
    parsed = urlparse(url or "")
    if not (parsed.scheme and parsed.netloc):
        return None
    if parsed.path in ("", "/"):
        return f"{parsed.scheme}://{parsed.netloc}/sitemap.xml"
    return url


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child_text(element: ET.Element, name: str) -> Optional[str]:
    for child in element:
        if _local(child.tag) == name and child.text and child.text.strip():
            return child.text.strip()
    return None


def parse_sitemap(text: str) -> Dict[str, Any]:
    """
    Detects the sitemap format and pulls out page URLs, lastmod dates and
    child sitemaps. Returns a dict with keys format, urls, lastmods,
    children and error (None unless the XML could not be parsed).
    """
    parsed: Dict[str, Any] = {"format": "unknown", "urls": [], "lastmods": [], "children": [], "error": None}
    if "<sitemapindex" in text:
        parsed["format"] = "index"
    elif "<urlset" in text:
        parsed["format"] = "xml"
    elif text.strip().startswith("http"):
        parsed["format"] = "text"
        parsed["urls"] = [line.strip() for line in text.splitlines() if line.strip()]
        return parsed
    else:
        return parsed

    try:
        root = ET.fromstring(text.strip().encode("utf-8"))
    except ET.ParseError as e:
        parsed["error"] = str(e)
        return parsed

    if parsed["format"] == "index":
        for sm in root.iter():
            if _local(sm.tag) == "sitemap":
                loc = _child_text(sm, "loc")
                if loc:
                    parsed["children"].append(loc)
    else:
        for url_tag in root.iter():
            if _local(url_tag.tag) != "url":
                continue
            loc = _child_text(url_tag, "loc")
            if loc:
                parsed["urls"].append(loc)
            lastmod = _child_text(url_tag, "lastmod")
            if lastmod:
                parsed["lastmods"].append(lastmod)
    return parsed


def sitemap_issues(fmt: str, urls: List[str], lastmods: List[str], children: List[str]) -> List[str]:
    issues: List[str] = []
    if fmt in ("xml", "text"):
        if not urls:
            issues.append("Sitemap contains 0 URLs.")
        elif len(urls) > MAX_URLS_PER_SITEMAP:
            issues.append(f"Sitemap has {len(urls)} URLs. Max recommended per sitemap is 50,000.")
        non_https = [u for u in urls if not u.startswith("https://")]
        if non_https:
            issues.append(f"{len(non_https)} URL(s) are not HTTPS.")
        duplicates = len(urls) - len(set(urls))
        if duplicates:
            issues.append(f"{duplicates} duplicate URL(s) found.")
    if fmt == "index" and not children:
        issues.append("Sitemap index contains no child sitemaps.")
    if fmt == "xml" and urls and not lastmods:
        issues.append("No <lastmod> dates found. Adding them helps search engines prioritize crawling.")
    return issues


class SitemapAnalyzer(SEOModule):
    """Fetches a sitemap (XML urlset, sitemap index or plain text) and validates it."""

    def analyze(self, url: str) -> dict:
        sitemap_url = sitemap_url_for(url)
        if not sitemap_url:
            return {"error": f"Invalid URL: {url}"}
        try:
            response, _ = self.get(sitemap_url)
        except FetchError as e:
            return {"error": str(e)}

        if response.status_code != 200:
            return {
                "url": sitemap_url,
                "found": False,
                "format": "unknown",
                "urlCount": 0,
                "sampleUrls": [],
                "lastModDates": [],
                "childSitemaps": [],
                "issues": [f"Sitemap returned HTTP {response.status_code}. Not found or not accessible."],
                "summary": "Sitemap not found.",
            }

        parsed = parse_sitemap(response.text)
        fmt, urls, children = parsed["format"], parsed["urls"], parsed["children"]
        issues = []
        if parsed["error"]:
            issues.append(f"Sitemap is not valid XML: {parsed['error']}")
        issues.extend(sitemap_issues(fmt, urls, parsed["lastmods"], children))

        if fmt == "index":
            summary = f"Sitemap index with {len(children)} child sitemap(s)."
        else:
            summary = f"{fmt.upper()} sitemap with {len(urls)} URL(s)."

        return {
            "url": sitemap_url,
            "found": True,
            "format": fmt,
            "urlCount": len(children) if fmt == "index" else len(urls),
            "sampleUrls": urls[:SAMPLE_URLS],
            "lastModDates": list(dict.fromkeys(parsed["lastmods"]))[:SAMPLE_LASTMODS],
            "childSitemaps": children,
            "issues": issues,
            "summary": summary,
        }
