import math
import re
from urllib.parse import urlparse
from ..base_module import SEOModule, FetchError


_LEADING_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def parse_crawl_delay(value: str) -> float | None:
    """Leading number of a crawl-delay value ('10s' reads as 10), or None."""
    match = _LEADING_NUMBER_RE.match(value.strip())
    if not match:
        return None
    delay = float(match.group(0))
    return delay if math.isfinite(delay) else None


def robots_url_for(url: str) -> str | None:
    parsed = urlparse(url or "")
    if not (parsed.scheme and parsed.netloc):
        return None
    return f"{parsed.scheme}://{parsed.netloc}/robots.txt"


def parse_robots_txt(content: str) -> tuple[list[dict], list[str]]:
    """Returns (user-agent groups, sitemap urls) from robots.txt text."""
    rules = []
    sitemaps = []
    current = None
    for line in content.splitlines():
        line_strip = line.strip()
        if not line_strip or line_strip.startswith("#"):
            continue
        key, _, value = line_strip.partition(":")
        key = key.strip().lower()
        value = value.strip()
        if key == "user-agent":
            current = {"userAgent": value, "allow": [], "disallow": [], "crawlDelay": None}
            rules.append(current)
        elif key == "disallow" and current is not None:
            if value:
                current["disallow"].append(value)
        elif key == "allow" and current is not None:
            if value:
                current["allow"].append(value)
        elif key == "crawl-delay" and current is not None:
            delay = parse_crawl_delay(value)
            if delay is not None:
                current["crawlDelay"] = delay
        elif key == "sitemap":
            sitemaps.append(value)
    return rules, sitemaps


def robots_issues(rules: list[dict], sitemaps: list[str]) -> list[str]:
    issues = []
    if not sitemaps:
        issues.append("No Sitemap directive found. Add one to help search engines discover pages.")
    if not any(r["userAgent"] == "*" for r in rules):
        issues.append("No rules for User-agent: *. Consider adding a default rule set.")
    if sum(len(r["disallow"]) for r in rules) == 0:
        issues.append("No Disallow rules. Everything is crawlable (may be intentional).")
    if any("/" in r["disallow"] for r in rules):
        issues.append("WARNING: Disallow: / blocks ALL crawling for that user-agent.")
    return issues


class RobotsTxtAnalyzer(SEOModule):
    """Fetches and parses the robots.txt at the root of a site."""

    def analyze(self, url: str) -> dict:
        robots_url = robots_url_for(url)
        if not robots_url:
            return {"error": f"Invalid URL: {url}"}
        try:
            response, _ = self.get(robots_url)
        except FetchError as e:
            return {"error": str(e)}

        if response.status_code != 200:
            return {
                "url": robots_url,
                "found": False,
                "rules": [],
                "sitemaps": [],
                "issues": ["No robots.txt found. Search engines will crawl all pages by default."],
                "summary": "No robots.txt file exists at this domain.",
            }

        rules, sitemaps = parse_robots_txt(response.text)
        total_disallowed = sum(len(r["disallow"]) for r in rules)
        return {
            "url": robots_url,
            "found": True,
            "rules": rules,
            "sitemaps": sitemaps,
            "issues": robots_issues(rules, sitemaps),
            "summary": (
                f"Found {len(rules)} user-agent block(s), {total_disallowed} disallow rule(s), "
                f"{len(sitemaps)} sitemap(s)."
            ),
        }
