from ..base_module import SEOModule
from ..markup import extract_meta_tags, extract_title, extract_canonical

REQUIRED_OPEN_GRAPH = {
    "og:title": "Missing og:title",
    "og:description": "Missing og:description",
    "og:image": "Missing og:image (no preview image for social shares)",
    "og:url": "Missing og:url",
}
TOTAL_CHECKS = 8


def group_meta_tags(tags) -> tuple[dict, dict, dict, str | None]:
    """
    Splits meta tags into Open Graph, Twitter and other mappings and picks out
    the description. Later tags with the same key overwrite earlier ones.
    """
    open_graph, twitter, other = {}, {}, {}
    description = None
    for tag in tags:
        name = tag.name or ""
        prop = tag.property or ""
        if description is None and name.lower() == "description":
            description = tag.content
        if prop.startswith("og:"):
            open_graph[prop] = tag.content
        elif name.startswith("twitter:") or prop.startswith("twitter:"):
            twitter[name or prop] = tag.content
        elif name and name.lower() != "description":
            other[name] = tag.content
    return open_graph, twitter, other, description


def check_title(title: str | None, min_len: int, max_len: int) -> dict:
    length = len(title) if title else 0
    ok, tip = True, None
    if not title:
        ok = False
        tip = f"Add a unique, descriptive title (50-{max_len} characters)"
    elif length < min_len:
        tip = f"Title is short. Aim for 50-{max_len} characters for better CTR."
    elif length > max_len:
        tip = f"Title may be truncated in SERPs. Keep under {max_len} characters."
    return {"value": title, "length": length or None, "ok": ok, "tip": tip}


def check_description(description: str | None, min_len: int, max_len: int) -> dict:
    length = len(description) if description else 0
    ok, tip = True, None
    if not description:
        ok = False
        tip = f"Add a meta description (120-{max_len} characters) to improve CTR."
    elif length < min_len:
        tip = f"Description is short. Aim for 120-{max_len} characters."
    elif length > max_len:
        tip = f"Description may be truncated. Keep under {max_len} characters."
    return {"value": description, "length": length or None, "ok": ok, "tip": tip}


class MetaTagAnalyzer(SEOModule):
    """Audits title, description, social and canonical tags of a page."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.title_min_len = self.config.get("title_min_length", 30)
        self.title_max_len = self.config.get("title_max_length", 60)
        self.desc_min_len = self.config.get("desc_min_length", 70)
        self.desc_max_len = self.config.get("desc_max_length", 160)

    def analyze(self, url: str) -> dict:
        page = self.fetch_page(url)
        return self.analyze_html(page.html, url)

    def analyze_html(self, html: str, url: str | None = None) -> dict:
        tags = extract_meta_tags(html)
        title = extract_title(html)
        canonical = extract_canonical(html)
        open_graph, twitter, other, description = group_meta_tags(tags)

        issues = []
        if not title:
            issues.append("Missing <title> tag")
        if not description:
            issues.append("Missing meta description")
        for prop, message in REQUIRED_OPEN_GRAPH.items():
            if not open_graph.get(prop):
                issues.append(message)
        if not twitter.get("twitter:card"):
            issues.append("Missing twitter:card")
        if not canonical:
            issues.append("No canonical URL set")

        return {
            "url": url,
            "title": check_title(title, self.title_min_len, self.title_max_len),
            "description": check_description(description, self.desc_min_len, self.desc_max_len),
            "canonical": canonical,
            "openGraph": open_graph,
            "twitter": twitter,
            "other": other,
            "issues": issues,
            "score": f"{TOTAL_CHECKS - len(issues)}/{TOTAL_CHECKS}",
        }
