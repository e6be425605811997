from ..base_module import SEOModule
from ..markup import HeadingInfo, extract_headings

LEVELS = range(1, 7)
TOTAL_CHECKS = 4  # H1 exists, single H1, no skipped levels, first heading is H1


def build_outline(headings: list[HeadingInfo]) -> str:
    if not headings:
        return "(no headings)"
    return "\n".join(f"{'  ' * (h.level - 1)}H{h.level}: {h.text}" for h in headings)


def analyze_headings(headings: list[HeadingInfo], max_length: int = 70, preview_length: int = 40) -> dict:
    """Counts, outline, hierarchy issues and a pass score for an ordered heading list."""
    hierarchy = {f"H{lv}": 0 for lv in LEVELS}
    for h in headings:
        hierarchy[f"H{h.level}"] += 1

    issues = []
    h1_count = hierarchy["H1"]
    if h1_count == 0:
        issues.append("Missing H1 tag. Every page should have exactly one H1.")
    elif h1_count > 1:
        issues.append(f"Multiple H1 tags ({h1_count}). Use only one H1 per page.")

    has_skip = False
    for prev, cur in zip(headings, headings[1:]):
        if cur.level > prev.level + 1:
            has_skip = True
            issues.append(
                f"Skipped heading level: H{prev.level} → H{cur.level} "
                f"(after \"{prev.text[:preview_length]}\"). Don't skip levels."
            )

    wrong_first = bool(headings) and headings[0].level != 1
    if wrong_first:
        issues.append(f"First heading is H{headings[0].level}, not H1. Start with H1.")

    for h in headings:
        if len(h.text) > max_length:
            issues.append(
                f"H{h.level} \"{h.text[:preview_length]}...\" is {len(h.text)} chars. "
                f"Keep headings under {max_length} chars."
            )

    if not headings:
        issues.append("No headings found on the page. Add headings to structure your content.")

    passed = TOTAL_CHECKS - sum([h1_count == 0, h1_count > 1, has_skip, wrong_first])

    return {
        "headingCount": len(headings),
        "headings": [h.to_dict() for h in headings],
        "hierarchy": hierarchy,
        "issues": issues,
        "outline": build_outline(headings),
        "score": f"{passed}/{TOTAL_CHECKS}",
    }


class HeadingStructureAnalyzer(SEOModule):
    """Validates the H1-H6 hierarchy of a page."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.max_heading_length = self.config.get("max_heading_length", 70)
        self.preview_length = self.config.get("preview_length", 40)

    def analyze(self, url: str) -> dict:
        page = self.fetch_page(url)
        return self.analyze_html(page.html, url)

    def analyze_html(self, html: str, url: str | None = None) -> dict:
        report = {"url": url}
        report.update(analyze_headings(extract_headings(html), self.max_heading_length, self.preview_length))
        return report
