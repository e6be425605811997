"""Named, schema-checked entry points for every analyzer.

`call_tool` is the single boundary between callers (HTTP API, CLI) and the
analyzers: it validates arguments, runs the analyzer and turns any failure
into an ``{"error": message}`` result instead of raising.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import urlparse

from .content import analyze_keywords, score_readability
from .on_page import MetaTagAnalyzer, HeadingStructureAnalyzer
from .technical import RobotsTxtAnalyzer, SitemapAnalyzer


@dataclass(frozen=True)
class ToolParam:
    name: str
    description: str
    kind: str = "string"  # "string" or "url"
    required: bool = True


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    handler: Callable[[Dict[str, Any], Dict[str, Any]], dict]
    params: List[ToolParam] = field(default_factory=list)

    def schema(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [
                {"name": p.name, "type": p.kind, "required": p.required, "description": p.description}
                for p in self.params
            ],
        }


def module_config(config: Optional[dict], section: str) -> dict:
    """Config section for one analyzer, with the Global section passed down."""
    config = config or {}
    cfg = dict(config.get(section, {}))
    cfg["Global"] = config.get("Global", {})
    return cfg


def is_valid_url(url: str) -> bool:
    try:
        result = urlparse(url)
        return result.scheme in ("http", "https") and bool(result.netloc)
    except ValueError:
        return False


def _meta_tags(args, config):
    return MetaTagAnalyzer(config=module_config(config, "MetaTagAnalyzer")).analyze(args["url"])


def _robots_txt(args, config):
    return RobotsTxtAnalyzer(config=module_config(config, "RobotsTxtAnalyzer")).analyze(args["url"])


def _sitemap_check(args, config):
    return SitemapAnalyzer(config=module_config(config, "SitemapAnalyzer")).analyze(args["url"])


def _keyword_density(args, config):
    cfg = (config or {}).get("KeywordDensity", {})
    return analyze_keywords(
        args["text"],
        args.get("target_keyword"),
        top_words=cfg.get("top_words", 15),
        top_ngrams=cfg.get("top_ngrams", 10),
    )


def _readability(args, config):
    return score_readability(args["text"])


def _heading_structure(args, config):
    return HeadingStructureAnalyzer(config=module_config(config, "HeadingStructureAnalyzer")).analyze(args["url"])


_URL_PARAM = ToolParam("url", "The full URL to analyze (e.g. https://example.com/page)", kind="url")

TOOLS: Dict[str, Tool] = {t.name: t for t in [
    Tool(
        "meta_tags",
        "Fetch a URL and analyze its SEO meta tags. Returns title (with length check), meta description, "
        "Open Graph tags, Twitter Card tags, canonical URL, and actionable issues.",
        _meta_tags,
        [_URL_PARAM],
    ),
    Tool(
        "robots_txt",
        "Fetch and parse a site's robots.txt. Returns user-agent rules, allowed/disallowed paths, "
        "sitemap directives, crawl-delay, and issues.",
        _robots_txt,
        [ToolParam("url", "Domain or URL (e.g. https://example.com). /robots.txt at the root is checked.")],
    ),
    Tool(
        "sitemap_check",
        "Validate a sitemap.xml file. Returns URL count, format (XML/index/text), sample URLs, last modified "
        "dates, and issues like duplicates or missing lastmod.",
        _sitemap_check,
        [ToolParam("url", "Sitemap URL or domain (e.g. https://example.com or https://example.com/sitemap.xml)")],
    ),
    Tool(
        "keyword_density",
        "Analyze text for keyword frequency and density. Returns top single words, bigrams, and trigrams "
        "with percentages, and optionally the density of a target keyword.",
        _keyword_density,
        [
            ToolParam("text", "The text content to analyze"),
            ToolParam("target_keyword", "A specific keyword or phrase to check density for", required=False),
        ],
    ),
    Tool(
        "readability",
        "Score text readability using Flesch-Kincaid metrics. Returns Flesch Reading Ease, grade level, "
        "word/sentence/syllable counts, reading time, and actionable tips.",
        _readability,
        [ToolParam("text", "The text content to analyze (at least 10 words)")],
    ),
    Tool(
        "heading_structure",
        "Analyze a page's heading hierarchy (H1-H6). Returns the heading outline, counts per level, and "
        "issues like missing H1, multiple H1s, or skipped levels.",
        _heading_structure,
        [_URL_PARAM],
    ),
]}


def list_tools() -> List[dict]:
    return [tool.schema() for tool in TOOLS.values()]


def validate_arguments(tool: Tool, arguments: Dict[str, Any]) -> Optional[str]:
    """Returns an error message for the first invalid argument, or None."""
    known = {p.name for p in tool.params}
    unknown = sorted(set(arguments) - known)
    if unknown:
        return f"Unknown parameter(s) for {tool.name}: {', '.join(unknown)}"
    for param in tool.params:
        value = arguments.get(param.name)
        if value is None:
            if param.required:
                return f"Missing required parameter: {param.name}"
            continue
        if not isinstance(value, str):
            return f"Parameter {param.name} must be a string"
        if param.kind == "url" and not is_valid_url(value):
            return f"Invalid URL: {value}"
    return None


def call_tool(name: str, arguments: Optional[Dict[str, Any]] = None, config: Optional[dict] = None) -> dict:
    """Runs a tool by name. Always returns a report dict or {"error": message}."""
    tool = TOOLS.get(name)
    if tool is None:
        return {"error": f"Unknown tool: {name}"}
    arguments = {k: v for k, v in (arguments or {}).items() if v is not None}
    problem = validate_arguments(tool, arguments)
    if problem:
        return {"error": problem}
    try:
        return tool.handler(arguments, config or {})
    except Exception as e:
        debug = (config or {}).get("Global", {}).get("debug")
        if debug:
            print(f"Error running tool {name}: {e}", file=sys.stderr)
        return {"error": str(e)}


def render(result: dict) -> str:
    return json.dumps(result, indent=2, ensure_ascii=False)
