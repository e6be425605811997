"""SEO toolkit: meta tags, robots.txt, sitemaps, keyword density,
readability and heading structure analysis."""

from .tools import TOOLS, call_tool, list_tools, render

__version__ = "1.0.0"
