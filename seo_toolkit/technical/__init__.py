"""Technical SEO analysis package.

Provides `RobotsTxtAnalyzer` and `SitemapAnalyzer` for crawl-control files.
"""

from .robots import RobotsTxtAnalyzer
from .sitemap import SitemapAnalyzer
