"""On-Page analysis package.

Provides `MetaTagAnalyzer` and `HeadingStructureAnalyzer`, both fetching a
page and auditing the markup pulled out by `seo_toolkit.markup`.
"""

from .meta_tags import MetaTagAnalyzer
from .headings import HeadingStructureAnalyzer, analyze_headings
