"""
Pytest Configuration and Shared Fixtures

Sample markup/text and a factory for fake HTTP responses so analyzers run
without network access.
"""

import pytest
from unittest.mock import MagicMock

import requests


# ============================================================================
# HTTP Fakes
# ============================================================================

def make_response(text="", status_code=200, url="https://example.com/", history=None, headers=None):
    resp = MagicMock(spec=requests.Response)
    resp.text = text
    resp.status_code = status_code
    resp.url = url
    resp.history = history or []
    resp.headers = headers or {"Content-Type": "text/html"}
    return resp


@pytest.fixture
def fake_response():
    """Factory building a requests.Response stand-in."""
    return make_response


@pytest.fixture
def patch_session(monkeypatch):
    """Replaces requests.Session.request with a mock answering `response`."""

    def _patch(response=None, side_effect=None):
        mock = MagicMock(return_value=response, side_effect=side_effect)
        monkeypatch.setattr(requests.Session, "request", mock)
        return mock

    return _patch


# ============================================================================
# Sample Content
# ============================================================================

@pytest.fixture
def full_page_html():
    """A page passing every meta tag check."""
    return """<!DOCTYPE html>
<html>
<head>
  <title>Project Management Software for Small Teams | Acme</title>
  <meta charset="utf-8">
  <meta name="description" content="Plan projects, track tasks and share files in one place. Acme helps small teams ship work on time with simple boards and reports.">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <meta property="og:title" content="Acme Project Management">
  <meta property="og:description" content="Plan and track work.">
  <meta property="og:image" content="https://example.com/og.png" />
  <meta property="og:url" content="https://example.com/">
  <meta name="twitter:card" content="summary_large_image">
  <link href="https://example.com/" rel="canonical">
</head>
<body>
  <h1>Project management <em>made simple</em></h1>
  <h2>Boards</h2>
  <h3>Custom columns</h3>
  <h2>Reports &amp; dashboards</h2>
  <a href="/pricing">Pricing</a>
  <a href="https://other.example.org/">Partner</a>
</body>
</html>"""


@pytest.fixture
def long_text():
    """Several paragraphs of plain English prose."""
    return (
        "Search engines read the words on a page to learn what it is about. "
        "Clear headings help them and help people too.\n\n"
        "Short sentences are easy to scan. Simple words make a page feel friendly. "
        "Readers stay longer when the text is plain.\n\n"
        "Write for people first and search engines second."
    )
