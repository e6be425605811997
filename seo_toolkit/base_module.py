# seo_toolkit/base_module.py
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
import sys
import requests

DEFAULT_USER_AGENT = "seo-toolkit/1.0 (SEO analysis tool)"
DEFAULT_TIMEOUT = 15


class FetchError(Exception):
    """Raised when a page cannot be fetched or answers with a non-2xx status."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


@dataclass
class PageResponse:
    html: str
    status: int
    headers: dict = field(default_factory=dict)
    redirected: bool = False
    final_url: str = ""
    response_time_ms: int = 0


class SEOModule(ABC):
    """
    Abstract base class for all URL-driven SEO analysis modules.
    Each module implements its own 'analyze' method.
    """

    def __init__(self, config=None):
        self.module_name = self.__class__.__name__
        self.config = config if config else {}
        self.global_config = self.config.get("Global", {})
        self.request_timeout = self.global_config.get("request_timeout", DEFAULT_TIMEOUT)

        self.headers = {
            'User-Agent': self.global_config.get("user_agent", DEFAULT_USER_AGENT),
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        }
        self.session = requests.Session()
        self.session.headers.update(self.headers)

    @abstractmethod
    def analyze(self, url: str) -> dict:
        """
        Analyzes the given URL for the SEO attributes this module covers.

        Args:
            url (str): The URL to analyze.

        Returns:
            dict: The report for this module, or {"error": message}.
        """
        pass

    def request(self, method: str, url: str, **kwargs):
        """
        Thin wrapper around session.request adding the default timeout and
        returning (response, elapsed_seconds). Transport failures raise FetchError;
        the status code is left for the caller to judge.
        """
        timeout = kwargs.pop("timeout", self.request_timeout)
        kwargs.setdefault("allow_redirects", True)
        start = datetime.now()
        try:
            resp = self.session.request(method=method, url=url, timeout=timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            self._debug(f"Request timed out for {url}: {e}")
            raise FetchError(url, f"Request to {url} timed out after {timeout} seconds") from e
        except requests.exceptions.RequestException as e:
            self._debug(f"Request error for {url}: {e}")
            raise FetchError(url, f"Failed to fetch {url}: {e}") from e
        elapsed = (datetime.now() - start).total_seconds()
        return resp, elapsed

    def get(self, url: str, **kwargs):
        return self.request("GET", url, **kwargs)

    def fetch_page(self, url: str) -> PageResponse:
        """
        Fetches a page following redirects and returns its markup with transfer details.

        Raises:
            FetchError: on network failure, timeout, or a non-2xx status.
        """
        resp, elapsed = self.get(url)
        if not 200 <= resp.status_code < 300:
            self._debug(f"{url} answered HTTP {resp.status_code}")
            raise FetchError(url, f"HTTP {resp.status_code} returned by {url}", status_code=resp.status_code)
        return PageResponse(
            html=resp.text,
            status=resp.status_code,
            headers=dict(resp.headers),
            redirected=bool(resp.history),
            final_url=resp.url or url,
            response_time_ms=int(elapsed * 1000),
        )

    def _debug(self, message: str) -> None:
        if self.global_config.get("debug"):
            print(f"[{self.module_name}] {message}", file=sys.stderr)
