"""Base scraper module for netkeiba data collection."""

import time

import requests
from bs4 import BeautifulSoup

from shutuba_watch.utils.text import decode_page


class BaseScraper:
    """Base class for web scrapers.

    Provides common functionality for HTTP requests and HTML parsing.
    Each URL is requested once; failed requests are not retried.

    Attributes:
        DEFAULT_USER_AGENT: Default User-Agent string for HTTP requests.
        delay: Delay in seconds between consecutive requests.
        timeout: Timeout in seconds for a single request.
        _global_last_request_time: Class-level timestamp shared across all instances.

    Example:
        >>> class MyScraper(BaseScraper):
        ...     def parse(self, soup: BeautifulSoup) -> dict:
        ...         return {"title": soup.find("title").text}
        >>> scraper = MyScraper(delay=1.0)
        >>> content = scraper.fetch("https://example.com")
        >>> soup = scraper.get_soup(content)
        >>> result = scraper.parse(soup)
    """

    DEFAULT_USER_AGENT = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )

    # グローバルレートリミッタ: 全インスタンス間で共有
    _global_last_request_time: float | None = None

    def __init__(self, delay: float = 0.0, timeout: float = 10.0) -> None:
        """Initialize BaseScraper.

        Args:
            delay: Delay in seconds between consecutive HTTP requests.
                   Default is 0 (no delay).
            timeout: Timeout in seconds for a single request.
        """
        self.delay = delay
        self.timeout = timeout
        self.session = requests.Session()

    def fetch(self, url: str) -> bytes:
        """Fetch the raw page content from the specified URL.

        The body is returned undecoded; netkeiba pages are EUC-JP and
        fields are decoded one by one after parsing.

        Args:
            url: The URL to fetch.

        Returns:
            The response body as bytes.

        Raises:
            requests.RequestException: If the HTTP request fails.
        """
        self._apply_delay()

        headers = {
            "User-Agent": self.DEFAULT_USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "ja,en-US;q=0.9,en;q=0.8",
            "Accept-Encoding": "gzip, deflate",
            "Referer": "https://race.netkeiba.com/",
            "Connection": "keep-alive",
        }
        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            return response.content
        finally:
            # 失敗時もグローバルタイマーを更新
            BaseScraper._global_last_request_time = time.time()

    def _apply_delay(self) -> None:
        """Apply delay if needed based on global last request time.

        Uses class-level _global_last_request_time to enforce rate limiting
        across all BaseScraper instances.
        """
        if self.delay <= 0 or BaseScraper._global_last_request_time is None:
            return

        elapsed = time.time() - BaseScraper._global_last_request_time
        if elapsed < self.delay:
            time.sleep(self.delay - elapsed)

    def get_soup(self, content: bytes) -> BeautifulSoup:
        """Parse raw page content into a BeautifulSoup object.

        Bytes are mapped one-to-one onto characters so that each field can
        be decoded independently.

        Args:
            content: The raw page content.

        Returns:
            A BeautifulSoup object representing the parsed HTML.
        """
        return BeautifulSoup(decode_page(content), "lxml")

    def parse(self, soup: BeautifulSoup):
        """Parse the BeautifulSoup object and extract data.

        This method must be implemented by subclasses.

        Args:
            soup: The BeautifulSoup object to parse.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError
