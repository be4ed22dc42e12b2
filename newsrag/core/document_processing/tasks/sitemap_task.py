"""
Sitemap source acquisition task.

Fetches XML sitemaps and extracts article URLs from their <loc> entries,
keeping only URLs on the expected domain and dropping nested sitemaps.

Dependencies: httpx, beautifulsoup4 (lxml XML parser)
System role: First stage of the ingestion pipeline (document locators)
"""

import logging

import httpx
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


def filter_article_urls(urls: list[str], url_prefix: str) -> list[str]:
    """
    Keep article URLs on the expected domain, excluding nested feed files.

    Args:
        urls: Raw <loc> values
        url_prefix: Required URL prefix

    Returns:
        list[str]: Matching URLs in sitemap order
    """
    return [url for url in urls if url.startswith(url_prefix) and ".xml" not in url]


class SitemapSource:
    """Read article locators from XML sitemaps."""

    def __init__(
        self,
        url_prefix: str,
        http_client: httpx.Client,
    ) -> None:
        """
        Initialize sitemap source.

        Args:
            url_prefix: Only URLs starting with this prefix are returned
            http_client: Shared HTTP client (owns timeouts and headers)
        """
        self.url_prefix = url_prefix
        self._http = http_client

    def fetch_urls(self, sitemap_url: str) -> list[str]:
        """
        Fetch a sitemap and return its article URLs.

        A failed fetch is logged and yields an empty list so the run can
        continue with the next sitemap.

        Args:
            sitemap_url: Sitemap location

        Returns:
            list[str]: Filtered article URLs
        """
        try:
            response = self._http.get(sitemap_url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(
                f"{__name__}:fetch_urls - Failed to fetch sitemap: {type(e).__name__}: {e}",
                extra={"sitemap_url": sitemap_url},
            )
            return []

        soup = BeautifulSoup(response.content, "xml")
        locations = [loc.get_text(strip=True) for loc in soup.find_all("loc")]
        urls = filter_article_urls(locations, self.url_prefix)

        logger.info(
            f"{__name__}:fetch_urls - Found {len(urls)} article URLs in sitemap",
            extra={"sitemap_url": sitemap_url, "loc_count": len(locations)},
        )
        return urls
