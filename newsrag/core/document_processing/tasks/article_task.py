"""
Article fetching task.

Downloads an article page and extracts its headline and body paragraphs.

Dependencies: httpx, beautifulsoup4
System role: Document text acquisition for the ingestion pipeline
"""

import logging

import httpx
from bs4 import BeautifulSoup

from newsrag.core.exceptions import SourceFetchError

logger = logging.getLogger(__name__)

BODY_PARAGRAPH_SELECTOR = (
    'div[itemprop="articleBody"] p, '
    ".dcr-article-body p, "
    ".article-body-commercial-selector p, "
    ".dcr-body p"
)


def extract_article_text(html: str) -> str:
    """
    Extract "<headline>\\n\\n<paragraphs>" from an article page.

    Args:
        html: Raw page HTML

    Returns:
        str: Stripped article text (may be empty)
    """
    soup = BeautifulSoup(html, "html.parser")
    heading = soup.find("h1")
    title = heading.get_text(strip=True) if heading else ""
    body = "\n\n".join(p.get_text() for p in soup.select(BODY_PARAGRAPH_SELECTOR))
    return f"{title}\n\n{body}".strip()


class ArticleFetcher:
    """Fetch article pages and return their readable text."""

    def __init__(self, http_client: httpx.Client) -> None:
        """
        Initialize fetcher.

        Args:
            http_client: Shared HTTP client; its timeout bounds each fetch
        """
        self._http = http_client

    def fetch(self, url: str) -> str | None:
        """
        Fetch an article and extract its text.

        Args:
            url: Article URL

        Returns:
            str | None: Article text, or None when the page has no content

        Raises:
            SourceFetchError: On timeout, transport, HTTP status or malformed URL failure
        """
        try:
            response = self._http.get(url)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise SourceFetchError(f"Timed out fetching article: {e}", url=url) from e
        except httpx.HTTPError as e:
            raise SourceFetchError(f"Failed to fetch article: {e}", url=url) from e
        except httpx.InvalidURL as e:
            raise SourceFetchError(f"Invalid article URL: {e}", url=url) from e

        text = extract_article_text(response.text)
        return text or None
