"""Fetches a Finn.no job ad and extracts a structured posting from it."""

from __future__ import annotations

import logging
from typing import Optional

import requests

import dom
import extractors
from models import ScrapedJobPosting

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/123.0 Safari/537.36"
)


class ScrapeError(Exception):
    """The job ad could not be fetched. Carries the URL and the underlying error."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"Failed to scrape {url}. {cause}")
        self.url = url
        self.cause = cause


def make_session(user_agent: Optional[str] = None, proxy: Optional[str] = None, verify: bool = True) -> requests.Session:
    sess = requests.Session()
    sess.headers.update({"User-Agent": user_agent or USER_AGENT})
    if proxy:
        sess.proxies.update({"http": proxy, "https": proxy})
    sess.verify = verify
    return sess


def parse_job_posting(html: str) -> ScrapedJobPosting:
    """Extract a posting from an already fetched page. Never raises on missing fields."""
    soup = dom.parse_html(html)
    title = extractors.extract_title(soup)
    return ScrapedJobPosting.from_extracted(
        title=title,
        company=extractors.extract_company(soup, title),
        location=extractors.extract_location(soup),
        description=extractors.extract_description(soup),
    )


class JobPostingExtractor:
    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None) -> None:
        self.session = session or make_session()
        self.timeout = timeout

    def fetch(self, url: str) -> str:
        logger.info("Fetching %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            response = getattr(exc, "response", None)
            if response is not None:
                logger.error("Error scraping %s: %s (status %s)", url, exc, response.status_code)
            else:
                logger.error("Error scraping %s: %s", url, exc)
            raise ScrapeError(url, exc) from exc
        return resp.text

    def extract(self, url: str) -> ScrapedJobPosting:
        posting = parse_job_posting(self.fetch(url))
        logger.info("Extracted %r at %r from %s", posting.title, posting.company, url)
        return posting


def scrape_job(url: str, session: Optional[requests.Session] = None, timeout: Optional[float] = None) -> ScrapedJobPosting:
    return JobPostingExtractor(session=session, timeout=timeout).extract(url)
