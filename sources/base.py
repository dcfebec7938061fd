import logging
from abc import ABC, abstractmethod

import requests

from models import CollectResult, Extraction

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class BaseSource(ABC):
    """Abstract base class for a single job-listing page."""

    name: str = "base"
    url: str = ""

    def __init__(self, url: str | None = None, timeout: float = 30):
        if url:
            self.url = url
        self.timeout = timeout

    def fetch(self) -> str:
        """GET the listing page and return its body text."""
        resp = requests.get(self.url, headers={"User-Agent": USER_AGENT}, timeout=self.timeout)
        resp.raise_for_status()
        return resp.text

    @abstractmethod
    def parse(self, html: str) -> Extraction:
        """Turn page HTML into job records."""
        ...

    def safe_collect(self) -> CollectResult:
        """Fetch and parse, reporting network failures as an empty result instead of raising."""
        try:
            html = self.fetch()
        except requests.RequestException as e:
            logger.error(f"[{self.name}] Error fetching jobs: {e}")
            return CollectResult(error=str(e))

        extraction = self.parse(html)
        logger.info(
            f"[{self.name}] Collected {len(extraction.jobs)} listings "
            f"from {extraction.containers} containers"
        )
        return CollectResult(jobs=extraction.jobs, containers=extraction.containers)
