"""On-disk page cache for the repository listing."""

import logging
from datetime import datetime, timedelta
from pathlib import Path

from showcase.github import GitHubClient

logger = logging.getLogger(__name__)


class PageCache:
    """One JSON file per API page, refetched once older than max_age_hours."""

    def __init__(self, cache_dir: Path, max_age_hours: int = 24):
        """Initialize cache and create its directory."""
        self.cache_dir = cache_dir
        self.max_age = timedelta(hours=max_age_hours)
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def page_path(self, page: int) -> Path:
        """Path of the cache file for a page."""
        return self.cache_dir / f"{page}.json"

    def is_fresh(self, page: int, now: datetime | None = None) -> bool:
        """Check if a page file exists and is younger than max_age."""
        path = self.page_path(page)
        if not path.exists():
            return False
        if now is None:
            now = datetime.now()
        modified = datetime.fromtimestamp(path.stat().st_mtime)
        return now - modified < self.max_age

    def store(self, page: int, body: bytes) -> None:
        """Overwrite the cache file for a page."""
        self.page_path(page).write_bytes(body)

    def refresh(self, client: GitHubClient, max_pages: int, per_page: int = 100) -> list[int]:
        """Refetch every stale or missing page from 1 to max_pages.

        Returns:
            Page numbers that were fetched
        """
        fetched = []
        for page in range(1, max_pages + 1):
            if self.is_fresh(page):
                logger.info(f"Page {page} is fresh, skipping")
                continue

            logger.info(f"Fetching page {page}")
            self.store(page, client.fetch_page(page, per_page=per_page))
            fetched.append(page)
        return fetched
