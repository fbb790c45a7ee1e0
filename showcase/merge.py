"""Merge cached pages into the list of public projects."""

import json
import logging
from pathlib import Path

from showcase.github import Repository

logger = logging.getLogger(__name__)


def load_name_list(list_path: Path) -> set[str]:
    """Load a flat JSON array of repository names."""
    if not list_path.exists():
        raise FileNotFoundError(f"Name list not found: {list_path}")

    with open(list_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list) or not all(isinstance(name, str) for name in data):
        raise ValueError(f"Name list must be a JSON array of strings: {list_path}")
    return set(data)


def load_page(page_path: Path) -> list[Repository]:
    """Load repositories from one cache file; unparseable pages yield nothing."""
    try:
        data = json.loads(page_path.read_bytes())
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug(f"Ignoring malformed cache file {page_path}")
        return []

    if not isinstance(data, list):
        logger.debug(f"Ignoring cache file without a repository array: {page_path}")
        return []

    try:
        return [Repository.from_api(item) for item in data if isinstance(item, dict)]
    except (ValueError, TypeError, AttributeError) as e:
        logger.debug(f"Ignoring cache file with malformed records {page_path}: {e}")
        return []


def is_public_entry(repo: Repository, ignore: set[str], forks: set[str]) -> bool:
    """Whether a repository belongs on the public page.

    Private repositories never do. Forks only when allow-listed, and an
    ignored name is dropped regardless of the other flags.
    """
    if repo.private:
        return False
    if repo.fork and repo.name not in forks:
        return False
    return repo.name not in ignore


def _page_order(page_path: Path) -> tuple:
    """Numbered pages first in page order, then any other files by name."""
    if page_path.stem.isdigit():
        return (0, int(page_path.stem), page_path.name)
    return (1, 0, page_path.name)


def merge_projects(cache_dir: Path, ignore: set[str], forks: set[str]) -> list[Repository]:
    """Collect public repositories from every file in the cache directory."""
    if not cache_dir.is_dir():
        raise FileNotFoundError(f"Cache directory not found: {cache_dir}")

    projects: list[Repository] = []
    for page_path in sorted(cache_dir.iterdir(), key=_page_order):
        if not page_path.is_file():
            continue
        projects.extend(
            repo for repo in load_page(page_path) if is_public_entry(repo, ignore, forks)
        )
    return projects


def write_merged(projects: list[Repository], output_path: Path) -> None:
    """Write merged projects as a JSON array in API field names."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps([repo.to_dict() for repo in projects], indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
