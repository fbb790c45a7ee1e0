"""Repo Showcase - Main entry point."""

import argparse
import logging
import os
import sys
from pathlib import Path

from showcase.cache import PageCache
from showcase.config import DATE_STYLES, Config, default_config, load_config
from showcase.github import GitHubClient
from showcase.merge import load_name_list, merge_projects, write_merged
from showcase.render import render_page, write_page

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def run_pipeline(config: Config, token: str, offline: bool = False) -> dict:
    """Refresh the cache, merge public projects and render the page.

    Returns:
        Dict with 'fetched' page count and rendered 'projects' count
    """
    cache = PageCache(config.cache_dir, max_age_hours=config.cache_hours)

    fetched: list[int] = []
    if offline:
        logger.info("Offline mode - using cached pages only")
    else:
        with GitHubClient(token=token, user=config.github_user) as github:
            fetched = cache.refresh(github, config.max_pages, per_page=config.per_page)
        logger.info(f"Fetched {len(fetched)} of {config.max_pages} pages")

    ignore = load_name_list(config.ignore_path)
    forks = load_name_list(config.forks_path)

    projects = merge_projects(config.cache_dir, ignore, forks)
    logger.info(f"Merged {len(projects)} public projects")

    if config.merged_json_path:
        write_merged(projects, config.merged_json_path)
        logger.info(f"Wrote merged projects to {config.merged_json_path}")

    template = config.template_path.read_text(encoding="utf-8")
    page = render_page(template, projects, config.shim_dir, config.date_style)
    write_page(page, config.output_path)

    return {"fetched": len(fetched), "projects": len(projects)}


def main() -> int:
    """Build the static project page."""
    parser = argparse.ArgumentParser(description="Render a GitHub account's public repositories into a static page")
    parser.add_argument("--config", type=str, default=None, help="Path to config file (defaults are used when omitted)")
    parser.add_argument("--offline", action="store_true", help="Skip fetching and render from cached pages only")
    parser.add_argument("--max-pages", type=int, default=None, help="Number of listing pages to fetch (overrides config)")
    parser.add_argument("--date-style", choices=DATE_STYLES, default=None, help="Date rendering style (overrides config)")

    args = parser.parse_args()

    try:
        if args.config:
            config = load_config(Path.cwd() / args.config)
        else:
            config = default_config()

        if args.max_pages is not None:
            config.max_pages = args.max_pages
        if args.date_style:
            config.date_style = args.date_style

        token = os.environ.get("GITHUB_TOKEN") or config.github_token
        if not token and not args.offline:
            logger.warning("GITHUB_TOKEN is not set, sending an empty bearer token")

        result = run_pipeline(config, token=token, offline=args.offline)
        logger.info(f"Done! Fetched {result['fetched']} pages, rendered {result['projects']} projects")
        return 0
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        logger.exception(f"Pipeline failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
