"""HTML rendering of the project list."""

import logging
from datetime import datetime
from html import escape
from pathlib import Path

from showcase.github import Repository
from showcase.shim import Shim, resolve_shim

logger = logging.getLogger(__name__)

PLACEHOLDER = "<!-- project list here -->"
EMPTY_READ_MORE = '<a href="" target="_blank">Read More</a>'
FALLBACK_IMAGE = "placeholder.jpg"


def format_zh_date(value: datetime | None) -> str:
    """Format as 2024年1月2日."""
    if value is None:
        return ""
    return f"{value.year}年{value.month}月{value.day}日"


def format_slash_date(value: datetime | None) -> str:
    """Format as 2024/01/02."""
    if value is None:
        return ""
    return value.strftime("%Y/%m/%d")


def sort_by_pushed(projects: list[Repository]) -> list[Repository]:
    """Most recently pushed first, never-pushed repositories last."""
    pushed = [repo for repo in projects if repo.pushed_at is not None]
    never_pushed = [repo for repo in projects if repo.pushed_at is None]
    return sorted(pushed, key=lambda r: r.pushed_at, reverse=True) + never_pushed


def _bilingual(en: str, zh: str) -> str:
    return f' data-en="{escape(en)}" data-zh="{escape(zh)}"'


def render_project(repo: Repository, shim: Shim, date_style: str = "zh") -> str:
    """Render one <figure> fragment for a repository."""
    pushed_zh = format_zh_date(repo.pushed_at)
    created_zh = format_zh_date(repo.created_at)

    if date_style == "bilingual":
        update_attrs = _bilingual(f"Updated: {format_slash_date(repo.pushed_at)}", f"更新:{pushed_zh}")
        create_attrs = _bilingual(f"Created: {format_slash_date(repo.created_at)}", f"创建:{created_zh}")
        title_attrs = _bilingual(shim.en.name, shim.zh.name)
        desc_attrs = _bilingual(shim.en.description, shim.zh.description)
    else:
        update_attrs = create_attrs = title_attrs = desc_attrs = ""

    read_more = ""
    if repo.homepage:
        read_more = f'\n\t\t\t\t<a href="{escape(repo.homepage)}" target="_blank">Read More</a>'

    image = escape(f"projects/{repo.full_name.lower()}")
    return f"""
\t\t<figure class="project">
\t\t\t<div class="preview">
\t\t\t\t<img src="{image}" alt="" onerror="this.src='{FALLBACK_IMAGE}'" />
\t\t\t</div>
\t\t\t<div class="date">
\t\t\t\t<span class="update"{update_attrs}>更新:{pushed_zh}</span>
\t\t\t\t<span class="create"{create_attrs}>创建:{created_zh}</span>
\t\t\t</div>
\t\t\t<figcaption>
\t\t\t\t<h2{title_attrs}>{escape(shim.zh.name)}</h2>
\t\t\t\t<p{desc_attrs}>{escape(shim.zh.description)}</p>
\t\t\t\t<a href="{escape(repo.url)}" target="_blank" rel="noreferrer nofollow">GitHub</a>{read_more}
\t\t\t</figcaption>
\t\t</figure>"""


def render_page(
    template: str,
    projects: list[Repository],
    shim_dir: Path,
    date_style: str = "zh",
) -> str:
    """Splice the rendered project list into the template.

    Raises:
        ValueError: If the template has no project list placeholder
    """
    if PLACEHOLDER not in template:
        raise ValueError(f"Template is missing the placeholder {PLACEHOLDER!r}")

    fragments = "".join(
        render_project(repo, resolve_shim(repo, shim_dir), date_style)
        for repo in sort_by_pushed(projects)
    )
    page = template.replace(PLACEHOLDER, fragments, 1)
    return page.replace(EMPTY_READ_MORE, "")


def write_page(page: str, output_path: Path) -> None:
    """Write the rendered page, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(page, encoding="utf-8")
    logger.info(f"Wrote {output_path}")
