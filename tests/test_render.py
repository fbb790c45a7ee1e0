"""Tests for page rendering."""

import json
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

from showcase.github import Repository
from showcase.render import (
    format_slash_date,
    format_zh_date,
    render_page,
    render_project,
    sort_by_pushed,
    write_page,
)
from showcase.shim import resolve_shim

TEMPLATE = """<html><body>
<main><!-- project list here --></main>
<footer><a href="" target="_blank">Read More</a></footer>
</body></html>"""


def _repo(name: str, pushed: datetime | None, homepage: str = "") -> Repository:
    return Repository(
        name=name,
        full_name=f"SoulTeary/{name}",
        description=f"{name} description",
        url=f"https://github.com/soulteary/{name}",
        homepage=homepage,
        created_at=datetime(2020, 5, 6, tzinfo=timezone.utc),
        pushed_at=pushed,
    )


@pytest.fixture
def shim_dir():
    """Temporary directory for override files."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


def test_date_formats():
    """Dates render in the Chinese and slash formats."""
    value = datetime(2024, 1, 2, tzinfo=timezone.utc)

    assert format_zh_date(value) == "2024年1月2日"
    assert format_slash_date(value) == "2024/01/02"
    assert format_zh_date(None) == ""


def test_sort_by_pushed_descending():
    """Most recently pushed projects come first, never-pushed last."""
    t1 = datetime(2024, 3, 1, tzinfo=timezone.utc)
    t2 = datetime(2024, 2, 1, tzinfo=timezone.utc)
    t3 = datetime(2024, 1, 1, tzinfo=timezone.utc)
    projects = [_repo("c", t3), _repo("none", None), _repo("a", t1), _repo("b", t2)]

    assert [r.name for r in sort_by_pushed(projects)] == ["a", "b", "c", "none"]


def test_render_project_zh(shim_dir):
    """A project renders image, dates, text and links."""
    repo = _repo("Hello", datetime(2024, 1, 2, tzinfo=timezone.utc), homepage="https://hello.example.com")

    fragment = render_project(repo, resolve_shim(repo, shim_dir))

    assert "src=\"projects/soulteary/hello\"" in fragment
    assert "onerror=\"this.src='placeholder.jpg'\"" in fragment
    assert "更新:2024年1月2日" in fragment
    assert "创建:2020年5月6日" in fragment
    assert "<h2>Hello</h2>" in fragment
    assert "<p>Hello description</p>" in fragment
    assert '<a href="https://github.com/soulteary/Hello" target="_blank" rel="noreferrer nofollow">GitHub</a>' in fragment
    assert '<a href="https://hello.example.com" target="_blank">Read More</a>' in fragment
    assert "data-en" not in fragment


def test_render_project_without_homepage(shim_dir):
    """An empty homepage produces no Read More link."""
    repo = _repo("Hello", datetime(2024, 1, 2, tzinfo=timezone.utc))

    fragment = render_project(repo, resolve_shim(repo, shim_dir))

    assert "Read More" not in fragment


def test_render_project_bilingual(shim_dir):
    """Bilingual style pairs English and Chinese text in data attributes."""
    repo = _repo("Hello", datetime(2024, 1, 2, tzinfo=timezone.utc))
    (shim_dir / "hello.json").write_text(json.dumps({
        "en": {"name": "Hello World"},
        "zh": {"name": "你好", "description": "问候"},
    }, ensure_ascii=False), encoding="utf-8")

    fragment = render_project(repo, resolve_shim(repo, shim_dir), date_style="bilingual")

    assert 'data-en="Updated: 2024/01/02" data-zh="更新:2024年1月2日"' in fragment
    assert 'data-en="Created: 2020/05/06" data-zh="创建:2020年5月6日"' in fragment
    assert '<h2 data-en="Hello World" data-zh="你好">你好</h2>' in fragment
    assert '<p data-en="Hello description" data-zh="问候">问候</p>' in fragment


def test_render_project_escapes_text(shim_dir):
    """Text from the API is HTML-escaped."""
    repo = Repository(
        name="x",
        full_name="soulteary/x",
        description="<script>alert(1)</script>",
        url="https://github.com/soulteary/x",
    )

    fragment = render_project(repo, resolve_shim(repo, shim_dir))

    assert "<script>" not in fragment
    assert "&lt;script&gt;" in fragment


def test_render_page_orders_and_splices(shim_dir):
    """render_page sorts, splices at the marker and drops empty Read More anchors."""
    projects = [
        _repo("old", datetime(2022, 1, 1, tzinfo=timezone.utc), homepage="https://old.example.com"),
        _repo("new", datetime(2024, 1, 1, tzinfo=timezone.utc)),
    ]

    page = render_page(TEMPLATE, projects, shim_dir)

    assert "<!-- project list here -->" not in page
    assert '<a href="" target="_blank">Read More</a>' not in page
    assert page.index("<h2>new</h2>") < page.index("<h2>old</h2>")
    assert page.count("Read More") == 1


def test_render_page_requires_placeholder(shim_dir):
    """A template without the marker is rejected."""
    with pytest.raises(ValueError, match="placeholder"):
        render_page("<html></html>", [], shim_dir)


def test_write_page_creates_directories(shim_dir):
    """write_page creates the output directory."""
    output_path = shim_dir / "public" / "index.html"

    write_page("<html>你好</html>", output_path)

    assert output_path.read_text(encoding="utf-8") == "<html>你好</html>"
