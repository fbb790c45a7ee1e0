"""Configuration loading and validation."""

import json
from dataclasses import dataclass
from pathlib import Path

DATE_STYLES = ("zh", "bilingual")


@dataclass
class Config:
    """Application configuration."""

    github_user: str = "soulteary"
    github_token: str = ""
    max_pages: int = 4
    per_page: int = 100
    cache_dir: Path = Path("cache")
    template_path: Path = Path("template/index.html")
    output_path: Path = Path("public/index.html")
    merged_json_path: Path | None = None
    ignore_path: Path = Path("ignore.json")
    forks_path: Path = Path("forks.json")
    shim_dir: Path = Path("config")
    cache_hours: int = 24
    date_style: str = "zh"


def _resolve(base_dir: Path, value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else base_dir / path


def default_config(base_dir: Path | None = None) -> Config:
    """Built-in defaults with paths resolved against base_dir."""
    return _build(base_dir or Path.cwd(), {})


def load_config(config_path: Path) -> Config:
    """Load configuration from JSON file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        data = json.load(f)

    return _build(config_path.resolve().parent, data)


def _build(base_dir: Path, data: dict) -> Config:
    defaults = Config()
    github = data.get("github", {})
    paths = data.get("paths", {})
    settings = data.get("settings", {})

    date_style = settings.get("date_style", defaults.date_style)
    if date_style not in DATE_STYLES:
        raise ValueError(f"Unknown date_style: {date_style!r} (expected one of {', '.join(DATE_STYLES)})")

    merged_json = paths.get("merged_json", "")

    return Config(
        github_user=github.get("user", defaults.github_user),
        github_token=github.get("token", defaults.github_token),
        max_pages=github.get("max_pages", defaults.max_pages),
        per_page=github.get("per_page", defaults.per_page),
        cache_dir=_resolve(base_dir, paths.get("cache_dir", "cache")),
        template_path=_resolve(base_dir, paths.get("template", "template/index.html")),
        output_path=_resolve(base_dir, paths.get("output", "public/index.html")),
        merged_json_path=_resolve(base_dir, merged_json) if merged_json else None,
        ignore_path=_resolve(base_dir, paths.get("ignore", "ignore.json")),
        forks_path=_resolve(base_dir, paths.get("forks", "forks.json")),
        shim_dir=_resolve(base_dir, paths.get("shim_dir", "config")),
        cache_hours=settings.get("cache_hours", defaults.cache_hours),
        date_style=date_style,
    )
