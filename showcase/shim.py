"""Per-repository localization overrides."""

import json
from dataclasses import dataclass
from pathlib import Path

from showcase.github import Repository


@dataclass(frozen=True)
class Localized:
    """Name and description in one language."""

    name: str
    description: str


@dataclass(frozen=True)
class Shim:
    """English and Chinese display text for a repository."""

    en: Localized
    zh: Localized


def _localized(data: dict, repo: Repository) -> Localized:
    return Localized(
        name=data.get("name") or repo.name,
        description=data.get("description") or repo.description,
    )


def shim_path(repo: Repository, shim_dir: Path) -> Path:
    """Override file for a repository, named after its lowercased name."""
    return shim_dir / f"{repo.name.lower()}.json"


def resolve_shim(repo: Repository, shim_dir: Path) -> Shim:
    """Load the override for a repository, filling gaps from the record.

    Each field falls back on its own, so a file that only sets the English
    name keeps the repository's description and Chinese text.
    """
    path = shim_path(repo, shim_dir)
    data = {}
    if path.exists():
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Shim file must contain a JSON object: {path}")

    return Shim(
        en=_localized(data.get("en") or {}, repo),
        zh=_localized(data.get("zh") or {}, repo),
    )
