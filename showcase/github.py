"""GitHub API client and repository records."""

from dataclasses import dataclass
from datetime import datetime

import httpx
from dateutil.parser import isoparse


def _text(data: dict, key: str) -> str:
    """String field of an API item, "" when null or missing."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"Expected a string for {key!r}, got {type(value).__name__}")
    return value


def _parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 API timestamp, or None when absent."""
    if not value:
        return None
    if not isinstance(value, str):
        raise TypeError(f"Expected an ISO 8601 string, got {type(value).__name__}")
    return isoparse(value)


def _format_timestamp(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class License:
    """License descriptor attached to a repository."""

    key: str
    name: str
    url: str


@dataclass(frozen=True)
class Repository:
    """A GitHub repository as listed for a user."""

    name: str
    full_name: str
    description: str
    url: str
    homepage: str = ""
    private: bool = False
    fork: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    pushed_at: datetime | None = None
    license: License | None = None

    @classmethod
    def from_api(cls, data: dict) -> "Repository":
        """Create Repository from GitHub API response."""
        license_data = data.get("license")
        repo_license = None
        if license_data:
            if not isinstance(license_data, dict):
                raise TypeError(f"Expected an object for 'license', got {type(license_data).__name__}")
            repo_license = License(
                key=_text(license_data, "key"),
                name=_text(license_data, "name"),
                url=_text(license_data, "url"),
            )

        return cls(
            name=_text(data, "name"),
            full_name=_text(data, "full_name"),
            description=_text(data, "description"),
            url=_text(data, "html_url"),
            homepage=_text(data, "homepage"),
            private=bool(data.get("private", False)),
            fork=bool(data.get("fork", False)),
            created_at=_parse_timestamp(data.get("created_at")),
            updated_at=_parse_timestamp(data.get("updated_at")),
            pushed_at=_parse_timestamp(data.get("pushed_at")),
            license=repo_license,
        )

    def to_dict(self) -> dict:
        """Serialize back to the API field names."""
        return {
            "name": self.name,
            "full_name": self.full_name,
            "description": self.description,
            "html_url": self.url,
            "homepage": self.homepage,
            "private": self.private,
            "fork": self.fork,
            "created_at": _format_timestamp(self.created_at),
            "updated_at": _format_timestamp(self.updated_at),
            "pushed_at": _format_timestamp(self.pushed_at),
            "license": (
                {"key": self.license.key, "name": self.license.name, "url": self.license.url}
                if self.license
                else None
            ),
        }


class GitHubClient:
    """Synchronous client for the repository listing endpoint."""

    BASE_URL = "https://api.github.com"

    def __init__(self, token: str, user: str, transport: httpx.BaseTransport | None = None):
        """Initialize with GitHub token and the account to list."""
        self.user = user
        self._client = httpx.Client(
            base_url=self.BASE_URL,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            transport=transport,
            timeout=30.0,
        )

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def fetch_page(self, page: int, per_page: int = 100) -> bytes:
        """Fetch one page of the user's repositories as raw JSON bytes.

        Args:
            page: 1-based page number
            per_page: Page size, the API caps it at 100

        Raises:
            httpx.HTTPError: On transport failure or a non-2xx status
        """
        response = self._client.get(
            f"/users/{self.user}/repos",
            params={"per_page": per_page, "page": page},
        )
        response.raise_for_status()
        return response.content

    def close(self):
        """Close the HTTP client."""
        self._client.close()
