"""GitHub repository references in ``owner/repo`` form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote_plus, urlparse

_SLUG_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")
_PART_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")

GITHUB_HOST = "github.com"


class InvalidRepoError(ValueError):
    """Raised when a repository reference cannot be parsed."""

    def __init__(self, message: str = "invalid GitHub repository reference") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Slug:
    """A GitHub repository identified by owner and name."""

    owner: str
    repo: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def repo_url(self) -> str:
        return f"https://{GITHUB_HOST}/{self.owner}/{self.repo}"

    @property
    def encoded(self) -> str:
        """The slug escaped for use as a query parameter value."""
        return quote_plus(str(self))


def parse_slug(text: str) -> Slug:
    """Build a slug from ``owner/repo``, an HTTPS/SSH URL, or an SCP-style remote."""
    trimmed = text.strip()
    if not trimmed:
        raise InvalidRepoError()

    trimmed = trimmed.removesuffix("/")

    if _SLUG_PATTERN.match(trimmed):
        owner, repo = trimmed.split("/", 1)
        return _new_slug(owner, repo)

    slug = _from_url(trimmed) or _from_scp(trimmed)
    if slug is None:
        raise InvalidRepoError()
    return slug


def _new_slug(owner: str, repo: str) -> Slug:
    owner = owner.strip()
    repo = repo.strip().removesuffix(".git")
    if not owner or not repo:
        raise InvalidRepoError()
    if not _PART_PATTERN.match(owner) or not _PART_PATTERN.match(repo):
        raise InvalidRepoError()
    return Slug(owner=owner, repo=repo)


def _from_segments(path: str) -> Optional[Slug]:
    path = path.strip("/")
    if not path:
        return None
    segments = path.split("/")
    if len(segments) < 2:
        return None
    try:
        return _new_slug(segments[0], segments[1])
    except InvalidRepoError:
        return None


def _from_url(raw: str) -> Optional[Slug]:
    parsed = urlparse(raw)
    if not parsed.netloc:
        return None
    if (parsed.hostname or "").lower() != GITHUB_HOST:
        return None
    return _from_segments(parsed.path)


def _from_scp(raw: str) -> Optional[Slug]:
    if ":" not in raw:
        return None
    host, path = raw.split(":", 1)
    if GITHUB_HOST not in host:
        return None
    return _from_segments(path)


__all__ = ["GITHUB_HOST", "InvalidRepoError", "Slug", "parse_slug"]
