"""Repository root discovery and GitHub slug inference from git remotes."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional

from ..logging import get_logger
from ..slug import InvalidRepoError, Slug, parse_slug


class GitError(RuntimeError):
    """Base class for repository introspection failures."""


class NotARepositoryError(GitError):
    """Raised when no enclosing git repository exists."""

    def __init__(self) -> None:
        super().__init__("not inside a git repository")


class NoGithubRemoteError(GitError):
    """Raised when no remote points at GitHub."""

    def __init__(self) -> None:
        super().__init__("could not infer GitHub repo. Use: bfast --repo owner/repo")


class AmbiguousRepoError(GitError):
    """Raised when several distinct GitHub remotes exist and none is origin."""

    def __init__(self) -> None:
        super().__init__("multiple GitHub remotes detected. Use: bfast --repo owner/repo")


def find_repo_root(start: Path) -> Path:
    """Walk up from ``start`` until a directory containing ``.git`` is found."""
    current = start.expanduser().resolve()
    for directory in (current, *current.parents):
        if (directory / ".git").exists():
            return directory
    raise NotARepositoryError()


class RemoteResolver:
    """Infers the GitHub slug of a repository from ``git remote -v``."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("git")

    def detect_slug(self, root: Path) -> Slug:
        try:
            output = self._runner(["git", "remote", "-v"], cwd=root)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise GitError(f"failed to read git remotes: {exc}") from exc
        return self.parse_remotes(output)

    def parse_remotes(self, output: str) -> Slug:
        """Pick a slug from ``git remote -v`` output, preferring ``origin``."""
        candidates: Dict[str, Slug] = {}
        origin: Optional[Slug] = None

        for line in output.strip().splitlines():
            fields = line.split()
            if len(fields) < 2:
                continue
            name, url = fields[0], fields[1]
            try:
                slug = parse_slug(url)
            except InvalidRepoError:
                self.logger.debug("Ignoring non-GitHub remote %s (%s)", name, url)
                continue

            candidates.setdefault(str(slug), slug)
            if name == "origin" and origin is None:
                origin = slug

        if origin is not None:
            return origin
        if not candidates:
            raise NoGithubRemoteError()
        if len(candidates) > 1:
            raise AmbiguousRepoError()
        return next(iter(candidates.values()))

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=True,
        )
        return completed.stdout


__all__ = [
    "AmbiguousRepoError",
    "GitError",
    "NoGithubRemoteError",
    "NotARepositoryError",
    "RemoteResolver",
    "find_repo_root",
]
