"""README discovery inside a repository."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

DEFAULT_CANDIDATES: Sequence[str] = (
    "README.md",
    "Readme.md",
    "README.MD",
    "README.markdown",
    "README.Markdown",
    "README",
    "readme.md",
    "readme",
)


class ReadmeNotFoundError(FileNotFoundError):
    """Raised when no README-like file can be located."""


def find_default(root: Path, candidates: Sequence[str] = DEFAULT_CANDIDATES) -> Path:
    """Return the first README-like file inside ``root``."""
    for name in candidates:
        path = root / name
        if path.is_file():
            return path
    raise ReadmeNotFoundError(f"README not found in {root}")


def resolve_readme_path(root: Optional[Path], cwd: Path, override: Optional[str]) -> Path:
    """Resolve the README to update from an optional user override.

    Relative overrides are anchored at the repository root, or at ``cwd`` when
    the run happens outside a repository.
    """
    if override:
        candidate = Path(override).expanduser()
        if candidate.is_absolute():
            return candidate
        return (root or cwd) / candidate

    if root is None:
        raise ReadmeNotFoundError("cannot locate README outside a git repo; pass --readme")

    return find_default(root)


__all__ = ["DEFAULT_CANDIDATES", "ReadmeNotFoundError", "find_default", "resolve_readme_path"]
