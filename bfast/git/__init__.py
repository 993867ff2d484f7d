"""Git repository introspection."""

from .remotes import (
    AmbiguousRepoError,
    GitError,
    NoGithubRemoteError,
    NotARepositoryError,
    RemoteResolver,
    find_repo_root,
)

__all__ = [
    "AmbiguousRepoError",
    "GitError",
    "NoGithubRemoteError",
    "NotARepositoryError",
    "RemoteResolver",
    "find_repo_root",
]
