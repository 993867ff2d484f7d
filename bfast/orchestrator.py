"""End-to-end badge run: resolve the repo, register it, and update its README."""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional

from .api.client import AlreadyRegisteredError, Submission, SubmissionClient, SubmissionError
from .blurb import normalize_blurb, random_blurb
from .config import BfastConfig, load_config
from .git.remotes import NotARepositoryError, RemoteResolver, find_repo_root
from .logging import get_logger
from .readme.badges import BadgeManager
from .readme.locator import resolve_readme_path
from .slug import Slug, parse_slug


class ReadmeAccessError(RuntimeError):
    """Raised when the README cannot be read or written."""


@dataclass
class RunOptions:
    """User choices for a single run; ``blurb`` is ``None`` when not supplied."""

    repo: str = ""
    readme: str = ""
    blurb: Optional[str] = None
    hidden: bool = False
    dry_run: bool = False
    force_badge: bool = False


@dataclass
class RunResult:
    """Outcome of a badge run."""

    repo: str
    repo_url: str
    readme: str
    badge_image_url: str
    badge_link_url: str
    blurb: str = ""
    hidden: bool = False
    registered: bool = False
    already_registered: bool = False
    badge_inserted: bool = False
    already_badged: bool = False
    dry_run: bool = False
    badge_markdown: str = ""
    registration_error: str = ""

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "repo": self.repo,
            "repoUrl": self.repo_url,
            "readme": self.readme,
            "blurb": self.blurb,
            "hidden": self.hidden,
            "registered": self.registered,
            "alreadyRegistered": self.already_registered,
            "badgeInserted": self.badge_inserted,
            "alreadyBadged": self.already_badged,
            "dryRun": self.dry_run,
            "badge": self.badge_markdown,
            "badgeImage": self.badge_image_url,
            "badgeLink": self.badge_link_url,
        }
        if self.registration_error:
            payload["registrationError"] = self.registration_error
        return payload


ClientFactory = Callable[[Optional[str], Optional[float]], SubmissionClient]


def _default_client_factory(base_url: Optional[str], timeout: Optional[float]) -> SubmissionClient:
    return SubmissionClient(base_url, timeout=timeout)


class Orchestrator:
    """Coordinates slug resolution, registration, and README badge insertion."""

    def __init__(
        self,
        resolver: RemoteResolver | None = None,
        client_factory: ClientFactory | None = None,
        badge_manager: BadgeManager | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.resolver = resolver or RemoteResolver()
        self.client_factory = client_factory or _default_client_factory
        self.badge_manager = badge_manager or BadgeManager()
        self.rng = rng
        self.logger = get_logger("orchestrator")

    def run(self, options: RunOptions, *, cwd: Path | None = None) -> RunResult:
        """Execute a badge run relative to ``cwd`` (the process directory by default)."""
        working_dir = (cwd or Path.cwd()).resolve()
        root = self._find_root(working_dir)
        slug = self._resolve_slug(options, root)
        self.logger.debug("Resolved repository %s", slug)

        config = load_config(root or working_dir)
        readme_path = resolve_readme_path(root, working_dir, options.readme or config.readme_path)
        content = self._read_readme(readme_path)

        manager = self.badge_manager
        result = RunResult(
            repo=str(slug),
            repo_url=slug.repo_url,
            readme=str(readme_path),
            badge_image_url=manager.image_url,
            badge_link_url=manager.link_url,
            hidden=options.hidden or config.submission.hidden,
            dry_run=options.dry_run,
        )

        if manager.has_badge(content):
            self.logger.debug("%s already carries the badge", readme_path)
            result.already_badged = True
            return result

        result.blurb = self._resolve_blurb(options, config)
        result.badge_markdown = manager.build_markdown(slug.encoded)

        if options.dry_run:
            return result

        client = self.client_factory(config.api.base_url, config.api.request_timeout)
        try:
            self._register(client, slug, result)
        except SubmissionError as exc:
            if not options.force_badge:
                raise
            result.registration_error = str(exc)
            self.logger.warning(
                "Registration failed (%s). Continuing due to --force-badge.", exc
            )

        updated = manager.insert(content, result.badge_markdown)
        self._write_readme(readme_path, updated)
        result.badge_inserted = True
        self.logger.debug("Badge written to %s", readme_path)
        return result

    # ------------------------------------------------------------------
    # Helpers

    @staticmethod
    def _find_root(working_dir: Path) -> Optional[Path]:
        try:
            return find_repo_root(working_dir)
        except NotARepositoryError:
            return None

    def _resolve_slug(self, options: RunOptions, root: Optional[Path]) -> Slug:
        if options.repo:
            return parse_slug(options.repo)
        if root is None:
            raise NotARepositoryError()
        return self.resolver.detect_slug(root)

    def _resolve_blurb(self, options: RunOptions, config: BfastConfig) -> str:
        if options.blurb is not None:
            return normalize_blurb(options.blurb)
        if config.submission.blurb:
            return normalize_blurb(config.submission.blurb)
        text = random_blurb(self.rng)
        self.logger.info('No blurb provided. Using default speed claim: "%s".', text)
        return text

    def _register(self, client: SubmissionClient, slug: Slug, result: RunResult) -> None:
        submission = Submission(repo_url=slug.repo_url, blurb=result.blurb, hidden=result.hidden)
        try:
            client.submit(submission)
        except AlreadyRegisteredError:
            self.logger.info("Repo %s already registered", slug)
            result.already_registered = True
            return
        result.registered = True

    @staticmethod
    def _read_readme(path: Path) -> str:
        if not path.exists():
            raise ReadmeAccessError(f"unable to access README: {path} does not exist")
        if path.is_dir():
            raise ReadmeAccessError(f"{path} is a directory")
        try:
            with path.open("r", encoding="utf-8", newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadmeAccessError(f"failed to read README: {exc}") from exc

    @staticmethod
    def _write_readme(path: Path, content: str) -> None:
        try:
            with path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(content)
        except OSError as exc:
            raise ReadmeAccessError(f"failed to update README: {exc}") from exc


__all__ = ["Orchestrator", "ReadmeAccessError", "RunOptions", "RunResult"]
