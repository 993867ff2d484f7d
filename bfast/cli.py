"""CLI entrypoint for the bfast command."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import NoReturn

from .api.client import SubmissionError
from .blurb import InvalidBlurbError
from .config import ConfigError
from .git.remotes import GitError
from .logging import configure_logging, get_logger
from .orchestrator import Orchestrator, ReadmeAccessError, RunOptions, RunResult
from .readme.badges import EmptyBadgeError
from .readme.locator import ReadmeNotFoundError
from .slug import InvalidRepoError

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

logger = get_logger("cli")

_RUN_ERRORS = (
    ConfigError,
    EmptyBadgeError,
    GitError,
    InvalidBlurbError,
    InvalidRepoError,
    ReadmeAccessError,
    ReadmeNotFoundError,
    SubmissionError,
)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that can report usage errors as JSON on stdout."""

    json_errors = False

    def error(self, message: str) -> NoReturn:
        if self.json_errors:
            _emit_error(message, True)
            self.exit(EXIT_USAGE)
        super().error(message)


def _build_parser(*, json_errors: bool = False) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="bfast",
        description="Register a repository as blazingly fast and add the badge to its README.",
    )
    parser.json_errors = json_errors
    parser.add_argument(
        "target",
        nargs="?",
        default="",
        metavar="REPO",
        help="Target repository (owner/repo or GitHub URL).",
    )
    parser.add_argument(
        "--repo",
        default="",
        help="Target repository (owner/repo or GitHub URL).",
    )
    parser.add_argument(
        "-m",
        "--blurb",
        default=None,
        help="Custom blurb text (max 128 chars).",
    )
    parser.add_argument(
        "--readme",
        default="",
        help="Path to README (defaults to the repository README).",
    )
    parser.add_argument(
        "--hidden",
        action="store_true",
        help="Submit as hidden.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show actions without making changes.",
    )
    parser.add_argument(
        "--force-badge",
        action="store_true",
        help="Insert the badge even if the API call fails.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON output.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None, orchestrator: Orchestrator | None = None) -> int:
    """CLI entrypoint for bfast; returns the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser(json_errors="--json" in argv)
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.json), log_file=args.log_file)

    repo_flag = args.repo.strip()
    target = args.target.strip()
    if repo_flag and target:
        _emit_error("repo provided via --repo and positional argument", args.json)
        return EXIT_USAGE

    options = RunOptions(
        repo=repo_flag or target,
        readme=args.readme.strip(),
        blurb=args.blurb,
        hidden=bool(args.hidden),
        dry_run=bool(args.dry_run),
        force_badge=bool(args.force_badge),
    )

    orchestrator = orchestrator or Orchestrator()
    try:
        result = orchestrator.run(options)
    except _RUN_ERRORS as exc:
        _emit_error(str(exc), args.json)
        return EXIT_FAILURE
    except Exception as exc:
        logger.debug("Run aborted by unexpected error", exc_info=True)
        _emit_error(f"bfast failed: {exc}. Run with --verbose for more details.", args.json)
        return EXIT_FAILURE

    _emit_result(result, args.json)
    return EXIT_OK


def _emit_result(result: RunResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result.to_dict()))
        return

    if result.already_badged:
        print("Already badged. No changes.")
    elif result.dry_run:
        print(f"Dry run: would register {result.repo} and update {_relativize(result.readme)}")
    else:
        _print_summary(result)


def _print_summary(result: RunResult) -> None:
    if result.already_registered and not result.registered:
        print(f"Repo {result.repo} already registered. Badge inserted.")
    elif result.registration_error:
        print(f"Registration failed ({result.registration_error}). Badge inserted.")
    else:
        print(f'Registered {result.repo} with blurb: "{result.blurb}"')
    print(f"Badge added to {_relativize(result.readme)}")


def _emit_error(message: str, as_json: bool) -> None:
    if as_json:
        print(json.dumps({"error": message}))
        return
    print(f"Error: {message}", file=sys.stderr)


def _relativize(path: str) -> str:
    try:
        return str(Path(path).relative_to(Path.cwd()))
    except ValueError:
        return path


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
