"""Client for the blazingly.fast project submission API."""

from __future__ import annotations

import http.client
import json
import os
from dataclasses import dataclass
from typing import Any, Optional, Sequence
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from ..logging import get_logger

DEFAULT_BASE_URL = "https://blazingly.fast"
SUBMISSION_PATH = "/api/project"
USER_AGENT = "bfast-cli"
DEFAULT_TIMEOUT = 15.0

_MAX_MESSAGE_LENGTH = 256


class SubmissionError(RuntimeError):
    """Raised when a submission cannot be completed."""


class AlreadyRegisteredError(SubmissionError):
    """Raised when the API reports the project was submitted before."""

    def __init__(self) -> None:
        super().__init__("project already submitted")


class ApiError(SubmissionError):
    """A non-conflict error response from the API."""

    def __init__(self, status: int, message: str = "") -> None:
        self.status = status
        self.message = message
        if message:
            text = f"api request failed: {message} (status {status})"
        else:
            text = f"api request failed with status {status}"
        super().__init__(text)


@dataclass
class Submission:
    """Payload describing a repository submission."""

    repo_url: str
    blurb: str
    hidden: bool = False
    is_blazingly_fast: bool = True

    def to_payload(self) -> dict[str, object]:
        return {
            "repoUrl": self.repo_url,
            "isBlazinglyFast": self.is_blazingly_fast,
            "blurb": self.blurb,
            "hidden": self.hidden,
        }


@dataclass
class SubmissionResponse:
    """Subset of the API response for a successful submission."""

    id: str = ""
    project: Any = None


class SubmissionClient:
    """Posts submissions to the API and classifies the response."""

    ENV_BASE_URL_KEYS = ("BFAST_API_BASE_URL",)

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = self._resolve_base_url(base_url)
        self.timeout = timeout or DEFAULT_TIMEOUT
        self.logger = get_logger("api")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{SUBMISSION_PATH}"

    def submit(self, submission: Submission) -> SubmissionResponse:
        """Send ``submission`` and return the parsed response."""
        data = json.dumps(submission.to_payload()).encode("utf-8")
        headers = {"Content-Type": "application/json", "User-Agent": USER_AGENT}
        request = Request(self.endpoint, data=data, headers=headers, method="POST")
        self.logger.debug("POST %s for %s", self.endpoint, submission.repo_url)

        try:
            with urlopen(request, timeout=self.timeout) as response:  # type: ignore[arg-type]
                raw = response.read()
        except HTTPError as exc:
            body = exc.read() if hasattr(exc, "read") else b""
            if exc.code == 409:
                raise AlreadyRegisteredError() from exc
            raise ApiError(exc.code, _extract_message(body or b"")) from exc
        except URLError as exc:
            raise SubmissionError(f"api request failed: {exc.reason}") from exc
        except (OSError, http.client.HTTPException) as exc:
            raise SubmissionError(f"api request failed: {exc}") from exc

        if not raw:
            return SubmissionResponse()

        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SubmissionError("api returned invalid JSON") from exc

        if not isinstance(payload, dict):
            return SubmissionResponse()
        identifier = payload.get("id")
        return SubmissionResponse(
            id=identifier if isinstance(identifier, str) else "",
            project=payload.get("project"),
        )

    def _resolve_base_url(self, base_url: str | None) -> str:
        if base_url and base_url.strip():
            return base_url.strip().rstrip("/")
        env_value = self._first_env_value(self.ENV_BASE_URL_KEYS)
        if env_value:
            return env_value.rstrip("/")
        return DEFAULT_BASE_URL

    @staticmethod
    def _first_env_value(keys: Sequence[str]) -> str | None:
        for key in keys:
            value = os.getenv(key, "").strip()
            if value:
                return value
        return None


def _extract_message(body: bytes) -> str:
    text = body.decode("utf-8", errors="ignore")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        payload = None
    if isinstance(payload, dict):
        for key in ("message", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value

    trimmed = text.strip()
    return trimmed[:_MAX_MESSAGE_LENGTH]


__all__ = [
    "AlreadyRegisteredError",
    "ApiError",
    "DEFAULT_BASE_URL",
    "Submission",
    "SubmissionClient",
    "SubmissionError",
    "SubmissionResponse",
]
