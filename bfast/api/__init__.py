"""Remote submission API."""

from .client import (
    AlreadyRegisteredError,
    ApiError,
    Submission,
    SubmissionClient,
    SubmissionError,
    SubmissionResponse,
)

__all__ = [
    "AlreadyRegisteredError",
    "ApiError",
    "Submission",
    "SubmissionClient",
    "SubmissionError",
    "SubmissionResponse",
]
