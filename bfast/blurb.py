"""Blurb validation and default speed claims."""

from __future__ import annotations

import random
from typing import Optional, Sequence

MAX_LENGTH = 128

DEFAULT_BLURBS: Sequence[str] = (
    "Declared blazingly fast by the author.",
    "Performance considered, benchmarks omitted.",
    "Fast enough for its intended use.",
    "Runs like the wind on maintainer laptops.",
    "Finally faster than the previous rewrite.",
    "Certified swift by unverified claims.",
    "Optimized for perceived speed.",
    "Moving at the speed of developer confidence.",
    "Latency measured in gut feelings.",
    "Profiled once, found acceptable.",
    "Runs hot, runs fast, looks cool.",
    "Untimed, but unquestionably rapid.",
    "Ships velocity the old-fashioned way: by saying so.",
    "Fueled by caffeine and claims of speed.",
    "Benchmarks available upon polite request.",
    "Speed verified during a live demo.",
    "Peaks at impressive velocity when no one is watching.",
    "Breaks the sound barrier in optimistic scenarios.",
    "Fast-path paved, slow-path unexplored.",
    "Sprints through workloads with dramatic flair.",
    "Speed limit signs are merely suggestions here.",
    "Clocked by eyeballing task manager graphs.",
    "Consistently ahead in hypothetical races.",
    "Glides through code paths like butter.",
    "Moves so fast the logs can hardly keep up.",
    "Accelerates faster than the product requirements.",
    "Practically levitates past performance concerns.",
)


class InvalidBlurbError(ValueError):
    """Raised when a user-supplied blurb is empty or too long."""

    def __init__(self) -> None:
        super().__init__(f"blurb must be between 1 and {MAX_LENGTH} characters")


def normalize_blurb(text: str) -> str:
    """Trim ``text`` and ensure it fits the blurb length limits."""
    trimmed = text.strip()
    if not trimmed or len(trimmed) > MAX_LENGTH:
        raise InvalidBlurbError()
    return trimmed


def random_blurb(rng: Optional[random.Random] = None) -> str:
    """Pick a default blurb using ``rng`` (a fresh generator when omitted)."""
    chooser = rng or random.Random()
    return chooser.choice(DEFAULT_BLURBS)


__all__ = ["DEFAULT_BLURBS", "InvalidBlurbError", "MAX_LENGTH", "normalize_blurb", "random_blurb"]
