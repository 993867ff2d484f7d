"""README discovery and badge placement."""

from .badges import (
    BADGE_IMAGE_URL,
    BADGE_LINK_URL,
    BadgeManager,
    EmptyBadgeError,
    build_badge_markdown,
    has_badge,
    insert_badge,
)
from .locator import ReadmeNotFoundError, find_default, resolve_readme_path

__all__ = [
    "BADGE_IMAGE_URL",
    "BADGE_LINK_URL",
    "BadgeManager",
    "EmptyBadgeError",
    "ReadmeNotFoundError",
    "build_badge_markdown",
    "find_default",
    "has_badge",
    "insert_badge",
    "resolve_readme_path",
]
