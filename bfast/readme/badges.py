"""Badge detection and placement for README files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

BADGE_IMAGE_URL = "https://blazingly.fast/api/badge.svg"
BADGE_LINK_URL = "https://blazingly.fast"
BADGE_HOST = "blazingly.fast"
BADGE_PHRASE = "blazingly fast"

# Only the top of the document is searched for an existing badge row.
SCAN_LIMIT = 20

_INLINE_BADGE_MARKER = "[!["


class EmptyBadgeError(ValueError):
    """Raised when the badge snippet to insert is blank."""


@dataclass
class BadgeManager:
    """Detects an existing badge and splices a new one into README text."""

    image_url: str = BADGE_IMAGE_URL
    link_url: str = BADGE_LINK_URL
    host: str = BADGE_HOST
    phrase: str = BADGE_PHRASE
    alt_text: str = BADGE_PHRASE

    def build_markdown(self, encoded_slug: str) -> str:
        """Return the badge markdown for a query-escaped ``owner/repo`` slug."""
        return f"[![{self.alt_text}]({self.image_url}?repo={encoded_slug})]({self.link_url})"

    def has_badge(self, content: str) -> bool:
        """Report whether the README already carries the badge."""
        lower = content.lower()
        if self.image_url.lower() in lower:
            return True

        phrase = self.phrase.lower()
        host = self.host.lower()
        for line in lower.split("\n"):
            if "![" in line and phrase in line and host in line:
                return True
        return False

    def insert(self, content: str, badge: str) -> str:
        """Return ``content`` with ``badge`` placed under the title or beside existing badges."""
        badge = badge.strip()
        if not badge:
            raise EmptyBadgeError("badge content may not be empty")

        newline = "\r\n" if "\r\n" in content else "\n"
        lines = content.replace("\r\n", "\n").split("\n")

        title_index = _find_title(lines)
        if title_index is not None and _INLINE_BADGE_MARKER in lines[title_index]:
            _append_to_line(lines, title_index, badge)
            return _finalize(lines, newline)

        block = _find_badge_block(lines)
        if block is None and title_index is not None:
            block = _find_badge_block(lines, start=title_index + 1, adjacent=True)

        if block is not None:
            start, end = block
            if start == end:
                _append_to_line(lines, start, badge)
            else:
                lines.insert(end + 1, badge)
        elif title_index is not None:
            insert_index = title_index + 1
            if insert_index < len(lines) and lines[insert_index].strip():
                lines.insert(insert_index, "")
                insert_index += 1
            lines.insert(insert_index, badge)
        else:
            lines[:0] = [badge, ""]

        return _finalize(lines, newline)


def _find_title(lines: List[str]) -> Optional[int]:
    for index, line in enumerate(lines):
        if line.strip().startswith("# "):
            return index
    return None


def _find_badge_block(
    lines: List[str], start: int = 0, *, adjacent: bool = False
) -> Optional[Tuple[int, int]]:
    """Locate a run of badge lines within the scan window.

    With ``adjacent`` set, only blank lines may precede the run; any other
    text means the badges are not directly below ``start``.
    """
    limit = min(len(lines), SCAN_LIMIT)
    block_start: Optional[int] = None
    block_end: Optional[int] = None

    for index in range(start, limit):
        trimmed = lines[index].strip()
        if not trimmed:
            if block_start is not None:
                break
            continue

        if _looks_like_badge(trimmed):
            if block_start is None:
                block_start = index
            block_end = index
            continue

        # Any other line closes an open block, and a heading ends the search.
        if block_start is not None or adjacent or trimmed.startswith("# "):
            break

    if block_start is None or block_end is None:
        return None
    return block_start, block_end


def _looks_like_badge(line: str) -> bool:
    return line.startswith("![") or line.startswith("[![")


def _append_to_line(lines: List[str], index: int, badge: str) -> None:
    lines[index] = f"{lines[index].rstrip()} {badge}"


def _finalize(lines: List[str], newline: str) -> str:
    output = "\n".join(lines).rstrip("\n") + "\n"
    if newline != "\n":
        output = output.replace("\n", newline)
    return output


_DEFAULT_MANAGER = BadgeManager()


def has_badge(content: str) -> bool:
    """Report whether ``content`` already carries the blazingly.fast badge."""
    return _DEFAULT_MANAGER.has_badge(content)


def insert_badge(content: str, badge: str) -> str:
    """Insert ``badge`` into README ``content`` using the default manager."""
    return _DEFAULT_MANAGER.insert(content, badge)


def build_badge_markdown(encoded_slug: str) -> str:
    """Return the default badge snippet for ``encoded_slug``."""
    return _DEFAULT_MANAGER.build_markdown(encoded_slug)


__all__ = [
    "BADGE_HOST",
    "BADGE_IMAGE_URL",
    "BADGE_LINK_URL",
    "BADGE_PHRASE",
    "BadgeManager",
    "EmptyBadgeError",
    "SCAN_LIMIT",
    "build_badge_markdown",
    "has_badge",
    "insert_badge",
]
