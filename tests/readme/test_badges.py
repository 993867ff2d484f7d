"""Tests for README badge detection and placement."""

from __future__ import annotations

import pytest

from bfast.readme.badges import (
    BadgeManager,
    EmptyBadgeError,
    build_badge_markdown,
    has_badge,
    insert_badge,
)


def test_build_badge_markdown_uses_encoded_slug() -> None:
    assert build_badge_markdown("arrno%2Fbfast") == (
        "[![blazingly fast](https://blazingly.fast/api/badge.svg?repo=arrno%2Fbfast)]"
        "(https://blazingly.fast)"
    )


def test_has_badge_detects_image_url() -> None:
    content = "[![blazingly fast](https://blazingly.fast/api/badge.svg?repo=x%2Fy)](https://blazingly.fast)"
    assert has_badge(content) is True


def test_has_badge_ignores_case() -> None:
    assert has_badge("# Title\n![x](HTTPS://BLAZINGLY.FAST/API/BADGE.SVG)\n") is True


def test_has_badge_accepts_alt_text_variations() -> None:
    content = "[![Certified blazingly fast](https://example.com)](https://blazingly.fast)"
    assert has_badge(content) is True


def test_has_badge_requires_markers_on_one_line() -> None:
    content = "![logo](logo.png)\nIt is blazingly fast.\nSee blazingly.fast\n"
    assert has_badge(content) is False


def test_has_badge_absent() -> None:
    assert has_badge("# Title\nSome text") is False


def test_insert_badge_after_title(badge: str) -> None:
    updated = insert_badge("# Project\n\nSome text", badge)
    assert updated == f"# Project\n{badge}\n\nSome text\n"


def test_insert_badge_preserves_windows_newlines(badge: str) -> None:
    updated = insert_badge("# Project\r\n\r\nSome text", badge)

    assert updated == "# Project\r\n" + badge + "\r\n\r\nSome text\r\n"
    assert "\n" not in updated.replace("\r\n", "")


def test_insert_badge_normalises_mixed_newlines_to_crlf(badge: str) -> None:
    updated = insert_badge("# Project\r\nline\nmore", badge)
    assert updated == f"# Project\r\n\r\n{badge}\r\nline\r\nmore\r\n"


def test_insert_badge_prepends_without_title(badge: str) -> None:
    updated = insert_badge("Just some text", badge)
    assert updated == f"{badge}\n\nJust some text\n"


def test_insert_badge_handles_empty_document(badge: str) -> None:
    assert insert_badge("", badge) == f"{badge}\n"
    assert insert_badge("\n\n\n", badge) == f"{badge}\n"


def test_insert_badge_separates_title_from_text(badge: str) -> None:
    updated = insert_badge("# Project\nIntro paragraph.\n", badge)
    assert updated == f"# Project\n\n{badge}\nIntro paragraph.\n"


def test_insert_badge_appends_to_single_line_cluster(badge: str) -> None:
    content = "# Project\n\n[![CI](ci.svg)](ci)\n\nBody\n"
    updated = insert_badge(content, badge)

    assert updated == f"# Project\n\n[![CI](ci.svg)](ci) {badge}\n\nBody\n"
    assert len(updated.splitlines()) == len(content.splitlines())


def test_insert_badge_appends_to_cluster_before_title(badge: str) -> None:
    updated = insert_badge("[![CI](ci.svg)](ci)\n# Project\n", badge)
    assert updated == f"[![CI](ci.svg)](ci) {badge}\n# Project\n"


def test_insert_badge_adds_line_after_multi_line_cluster(badge: str) -> None:
    content = "# Project\n\n![A](a.svg)\n![B](b.svg)\n\nBody\n"
    updated = insert_badge(content, badge)

    assert updated == f"# Project\n\n![A](a.svg)\n![B](b.svg)\n{badge}\n\nBody\n"
    assert len(updated.splitlines()) == len(content.splitlines()) + 1


def test_insert_badge_closes_multi_line_cluster_at_text(badge: str) -> None:
    updated = insert_badge("![A](a.svg)\n![B](b.svg)\nText\n", badge)
    assert updated == f"![A](a.svg)\n![B](b.svg)\n{badge}\nText\n"


def test_insert_badge_closes_multi_line_cluster_at_heading(badge: str) -> None:
    updated = insert_badge("![A](a.svg)\n![B](b.svg)\n# Project\n", badge)
    assert updated == f"![A](a.svg)\n![B](b.svg)\n{badge}\n# Project\n"


def test_insert_badge_appends_to_title_with_inline_badge(badge: str) -> None:
    updated = insert_badge("# Project [![CI](ci.svg)](ci)  \n\nBody", badge)
    assert updated == f"# Project [![CI](ci.svg)](ci) {badge}\n\nBody\n"


def test_insert_badge_finds_cluster_after_leading_text(badge: str) -> None:
    updated = insert_badge("Intro\n![A](a.svg)\n", badge)
    assert updated == f"Intro\n![A](a.svg) {badge}\n"


def test_insert_badge_ignores_badges_separated_from_title_by_text(badge: str) -> None:
    updated = insert_badge("# Project\nIntro\n\n![A](a.svg)\n", badge)
    assert updated == f"# Project\n\n{badge}\nIntro\n\n![A](a.svg)\n"


def test_insert_badge_only_scans_first_twenty_lines(badge: str) -> None:
    within = "\n" * 19 + "![A](a.svg)\n"
    assert insert_badge(within, badge) == "\n" * 19 + f"![A](a.svg) {badge}\n"

    beyond = "\n" * 20 + "![A](a.svg)\nText"
    updated = insert_badge(beyond, badge)
    assert updated.startswith(f"{badge}\n\n")
    assert updated.endswith("\n![A](a.svg)\nText\n")


def test_insert_badge_collapses_trailing_newlines(badge: str) -> None:
    assert insert_badge("# Project\n\n\n", badge) == f"# Project\n{badge}\n"


def test_insert_badge_rejects_empty_badge() -> None:
    with pytest.raises(EmptyBadgeError):
        insert_badge("# Project\n", "")
    with pytest.raises(EmptyBadgeError):
        insert_badge("# Project\n", "   ")


def test_inserted_badge_is_detected(badge: str) -> None:
    documents = [
        "# Project\n\nSome text",
        "Just some text",
        "# Project\n\n![A](a.svg)\n![B](b.svg)\n",
        "# Project\r\n[![CI](ci.svg)](ci)\r\n",
        "",
    ]
    for document in documents:
        assert not has_badge(document)
        assert has_badge(insert_badge(document, badge))


def test_badge_manager_accepts_custom_constants() -> None:
    manager = BadgeManager(
        image_url="https://example.test/badge.svg",
        link_url="https://example.test",
        host="example.test",
        phrase="quick",
        alt_text="quick",
    )

    snippet = manager.build_markdown("a%2Fb")
    assert snippet == "[![quick](https://example.test/badge.svg?repo=a%2Fb)](https://example.test)"
    assert manager.has_badge("[![Very quick](x.svg)](https://example.test)") is True
    assert manager.has_badge(insert_badge("# T\n", build_badge_markdown("a%2Fb"))) is False
    assert manager.has_badge(manager.insert("# T\n", snippet)) is True
