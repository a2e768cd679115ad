"""Tests for doc comment marker detection."""

from __future__ import annotations

from goboilr.parsing.directives import comment_tokens, scan_markers


def test_comment_tokens_strip_comment_markers() -> None:
    assert comment_tokens("// gen:new") == ["gen:new"]
    assert comment_tokens("//gen:builder") == ["gen:builder"]
    assert comment_tokens("/* gen:new, gen:builder */") == ["gen:new", "gen:builder"]


def test_scan_markers_reads_every_comment_in_block() -> None:
    markers = scan_markers(["// Widget is a UI element.", "// gen:new gen:builder"])
    assert markers.constructor is True
    assert markers.builder is True


def test_scan_markers_matches_whole_tokens_only() -> None:
    markers = scan_markers(["// gen:newest release", "// see gen:builders"])
    assert markers.constructor is False
    assert markers.builder is False


def test_scan_markers_accepts_trailing_punctuation() -> None:
    assert scan_markers(["// Marked with gen:new."]).constructor is True
