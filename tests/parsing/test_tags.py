"""Tests for struct tag parsing."""

from __future__ import annotations

from goboilr.parsing.tags import lookup_directive, parse_struct_tag, unquote


def test_parse_struct_tag_splits_pairs() -> None:
    assert parse_struct_tag('json:"name,omitempty" gen:"get,set"') == {
        "json": "name,omitempty",
        "gen": "get,set",
    }


def test_parse_struct_tag_keeps_first_duplicate() -> None:
    assert parse_struct_tag('gen:"get" gen:"set"') == {"gen": "get"}


def test_parse_struct_tag_stops_at_malformed_pair() -> None:
    assert parse_struct_tag('json:"x" bad gen:"get"') == {"json": "x"}
    assert parse_struct_tag("gen:get") == {}


def test_lookup_directive_reads_raw_literal() -> None:
    assert lookup_directive('`json:"id" gen:"get,val"`') == "get,val"


def test_lookup_directive_reads_interpreted_literal() -> None:
    assert lookup_directive('"gen:\\"set\\""') == "set"


def test_lookup_directive_defaults_to_empty() -> None:
    assert lookup_directive(None) == ""
    assert lookup_directive("`json:\"id\"`") == ""
    assert lookup_directive("") == ""


def test_unquote_handles_escapes() -> None:
    assert unquote('"a\\tb\\u00e9"') == "a\tbé"
    assert unquote('"bad\\q"') is None
    assert unquote("`raw\\n`") == "raw\\n"
