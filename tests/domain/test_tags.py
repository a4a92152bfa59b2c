"""Tests for comment tag extraction."""

from __future__ import annotations

from apilint.domain.tags import extract_comment_tags, format_tag, merge_tags


class TestExtractCommentTags:
    def test_key_value(self) -> None:
        assert extract_comment_tags(["+listType=atomic"]) == {"listType": ["atomic"]}

    def test_bare_key_has_empty_value(self) -> None:
        assert extract_comment_tags(["+optional"]) == {"optional": [""]}

    def test_empty_value_after_equals(self) -> None:
        assert extract_comment_tags(["+listType="]) == {"listType": [""]}

    def test_repeated_keys_accumulate_in_order(self) -> None:
        lines = ["+listMapKey=name", "+listMapKey=protocol"]
        assert extract_comment_tags(lines) == {"listMapKey": ["name", "protocol"]}

    def test_only_first_equals_splits(self) -> None:
        assert extract_comment_tags(["+k=a=b"]) == {"k": ["a=b"]}

    def test_non_marker_lines_ignored(self) -> None:
        lines = ["Containers in the pod.", "", "See +listType docs", "-flag"]
        assert extract_comment_tags(lines) == {}

    def test_leading_whitespace_ignored(self) -> None:
        assert extract_comment_tags(["   +listType=set"]) == {"listType": ["set"]}

    def test_custom_marker(self) -> None:
        assert extract_comment_tags(["@key=v", "+other=x"], marker="@") == {"key": ["v"]}


class TestMergeTags:
    def test_concatenates_in_source_order(self) -> None:
        merged = merge_tags({"a": ["1"]}, {"a": ["2"], "b": [""]})
        assert merged == {"a": ["1", "2"], "b": [""]}

    def test_does_not_mutate_sources(self) -> None:
        first = {"a": ["1"]}
        merge_tags(first, {"a": ["2"]})
        assert first == {"a": ["1"]}


def test_format_tag() -> None:
    assert format_tag("listType", "atomic") == "+listType=atomic"
